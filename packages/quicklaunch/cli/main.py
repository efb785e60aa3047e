"""Command-line interface for QuickLaunch.

Usage:
    quicklaunch <url> [suffix] [options]

Prints exactly one line: the output directory on success, or the error.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from quicklaunch.core.config import AppConfig, apply_overrides, load_app_config
from quicklaunch.core.config.models import CollisionPolicy, IconVariant
from quicklaunch.core.errors import ConfigError, GenerationError, InvalidUrlError
from quicklaunch.core.extension.models import RawRequest
from quicklaunch.core.pipeline import create_extension
from quicklaunch.core.utils.logging import configure_logging

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="quicklaunch",
        description=(
            "Create a browser extension whose toolbar button opens URL. "
            "The extension is written to ./quick-launch-<site>[-<suffix>]."
        ),
    )
    p.add_argument("url", nargs="?", help="Target URL, e.g. https://mail.google.com/#inbox")
    p.add_argument("suffix", nargs="?", help="Optional text appended to the extension name")
    p.add_argument("--config", help="Path to config file (.json/.yaml, default: quicklaunch.yaml)")
    p.add_argument(
        "--variant",
        choices=[v.value for v in IconVariant],
        help="Icon set: single 64px icon, or multi 16/32/48/128px",
    )
    p.add_argument("--out", help="Directory to create the extension folder in (default: cwd)")
    p.add_argument("--templates", help="Directory with background.js/options.html/options.js")
    p.add_argument(
        "--on-collision",
        choices=[c.value for c in CollisionPolicy],
        help="What to do if the output folder exists (default: reuse)",
    )
    p.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    p.add_argument("--max-redirects", type=int, help="Redirects followed while resolving")
    p.add_argument(
        "--concurrent",
        action="store_true",
        default=None,
        help="Fetch all icon sizes concurrently",
    )
    p.add_argument("--log-level", help="Log level (default: WARNING)")
    p.add_argument("--log-json", action="store_true", default=None, help="Log JSON lines")
    return p


def load_config_from_args(args: argparse.Namespace) -> AppConfig:
    """Load the config file and apply CLI overrides.

    Raises:
        ConfigError: If the file or an override is invalid
    """
    config = load_app_config(Path(args.config) if args.config else None)
    return apply_overrides(
        config,
        {
            "http": {"timeout_s": args.timeout, "max_redirects": args.max_redirects},
            "generator": {
                "variant": args.variant,
                "on_collision": args.on_collision,
                "concurrent_icon_fetches": args.concurrent,
                "templates_root": args.templates,
                "output_root": args.out,
            },
            "logging": {"level": args.log_level, "structured": args.log_json},
        },
    )


def run(args: argparse.Namespace) -> int:
    """Run one generation and report it.

    Returns:
        Exit code (0 success, 1 failure, 2 usage error)
    """
    try:
        request = RawRequest.parse(args.url or "", args.suffix)
    except InvalidUrlError as e:
        err_console.print(f"[red]Error:[/red] {escape(f'{e} Usage: quicklaunch <url> [suffix]')}")
        return EXIT_USAGE

    try:
        config = load_config_from_args(args)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_FAILURE

    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )

    try:
        result = asyncio.run(create_extension(request, config))
    except GenerationError as e:
        logger.debug("Generation failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_FAILURE

    console.print(f"[green]Extension created in[/green] {escape(str(result.output_dir))}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
