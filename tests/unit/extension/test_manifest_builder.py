"""Tests for request validation, naming and manifest construction."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from quicklaunch.core.config.models import IconVariant
from quicklaunch.core.errors import InvalidUrlError
from quicklaunch.core.extension import (
    ExtensionManifest,
    RawRequest,
    build_manifest,
    extension_name,
    icon_filename,
    output_dir_name,
)
from quicklaunch.core.resolver import ResolvedIdentity


@pytest.fixture
def identity() -> ResolvedIdentity:
    return ResolvedIdentity(
        hostname="mail.google.com",
        display_title="mail.google.com",
        resolved_url="https://mail.google.com/mail/u/0/",
    )


class TestRawRequest:
    """Tests for RawRequest."""

    def test_parse_keeps_url_verbatim(self):
        """Test the URL is not normalized."""
        raw = RawRequest.parse("https://Mail.Google.com/#inbox", "beta")
        assert raw.url == "https://Mail.Google.com/#inbox"
        assert raw.suffix == "beta"

    @pytest.mark.parametrize("suffix", [None, ""])
    def test_empty_suffix_is_none(self, suffix):
        """Test an empty suffix counts as absent."""
        assert RawRequest.parse("https://a.example", suffix).suffix is None

    def test_blank_suffix_is_kept(self):
        """Test a whitespace-only suffix is still a suffix."""
        raw = RawRequest.parse("https://a.example", "   ")
        assert raw.suffix == "   "
        assert output_dir_name("a.example", raw.suffix) == "quick-launch-a.example-"

    def test_parse_trims_url(self):
        """Test the stored URL is the trimmed one that was validated."""
        raw = RawRequest.parse("  https://a.example/app \n")
        assert raw.url == "https://a.example/app"

    def test_constructor_trims_url(self):
        """Test direct construction stores the trimmed URL too."""
        assert RawRequest(url=" https://a.example/ ").url == "https://a.example/"

    @pytest.mark.parametrize("url", ["", "a.example", "/inbox"])
    def test_parse_rejects_bad_url(self, url: str):
        """Test parse raises InvalidUrlError."""
        with pytest.raises(InvalidUrlError):
            RawRequest.parse(url)

    def test_constructor_validates_url(self):
        """Test direct construction is validated too."""
        with pytest.raises(ValidationError):
            RawRequest(url="not-a-url")

    def test_frozen(self):
        """Test requests are immutable."""
        raw = RawRequest.parse("https://a.example")
        with pytest.raises(ValidationError):
            raw.url = "https://b.example"  # type: ignore[misc]


class TestNaming:
    """Tests for output directory and extension names."""

    def test_output_dir_with_suffix(self):
        """Test directory name from title and suffix."""
        assert output_dir_name("mail.google.com", "beta") == "quick-launch-mail.google.com-beta"

    def test_output_dir_without_suffix(self):
        """Test no trailing dash without a suffix."""
        assert output_dir_name("mail.google.com") == "quick-launch-mail.google.com"

    def test_output_dir_sanitizes_suffix(self):
        """Test the suffix is sanitized like the title."""
        name = output_dir_name("example.com", "Work Inbox: 2")
        assert name == "quick-launch-example.com-work-inbox-2"

    def test_extension_name(self):
        """Test the human-readable name keeps the raw suffix."""
        assert extension_name("mail.google.com") == "QuickLaunch: mail.google.com"
        assert extension_name("mail.google.com", "Work") == "QuickLaunch: mail.google.com - Work"

    def test_icon_filename(self):
        assert icon_filename(64) == "icon-64.png"


class TestBuildManifest:
    """Tests for build_manifest."""

    def test_single_variant(self, identity: ResolvedIdentity):
        """Test the single-icon manifest."""
        raw = RawRequest.parse("https://mail.google.com/#inbox", "beta")
        manifest = build_manifest(raw, identity, IconVariant.SINGLE.sizes)

        assert manifest.manifest_version == 3
        assert manifest.name == "QuickLaunch: mail.google.com - beta"
        assert manifest.version == "1.0"
        assert manifest.description.endswith("Default: https://mail.google.com/#inbox")
        assert manifest.icons == {64: "icon-64.png"}
        assert manifest.action.default_title == "Go to mail.google.com"
        assert manifest.action.default_icon == {"64": "icon-64.png"}
        assert manifest.background.service_worker == "background.js"
        assert manifest.options_ui.page == "options.html"
        assert set(manifest.permissions) == {"tabs", "storage"}

    def test_multi_variant_icons(self, identity: ResolvedIdentity):
        """Test every multi size has one icon entry."""
        raw = RawRequest.parse("https://mail.google.com/")
        manifest = build_manifest(raw, identity, IconVariant.MULTI.sizes)
        assert manifest.icons == {
            16: "icon-16.png",
            32: "icon-32.png",
            48: "icon-48.png",
            128: "icon-128.png",
        }

    def test_referenced_files(self, identity: ResolvedIdentity):
        """Test referenced_files covers scripts, page and icons."""
        raw = RawRequest.parse("https://mail.google.com/")
        manifest = build_manifest(raw, identity, (16, 32))
        assert manifest.referenced_files() == {
            "icon-16.png",
            "icon-32.png",
            "background.js",
            "options.html",
        }

    def test_to_json(self, identity: ResolvedIdentity):
        """Test JSON output uses string icon keys and round-trips."""
        raw = RawRequest.parse("https://mail.google.com/")
        manifest = build_manifest(raw, identity, (16, 128))
        text = manifest.to_json()
        data = json.loads(text)

        assert text.endswith("\n")
        assert data["icons"] == {"16": "icon-16.png", "128": "icon-128.png"}
        assert data["background"] == {"service_worker": "background.js"}
        assert data["options_ui"] == {"page": "options.html", "open_in_tab": True}
        assert data["permissions"] == ["tabs", "storage"]

    def test_permissions_deduplicated(self, identity: ResolvedIdentity):
        """Test permissions behave as a set."""
        raw = RawRequest.parse("https://mail.google.com/")
        manifest = build_manifest(raw, identity, (64,))
        data = manifest.model_dump()
        data["permissions"] = ("tabs", "storage", "tabs")
        assert ExtensionManifest.model_validate(data).permissions == ("tabs", "storage")
