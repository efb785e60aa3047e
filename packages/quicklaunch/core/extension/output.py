"""Output directory creation and collision handling."""

from __future__ import annotations

import logging

from quicklaunch.core.config.models import CollisionPolicy
from quicklaunch.core.errors import ArtifactWriteError, OutputCollisionError
from quicklaunch.core.io import AbsolutePath, FileSystem

logger = logging.getLogger(__name__)

# Highest suffix tried by CollisionPolicy.VERSION
MAX_VERSIONED_DIRS = 1000


async def prepare_output_dir(
    fs: FileSystem,
    root: AbsolutePath,
    name: str,
    policy: CollisionPolicy = CollisionPolicy.REUSE,
) -> AbsolutePath:
    """Create the output directory ``root/name`` according to ``policy``.

    Args:
        fs: Filesystem to create the directory on
        root: Parent directory
        name: Directory name from ``output_dir_name``
        policy: REUSE writes into an existing directory (last writer wins),
            FAIL refuses, VERSION picks ``name-2``, ``name-3``, ...

    Returns:
        Path of the directory to write into

    Raises:
        OutputCollisionError: Directory exists under FAIL, a file is in the
            way under REUSE, or no free versioned name was found
        ArtifactWriteError: The directory could not be created
    """
    target = fs.join(root, name)
    exists = await fs.exists(target)

    if exists and policy is CollisionPolicy.FAIL:
        raise OutputCollisionError(f"Output directory already exists: {target}")

    if exists and policy is CollisionPolicy.VERSION:
        for n in range(2, MAX_VERSIONED_DIRS + 1):
            candidate = fs.join(root, f"{name}-{n}")
            if not await fs.exists(candidate):
                target = candidate
                break
        else:
            raise OutputCollisionError(f"No free versioned directory name for {name} in {root}")
        logger.info("Output directory exists, writing to %s instead", target)
    elif exists:
        if not await fs.is_dir(target):
            raise OutputCollisionError(f"Output path exists and is not a directory: {target}")
        logger.debug("Reusing existing output directory %s", target)

    try:
        await fs.mkdirs(target, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(f"Cannot create output directory {target}: {e}") from e

    return target
