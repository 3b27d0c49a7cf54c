"""Discovery of bundled audio files."""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

DEFAULT_SUFFIX = ".mp3"


def discover_audio_files(
    resources_dir: str | Path | None, suffix: str = DEFAULT_SUFFIX
) -> list[str]:
    """List files under `resources_dir` whose name ends with `suffix`.

    The walk is recursive and names are returned relative to `resources_dir`
    with forward slashes, sorted for a stable order. The suffix match is
    case-sensitive. A missing directory yields an empty list.
    """
    if resources_dir is None:
        logger.warning("Unable to get reference to Resources directory")
        return []
    root = Path(resources_dir)
    if not root.is_dir():
        logger.warning("Unable to get reference to Resources directory: {}", root)
        return []

    found: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            if name.endswith(suffix):
                found.append((Path(dirpath) / name).relative_to(root).as_posix())
    found.sort()
    logger.info("Found {} '{}' file(s) in {}", len(found), suffix, root)
    return found
