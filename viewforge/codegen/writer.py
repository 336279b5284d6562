"""Persist generated files to disk."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, Union

from .assembler import GeneratedFile

logger = logging.getLogger(__name__)


def write_file(path: Path, content: str) -> None:
    """Write content to a file, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_files(
    files: Iterable[GeneratedFile],
    output_dir: Union[str, Path],
    *,
    clean: bool = True,
) -> Path:
    """
    Write ``files`` under ``output_dir``.

    When ``clean`` is set an existing output directory is removed first so
    stale component modules from earlier builds do not survive.
    """
    out = Path(output_dir)
    if clean and out.exists():
        logger.debug("Removing previous output in %s", out)
        shutil.rmtree(out)
    out.mkdir(parents=True, exist_ok=True)

    count = 0
    for generated in files:
        write_file(out / generated.path, generated.content)
        count += 1

    logger.info("Wrote %d files to %s", count, out)
    return out


def archive_project(output_dir: Union[str, Path]) -> Path:
    """Zip ``output_dir`` into ``<output_dir>.zip`` next to it."""
    out = Path(output_dir)
    archive = shutil.make_archive(str(out), "zip", root_dir=str(out))
    logger.info("Archived project to %s", archive)
    return Path(archive)


__all__ = ["write_file", "write_files", "archive_project"]
