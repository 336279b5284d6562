"""
viewforge: compile visual-designer project documents into React applications.

The pipeline has three stages:

1. :func:`viewforge.model.builder.build_model` normalizes routes and
   components and analyzes every file into a read-only project model.
2. :func:`viewforge.codegen.project.generate_files` lowers that model into
   output source files.
3. :func:`viewforge.codegen.writer.write_files` persists them.

:func:`compile_project` runs all three.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .codegen.project import GenerationOptions, generate_files
from .codegen.writer import archive_project, write_files
from .model.builder import build_model
from .observability.logging import log_compile_event

if TYPE_CHECKING:
    from .codegen.assembler import GeneratedFile
    from .model.schema import ProjectDocument

__version__ = "0.3.0"


def compile_project(
    project: Union["ProjectDocument", Dict[str, Any]],
    output_dir: Union[str, Path],
    meta: Optional[Dict[str, str]] = None,
    *,
    options: Optional[GenerationOptions] = None,
    clean: bool = True,
    archive: bool = False,
) -> List["GeneratedFile"]:
    """
    Build, generate and write a complete project.

    Args:
        project: Project document or its raw mapping
        output_dir: Directory receiving the generated project
        meta: Namespace -> import module overrides for component libraries
        options: Version, URL prefix and container id for the output
        clean: Remove ``output_dir`` before writing
        archive: Also zip the output directory

    Returns:
        The generated files, in write order
    """
    started = time.perf_counter()

    log_compile_event("build_model", message="Building model")
    model = build_model(project, meta)

    log_compile_event("generate_files", message="Generating files")
    files = generate_files(model, options)

    log_compile_event("write_files", message="Writing files", output_dir=str(output_dir), count=len(files))
    write_files(files, output_dir, clean=clean)

    if archive:
        log_compile_event("archive", message="Building archive")
        archive_project(output_dir)

    elapsed_ms = (time.perf_counter() - started) * 1000
    log_compile_event("done", message=f"Done in {elapsed_ms:.0f}ms", elapsed_ms=round(elapsed_ms, 2))
    return files


__all__ = ["__version__", "GenerationOptions", "build_model", "generate_files", "write_files", "compile_project"]
