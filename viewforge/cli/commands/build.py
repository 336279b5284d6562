"""
Build command implementation.

This module handles the 'build' subcommand which compiles a project
document into a React application directory.
"""

import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

from viewforge import compile_project
from viewforge.codegen.project import GenerationOptions
from viewforge.config import WorkspaceConfig
from viewforge.errors import ConfigError, ViewForgeError
from viewforge.model.schema import load_project_file

from ..errors import handle_cli_exception
from ..output import print_success

logger = logging.getLogger(__name__)


def parse_library_overrides(entries: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated ``NAMESPACE=MODULE`` flags."""
    overrides: Dict[str, str] = {}
    for entry in entries or []:
        namespace, sep, module = entry.partition("=")
        if not sep or not namespace or not module:
            raise ConfigError(f"Invalid --library value '{entry}'", hint="Use NAMESPACE=MODULE.")
        overrides[namespace] = module
    return overrides


def resolve_meta(config: WorkspaceConfig, args: argparse.Namespace) -> Dict[str, str]:
    meta = dict(config.libraries)
    meta.update(parse_library_overrides(getattr(args, "library", None)))
    return meta


def cmd_build(args: argparse.Namespace) -> None:
    """
    Handle the 'build' subcommand.

    Command-line flags override the ``[build]`` section of the workspace
    configuration, which in turn overrides the built-in defaults.
    """
    config: WorkspaceConfig = args.config_data
    defaults = config.build

    try:
        project = load_project_file(Path(args.project))
        out_dir = Path(args.out) if args.out else defaults.out_dir
        options = GenerationOptions(
            version=args.version or defaults.version,
            url_prefix=args.url_prefix or defaults.url_prefix,
            container_id=args.container_id or defaults.container_id,
        )
        clean = defaults.clean if args.clean is None else args.clean
        archive = defaults.archive if args.archive is None else args.archive

        files = compile_project(
            project,
            out_dir,
            resolve_meta(config, args),
            options=options,
            clean=clean,
            archive=archive,
        )
    except (ViewForgeError, OSError) as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    print_success(f"Generated {len(files)} files in {out_dir}")
    if archive:
        print_success(f"Archived project to {out_dir}.zip")
