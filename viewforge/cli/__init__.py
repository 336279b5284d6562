"""
viewforge CLI entry point.

Subcommands:
    build    Compile a project document into a React application
    inspect  Print a JSON summary of the built project model
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from viewforge import __version__
from viewforge.config import env_log_level, load_workspace_config
from viewforge.errors import ViewForgeError
from viewforge.observability.logging import configure_logging

from .commands import cmd_build, cmd_inspect
from .errors import handle_cli_exception


def _configure_runtime_logging(args) -> None:
    """Configure logging level from the CLI flag, environment, or default."""
    log_level = getattr(args, 'log_level', None) or env_log_level() or 'info'
    if getattr(args, 'verbose', False) and not getattr(args, 'log_level', None):
        log_level = 'debug'
    configure_logging(log_level)


def _add_project_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('project', help='Path to the project document (.json, .yaml or .yml)')
    parser.add_argument(
        '--library',
        action='append',
        metavar='NAMESPACE=MODULE',
        help='Import module for a component namespace (can be specified multiple times)'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='viewforge',
        description='Compile visual-designer projects into React applications',
    )
    parser.add_argument('--version', action='version', version=f'viewforge {__version__}')
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'warning', 'error'],
        help='Log level (default: VIEWFORGE_LOG_LEVEL or info)'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging and full tracebacks')
    parser.add_argument('--workspace', help='Workspace root holding viewforge.toml (default: current directory)')
    parser.add_argument('--config', help='Explicit configuration file')

    subparsers = parser.add_subparsers(dest='command', title='commands')

    build_parser_ = subparsers.add_parser('build', help='Generate a React application')
    _add_project_argument(build_parser_)
    build_parser_.add_argument('-o', '--out', help='Output directory (default: [build] out_dir)')
    build_parser_.add_argument('--app-version', dest='version', help='Version written to package.json')
    build_parser_.add_argument('--url-prefix', help='Router basename and package homepage')
    build_parser_.add_argument('--container-id', help='Id of the HTML element the app mounts into')
    build_parser_.add_argument(
        '--clean',
        dest='clean',
        action='store_true',
        default=None,
        help='Remove the output directory before writing'
    )
    build_parser_.add_argument(
        '--no-clean',
        dest='clean',
        action='store_false',
        help='Keep existing files in the output directory'
    )
    build_parser_.add_argument(
        '--archive',
        action='store_true',
        default=None,
        help='Also write <out>.zip'
    )
    build_parser_.set_defaults(func=cmd_build)

    inspect_parser = subparsers.add_parser('inspect', help='Print the project model summary as JSON')
    _add_project_argument(inspect_parser)
    inspect_parser.set_defaults(func=cmd_inspect)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    _configure_runtime_logging(args)

    workspace_root = Path(args.workspace).resolve() if args.workspace else Path.cwd()
    config_path = Path(args.config).resolve() if args.config else None
    try:
        args.config_data = load_workspace_config(workspace_root, config_path)
    except ViewForgeError as exc:
        handle_cli_exception(exc, verbose=args.verbose)

    args.func(args)


if __name__ == '__main__':  # pragma: no cover
    main()
