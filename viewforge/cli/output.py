"""Console output helpers for CLI commands."""

import json
from typing import Any, Dict


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Build completed successfully")
        ✓ Build completed successfully
    """
    print(f"✓ {message}")


def print_error(message: str) -> None:
    """
    Print error message with cross prefix.

    Examples:
        >>> print_error("Build failed")
        ✗ Build failed
    """
    print(f"✗ {message}")


def print_warning(message: str) -> None:
    print(f"⚠ {message}")


def print_info(message: str) -> None:
    print(f"ℹ {message}")


def print_json(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))
