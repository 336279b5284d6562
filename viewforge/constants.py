"""Shared constants for the viewforge compiler."""

from __future__ import annotations

from enum import Enum

INVALID_ID = -1

ENTRY_POINT_FILE = "index.js"
STYLES_FILE = "styles.js"
ENTRY_HTML_FILE = "index.html"
FUNCTIONS_FILE = "functions.js"
BUILTINS_FILE = "builtins.js"
HELPERS_FILE = "helpers.js"
PACKAGE_JSON_FILE = "package.json"

SOURCE_DIRECTORY = "src"
PUBLIC_DIRECTORY = "public"
COMPONENTS_DIRECTORY = "components"

DEFAULT_CONTAINER_ID = "viewforge-app-container"
DEFAULT_VERSION = "1.0.0"
DEFAULT_URL_PREFIX = "/"
AUTH_TOKEN_STORAGE_KEY = "viewforgeAuthToken"


class FileType(str, Enum):
    """Kinds of generated component files."""

    ROUTE = "route"
    ROUTE_INDEX = "routeIndex"
    DESIGNED_COMPONENT = "designedComponent"


__all__ = [
    "INVALID_ID",
    "ENTRY_POINT_FILE",
    "STYLES_FILE",
    "ENTRY_HTML_FILE",
    "FUNCTIONS_FILE",
    "BUILTINS_FILE",
    "HELPERS_FILE",
    "PACKAGE_JSON_FILE",
    "SOURCE_DIRECTORY",
    "PUBLIC_DIRECTORY",
    "COMPONENTS_DIRECTORY",
    "DEFAULT_CONTAINER_ID",
    "DEFAULT_VERSION",
    "DEFAULT_URL_PREFIX",
    "AUTH_TOKEN_STORAGE_KEY",
    "FileType",
]
