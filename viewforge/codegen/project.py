"""
Project-level file generation.

Produces every file of the output project from a built model: npm
manifest, HTML shell, router entry point, global styles, helper, function
and builtin modules, and one module per component file.
"""

from __future__ import annotations

import html
import json
import logging
import re
import textwrap
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from viewforge.constants import (
    AUTH_TOKEN_STORAGE_KEY,
    BUILTINS_FILE,
    COMPONENTS_DIRECTORY,
    DEFAULT_CONTAINER_ID,
    DEFAULT_URL_PREFIX,
    DEFAULT_VERSION,
    ENTRY_HTML_FILE,
    ENTRY_POINT_FILE,
    FUNCTIONS_FILE,
    HELPERS_FILE,
    PACKAGE_JSON_FILE,
    PUBLIC_DIRECTORY,
    SOURCE_DIRECTORY,
    STYLES_FILE,
)
from viewforge.model.names import format_style_class_name
from viewforge.model.types import RedirectKind
from viewforge.values.builtins import BUILTIN_FUNCTIONS

from .assembler import GeneratedFile, generate_component_file
from .printer import indent_block

if TYPE_CHECKING:
    from viewforge.model.types import ProjectModel

logger = logging.getLogger(__name__)

PACKAGE_VERSIONS: Dict[str, str] = {
    "react": "^16.2.0",
    "react-dom": "^16.2.0",
    "react-router": "^4.2.0",
    "react-router-dom": "^4.2.2",
    "react-scripts": "1.1.0",
    "styled-components": "^3.1.6",
    "apollo-client": "^2.2.0",
    "react-apollo": "^2.0.4",
    "apollo-link-http": "^1.3.2",
    "apollo-cache-inmemory": "^1.1.5",
    "graphql": "^0.12.3",
    "graphql-tag": "^2.6.1",
    "apollo-link-context": "^1.0.3",
}

BASE_PACKAGES = ("react", "react-dom", "react-router", "react-router-dom", "react-scripts", "styled-components")
GRAPHQL_PACKAGES = (
    "apollo-client",
    "react-apollo",
    "apollo-link-http",
    "apollo-cache-inmemory",
    "graphql",
    "graphql-tag",
    "apollo-link-context",
)


@dataclass
class GenerationOptions:
    version: str = DEFAULT_VERSION
    url_prefix: str = DEFAULT_URL_PREFIX
    container_id: str = DEFAULT_CONTAINER_ID


def _source_path(name: str) -> str:
    return f"{SOURCE_DIRECTORY}/{name}"


def _module_name(file_name: str) -> str:
    return file_name.rsplit(".", 1)[0]


def split_package_spec(spec: str) -> Tuple[str, str]:
    """Split ``name@range`` at the last ``@``; scoped names keep their leading ``@``."""
    index = spec.rfind("@")
    if index <= 0:
        return spec, "latest"
    return spec[:index], spec[index + 1:] or "latest"


# =============================================================================
# package.json / index.html
# =============================================================================


def generate_package_json(model: "ProjectModel", options: GenerationOptions) -> str:
    project = model.project
    dependencies = {name: PACKAGE_VERSIONS[name] for name in BASE_PACKAGES}
    for spec in project.component_libs:
        name, version_range = split_package_spec(spec)
        dependencies[name] = version_range
    if model.using_graphql:
        dependencies.update({name: PACKAGE_VERSIONS[name] for name in GRAPHQL_PACKAGES})

    package = {
        "name": project.name,
        "description": "App made with viewforge",
        "version": options.version,
        "author": project.author,
        "license": "UNLICENSED",
        "private": True,
        "homepage": options.url_prefix,
        "dependencies": dependencies,
        "scripts": {
            "start": "react-scripts start",
            "build": "react-scripts build",
            "test": "react-scripts test --env=jsdom",
            "eject": "react-scripts eject",
        },
    }
    return json.dumps(package, indent=2) + "\n"


def generate_index_html(model: "ProjectModel", options: GenerationOptions) -> str:
    title = html.escape(model.project.name)
    container_id = html.escape(options.container_id, quote=True)
    return textwrap.dedent(
        f"""
        <!doctype html>
        <html lang="en">
          <head>
            <meta charset="utf-8" />
            <meta name="viewport" content="width=device-width, initial-scale=1, shrink-to-fit=no" />
            <title>{title}</title>
          </head>
          <body>
            <noscript>You need to enable JavaScript to run this app.</noscript>
            <div id="{container_id}"></div>
          </body>
        </html>
        """
    ).strip() + "\n"


# =============================================================================
# src/index.js
# =============================================================================


APOLLO_CLIENT_SETUP = textwrap.dedent(
    """
    const httpLink = createHttpLink({ uri: $endpoint });

    const authLink = setContext((_, { headers }) => {
      const token = window.localStorage.getItem(AUTH_TOKEN_KEY);
      return {
        headers: {
          ...headers,
          authorization: token ? `Bearer ${token}` : '',
        },
      };
    });

    const client = new ApolloClient({
      link: authLink.concat(httpLink),
      cache: new InMemoryCache(),
    });
    """
).strip()


def _redirect_guard(kind: RedirectKind, from_path: str, to_path: str) -> str:
    condition = "isAuthenticated()" if kind is RedirectKind.AUTHENTICATED else "!isAuthenticated()"
    return (
        f"<Route exact path={json.dumps(from_path)} "
        f"render={{() => ({condition} ? <Redirect to={json.dumps(to_path)} /> : null)}} />"
    )


def generate_entry_point(model: "ProjectModel", options: GenerationOptions) -> str:
    guards = [
        _redirect_guard(rule.kind, rule.from_path, rule.to_path)
        for rule in model.redirects
        if rule.kind is not RedirectKind.UNCONDITIONAL
    ]
    switch_entries = [
        f"<Redirect exact from={json.dumps(rule.from_path)} to={json.dumps(rule.to_path)} />"
        for rule in model.redirects
        if rule.kind is RedirectKind.UNCONDITIONAL
    ]
    root_files = [model.routes[route_id] for route_id in model.root_routes]
    switch_entries.extend(
        f"<Route path={json.dumps(route.full_path)} component={{{route.file.name}}} />" for route in root_files
    )

    helpers = ["isAuthenticated"] if guards else []
    if model.using_graphql:
        helpers.append("AUTH_TOKEN_KEY")

    imports = [
        "import React from 'react';",
        "import ReactDOM from 'react-dom';",
        "import { BrowserRouter, Switch, Route, Redirect } from 'react-router-dom';",
    ]
    if model.using_graphql:
        imports.extend(
            [
                "import { ApolloClient } from 'apollo-client';",
                "import { ApolloProvider } from 'react-apollo';",
                "import { createHttpLink } from 'apollo-link-http';",
                "import { setContext } from 'apollo-link-context';",
                "import { InMemoryCache } from 'apollo-cache-inmemory';",
            ]
        )
    if helpers:
        imports.append(f"import {{ {', '.join(helpers)} }} from './{_module_name(HELPERS_FILE)}';")
    imports.append(f"import './{_module_name(STYLES_FILE)}';")
    imports.extend(
        f"import {route.file.name} from './{COMPONENTS_DIRECTORY}/{route.file.name}';" for route in root_files
    )

    switch = "<Switch>\n" + indent_block("\n".join(switch_entries)) + "\n</Switch>" if switch_entries else "<Switch />"
    router_body = switch
    if guards:
        router_body = "<div>\n" + indent_block("\n".join(guards + [switch])) + "\n</div>"
    tree = f"<BrowserRouter basename={json.dumps(options.url_prefix)}>\n{indent_block(router_body)}\n</BrowserRouter>"
    if model.using_graphql:
        tree = f"<ApolloProvider client={{client}}>\n{indent_block(tree)}\n</ApolloProvider>"

    sections = ["\n".join(imports)]
    if model.using_graphql:
        endpoint = json.dumps(model.project.graph_ql_endpoint_url)
        sections.append(APOLLO_CLIENT_SETUP.replace("$endpoint", endpoint))
    sections.append(f"const App = () => (\n{indent_block(tree)}\n);")
    sections.append(
        f"ReactDOM.render(<App />, document.getElementById({json.dumps(options.container_id)}));"
    )
    return "\n\n".join(sections) + "\n"


# =============================================================================
# styles.js / helpers.js / functions.js / builtins.js
# =============================================================================


def _css_property(name: str) -> str:
    return re.sub(r"([A-Z])", r"-\1", name).lower()


def generate_styles(model: "ProjectModel") -> str:
    rules: List[str] = []
    for file in model.iter_files():
        for component_id, style in file.css.items():
            declarations = "\n".join(f"{_css_property(key)}: {value};" for key, value in style.items())
            class_name = format_style_class_name(file.name, component_id)
            rules.append(f".{class_name} {{\n{indent_block(declarations)}\n}}")

    lines = ["import { injectGlobal } from 'styled-components';", ""]
    if rules:
        body = "\n\n".join(rules).replace("`", "\\`")
        lines.append(f"injectGlobal`\n{indent_block(body)}\n`;")
    return "\n".join(lines).rstrip() + "\n"


HELPERS_SOURCE = textwrap.dedent(
    """
    export const AUTH_TOKEN_KEY = $token_key;

    export const buildRoutePath = (path, params = {}) =>
      path.replace(/:(\\w+)/g, (match, name) => {
        const value = params[name];
        return value === undefined || value === null ? '' : encodeURIComponent(value);
      });

    export const isAuthenticated = () =>
      !!window.localStorage.getItem(AUTH_TOKEN_KEY);

    export const logout = () => {
      window.localStorage.removeItem(AUTH_TOKEN_KEY);
      window.location.reload();
    };
    """
).strip()


def generate_helpers() -> str:
    return HELPERS_SOURCE.replace("$token_key", json.dumps(AUTH_TOKEN_STORAGE_KEY)) + "\n"


def _function_module(functions: List[Tuple[str, List[str], str]]) -> str:
    blocks = []
    for name, args, body in functions:
        signature = f"export const {name} = ({', '.join(args)}) =>"
        source = body.strip()
        if source:
            blocks.append(f"{signature} {{\n{indent_block(source)}\n}};")
        else:
            blocks.append(f"{signature} {{}};")
    return "\n\n".join(blocks) + "\n" if blocks else "export {};\n"


def generate_functions(model: "ProjectModel") -> str:
    return _function_module(
        [
            (name, [arg.name for arg in function.args], function.body)
            for name, function in model.functions.items()
        ]
    )


def generate_builtins() -> str:
    return _function_module([(name, builtin.args, builtin.body) for name, builtin in BUILTIN_FUNCTIONS.items()])


# =============================================================================
# Entry point
# =============================================================================


def generate_files(model: "ProjectModel", options: Optional[GenerationOptions] = None) -> List[GeneratedFile]:
    """
    Generate every output file for ``model``.

    Args:
        model: Built project model
        options: Version, URL prefix and container id for the output

    Returns:
        Files in a stable order: project files first, then component files
        in model file order (nested designed components after their parent)
    """
    options = options or GenerationOptions()
    files = [
        GeneratedFile(PACKAGE_JSON_FILE, PACKAGE_JSON_FILE, generate_package_json(model, options)),
        GeneratedFile(
            ENTRY_HTML_FILE, f"{PUBLIC_DIRECTORY}/{ENTRY_HTML_FILE}", generate_index_html(model, options)
        ),
        GeneratedFile(ENTRY_POINT_FILE, _source_path(ENTRY_POINT_FILE), generate_entry_point(model, options)),
        GeneratedFile(STYLES_FILE, _source_path(STYLES_FILE), generate_styles(model)),
        GeneratedFile(HELPERS_FILE, _source_path(HELPERS_FILE), generate_helpers()),
        GeneratedFile(FUNCTIONS_FILE, _source_path(FUNCTIONS_FILE), generate_functions(model)),
        GeneratedFile(BUILTINS_FILE, _source_path(BUILTINS_FILE), generate_builtins()),
    ]
    files.extend(generate_component_file(file, model) for file in model.iter_files())

    logger.info("Generated %d files", len(files))
    return files


__all__ = [
    "GenerationOptions",
    "PACKAGE_VERSIONS",
    "split_package_spec",
    "generate_package_json",
    "generate_index_html",
    "generate_entry_point",
    "generate_styles",
    "generate_helpers",
    "generate_functions",
    "generate_builtins",
    "generate_files",
]
