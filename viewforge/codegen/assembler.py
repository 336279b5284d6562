"""
Component file assembly.

Every component file shares one skeleton: imports, a class extending
``React.Component`` with a constructor, ref-saving methods and handler
methods directly after the constructor, ``render()``, the display name,
and the default export.
"""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from string import Template
from typing import TYPE_CHECKING, List

from viewforge.constants import COMPONENTS_DIRECTORY, SOURCE_DIRECTORY
from viewforge.model.types import ComponentFile

from .emitter import generate_jsx_ast
from .fragments import generate_export, generate_handler, generate_imports, generate_refs, generate_state
from .printer import indent_block, print_node

if TYPE_CHECKING:
    from viewforge.model.types import ProjectModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    """One output file, ``path`` relative to the project root."""

    name: str
    path: str
    content: str


COMPONENT_TEMPLATE = Template(
    textwrap.dedent(
        """
        $imports

        class $name extends React.Component {
          constructor(props, context) {
            super(props, context);$constructor_body
          }
        $methods
          render() {
            return $jsx;
          }
        }

        $name.displayName = '$name';

        export default $export;
        """
    ).strip()
    + "\n"
)


def component_file_path(name: str) -> str:
    return f"{SOURCE_DIRECTORY}/{COMPONENTS_DIRECTORY}/{name}.js"


def _render_jsx(file: ComponentFile, model: "ProjectModel") -> str:
    node = generate_jsx_ast(file, model)
    if node is None:
        return "null"
    source = print_node(node)
    if "\n" in source:
        return "(\n" + indent_block(source, 3) + "\n    )"
    return source


def generate_component_source(file: ComponentFile, model: "ProjectModel") -> str:
    """Return the JavaScript module source for one component file."""
    refs = generate_refs(file)
    handlers = [generate_handler(handler, file, model) for handler in file.handlers.values()]

    constructor_lines: List[str] = []
    constructor_lines.extend(generate_state(file, model))
    constructor_lines.extend(refs.init)
    constructor_lines.extend(refs.bind)
    constructor_lines.extend(handler.binding for handler in handlers)

    methods = refs.save + [handler.method for handler in handlers]
    methods_source = "".join("\n" + indent_block(method) + "\n" for method in methods)

    return COMPONENT_TEMPLATE.substitute(
        imports="\n".join(generate_imports(file, model)),
        name=file.name,
        constructor_body="\n" + indent_block("\n".join(constructor_lines), 2) if constructor_lines else "",
        methods=methods_source,
        jsx=_render_jsx(file, model),
        export=generate_export(file),
    )


def generate_component_file(file: ComponentFile, model: "ProjectModel") -> GeneratedFile:
    logger.debug("Generating component file %s (%s)", file.name, file.type.value)
    return GeneratedFile(
        name=file.name,
        path=component_file_path(file.name),
        content=generate_component_source(file, model),
    )


__all__ = ["GeneratedFile", "COMPONENT_TEMPLATE", "component_file_path", "generate_component_source", "generate_component_file"]
