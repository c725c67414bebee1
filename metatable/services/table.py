from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from .nodes import KeyValueNode, Mapping, Scalar, Sequence, plain_scalar

TABLE_OPEN = '<table data="yaml-metadata">'
SEQUENCE_SEPARATOR = ", "


class Layout(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: Any) -> Optional["Layout"]:
        if isinstance(value, Layout):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def format_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(plain_scalar(value))


def _cell(node: KeyValueNode, layout: Layout) -> str:
    """
    Texto de una celda. Los mappings anidados se convierten en subtabla con el
    layout indicado; las secuencias se resuelven elemento a elemento.
    """
    if isinstance(node, Scalar):
        return format_scalar(node.value)
    if isinstance(node, Mapping):
        return render_table(node, layout)
    if isinstance(node, Sequence):
        return SEQUENCE_SEPARATOR.join(_cell(item, layout) for item in node)
    raise TypeError(f"nodo desconocido: {type(node).__name__}")


def render_horizontal(tree: Mapping) -> str:
    thead = ""
    tbody = ""
    for key, value in tree:
        thead += f"<th>{_cell(key, Layout.HORIZONTAL)}</th>"
        tbody += f"<td>{_cell(value, Layout.HORIZONTAL)}</td>"

    if not thead:
        return ""
    return f"{TABLE_OPEN}<thead><tr>{thead}</tr></thead><tbody><tr>{tbody}</tr></table>"


def render_vertical(tree: Mapping) -> str:
    table = TABLE_OPEN
    for key, value in tree:
        # las claves siempre en horizontal; los valores siguen el layout vertical
        table += "<tr>"
        table += f"<td>{_cell(key, Layout.HORIZONTAL)}</td>"
        table += f"<td>{_cell(value, Layout.VERTICAL)}</td>"
        table += "</tr>"
    table += "</table>"
    return table


def render_table(tree: Mapping, layout: Layout) -> str:
    if layout is Layout.HORIZONTAL:
        return render_horizontal(tree)
    if layout is Layout.VERTICAL:
        return render_vertical(tree)
    raise ValueError(f"layout desconocido: {layout!r}")
