"""Graphviz DOT export of a depth-first spanning structure.

Render the output with e.g. ``dot -Tpdf graph.dot > graph.pdf``.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from lazygraph.algorithms.traversal import dfs
from lazygraph.config import SEARCH_CONFIG
from lazygraph.types.base import Neighbors, Vertex

#: Returns the label for edge ``(src, dst)`` or ``None`` for no label.
EdgeLabelFunc = Callable[[Vertex, Vertex], Any]


def _quote(value: Any) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def to_dot(
    root: Vertex,
    neighbors: Neighbors,
    edge_labels: Optional[EdgeLabelFunc] = None,
) -> str:
    """Describe the DFS tree reachable from ``root`` in the DOT language.

    Only tree edges of a depth-first search are emitted (one per discovered
    non-root vertex, in discovery order), not the full edge set. The root is
    always emitted as a node statement so a graph with no edges still renders.

    Args:
        root: Starting vertex.
        neighbors: Neighbor function or provider.
        edge_labels: Optional labeler; ``None`` results omit the label.

    Returns:
        DOT source text ending with a newline.

    Example:
        >>> print(to_dot("A", {"A": ["B"], "B": []}.__getitem__), end="")
        digraph {
           "A";
           "A" -> "B";
        }
    """
    indent = SEARCH_CONFIG.dot_indent
    name = SEARCH_CONFIG.dot_graph_name

    lines: List[str] = [f"digraph {_quote(name)} {{" if name else "digraph {"]
    lines.append(f"{indent}{_quote(root)};")
    for vertex, parent in dfs(root, neighbors).items():
        if parent is None:
            continue
        statement = f"{indent}{_quote(parent)} -> {_quote(vertex)}"
        label = edge_labels(parent, vertex) if edge_labels is not None else None
        if label is not None:
            statement += f" [label={_quote(label)}]"
        lines.append(statement + ";")
    lines.append("}")
    return "\n".join(lines) + "\n"
