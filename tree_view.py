from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from models import FolderNode

NodePath = tuple[int, ...]


@dataclass(frozen=True)
class TreeRow:
    path: NodePath
    node: FolderNode
    depth: int
    expanded: bool

    @property
    def has_children(self) -> bool:
        return self.node.has_children


@dataclass
class TreeView:
    """
    Expand/collapse state layered over a static folder forest.

    State is keyed by node path (indices from the forest root), so it never
    touches the nodes themselves. A path that was never toggled falls back to
    the default: top-level nodes open, everything below closed.
    """
    expanded: dict[NodePath, bool] = field(default_factory=dict)

    @staticmethod
    def default_expanded(path: NodePath) -> bool:
        return len(path) == 1

    def is_expanded(self, path: NodePath) -> bool:
        return self.expanded.get(path, self.default_expanded(path))

    def toggle(self, path: NodePath) -> bool:
        self.expanded[path] = not self.is_expanded(path)
        return self.expanded[path]

    def visible_rows(self, forest: Sequence[FolderNode]) -> list[TreeRow]:
        """
        Pre-order walk of the forest, skipping the children of collapsed nodes.
        """
        rows: list[TreeRow] = []
        stack: list[NodePath] = [(i,) for i in reversed(range(len(forest)))]
        while stack:
            path = stack.pop()
            node = node_at(forest, path)
            expanded = self.is_expanded(path)
            rows.append(TreeRow(path, node, len(path) - 1, expanded))
            if expanded and node.has_children:
                for i in reversed(range(len(node.subfolders))):
                    stack.append(path + (i,))
        return rows

    def render_text(self, forest: Sequence[FolderNode]) -> str:
        lines = []
        for row in self.visible_rows(forest):
            if row.has_children:
                marker = "▾" if row.expanded else "▸"
            else:
                marker = " "
            line = f"{'    ' * row.depth}{marker} {row.node.name}/"
            if row.depth == 0 and row.node.description:
                line += f"  # {row.node.description}"
            lines.append(line)
        return "\n".join(lines)


def node_at(forest: Sequence[FolderNode], path: NodePath) -> FolderNode:
    node = forest[path[0]]
    for i in path[1:]:
        node = node.subfolders[i]
    return node


def iter_paths(forest: Sequence[FolderNode], prefix: NodePath = ()):
    # every node, pre-order, regardless of expansion
    for i, node in enumerate(forest):
        path = prefix + (i,)
        yield path, node
        yield from iter_paths(node.subfolders, path)
