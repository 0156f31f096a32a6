"""Dependency chain node model used by dependent tracing."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Iterable

from .dependency import DEPENDENCY_TYPES


@dataclass(frozen=True, eq=False)
class DependencyChainNode:
    """One dependent in a chain leading back to the traced package.

    Nodes only hold a link to their parent. A node without a parent is a
    direct dependent of the traced package; deeper nodes depend on their
    parent.
    """

    name: str
    version: str
    type: str
    parent: DependencyChainNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Chain node name must be non-empty")
        if self.type not in DEPENDENCY_TYPES:
            raise ValueError(f"Invalid dependency type: {self.type}")

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def chain(self) -> tuple[DependencyChainNode, ...]:
        """Return the nodes from the root down to this node."""
        nodes: list[DependencyChainNode] = []
        node: DependencyChainNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        return tuple(reversed(nodes))

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "version": self.version,
            "type": self.type,
        }


def chain_leaves(nodes: Iterable[DependencyChainNode]) -> list[DependencyChainNode]:
    """Return the nodes of ``nodes`` that are nobody's parent, in order."""
    nodes = list(nodes)
    parent_ids = {id(node.parent) for node in nodes if node.parent is not None}
    return [node for node in nodes if id(node) not in parent_ids]
