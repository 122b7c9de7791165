"""Hierarchical checkbox model used by the effects tab.

Nodes live in a flat list and reference each other by index, so the parent
link is a plain integer rather than an owning reference. The model has no
tkinter dependency; widgets subscribe through :meth:`CheckTree.subscribe`.

Propagation rules:

* ``set_checked`` on a node forces the same state onto every descendant and
  then recomputes the node's *immediate* parent.
* ``recompute`` sets a node to the OR of its direct children. It never goes
  further up than one level.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from .effects import EffectCategory, EffectRegistry

ChangeCallback = Callable[[int, bool], None]


@dataclass
class TreeNode:
    label: str
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    checked: bool = True


class CheckTree:
    def __init__(self, on_change: Optional[ChangeCallback] = None) -> None:
        self._nodes: List[TreeNode] = []
        self._listeners: List[ChangeCallback] = []
        if on_change is not None:
            self._listeners.append(on_change)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, label: str, parent: Optional[int] = None, *, checked: bool = True) -> int:
        index = len(self._nodes)
        self._nodes.append(TreeNode(label=label, checked=checked))
        if parent is not None:
            self.add_child(parent, index)
        return index

    def add_child(self, parent: int, child: int) -> None:
        """Attach *child* under *parent*. Does not touch any checked state."""
        node = self._node(child)
        if node.parent is not None:
            raise ValueError(f"node {child} already has parent {node.parent}")
        if parent == child:
            raise ValueError("a node cannot be its own parent")
        self._node(parent).children.append(child)
        node.parent = parent

    def subscribe(self, callback: ChangeCallback) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------

    def set_checked(self, index: int, value: bool) -> None:
        node = self._node(index)
        self._assign(index, bool(value))
        for child in list(node.children):
            self.set_checked(child, value)
        if node.parent is not None:
            self.recompute(node.parent)

    def recompute(self, index: int) -> None:
        node = self._node(index)
        self._assign(index, any(self._nodes[c].checked for c in node.children))

    def toggle(self, index: int) -> bool:
        value = not self._node(index).checked
        self.set_checked(index, value)
        return value

    def _assign(self, index: int, value: bool) -> None:
        self._nodes[index].checked = value
        for callback in list(self._listeners):
            callback(index, value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _node(self, index: int) -> TreeNode:
        if index < 0 or index >= len(self._nodes):
            raise IndexError(f"no tree node {index}")
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def label(self, index: int) -> str:
        return self._node(index).label

    def is_checked(self, index: int) -> bool:
        return self._node(index).checked

    def parent(self, index: int) -> Optional[int]:
        return self._node(index).parent

    def children(self, index: int) -> List[int]:
        return list(self._node(index).children)

    def is_leaf(self, index: int) -> bool:
        return not self._node(index).children

    def roots(self) -> List[int]:
        return [i for i, n in enumerate(self._nodes) if n.parent is None]

    def descendants(self, index: int) -> Iterator[int]:
        stack = list(reversed(self._node(index).children))
        while stack:
            cur = stack.pop()
            yield cur
            stack.extend(reversed(self._nodes[cur].children))


def build_effect_tree(
    registry: EffectRegistry,
    on_change: Optional[ChangeCallback] = None,
) -> Tuple[CheckTree, Dict[int, int], Dict[EffectCategory, int]]:
    """Build the two-level effects tree.

    Returns ``(tree, leaf_by_effect_id, group_by_category)``. Leaves are created
    first in registry order, then one root per category in declaration order.
    """
    tree = CheckTree(on_change=on_change)
    leaf_by_id: Dict[int, int] = {}
    for rec in registry:
        leaf_by_id[rec.id] = tree.add_node(rec.name)

    group_by_category: Dict[EffectCategory, int] = {}
    for cat in EffectCategory:
        group_by_category[cat] = tree.add_node(cat.label)

    for rec in registry:
        tree.add_child(group_by_category[rec.category], leaf_by_id[rec.id])

    return tree, leaf_by_id, group_by_category


def apply_effect_states(tree: CheckTree, leaf_by_id: Mapping[int, int], states: Mapping[int, bool]) -> List[int]:
    """Push ``{effect_id: enabled}`` onto the leaves; returns the ids with no leaf."""
    unknown: List[int] = []
    for effect_id, enabled in states.items():
        leaf = leaf_by_id.get(effect_id)
        if leaf is None:
            unknown.append(effect_id)
            continue
        tree.set_checked(leaf, enabled)
    return unknown


def collect_effect_states(tree: CheckTree, leaf_by_id: Mapping[int, int]) -> Dict[int, bool]:
    return {effect_id: tree.is_checked(leaf) for effect_id, leaf in leaf_by_id.items()}


__all__ = ["CheckTree", "TreeNode", "build_effect_tree", "apply_effect_states", "collect_effect_states"]
