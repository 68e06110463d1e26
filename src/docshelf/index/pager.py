"""Previous/next pagination over the navigation order."""

from __future__ import annotations

from typing import List, Tuple

from docshelf.models import Category, Leaf, NavigationNode, PagerLinks


def flatten(nav_tree: NavigationNode) -> Tuple[Leaf, ...]:
    """Return the leaves of ``nav_tree`` in pre-order."""
    leaves: List[Leaf] = []
    stack: List[NavigationNode] = [nav_tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            leaves.append(node)
        elif isinstance(node, Category):
            stack.extend(reversed(node.children))
    return tuple(leaves)


def neighbors(nav_tree: NavigationNode, slug: str) -> PagerLinks:
    """Find the leaves immediately before and after ``slug``."""
    leaves = flatten(nav_tree)
    for position, leaf in enumerate(leaves):
        if leaf.slug == slug:
            previous = leaves[position - 1] if position > 0 else None
            following = leaves[position + 1] if position < len(leaves) - 1 else None
            return PagerLinks(previous=previous, next=following)
    return PagerLinks()
