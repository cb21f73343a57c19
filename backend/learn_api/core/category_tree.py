"""Category Tree — assembles flat category records into a forest and walks ancestry.

Invariants:
    - Input records are never mutated; the forest is built from copies
    - Every input record appears exactly once in the returned forest
    - A record whose parent id is absent from the input becomes a root (orphan policy)
    - Children keep the relative order of the input sequence
    - A parent_id cycle (including self-parenting) raises InvalidHierarchyError
    - Ancestry walks use a visited set and never loop

Design Decisions:
    - Index-based build (single pass, no recursion) plus a reachability count:
      cycle members are the records no root can reach, so the count check
      catches them without walking each ancestry chain
    - Canonical article path = path of the article's deepest category
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from learn_api.core.content_types import Category
from learn_api.core.errors import InvalidHierarchyError


def build_category_tree(categories: Sequence[Category]) -> list[Category]:
    """Build a forest of root categories with children populated. Pure, no IO."""
    nodes = [replace(c, children=[]) for c in categories]
    index = {node.id: node for node in nodes}

    roots: list[Category] = []
    for node in nodes:
        parent = index.get(node.parent_id) if node.has_parent else None
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)

    reached = _reachable(roots)
    if len(reached) != len(nodes):
        unreached = [node.id for node in nodes if id(node) not in reached]
        raise InvalidHierarchyError(unreached)
    return roots


def count_nodes(forest: Iterable[Category]) -> int:
    """Total number of nodes in a forest."""
    return len(_reachable(forest))


def find_category(forest: Iterable[Category], category_id: int) -> Category | None:
    """Depth-first lookup of a node in a built forest."""
    stack = list(forest)
    stack.reverse()
    while stack:
        node = stack.pop()
        if node.id == category_id:
            return node
        stack.extend(reversed(node.children))
    return None


def index_categories(categories: Iterable[Category]) -> dict[int, Category]:
    return {c.id: c for c in categories}


def category_path_of(category_id: int, index: Mapping[int, Category]) -> str:
    """Slash-joined slugs from root down to the category. Unknown id → ""."""
    chain = _ancestry(category_id, index)
    return "/".join(c.slug for c in reversed(chain))


def category_depth(category_id: int, index: Mapping[int, Category]) -> int:
    """0 for a root, 1 for its children, ... and -1 for an unknown id."""
    return len(_ancestry(category_id, index)) - 1


def deepest_category_path(
    category_ids: Iterable[int], index: Mapping[int, Category],
) -> str:
    """Canonical path for an article filed under several categories.

    The deepest category wins; on a tie the first one listed is kept.
    """
    best_id: int | None = None
    best_depth = -1
    for category_id in category_ids:
        depth = category_depth(category_id, index)
        if depth > best_depth:
            best_id, best_depth = category_id, depth
    if best_id is None:
        return ""
    return category_path_of(best_id, index)


def _ancestry(category_id: int, index: Mapping[int, Category]) -> list[Category]:
    """The category followed by its ancestors, nearest first."""
    chain: list[Category] = []
    seen: set[int] = set()
    current = index.get(category_id)
    while current is not None:
        if current.id in seen:
            raise InvalidHierarchyError([c.id for c in chain])
        seen.add(current.id)
        chain.append(current)
        if not current.has_parent:
            break
        current = index.get(current.parent_id)
    return chain


def _reachable(roots: Iterable[Category]) -> set[int]:
    """Object ids of every node reachable from the given roots."""
    seen: set[int] = set()
    stack = list(roots)
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.extend(node.children)
    return seen
