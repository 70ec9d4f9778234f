"""Tree drills: parents, leaves, tries and binary-tree traversals."""

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Prefix tree holding a set of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def contains(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_end


def tree_parents(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Parent of each of nodes ``2..n`` when the tree is rooted at node 1."""
    tree: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        tree[a].append(b)
        tree[b].append(a)
    parent = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for child in tree[node]:
            if not seen[child]:
                seen[child] = True
                parent[child] = node
                queue.append(child)
    return parent[2:]


def count_leaves_after_delete(parents: Sequence[int], removed: int) -> int:
    """Leaves left after cutting off the subtree at ``removed``.

    ``parents[i]`` is the parent of node ``i``, or -1 for the root.
    """
    n = len(parents)
    tree: list[list[int]] = [[] for _ in range(n)]
    root = 0
    for node, parent in enumerate(parents):
        if parent == -1:
            root = node
        else:
            tree[node].append(parent)
            tree[parent].append(node)
    if removed == root:
        return 0

    leaves = 0
    stack = [(root, -1)]
    while stack:
        node, came_from = stack.pop()
        children = [c for c in tree[node] if c != came_from and c != removed]
        if not children:
            leaves += 1
        stack.extend((child, node) for child in children)
    return leaves


def count_known_words(words: Iterable[str], queries: Iterable[str]) -> int:
    """How many of ``queries`` are among ``words``."""
    trie = Trie()
    for word in words:
        trie.insert(word)
    return sum(1 for query in queries if trie.contains(query))


def traversals(nodes: Iterable[tuple[str, str, str]]) -> tuple[str, str, str]:
    """Pre-, in- and post-order of a binary tree rooted at ``A``.

    ``nodes`` holds ``(node, left, right)`` letters, with ``.`` for no child.
    """
    children = {
        node: (None if left == "." else left, None if right == "." else right)
        for node, left, right in nodes
    }

    def walk(node: str | None, order: str) -> Iterator[str]:
        if node is None:
            return
        left, right = children.get(node, (None, None))
        if order == "pre":
            yield node
        yield from walk(left, order)
        if order == "in":
            yield node
        yield from walk(right, order)
        if order == "post":
            yield node

    return (
        "".join(walk("A", "pre")),
        "".join(walk("A", "in")),
        "".join(walk("A", "post")),
    )