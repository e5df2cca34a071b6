from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


__all__ = ("MISSING", "TernarySearchTrie")


class _Sentinel(type):
    def __new__(cls, name: str) -> _Sentinel:
        return super().__new__(cls, name, (), {})

    def __repr__(cls) -> str:
        return "..."

    def __hash__(cls) -> int:
        return 0

    def __eq__(cls, other: object) -> bool:
        return other is cls


type Sentinel = _Sentinel
MISSING: Sentinel = _Sentinel("MISSING")


class Node[V]:
    __slots__ = ("label", "left", "middle", "right", "value")

    def __init__(self, label: str) -> None:
        self.label: str = label
        self.value: V | Sentinel = MISSING
        self.left: Node[V] | None = None
        self.middle: Node[V] | None = None
        self.right: Node[V] | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.middle is None and self.right is None

    def unlink(self, child: Node[V]) -> None:
        if self.left is child:
            self.left = None
        elif self.middle is child:
            self.middle = None
        elif self.right is child:
            self.right = None


class TernarySearchTrie[V]:
    """Ordered symbol table of string keys backed by a ternary search trie.

    Each node holds one character. Characters sharing a position are kept in a
    binary search tree (``left`` < label < ``right``) and a match advances to
    ``middle`` for the next character. A node carries a value only when the
    middle-link path leading to it spells a stored key, so a node may be both a
    branch point and a key terminus.

    Every walk is a loop; stack usage does not grow with key length.

    >>> t = TernarySearchTrie[int]()
    >>> t.put("she", 0)
    True
    >>> t.put("shells", 1)
    True
    >>> t.get("she")
    0
    >>> t.longest_prefix_of("shellsort")
    'shells'
    """

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root: Node[V] | None = None
        self._size: int = 0

    def put(self, key: str, value: V) -> bool:
        """Store *value* under *key*, overwriting any previous value.

        Returns ``True`` only when *key* was not stored before. Empty keys are ignored.
        """
        if not key:
            return False

        if self._root is None:
            self._root = Node(key[0])

        node = self._root
        pos, last = 0, len(key) - 1
        while True:
            char = key[pos]
            if char < node.label:
                if node.left is None:
                    node.left = Node(char)
                node = node.left
            elif char > node.label:
                if node.right is None:
                    node.right = Node(char)
                node = node.right
            elif pos < last:
                pos += 1
                if node.middle is None:
                    node.middle = Node(key[pos])
                node = node.middle
            else:
                break

        is_new = node.value is MISSING
        node.value = value
        if is_new:
            self._size += 1
        return is_new

    def get[T](self, key: str, default: T | None = None) -> V | T | None:
        """Return the value stored under *key*, or *default*."""
        node = self._find(key)
        if node is None or node.value is MISSING:
            return default
        return node.value  # type: ignore[return-value]

    def contains(self, key: str) -> bool:
        node = self._find(key)
        return node is not None and node.value is not MISSING

    def delete(self, key: str) -> bool:
        """Remove *key* and prune the nodes left without a value or children.

        Returns ``True`` if a value was removed.
        """
        if not key:
            return False

        path: list[Node[V]] = []
        node = self._root
        pos, last = 0, len(key) - 1
        while node is not None:
            path.append(node)
            char = key[pos]
            if char < node.label:
                node = node.left
            elif char > node.label:
                node = node.right
            elif pos < last:
                pos += 1
                node = node.middle
            else:
                break

        if node is None or node.value is MISSING:
            return False

        node.value = MISSING
        self._size -= 1

        # innermost first; a surviving node keeps every ancestor alive
        while path:
            current = path.pop()
            if current.value is not MISSING or not current.is_leaf():
                break
            if path:
                path[-1].unlink(current)
            else:
                self._root = None
        return True

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def get_all_keys(self) -> list[str]:
        return [key for key, _ in self._walk(self._root, "")]

    def get_keys_with_prefix(self, prefix: str) -> list[str]:
        """Return every stored key starting with *prefix*."""
        if not prefix:
            return self.get_all_keys()

        node = self._find(prefix)
        if node is None:
            return []

        keys: list[str] = []
        if node.value is not MISSING:
            keys.append(prefix)
        keys.extend(key for key, _ in self._walk(node.middle, prefix))
        return keys

    def longest_prefix_of(self, query: str) -> str | None:
        """Return the longest stored key that *query* starts with."""
        if not query:
            return None

        node = self._root
        pos, best = 0, 0
        while node is not None and pos < len(query):
            char = query[pos]
            if char < node.label:
                node = node.left
            elif char > node.label:
                node = node.right
            else:
                pos += 1
                if node.value is not MISSING:
                    best = pos
                node = node.middle

        return query[:best] if best else None

    def items(self) -> Iterator[tuple[str, V]]:
        return self._walk(self._root, "")

    def _find(self, key: str) -> Node[V] | None:
        if not key:
            return None

        node = self._root
        pos, last = 0, len(key) - 1
        while node is not None:
            char = key[pos]
            if char < node.label:
                node = node.left
            elif char > node.label:
                node = node.right
            elif pos < last:
                pos += 1
                node = node.middle
            else:
                return node
        return None

    def _walk(self, node: Node[V] | None, prefix: str) -> Iterator[tuple[str, V]]:
        # (node, prefix before node.label, emit node's own key)
        stack: list[tuple[Node[V], str, bool]] = []
        if node is not None:
            stack.append((node, prefix, False))

        while stack:
            current, acc, emit = stack.pop()
            if emit:
                yield acc + current.label, current.value  # type: ignore[misc]
                continue
            if current.right is not None:
                stack.append((current.right, acc, False))
            if current.middle is not None:
                stack.append((current.middle, acc + current.label, False))
            if current.value is not MISSING:
                stack.append((current, acc, True))
            if current.left is not None:
                stack.append((current.left, acc, False))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._walk(self._root, ""))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} size={self._size}>"
