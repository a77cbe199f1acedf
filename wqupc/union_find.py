"""Weighted quick-union with path compression.

Concepts
--------
Forest
    Each of the ``n`` elements stores a pointer to its parent; a root points
    at itself. Two elements are in the same component iff they share a root.
Union by size
    ``union`` always hangs the smaller tree under the root of the larger one,
    which keeps every tree height within ``O(log n)``.
Path compression
    ``find`` re-parents every node it walks over directly to the root, so
    later lookups for those nodes take a single hop.
"""

from __future__ import annotations


class DisjointSet:
    """Partition of ``0..n-1`` into disjoint components.

    Attributes:
        parent: ``parent[i]`` is the parent of ``i``; roots satisfy
            ``parent[i] == i``.
        size: ``size[i]`` is the element count of the tree rooted at ``i``
            (only meaningful while ``i`` is a root).
    """

    def __init__(self, n: int, path_compression: bool = True) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(f"n must be an integer, got {n!r}")
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        self.parent: list[int] = list(range(n))
        self.size: list[int] = [1] * n
        self._count = n
        self._path_compression = path_compression

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return (
            f"DisjointSet(n={len(self.parent)}, components={self._count}, "
            f"path_compression={self._path_compression})"
        )

    @property
    def path_compression(self) -> bool:
        return self._path_compression

    @path_compression.setter
    def path_compression(self, enabled: bool) -> None:
        self._path_compression = bool(enabled)

    def _validate(self, p: int) -> None:
        n = len(self.parent)
        if not (0 <= p < n):
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """Return the root of ``p``, compressing the visited path.

        Raises:
            IndexError: If ``p`` is outside ``[0, n)``.
        """
        self._validate(p)
        root = p
        while self.parent[root] != root:
            root = self.parent[root]
        if self._path_compression:
            while p != root:
                nxt = self.parent[p]
                self.parent[p] = root
                p = nxt
        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """Merge the components of ``p`` and ``q``.

        Returns:
            True if two components were merged, False when ``p`` and ``q``
            were already connected (nothing changes apart from compression).
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False
        if self.size[root_p] < self.size[root_q]:
            root_p, root_q = root_q, root_p
        # root_p is now the larger (or equal) tree and survives
        self.parent[root_q] = root_p
        self.size[root_p] += self.size[root_q]
        self._count -= 1
        return True

    def count(self) -> int:
        return self._count

    def parent_of(self, p: int) -> int:
        self._validate(p)
        return self.parent[p]

    def size_of(self, p: int) -> int:
        """Number of elements in the component containing ``p``."""
        return self.size[self.find(p)]

    def depth(self, p: int) -> int:
        """Hops from ``p`` to its root. Does not compress."""
        self._validate(p)
        hops = 0
        while self.parent[p] != p:
            p = self.parent[p]
            hops += 1
        return hops
