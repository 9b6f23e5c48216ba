"""
union_find.py — Disjoint Set Union
===================================
Tracks which nodes already belong to the same tree.  Kruskal asks it
one question per edge: "are these two endpoints already connected?"

  - find()  compresses the path it walks, so every node on it points
            straight at the root afterwards.
  - union() attaches the shallower root under the deeper one (by rank).

Elements must be registered (constructor or add()) before use; asking
about an unknown element raises KeyError.
"""

from typing import Dict, Hashable, Iterable, List


class UnionFind:

    def __init__(self, elements: Iterable[Hashable] = ()):
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank:   Dict[Hashable, int]      = {}
        self._count:  int                      = 0
        for x in elements:
            self.add(x)

    def add(self, x: Hashable) -> None:
        """Register x as its own singleton set.  No-op if already present."""
        if x in self._parent:
            return
        self._parent[x] = x
        self._rank[x]   = 0
        self._count    += 1

    def find(self, x: Hashable) -> Hashable:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        # path compression
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Merge the sets of x and y.  False if they were already one set."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self._rank[rx] < self._rank[ry]:
            rx, ry = ry, rx
        self._parent[ry] = rx
        if self._rank[rx] == self._rank[ry]:
            self._rank[rx] += 1
        self._count -= 1
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self.find(x) == self.find(y)

    @property
    def component_count(self) -> int:
        return self._count

    def groups(self) -> List[List[Hashable]]:
        """Members of each set, sets ordered by their first-registered member."""
        by_root: Dict[Hashable, List[Hashable]] = {}
        for x in self._parent:
            by_root.setdefault(self.find(x), []).append(x)
        return list(by_root.values())

    def __contains__(self, x: Hashable) -> bool:
        return x in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"UnionFind(elements={len(self)}, components={self._count})"
