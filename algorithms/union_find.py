class VertexOutOfRangeError(IndexError):
    """Raised when a vertex id does not belong to the forest's 0..n range."""


class DisjointSetForest:
    __slots__ = ['parent', 'rank', 'num_components']

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"forest size must be >= 0, got {n}")
        self.parent = list(range(n))
        self.rank = [0] * n
        self.num_components = n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self.parent):
            raise VertexOutOfRangeError(
                f"vertex {i} outside disjoint-set range 0..{len(self.parent)}")

    def find(self, i: int) -> int:
        self._check(i)
        root = i
        while root != self.parent[root]:
            root = self.parent[root]

        curr = i
        while curr != root:
            nxt = self.parent[curr]
            self.parent[curr] = root
            curr = nxt
        return root

    def union(self, i: int, j: int) -> bool:
        """
        Merges the components of i and j by rank.
        Returns False (and changes nothing) when they are already joined.
        """
        root_i = self.find(i)
        root_j = self.find(j)

        if root_i == root_j:
            return False

        if self.rank[root_i] < self.rank[root_j]:
            self.parent[root_i] = root_j
        elif self.rank[root_i] > self.rank[root_j]:
            self.parent[root_j] = root_i
        else:
            self.parent[root_j] = root_i
            self.rank[root_i] += 1

        self.num_components -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)
