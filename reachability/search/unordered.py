# reachability/search/unordered.py
from reachability.search.base import SearchBase
from reachability.search.frontiers import make_frontier
from reachability.types import SearchOrder


class UnorderedSearch(SearchBase):
    """
    不考虑代价的搜索: 广度优先 (FIFO) 或深度优先 (LIFO)。
    广度优先时, 到达某个目标状态的第一条路径转移次数最少。
    """
    def __init__(self, order: SearchOrder = SearchOrder.BREADTH_FIRST):
        super().__init__()
        if not isinstance(order, SearchOrder):
            raise ValueError(f"Invalid search order supplied: {order!r}")
        self.order = order
        self.name = "BFS" if order is SearchOrder.BREADTH_FIRST else "DFS"

    def _make_frontier(self, space):
        return make_frontier(self.order)
