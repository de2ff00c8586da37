# reachability/search/cost_ordered.py
from reachability.search.base import SearchBase
from reachability.search.frontiers import PriorityFrontier
from reachability.types import CostPriority, Cost, Node, State


class CostOrderedSearch(SearchBase):
    """
    按代价排序展开的搜索。

    注意: 这里不是最短路求解器。第一次弹出目标节点后搜索并不会停止,
    而是继续直到 Frontier 为空, 因此后面可能还会报告代价更高的目标路径,
    结果也不保证按代价单调排列。这是有意为之: 引擎枚举的是
    在给定展开顺序下所有可达的目标路径。
    """
    name = "CostOrdered"

    def __init__(self, priority: CostPriority = CostPriority.ASCENDING):
        super().__init__()
        self.priority = priority

    def _make_frontier(self, space):
        return PriorityFrontier(self.priority)

    def _root_cost(self, space) -> Cost:
        return space.initial_cost

    def _child_cost(self, space, state: State, parent: Node) -> Cost:
        return space.cost_fn(state, parent.cost)
