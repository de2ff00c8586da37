# reachability/costs/depth_cost.py
from dataclasses import dataclass, replace
from reachability.types import State
from .base import CostFunction

@dataclass(frozen=True, order=True)
class PathCost:
    """
    按字典序比较的组合代价: 先比较 depth, 再比较 extra。
    """
    depth: int = 0   # 转移次数
    extra: int = 0   # 调用方自定义的附加代价


class DepthCost(CostFunction):
    """
    累积转移次数。
    Cost = parent.depth + 1
    """
    def combine(self, state: State, parent_cost: PathCost) -> PathCost:
        return replace(parent_cost, depth=parent_cost.depth + 1)
