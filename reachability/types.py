# reachability/types.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

# State / Cost 由调用方定义, 引擎只要求值相等和可复制
State = Any
Cost = Any
Path = List[State]


class SearchOrder(Enum):
    BREADTH_FIRST = 0
    DEPTH_FIRST = 1


class CostPriority(Enum):
    # 代价越小越先展开
    ASCENDING = 0
    # 代价越大越先展开
    DESCENDING = 1


@dataclass(frozen=True)
class Node:
    """搜索树节点 (存放在 TraceGraph 的数组里, 通过下标引用父节点)"""
    state: State
    cost: Cost
    parent_index: Optional[int]
    index: int
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent_index is None
