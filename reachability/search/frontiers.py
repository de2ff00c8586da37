# reachability/search/frontiers.py
import heapq
from collections import deque
from typing import Any, List, Tuple

from reachability.types import CostPriority, Node, SearchOrder


class FIFOFrontier:
    """广度优先: 队尾入队, 队首出队"""
    def __init__(self):
        self.q = deque()
    def push(self, node: Node): self.q.append(node)
    def pop(self) -> Node: return self.q.popleft()
    def is_empty(self) -> bool: return not self.q
    def __len__(self): return len(self.q)


class LIFOFrontier:
    """深度优先: 栈顶入栈, 栈顶出栈"""
    def __init__(self):
        self.q = []
    def push(self, node: Node): self.q.append(node)
    def pop(self) -> Node: return self.q.pop()
    def is_empty(self) -> bool: return not self.q
    def __len__(self): return len(self.q)


class _Descending:
    """反转比较方向的 key 包装, 使 heapq 的最小堆变成按代价从大到小弹出"""
    __slots__ = ("cost",)

    def __init__(self, cost):
        self.cost = cost

    def __eq__(self, other):
        return self.cost == other.cost

    def __lt__(self, other):
        return other.cost < self.cost


class PriorityFrontier:
    """
    按代价排序的 Frontier (heapq 最小堆)。
    ASCENDING 时弹出代价最小的节点, DESCENDING 时弹出代价最大的节点。
    代价相同的节点按入队顺序弹出, 但调用方不应依赖这一点。
    """
    def __init__(self, priority: CostPriority = CostPriority.ASCENDING):
        self.priority = priority
        self.h: List[Tuple[Any, int, Node]] = []
        self.counter = 0  # tie-breaker, 避免比较 Node 本身

    def push(self, node: Node):
        k = node.cost
        if self.priority is CostPriority.DESCENDING:
            k = _Descending(k)
        self.counter += 1
        heapq.heappush(self.h, (k, self.counter, node))

    def pop(self) -> Node:
        return heapq.heappop(self.h)[2]

    def is_empty(self) -> bool: return not self.h
    def __len__(self): return len(self.h)


def make_frontier(order: SearchOrder):
    if order is SearchOrder.BREADTH_FIRST:
        return FIFOFrontier()
    if order is SearchOrder.DEPTH_FIRST:
        return LIFOFrontier()
    raise ValueError(f"Invalid search order supplied: {order!r}")
