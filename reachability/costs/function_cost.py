# reachability/costs/function_cost.py
from typing import Callable
from reachability.types import State, Cost
from .base import CostFunction

class FunctionCost(CostFunction):
    """把 (state, parent_cost) -> cost 形式的普通函数包装成 CostFunction"""
    def __init__(self, fn: Callable[[State, Cost], Cost]):
        self.fn = fn

    def combine(self, state: State, parent_cost: Cost) -> Cost:
        return self.fn(state, parent_cost)


class CarryCost(CostFunction):
    """不改变代价, 直接沿用父节点代价"""
    def combine(self, state: State, parent_cost: Cost) -> Cost:
        return parent_cost
