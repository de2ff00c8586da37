# reachability/costs/__init__.py

from .base import CostFunction
from .function_cost import FunctionCost, CarryCost
from .depth_cost import DepthCost, PathCost

__all__ = ['CostFunction', 'FunctionCost', 'CarryCost', 'DepthCost', 'PathCost']
