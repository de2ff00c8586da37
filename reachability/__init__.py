# reachability/__init__.py

from .types import SearchOrder, CostPriority, Node, State, Cost, Path
from .config import SearchConfig
from .transitions import Transition, FunctionTransition, successors
from .space import StateSpace, InvalidStateSpaceError

__all__ = [
    "SearchOrder",
    "CostPriority",
    "Node",
    "State",
    "Cost",
    "Path",
    "SearchConfig",
    "Transition",
    "FunctionTransition",
    "successors",
    "StateSpace",
    "InvalidStateSpaceError",
]
