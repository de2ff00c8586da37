# reachability/search/__init__.py

from .frontiers import FIFOFrontier, LIFOFrontier, PriorityFrontier, make_frontier
from .visited import VisitedSet
from .trace import TraceGraph
from .base import SearchBase, SearchStats
from .unordered import UnorderedSearch
from .cost_ordered import CostOrderedSearch

__all__ = [
    "FIFOFrontier",
    "LIFOFrontier",
    "PriorityFrontier",
    "make_frontier",
    "VisitedSet",
    "TraceGraph",
    "SearchBase",
    "SearchStats",
    "UnorderedSearch",
    "CostOrderedSearch",
]
