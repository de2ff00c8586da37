import sys
import os
import pytest

# --- 路径设置 (确保能导入 reachability) ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from reachability.costs import PathCost
from reachability.search.frontiers import FIFOFrontier, LIFOFrontier, PriorityFrontier, make_frontier
from reachability.search.trace import TraceGraph
from reachability.types import CostPriority, SearchOrder


@pytest.fixture
def nodes():
    trace = TraceGraph()
    root = trace.new_node(("root",), None, PathCost(0, 0))
    return [
        root,
        trace.new_node(("a",), root, PathCost(1, 5)),
        trace.new_node(("b",), root, PathCost(1, 2)),
        trace.new_node(("c",), root, PathCost(0, 9)),
    ]


def test_fifo_pops_in_insertion_order(nodes):
    frontier = FIFOFrontier()
    for n in nodes:
        frontier.push(n)
    assert len(frontier) == 4
    assert [frontier.pop() for _ in range(4)] == nodes
    assert frontier.is_empty()


def test_lifo_pops_most_recent_first(nodes):
    frontier = LIFOFrontier()
    for n in nodes:
        frontier.push(n)
    assert [frontier.pop() for _ in range(4)] == nodes[::-1]
    assert frontier.is_empty()


def test_priority_ascending_pops_smallest_cost(nodes):
    frontier = PriorityFrontier(CostPriority.ASCENDING)
    for n in nodes:
        frontier.push(n)
    costs = [frontier.pop().cost for _ in range(4)]
    assert costs == [PathCost(0, 0), PathCost(0, 9), PathCost(1, 2), PathCost(1, 5)]


def test_priority_descending_pops_largest_cost(nodes):
    frontier = PriorityFrontier(CostPriority.DESCENDING)
    for n in nodes:
        frontier.push(n)
    costs = [frontier.pop().cost for _ in range(4)]
    assert costs == [PathCost(1, 5), PathCost(1, 2), PathCost(0, 9), PathCost(0, 0)]


def test_priority_handles_equal_costs_without_comparing_nodes():
    trace = TraceGraph()
    root = trace.new_node({"unorderable": 1}, None, (1, 1))
    frontier = PriorityFrontier()
    for _ in range(3):
        frontier.push(trace.new_node({"unorderable": 2}, root, (1, 1)))
    assert len(frontier) == 3
    assert frontier.pop().state == {"unorderable": 2}
    assert len(frontier) == 2


def test_pop_from_empty_frontier_raises():
    with pytest.raises(IndexError):
        FIFOFrontier().pop()
    with pytest.raises(IndexError):
        LIFOFrontier().pop()
    with pytest.raises(IndexError):
        PriorityFrontier().pop()


def test_make_frontier_maps_search_order():
    assert isinstance(make_frontier(SearchOrder.BREADTH_FIRST), FIFOFrontier)
    assert isinstance(make_frontier(SearchOrder.DEPTH_FIRST), LIFOFrontier)
    with pytest.raises(ValueError):
        make_frontier("sideways")
