import sys
import os
from collections import namedtuple

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reachability import (StateSpace, InvalidStateSpaceError, SearchConfig, SearchOrder,
                          CostPriority, Transition, FunctionTransition, successors)
from reachability.costs import PathCost, DepthCost, CarryCost, FunctionCost
from reachability.search import UnorderedSearch, CostOrderedSearch
from reachability.transitions import as_transition

Point = namedtuple("Point", ["x", "y"])


def no_moves(state):
    return []


@pytest.mark.parametrize("bad_state", [None, 3, 2.5, True, "state", b"raw"])
def test_primitive_initial_state_is_rejected(bad_state):
    with pytest.raises(InvalidStateSpaceError):
        StateSpace(bad_state, no_moves)


@pytest.mark.parametrize("bad_cost", [0, 1.0, "cheap"])
def test_primitive_initial_cost_is_rejected(bad_cost):
    with pytest.raises(InvalidStateSpaceError):
        StateSpace(Point(0, 0), no_moves, initial_cost=bad_cost, cost_fn=DepthCost())


def test_configuration_error_is_a_type_error():
    with pytest.raises(TypeError):
        StateSpace(42, no_moves)


def test_non_callable_arguments_are_rejected():
    with pytest.raises(InvalidStateSpaceError):
        StateSpace(Point(0, 0), [])
    with pytest.raises(InvalidStateSpaceError):
        StateSpace(Point(0, 0), no_moves, invariant=True)
    with pytest.raises(InvalidStateSpaceError):
        StateSpace(Point(0, 0), no_moves, initial_cost=PathCost(), cost_fn="depth")


def test_cost_function_requires_initial_cost():
    with pytest.raises(InvalidStateSpaceError):
        StateSpace(Point(0, 0), no_moves, cost_fn=DepthCost())


def test_priority_must_be_enum():
    with pytest.raises(InvalidStateSpaceError):
        StateSpace(Point(0, 0), no_moves, initial_cost=PathCost(), priority="ascending")


def test_cost_mode_selection_and_defaults():
    plain = StateSpace(Point(0, 0), no_moves)
    assert not plain.use_cost
    assert plain.invariant(Point(99, 99))
    assert isinstance(plain.make_driver(), UnorderedSearch)
    assert plain.make_driver().order is SearchOrder.BREADTH_FIRST

    costed = StateSpace(Point(0, 0), no_moves, initial_cost=PathCost())
    assert costed.use_cost
    assert isinstance(costed.cost_fn, CarryCost)
    assert isinstance(costed.make_driver(), CostOrderedSearch)

    wrapped = StateSpace(Point(0, 0), no_moves, initial_cost=(0,), cost_fn=lambda s, c: c)
    assert isinstance(wrapped.cost_fn, FunctionCost)


def test_config_provides_defaults():
    config = SearchConfig(default_order=SearchOrder.DEPTH_FIRST, cost_priority=CostPriority.DESCENDING)
    plain = StateSpace(Point(0, 0), no_moves, config=config)
    assert plain.make_driver().order is SearchOrder.DEPTH_FIRST

    costed = StateSpace(Point(0, 0), no_moves, initial_cost=PathCost(), config=config)
    assert costed.priority is CostPriority.DESCENDING
    assert costed.make_driver().priority is CostPriority.DESCENDING

    explicit = StateSpace(Point(0, 0), no_moves, initial_cost=PathCost(),
                          priority=CostPriority.ASCENDING, config=config)
    assert explicit.priority is CostPriority.ASCENDING


def test_describe_reports_space_info():
    info = StateSpace(Point(1, 2), no_moves, initial_cost=PathCost()).describe()
    assert info['initial_state'] == Point(1, 2)
    assert info['use_cost'] is True
    assert info['priority'] == "ASCENDING"


class StepRight(Transition):
    def apply(self, state):
        return Point(state.x + 1, state.y)


def test_transition_objects_and_callables():
    assert StepRight()(Point(0, 0)) == Point(1, 0)
    wrapped = as_transition(lambda p: Point(p.x, p.y + 1))
    assert isinstance(wrapped, FunctionTransition)
    assert wrapped(Point(0, 0)) == Point(0, 1)
    step = StepRight()
    assert as_transition(step) is step
    with pytest.raises(TypeError):
        as_transition(42)


def test_transition_returning_none_keeps_mutated_copy():
    box = {"n": 0}
    bump = FunctionTransition(lambda d: d.update(n=d["n"] + 1), "bump")
    assert bump(box) == {"n": 1}
    assert bump.label == "bump"


def test_successors_wraps_plain_generators():
    def moves(p):
        return [lambda q: Point(q.x + 1, q.y), lambda q: Point(q.x, q.y + 1)]

    generate = successors(moves)
    result = generate(Point(0, 0))
    assert all(isinstance(t, Transition) for t in result)
    assert [t(Point(0, 0)) for t in result] == [Point(1, 0), Point(0, 1)]
    assert generate.__name__ == "moves"

    space = StateSpace(Point(0, 0), successors(moves), lambda p: p.x + p.y <= 2)
    paths = space.check(lambda p: p == Point(1, 1))
    assert len(paths) == 2
    assert all(len(path) == 3 for path in paths)


def test_transition_errors_propagate():
    def explode(p):
        raise RuntimeError("boom")

    space = StateSpace(Point(0, 0), lambda p: [explode])
    with pytest.raises(RuntimeError):
        space.check(lambda p: False)
