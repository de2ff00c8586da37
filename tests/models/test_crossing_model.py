import sys
import os
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from reachability import StateSpace, SearchOrder
from reachability.models import crossing
from reachability.models.crossing import Actor, Position


@pytest.fixture
def space():
    return StateSpace(crossing.INITIAL, crossing.transitions, crossing.is_valid)


def unattended_pair(actors):
    """有人在渡河时 (农夫在船上), 岸上不能留下会出事的一对"""
    travelling = [a for a in Actor if actors[a] is Position.TRAVEL]
    if not travelling:
        return False
    goat = actors[Actor.GOAT]
    if goat is Position.TRAVEL:
        return False
    return goat == actors[Actor.WOLF] or goat == actors[Actor.CABBAGE]


@pytest.mark.parametrize("order", [SearchOrder.BREADTH_FIRST, SearchOrder.DEPTH_FIRST])
def test_all_actors_reach_shore2(space, order):
    solutions = space.check(crossing.is_goal, order=order)
    assert len(solutions) >= 1
    for trace in solutions:
        assert trace[0] == (Position.SHORE1,) * 3
        assert trace[-1] == (Position.SHORE2,) * 3


@pytest.mark.parametrize("order", [SearchOrder.BREADTH_FIRST, SearchOrder.DEPTH_FIRST])
def test_goat_never_left_alone_with_wolf_or_cabbage(space, order):
    for trace in space.check(crossing.is_goal, order=order):
        for actors in trace:
            assert not unattended_pair(actors), crossing.format_actors(actors)
            assert sum(1 for pos in actors if pos is Position.TRAVEL) <= 1


def test_invariant_rules():
    S1, T, S2 = Position.SHORE1, Position.TRAVEL, Position.SHORE2
    assert crossing.is_valid((S1, S1, S1))
    assert crossing.is_valid((S1, T, S1))           # goat travels, cabbage and wolf together is fine
    assert not crossing.is_valid((T, S1, S1))       # cabbage travels, goat stays with wolf
    assert not crossing.is_valid((S1, S1, T))       # wolf travels, goat stays with cabbage
    assert not crossing.is_valid((T, T, S1))        # two passengers
    assert crossing.is_valid((T, S2, S1))


def test_transitions_from_each_position():
    S1, T, S2 = Position.SHORE1, Position.TRAVEL, Position.SHORE2
    successors = {t((S1, T, S2)) for t in crossing.transitions((S1, T, S2))}
    assert successors == {(T, T, S2), (S1, S1, S2), (S1, S2, S2), (S1, T, T)}


def test_format_trace():
    S1, T, S2 = Position.SHORE1, Position.TRAVEL, Position.SHORE2
    text = crossing.format_trace([(S1, S1, S1), (S1, T, S1), (S1, S2, S1)])
    assert text.splitlines() == ["#  CGW", "0: 111", "1: 1~1", "2: 121"]
