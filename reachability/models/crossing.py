# reachability/models/crossing.py
"""
山羊、卷心菜和狼的过河问题。

农夫没有单独建模: 他总是和正在渡河 (TRAVEL) 的那一个角色一起在船上,
因此有角色在渡河时, 另外两个角色就被留在岸上无人看管。
"""
from enum import Enum, IntEnum
from typing import List, Tuple

from reachability.transitions import FunctionTransition
from reachability.types import Path


class Actor(IntEnum):
    CABBAGE = 0
    GOAT = 1
    WOLF = 2


class Position(Enum):
    SHORE1 = "1"
    TRAVEL = "~"
    SHORE2 = "2"


# 三个角色的位置, 按 Actor 的顺序排列
Actors = Tuple[Position, Position, Position]

INITIAL: Actors = (Position.SHORE1, Position.SHORE1, Position.SHORE1)


def _move(actors: Actors, actor: int, position: Position) -> Actors:
    moved = list(actors)
    moved[actor] = position
    return tuple(moved)


def transitions(actors: Actors) -> List[FunctionTransition]:
    res = []
    for i, pos in enumerate(actors):
        name = Actor(i).name.lower()
        if pos is Position.TRAVEL:
            res.append(FunctionTransition(lambda s, i=i: _move(s, i, Position.SHORE1), f"{name} -> shore1"))
            res.append(FunctionTransition(lambda s, i=i: _move(s, i, Position.SHORE2), f"{name} -> shore2"))
        else:
            res.append(FunctionTransition(lambda s, i=i: _move(s, i, Position.TRAVEL), f"{name} boards"))
    return res


def is_valid(actors: Actors) -> bool:
    # 船上只能有一位乘客
    if sum(1 for pos in actors if pos is Position.TRAVEL) > 1:
        return False
    # 卷心菜在渡河时, 山羊和狼不能留在一起
    if actors[Actor.GOAT] == actors[Actor.WOLF] and actors[Actor.CABBAGE] is Position.TRAVEL:
        return False
    # 狼在渡河时, 山羊和卷心菜不能留在一起
    if actors[Actor.GOAT] == actors[Actor.CABBAGE] and actors[Actor.WOLF] is Position.TRAVEL:
        return False
    return True


def is_goal(actors: Actors) -> bool:
    return all(pos is Position.SHORE2 for pos in actors)


def format_actors(actors: Actors) -> str:
    return "".join(pos.value for pos in actors)


def format_trace(trace: Path) -> str:
    lines = ["#  CGW"]
    for i, actors in enumerate(trace):
        lines.append(f"{i}: {format_actors(actors)}")
    return "\n".join(lines)
