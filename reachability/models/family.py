# reachability/models/family.py
"""
日本家庭过河问题 (Japanese river crossing puzzle)。

一条船 (容量 2) 和八个人: 母亲、父亲、两个女儿、两个儿子、警察和犯人。
规则:
- 船上最多两人, 只有有人在船上时船才能出发
- 孩子不能单独乘船, 也不能和其他孩子或犯人同船
- 警察不在时, 犯人不能和任何家庭成员在一起; 犯人不能单独乘船
- 母亲不在时, 女儿不能和父亲在一起; 父亲不在时, 儿子不能和母亲在一起
"""
from dataclasses import dataclass, replace, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from reachability.costs import CostFunction, DepthCost, PathCost
from reachability.transitions import FunctionTransition
from reachability.types import Path


class Person(IntEnum):
    MOTHER = 0
    FATHER = 1
    DAUGHTER1 = 2
    DAUGHTER2 = 3
    SON1 = 4
    SON2 = 5
    POLICEMAN = 6
    PRISONER = 7


class PersonPos(Enum):
    SHORE1 = "sh1"
    ONBOARD = "~~~"
    SHORE2 = "SH2"


class BoatPos(Enum):
    SHORE1 = "sh1"
    TRAVEL = "trv"
    SHORE2 = "SH2"


CHILDREN = (Person.DAUGHTER1, Person.DAUGHTER2, Person.SON1, Person.SON2)
FAMILY = CHILDREN + (Person.MOTHER, Person.FATHER)

_LABELS = {
    Person.DAUGHTER1: "d1", Person.DAUGHTER2: "d2",
    Person.SON1: "s1", Person.SON2: "s2",
}


@dataclass(frozen=True)
class Boat:
    pos: BoatPos = BoatPos.SHORE1
    capacity: int = 2
    passengers: int = 0


@dataclass(frozen=True)
class FamilyState:
    boat: Boat = field(default_factory=Boat)
    persons: Tuple[PersonPos, ...] = (PersonPos.SHORE1,) * len(Person)

    # 不可变对象, 拷贝时直接返回自身
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def with_person(self, who: int, pos: PersonPos, passengers_delta: int = 0) -> "FamilyState":
        persons = list(self.persons)
        persons[who] = pos
        boat = replace(self.boat, passengers=self.boat.passengers + passengers_delta)
        return FamilyState(boat=boat, persons=tuple(persons))


def _depart(state: FamilyState) -> FamilyState:
    return replace(state, boat=replace(state.boat, pos=BoatPos.TRAVEL))


def _arrive(state: FamilyState, shore: BoatPos, person_pos: PersonPos) -> FamilyState:
    persons = tuple(person_pos if p is PersonPos.ONBOARD else p for p in state.persons)
    return FamilyState(boat=replace(state.boat, pos=shore, passengers=0), persons=persons)


def transitions(s: FamilyState) -> List[FunctionTransition]:
    """返回当前状态下可用的转移列表"""
    res = []
    if s.boat.pos is BoatPos.TRAVEL:
        res.append(FunctionTransition(lambda st: _arrive(st, BoatPos.SHORE1, PersonPos.SHORE1), "arrive shore1"))
        res.append(FunctionTransition(lambda st: _arrive(st, BoatPos.SHORE2, PersonPos.SHORE2), "arrive shore2"))
    elif s.boat.passengers > 0:
        res.append(FunctionTransition(_depart, "depart"))

    for who, pos in enumerate(s.persons):
        name = Person(who).name.lower()
        if pos is PersonPos.SHORE1 and s.boat.pos is BoatPos.SHORE1:
            res.append(FunctionTransition(
                lambda st, who=who: st.with_person(who, PersonPos.ONBOARD, +1), f"{name} boards"))
        elif pos is PersonPos.SHORE2 and s.boat.pos is BoatPos.SHORE2:
            res.append(FunctionTransition(
                lambda st, who=who: st.with_person(who, PersonPos.ONBOARD, +1), f"{name} boards"))
        elif pos is PersonPos.ONBOARD and s.boat.pos is BoatPos.SHORE1:
            res.append(FunctionTransition(
                lambda st, who=who: st.with_person(who, PersonPos.SHORE1, -1), f"{name} leaves to shore1"))
        elif pos is PersonPos.ONBOARD and s.boat.pos is BoatPos.SHORE2:
            res.append(FunctionTransition(
                lambda st, who=who: st.with_person(who, PersonPos.SHORE2, -1), f"{name} leaves to shore2"))
    return res


def violation(s: FamilyState) -> Optional[str]:
    """返回状态违反的规则, 合法状态返回 None"""
    p = s.persons

    def onboard(who):
        return p[who] is PersonPos.ONBOARD

    if s.boat.passengers > s.boat.capacity:
        return "boat overload"

    if s.boat.pos is BoatPos.TRAVEL:
        # 只检查第一个在船上的孩子: 有第二个孩子在船上时第一个检查就已经失败
        for child in CHILDREN:
            if onboard(child):
                others = [c for c in CHILDREN if c is not child] + [Person.PRISONER]
                if s.boat.passengers == 1 or any(onboard(o) for o in others):
                    return f"{_LABELS[child]} travel alone"
                break
        if p[Person.PRISONER] != p[Person.POLICEMAN]:
            if any(p[member] == p[Person.PRISONER] for member in FAMILY):
                return "pr with family"
        if onboard(Person.PRISONER) and s.boat.passengers < 2:
            return "pr on boat"

    mother, father = p[Person.MOTHER], p[Person.FATHER]
    for daughter in (Person.DAUGHTER1, Person.DAUGHTER2):
        if p[daughter] == father and p[daughter] != mother:
            return f"{_LABELS[daughter]} with f"
    for son in (Person.SON1, Person.SON2):
        if p[son] == mother and p[son] != father:
            return f"{_LABELS[son]} with m"
    return None


def river_crossing_valid(s: FamilyState) -> bool:
    return violation(s) is None


def goal(s: FamilyState) -> bool:
    return all(pos is PersonPos.SHORE2 for pos in s.persons)


class NoiseCost(CostFunction):
    """
    孩子们在 shore1 上等得无聊会吵闹, 留在 shore1 的儿子每一步都增加噪声。
    权重更高的儿子会被优先送过河。
    """
    def __init__(self, son1_weight: int = 2, son2_weight: int = 1):
        self.son1_weight = son1_weight
        self.son2_weight = son2_weight

    def combine(self, state: FamilyState, parent_cost: PathCost) -> PathCost:
        noise = parent_cost.extra
        if state.persons[Person.SON1] is PersonPos.SHORE1:
            noise += self.son1_weight
        if state.persons[Person.SON2] is PersonPos.SHORE1:
            noise += self.son2_weight
        return replace(parent_cost, extra=noise)


# 三种代价配置: 按深度、儿子1 更吵、儿子2 更吵
COST_PROFILES = {
    "depth": DepthCost(),
    "noise-son1": NoiseCost(son1_weight=2, son2_weight=1),
    "noise-son2": NoiseCost(son1_weight=1, son2_weight=2),
}

HEADER = "Boat,     Mothr,Fathr,Daug1,Daug2,Son1, Son2, Polic,Prisn"


def format_state(s: FamilyState) -> str:
    boat = f"{{{s.boat.pos.value},{s.boat.passengers},{s.boat.capacity}}}"
    persons = ",".join(f"{{{pos.value}}}" for pos in s.persons)
    return f"{boat},{persons}"


def format_trace(trace: Path) -> str:
    return "\n".join(["Solution:", HEADER] + [format_state(s) for s in trace])
