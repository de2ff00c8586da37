# reachability/transitions.py
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional

from reachability.types import State


class Transition(ABC):
    """
    状态转移接口 (Strategy Interface)
    apply() 拿到的是当前状态的一份独立拷贝, 可以原地修改后返回,
    也可以返回一个新的状态对象。返回 None 时以修改后的拷贝作为后继。
    """
    @abstractmethod
    def apply(self, state: State) -> Optional[State]:
        pass

    def __call__(self, state: State) -> State:
        result = self.apply(state)
        return state if result is None else result


class FunctionTransition(Transition):
    """把普通函数/lambda 包装成 Transition"""
    def __init__(self, fn: Callable[[State], Optional[State]], label: str = ""):
        self.fn = fn
        self.label = label or getattr(fn, "__name__", "transition")

    def apply(self, state: State) -> Optional[State]:
        return self.fn(state)

    def __repr__(self):
        return f"FunctionTransition({self.label})"


def as_transition(item: Any) -> Transition:
    if isinstance(item, Transition):
        return item
    if callable(item):
        return FunctionTransition(item)
    raise TypeError(f"Transition must be a Transition or a callable, got {type(item).__name__}")


def successors(generator: Callable[[State], Iterable[Any]]) -> Callable[[State], List[Transition]]:
    """
    通用后继生成器: 把 "state -> 若干函数" 的生成函数包装成
    "state -> List[Transition]"。
    """
    def generate(state: State) -> List[Transition]:
        return [as_transition(t) for t in generator(state)]

    generate.__name__ = getattr(generator, "__name__", "successors")
    return generate
