# reachability/space.py
import numbers
from typing import Any, Callable, Iterable, List, Optional, Union

from reachability.config import SearchConfig
from reachability.costs import CarryCost, CostFunction, FunctionCost
from reachability.interfaces import ISearchObserver
from reachability.search import CostOrderedSearch, UnorderedSearch
from reachability.transitions import Transition, as_transition
from reachability.types import Cost, CostPriority, Path, SearchOrder, State


class InvalidStateSpaceError(TypeError):
    """状态空间配置不合法 (只在构造时抛出)"""


def _always_valid(state: State) -> bool:
    return True


def _is_composite(value: Any) -> bool:
    """状态和代价必须是组合值类型 (dataclass / tuple / ...), 不能是基础类型"""
    if value is None:
        return False
    return not isinstance(value, (bool, numbers.Number, str, bytes))


class StateSpace:
    """
    状态空间配置: 初始状态 + 转移生成器 + 不变式 (+ 初始代价 + 代价函数)。

    传入 initial_cost 时启用按代价排序的搜索, 此时 check() 忽略 order 参数。
    """

    def __init__(self,
                 initial_state: State,
                 transitions: Callable[[State], Iterable[Any]],
                 invariant: Optional[Callable[[State], bool]] = None,
                 initial_cost: Cost = None,
                 cost_fn: Union[CostFunction, Callable[[State, Cost], Cost], None] = None,
                 priority: Optional[CostPriority] = None,
                 config: Optional[SearchConfig] = None):

        self.config = config if config is not None else SearchConfig()

        # 构造时检查参数类型
        if not _is_composite(initial_state):
            raise InvalidStateSpaceError(
                f"Initial state must be a composite value (dataclass, tuple, ...), "
                f"got {type(initial_state).__name__}")
        if not callable(transitions):
            raise InvalidStateSpaceError("Transition generator must be callable")
        if invariant is not None and not callable(invariant):
            raise InvalidStateSpaceError("Invariant must be callable")

        self.use_cost = initial_cost is not None
        if self.use_cost and not _is_composite(initial_cost):
            raise InvalidStateSpaceError(
                f"Initial cost must be a composite value (dataclass, tuple, ...), "
                f"got {type(initial_cost).__name__}")
        if cost_fn is not None and not self.use_cost:
            raise InvalidStateSpaceError("A cost function requires an initial cost")
        if cost_fn is not None and not callable(cost_fn):
            raise InvalidStateSpaceError("Cost function must be a CostFunction or a callable")

        if priority is None:
            priority = self.config.cost_priority
        if not isinstance(priority, CostPriority):
            raise InvalidStateSpaceError(f"Priority must be a CostPriority, got {priority!r}")

        self.initial_state = initial_state
        self.initial_cost = initial_cost
        self.transition_fn = transitions
        self.invariant = invariant if invariant is not None else _always_valid
        self.priority = priority

        if cost_fn is None:
            self.cost_fn: CostFunction = CarryCost()
        elif isinstance(cost_fn, CostFunction):
            self.cost_fn = cost_fn
        else:
            self.cost_fn = FunctionCost(cost_fn)

    def transitions_for(self, state: State) -> List[Transition]:
        return [as_transition(t) for t in self.transition_fn(state)]

    def describe(self) -> dict:
        return {
            'initial_state': self.initial_state,
            'use_cost': self.use_cost,
            'initial_cost': self.initial_cost,
            'priority': self.priority.name,
        }

    def make_driver(self, order: Optional[SearchOrder] = None):
        if self.use_cost:
            return CostOrderedSearch(self.priority)
        if order is None:
            order = self.config.default_order
        return UnorderedSearch(order)

    def check(self,
              goal: Callable[[State], bool],
              order: Optional[SearchOrder] = None,
              observer: Optional[ISearchObserver] = None) -> List[Path]:
        """
        搜索所有可达的目标路径
        :param goal: 目标谓词
        :param order: 搜索顺序 (默认广度优先, 启用代价时忽略)
        :param observer: 观察者钩子
        :return: 路径列表, 每条路径是从初始状态到目标状态的状态序列
        """
        return self.make_driver(order).search(self, goal, observer)
