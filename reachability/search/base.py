# reachability/search/base.py
import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Callable, List, Optional

from reachability.interfaces import ISearchObserver
from reachability.search.trace import TraceGraph
from reachability.search.visited import VisitedSet
from reachability.types import Cost, Node, Path, State
from reachability.visualization.observers import EfficientObserver


@dataclass
class SearchStats:
    """一次搜索的统计数据"""
    expansions: int = 0     # 展开的状态数 (= 已访问集合大小)
    pushes: int = 0         # 进入 Frontier 的节点数 (含根节点)
    rejected: int = 0       # 被不变式拒绝的候选状态数
    goals: int = 0          # 找到的目标路径数
    max_frontier: int = 0   # Frontier 的峰值长度


class SearchBase(ABC):
    """
    所有搜索驱动的抽象基类
    子类只决定 Frontier 的类型以及节点代价的计算方式, 主循环在这里实现:

    1. 用初始状态构造根节点放入 Frontier
    2. 弹出节点; 满足目标则回溯路径加入结果 (不终止, 也不跳过展开)
    3. 若状态未访问过: 标记, 生成转移, 对每个转移作用于状态的独立拷贝,
       通过不变式的候选状态作为子节点放入 Frontier
    4. Frontier 为空时返回所有结果
    """
    name = "Search"

    def __init__(self):
        self.stats = SearchStats()

    @abstractmethod
    def _make_frontier(self, space):
        pass

    def _root_cost(self, space) -> Cost:
        return None

    def _child_cost(self, space, state: State, parent: Node) -> Cost:
        return None

    def search(self,
               space,
               goal: Callable[[State], bool],
               observer: Optional[ISearchObserver] = None) -> List[Path]:
        """
        执行搜索
        :param space: StateSpace (初始状态、转移生成器、不变式、代价函数)
        :param goal: 目标谓词, 对每个弹出的节点检查
        :param observer: 观察者钩子 (用于记录/调试搜索过程)
        :return: 路径列表, 按目标节点弹出的顺序排列 (找不到时为空列表)
        """
        if observer is None:
            observer = EfficientObserver()
        observer.set_space_info(space.describe())

        self.stats = SearchStats()
        result: List[Path] = []

        if not space.invariant(space.initial_state):
            observer.record_rejected(space.initial_state)
            observer.log(f"[{self.name}] Initial state rejected by invariant.", level='WARN')
            self.stats.rejected += 1
            return result

        trace = TraceGraph()
        visited = VisitedSet()
        frontier = self._make_frontier(space)

        root = trace.new_node(space.initial_state, None, self._root_cost(space))
        frontier.push(root)
        self.stats.pushes += 1
        observer.record_frontier_push(root, len(frontier))
        observer.log(f"[{self.name}] Start searching...", level='INFO')

        while not frontier.is_empty():
            self.stats.max_frontier = max(self.stats.max_frontier, len(frontier))
            current = frontier.pop()

            # A. 目标检查
            if goal(current.state):
                path = trace.reconstruct_path(current)
                result.append(path)
                self.stats.goals += 1
                observer.record_goal(path)

            # B. 已展开过的状态不再展开
            if visited.contains(current.state):
                continue
            visited.mark_visited(current.state)
            self.stats.expansions += 1
            observer.record_expansion(current)

            # C. 生成后继
            for transition in space.transitions_for(current.state):
                successor = transition(copy.deepcopy(current.state))

                if not space.invariant(successor):
                    self.stats.rejected += 1
                    observer.record_rejected(successor)
                    continue

                child = trace.new_node(successor, current, self._child_cost(space, successor, current))
                frontier.push(child)
                self.stats.pushes += 1
                observer.record_frontier_push(child, len(frontier))
                observer.record_edge(current.state, successor)

        observer.log(f"[{self.name}] Frontier is empty, {len(result)} goal path(s) found.",
                     level='INFO', payload=asdict(self.stats))
        return result
