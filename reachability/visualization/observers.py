import logging
import time
import os
from typing import Any, List, Tuple, Dict, Optional
from reachability.config import SearchConfig
from reachability.interfaces import ISearchObserver

class EfficientObserver(ISearchObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def set_space_info(self, space_info: Any): pass
    def record_frontier_push(self, node: Any, frontier_size: int = 0): pass
    def record_expansion(self, node: Any): pass
    def record_edge(self, start_state: Any, end_state: Any): pass
    def record_rejected(self, state: Any): pass
    def record_goal(self, path: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(ISearchObserver):
    """
    实验模式
    记录 Frontier、扩展节点、被拒绝状态等关键算法执行内容。
    这些信息主要用于算法的比较和可视化 (Replay)。
    """
    def __init__(self):
        # 存储格式: List[Tuple[node_index, depth, frontier_size]]
        self.frontier_history: List[Tuple[int, int, int]] = []
        # 存储格式: List[Node]
        self.expanded_nodes: List[Any] = []
        # 存储格式: List[Tuple[parent_state, child_state]]
        self.edges: List[Tuple[Any, Any]] = []
        self.rejected_states: List[Any] = []
        self.goal_paths: List[List[Any]] = []
        self.space_info = None

    def set_space_info(self, space_info: Any):
        self.space_info = space_info

    def record_frontier_push(self, node: Any, frontier_size: int = 0):
        index = getattr(node, 'index', len(self.frontier_history))
        depth = getattr(node, 'depth', 0)
        self.frontier_history.append((index, depth, frontier_size))

    def record_expansion(self, node: Any):
        self.expanded_nodes.append(node)

    def record_edge(self, start_state: Any, end_state: Any):
        self.edges.append((start_state, end_state))

    def record_rejected(self, state: Any):
        self.rejected_states.append(state)

    def record_goal(self, path: Any):
        self.goal_paths.append(list(path))

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只关心结果和可视化, 控制台保持安静
        pass


class DebugObserver(ISearchObserver):
    """
    Debug 模式
    用于详细分析一次搜索为什么没有找到解或者展开了过多的状态。
    将详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/search_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"search_debug_{timestamp}.log")

        self.logger = logging.getLogger(f"SearchDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def set_space_info(self, space_info: Any):
        self.viz_observer.set_space_info(space_info)
        self.logger.info(f"State space: {space_info}")

    def record_frontier_push(self, node: Any, frontier_size: int = 0):
        self.viz_observer.record_frontier_push(node, frontier_size)

    def record_expansion(self, node: Any):
        self.viz_observer.record_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def record_edge(self, start_state: Any, end_state: Any):
        self.viz_observer.record_edge(start_state, end_state)

    def record_rejected(self, state: Any):
        self.viz_observer.record_rejected(state)
        self.logger.debug(f"Rejected by invariant: {state}")

    def record_goal(self, path: Any):
        self.viz_observer.record_goal(path)
        self.logger.info(f"Goal reached, path length {len(path)}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Proxy properties for ExperimentObserver compatibility
    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def frontier_history(self): return self.viz_observer.frontier_history
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def rejected_states(self): return self.viz_observer.rejected_states
    @property
    def goal_paths(self): return self.viz_observer.goal_paths
    @property
    def space_info(self): return self.viz_observer.space_info


def make_observer(config: SearchConfig) -> ISearchObserver:
    """根据配置选择观察者: debug_mode 打开时写日志文件, 否则不记录"""
    if config.debug_mode:
        return DebugObserver(log_dir=config.log_dir)
    return EfficientObserver()
