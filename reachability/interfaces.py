from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class ISearchObserver(ABC):
    """
    搜索观察者接口
    用于解耦搜索算法与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录关键数据用于可视化
    3. Debug: 详细日志记录用于问题排查
    """

    @abstractmethod
    def set_space_info(self, space_info: Any):
        """设置状态空间信息 (初始状态、是否使用代价等)"""
        pass

    @abstractmethod
    def record_frontier_push(self, node: Any, frontier_size: int = 0):
        """记录加入 Frontier 的节点"""
        pass

    @abstractmethod
    def record_expansion(self, node: Any):
        """记录当前正在扩展的节点"""
        pass

    @abstractmethod
    def record_edge(self, start_state: Any, end_state: Any):
        """记录搜索树的一条边"""
        pass

    @abstractmethod
    def record_rejected(self, state: Any):
        """记录被不变式拒绝的候选状态"""
        pass

    @abstractmethod
    def record_goal(self, path: Any):
        """记录找到的一条到达目标的路径"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如状态详情、统计数据等)
        """
        pass
