# reachability/costs/base.py
from abc import ABC, abstractmethod
from reachability.types import State, Cost

class CostFunction(ABC):
    """
    代价函数基类 (Strategy Interface)
    根据候选后继状态和父节点代价, 计算候选节点的代价。
    """
    @abstractmethod
    def combine(self, state: State, parent_cost: Cost) -> Cost:
        """
        :param state: 已通过不变式检查的候选后继状态
        :param parent_cost: 父节点的代价
        :return: 新代价 (必须与 parent_cost 同类型, 且可比较大小)
        """
        pass

    def __call__(self, state: State, parent_cost: Cost) -> Cost:
        return self.combine(state, parent_cost)
