# reachability/search/visited.py
from typing import List, Set

from reachability.types import State


class VisitedSet:
    """
    已展开状态集合。
    可哈希的状态放进 set (O(1) 查询); 不可哈希的状态 (例如普通可变 dataclass)
    退化为按 == 逐个比较的列表。
    """
    def __init__(self):
        self._hashed: Set[State] = set()
        self._unhashable: List[State] = []

    def contains(self, state: State) -> bool:
        try:
            return state in self._hashed
        except TypeError:
            return any(state == seen for seen in self._unhashable)

    def mark_visited(self, state: State):
        try:
            self._hashed.add(state)
        except TypeError:
            if not any(state == seen for seen in self._unhashable):
                self._unhashable.append(state)

    def __contains__(self, state: State) -> bool:
        return self.contains(state)

    def __len__(self):
        return len(self._hashed) + len(self._unhashable)
