# reachability/search/trace.py
from typing import List, Optional

from reachability.types import Cost, Node, Path, State


class TraceGraph:
    """
    记录搜索树的节点数组 (arena)。
    每个节点保存父节点在数组中的下标, 根节点的 parent_index 为 None。
    节点创建后不再修改, 下标在一次搜索内保持稳定。
    """
    def __init__(self):
        self.nodes: List[Node] = []

    def new_node(self, state: State, parent: Optional[Node] = None, cost: Cost = None) -> Node:
        if parent is None:
            parent_index, depth = None, 0
        else:
            parent_index, depth = parent.index, parent.depth + 1
        node = Node(state=state, cost=cost, parent_index=parent_index,
                    index=len(self.nodes), depth=depth)
        self.nodes.append(node)
        return node

    def reconstruct_path(self, node: Node) -> Path:
        """从节点沿父节点回溯到根, 再反转得到 初始状态 -> node.state 的路径"""
        if self.nodes[node.index] is not node:
            raise ValueError(f"Node {node.index} does not belong to this trace graph")
        path = []
        current = node
        while current is not None:
            path.append(current.state)
            current = None if current.parent_index is None else self.nodes[current.parent_index]
        return path[::-1]

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __len__(self):
        return len(self.nodes)
