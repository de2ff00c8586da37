# 绘图逻辑 (Matplotlib)

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional
from reachability.visualization.observers import ExperimentObserver

class SearchPlotter:
    def __init__(self, observer: ExperimentObserver, title: str = "State Space Search"):
        self.observer = observer
        self.title = title

    def plot(self, save_path: Optional[str] = None, show: bool = False):
        """
        根据 observer 里的历史数据画出搜索过程:
        左图: 每一层深度展开的状态数
        右图: Frontier 长度随入队次数的变化
        """
        fig, (ax_depth, ax_frontier) = plt.subplots(1, 2, figsize=(12, 5))

        # 1. 每层展开数
        depths = np.array([n.depth for n in self.observer.expanded_nodes], dtype=int)
        if depths.size:
            counts = np.bincount(depths)
            ax_depth.bar(np.arange(len(counts)), counts, color='tab:red', alpha=0.7)
        ax_depth.set_title("Expanded States per Depth")
        ax_depth.set_xlabel("Depth [transitions]")
        ax_depth.set_ylabel("Expanded")
        ax_depth.grid(True, linestyle=':', alpha=0.3)

        # 2. Frontier 长度
        if self.observer.frontier_history:
            sizes = np.array([entry[2] for entry in self.observer.frontier_history])
            ax_frontier.plot(np.arange(len(sizes)), sizes, 'b-', linewidth=1.5, label='Frontier size')
            ax_frontier.legend()
        ax_frontier.set_title("Frontier Growth")
        ax_frontier.set_xlabel("Push #")
        ax_frontier.set_ylabel("Nodes waiting")
        ax_frontier.grid(True, linestyle=':', alpha=0.3)

        fig.suptitle(f"{self.title} ({len(self.observer.goal_paths)} goal paths)")
        fig.tight_layout()

        if save_path:
            fig.savefig(save_path)
            print(f"Result saved to {save_path}")
        if show:
            plt.show()
        return fig
