# [关键] 全局配置定义

# reachability/config.py
from dataclasses import dataclass
from reachability.types import SearchOrder, CostPriority

@dataclass
class SearchConfig:
    default_order: SearchOrder = SearchOrder.BREADTH_FIRST
    cost_priority: CostPriority = CostPriority.ASCENDING
    debug_mode: bool = False
    log_dir: str = "logs/search_debug"
