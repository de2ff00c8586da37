import sys
import os

# Ensure reachability can be imported if this config is used standalone
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reachability.config import SearchConfig
from reachability.types import SearchOrder, CostPriority

class ExperimentConfig:
    # --- Benchmark Settings ---
    NUM_TRIALS = 20                 # Repetitions per (puzzle, strategy) pair
    PUZZLES = ["crossing", "family"]

    # Strategy name -> (search order, cost profile or None)
    STRATEGIES = {
        "BFS": (SearchOrder.BREADTH_FIRST, None),
        "DFS": (SearchOrder.DEPTH_FIRST, None),
        "Cost(depth)": (None, "depth"),
        "Cost(noise-son1)": (None, "noise-son1"),
        "Cost(noise-son2)": (None, "noise-son2"),
    }

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments")

    # --- Search Configuration ---
    SEARCH_CONFIG = SearchConfig(
        default_order=SearchOrder.BREADTH_FIRST,
        cost_priority=CostPriority.ASCENDING,
        debug_mode=False,
        log_dir=os.path.join(_PROJECT_DIR, "logs", "search_debug"),
    )
