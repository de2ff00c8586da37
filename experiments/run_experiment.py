import os
import sys
import argparse
import dataclasses

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reachability import StateSpace, SearchOrder
from reachability.costs import PathCost
from reachability.models import crossing, family
from reachability.visualization.observers import make_observer
from reachability.visualization.plotter import SearchPlotter
from experiments.experiment_config import ExperimentConfig as cfg

ORDERS = {"bfs": SearchOrder.BREADTH_FIRST, "dfs": SearchOrder.DEPTH_FIRST}


def build_space(puzzle, cost_profile=None, config=None):
    """构造指定谜题的状态空间, 返回 (space, goal, formatter)"""
    if puzzle == "crossing":
        space = StateSpace(crossing.INITIAL, crossing.transitions, crossing.is_valid, config=config)
        return space, crossing.is_goal, crossing.format_trace

    if puzzle == "family":
        if cost_profile is None:
            space = StateSpace(family.FamilyState(), family.transitions,
                               family.river_crossing_valid, config=config)
        else:
            space = StateSpace(family.FamilyState(), family.transitions, family.river_crossing_valid,
                               initial_cost=PathCost(),
                               cost_fn=family.COST_PROFILES[cost_profile],
                               config=config)
        return space, family.goal, family.format_trace

    raise ValueError(f"Unknown puzzle: {puzzle}")


def run_experiment(puzzle="crossing", order="bfs", cost_profile=None, debug=False, plot=None):
    print(f"=== Running Experiment (Puzzle={puzzle}, Order={order}, Cost={cost_profile}) ===")

    config = dataclasses.replace(cfg.SEARCH_CONFIG, debug_mode=debug)
    space, goal, formatter = build_space(puzzle, cost_profile, config)
    observer = make_observer(config)

    solutions = space.check(goal, order=ORDERS[order], observer=observer)

    if not solutions:
        print("No solution")
    for trace in solutions:
        print(formatter(trace))

    print(f"Found {len(solutions)} solution(s).")

    if debug:
        print(f"Debug log written to {observer.log_file}")
        if plot:
            SearchPlotter(observer, title=f"{puzzle} / {order}").plot(save_path=plot)
        observer.close()
    return solutions


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run a reachability search on one of the puzzle models")
    parser.add_argument("--puzzle", choices=["crossing", "family"], default="crossing")
    parser.add_argument("--order", choices=sorted(ORDERS), default="bfs",
                        help="Search order (ignored when a cost profile is given)")
    parser.add_argument("--cost", choices=sorted(family.COST_PROFILES), default=None,
                        help="Cost profile for the family puzzle")
    parser.add_argument("--debug", action="store_true", help="Write a debug log of the search")
    parser.add_argument("--plot", default=None, help="Save a search plot to this file (requires --debug)")
    args = parser.parse_args(argv)

    if args.cost is not None and args.puzzle != "family":
        parser.error("--cost is only supported for the family puzzle")
    if args.plot is not None and not args.debug:
        parser.error("--plot requires --debug")
    return args


if __name__ == "__main__":
    args = parse_args()
    run_experiment(puzzle=args.puzzle, order=args.order, cost_profile=args.cost,
                   debug=args.debug, plot=args.plot)
