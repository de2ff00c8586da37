import sys
import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 reachability 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from experiments.experiment_config import ExperimentConfig as cfg
from experiments.run_experiment import build_space


def run_once(puzzle, order, cost_profile):
    """运行一次搜索, 返回 (耗时秒, 结果数, 统计数据)"""
    space, goal, _ = build_space(puzzle, cost_profile, cfg.SEARCH_CONFIG)
    driver = space.make_driver(order)

    t0 = time.perf_counter()
    solutions = driver.search(space, goal)
    elapsed = time.perf_counter() - t0
    return elapsed, len(solutions), driver.stats


def run_benchmark(num_trials=cfg.NUM_TRIALS):
    rows = []

    print(f"{'Puzzle':<10} | {'Strategy':<18} | {'Time(ms)':<10} | {'Std(ms)':<10} | {'Expanded':<10} | {'Paths':<6}")
    print("-" * 80)

    for puzzle in cfg.PUZZLES:
        for name, (order, cost_profile) in cfg.STRATEGIES.items():
            # 代价配置只对 family 谜题有意义
            if cost_profile is not None and puzzle != "family":
                continue

            times = []
            stats = None
            paths = 0
            for _ in range(num_trials):
                elapsed, paths, stats = run_once(puzzle, order, cost_profile)
                times.append(elapsed * 1000.0)

            times = np.array(times)
            row = {
                'puzzle': puzzle,
                'strategy': name,
                'time_ms': float(np.mean(times)),
                'time_std_ms': float(np.std(times)),
                'expansions': stats.expansions,
                'pushes': stats.pushes,
                'rejected': stats.rejected,
                'max_frontier': stats.max_frontier,
                'paths': paths,
            }
            rows.append(row)
            print(f"{puzzle:<10} | {name:<18} | {row['time_ms']:<10.2f} | {row['time_std_ms']:<10.2f} | "
                  f"{row['expansions']:<10} | {paths:<6}")

    return pd.DataFrame(rows)


def save_results(df, log_dir=cfg.LOG_DIR):
    os.makedirs(log_dir, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")

    csv_path = os.path.join(log_dir, f"benchmark_{timestamp}.csv")
    df.to_csv(csv_path, index=False)
    print(f"Results saved to {csv_path}")

    fig, axes = plt.subplots(1, len(cfg.PUZZLES), figsize=(6 * len(cfg.PUZZLES), 5))
    axes = np.atleast_1d(axes)
    for ax, puzzle in zip(axes, cfg.PUZZLES):
        sub = df[df['puzzle'] == puzzle]
        ax.bar(sub['strategy'], sub['time_ms'], yerr=sub['time_std_ms'], color='tab:blue', alpha=0.7, capsize=4)
        ax.set_title(f"{puzzle}: mean search time")
        ax.set_ylabel("Time [ms]")
        ax.tick_params(axis='x', rotation=30)
        ax.grid(True, linestyle=':', alpha=0.3)
    fig.tight_layout()

    png_path = os.path.join(log_dir, f"benchmark_{timestamp}.png")
    fig.savefig(png_path)
    plt.close(fig)
    print(f"Chart saved to {png_path}")
    return csv_path, png_path


if __name__ == "__main__":
    results = run_benchmark()
    save_results(results)
