# canvas_router/benchmark.py
"""
A* 启发式对比实验: Manhattan (默认) vs Octile vs Dijkstra (h=0)

在同一批随机画布上跑不同启发式, 统计成功率 / 扩展节点数 / 路径长度 / 路径代价。
"""
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from canvas_router.types import Position
from canvas_router.map.generator import ObstacleFieldGenerator
from canvas_router.planning.heuristics import Heuristic, ManhattanHeuristic, OctileHeuristic, ZeroHeuristic
from canvas_router.planning.planners.a_star import AStarPlanner
from canvas_router.planning.smoother import path_length

COLUMNS = ["Density", "Heuristic", "SuccessRate", "NodesMean", "LengthMean", "CostMean"]


def calculate_path_length(path: Optional[List[Position]]) -> float:
    return path_length(path) if path else 0.0


def default_heuristics(resolution: float) -> Dict[str, Heuristic]:
    return {
        'Dijkstra (h=0)': ZeroHeuristic(),
        'Octile': OctileHeuristic(resolution),
        'Manhattan (Inadmissible)': ManhattanHeuristic(),
    }


def run_heuristic_benchmark(heuristics: Optional[Dict[str, Heuristic]] = None,
                            densities: Sequence[int] = (0, 4, 8),
                            num_trials: int = 5,
                            canvas_size: float = 400.0,
                            resolution: float = 10.0,
                            seed_base: int = 100) -> pd.DataFrame:
    """
    :param densities: 每张画布上的节点数量梯度
    :return: 每个 (Density, Heuristic) 一行
    """
    if heuristics is None:
        heuristics = default_heuristics(resolution)

    start = Position(canvas_size * 0.05, canvas_size * 0.05)
    goal = Position(canvas_size * 0.95, canvas_size * 0.95)
    results = []

    for density in densities:
        stats = {name: {'success': 0, 'nodes': [], 'length': [], 'cost': []}
                 for name in heuristics}

        for i in range(num_trials):
            # 固定种子, 所有启发式在同一张画布上跑
            generator = ObstacleFieldGenerator(canvas_size, canvas_size, seed=seed_base + density * 1000 + i)
            nodes = generator.generate(density, keep_clear=(start, goal), clearance=resolution * 2)
            obstacles = [n.bbox for n in nodes]

            for name, h_fn in heuristics.items():
                result = AStarPlanner(heuristic=h_fn).search(start, goal, obstacles, resolution)
                if result.found:
                    stats[name]['success'] += 1
                    stats[name]['nodes'].append(result.expansions)
                    stats[name]['length'].append(calculate_path_length(result.path))
                    stats[name]['cost'].append(result.costs[-1])

        for name, s_data in stats.items():
            results.append({
                'Density': density,
                'Heuristic': name,
                'SuccessRate': s_data['success'] / num_trials * 100 if num_trials else 0.0,
                'NodesMean': np.mean(s_data['nodes']) if s_data['nodes'] else 0.0,
                'LengthMean': np.mean(s_data['length']) if s_data['length'] else 0.0,
                'CostMean': np.mean(s_data['cost']) if s_data['cost'] else 0.0,
            })

    return pd.DataFrame(results, columns=COLUMNS)
