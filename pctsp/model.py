from dataclasses import dataclass
from typing import Any, Callable, List

import numpy as np
from numpy.typing import NDArray
import structlog

from .engine import Engine, Relation
from .problem import DEPOT, Problem

log = structlog.get_logger(__name__)


@dataclass
class PCTSPModel:
    engine: Engine
    problem: Problem
    x: List[List[Any]]
    v: List[Any]
    n_visited: Any

    @property
    def size(self) -> int:
        return self.problem.size

    def edge_values(self, read: Callable[[Any], float]) -> NDArray:
        """Snapshot of the edge selection as seen through `read`."""
        n = self.size
        sol = np.zeros((n, n), dtype=np.float64)
        for i in range(n):
            for j in range(n):
                sol[i, j] = read(self.x[i][j])
        return sol

    def visit_values(self, read: Callable[[Any], float]) -> NDArray:
        return np.array([read(var) for var in self.v], dtype=np.float64)


def build_model(engine: Engine, problem: Problem) -> PCTSPModel:
    """Declares variables, objective and the static constraints of the PC-TSP."""
    problem.validate()

    n = problem.size
    dist = problem.distances
    prizes = problem.prizes

    x = [
        [engine.binary_variable(name=f'X_{i}_{j}') for j in range(n)]
        for i in range(n)
    ]
    v = [engine.binary_variable(name=f'V_{i}') for i in range(n)]

    n_visited = engine.continuous_variable(lb=0.0, ub=float(n), name='N_visited')
    engine.add_constraint(n_visited - sum(v), Relation.EQ, 0.0, name='c_visited')

    engine.set_objective(sum(prizes[i] * v[i] for i in range(n)), 'max')

    engine.add_constraint(
        sum(float(dist[i, j]) * x[i][j] for i in range(n) for j in range(i+1, n)),
        Relation.LE,
        problem.budget,
        name='c_budget',
    )

    for i in range(n):
        engine.add_constraint(x[i][i], Relation.EQ, 0.0, name=f'c_loop_{i}')
        for j in range(i+1, n):
            engine.add_constraint(
                x[i][j] - x[j][i], Relation.EQ, 0.0, name=f'c_sym_{i}_{j}')

    for i in range(n):
        degree = sum(x[i][j] for j in range(n))
        engine.add_constraint(
            v[i] - 0.5 * degree, Relation.EQ, 0.0, name=f'c_link_{i}')
        engine.add_constraint(
            degree - 2 * v[i], Relation.EQ, 0.0, name=f'c_degree_{i}')

    # The depot is always part of the tour.
    engine.add_constraint(v[DEPOT], Relation.EQ, 1.0, name='c_depot')

    log.debug("model built", locations=n, budget=problem.budget)

    return PCTSPModel(engine=engine, problem=problem, x=x, v=v, n_visited=n_visited)
