from dataclasses import dataclass
from typing import Iterator, List, Tuple

from numpy.typing import NDArray
import structlog

from .callback import SolveContext, make_callback
from .config import SolveConfig
from .engine import MathOptEngine, TerminationStatus
from .errors import InfeasibleModel, NoSolutionFound
from .model import build_model
from .problem import Location, Problem
from .tour import extract_tour, tour_length, tour_prize

log = structlog.get_logger(__name__)


@dataclass
class Solution:
    tour: List[int]
    prize: float
    distance: float
    status: TerminationStatus
    cuts: int
    edges: NDArray  # final x values as returned by the solver
    visits: NDArray  # final v values

    def stops(self, problem: Problem) -> Iterator[Tuple[int, Location]]:
        for i in self.tour:
            yield i, problem.locations[i]


def solve(problem: Problem, config: SolveConfig = SolveConfig()) -> Solution:
    """Solves the PC-TSP by branch-and-cut with lazy subtour elimination."""
    engine = MathOptEngine(config)
    model = build_model(engine, problem)
    context = SolveContext(model=model, config=config)

    log.info("solving", locations=problem.size, budget=problem.budget,
             solver=config.solver, cut_style=config.cut_style)

    outcome = engine.solve(make_callback(context))

    log.info("solver finished",
             status=outcome.status.value,
             objective=outcome.objective,
             candidates=context.candidates,
             accepted=context.accepted,
             cuts=len(context.cuts))

    if outcome.status == TerminationStatus.INFEASIBLE:
        raise InfeasibleModel(outcome.detail)
    if not outcome.has_solution():
        raise NoSolutionFound(outcome.detail)

    sol = model.edge_values(lambda var: outcome.values[var])
    visits = model.visit_values(lambda var: outcome.values[var])
    tour = extract_tour(sol, config.tolerance)

    return Solution(
        tour=tour,
        prize=tour_prize(tour, problem.prizes),
        distance=tour_length(tour, problem.distances),
        status=outcome.status,
        cuts=len(context.cuts),
        edges=sol,
        visits=visits,
    )
