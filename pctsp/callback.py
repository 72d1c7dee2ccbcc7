from dataclasses import dataclass, field
from typing import Callable, List

import structlog

from .config import SolveConfig
from .cuts import Cut, generalized_cuts, subtour_cut
from .engine import Candidate, Relation
from .model import PCTSPModel
from .subtour import find_subtour

log = structlog.get_logger(__name__)


@dataclass
class SolveContext:
    model: PCTSPModel
    config: SolveConfig = field(default_factory=SolveConfig)
    # Mirror of the lazy constraints handed to the engine, append only.
    cuts: List[Cut] = field(default_factory=list)
    candidates: int = 0
    accepted: int = 0


def on_candidate(context: SolveContext, candidate: Candidate):
    """Checks an integer candidate and cuts off its subtour, if there is one."""
    model = context.model
    tol = context.config.tolerance
    context.candidates += 1

    sol = model.edge_values(candidate.value)
    total_visited = candidate.value(model.n_visited)

    report = find_subtour(sol, tol)
    if report.is_tour(total_visited):
        context.accepted += 1
        log.debug("candidate accepted", visited=report.count)
        return

    if context.config.cut_style == 'generalized':
        cuts = generalized_cuts(report, model.visit_values(candidate.value), tol)
    else:
        cuts = [subtour_cut(report)]

    for cut in cuts:
        candidate.add_lazy_constraint(
            cut.expression(model.x), Relation.GE, cut.right_hand_side(model.v))
        context.cuts.append(cut)

    log.info("subtour found",
             subtour=report.nodes,
             size=report.count,
             visited=int(round(total_visited)),
             new_cuts=len(cuts),
             cuts=len(context.cuts))


def make_callback(context: SolveContext) -> Callable[[Candidate], None]:
    def callback(candidate: Candidate):
        on_candidate(context, candidate)

    return callback
