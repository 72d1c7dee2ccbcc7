from dataclasses import dataclass
from typing import Optional

from ortools.math_opt.python import mathopt

from .errors import MalformedInput

SOLVERS = {
    'gscip': mathopt.SolverType.GSCIP,
    'gurobi': mathopt.SolverType.GUROBI,
    'highs': mathopt.SolverType.HIGHS,
    'cp_sat': mathopt.SolverType.CP_SAT,
}

CUT_STYLES = ('subtour', 'generalized')


@dataclass(frozen=True)
class SolveConfig:
    solver: str = 'gscip'
    enable_output: bool = False
    time_limit: Optional[float] = None
    tolerance: float = 1e-6
    cut_style: str = 'subtour'

    def __post_init__(self):
        if self.solver not in SOLVERS:
            raise MalformedInput(f'unknown solver {self.solver!r}')
        if self.cut_style not in CUT_STYLES:
            raise MalformedInput(f'unknown cut style {self.cut_style!r}')
        if self.time_limit is not None and self.time_limit <= 0:
            raise MalformedInput('time limit must be positive')
        if not 0 <= self.tolerance < 0.5:
            raise MalformedInput('tolerance must be in [0, 0.5)')

    @property
    def solver_type(self) -> mathopt.SolverType:
        return SOLVERS[self.solver]

    @classmethod
    def from_args(cls, args) -> 'SolveConfig':
        return cls(
            solver=args.solver,
            enable_output=args.solver_output,
            time_limit=args.time_limit,
            cut_style=args.cuts,
        )
