"""Narrow contract between the PC-TSP model and a MIP solving engine.

The model only needs binary/continuous variables, linear constraints, a
linear objective, a callback on integer feasible candidates and the ability
to add lazy constraints from inside that callback. `MathOptEngine` provides
this on top of OR-Tools MathOpt, tests may substitute their own `Candidate`.
"""
import datetime
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from ortools.math_opt.python import mathopt

from .config import SolveConfig
from .errors import MalformedInput


class Relation:
    LE = '<='
    GE = '>='
    EQ = '=='


def _bounds(relation: str, rhs: float):
    if relation == Relation.LE:
        return None, rhs
    if relation == Relation.GE:
        return rhs, None
    if relation == Relation.EQ:
        return rhs, rhs
    raise MalformedInput(f'unknown relation {relation!r}')


class TerminationStatus(enum.Enum):
    OPTIMAL = 'optimal'
    FEASIBLE = 'feasible'
    INFEASIBLE = 'infeasible'
    NO_SOLUTION = 'no_solution'
    OTHER = 'other'


@dataclass
class SolveOutcome:
    status: TerminationStatus
    objective: Optional[float] = None
    values: Dict[Any, float] = field(default_factory=dict)
    detail: str = ''

    def has_solution(self) -> bool:
        return len(self.values) > 0


class Candidate(ABC):
    """An integer feasible candidate reported by the engine during search."""

    @abstractmethod
    def value(self, var) -> float:
        ...

    @abstractmethod
    def add_lazy_constraint(self, expr, relation: str, rhs) -> None:
        ...


class Engine(ABC):

    @abstractmethod
    def binary_variable(self, name: str):
        ...

    @abstractmethod
    def continuous_variable(self, lb: float, ub: float, name: str):
        ...

    @abstractmethod
    def add_constraint(self, expr, relation: str, rhs: float, name: str = ''):
        ...

    @abstractmethod
    def set_objective(self, expr, direction: str):
        ...

    @abstractmethod
    def solve(self, callback: Optional[Callable[[Candidate], None]] = None) -> SolveOutcome:
        ...


class MathOptCandidate(Candidate):
    def __init__(self, data: mathopt.CallbackData, result: mathopt.CallbackResult):
        assert data.solution is not None
        self.data = data
        self.result = result

    def value(self, var) -> float:
        return self.data.solution[var]

    def add_lazy_constraint(self, expr, relation: str, rhs) -> None:
        # rhs may itself be an expression (e.g. 2 * v[k]), so move it to the left.
        lb, ub = _bounds(relation, 0.0)
        self.result.add_lazy_constraint(lb=lb, ub=ub, expr=expr - rhs)


_TERMINATION = {
    mathopt.TerminationReason.OPTIMAL: TerminationStatus.OPTIMAL,
    mathopt.TerminationReason.FEASIBLE: TerminationStatus.FEASIBLE,
    mathopt.TerminationReason.INFEASIBLE: TerminationStatus.INFEASIBLE,
    mathopt.TerminationReason.INFEASIBLE_OR_UNBOUNDED: TerminationStatus.INFEASIBLE,
    mathopt.TerminationReason.NO_SOLUTION_FOUND: TerminationStatus.NO_SOLUTION,
}


class MathOptEngine(Engine):
    def __init__(self, config: SolveConfig = SolveConfig(), name: str = 'PCTSP'):
        self.config = config
        self.model = mathopt.Model(name=name)

    def binary_variable(self, name: str):
        return self.model.add_binary_variable(name=name)

    def continuous_variable(self, lb: float, ub: float, name: str):
        return self.model.add_variable(lb=lb, ub=ub, is_integer=False, name=name)

    def add_constraint(self, expr, relation: str, rhs: float, name: str = ''):
        lb, ub = _bounds(relation, rhs)
        return self.model.add_linear_constraint(lb=lb, ub=ub, expr=expr, name=name)

    def set_objective(self, expr, direction: str):
        if direction == 'max':
            self.model.maximize(expr)
        elif direction == 'min':
            self.model.minimize(expr)
        else:
            raise MalformedInput(f'unknown objective direction {direction!r}')

    def parameters(self) -> mathopt.SolveParameters:
        params = mathopt.SolveParameters(enable_output=self.config.enable_output)
        if self.config.time_limit is not None:
            params.time_limit = datetime.timedelta(seconds=self.config.time_limit)
        return params

    def solve(self, callback: Optional[Callable[[Candidate], None]] = None) -> SolveOutcome:
        kwargs = {}
        if callback is not None:
            def cb(data: mathopt.CallbackData) -> mathopt.CallbackResult:
                res = mathopt.CallbackResult()
                callback(MathOptCandidate(data, res))
                return res

            kwargs = dict(
                callback_reg=mathopt.CallbackRegistration(
                    events={mathopt.Event.MIP_SOLUTION},
                    add_lazy_constraints=True,
                ),
                cb=cb,
            )

        res = mathopt.solve(
            self.model,
            solver_type=self.config.solver_type,
            params=self.parameters(),
            **kwargs,
        )

        status = _TERMINATION.get(res.termination.reason, TerminationStatus.OTHER)
        outcome = SolveOutcome(status=status, detail=str(res.termination))
        if res.has_primal_feasible_solution():
            outcome.objective = res.objective_value()
            outcome.values = res.variable_values()
        return outcome
