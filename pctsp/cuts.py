from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from numpy.typing import NDArray

from .subtour import SubtourReport


@dataclass(frozen=True)
class Cut:
    """sum of x[i][j] over `pairs` >= rhs, or >= rhs * v[visit] if `visit` is set."""
    pairs: Tuple[Tuple[int, int], ...]
    rhs: float = 2.0
    visit: Optional[int] = None

    def lhs(self, sol: NDArray) -> float:
        return float(sum(sol[i, j] for i, j in self.pairs))

    def bound(self, visits: Optional[NDArray] = None) -> float:
        if self.visit is None:
            return self.rhs
        assert visits is not None, "visit values required for generalized cuts"
        return self.rhs * float(visits[self.visit])

    def violated_by(self, sol: NDArray, visits: Optional[NDArray] = None, tol: float = 1e-6) -> bool:
        return self.lhs(sol) < self.bound(visits) - tol

    def expression(self, x: Sequence[Sequence]):
        return sum(x[i][j] for i, j in self.pairs)

    def right_hand_side(self, v: Sequence):
        if self.visit is None:
            return self.rhs
        return self.rhs * v[self.visit]


def boundary(report: SubtourReport) -> Tuple[Tuple[int, int], ...]:
    """All ordered pairs (i, j) with i inside and j outside the component."""
    inside = report.nodes
    outside = [j for j in range(len(report.members)) if not report.members[j]]
    return tuple((i, j) for i in inside for j in outside)


def subtour_cut(report: SubtourReport) -> Cut:
    # A tour leaving the depot's component has to cross its boundary twice.
    return Cut(pairs=boundary(report))


def generalized_cuts(report: SubtourReport, visits: NDArray, tol: float = 1e-6) -> List[Cut]:
    """One cut per visited location outside the component: boundary >= 2 v[k].

    Unlike `subtour_cut` these stay valid for tours that never leave the
    component.
    """
    pairs = boundary(report)
    return [
        Cut(pairs=pairs, visit=k)
        for k in range(len(report.members))
        if not report.members[k] and visits[k] >= 1 - tol
    ]
