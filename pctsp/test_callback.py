import unittest

from .callback import SolveContext, make_callback, on_candidate
from .config import SolveConfig
from .engine import MathOptEngine, Relation
from .model import build_model
from .testing import FakeCandidate, cycle, selection, unit_square


def square_context(**config) -> SolveContext:
    model = build_model(MathOptEngine(), unit_square(budget=4))
    return SolveContext(model=model, config=SolveConfig(**config))


class TestOnCandidate(unittest.TestCase):
    def test_accepts_single_tour(self):
        ctx = square_context()
        candidate = FakeCandidate(ctx.model, selection(4, cycle([0, 1, 2, 3])))

        on_candidate(ctx, candidate)

        self.assertEqual(candidate.lazy, [])
        self.assertEqual(ctx.cuts, [])
        self.assertEqual(ctx.accepted, 1)
        self.assertEqual(ctx.candidates, 1)

    def test_accepts_partial_tour(self):
        ctx = square_context()
        candidate = FakeCandidate(ctx.model, selection(4, cycle([0, 1, 2])))

        on_candidate(ctx, candidate)

        self.assertEqual(candidate.lazy, [])
        self.assertEqual(ctx.accepted, 1)

    def test_cuts_two_pieces(self):
        ctx = square_context()
        sol = selection(4, [(0, 1), (2, 3)])
        candidate = FakeCandidate(ctx.model, sol)

        on_candidate(ctx, candidate)

        self.assertEqual(len(candidate.lazy), 1)
        _, relation, rhs = candidate.lazy[0]
        self.assertEqual(relation, Relation.GE)
        self.assertEqual(rhs, 2.0)

        self.assertEqual(len(ctx.cuts), 1)
        self.assertEqual(ctx.cuts[0].pairs, ((0, 2), (0, 3), (1, 2), (1, 3)))
        self.assertTrue(ctx.cuts[0].violated_by(sol))
        self.assertEqual(ctx.accepted, 0)

    def test_cut_pool_grows(self):
        ctx = square_context()
        callback = make_callback(ctx)

        sizes = []
        for edges in ([(0, 1), (2, 3)], [(0, 2), (1, 3)], cycle([0, 1, 2, 3]), [(0, 3), (1, 2)]):
            callback(FakeCandidate(ctx.model, selection(4, edges)))
            sizes.append(len(ctx.cuts))

        self.assertEqual(sizes, [1, 2, 2, 3])
        self.assertEqual(ctx.candidates, 4)
        self.assertEqual(ctx.accepted, 1)

    def test_generalized_cuts(self):
        ctx = square_context(cut_style='generalized')
        candidate = FakeCandidate(ctx.model, selection(4, [(0, 1), (2, 3)]))

        on_candidate(ctx, candidate)

        self.assertEqual(len(candidate.lazy), 2)
        self.assertEqual([c.visit for c in ctx.cuts], [2, 3])


if __name__ == '__main__':
    unittest.main()
