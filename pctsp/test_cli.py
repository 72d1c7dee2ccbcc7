import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from typing import Tuple

from .cli import main, make_parser, print_solution
from .config import SolveConfig
from .engine import TerminationStatus
from .errors import MalformedInput
from .solve import Solution
from .testing import cycle, selection, unit_square

TABLE = """\
0.0,0.0,0
0.0,0.01,5
0.01,0.01,5
0.01,0.0,5
"""


class TestCli(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.dir.cleanup)
        self.path = os.path.join(self.dir.name, 'parks.csv')
        with open(self.path, 'w') as f:
            f.write(TABLE)

    def run_main(self, *argv) -> Tuple[int, str]:
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue()

    def test_prints_tour(self):
        code, out = self.run_main(self.path, '--budget', '5000', '--log-level', 'WARNING')

        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertTrue(lines[0].startswith('TOUR (prize = 15'))
        self.assertIn('[1, 2, 3, 4, 1]', lines[0])
        self.assertEqual(lines[1], '(0.0,0.0)')
        self.assertEqual(lines[-1], '5')

    def test_print_solution_follows_stdout(self):
        problem = unit_square(budget=4)
        edges = selection(4, cycle([0, 1, 2, 3]))
        solution = Solution(tour=[0, 1, 2, 3, 0], prize=15.0, distance=4.0,
                            status=TerminationStatus.OPTIMAL, cuts=0,
                            edges=edges, visits=edges.sum(axis=1) / 2)

        redirected = io.StringIO()
        with redirect_stdout(redirected):
            print_solution(problem, solution)
        self.assertTrue(redirected.getvalue().startswith('TOUR (prize = 15, distance = 4.0)'))

        explicit = io.StringIO()
        print_solution(problem, solution, out=explicit)
        self.assertEqual(explicit.getvalue(), redirected.getvalue())
        self.assertEqual(explicit.getvalue().splitlines()[-1], '5')

    def test_writes_plot(self):
        png = os.path.join(self.dir.name, 'tour.png')
        code, _ = self.run_main(self.path, '-b', '5000', '-p', png, '--log-level', 'WARNING')

        self.assertEqual(code, 0)
        self.assertTrue(os.path.exists(png))

    def test_infeasible_budget(self):
        code, out = self.run_main(self.path, '-b', '0', '--log-level', 'ERROR')

        self.assertEqual(code, 1)
        self.assertEqual(out, '')

    def test_config_from_args(self):
        args = make_parser().parse_args(
            [self.path, '-b', '10', '-t', '30', '-c', 'generalized', '--solver-output'])
        config = SolveConfig.from_args(args)

        self.assertEqual(config.time_limit, 30.0)
        self.assertEqual(config.cut_style, 'generalized')
        self.assertTrue(config.enable_output)
        self.assertEqual(config.solver, 'gscip')

    def test_bad_config(self):
        with self.assertRaises(MalformedInput):
            SolveConfig(cut_style='nope')
        with self.assertRaises(MalformedInput):
            SolveConfig(time_limit=0)


if __name__ == '__main__':
    unittest.main()
