import sys
from argparse import ArgumentParser

import structlog

from .config import CUT_STYLES, SOLVERS, SolveConfig
from .errors import PCTSPError
from .logs import configure_logging
from .plot import plot_tour
from .problem import Problem, read_problem
from .solve import Solution, solve


def make_parser() -> ArgumentParser:
    parser = ArgumentParser('pctsp', description='Prize-collecting TSP by branch-and-cut')
    parser.add_argument('file', help='CSV table of latitude, longitude, prize (depot first)')
    parser.add_argument('-b', '--budget', help='Maximum tour length in metres',
                        type=float, required=True)
    parser.add_argument('-s', '--solver', help='MIP solver',
                        default='gscip', choices=sorted(SOLVERS), required=False)
    parser.add_argument('-t', '--time-limit', help='Time limit in seconds',
                        type=float, default=None, required=False)
    parser.add_argument('-c', '--cuts', help='Subtour cut style',
                        default='subtour', choices=CUT_STYLES, required=False)
    parser.add_argument('--solver-output', help='Show solver log',
                        action='store_true')
    parser.add_argument('-p', '--plot', help='Write a plot of the tour to this PNG file',
                        default=None, required=False)
    parser.add_argument('--log-level', default='INFO', required=False,
                        choices={'DEBUG', 'INFO', 'WARNING', 'ERROR'})
    parser.add_argument('--json-logs', help='Log as JSON lines', action='store_true')
    return parser


def print_solution(problem: Problem, solution: Solution, out=None):
    out = out if out is not None else sys.stdout
    # Rows are numbered from 1 as in the input table.
    print(f"TOUR (prize = {solution.prize:g}, distance = {solution.distance:.1f}):",
          [i + 1 for i in solution.tour], file=out)
    for _, loc in solution.stops(problem):
        print(f"({loc.lat},{loc.lon})", file=out)
    print(len(solution.tour), file=out)


def main(argv=None) -> int:
    args = make_parser().parse_args(argv)
    configure_logging(args.log_level, json=args.json_logs)
    log = structlog.get_logger("pctsp")

    try:
        config = SolveConfig.from_args(args)
        problem = read_problem(args.file, args.budget)
        solution = solve(problem, config)
    except PCTSPError as e:
        log.error("solve failed", error=str(e), kind=type(e).__name__)
        return 1

    print_solution(problem, solution)

    if args.plot:
        plot_tour(problem, solution.tour, args.plot,
                  title=f'Prize = {solution.prize:g}, #Stops = {len(solution.tour) - 1}')
        log.info("plot written", file=args.plot)

    return 0


if __name__ == '__main__':
    sys.exit(main())
