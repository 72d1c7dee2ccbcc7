from .callback import SolveContext, make_callback, on_candidate
from .config import SolveConfig
from .cuts import Cut, generalized_cuts, subtour_cut
from .distance import distance_matrix, great_circle
from .engine import Candidate, Engine, MathOptEngine, Relation, SolveOutcome, TerminationStatus
from .errors import (InfeasibleModel, MalformedInput, MalformedSolutionState,
                     NoSolutionFound, PCTSPError)
from .model import PCTSPModel, build_model
from .problem import DEPOT, Location, Problem, read_problem
from .solve import Solution, solve
from .subtour import SubtourReport, find_subtour
from .tour import extract_tour, tour_length, tour_prize
