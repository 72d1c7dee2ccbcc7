class PCTSPError(Exception):
    """ Base class of all errors raised by the solver """
    pass


class MalformedInput(PCTSPError):
    """ Raised on problem data that cannot be turned into a model """
    pass


class InfeasibleModel(PCTSPError):
    """ Raised when the solver proves that no tour fits the budget """

    def __init__(self, status):
        super().__init__(f'model is infeasible (termination: {status})')
        self.status = status


class NoSolutionFound(PCTSPError):
    """ Raised when the solver stops without any feasible tour """

    def __init__(self, status):
        super().__init__(f'no solution found (termination: {status})')
        self.status = status


class MalformedSolutionState(PCTSPError):
    """ Raised when a solution does not describe a closed tour through the depot """
    pass
