"""Custom exception hierarchy for the peg solitaire engine."""


class PegsError(Exception):
    """Base exception for peg solitaire failures."""


class ParamsError(PegsError):
    """Raised when game parameters are malformed or unsupported."""


class DescriptionError(PegsError):
    """Raised when a board descriptor has the wrong length or alphabet."""


class MoveError(PegsError):
    """Raised when a forward move is malformed or illegal on the board."""


class SolverError(PegsError):
    """Raised when the CP-SAT solver cannot be run on a board."""


class SolverTimeoutError(SolverError):
    """Raised when CP-SAT neither finds a solution nor proves there is none."""
