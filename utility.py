import numpy as np

########################################################
# Utility functions for the N Queens problem
########################################################


def check_board_size(N):
    """Raise ValueError unless N is a positive integer."""
    if isinstance(N, bool) or not isinstance(N, (int, np.integer)):
        raise ValueError(f"board size must be an integer, got {N!r}")
    if N <= 0:
        raise ValueError(f"board size must be positive, got {N}")
    return int(N)


# state representation #

def swap_two(board, rng):
    """Swap the queens of two uniformly drawn columns in place (may be a no-op)."""
    N = board.shape[0]
    first = rng.integers(0, N)
    second = rng.integers(0, N)
    board[first], board[second] = board[second], board[first]


def random_board(N, rng=None):
    """
    Start from the identity permutation and apply N random pairwise swaps.
    board[col] is the row of the queen in column col.
    """
    if rng is None:
        rng = np.random.default_rng()

    board = np.arange(N)
    for _ in range(N):
        swap_two(board, rng)
    return board


def render_board(board):
    """Draw the board as text, one line per row."""
    N = len(board)
    lines = []
    for row in range(N):
        lines.append(" ".join("Q" if board[col] == row else "." for col in range(N)))
    return "\n".join(lines)


# Conflict model #

def queens_attack(board, c1, c2):
    """Return True if the queens of columns c1 and c2 share a row or a diagonal."""
    r1, r2 = int(board[c1]), int(board[c2])
    return r1 - c1 == r2 - c2 or r1 + c1 == r2 + c2 or r1 == r2


def compute_conflicts(board):
    """Count attacking queen pairs (O(N^2))."""
    N = len(board)
    threats = 0
    for i in range(N):
        for j in range(i + 1, N):
            if queens_attack(board, i, j):
                threats += 1
    return threats


# Local search problems #

class LocalSearchProblem:
    """
    Capability set the hill-climbing driver works with.

    new(size, rng)  -> a fresh random state
    successor()     -> a new state; content-equal to self means "no move"
    objective()     -> True when the state is a solution
    heuristic()     -> score used for reporting, lower is better

    Subclasses must also define value equality, since the driver detects
    "no move" with ==.
    """

    @classmethod
    def new(cls, size, rng=None):
        raise NotImplementedError

    def successor(self):
        raise NotImplementedError

    def objective(self):
        raise NotImplementedError

    def heuristic(self):
        raise NotImplementedError


class Queens(LocalSearchProblem):
    """One queen per column; board holds the row of each queen."""

    def __init__(self, board, rng=None):
        if rng is None:
            rng = np.random.default_rng()
        self.board = np.array(board, dtype=int)
        self.rng = rng
        self._conflicts = None    # computed on first heuristic() call

    @classmethod
    def new(cls, size, rng=None):
        size = check_board_size(size)
        if rng is None:
            rng = np.random.default_rng()
        return cls(random_board(size, rng), rng)

    @property
    def size(self):
        return self.board.shape[0]

    def copy(self):
        other = Queens(self.board, self.rng)
        other._conflicts = self._conflicts
        return other

    def heuristic(self):
        if self._conflicts is None:
            self._conflicts = compute_conflicts(self.board)
        return self._conflicts

    def objective(self):
        return self.heuristic() == 0

    def successor(self):
        """
        First-choice successor: try up to 2*size single swaps and return the
        first one whose conflict count is <= the current one (plateau moves
        included). If none is found, return an unchanged copy.
        """
        current = self.heuristic()

        for _ in range(self.size * 2):
            board = self.board.copy()
            swap_two(board, self.rng)
            candidate = Queens(board, self.rng)
            if candidate.heuristic() <= current:
                return candidate

        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Queens):
            return NotImplemented
        return np.array_equal(self.board, other.board)

    __hash__ = None

    def __str__(self):
        return str(self.board.tolist())

    def __repr__(self):
        return f"Queens({self.board.tolist()})"
