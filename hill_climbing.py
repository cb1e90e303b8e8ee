import numpy as np
from utility import Queens, check_board_size
from tqdm.auto import tqdm

ROUND_FACTOR = 3      # successor requests per round = ROUND_FACTOR * N
VERBOSE_EVERY = 1000  # rounds between status lines when verbose


class HillClimbing_result:
    """Container for the conflict trace and summary of one hill-climbing run."""
    def __init__(self, N, heuristics, moves, rounds, final_state, solved, min_heuristic):
        self.N = N
        self.heuristics = heuristics      # np.array: initial heuristic, then one per accepted move
        self.moves = moves                # number of accepted successors
        self.rounds = rounds              # outer-loop rounds performed
        self.final_state = final_state
        self.solved = solved
        self.min_heuristic = min_heuristic


def run_hill_climbing(
    N,
    problem=Queens,
    seed=None,
    rng=None,
    max_rounds=None,
    verbose=False,
    record_trace=True,
):
    """
    Hill climbing with plateau moves.

    Each round asks the current state for up to ROUND_FACTOR * N successors,
    accepting every one that differs from the current state and stopping the
    round early as soon as a successor comes back unchanged. After the round
    the objective is tested. A failed test starts another round from the
    same state: there is no random restart, so without max_rounds a run
    stuck on a plateau the successor never leaves will not terminate.

    Args:
        N: Board size.
        problem: LocalSearchProblem subclass to search over.
        seed: Random seed for reproducibility (ignored when rng is given).
        rng: numpy Generator injected into the problem.
        max_rounds: Optional cap on outer-loop rounds (None = unbounded).
        verbose: Print a status line every VERBOSE_EVERY rounds.
        record_trace: Keep the heuristic after every accepted move. Without it
            only the running minimum and the final value are kept, so an
            unbounded run uses constant memory.

    Returns:
        HillClimbing_result; solved is False only if max_rounds ran out.
    """
    N = check_board_size(N)
    if max_rounds is not None and max_rounds < 1:
        raise ValueError(f"max_rounds must be at least 1, got {max_rounds}")
    if rng is None:
        rng = np.random.default_rng(seed)

    current = problem.new(N, rng)
    heuristics = [current.heuristic()]
    min_heuristic = heuristics[0]
    moves = 0
    rounds = 0
    solved = False

    while max_rounds is None or rounds < max_rounds:
        rounds += 1

        for _ in range(N * ROUND_FACTOR):
            successor = current.successor()
            if successor == current:
                break
            current = successor
            moves += 1
            h = current.heuristic()
            min_heuristic = min(min_heuristic, h)
            if record_trace:
                heuristics.append(h)

        if current.objective():
            solved = True
            if verbose:
                print(f"N={N}: solved after {rounds} rounds, {moves} moves")
            break

        if verbose and rounds % VERBOSE_EVERY == 0:
            print(f"round {rounds}: heuristic={current.heuristic()}, moves={moves}")

    if verbose and not solved:
        print(f"N={N}: no solution within {max_rounds} rounds, heuristic={current.heuristic()}")

    if not record_trace:
        heuristics = [current.heuristic()]

    return HillClimbing_result(
        N=N,
        heuristics=np.array(heuristics),
        moves=moves,
        rounds=rounds,
        final_state=current,
        solved=solved,
        min_heuristic=int(min_heuristic),
    )


def solve(N, problem=Queens, seed=None, rng=None):
    """Search until a solution is found and return it. May never return for
    sizes that have no solution (N = 2, 3)."""
    return run_hill_climbing(N, problem=problem, seed=seed, rng=rng, record_trace=False).final_state


def success_over_runs(
    N,
    runs=10,
    max_rounds=1000,
    base_seed=None,
    problem=Queens,
):
    """
    Run independent capped searches and collect per-run statistics.

    Args:
        N: Board size.
        runs: Number of independent runs.
        max_rounds: Round cap per run.
        base_seed: Base seed; if not None, seeds are base_seed + run_idx.

    Returns:
        dict with per-run rounds, moves, final heuristics and num_solved.
    """
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")

    rounds, moves, finals, solved = [], [], [], []

    for run_idx in tqdm(range(runs), desc=f"N={N}", leave=False):
        seed = None if base_seed is None else base_seed + run_idx
        result = run_hill_climbing(
            N,
            problem=problem,
            seed=seed,
            max_rounds=max_rounds,
            record_trace=False,
        )
        rounds.append(result.rounds)
        moves.append(result.moves)
        finals.append(result.final_state.heuristic())
        solved.append(result.solved)

    return {
        "N": N,
        "rounds": np.array(rounds),
        "moves": np.array(moves),
        "final_heuristics": np.array(finals),
        "solved": np.array(solved),
        "num_solved": int(sum(solved)),
        "max_rounds": max_rounds,
    }


def rounds_vs_N(
    N_values,
    runs=5,
    max_rounds=1000,
    base_seed=None,
    problem=Queens,
):
    """Repeat success_over_runs for several board sizes."""
    Ns = list(N_values)
    per_N = []

    for idx, N in enumerate(tqdm(Ns, desc="Processing N values")):
        seed = None if base_seed is None else base_seed + idx * runs
        per_N.append(success_over_runs(N, runs=runs, max_rounds=max_rounds, base_seed=seed, problem=problem))

    return {
        "N_values": np.array(Ns),
        "per_N": per_N,
        "runs": runs,
        "max_rounds": max_rounds,
    }
