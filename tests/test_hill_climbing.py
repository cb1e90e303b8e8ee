import numpy as np
import pytest

from hill_climbing import (
    HillClimbing_result,
    rounds_vs_N,
    run_hill_climbing,
    solve,
    success_over_runs,
)
from utility import LocalSearchProblem, Queens, compute_conflicts

FOUR_QUEENS_SOLUTIONS = [[1, 3, 0, 2], [2, 0, 3, 1]]


class Countdown(LocalSearchProblem):
    """Toy problem: each successor lowers the value by one until 0."""
    created = 0

    def __init__(self, value):
        self.value = value

    @classmethod
    def new(cls, size, rng=None):
        cls.created += 1
        return cls(size)

    def successor(self):
        return Countdown(max(self.value - 1, 0))

    def objective(self):
        return self.value == 0

    def heuristic(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, Countdown) and self.value == other.value


class Stuck(Countdown):
    """Never moves and never reaches the objective."""

    @classmethod
    def new(cls, size, rng=None):
        cls.created += 1
        return cls(1)

    def successor(self):
        return Stuck(self.value)


def first_solved(N, seeds, max_rounds):
    for seed in seeds:
        result = run_hill_climbing(N, seed=seed, max_rounds=max_rounds)
        if result.solved:
            return result
    return None


def test_generic_driver_on_toy_problem():
    Countdown.created = 0
    result = run_hill_climbing(5, problem=Countdown)
    assert isinstance(result, HillClimbing_result)
    assert result.solved
    assert result.rounds == 1
    assert result.moves == 5
    assert result.heuristics.tolist() == [5, 4, 3, 2, 1, 0]
    assert result.final_state.objective()
    assert Countdown.created == 1


def test_stuck_state_is_not_restarted():
    Stuck.created = 0
    result = run_hill_climbing(4, problem=Stuck, max_rounds=7)
    assert not result.solved
    assert result.rounds == 7
    assert result.moves == 0
    assert Stuck.created == 1     # same state re-entered every round
    assert result.final_state.value == 1


def test_single_queen_solved_immediately():
    result = run_hill_climbing(1, seed=0)
    assert result.solved
    assert result.rounds == 1
    assert result.final_state.board.tolist() == [0]
    assert solve(1, seed=0).heuristic() == 0


@pytest.mark.parametrize("N", [2, 3])
def test_unsolvable_sizes_never_report_solved(N):
    for seed in range(5):
        result = run_hill_climbing(N, seed=seed, max_rounds=50)
        assert not result.solved
        assert result.rounds == 50
        assert result.final_state.heuristic() > 0


def test_four_queens_seeded():
    result = first_solved(4, seeds=range(50), max_rounds=2000)
    assert result is not None
    assert result.final_state.board.tolist() in FOUR_QUEENS_SOLUTIONS
    assert result.final_state.heuristic() == 0


def test_four_queens_reproducible():
    a = run_hill_climbing(4, seed=11, max_rounds=500)
    b = run_hill_climbing(4, seed=11, max_rounds=500)
    assert a.final_state == b.final_state
    assert a.rounds == b.rounds
    assert a.heuristics.tolist() == b.heuristics.tolist()


def test_eight_queens_with_retry_budget():
    result = first_solved(8, seeds=range(20), max_rounds=3000)
    assert result is not None
    board = result.final_state.board
    assert sorted(board.tolist()) == list(range(8))
    assert compute_conflicts(board) == 0


def test_trace_never_increases():
    result = run_hill_climbing(10, seed=5, max_rounds=200)
    assert np.all(np.diff(result.heuristics) <= 0)
    assert result.min_heuristic == result.heuristics[-1]
    assert len(result.heuristics) == result.moves + 1


def test_untraced_run_keeps_only_final_value():
    traced = run_hill_climbing(2, seed=0, max_rounds=1000)
    untraced = run_hill_climbing(2, seed=0, max_rounds=1000, record_trace=False)
    assert len(traced.heuristics) == traced.moves + 1
    assert untraced.moves == traced.moves > 100
    assert untraced.heuristics.tolist() == [1]
    assert untraced.min_heuristic == 1
    assert untraced.final_state == traced.final_state


def test_injected_rng_is_used():
    rng = np.random.default_rng(123)
    a = run_hill_climbing(6, rng=rng, max_rounds=300)
    b = run_hill_climbing(6, rng=np.random.default_rng(123), max_rounds=300)
    assert a.final_state == b.final_state
    assert isinstance(a.final_state, Queens)


@pytest.mark.parametrize("bad", [0, -1, "8"])
def test_invalid_size_rejected(bad):
    with pytest.raises(ValueError):
        run_hill_climbing(bad)


def test_invalid_max_rounds_rejected():
    with pytest.raises(ValueError):
        run_hill_climbing(4, max_rounds=0)


def test_success_over_runs():
    stats = success_over_runs(3, runs=4, max_rounds=20, base_seed=0)
    assert stats["num_solved"] == 0
    assert stats["rounds"].tolist() == [20, 20, 20, 20]
    assert np.all(stats["final_heuristics"] > 0)

    stats = success_over_runs(1, runs=3, max_rounds=5, base_seed=0)
    assert stats["num_solved"] == 3
    assert stats["solved"].all()

    with pytest.raises(ValueError):
        success_over_runs(4, runs=0)


def test_rounds_vs_N():
    stats = rounds_vs_N([1, 2], runs=2, max_rounds=10, base_seed=1)
    assert stats["N_values"].tolist() == [1, 2]
    assert [s["num_solved"] for s in stats["per_N"]] == [2, 0]


def test_verbose_output(capsys):
    run_hill_climbing(1, seed=0, verbose=True)
    assert "solved after 1 rounds" in capsys.readouterr().out
    run_hill_climbing(2, seed=0, max_rounds=3, verbose=True)
    assert "no solution within 3 rounds" in capsys.readouterr().out


def test_base_class_requires_implementation():
    with pytest.raises(NotImplementedError):
        LocalSearchProblem.new(4)
    with pytest.raises(NotImplementedError):
        LocalSearchProblem().successor()
