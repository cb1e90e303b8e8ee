import numpy as np
import matplotlib.pyplot as plt


def plot_heuristic_curve(result, show=True):
    moves = np.arange(len(result.heuristics))

    fig, ax = plt.subplots(figsize=(6, 3))
    ax.plot(moves, result.heuristics, color='steelblue', linewidth=1.5, label='conflicts')
    ax.set_xlabel('Accepted move')
    ax.set_ylabel('Conflicts')
    status = 'solved' if result.solved else 'unsolved'
    ax.set_title(f'Hill climbing (N={result.N}, {result.rounds} rounds, {status})')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper right')

    plt.tight_layout()
    if show:
        plt.show()
    return fig


def plot_rounds_vs_N(stats, show=True):
    Ns = stats["N_values"]
    per_N = stats["per_N"]

    fig, ax = plt.subplots(figsize=(8, 5))

    for idx, N in enumerate(Ns):
        run_stats = per_N[idx]
        rounds = run_stats["rounds"]
        solved = run_stats["solved"]
        # Solved runs in gray, runs that hit the cap in red
        ax.scatter([N] * int(solved.sum()), rounds[solved],
                   alpha=0.4, s=30, color='gray', zorder=1,
                   label='solved run' if idx == 0 else '')
        ax.scatter([N] * int((~solved).sum()), rounds[~solved],
                   alpha=0.6, s=30, color='crimson', marker='x', zorder=1,
                   label='hit round cap' if idx == 0 else '')

    mean_rounds = [np.mean(s["rounds"]) for s in per_N]
    ax.plot(Ns, mean_rounds, marker='o', color='steelblue', linewidth=2,
            markersize=8, label='mean rounds', zorder=3)

    ax.set_xlabel("Board size N")
    ax.set_ylabel("Rounds")
    ax.set_title(f"Rounds to solution vs N ({stats['runs']} runs per N, cap {stats['max_rounds']})")
    ax.grid(True, alpha=0.3)
    ax.legend()

    plt.tight_layout()
    if show:
        plt.show()
    return fig
