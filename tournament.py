#!/usr/bin/env python3
"""Play every selected strategy against a list of answers and compare them.

Features:
  - Uses the built-in strategy registry (``strategies/``).
  - Runs strategies in parallel (one process per strategy).
  - Outputs summary table, CSV, JSON and histogram.
"""

from __future__ import annotations

import argparse
import csv
import json
import random
import sys
import time as _time_mod
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path

from strategy import GameConfig
from wordle_env import MAX_ROUNDS

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------
# Result containers
# ------------------------------------------------------------------

@dataclass
class GameResult:
    strategy: str
    secret: str
    num_guesses: int
    solved: bool


@dataclass
class TournamentResults:
    games: list[GameResult] = field(default_factory=list)

    def to_csv(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["strategy", "secret", "num_guesses", "solved"])
            for g in self.games:
                writer.writerow([g.strategy, g.secret, g.num_guesses, int(g.solved)])

    def summary(self) -> list[dict]:
        """Per-strategy statistics, best (lowest mean guesses) first."""
        rows = list(compute_summary(self.games).values())
        rows.sort(key=lambda s: (s["mean_guesses"], s["name"]))
        return rows

    def print_summary(self) -> None:
        print(f"\n{'Strategy':<25} {'Games':>6} {'Solved':>7} {'Rate':>6} "
              f"{'Mean':>6} {'Median':>7} {'Max':>5}")
        print("-" * 72)
        for s in self.summary():
            print(f"{s['name']:<25} {s['games_played']:>6} {s['games_solved']:>6}  "
                  f"{100 * s['solve_rate']:>5.1f}% "
                  f"{s['mean_guesses']:>6.2f} {s['median_guesses']:>7.1f} "
                  f"{s['max_guesses']:>5}")
        print()

    def plot_histograms(self, path: str | Path | None = None) -> None:
        """One bar chart per strategy of games solved in N guesses.

        Unsolved games get their own red bar, labelled ``X``, after the
        highest solved round.
        """
        try:
            import matplotlib
            matplotlib.use("Agg")
            import matplotlib.pyplot as plt
        except ImportError:
            print("matplotlib not installed, skipping plot", file=sys.stderr)
            return

        summaries = compute_summary(self.games)
        if not summaries:
            return
        strats = sorted(summaries)

        cols = min(len(strats), 4)
        rows = (len(strats) + cols - 1) // cols
        fig, axes = plt.subplots(rows, cols, figsize=(5 * cols, 4 * rows), squeeze=False)
        last = max((g.num_guesses for g in self.games if g.solved), default=1)
        rounds = list(range(1, last + 1))
        fail_x = last + 1

        for idx, name in enumerate(strats):
            ax = axes[idx // cols][idx % cols]
            s = summaries[name]
            dist = s["guess_distribution"]
            ax.bar(rounds, [dist.get(str(r), 0) for r in rounds], edgecolor="black")
            if dist.get("failed"):
                ax.bar([fail_x], [dist["failed"]], color="tab:red", edgecolor="black")
            ax.set_xticks(rounds + [fail_x])
            ax.set_xticklabels([str(r) for r in rounds] + ["X"])
            ax.set_title(f"{name} ({100 * s['solve_rate']:.0f}% solved)", fontsize=10)
            ax.set_xlabel("Guesses")
            ax.set_ylabel("Games")

        for idx in range(len(strats), rows * cols):
            axes[idx // cols][idx % cols].set_visible(False)

        fig.suptitle("Guesses needed per secret")
        fig.tight_layout()
        dest = Path(path) if path else RESULTS_DIR / "tournament.png"
        dest.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(dest, dpi=150)
        plt.close(fig)
        print(f"Histogram saved to {dest}")

    def to_json(self, path: str | Path, config: dict | None = None) -> None:
        """Write per-game results and the summary as JSON."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "timestamp": datetime.now().isoformat(),
            "config": config or {},
            "summary": self.summary(),
            "games": [asdict(g) for g in self.games],
        }
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def compute_summary(games: list[GameResult]) -> dict[str, dict]:
    """Aggregate per-strategy stats from a list of GameResult."""
    by_strat: dict[str, list[GameResult]] = defaultdict(list)
    for g in games:
        by_strat[g.strategy].append(g)

    summaries = {}
    for name, results in by_strat.items():
        n = len(results)
        solved = sum(1 for r in results if r.solved)
        guesses = sorted(r.num_guesses for r in results)
        mean_g = sum(guesses) / n
        median_g = guesses[n // 2] if n % 2 == 1 else (
            guesses[n // 2 - 1] + guesses[n // 2]) / 2
        # Guess distribution
        dist: dict[str, int] = {}
        for r in results:
            key = str(r.num_guesses) if r.solved else "failed"
            dist[key] = dist.get(key, 0) + 1
        summaries[name] = {
            "name": name,
            "games_played": n,
            "games_solved": solved,
            "solve_rate": round(solved / n, 4),
            "mean_guesses": round(mean_g, 3),
            "median_guesses": median_g,
            "max_guesses": guesses[-1],
            "guess_distribution": dist,
        }
    return summaries


# ------------------------------------------------------------------
# Worker function (runs in a child process)
# ------------------------------------------------------------------

def play_games(
    strategy_name: str,
    config: GameConfig,
    secrets: list[str],
) -> list[GameResult]:
    """Play one strategy against every secret, a fresh instance per game.

    Unsolved games are recorded with ``max_rounds + 1`` guesses.
    """
    from strategies import get_strategy
    from wordle_env import Wordle

    factory = get_strategy(strategy_name)
    game = Wordle(config.dictionary, max_rounds=config.max_rounds)

    results: list[GameResult] = []
    for secret in secrets:
        strat = factory(config.dictionary)
        rounds = game.play(secret, strat)
        results.append(GameResult(
            strategy=strat.name,
            secret=secret,
            num_guesses=rounds if rounds is not None else config.max_rounds + 1,
            solved=rounds is not None,
        ))
    return results


# ------------------------------------------------------------------
# Tournament runner
# ------------------------------------------------------------------

def run_tournament(
    config: GameConfig,
    secrets: list[str],
    strategy_names: list[str] | None = None,
    num_games: int | None = None,
    seed: int = 42,
    max_workers: int | None = None,
) -> TournamentResults:
    from strategies import available_strategies

    rng = random.Random(seed)
    if num_games is not None and num_games < len(secrets):
        secrets = rng.sample(secrets, num_games)

    if strategy_names is None:
        strategy_names = sorted(available_strategies())

    if not strategy_names:
        print("No strategies found.", file=sys.stderr)
        return TournamentResults()

    # Default: batch strategies to avoid overloading the system
    import os as _os
    if max_workers is None:
        max_workers = min(len(strategy_names), _os.cpu_count() or 4, 4)

    print(f"Running {len(strategy_names)} strategies on {len(secrets)} words "
          f"(workers: {max_workers}, max rounds: {config.max_rounds}) ...",
          flush=True)

    results = TournamentResults()

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(play_games, name, config, secrets): name
            for name in strategy_names
        }

        for fut in as_completed(futures):
            name = futures[fut]
            try:
                game_results = fut.result()
            except Exception as exc:
                print(f"  {name:<25} FAILED: {exc}", file=sys.stderr)
                continue
            results.games.extend(game_results)
            solved = sum(1 for g in game_results if g.solved)
            mean = sum(g.num_guesses for g in game_results) / len(game_results)
            print(f"  {name:<25} done — {solved}/{len(game_results)} solved, "
                  f"mean {mean:.2f}", flush=True)

    return results


# ------------------------------------------------------------------
# CLI
# ------------------------------------------------------------------

def main() -> None:
    parser = argparse.ArgumentParser(
        description="Wordle strategy tournament",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python tournament.py                                    # bundled sample data
  python tournament.py --strategy naive --strategy entropy
  python tournament.py --words dictionary.txt --answers wordle.txt
  python tournament.py --num-games 100                    # subsample 100 secrets
""",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Dictionary file of '<word> <frequency>' lines")
    parser.add_argument("--answers", type=str, default=None,
                        help="Whitespace-separated list of secret words")
    parser.add_argument("--strategy", action="append", default=None,
                        help="Strategy to run (repeatable; default: all)")
    parser.add_argument("--max-rounds", type=int, default=MAX_ROUNDS,
                        help=f"Guesses allowed per game (default: {MAX_ROUNDS})")
    parser.add_argument("--num-games", type=int, default=None,
                        help="Limit number of secret words to test")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--workers", type=int, default=None,
                        help="Max parallel workers (default: auto)")
    parser.add_argument("--csv", type=str, default=None, help="Save results CSV path")
    parser.add_argument("--plot", type=str, default=None, help="Save histogram path")
    parser.add_argument("--json", type=str, default=None, help="Save results JSON path")
    args = parser.parse_args()

    from lexicon import DictionaryFormatError, load_answers, load_dictionary
    from wordle_env import InvalidWordError

    if args.max_rounds < 1:
        print(f"error: --max-rounds must be >= 1, got {args.max_rounds}",
              file=sys.stderr)
        sys.exit(2)

    try:
        dictionary = load_dictionary(args.words)
        secrets = load_answers(args.answers)
    except (DictionaryFormatError, InvalidWordError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.strategy:
        from strategies import get_strategy
        for name in args.strategy:
            try:
                get_strategy(name)
            except KeyError as exc:
                print(f"error: {exc.args[0]}", file=sys.stderr)
                sys.exit(2)

    config = GameConfig(dictionary=dictionary, max_rounds=args.max_rounds)
    print(f"Dictionary: {len(dictionary)} words | Answers: {len(secrets)}")

    t0 = _time_mod.time()
    results = run_tournament(
        config,
        secrets,
        strategy_names=args.strategy,
        num_games=args.num_games,
        seed=args.seed,
        max_workers=args.workers,
    )
    elapsed = _time_mod.time() - t0

    results.print_summary()
    print(f"Elapsed: {elapsed:.1f}s")

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    csv_path = args.csv or str(RESULTS_DIR / "tournament.csv")
    results.to_csv(csv_path)
    print(f"CSV saved to {csv_path}")

    plot_path = args.plot or str(RESULTS_DIR / "tournament.png")
    results.plot_histograms(plot_path)

    if args.json:
        results.to_json(args.json, config={
            "words": args.words,
            "answers": args.answers,
            "max_rounds": config.max_rounds,
            "num_games": args.num_games,
            "seed": args.seed,
        })
        print(f"JSON saved to {args.json}")


if __name__ == "__main__":
    main()
