#!/usr/bin/env python3
"""Run a single strategy with detailed per-game output."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

from lexicon import DictionaryFormatError, load_answers, load_dictionary
from strategies import get_strategy
from strategy import GameConfig
from wordle_env import (
    MAX_ROUNDS,
    Guess,
    InvalidWordError,
    Wordle,
    filter_candidates,
    format_feedback,
)

RESULTS_DIR = Path(__file__).resolve().parent / "results"


def run_experiment(
    strategy_name: str,
    config: GameConfig,
    secrets: list[str],
    verbose: bool = False,
) -> list[dict]:
    """Play *strategy_name* against each secret and log every guess.

    Each step records the guess, its mask and how many dictionary words
    remain consistent with the whole history after it.
    """
    factory = get_strategy(strategy_name)
    game = Wordle(config.dictionary, max_rounds=config.max_rounds)
    logs: list[dict] = []

    for i, secret in enumerate(secrets, 1):
        strat = factory(config.dictionary)
        candidates = list(config.dictionary)
        game_log: list[dict] = []

        if verbose:
            print(f"\n--- Game {i}/{len(secrets)} | Secret: {secret} ---")

        def on_guess(round_no: int, guess: Guess) -> None:
            nonlocal candidates
            candidates = filter_candidates(candidates, guess)
            game_log.append({
                "guess": guess.word,
                "feedback": format_feedback(guess.mask),
                "remaining": len(candidates),
            })
            if verbose:
                print(f"  Guess {round_no}: {guess.word}  "
                      f"{format_feedback(guess.mask, emoji=True)}  "
                      f"remaining={len(candidates)}")

        rounds = game.play(secret, strat, on_guess=on_guess)
        solved = rounds is not None
        logs.append({
            "game": i,
            "strategy": strat.name,
            "secret": secret,
            "solved": solved,
            "num_guesses": rounds if solved else config.max_rounds + 1,
            "steps": game_log,
        })

        if verbose:
            status = f"SOLVED in {rounds} guesses" if solved else "FAILED"
            print(f"  -> {status}")

    return logs


def print_experiment_summary(logs: list[dict], strategy_name: str) -> None:
    n = len(logs)
    if not n:
        print(f"\n=== {strategy_name} — no games ===")
        return
    solved = sum(1 for g in logs if g["solved"])
    guesses = sorted(g["num_guesses"] for g in logs)
    mean = sum(guesses) / n
    median = (
        guesses[n // 2]
        if n % 2 == 1
        else (guesses[n // 2 - 1] + guesses[n // 2]) / 2
    )
    print(f"\n=== {strategy_name} — {n} games ===")
    print(f"  Solved: {solved}/{n} ({100 * solved / n:.1f}%)")
    print(f"  Guesses — mean: {mean:.2f}, median: {median:.1f}, max: {guesses[-1]}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Single-strategy Wordle experiment")
    parser.add_argument("--strategy", type=str, required=True, help="Strategy name")
    parser.add_argument("--words", type=str, default=None, help="Dictionary file")
    parser.add_argument("--answers", type=str, default=None, help="Answer list file")
    parser.add_argument("--max-rounds", type=int, default=MAX_ROUNDS,
                        help=f"Guesses allowed per game (default: {MAX_ROUNDS})")
    parser.add_argument("--num-games", type=int, default=10, help="Number of games")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Print per-game details")
    parser.add_argument("--json", type=str, default=None, help="Save results as JSON")
    args = parser.parse_args()

    if args.max_rounds < 1:
        print(f"error: --max-rounds must be >= 1, got {args.max_rounds}",
              file=sys.stderr)
        sys.exit(2)

    try:
        dictionary = load_dictionary(args.words)
        answers = load_answers(args.answers)
        get_strategy(args.strategy)
    except (DictionaryFormatError, InvalidWordError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        sys.exit(2)
    print(f"Dictionary: {len(dictionary)} words | Answers: {len(answers)}")

    rng = random.Random(args.seed)
    secrets = rng.sample(answers, min(args.num_games, len(answers)))
    config = GameConfig(dictionary=dictionary, max_rounds=args.max_rounds)

    logs = run_experiment(args.strategy, config, secrets, verbose=args.verbose)
    name = logs[0]["strategy"] if logs else args.strategy
    print_experiment_summary(logs, name)

    json_path = Path(args.json) if args.json else RESULTS_DIR / f"experiment_{name.lower()}.json"
    json_path.parent.mkdir(parents=True, exist_ok=True)
    output = {
        "strategy": name,
        "config": {
            "max_rounds": args.max_rounds,
            "num_games": args.num_games,
            "seed": args.seed,
        },
        "summary": {
            "games": len(logs),
            "solved": sum(1 for g in logs if g["solved"]),
            "solve_rate": round(sum(1 for g in logs if g["solved"]) / len(logs), 4) if logs else 0,
            "mean_guesses": round(sum(g["num_guesses"] for g in logs) / len(logs), 3) if logs else 0,
        },
        "games": logs,
    }
    json_path.write_text(json.dumps(output, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"JSON saved to {json_path}")


if __name__ == "__main__":
    main()
