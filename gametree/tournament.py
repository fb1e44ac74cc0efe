"""Head-to-head series between two players, with telemetry export and a CLI."""
from __future__ import annotations

import argparse
import csv
import json
import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from . import games, simulate
from .agents import FirstLegalPlayer, MinimaxPlayer, Player, RandomPlayer, SearchPlayer
from .config import EngineConfig
from .exceptions import InvalidConfigError, UnknownPlayerError
from .logging_config import get_logger, setup_logging
from .rules import GameRules

logger = get_logger(__name__)


@dataclass
class SeriesConfig:
    """Configuration describing a head-to-head series."""

    rules: GameRules
    player_a: Player
    player_b: Player
    games: int
    seed: int = 0
    alternate_start: bool = True
    collect_moves: bool = False
    max_turns: Optional[int] = None

    def validate(self) -> None:
        if self.games < 1:
            raise InvalidConfigError("games", self.games, "must be at least 1")
        sides = self.rules.sides(self.rules.initial_position())
        if len(sides) != 2:
            raise InvalidConfigError("rules", self.rules.name, "must be a two-sided game")


@dataclass(frozen=True)
class GameRecord:
    """Telemetry for a single game. ``winner`` is "a", "b" or None for a tie."""

    index: int
    seed: int
    a_side: object
    turns: int
    winner: Optional[str]
    finished: bool = True
    moves: Optional[tuple] = None


@dataclass
class SeriesSummary:
    """Aggregated statistics for a series of games."""

    games: int
    wins: tuple[int, int]
    ties: int
    average_turns: float
    win_rate_a: float
    confidence_interval_a: tuple[float, float]


@dataclass
class SeriesResult:
    """Summary statistics plus per-game records."""

    summary: SeriesSummary
    records: list[GameRecord]


def play_series(config: SeriesConfig) -> SeriesResult:
    """Play a block of games and collect telemetry.

    With ``alternate_start`` the players swap sides every game, so each one
    moves first in half of the games.
    """

    config.validate()
    start = config.rules.initial_position()
    first, second = config.rules.sides(start)
    records: list[GameRecord] = []

    for offset in range(config.games):
        game_seed = config.seed + offset
        swapped = config.alternate_start and offset % 2 == 1
        a_side, b_side = (second, first) if swapped else (first, second)
        seating = {a_side: config.player_a, b_side: config.player_b}

        result = simulate.play_game(
            config.rules,
            start,
            config.rules.first_side(start),
            seating,
            rng=random.Random(game_seed),
            max_turns=config.max_turns,
        )
        records.append(
            GameRecord(
                index=offset,
                seed=game_seed,
                a_side=a_side,
                turns=result.turns,
                winner=_winner_label(result.winners, a_side, b_side),
                finished=result.finished,
                moves=result.history if config.collect_moves else None,
            )
        )

    summary = summarize(records)
    logger.info(
        "%s vs %s on %s: %d games, wins %d-%d, ties %d",
        config.player_a.name,
        config.player_b.name,
        config.rules.name,
        summary.games,
        summary.wins[0],
        summary.wins[1],
        summary.ties,
    )
    return SeriesResult(summary=summary, records=records)


def summarize(records: Iterable[GameRecord]) -> SeriesSummary:
    records = list(records)
    total_games = len(records)
    if total_games == 0:
        raise ValueError("No records provided for summary")

    wins_a = sum(1 for record in records if record.winner == "a")
    wins_b = sum(1 for record in records if record.winner == "b")
    ties = total_games - wins_a - wins_b
    total_turns = sum(record.turns for record in records)

    return SeriesSummary(
        games=total_games,
        wins=(wins_a, wins_b),
        ties=ties,
        average_turns=total_turns / total_games,
        win_rate_a=wins_a / total_games,
        confidence_interval_a=wilson_confidence_interval(wins_a, total_games),
    )


_Z_SCORES = {0.90: 1.645, 0.95: 1.96, 0.99: 2.576}


def wilson_confidence_interval(
    wins: int,
    total: int,
    confidence: float = 0.95,
) -> tuple[float, float]:
    """Wilson score interval for ``wins`` out of ``total`` games.

    ``confidence`` is one of 0.90, 0.95 or 0.99; anything else falls back to
    0.95. With no games the interval is the whole of [0, 1].
    """
    if total == 0:
        return (0.0, 1.0)

    z_squared = _Z_SCORES.get(confidence, 1.96) ** 2
    rate = wins / total

    scale = 1 + z_squared / total
    middle = rate + z_squared / (2 * total)
    margin = math.sqrt(z_squared * (rate * (1 - rate) + z_squared / (4 * total)) / total)

    return (max(0.0, (middle - margin) / scale), min(1.0, (middle + margin) / scale))


def export_csv(path: Path, records: Iterable[GameRecord]) -> None:
    """Write per-game telemetry to CSV."""

    rows = list(records)
    with path.open("w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["game", "seed", "a_side", "turns", "winner", "finished"])
        for record in rows:
            writer.writerow(
                [
                    record.index,
                    record.seed,
                    record.a_side,
                    record.turns,
                    record.winner if record.winner is not None else "tie",
                    record.finished,
                ]
            )


def export_json(path: Path, records: Iterable[GameRecord]) -> None:
    """Write per-game telemetry to JSON."""

    data = [_game_record_to_dict(record) for record in records]
    path.write_text(json.dumps(data, indent=2))


def _winner_label(winners: frozenset, a_side: object, b_side: object) -> Optional[str]:
    if len(winners) != 1:
        return None
    (winner,) = winners
    if winner == a_side:
        return "a"
    if winner == b_side:
        return "b"
    return None


def _game_record_to_dict(record: GameRecord) -> dict:
    payload = {
        "game": record.index,
        "seed": record.seed,
        "aSide": record.a_side,
        "turns": record.turns,
        "winner": record.winner,
        "finished": record.finished,
    }
    if record.moves is not None:
        payload["moves"] = [{"side": side, "move": move} for side, move in record.moves]
    return payload


PlayerFactory = Callable[[GameRules, EngineConfig, int], Player]

_PLAYER_LOOKUP: dict[str, PlayerFactory] = {
    "engine": lambda rules, config, seed: SearchPlayer(rules, config),
    "random": lambda rules, config, seed: RandomPlayer(rules, seed=seed),
    "first": lambda rules, config, seed: FirstLegalPlayer(rules),
    "minimax": lambda rules, config, seed: MinimaxPlayer(rules),
}


def player_from_name(name: str, rules: GameRules, config: EngineConfig, seed: int = 0) -> Player:
    try:
        factory = _PLAYER_LOOKUP[name]
    except KeyError as exc:
        raise UnknownPlayerError(name) from exc
    return factory(rules, config, seed)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    players = ", ".join(sorted(_PLAYER_LOOKUP))
    parser = argparse.ArgumentParser(description="Play a series between two players and export telemetry")
    parser.add_argument("player_a", help=f"Name of the first player ({players})")
    parser.add_argument("player_b", help=f"Name of the second player ({players})")
    parser.add_argument(
        "--game",
        default="tictactoe",
        choices=games.available_games(),
        help="Game to play",
    )
    parser.add_argument("--rows", type=int, default=3, help="Board rows for mnk")
    parser.add_argument("--cols", type=int, default=3, help="Board columns for mnk")
    parser.add_argument("--k", type=int, default=3, help="Marks in a row needed to win for mnk")
    parser.add_argument("--pile", type=int, default=10, help="Starting pile for takeaway")
    parser.add_argument("--max-take", type=int, default=3, help="Largest take for takeaway")
    parser.add_argument("--config", type=Path, help="YAML file with engine settings")
    parser.add_argument("--lookahead", type=int, help="Exact lookahead in real moves (n)")
    parser.add_argument("--playouts", type=int, help="Playouts per sampled leaf (p)")
    parser.add_argument("--playout-length", type=int, help="Playout step bound in real moves (k)")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=2025, help="Base seed for the series")
    parser.add_argument("--max-turns", type=int, help="Stop games after this many moves")
    parser.add_argument("--no-alternate-start", action="store_true", help="Keep player A on the first side")
    parser.add_argument("--csv", type=Path, help="Path to write per-game telemetry as CSV")
    parser.add_argument("--json", type=Path, help="Path to write per-game telemetry as JSON")
    parser.add_argument("--log-moves", action="store_true", help="Record the moves of every game")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser.parse_args(argv)


def _rules_from_args(args: argparse.Namespace) -> GameRules:
    if args.game == "mnk":
        return games.create_rules("mnk", rows=args.rows, cols=args.cols, k=args.k)
    if args.game == "takeaway":
        return games.create_rules("takeaway", pile=args.pile, max_take=args.max_take)
    return games.create_rules(args.game)


def _engine_config_from_args(args: argparse.Namespace) -> EngineConfig:
    data = EngineConfig.from_yaml(args.config).to_dict() if args.config else EngineConfig().to_dict()
    overrides = {
        "lookahead": args.lookahead,
        "playouts": args.playouts,
        "playout_length": args.playout_length,
    }
    data.update({key: value for key, value in overrides.items() if value is not None})
    if data.get("seed") is None:
        data["seed"] = args.seed
    return EngineConfig.from_dict(data)


def main(argv: Sequence[str] | None = None) -> SeriesResult:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    rules = _rules_from_args(args)
    engine_config = _engine_config_from_args(args)
    logger.info("Engine settings: %s", engine_config.to_dict())

    config = SeriesConfig(
        rules=rules,
        player_a=player_from_name(args.player_a, rules, engine_config, seed=args.seed),
        player_b=player_from_name(args.player_b, rules, engine_config, seed=args.seed + 1),
        games=args.games,
        seed=args.seed,
        alternate_start=not args.no_alternate_start,
        collect_moves=args.log_moves,
        max_turns=args.max_turns,
    )
    result = play_series(config)

    _print_summary(result.summary, label_a=args.player_a, label_b=args.player_b)

    if args.csv:
        export_csv(args.csv, result.records)
        print(f"Wrote CSV telemetry to {args.csv}")
    if args.json:
        export_json(args.json, result.records)
        print(f"Wrote JSON telemetry to {args.json}")

    return result


def _print_summary(summary: SeriesSummary, *, label_a: str, label_b: str) -> None:
    low, high = summary.confidence_interval_a
    print(
        f"Games: {summary.games}\n"
        f"Wins: {label_a}={summary.wins[0]} {label_b}={summary.wins[1]} Ties={summary.ties}\n"
        f"Win rate {label_a}: {summary.win_rate_a:.3f} (95% CI {low:.3f}-{high:.3f})\n"
        f"Average turns: {summary.average_turns:.2f}"
    )


def cli() -> None:  # pragma: no cover - console script entry point
    main()


if __name__ == "__main__":  # pragma: no cover - CLI support
    main()


__all__ = [
    "GameRecord",
    "SeriesConfig",
    "SeriesResult",
    "SeriesSummary",
    "export_csv",
    "export_json",
    "main",
    "play_series",
    "player_from_name",
    "summarize",
    "wilson_confidence_interval",
]
