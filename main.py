#!/usr/bin/env python3
"""
Autoplay Minesweeper - Main entry point.

Usage:
    python main.py play [--preset P | --rows R --cols C --mines M] [--seed S]
    python main.py autoplay [--agent {random,logic}] [--games N] [--watch]
    python main.py compare [--games N]
"""
import argparse
import logging
import random
import time

from minesweeper.game import (
    BoardConfig,
    Game,
    MinesweeperError,
    MinesweeperEnv,
    PRESETS,
)
from minesweeper.agents import AGENTS, BaseAgent
from minesweeper.autoplay import AutoplayConfig, AutoplayRunner


PLAY_HELP = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


def board_config_from_args(args: argparse.Namespace) -> BoardConfig:
    """Build the board configuration from --preset or explicit sizes."""
    base = PRESETS[args.preset]
    return BoardConfig(
        rows=args.rows if args.rows is not None else base.rows,
        cols=args.cols if args.cols is not None else base.cols,
        mine_count=args.mines if args.mines is not None else base.mine_count,
    )


def make_agent(name: str, config: BoardConfig, seed=None) -> BaseAgent:
    agent_class = AGENTS[name]
    if name == "logic":
        return agent_class(
            config.rows, config.cols, mine_count=config.mine_count, seed=seed
        )
    return agent_class(config.rows, config.cols, seed=seed)


# ============================================================================
# Interactive Play
# ============================================================================

def render_game(game: Game) -> str:
    """Board text with column and row indices, plus the mine counter."""
    board = game.board
    header = "    " + " ".join(str(col % 10) for col in range(board.cols))
    lines = [header]
    for row, line in enumerate(board.to_text().split("\n")):
        lines.append(f"{row:>3} {line}")
    lines.append(f"Mines remaining: {game.mines_remaining}")
    return "\n".join(lines)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = board_config_from_args(args)
    game = Game(config, rng=random.Random(args.seed))

    print(PLAY_HELP)
    while True:
        print()
        print(render_game(game))
        if game.is_won:
            print("Congratulations! You won!")
        elif game.is_lost:
            print("Game Over!")

        try:
            command = input("> ").split()
        except EOFError:
            break
        if not command:
            continue

        action = command[0].lower()
        if action == "q":
            break
        if action == "n":
            game.reset()
            continue
        if action not in ("r", "f") or len(command) != 3:
            print(PLAY_HELP)
            continue

        try:
            row, col = int(command[1]), int(command[2])
            if action == "r":
                game.reveal(row, col)
            else:
                game.toggle_flag(row, col)
        except ValueError as exc:
            print(f"Invalid coordinates: {exc}")
        except MinesweeperError as exc:
            print(exc)


# ============================================================================
# Autoplay
# ============================================================================

def autoplay(args: argparse.Namespace) -> None:
    """Let an agent play a series of games and report its results."""
    board = board_config_from_args(args)
    config = AutoplayConfig(board=board, num_games=args.games, seed=args.seed)
    runner = AutoplayRunner(config, render_mode="ansi" if args.watch else None)
    agent = make_agent(args.agent, board, seed=args.seed)

    on_step = None
    if args.watch:
        def on_step(env: MinesweeperEnv, action: int, reward: float) -> None:
            row, col = env.action_to_position(action)
            print(f"\nMove ({row}, {col}) reward {reward:+.1f}")
            print(env.render())
            time.sleep(args.delay)

    print(
        f"Board: {board.rows}x{board.cols} with {board.mine_count} mines "
        f"({100 * board.mine_count / board.total_cells:.1f}% density)"
    )
    stats = runner.run(agent, on_step=on_step)

    print(f"\nResults for {args.agent} over {stats.games_played} games:")
    print(f"  Win rate: {stats.win_rate:.1%}")
    print(f"  Avg reward: {stats.avg_reward:.2f}")
    print(f"  Avg steps: {stats.avg_steps:.1f}")
    print(f"  Avg revealed: {stats.avg_revealed:.1f} cells")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents on the same boards."""
    board = board_config_from_args(args)
    seed = args.seed if args.seed is not None else 0
    config = AutoplayConfig(board=board, num_games=args.games, seed=seed)
    runner = AutoplayRunner(config)

    agents = {name: make_agent(name, board, seed=seed) for name in AGENTS}
    results = runner.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, stats in results.items():
        print(
            f"{name:<20} {stats.win_rate:>10.1%} "
            f"{stats.avg_reward:>10.2f} "
            f"{stats.avg_steps:>10.1f}"
        )


# ============================================================================
# Argument Parsing
# ============================================================================

def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="beginner",
        help="Board size and mine count preset",
    )
    parser.add_argument("--rows", type=int, help="Override number of rows")
    parser.add_argument("--cols", type=int, help="Override number of columns")
    parser.add_argument("--mines", type=int, help="Override number of mines")
    parser.add_argument("--seed", type=int, help="Seed for mine placement")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Autoplay Minesweeper - play or watch agents play"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    autoplay_parser = subparsers.add_parser(
        "autoplay", help="Let an agent play"
    )
    add_board_arguments(autoplay_parser)
    autoplay_parser.add_argument(
        "--agent", choices=sorted(AGENTS), default="logic", help="Agent to run"
    )
    autoplay_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    autoplay_parser.add_argument(
        "--watch", action="store_true", help="Print the board after every move"
    )
    autoplay_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between watched moves"
    )

    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    add_board_arguments(compare_parser)
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "autoplay":
            autoplay(args)
        elif args.command == "compare":
            compare(args)
        else:
            parser.print_help()
    except MinesweeperError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
