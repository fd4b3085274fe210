#!/usr/bin/env python3

import argparse
import sys
from pathlib import Path

from textvalorant.core.errors import TextValorantError
from textvalorant.core.events import EventManager, LogSaveRequested
from textvalorant.game.combat import create_rng
from textvalorant.game.config import load_config
from textvalorant.game.managers import LogManager
from textvalorant.game.match import Match
from textvalorant.game.roster import Roster
from textvalorant.interface import ConsoleInput, ConsoleReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Text-based Valorant duel")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible match")
    parser.add_argument("--agents", help="Agent name list (overrides config)")
    parser.add_argument("--weapons", help="Weapon name list (overrides config)")
    parser.add_argument("--debug", action="store_true", help="Print the debug log after the match")
    parser.add_argument("--save-log", metavar="DIR", help="Write the match log to DIR")
    return parser


def run(args: argparse.Namespace) -> int:
    # Paths given on the command line are relative to the working directory;
    # relative paths inside the config stay relative to the package assets.
    config = load_config(Path(args.config).resolve() if args.config else None)
    if args.seed is not None:
        config.seed = args.seed
    if args.agents:
        config.agents_file = str(Path(args.agents).resolve())
    if args.weapons:
        config.weapons_file = str(Path(args.weapons).resolve())
    config.debug = config.debug or args.debug

    roster = Roster.from_files(
        config.resolve_path(config.agents_file),
        config.resolve_path(config.weapons_file),
    )

    event_manager = EventManager(enable_debug_logging=config.debug)
    log_manager = LogManager(event_manager, max_messages=config.max_log_messages)
    event_manager.set_debug_callback(log_manager.debug)
    if config.debug:
        log_manager.toggle_debug()
    ConsoleReporter(event_manager)

    rng = create_rng(config.seed)
    console = ConsoleInput(weapons=roster.weapon_types())

    print("Welcome to Text-Based Valorant!")
    mode = console.choose_mode()
    if mode is None:
        print("Invalid choice!")
        return 1

    name = console.prompt_name()
    agent = console.choose_agent(roster, rng)

    match = Match.create(
        human_name=name,
        human_agent=agent,
        mode=mode,
        config=config,
        roster=roster,
        rng=rng,
        human_controller=console.decide,
        event_manager=event_manager,
    )
    match.play()

    if args.save_log:
        event_manager.publish_immediate(LogSaveRequested(turn=match.turn, directory=args.save_log))
    if config.debug:
        print("\n--- Match log ---")
        for entry in log_manager.get_messages():
            print(entry.format())
    return 0


def main():
    args = build_parser().parse_args()
    try:
        sys.exit(run(args))
    except TextValorantError as e:
        print(f"\n\nError: {e}", file=sys.stderr)
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
