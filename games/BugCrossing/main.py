#!/usr/bin/env python3
"""Bug Crossing - Standalone Entry Point.

Usage:
    python -m games.BugCrossing.main
    python -m games.BugCrossing.main --level classic --seed 42
    python -m games.BugCrossing.main --level-file my_level.yaml
    python -m games.BugCrossing.main --list-levels
"""

import argparse
import random
import sys
from typing import List, Optional

import yaml

from crossing.logging import configure_logging, get_logger
from games.BugCrossing import config
from games.BugCrossing.game.level_loader import LevelLoader

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Bug Crossing - cross the lanes without touching a bug")

    parser.add_argument('--level', type=str, default=config.DEFAULT_LEVEL,
                        help='Level id from the levels directory')
    parser.add_argument('--level-file', type=str, default=None,
                        help='Path to a level YAML file (overrides --level)')
    parser.add_argument('--levels-dir', type=str, default=None,
                        help='Directory holding level YAML files')
    parser.add_argument('--assets', type=str, default=None,
                        help='Directory holding the sprite images')
    parser.add_argument('--fps', type=int, default=config.FPS,
                        help='Target frame rate')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for obstacle lanes and speeds')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'WARN', 'ERROR', 'CRITICAL', 'OFF'],
                        help='Default log level')
    parser.add_argument('--list-levels', action='store_true',
                        help='List available levels and exit')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Bug Crossing standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    loader = LevelLoader(args.levels_dir)

    if args.list_levels:
        for level_id in loader.list_available_levels():
            print(level_id)
        return 0

    try:
        if args.level_file:
            level = loader.load_file(args.level_file)
        else:
            level = loader.load_level(args.level)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        log.error("%s", e)
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None

    # Imported here so --list-levels and level errors don't open a window
    from games.BugCrossing.engine import GameEngine

    engine = GameEngine(level=level, asset_dir=args.assets, fps=args.fps, rng=rng)

    print("\n" + "=" * 50)
    print("BUG CROSSING")
    print("=" * 50)
    print("Controls:")
    print("  - Arrow keys to move")
    print("  - ENTER to play again after a win")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        engine.run()
    finally:
        engine.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
