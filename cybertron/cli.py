"""Command line battle runner."""
import argparse
import sys
from typing import Optional

from .core.events import EventManager
from .game.battle_report import BattleReport
from .game.combat import BattleCalculator, DEFAULT_RULES, battle, load_combat_rules
from .game.managers import LogLevel, LogManager
from .game.roster_loader import RosterLoader


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve an Autobot versus Decepticon battle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py assets/rosters/example_battle.yaml
  python main.py roster.json --forecast
  python main.py roster.yaml --rules assets/config/combat_rules.yaml --log-dir logs
        """
    )
    parser.add_argument("roster", help="YAML or JSON roster file")
    parser.add_argument("--rules", help="YAML combat rules file (defaults to built-in rules)")
    parser.add_argument(
        "--forecast",
        action="store_true",
        help="Show the pre-battle forecast before fighting"
    )
    parser.add_argument("--log-dir", help="Save the battle log to this directory")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every buffered log message after the report"
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    event_manager = EventManager(enable_debug_logging=args.debug)
    log_manager = LogManager(event_manager, default_level=LogLevel.DEBUG if args.debug else LogLevel.INFO)
    event_manager.set_debug_callback(log_manager.debug)

    try:
        rules = load_combat_rules(args.rules) if args.rules else DEFAULT_RULES
        transformers = RosterLoader.load_from_file(args.roster)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_manager.config(f"Legendary names: {', '.join(rules.legendary_names)}")
    log_manager.roster(f"Loaded {len(transformers)} transformers from {args.roster}")
    for transformer in transformers:
        for problem in transformer.validate():
            log_manager.warning(f"{transformer.name_including_team}: {problem}")

    if args.forecast:
        forecast = BattleCalculator.calculate_forecast(transformers, rules)
        for line in BattleReport.build_forecast(forecast):
            print(line)
        print()

    result = battle(transformers, rules, event_manager)
    event_manager.process_events()

    for line in BattleReport.build(result):
        print(line)

    if args.debug:
        print()
        for entry in log_manager.get_messages():
            print(entry.format(include_timestamp=True))

    if args.log_dir:
        saved = log_manager.save_log_to_file(args.log_dir)
        if saved is None:
            print(f"Error: could not write battle log to {args.log_dir}", file=sys.stderr)
            return 1
        print(f"Log saved to {saved}")

    return 0
