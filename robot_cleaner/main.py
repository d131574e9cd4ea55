#!/usr/bin/env python3
"""
Robot Cleaner Simulation

A grid-cleaning robot that sweeps a room with dirt and obstacles using one
of three traversal strategies, redrawing the room after every step.

Usage:
    robot-cleaner [--config configs/default.yaml] [options]

Examples:
    robot-cleaner
    robot-cleaner --strategy spiral --delay 0.05
    robot-cleaner --config configs/default.yaml --strategy sweep --no-display --gif
    robot-cleaner --strategy perimeter --no-display --no-csv --no-snapshot --quiet
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from robot_cleaner.config import load_config, default_config
from robot_cleaner.model.engine import SimulationEngine
from robot_cleaner.model.strategies import StrategyKind
from robot_cleaner.export.console import ConsoleRenderer
from robot_cleaner.export.csv_writer import CSVWriter
from robot_cleaner.export.visualizer import Visualizer
from robot_cleaner.export.reporter import Reporter


MENU_CHOICES = {
    '1': StrategyKind.SWEEP,
    '2': StrategyKind.PERIMETER,
    '3': StrategyKind.SPIRAL,
}


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Robot Cleaner Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    robot-cleaner
    robot-cleaner --strategy spiral --delay 0.05
    robot-cleaner --config configs/default.yaml --strategy sweep --no-display --gif
    robot-cleaner --strategy perimeter --no-display --no-csv --no-snapshot --quiet
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file (default: built-in map)')
    parser.add_argument('--strategy', choices=[k.value for k in StrategyKind],
                        default=None,
                        help='Cleaning strategy (prompted if not given)')

    # Spiral
    parser.add_argument('--max-idle-steps', type=int, default=None,
                        help='Stop the spiral after this many steps without a new cell')

    # Display
    parser.add_argument('--delay', type=float, default=None,
                        help='Pause in seconds after each redraw')
    parser.add_argument('--no-display', dest='display', action='store_false',
                        default=None, help='Do not redraw the room after each step')

    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    return parser.parse_args(argv)


def choose_strategy(read: Callable[[str], str] = input,
                    out: Optional[TextIO] = None) -> StrategyKind:
    """Interactive strategy menu; unknown answers fall back to the sweep."""
    out = out if out is not None else sys.stdout
    print("Initialize robot", file=out)
    print("Choose cleaning strategy:", file=out)
    for key, kind in MENU_CHOICES.items():
        print(f"{key} = {kind.label}", file=out)

    try:
        answer = read("Enter choice (1/2/3): ")
    except EOFError:
        answer = ''

    kind = MENU_CHOICES.get(answer.strip())
    if kind is None:
        print("Invalid choice, defaulting to Zig-Zag.", file=out)
        kind = StrategyKind.SWEEP
    return kind


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    if args.config is None:
        config = default_config()
    else:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
            return 1
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

    # Apply CLI overrides
    if args.strategy is not None:
        config.strategy = StrategyKind(args.strategy)
    if args.max_idle_steps is not None:
        config.spiral.max_idle_steps = args.max_idle_steps
    if args.delay is not None:
        config.display.delay = args.delay
    if args.display is not None:
        config.display.enabled = args.display
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    config.out_dir = args.out_dir

    if config.strategy is None:
        config.strategy = choose_strategy()

    if not config.quiet:
        print(f"Initializing simulation...")
        print(f"  Grid: {config.grid.width}x{config.grid.height}")
        print(f"  Strategy: {config.strategy.label}")

    engine = SimulationEngine(config)

    # Initialize listeners
    if config.display.enabled and not config.quiet:
        engine.add_listener(ConsoleRenderer(delay=config.display.delay))

    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(config.out_dir / 'cleaning_log.csv')
        csv_writer.open()
        engine.add_listener(csv_writer)

    visualizer = Visualizer(config.grid.width, config.grid.height)
    if config.gif_enabled:
        engine.add_listener(visualizer)

    reporter = Reporter(str(args.config) if args.config else None)
    engine.add_listener(reporter)

    try:
        final_state = engine.run()
    finally:
        if csv_writer:
            csv_writer.close()

    if not config.quiet:
        print("Done.")
        if csv_writer:
            print(f"\nCSV saved: {config.out_dir / 'cleaning_log.csv'}")

    if config.snapshot_enabled:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(final_state, snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'cleaning.gif'
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path, fps=10)
        visualizer.clear_frames()
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    # Print summary report
    if not config.quiet:
        report = reporter.generate_summary(
            final_state,
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
