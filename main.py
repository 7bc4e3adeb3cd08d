"""
Observer Pattern Demo
Run the subject/observer demonstration scenario.
Usage:
    python main.py
    python main.py --seed 42
    python main.py --debug
"""

import argparse
import logging
import sys
from Notifier.Business.Scenario import run_scenario
from Notifier.Utility.env import load_env_file, get_seed, get_log_level


def main(argv=None):
    """Parse arguments and run the demonstration."""
    load_env_file()

    parser = argparse.ArgumentParser(
        description="Observer pattern demonstration",
        epilog="""
            Examples:
            python main.py                    # Random initial state
            python main.py --seed 42          # Reproducible run
            python main.py --debug            # Show per-observer dispatch
        """
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=get_seed(),
        help='Seed for the subject random source (default: $OBSERVER_SEED)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log at DEBUG level'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else get_log_level(),
        format="%(message)s"
    )

    print(f"\n{'='*60}")
    print("Observer Pattern Demo")
    print(f"{'='*60}")
    print(f"Seed: {args.seed if args.seed is not None else 'random'}")
    print(f"{'='*60}\n")

    try:
        subject = run_scenario(seed=args.seed)
    except KeyboardInterrupt:
        print("\n\nStopped by user")
        return 0
    except Exception as e:
        print(f"\nError running scenario: {e}")
        return 1

    print(f"\nFinal state: {subject.state}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
