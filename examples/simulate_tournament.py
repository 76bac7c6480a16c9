import argparse
import logging
import sys

from bbtourney.exceptions import DrawError
from bbtourney.examples.tournaments import simulate_olympics


def simulate_tournament():
    parser = argparse.ArgumentParser(description="Simulate the Olympic basketball tournament")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--third-place",
        choices=["runner_up", "playoff"],
        default="runner_up",
        help="Report the final's loser as third or play a third place match",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every match")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        simulate_olympics(args.seed, args.third_place)
    except DrawError as err:
        print(f"Knockout draw failed: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    simulate_tournament()
