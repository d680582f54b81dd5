"""Command line comparison of two poker hands."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from poker_hands.core.card import InvalidCardCode
from poker_hands.core.hand import InvalidHandSize
from poker_hands.evaluation.comparator import HandComparator
from poker_hands.evaluation.evaluation_config import get_rule_config
from poker_hands.evaluation.hand_description import HandDescriber
from poker_hands.evaluation.evaluator import HandEvaluator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poker_hands",
        description="Compare two five-card poker hands",
    )
    parser.add_argument("hand_a", help='First hand, e.g. "AS AH 2H AD AC"')
    parser.add_argument("hand_b", help='Second hand, e.g. "JS JD JC JH 3D"')
    parser.add_argument(
        "--rules",
        default=None,
        help="Rule set id (default: $POKER_HANDS_RULES or 'standard')",
    )
    parser.add_argument(
        "--detailed",
        action="store_true",
        default=False,
        help="Show detailed hand descriptions",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        rules = get_rule_config(args.rules)
    except ValueError as e:
        parser.error(str(e))

    evaluator = HandEvaluator()
    try:
        hand_a = evaluator.evaluate(args.hand_a)
        hand_b = evaluator.evaluate(args.hand_b)
    except (InvalidCardCode, InvalidHandSize) as e:
        parser.error(str(e))

    describer = HandDescriber(evaluator)
    describe = describer.describe_hand_detailed if args.detailed else describer.describe_hand
    result = HandComparator(rules, evaluator).compare(hand_a, hand_b)

    print(f"{hand_a.hand}: {describe(hand_a)}")
    print(f"{hand_b.hand}: {describe(hand_b)}")
    print(result)
    return 0
