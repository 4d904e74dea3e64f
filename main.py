"""
2-3 Tree - Main Demo

Simple demonstration that the 2-3 tree works correctly.
Shows insertion with splits, duplicate rejection, traversals, a card deck,
a random add/remove session and cloning.

For timing and height measurements, use the benchmark system (evaluation/benchmark.py).

Usage:
    python main.py
    python main.py --seed 7 --log-level DEBUG
    python main.py --csv data/keys.csv --column key
"""

import argparse
import sys

import config
from src.common.data_loader import (
    get_letter_keys,
    get_random_draws,
    get_shuffled_deck,
    load_keys_from_csv,
)
from src.common.logger import get_logger, setup_logging
from src.tree23 import traversal
from src.tree23.tree import Tree23

logger = get_logger(__name__)


def print_header(title: str) -> None:
    """Print a section header."""
    print()
    print("=" * 60)
    print(title)
    print("=" * 60)


def print_tree(tree: Tree23, show_levels: bool = True) -> None:
    """Print size, height and the three traversals of a tree."""
    print(f"Size: {tree.size()}  Height: {tree.height()}")
    print("InOrder:  ", end="")
    traversal.print_in_order(tree.root)
    print("PreOrder: ", end="")
    traversal.print_pre_order(tree.root)
    if show_levels:
        traversal.print_level_order(tree.root)


def demo_one_at_a_time() -> None:
    print_header("1. INSERT ONE AT A TIME")
    tree = Tree23()
    for key in (10, 20, 30, 40):
        tree.add(key)
        print(f"\nadd({key})")
        traversal.print_level_order(tree.root)

    print_header("2. DUPLICATES")
    tree = Tree23()
    for key in (5, 10, 2, 5):
        added = tree.add(key)
        print(f"add({key}) -> {added}")
    print(f"Size: {tree.size()}")


def demo_ascending(count: int = 13) -> None:
    print_header("3. ASCENDING INTEGERS AND LETTERS")
    numbers = Tree23(range(10, 10 * (count + 1), 10))
    print_tree(numbers)
    print()
    letters = Tree23(get_letter_keys(count))
    print_tree(letters, show_levels=False)

    print()
    print(f"Removing {count} integers in ascending order...")
    for key in range(10, 10 * (count + 1), 10):
        if not numbers.remove(key):
            logger.error(f"Failed to remove {key}")
    print(f"Empty after removals: {numbers.is_empty()}")


def demo_cards(seed: int) -> None:
    print_header("4. CARD DECK")
    deck = Tree23(get_shuffled_deck(seed))
    print(f"Cards: {deck.size()}  Height: {deck.height()}")
    print(f"Lowest: {deck.find_min()}  Highest: {deck.find_max()}")
    print("Hearts: ", end="")
    traversal.print_in_order(deck.root, lambda card: card.suit.name == "HEARTS")


def demo_random_session(seed: int) -> None:
    print_header("5. RANDOM ADD / REMOVE SESSION")
    tree = Tree23([5, 10, 4, 8, 20, 30, 40, 50, 60, 2, 70, 200, 65, 1, 62, 6])
    added = sum(tree.add(key) for key in get_random_draws(
        config.DEMO_RANDOM_KEYS, seed=seed, key_range=config.DEMO_KEY_RANGE))
    print(f"Added {added} of {config.DEMO_RANDOM_KEYS} random draws, size is {tree.size()}")
    print("PreOrder: ", end="")
    traversal.print_pre_order(tree.root)

    for key in get_random_draws(config.DEMO_RANDOM_REMOVALS, seed=seed + 1, key_range=config.DEMO_KEY_RANGE):
        print(f"remove({key}) -> {'removed' if tree.remove(key) else 'not found'}")

    print(f"Size: {tree.size()}  Height: {tree.height()}")
    print(f"Min: {tree.find_min()}  Max: {tree.find_max()}")

    print_header("6. CLONE")
    copy = tree.clone()
    tree.add(-1)
    print(f"Original min after add(-1): {tree.find_min()}")
    print(f"Clone min:                  {copy.find_min()}")


def demo_csv(path: str, column: str) -> int:
    print_header(f"CSV KEYS: {path}")
    try:
        keys = load_keys_from_csv(path, column)
    except (FileNotFoundError, KeyError) as e:
        print(f"Error: {e}")
        return 1
    tree = Tree23()
    if not tree.add_all(keys):
        logger.warning("Some keys compared equal and were skipped")
    print(f"Size: {tree.size()}  Height: {tree.height()}")
    print(f"Min: {tree.find_min()}  Max: {tree.find_max()}")
    return 0


def main():
    """
    Main demo function.

    Runs every demo section, or loads keys from a CSV file when --csv is given.
    """
    parser = argparse.ArgumentParser(description="2-3 tree demo")
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="Random seed")
    parser.add_argument("--log-level", type=str, default=None, help="Override config.LOG_LEVEL")
    parser.add_argument("--csv", type=str, default=None, help="Load keys from this CSV file instead")
    parser.add_argument("--column", type=str, default=None, help="CSV column holding the keys")
    args = parser.parse_args()

    if args.log_level:
        setup_logging(level=args.log_level, force=True)

    if args.csv:
        return demo_csv(args.csv, args.column)

    print_header("2-3 TREE - DEMO")
    print("For measurements, run: python -m evaluation.benchmark")

    demo_one_at_a_time()
    demo_ascending()
    demo_cards(args.seed)
    demo_random_session(args.seed)

    print_header("DEMO COMPLETE")
    return 0


if __name__ == "__main__":
    sys.exit(main())
