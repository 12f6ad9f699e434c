import argparse
import logging

from redblack.rbtree import COLOR_NAMES
from redblack.samples import SAMPLES, load_sample
from redblack.settings import DEFAULT_SEARCH_KEY


def parse_args():
    parser = argparse.ArgumentParser(description="Build a sample red black tree")
    parser.add_argument("--sample", type=int, default=2, choices=sorted(SAMPLES))
    parser.add_argument("--search", type=int, default=DEFAULT_SEARCH_KEY)
    parser.add_argument("--trace", default=False, action="store_true")
    return parser.parse_args()


def format_items(items):
    return " ".join(f"{key}({COLOR_NAMES[color]})" for key, color in items)


if __name__ == "__main__":
    args = parse_args()

    trace = None
    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")
        trace = logging.getLogger("demo").debug

    tree = load_sample(args.sample, trace=trace)

    print(f"\n Pre-Order tree ==> {format_items(tree.preorder())}")
    print(f" In-Order tree  ==> {format_items(tree.traverse())}")
    print(f" height {tree.height()}, black height {tree.black_height()}")

    result = tree.search(args.search)
    if result is not None:
        print(f" Key {args.search} was found in the tree.")
        print(result.describe())
    else:
        print(f" Key {args.search} not found in the tree.")
