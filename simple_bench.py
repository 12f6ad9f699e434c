import argparse
import random
import statistics
import time

from faker import Faker

from redblack.rbtree import RBTree


def parse_args():
    parser = argparse.ArgumentParser(description="Run a simple benchmark")
    parser.add_argument("-n", type=int, default=100000, help="number of keys")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--ascending", default=False, action="store_true")
    parser.add_argument("--validate", default=False, action="store_true")
    return parser.parse_args()


def generate_keys(n, seed):
    fake = Faker()
    Faker.seed(seed)
    return [fake.name() for _ in range(n)]


def report_stats(report, stats):
    for k, v in stats.items():
        report.append(f"{k:<6}: {v}")


def report_results(report, writes, reads):
    write_stats = {
        "avg": statistics.mean(writes),
        "min": min(writes),
        "max": max(writes),
        "median": statistics.median(writes),
        "stddev": statistics.pstdev(writes),
    }
    read_stats = {
        "avg": statistics.mean(reads),
        "min": min(reads),
        "max": max(reads),
        "median": statistics.median(reads),
        "stddev": statistics.pstdev(reads),
    }

    report.append(
        f"{len(writes)/sum(writes):.2f} inserts/sec ({len(writes)} total in {sum(writes):.2f} sec)"
    )
    report_stats(report, write_stats)
    report.append("")
    report.append(
        f"{len(reads)/sum(reads):.2f} searches/sec ({len(reads)} total in {sum(reads):.2f} sec)"
    )
    report_stats(report, read_stats)


if __name__ == "__main__":
    args = parse_args()
    report = []

    keys = generate_keys(args.n, args.seed)
    if args.ascending:
        keys.sort()
    tree = RBTree()

    print("=========Starting Benchmark=========\n")
    print("- Test insert performance [ ]", end="\r", flush=True)
    write_times = []
    for key in keys:
        start = time.perf_counter()
        tree.insert(key)
        write_times.append(time.perf_counter() - start)
    print("- Test insert performance [x]")

    lookups = list(keys)
    random.Random(args.seed).shuffle(lookups)

    print("- Test search performance [ ]", end="\r", flush=True)
    read_times = []
    for key in lookups:
        start = time.perf_counter()
        result = tree.search(key)
        read_times.append(time.perf_counter() - start)
        assert result is not None and result.key == key, f"expected {key} got {result}"
    print("- Test search performance [x]")

    if args.validate:
        print("- Test red black invariants [ ]", end="\r", flush=True)
        tree.validate()
        print("- Test red black invariants [x]")

    report_results(report, write_times, read_times)
    report.append("")
    report.append(f"{len(tree)} keys ({len(set(keys))} distinct)")
    report.append(f"height {tree.height()}, black height {tree.black_height()}")
    print()
    print("\n".join(report))
