"""
Benchmark system for 2-3 tree evaluation.

Measures, for several tree sizes:
- Per-operation wall time of insert, lookup, miss, update, delete and clone
- Tree height against the theoretical bounds log3(n+1) <= h <= log2(n+1)

Outputs results to CSV for visualization.

Usage:
    python -m evaluation.benchmark
    python -m evaluation.benchmark --quick  # Quick run with smaller parameters
"""

import argparse
import csv
import math
import os
import statistics
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from src.common.data_loader import get_random_keys
from src.common.logger import get_logger
from src.tree23.tree import Tree23

logger = get_logger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""
    # Tree sizes to test
    tree_sizes: List[int] = field(default_factory=lambda: list(config.BENCHMARK_TREE_SIZES))

    # Number of operations to measure for lookup/update/delete
    num_operations: int = config.BENCHMARK_OPERATIONS

    # Random seed for reproducibility
    seed: int = config.DEFAULT_SEED

    # Output directory
    output_dir: str = config.RESULTS_DIR


@dataclass
class QuickBenchmarkConfig(BenchmarkConfig):
    """Smaller configuration for quick testing."""
    tree_sizes: List[int] = field(default_factory=lambda: [100, 1000, 5000])
    num_operations: int = 200


# =============================================================================
# Statistics Helper
# =============================================================================

@dataclass
class OperationStats:
    """Timing statistics for a single operation type at one tree size."""
    operation: str
    tree_size: int
    count: int
    total_us: float
    min_us: float
    max_us: float
    mean_us: float
    std_us: float
    height: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for CSV output."""
        return {
            "operation": self.operation,
            "tree_size": self.tree_size,
            "count": self.count,
            "total_us": round(self.total_us, 3),
            "min_us": round(self.min_us, 3),
            "max_us": round(self.max_us, 3),
            "mean_us": round(self.mean_us, 4),
            "std_us": round(self.std_us, 4),
            "height": self.height,
            "height_lower_bound": round(math.log(self.tree_size + 1, 3), 4),
            "height_upper_bound": round(math.log2(self.tree_size + 1), 4),
        }


def compute_stats(operation: str, tree_size: int, height: int, timings_us: List[float]) -> OperationStats:
    """Compute statistics from a list of per-operation timings in microseconds."""
    if not timings_us:
        return OperationStats(operation, tree_size, 0, 0.0, 0.0, 0.0, 0.0, 0.0, height)

    return OperationStats(
        operation=operation,
        tree_size=tree_size,
        count=len(timings_us),
        total_us=sum(timings_us),
        min_us=min(timings_us),
        max_us=max(timings_us),
        mean_us=statistics.mean(timings_us),
        std_us=statistics.stdev(timings_us) if len(timings_us) > 1 else 0.0,
        height=height,
    )


def time_each(operation: Callable[[Any], Any], items: List[Any]) -> List[float]:
    """Call operation on every item, returning each call's duration in microseconds."""
    timings = []
    for item in items:
        start = time.perf_counter()
        operation(item)
        timings.append((time.perf_counter() - start) * 1e6)
    return timings


# =============================================================================
# Benchmark Runner
# =============================================================================

class BenchmarkRunner:
    """Runs benchmark experiments for the 2-3 tree."""

    def __init__(self, cfg: BenchmarkConfig):
        """Initialize the benchmark runner."""
        self.cfg = cfg
        self.results: List[OperationStats] = []

    def run_all(self) -> List[OperationStats]:
        """Run all benchmarks and return results."""
        for tree_size in self.cfg.tree_sizes:
            print()
            print("=" * 60)
            print(f"BENCHMARKING WITH {tree_size} KEYS")
            print("=" * 60)
            self._benchmark_size(tree_size)

        return self.results

    def _record(self, operation: str, tree: Tree23, tree_size: int, timings: List[float]) -> None:
        stats = compute_stats(operation, tree_size, tree.height(), timings)
        self.results.append(stats)
        print(f"  {operation:<8} mean={stats.mean_us:.2f} us  height={stats.height}")

    def _benchmark_size(self, tree_size: int) -> None:
        """Run all benchmarks for a single tree size."""
        key_range = tree_size * config.BENCHMARK_KEY_SPREAD
        keys = get_random_keys(tree_size, seed=self.cfg.seed, key_range=key_range)
        ops = min(self.cfg.num_operations, tree_size)

        # 1. INSERT (builds the tree)
        tree = Tree23()
        timings = time_each(tree.add, keys)
        if tree.size() != tree_size:
            logger.error(f"Expected {tree_size} keys after insert, found {tree.size()}")
        self._record("insert", tree, tree_size, timings)

        # 2. LOOKUP of present keys
        self._record("lookup", tree, tree_size, time_each(tree.contains, keys[:ops]))

        # 3. MISS: lookups of keys outside the key range
        misses = list(range(key_range, key_range + ops))
        self._record("miss", tree, tree_size, time_each(tree.contains, misses))

        # 4. UPDATE: move each key just past the key range and back
        updates = list(zip(keys[:ops], range(key_range, key_range + ops)))
        timings = time_each(lambda pair: tree.modify(pair[0], pair[1]), updates)
        for original, moved in updates:
            tree.modify(moved, original)
        self._record("update", tree, tree_size, timings)

        # 5. CLONE (a single O(n log n) operation)
        self._record("clone", tree, tree_size, time_each(lambda t: t.clone(), [tree]))

        # 6. DELETE from the end of the key list
        self._record("delete", tree, tree_size, time_each(tree.remove, keys[-ops:]))

        if tree.size() != tree_size - ops:
            logger.error(f"Expected {tree_size - ops} keys after delete, found {tree.size()}")

    def save_results(self, filename: str = "benchmark_results.csv") -> str:
        """Save results to CSV file."""
        os.makedirs(self.cfg.output_dir, exist_ok=True)
        filepath = os.path.join(self.cfg.output_dir, filename)

        with open(filepath, "w", newline="") as f:
            if self.results:
                writer = csv.DictWriter(f, fieldnames=self.results[0].to_dict().keys())
                writer.writeheader()
                for result in self.results:
                    writer.writerow(result.to_dict())

        print(f"\nResults saved to: {filepath}")
        return filepath


# =============================================================================
# Result Printer
# =============================================================================

OPERATIONS = ["insert", "lookup", "miss", "update", "delete", "clone"]


def print_summary(results: List[OperationStats]) -> None:
    """Print a summary table of results."""
    print()
    print("=" * 80)
    print("BENCHMARK SUMMARY (mean microseconds per operation)")
    print("=" * 80)

    tree_sizes = sorted(set(r.tree_size for r in results))

    header = f"{'Operation':<12}" + "".join(f"{'N=' + str(size):>14}" for size in tree_sizes)
    print(header)
    print("-" * len(header))

    for op in OPERATIONS:
        row = f"{op:<12}"
        for size in tree_sizes:
            result = next((r for r in results if r.operation == op and r.tree_size == size), None)
            row += f"{result.mean_us:>14.2f}" if result else f"{'N/A':>14}"
        print(row)

    print()
    print(f"{'Size':<12}{'Height':>10}{'log3(n+1)':>12}{'log2(n+1)':>12}")
    for size in tree_sizes:
        insert = next((r for r in results if r.operation == "insert" and r.tree_size == size), None)
        if insert is None:
            continue
        print(f"{size:<12}{insert.height:>10}{math.log(size + 1, 3):>12.2f}{math.log2(size + 1):>12.2f}")


# =============================================================================
# Main
# =============================================================================

def main():
    """Main entry point for benchmark."""
    parser = argparse.ArgumentParser(description="2-3 Tree Benchmark System")
    parser.add_argument("--quick", action="store_true", help="Run quick benchmark with smaller parameters")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV filename")
    args = parser.parse_args()

    if args.quick:
        print("Running QUICK benchmark (smaller parameters)...")
        cfg = QuickBenchmarkConfig()
    else:
        print("Running FULL benchmark...")
        cfg = BenchmarkConfig()

    print("Configuration:")
    print(f"  Tree sizes: {cfg.tree_sizes}")
    print(f"  Operations per test: {cfg.num_operations}")
    print(f"  Random seed: {cfg.seed}")

    start_time = time.time()

    runner = BenchmarkRunner(cfg)
    results = runner.run_all()

    elapsed = time.time() - start_time
    print(f"\nBenchmark completed in {elapsed:.1f} seconds")

    runner.save_results(args.output)
    print_summary(results)

    return 0


if __name__ == "__main__":
    sys.exit(main())
