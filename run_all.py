"""
2-3 Tree - Run All

One-click script that runs the test suite, the demo, the benchmark, and
generates plots.

Usage:
    python run_all.py                # Tests + demo + full benchmark + plots
    python run_all.py --quick        # Quick benchmark instead of the full one
    python run_all.py --skip-tests   # Skip the pytest step
"""

import argparse
import os
import subprocess
import sys
import time
from typing import List, Tuple

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

Step = Tuple[str, List[str]]


def run_step(description: str, command: List[str]) -> bool:
    """Run a command from the project root and report whether it succeeded."""
    print()
    print("=" * 60)
    print(f"  {description}")
    print("=" * 60)
    print(f"  Command: {' '.join(command)}")
    print()

    result = subprocess.run(command, cwd=PROJECT_ROOT)

    if result.returncode != 0:
        print(f"\n  [FAILED] {description} (exit code {result.returncode})")
        return False

    print(f"\n  [OK] {description}")
    return True


def build_steps(args: argparse.Namespace) -> List[Step]:
    """Assemble the pipeline from the command-line switches."""
    python = sys.executable
    steps: List[Step] = []

    if not args.skip_tests:
        steps.append(("Tests (pytest)", [python, "-m", "pytest", "-q", "tests"]))

    if not args.skip_demo:
        steps.append(("Demo (all tree operations)", [python, "main.py", "--seed", str(args.seed)]))

    if not args.skip_benchmark:
        bench_cmd = [python, "-m", "evaluation.benchmark"]
        if args.quick:
            bench_cmd.append("--quick")
        steps.append(("Benchmark (timings and height)", bench_cmd))

    steps.append(("Generate plots", [python, "-m", "evaluation.visualize"]))
    return steps


def main():
    parser = argparse.ArgumentParser(description="Run the full 2-3 tree test, demo, benchmark, and plot pipeline.")
    parser.add_argument("--quick", action="store_true", help="Run quick benchmark with smaller parameters")
    parser.add_argument("--seed", type=int, default=42, help="Seed passed to the demo")
    parser.add_argument("--skip-tests", action="store_true", help="Skip the test suite")
    parser.add_argument("--skip-demo", action="store_true", help="Skip the demo step")
    parser.add_argument("--skip-benchmark", action="store_true", help="Skip the benchmark step (use existing results)")
    args = parser.parse_args()

    start = time.time()

    print()
    print("#" * 56)
    print("#" + "2-3 Tree - Test, Demo & Evaluation".center(54) + "#")
    print("#" * 56)
    print(f"  Mode: {'QUICK' if args.quick else 'FULL'}")

    steps = build_steps(args)
    for number, (description, command) in enumerate(steps, start=1):
        if not run_step(f"Step {number}/{len(steps)}: {description}", command):
            return 1

    elapsed = time.time() - start

    print()
    print("=" * 60)
    print("  ALL DONE")
    print("=" * 60)
    print(f"  Total time: {elapsed:.1f} seconds")
    print()
    print("  Output files:")
    print("    results/benchmark_results.csv - Raw benchmark data")
    print("    results/scalability_plot.png  - Time per operation vs tree size")
    print("    results/height_plot.png       - Height vs log2/log3 bounds")
    print("    results/summary_table.png     - Summary table")
    print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
