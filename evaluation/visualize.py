"""
Visualization module for 2-3 tree benchmark results.

Generates plots from benchmark CSV data.

Usage:
    python -m evaluation.visualize
    python -m evaluation.visualize --input results/benchmark_results.csv
    python -m evaluation.visualize --output results/plots/
"""

import argparse
import os
import sys

import matplotlib

matplotlib.use("Agg")

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import pandas as pd

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config


# =============================================================================
# Configuration
# =============================================================================

# Plot styling
TREE_COLOR = "#3498db"  # Blue
BOUND_COLOR = "#e74c3c"  # Red
FIGURE_DPI = 150
FIGURE_SIZE_SCALABILITY = (14, 8)
FIGURE_SIZE_HEIGHT = (8, 6)

# Operation labels for display
OPERATION_LABELS = {
    "insert": "Insert",
    "lookup": "Lookup (hit)",
    "miss": "Lookup (miss)",
    "update": "Update (modify)",
    "delete": "Delete",
    "clone": "Clone",
}

REQUIRED_COLUMNS = {"operation", "tree_size", "mean_us", "std_us", "height"}


# =============================================================================
# Data Loading
# =============================================================================

def load_benchmark_data(filepath: str) -> pd.DataFrame:
    """Load benchmark results from CSV."""
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Benchmark results not found: {filepath}")

    df = pd.read_csv(filepath)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Benchmark results missing columns: {sorted(missing)}")

    print(f"Loaded {len(df)} rows from {filepath}")
    return df


# =============================================================================
# Plot 1: Scalability (Time vs Tree Size)
# =============================================================================

def plot_scalability(df: pd.DataFrame, output_dir: str) -> str:
    """
    Generate scalability plot: mean time per operation vs tree size.

    One subplot per operation, with error bars of one standard deviation and
    a logarithmic size axis.
    """
    operations = [op for op in OPERATION_LABELS if op in set(df["operation"])]

    n_cols = 3
    n_rows = max(1, (len(operations) + n_cols - 1) // n_cols)
    fig, axes = plt.subplots(n_rows, n_cols, figsize=FIGURE_SIZE_SCALABILITY, squeeze=False)
    axes = axes.flatten()

    for idx, op in enumerate(operations):
        ax = axes[idx]
        op_data = df[df["operation"] == op].sort_values("tree_size")

        ax.errorbar(
            op_data["tree_size"],
            op_data["mean_us"],
            yerr=op_data["std_us"],
            marker="o",
            color=TREE_COLOR,
            linewidth=2,
            markersize=7,
            capsize=4,
        )

        ax.set_title(OPERATION_LABELS.get(op, op), fontsize=11, fontweight="bold")
        ax.set_xscale("log")
        ax.set_xlabel("Tree Size (keys)")
        ax.set_ylabel("Mean Time (us)")
        ax.grid(True, alpha=0.3)

    # Hide unused subplots
    for idx in range(len(operations), len(axes)):
        axes[idx].set_visible(False)

    fig.suptitle("2-3 Tree Scalability: Time per Operation vs Tree Size", fontsize=14, fontweight="bold")
    plt.tight_layout()

    output_path = os.path.join(output_dir, "scalability_plot.png")
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches="tight")
    plt.close()

    print(f"Saved: {output_path}")
    return output_path


# =============================================================================
# Plot 2: Height vs Theoretical Bounds
# =============================================================================

def plot_height(df: pd.DataFrame, output_dir: str) -> str:
    """
    Plot measured height after the insert phase against log3(n+1) and log2(n+1).
    """
    data = df[df["operation"] == "insert"].sort_values("tree_size")
    if len(data) == 0:
        print("No insert data found")
        return None

    sizes = data["tree_size"]

    fig, ax = plt.subplots(figsize=FIGURE_SIZE_HEIGHT)
    ax.plot(sizes, data["height"], marker="o", color=TREE_COLOR, linewidth=2, label="Measured height")
    if "height_upper_bound" in data.columns:
        ax.plot(sizes, data["height_upper_bound"], linestyle="--", color=BOUND_COLOR, label="log2(n+1)")
        ax.plot(sizes, data["height_lower_bound"], linestyle=":", color=BOUND_COLOR, label="log3(n+1)")

    ax.set_xscale("log")
    ax.set_xlabel("Tree Size (keys)", fontsize=11)
    ax.set_ylabel("Levels", fontsize=11)
    ax.set_title("2-3 Tree Height vs Theoretical Bounds", fontsize=13, fontweight="bold")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")

    plt.tight_layout()

    output_path = os.path.join(output_dir, "height_plot.png")
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches="tight")
    plt.close()

    print(f"Saved: {output_path}")
    return output_path


# =============================================================================
# Plot 3: Summary Table
# =============================================================================

def plot_summary_table(df: pd.DataFrame, output_dir: str) -> str:
    """
    Generate a summary table image of mean microseconds per operation.
    """
    pivot = df.pivot_table(index="operation", columns="tree_size", values="mean_us", aggfunc="mean")
    operations = [op for op in OPERATION_LABELS if op in pivot.index]
    tree_sizes = list(pivot.columns)

    table_data = []
    for op in operations:
        row = [OPERATION_LABELS[op]]
        for size in tree_sizes:
            value = pivot.loc[op, size]
            row.append("-" if pd.isna(value) else f"{value:.2f}")
        table_data.append(row)

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.axis("off")

    columns = ["Operation"] + [f"N={size}" for size in tree_sizes]

    table = ax.table(
        cellText=table_data,
        colLabels=columns,
        cellLoc="center",
        loc="center",
        colColours=[TREE_COLOR] + ["#f0f0f0"] * len(tree_sizes)
    )

    table.auto_set_font_size(False)
    table.set_fontsize(10)
    table.scale(1.2, 1.6)

    # Color header row
    for j in range(len(columns)):
        table[(0, j)].set_facecolor("#2c3e50")
        table[(0, j)].set_text_props(color="white", fontweight="bold")

    plt.title("Summary: Mean Time per Operation (us)", fontsize=13, fontweight="bold", pad=20)

    tree_patch = mpatches.Patch(color=TREE_COLOR, label="2-3 tree")
    ax.legend(handles=[tree_patch], loc="upper right", bbox_to_anchor=(1, 1.15))

    plt.tight_layout()

    output_path = os.path.join(output_dir, "summary_table.png")
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches="tight")
    plt.close()

    print(f"Saved: {output_path}")
    return output_path


# =============================================================================
# Main
# =============================================================================

def generate_all_plots(input_file: str, output_dir: str) -> None:
    """Generate all visualization plots."""
    os.makedirs(output_dir, exist_ok=True)

    df = load_benchmark_data(input_file)

    print(f"\nGenerating plots to: {output_dir}")
    print("-" * 50)

    plot_scalability(df, output_dir)
    plot_height(df, output_dir)
    plot_summary_table(df, output_dir)

    print("-" * 50)
    print("All plots generated successfully!")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate 2-3 tree benchmark visualizations")
    parser.add_argument(
        "--input", "-i",
        type=str,
        default=os.path.join(config.RESULTS_DIR, "benchmark_results.csv"),
        help="Input CSV file from benchmark"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=config.RESULTS_DIR,
        help="Output directory for plots"
    )
    args = parser.parse_args()

    try:
        generate_all_plots(args.input, args.output)
        return 0
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("Run the benchmark first: python -m evaluation.benchmark")
        return 1


if __name__ == "__main__":
    sys.exit(main())
