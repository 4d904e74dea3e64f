"""
Project configuration and constants.

Centralizes all configurable parameters for the 2-3 tree demo and evaluation.
"""

import os

# -----------------------------------------------------------------------------
# Directory Paths
# -----------------------------------------------------------------------------

# Project root directory (where this file is located)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Data directory
DATA_DIR = os.path.join(PROJECT_ROOT, "data")

# Results directory (for plots and benchmark outputs)
RESULTS_DIR = os.path.join(PROJECT_ROOT, "results")

# -----------------------------------------------------------------------------
# Dataset Configuration
# -----------------------------------------------------------------------------

# Optional CSV dataset whose column values are loaded as tree keys
DATASET_FILENAME = "keys.csv"

# Full path to dataset
DATASET_PATH = os.path.join(DATA_DIR, DATASET_FILENAME)

# Column to use as tree key
DATASET_KEY_COLUMN = "key"

# -----------------------------------------------------------------------------
# Demo Configuration
# -----------------------------------------------------------------------------

# Seed shared by the demo and the benchmark for reproducible runs
DEFAULT_SEED = 42

# Random keys added after the fixed ones in the demo session
DEMO_RANDOM_KEYS = 100

# Random removal attempts in the demo session (some will miss)
DEMO_RANDOM_REMOVALS = 20

# Random demo keys are drawn from [0, DEMO_KEY_RANGE)
DEMO_KEY_RANGE = 200

# -----------------------------------------------------------------------------
# Benchmark Configuration
# -----------------------------------------------------------------------------

# Tree sizes (number of stored keys) to benchmark
BENCHMARK_TREE_SIZES = [100, 1000, 10000, 50000]

# Number of timed lookups / updates / removals per tree size
BENCHMARK_OPERATIONS = 1000

# Random keys are drawn from [0, size * BENCHMARK_KEY_SPREAD)
BENCHMARK_KEY_SPREAD = 10

# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------

# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_LEVEL = "INFO"

# Log to file (in addition to console)
LOG_TO_FILE = False

# Log file path (only used if LOG_TO_FILE is True)
LOG_FILE_PATH = os.path.join(PROJECT_ROOT, "tree23.log")
