"""
sortkit: classic in-place sorting algorithms with comparison/swap counters,
plus the dataset generators and timing harness used to benchmark them.
"""

from sortkit.algorithms import ALGORITHMS, SortResult, get_algorithm
from sortkit.datasets import make_random_vector

__version__ = "0.1.0"

__all__ = ["ALGORITHMS", "SortResult", "get_algorithm", "make_random_vector", "__version__"]
