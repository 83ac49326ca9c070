"""
Datasets package public API.

Re-export the generators so callers can write:
    from sortkit.datasets import make_dataset, make_random_vector, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_dataset, make_random_vector

__all__ = ["make_dataset", "make_random_vector", "SUPPORTED_DISTS"]
