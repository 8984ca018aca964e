"""Utility functions for K-Space."""

from .sampling import randint_inclusive
from .validation import (
    validate_data,
    check_n_clusters,
    check_callback,
    check_max_iter,
    check_random_state
)

__all__ = [
    # Sampling
    'randint_inclusive',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_callback',
    'check_max_iter',
    'check_random_state'
]
