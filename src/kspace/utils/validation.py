"""
Input validation utilities.

Argument checks shared by the Space engine and the KMeans estimator, plus
conversion of array-like input into the tensors the engine works with.
"""

from typing import Any, Optional, Union
import numbers
import torch
from torch import Tensor
import numpy as np


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float64,
                  ensure_finite: bool = True) -> Tensor:
    """Validate and convert input data to a 2D tensor.

    Args:
        X: Input data (tensor, numpy array, or list of rows)
        dtype: Target data type
        ensure_finite: Whether to check for inf/nan

    Returns:
        (n, d) tensor

    Raises:
        TypeError: If X cannot be converted
        ValueError: If validation fails
    """
    if isinstance(X, Tensor):
        X = X.detach().to(dtype=dtype, device='cpu')
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(X).to(dtype=dtype)
    elif isinstance(X, (list, tuple)):
        X = torch.tensor(X, dtype=dtype)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() == 1:
        X = X.unsqueeze(1)
    elif X.dim() != 2:
        raise ValueError(f"Expected 2D array, got {X.dim()}D")

    if X.shape[1] < 1:
        raise ValueError("Found 0 features, but need at least 1")

    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def check_n_clusters(n_clusters: int) -> None:
    """Validate number of clusters.

    Raises:
        TypeError: If n_clusters is not an integer
        ValueError: If n_clusters is not positive
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise ValueError(f"n_clusters must be positive, got {n_clusters}")


def check_callback(callback: Any) -> None:
    """Validate an optional iteration callback.

    Raises:
        TypeError: If callback is given but cannot be called
    """
    if callback is not None and not callable(callback):
        raise TypeError(f"Invalid iteration callback: {callback!r} is not callable")


def check_max_iter(max_iter: Optional[int]) -> None:
    if max_iter is None:
        return
    if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral):
        raise TypeError(f"max_iter must be int or None, got {type(max_iter)}")
    if max_iter <= 0:
        raise ValueError(f"max_iter must be positive, got {max_iter}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a non-deterministic seed

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, numbers.Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")
