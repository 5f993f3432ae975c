"""Reproducibility utilities for deterministic runs."""

import time
from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator used for random initial conditions.

    Without a seed the current time is used, so every run starts from a
    new configuration.

    Args:
        seed: Optional random seed

    Returns:
        NumPy Generator
    """
    if seed is None:
        seed = time.time_ns() // 1000
    return np.random.default_rng(seed)

