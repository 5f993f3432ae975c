"""Diagnostics for N-body simulations."""

from typing import Iterable, Optional, Tuple

import numpy as np

from gravity_sim.physics.body import Body


def _columns(bodies: Iterable[Optional[Body]]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Positions (n, 2), velocities (n, 2) and masses (n,) of live bodies."""
    live = [b for b in bodies if b is not None]
    if not live:
        return np.zeros((0, 2)), np.zeros((0, 2)), np.zeros(0)
    positions = np.array([(b.x, b.y) for b in live], dtype=np.float64)
    velocities = np.array([(b.x_vel, b.y_vel) for b in live], dtype=np.float64)
    masses = np.array([b.mass for b in live], dtype=np.float64)
    return positions, velocities, masses


def live_count(bodies: Iterable[Optional[Body]]) -> int:
    """Number of bodies that have not been absorbed."""
    return sum(1 for b in bodies if b is not None)


def total_mass(bodies: Iterable[Optional[Body]]) -> float:
    """Total mass of live bodies (conserved by merges)."""
    _, _, masses = _columns(bodies)
    return float(np.sum(masses))


def total_momentum(bodies: Iterable[Optional[Body]]) -> np.ndarray:
    """Total linear momentum (px, py) of live bodies."""
    _, velocities, masses = _columns(bodies)
    return np.sum(masses[:, np.newaxis] * velocities, axis=0)


def center_of_mass(bodies: Iterable[Optional[Body]]) -> np.ndarray:
    """Mass-weighted mean position; (0, 0) for an empty system."""
    positions, _, masses = _columns(bodies)
    total = np.sum(masses)
    if total == 0:
        return np.zeros(2)
    return np.sum(masses[:, np.newaxis] * positions, axis=0) / total


def kinetic_energy(bodies: Iterable[Optional[Body]]) -> float:
    """Total kinetic energy: 0.5 * sum(m_i * v_i^2)."""
    _, velocities, masses = _columns(bodies)
    v_sq = np.sum(velocities ** 2, axis=1)
    return float(0.5 * np.sum(masses * v_sq))
