from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

import numpy as np

from relmotion.physics.cw_relative import propagate_hcw
from relmotion.physics.kepler import circular_mean_motion, true_anomaly_at_time
from relmotion.physics.state import OrbitalElements, RelativeState
from relmotion.physics.yamanaka_ankersen import propagate_ya

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trajectory:
    times: np.ndarray        # elapsed time from the initial epoch (s)
    positions: np.ndarray    # (N, 3) m, in `frame` ordering
    velocities: np.ndarray   # (N, 3) m/s
    frame: str

    def state_at(self, idx: int) -> RelativeState:
        return RelativeState(position=self.positions[idx], velocity=self.velocities[idx])


def _as_times(times: Sequence[float]) -> np.ndarray:
    arr = np.atleast_1d(np.asarray(times, dtype=float))
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError("times must be a non-empty 1D sequence")
    return arr


def sample_ya(
    initial: RelativeState,
    elements: OrbitalElements,
    theta0: float,
    times: Sequence[float],
    frame: str,
) -> Trajectory:
    """
    Propagate `initial` to every elapsed time in `times` with the elliptical solution.
    The final true anomaly of each sample comes from Kepler's equation, so theta and
    elapsed time are always consistent here.
    """
    times = _as_times(times)
    positions = np.empty((times.size, 3))
    velocities = np.empty((times.size, 3))

    for i, dt in enumerate(times):
        theta_f = true_anomaly_at_time(elements, theta0, float(dt))
        st = propagate_ya(initial, elements, theta0, theta_f, float(dt), frame)
        positions[i] = st.position
        velocities[i] = st.velocity

    logger.debug("Sampled YA trajectory: %d points over [%.1f, %.1f] s", times.size, times[0], times[-1])
    return Trajectory(times=times, positions=positions, velocities=velocities, frame=frame)


def sample_hcw(initial: RelativeState, n: float, times: Sequence[float], frame: str) -> Trajectory:
    times = _as_times(times)
    positions = np.empty((times.size, 3))
    velocities = np.empty((times.size, 3))

    for i, dt in enumerate(times):
        st = propagate_hcw(initial, n, float(dt), frame)
        positions[i] = st.position
        velocities[i] = st.velocity

    return Trajectory(times=times, positions=positions, velocities=velocities, frame=frame)


def _parabolic_refine(times: np.ndarray, dists: np.ndarray, idx: int) -> Tuple[float, float]:
    """
    3-point parabolic refinement around idx (idx-1, idx, idx+1).
    Returns (t_refined, d_refined). At the ends of the window, returns the sample itself.
    """
    if idx <= 0 or idx >= len(times) - 1:
        return float(times[idx]), float(dists[idx])

    t0, t1, t2 = float(times[idx - 1]), float(times[idx]), float(times[idx + 1])
    y0, y1, y2 = float(dists[idx - 1]), float(dists[idx]), float(dists[idx + 1])

    denom = y0 - 2.0 * y1 + y2
    if abs(denom) < 1e-12:
        return t1, y1

    # vertex location (assumes uniform spacing)
    dt = t1 - t0
    delta = 0.5 * (y0 - y2) / denom
    # time grid may run backward (negative elapsed times)
    t_star = max(min(t0, t2), min(max(t0, t2), t1 + delta * dt))

    y_star = y1 - 0.25 * (y0 - y2) * delta
    return float(t_star), float(max(0.0, y_star))


def closest_approach(trajectory: Trajectory) -> Tuple[float, float]:
    """Time (s) and range (m) of minimum separation along a sampled trajectory."""
    dists = np.linalg.norm(trajectory.positions, axis=1)
    idx = int(np.argmin(dists))
    return _parabolic_refine(trajectory.times, dists, idx)


def compare_solvers(
    initial: RelativeState,
    elements: OrbitalElements,
    theta0: float,
    times: Sequence[float],
    frame: str,
) -> Dict[str, np.ndarray]:
    """
    Position / velocity difference norms between the elliptical solution and CW
    evaluated at the circular rate mu^2/h^3. Near zero for e = 0; grows with e.
    """
    ya = sample_ya(initial, elements, theta0, times, frame)
    hcw = sample_hcw(initial, circular_mean_motion(elements), times, frame)

    pos_err = np.linalg.norm(ya.positions - hcw.positions, axis=1)
    vel_err = np.linalg.norm(ya.velocities - hcw.velocities, axis=1)
    logger.info(
        "YA vs HCW (e=%.4f): max position diff %.3e m, max velocity diff %.3e m/s",
        elements.eccentricity, float(pos_err.max()), float(vel_err.max()),
    )
    return {"times": ya.times, "position_error": pos_err, "velocity_error": vel_err}
