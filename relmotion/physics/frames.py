"""
Frame handling for relative states.

External frames:
  RIC  [radial, in-track, cross-track]
  LVLH [in-track, cross-track, radial]
Internal ordering (used by both solvers) is the LVLH one.

Axis signs follow the Yamanaka-Ankersen local frame: radial is positive toward
the central body, in-track along the chief's motion, cross-track along -h.
"""
from typing import Tuple

import numpy as np

from relmotion.physics.state import RIC, RelativeState

# External RIC [R, I, C] <-> internal [I, C, R]
_RIC_TO_INTERNAL = [1, 2, 0]
_INTERNAL_TO_RIC = [2, 0, 1]

# Outward-radial / along-track / orbit-normal Hill axes -> engine RIC axes
_HILL_TO_RIC_SIGNS = np.array([-1.0, 1.0, -1.0])


def to_internal(state: RelativeState, frame: str) -> RelativeState:
    """
    Map a state given in `frame` onto the internal ordering [in-track, cross-track, radial].
    LVLH already uses that ordering and is returned unchanged.
    """
    if frame == RIC:
        return RelativeState(
            position=state.position[_RIC_TO_INTERNAL],
            velocity=state.velocity[_RIC_TO_INTERNAL],
        )
    return state


def from_internal(state: RelativeState, frame: str) -> RelativeState:
    """Inverse of to_internal."""
    if frame == RIC:
        return RelativeState(
            position=state.position[_INTERNAL_TO_RIC],
            velocity=state.velocity[_INTERNAL_TO_RIC],
        )
    return state


def hill_frame_basis(r_chief: np.ndarray, v_chief: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Return local Hill frame basis vectors (er, ei, ec) in the inertial frame:
      er = radial (unit r_chief, outward)
      ec = orbit-normal (unit r x v)
      ei = along-track = ec x er
    """
    r_chief = np.asarray(r_chief, dtype=float)
    v_chief = np.asarray(v_chief, dtype=float)
    r_norm = np.linalg.norm(r_chief)
    if r_norm == 0:
        raise ValueError("Chief radius vector is zero-length for Hill frame.")
    er = r_chief / r_norm
    h = np.cross(r_chief, v_chief)
    h_norm = np.linalg.norm(h)
    if h_norm == 0:
        # degenerate (co-linear r and v), pick any normal
        arb = np.array([1.0, 0.0, 0.0])
        if abs(np.dot(arb, er)) > 0.9:
            arb = np.array([0.0, 1.0, 0.0])
        ec = np.cross(er, arb)
        ec = ec / np.linalg.norm(ec)
    else:
        ec = h / h_norm
    ei = np.cross(ec, er)
    ei = ei / np.linalg.norm(ei)
    return er, ei, ec


def _frame_rate(r_chief: np.ndarray, v_chief: np.ndarray) -> np.ndarray:
    # Hill frame angular velocity |r x v| / |r|^2 about the orbit normal (Hill axes)
    r2 = float(np.dot(r_chief, r_chief))
    return np.array([0.0, 0.0, np.linalg.norm(np.cross(r_chief, v_chief)) / r2])


def relative_state_ric(r_chief, v_chief, r_deputy, v_deputy) -> RelativeState:
    """
    Deputy state relative to the chief in the chief's rotating RIC frame
    (engine axis signs). Inertial inputs in m and m/s.
    """
    r_chief = np.asarray(r_chief, dtype=float)
    v_chief = np.asarray(v_chief, dtype=float)
    rot = np.vstack(hill_frame_basis(r_chief, v_chief))

    rho_h = rot @ (np.asarray(r_deputy, dtype=float) - r_chief)
    vel_h = rot @ (np.asarray(v_deputy, dtype=float) - v_chief) - np.cross(_frame_rate(r_chief, v_chief), rho_h)

    return RelativeState(position=_HILL_TO_RIC_SIGNS * rho_h, velocity=_HILL_TO_RIC_SIGNS * vel_h)


def deputy_inertial_state(r_chief, v_chief, relative: RelativeState) -> Tuple[np.ndarray, np.ndarray]:
    """Inverse of relative_state_ric: inertial (r, v) of the deputy."""
    r_chief = np.asarray(r_chief, dtype=float)
    v_chief = np.asarray(v_chief, dtype=float)
    rot = np.vstack(hill_frame_basis(r_chief, v_chief))

    rho_h = _HILL_TO_RIC_SIGNS * relative.position
    vel_h = _HILL_TO_RIC_SIGNS * relative.velocity + np.cross(_frame_rate(r_chief, v_chief), rho_h)

    return r_chief + rot.T @ rho_h, v_chief + rot.T @ vel_h
