import logging

import numpy as np

from relmotion.physics.frames import from_internal, to_internal
from relmotion.physics.state import RelativeState

logger = logging.getLogger(__name__)


def _cw_state_at_t(x0, y0, z0, vx0, vy0, vz0, n, t):
    """
    Standard CW/Hill solution for relative state at time t, internal ordering
    x = in-track, y = cross-track, z = radial.
    Returns (x,y,z), (vx,vy,vz).
    """
    nt = n * t
    cosnt = np.cos(nt)
    sinnt = np.sin(nt)

    x = x0 + 6.0 * (nt - sinnt) * z0 + (1.0 / n) * (4.0 * sinnt - 3.0 * nt) * vx0 + (2.0 / n) * (1.0 - cosnt) * vz0
    y = cosnt * y0 + (1.0 / n) * sinnt * vy0
    z = (4.0 - 3.0 * cosnt) * z0 + (2.0 / n) * (cosnt - 1.0) * vx0 + (1.0 / n) * sinnt * vz0

    vx = 6.0 * n * (1.0 - cosnt) * z0 + (4.0 * cosnt - 3.0) * vx0 + 2.0 * sinnt * vz0
    vy = -n * sinnt * y0 + cosnt * vy0
    vz = 3.0 * n * sinnt * z0 - 2.0 * sinnt * vx0 + cosnt * vz0

    return np.array([x, y, z]), np.array([vx, vy, vz])


def propagate_hcw(initial: RelativeState, n: float, delta_t: float, frame: str) -> RelativeState:
    """
    Clohessy-Wiltshire (Hill) propagation about a circular reference orbit.

    initial : relative state in `frame` ("RIC" or "LVLH"), m and m/s
    n       : orbital rate of the circular reference orbit [rad/s]
    delta_t : elapsed time [s], negative for backward propagation
    Returns the propagated state in the same frame.
    """
    internal = to_internal(initial, frame)
    x0, y0, z0 = internal.position
    vx0, vy0, vz0 = internal.velocity

    logger.debug("HCW propagation: n=%.6e rad/s, dt=%.3f s, frame=%s", n, delta_t, frame)
    pos, vel = _cw_state_at_t(x0, y0, z0, vx0, vy0, vz0, n, delta_t)

    return from_internal(RelativeState(position=pos, velocity=vel), frame)
