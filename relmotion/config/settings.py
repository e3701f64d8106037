"""
Project settings (constants + small helpers).
Units: meters (m), seconds (s), radians (rad), m^3/s^2 for GM, m^2/s for angular momentum.
"""
from __future__ import annotations

import os

# Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
OUTPUT_DIR = os.path.join(BASE_DIR, "outputs")

# Run
VALIDATE_ON_IMPORT = False

# Earth
GM = 3.986004418e14
EARTH_RADIUS = 6378137.0

# Time
SECONDS_PER_DAY = 86400.0

# Kepler solver
KEPLER_TOLERANCE = 1e-10
KEPLER_MAX_ITER = 100

# Frames
FRAME_RIC = "RIC"
FRAME_LVLH = "LVLH"
DEFAULT_FRAME = FRAME_RIC

# Demo scenario (LEO, periapsis ~300 km, apoapsis ~1782 km)
DEFAULT_ECCENTRICITY = 0.1
DEFAULT_ANGULAR_MOMENTUM = 5.409e10
DEFAULT_THETA0 = 0.0
DEFAULT_DELTA_T = 1000.0
DEFAULT_POSITION = (100.0, 200.0, 50.0)
DEFAULT_VELOCITY = (0.5, -0.2, 0.1)

# Trajectory sampling / plots
TRAJECTORY_SAMPLES = 200
DELTA_T_MIN = -864000.0
DELTA_T_MAX = 864000.0


def clamp_delta_t(val: float | None) -> float:
    out = float(DEFAULT_DELTA_T if val is None else val)
    return max(float(DELTA_T_MIN), min(float(DELTA_T_MAX), out))


def validate_settings() -> None:
    if GM <= 0:
        raise ValueError("GM must be > 0")
    if not (0.0 <= DEFAULT_ECCENTRICITY < 1.0):
        raise ValueError("DEFAULT_ECCENTRICITY must be in [0, 1)")
    if DEFAULT_ANGULAR_MOMENTUM <= 0:
        raise ValueError("DEFAULT_ANGULAR_MOMENTUM must be > 0")
    if KEPLER_TOLERANCE <= 0:
        raise ValueError("KEPLER_TOLERANCE must be > 0")
    if KEPLER_MAX_ITER <= 0:
        raise ValueError("KEPLER_MAX_ITER must be > 0")
    if DEFAULT_FRAME not in (FRAME_RIC, FRAME_LVLH):
        raise ValueError("DEFAULT_FRAME must be 'RIC' or 'LVLH'")
    if TRAJECTORY_SAMPLES < 2:
        raise ValueError("TRAJECTORY_SAMPLES must be >= 2")
    if DELTA_T_MAX < DELTA_T_MIN:
        raise ValueError("DELTA_T_MAX must be >= DELTA_T_MIN")


if VALIDATE_ON_IMPORT:
    validate_settings()
