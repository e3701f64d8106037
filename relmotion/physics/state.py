# relmotion/physics/state.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from relmotion.config.settings import FRAME_LVLH, FRAME_RIC

RIC = FRAME_RIC
LVLH = FRAME_LVLH
FRAMES = (RIC, LVLH)


def _frozen_vector(v) -> np.ndarray:
    arr = np.array(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError("Position and velocity must be 3D vectors.")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class RelativeState:
    """
    Relative state of a deputy about its chief.
    position [m] and velocity [m/s]; component order depends on the frame
    the caller works in (RIC: [R, I, C], LVLH / internal: [I, C, R]).
    """
    position: np.ndarray
    velocity: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "position", _frozen_vector(self.position))
        object.__setattr__(self, "velocity", _frozen_vector(self.velocity))

    def as_vector(self) -> np.ndarray:
        return np.concatenate([self.position, self.velocity])

    @classmethod
    def from_vector(cls, vec) -> "RelativeState":
        vec = np.asarray(vec, dtype=float)
        if vec.shape != (6,):
            raise ValueError("State vector must have 6 components.")
        return cls(position=vec[:3], velocity=vec[3:])

    @classmethod
    def zero(cls) -> "RelativeState":
        return cls(position=(0.0, 0.0, 0.0), velocity=(0.0, 0.0, 0.0))


@dataclass(frozen=True)
class OrbitalElements:
    """
    Reference (chief) orbit:
      eccentricity            e in [0, 1)
      angular_momentum        h [m^2/s]
      gravitational_parameter mu [m^3/s^2]
    """
    eccentricity: float
    angular_momentum: float
    gravitational_parameter: float

    @property
    def semi_major_axis(self) -> float:
        e = self.eccentricity
        h = self.angular_momentum
        return h * h / (self.gravitational_parameter * (1.0 - e * e))

    @property
    def mean_motion(self) -> float:
        a = self.semi_major_axis
        return math.sqrt(self.gravitational_parameter / (a * a * a))


class InPlaneState(NamedTuple):
    """Radial / in-track subspace in modified coordinates."""
    x: float
    z: float
    vx: float
    vz: float


class OutOfPlaneState(NamedTuple):
    y: float
    vy: float
