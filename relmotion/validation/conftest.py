"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for the relative-motion tests.
"""
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
from pathlib import Path

from relmotion.config.settings import GM
from relmotion.physics.state import OrbitalElements, RelativeState


@pytest.fixture(scope="session")
def fixtures_path():
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def earth_elements():
    """Slightly eccentric LEO reference orbit."""
    return OrbitalElements(eccentricity=0.1, angular_momentum=5e10, gravitational_parameter=GM)


@pytest.fixture
def demo_elements():
    """Periapsis ~300 km, apoapsis ~1782 km."""
    return OrbitalElements(eccentricity=0.1, angular_momentum=5.409e10, gravitational_parameter=GM)


@pytest.fixture
def circular_elements():
    return OrbitalElements(eccentricity=0.0, angular_momentum=5e10, gravitational_parameter=GM)


@pytest.fixture
def circular_rate():
    """mu^2 / h^3 for h = 5e10 m^2/s."""
    return GM * GM / (5e10 ** 3)


@pytest.fixture
def sample_state():
    return RelativeState(position=[100.0, 200.0, 300.0], velocity=[1.0, 2.0, 3.0])


def two_body_rk4(r, v, mu, dt, steps):
    """Fixed-step RK4 of point-mass two-body motion; reference for the analytic solutions."""
    def deriv(y):
        pos = y[:3]
        return np.hstack((y[3:], -mu * pos / np.linalg.norm(pos) ** 3))

    y = np.hstack((np.asarray(r, dtype=float), np.asarray(v, dtype=float)))
    for _ in range(steps):
        k1 = deriv(y)
        k2 = deriv(y + 0.5 * dt * k1)
        k3 = deriv(y + 0.5 * dt * k2)
        k4 = deriv(y + dt * k3)
        y = y + (dt / 6.0) * (k1 + 2 * k2 + 2 * k3 + k4)
    return y[:3], y[3:]


def periapsis_state(elements):
    """Inertial chief state at periapsis, orbit in the XY plane."""
    e = elements.eccentricity
    h = elements.angular_momentum
    r_p = h * h / (elements.gravitational_parameter * (1.0 + e))
    return np.array([r_p, 0.0, 0.0]), np.array([0.0, h / r_p, 0.0])


@pytest.fixture
def rk4():
    return two_body_rk4


@pytest.fixture
def chief_at_periapsis():
    return periapsis_state
