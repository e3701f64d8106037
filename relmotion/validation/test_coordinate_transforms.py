"""
Unit Tests for True <-> Modified Coordinates
============================================

Tests:
------
TestToModified
  - test_position_scaled_by_rho             : position -> rho * position
  - test_velocity_formula                   : velocity -> -e sin(theta) r + v / (k^2 rho)
  - test_circular_at_periapsis              : e = 0 keeps position, scales velocity by 1/k^2
TestFromModified
  - test_inverse_formula                    : position / rho, k^2 (e sin(theta) r~ + rho v~)
TestRoundTrip
  - test_roundtrip_various_anomalies        : from_modified(to_modified(s)) == s over e and theta
  - test_zero_state_fixed_point             : the origin maps to the origin both ways
"""
import math

import numpy as np
import pytest

from relmotion.config.settings import GM
from relmotion.physics.auxiliary import k_squared, rho
from relmotion.physics.coordinate_transforms import from_modified, to_modified
from relmotion.physics.state import OrbitalElements, RelativeState


class TestToModified:

    def test_position_scaled_by_rho(self, earth_elements, sample_state):
        theta = 0.8
        out = to_modified(sample_state, earth_elements, theta)
        np.testing.assert_allclose(out.position, rho(0.1, theta) * sample_state.position, rtol=1e-15)

    def test_velocity_formula(self, earth_elements, sample_state):
        theta = 2.3
        e = earth_elements.eccentricity
        k2 = k_squared(earth_elements)
        r = rho(e, theta)
        expected = -e * math.sin(theta) * sample_state.position + sample_state.velocity / (k2 * r)
        out = to_modified(sample_state, earth_elements, theta)
        np.testing.assert_allclose(out.velocity, expected, rtol=1e-14)

    def test_circular_at_periapsis(self, circular_elements, sample_state):
        out = to_modified(sample_state, circular_elements, 0.0)
        np.testing.assert_allclose(out.position, sample_state.position, rtol=1e-15)
        np.testing.assert_allclose(
            out.velocity, sample_state.velocity / k_squared(circular_elements), rtol=1e-14
        )


class TestFromModified:

    def test_inverse_formula(self, earth_elements):
        theta = 1.1
        e = earth_elements.eccentricity
        k2 = k_squared(earth_elements)
        r = rho(e, theta)
        mod = RelativeState(position=[50.0, -20.0, 10.0], velocity=[3000.0, 500.0, -800.0])
        out = from_modified(mod, earth_elements, theta)
        np.testing.assert_allclose(out.position, mod.position / r, rtol=1e-15)
        np.testing.assert_allclose(
            out.velocity, k2 * (e * math.sin(theta) * mod.position + r * mod.velocity), rtol=1e-14
        )


class TestRoundTrip:

    @pytest.mark.parametrize("e", [0.0, 0.1, 0.5, 0.9, 0.99])
    def test_roundtrip_various_anomalies(self, e):
        elements = OrbitalElements(eccentricity=e, angular_momentum=5e10, gravitational_parameter=GM)
        st = RelativeState(position=[1000.0, -500.0, 1500.0], velocity=[10.0, -5.0, 15.0])
        for theta in (-4.0, 0.0, 0.5, math.pi / 2, 2.5, math.pi, 7.5):
            back = from_modified(to_modified(st, elements, theta), elements, theta)
            np.testing.assert_allclose(back.position, st.position, rtol=1e-12)
            np.testing.assert_allclose(back.velocity, st.velocity, rtol=1e-10, atol=1e-12)

    def test_zero_state_fixed_point(self, earth_elements):
        zero = RelativeState.zero()
        mod = to_modified(zero, earth_elements, 1.3)
        assert np.all(mod.position == 0.0) and np.all(mod.velocity == 0.0)
        back = from_modified(zero, earth_elements, 1.3)
        assert np.all(back.position == 0.0) and np.all(back.velocity == 0.0)
