"""
Kepler utilities for the reference orbit: anomaly conversions, period and
time-based anomaly propagation. Independent of the relative-motion STM.

Angles are never wrapped: a mean anomaly outside [0, 2*pi) is solved as given.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from relmotion.config.settings import KEPLER_MAX_ITER, KEPLER_TOLERANCE, SECONDS_PER_DAY
from relmotion.physics.errors import InvalidEccentricity, InvalidMeanMotion
from relmotion.physics.state import OrbitalElements

logger = logging.getLogger(__name__)


def semi_major_axis(elements: OrbitalElements) -> float:
    """a = h^2 / (mu * (1 - e^2)) [m]."""
    return elements.semi_major_axis


def mean_motion(elements: OrbitalElements) -> float:
    """n = sqrt(mu / a^3) [rad/s]."""
    return elements.mean_motion


def circular_mean_motion(elements: OrbitalElements) -> float:
    """
    Orbital rate mu^2 / h^3 [rad/s]; the n that makes the CW solution the e = 0
    limit of the elliptical one.
    """
    mu = elements.gravitational_parameter
    h = elements.angular_momentum
    return mu * mu / (h * h * h)


def eccentric_from_true(theta: float, e: float) -> float:
    return 2.0 * math.atan(math.sqrt((1.0 - e) / (1.0 + e)) * math.tan(theta / 2.0))


def mean_from_true(theta: float, e: float) -> float:
    ecc_anomaly = eccentric_from_true(theta, e)
    return ecc_anomaly - e * math.sin(ecc_anomaly)


def true_anomaly_from_mean(mean_anomaly: float, e: float, tol: float = KEPLER_TOLERANCE) -> float:
    """
    Solve E - e*sin(E) = M by Newton-Raphson (E0 = M, at most KEPLER_MAX_ITER steps)
    and return the true anomaly 2*atan(sqrt((1+e)/(1-e)) * tan(E/2)).
    Non-convergence is not an error: the last iterate is used.
    """
    ecc_anomaly = mean_anomaly
    for _ in range(KEPLER_MAX_ITER):
        f = ecc_anomaly - e * math.sin(ecc_anomaly) - mean_anomaly
        f_prime = 1.0 - e * math.cos(ecc_anomaly)
        delta = f / f_prime
        ecc_anomaly -= delta
        if abs(delta) < tol:
            break
    else:
        logger.warning(
            "Kepler solve did not converge in %d iterations (M=%.6g, e=%.6g, last step=%.3g)",
            KEPLER_MAX_ITER, mean_anomaly, e, delta,
        )

    return 2.0 * math.atan(math.sqrt((1.0 + e) / (1.0 - e)) * math.tan(ecc_anomaly / 2.0))


def true_anomaly_at_time(elements: OrbitalElements, theta0: float, delta_t: float) -> float:
    """True anomaly reached delta_t seconds after (or before, if negative) theta0."""
    e = elements.eccentricity
    n = mean_motion(elements)
    m0 = mean_from_true(theta0, e)
    mf = m0 + n * delta_t
    logger.debug("Kepler advance: M0=%.6f rad, Mf=%.6f rad over %.3f s", m0, mf, delta_t)
    return true_anomaly_from_mean(mf, e)


def orbital_period(elements: OrbitalElements) -> float:
    """T = 2*pi*sqrt(a^3 / mu) [s]."""
    a = semi_major_axis(elements)
    return 2.0 * math.pi * math.sqrt(a * a * a / elements.gravitational_parameter)


def derive_angular_momentum(e: float, mean_motion_rev_per_day: float, mu: float) -> float:
    """
    Specific angular momentum h [m^2/s] from eccentricity and a TLE-style mean
    motion in revolutions per day.
    """
    if not (0.0 <= e < 1.0):
        raise InvalidEccentricity("eccentricity must be in [0,1).")
    if not (mean_motion_rev_per_day > 0.0):
        raise InvalidMeanMotion("meanMotionRevPerDay must be > 0.")

    n = mean_motion_rev_per_day * 2.0 * math.pi / SECONDS_PER_DAY
    a = float(np.cbrt(mu / (n * n)))
    return math.sqrt(mu * a * (1.0 - e * e))
