"""
Auxiliary scalar functions used by the elliptical relative-motion solution
(Yamanaka & Ankersen, "New State Transition Matrix for Relative Motion on an
Arbitrary Elliptical Orbit", JGCD 25(1), 2002).

All functions are pure; e is the reference eccentricity, theta the true anomaly [rad].
"""
import math

from relmotion.physics.state import OrbitalElements


def rho(e: float, theta: float) -> float:
    """Osculating radius scale factor 1 + e*cos(theta); 1 for a circular orbit."""
    return 1.0 + e * math.cos(theta)


def s(e: float, theta: float) -> float:
    return rho(e, theta) * math.sin(theta)


def c(e: float, theta: float) -> float:
    return rho(e, theta) * math.cos(theta)


def s_prime(e: float, theta: float) -> float:
    """d(s)/d(theta) shorthand: cos(theta) + e*cos(2*theta)."""
    return math.cos(theta) + e * math.cos(2.0 * theta)


def c_prime(e: float, theta: float) -> float:
    """d(c)/d(theta) shorthand: -(sin(theta) + e*sin(2*theta))."""
    return -(math.sin(theta) + e * math.sin(2.0 * theta))


def k_squared(elements: OrbitalElements) -> float:
    """k^2 = (mu / h^(3/2))^2 = mu^2 / h^3 [1/s]."""
    k = elements.gravitational_parameter / elements.angular_momentum ** 1.5
    return k * k


def j_integral(elements: OrbitalElements, delta_t: float) -> float:
    """
    Closed form of the integral of rho^-2 d(theta) between the two epochs,
    which equals k^2 * (t - t0). Linear in elapsed time (negative for backward runs).
    """
    return k_squared(elements) * delta_t
