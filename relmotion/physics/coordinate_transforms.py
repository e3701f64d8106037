"""
True <-> modified relative coordinates.

The modified state (x~ = rho*x, x~' = d(x~)/d(theta)) turns the linearised
relative-motion equations about an elliptical orbit into a theta-invariant form,
which is what allows the closed-form state transition.
"""
import math

from relmotion.physics.auxiliary import k_squared, rho
from relmotion.physics.state import OrbitalElements, RelativeState


def to_modified(state: RelativeState, elements: OrbitalElements, theta: float) -> RelativeState:
    """
    position -> rho * position
    velocity -> -e*sin(theta) * position + velocity / (k^2 * rho)
    """
    e = elements.eccentricity
    rho_val = rho(e, theta)
    k2 = k_squared(elements)
    e_sin = e * math.sin(theta)

    position = rho_val * state.position
    velocity = -e_sin * state.position + state.velocity / (k2 * rho_val)
    return RelativeState(position=position, velocity=velocity)


def from_modified(modified: RelativeState, elements: OrbitalElements, theta: float) -> RelativeState:
    """Exact inverse of to_modified at the same theta."""
    e = elements.eccentricity
    rho_val = rho(e, theta)
    k2 = k_squared(elements)
    e_sin = e * math.sin(theta)

    position = modified.position / rho_val
    velocity = k2 * (e_sin * modified.position + rho_val * modified.velocity)
    return RelativeState(position=position, velocity=velocity)
