# relmotion/physics/out_of_plane_stm.py
import math

from relmotion.physics.auxiliary import rho
from relmotion.physics.state import OutOfPlaneState


def propagate_out_of_plane(initial: OutOfPlaneState, e: float, theta0: float, theta: float) -> OutOfPlaneState:
    """
    Cross-track transition in modified coordinates: a rotation by (theta - theta0)
    scaled by rho(theta0) / rho(theta). Pure rotation for a circular orbit.
    """
    d_theta = theta - theta0
    cos_d = math.cos(d_theta)
    sin_d = math.sin(d_theta)
    factor = rho(e, theta0) / rho(e, theta)

    y = factor * (cos_d * initial.y + sin_d * initial.vy)
    vy = factor * (-sin_d * initial.y + cos_d * initial.vy)
    return OutOfPlaneState(y=y, vy=vy)
