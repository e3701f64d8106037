"""
Relative motion about an elliptical reference orbit, closed form
(Yamanaka & Ankersen, 2002).

Pipeline: frame -> internal ordering -> modified coordinates at theta0 ->
in-plane (pseudo-initial + forward map) and out-of-plane rotation ->
true coordinates at thetaF -> frame.
"""
import logging

from relmotion.physics.auxiliary import j_integral
from relmotion.physics.coordinate_transforms import from_modified, to_modified
from relmotion.physics.errors import InvalidEccentricity
from relmotion.physics.frames import from_internal, to_internal
from relmotion.physics.in_plane_stm import compute_pseudo_initial, propagate_in_plane
from relmotion.physics.out_of_plane_stm import propagate_out_of_plane
from relmotion.physics.state import InPlaneState, OrbitalElements, OutOfPlaneState, RelativeState

logger = logging.getLogger(__name__)


def propagate_ya(
    initial: RelativeState,
    elements: OrbitalElements,
    theta0: float,
    theta_f: float,
    delta_t: float,
    frame: str,
) -> RelativeState:
    """
    Propagate a relative state from true anomaly theta0 to theta_f.

    theta0, theta_f and delta_t are taken as given; they are not checked against
    Kepler's equation. Use true_anomaly_at_time to derive theta_f from delta_t.
    Raises InvalidEccentricity unless 0 <= e < 1.
    """
    e = elements.eccentricity
    if not (0.0 <= e < 1.0):
        raise InvalidEccentricity(f"Eccentricity must be in range [0, 1), got {e}")

    internal = to_internal(initial, frame)
    modified = to_modified(internal, elements, theta0)
    j_value = j_integral(elements, delta_t)
    logger.debug(
        "YA propagation: e=%.6f, theta0=%.6f, thetaF=%.6f, dt=%.3f s, J=%.6e",
        e, theta0, theta_f, delta_t, j_value,
    )

    in_plane = InPlaneState(
        x=modified.position[0],
        z=modified.position[2],
        vx=modified.velocity[0],
        vz=modified.velocity[2],
    )
    pseudo = compute_pseudo_initial(in_plane, e, theta0)
    final_in = propagate_in_plane(pseudo, e, theta_f, j_value)

    out_of_plane = OutOfPlaneState(y=modified.position[1], vy=modified.velocity[1])
    final_out = propagate_out_of_plane(out_of_plane, e, theta0, theta_f)

    modified_final = RelativeState(
        position=(final_in.x, final_out.y, final_in.z),
        velocity=(final_in.vx, final_out.vy, final_in.vz),
    )
    return from_internal(from_modified(modified_final, elements, theta_f), frame)
