"""
In-plane (radial / in-track) state transition in modified coordinates.

The transition is split in two: a fixed linear map that strips the initial
true anomaly out of the state (the pseudo-initial state), followed by the
forward map evaluated at the final anomaly. Secular drift enters only through
J = k^2 * (t - t0).
"""
from relmotion.physics.auxiliary import c, c_prime, rho, s, s_prime
from relmotion.physics.state import InPlaneState


def compute_pseudo_initial(state: InPlaneState, e: float, theta0: float) -> InPlaneState:
    rho0 = rho(e, theta0)
    s0 = s(e, theta0)
    c0 = c(e, theta0)

    one_minus_e2 = 1.0 - e * e
    f = 1.0 / one_minus_e2
    inv_rho0 = 1.0 / rho0

    x_bar = f * (
        one_minus_e2 * state.x
        + 3.0 * e * (s0 / rho0) * (1.0 + inv_rho0) * state.z
        - e * s0 * (1.0 + inv_rho0) * state.vx
        + (2.0 - e * c0) * state.vz
    )
    z_bar = f * (
        -3.0 * (s0 / rho0) * (1.0 + e * e / rho0) * state.z
        + s0 * (1.0 + inv_rho0) * state.vx
        + (c0 - 2.0 * e) * state.vz
    )
    vx_bar = f * (
        -3.0 * (c0 / rho0 + e) * state.z
        + (c0 * (1.0 + inv_rho0) + e) * state.vx
        - s0 * state.vz
    )
    vz_bar = f * (
        (3.0 * rho0 + e * e - 1.0) * state.z
        - rho0 * rho0 * state.vx
        + e * s0 * state.vz
    )
    return InPlaneState(x=x_bar, z=z_bar, vx=vx_bar, vz=vz_bar)


def propagate_in_plane(pseudo: InPlaneState, e: float, theta: float, j_value: float) -> InPlaneState:
    """Evaluate the in-plane transition at theta, with j_value = k^2 * elapsed time."""
    rho_val = rho(e, theta)
    s_val = s(e, theta)
    c_val = c(e, theta)
    sp = s_prime(e, theta)
    cp = c_prime(e, theta)
    inv_rho = 1.0 / rho_val

    x = (
        pseudo.x
        - c_val * (1.0 + inv_rho) * pseudo.z
        + s_val * (1.0 + inv_rho) * pseudo.vx
        + 3.0 * rho_val * rho_val * j_value * pseudo.vz
    )
    z = (
        s_val * pseudo.z
        + c_val * pseudo.vx
        + (2.0 - 3.0 * e * s_val * j_value) * pseudo.vz
    )
    vx = (
        2.0 * s_val * pseudo.z
        + (2.0 * c_val - e) * pseudo.vx
        + 3.0 * (1.0 - 2.0 * e * s_val * j_value) * pseudo.vz
    )
    vz = (
        sp * pseudo.z
        + cp * pseudo.vx
        - 3.0 * e * (sp * j_value + s_val / (rho_val * rho_val)) * pseudo.vz
    )
    return InPlaneState(x=x, z=z, vx=vx, vz=vz)
