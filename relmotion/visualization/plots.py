import os

import matplotlib.pyplot as plt

from relmotion.config.settings import OUTPUT_DIR
from relmotion.physics.state import RIC


def _axes_indices(frame):
    # (radial, in-track, cross-track) column indices for the trajectory's frame
    if frame == RIC:
        return 0, 1, 2
    return 2, 0, 1


def plot_relative_trajectory(trajectory, path=None):
    """
    In-plane view (in-track vs radial) and cross-track vs time.
    Returns the path of the saved PNG.
    """
    if path is None:
        os.makedirs(OUTPUT_DIR, exist_ok=True)
        path = os.path.join(OUTPUT_DIR, "relative_trajectory.png")

    r_idx, i_idx, c_idx = _axes_indices(trajectory.frame)
    pos = trajectory.positions

    fig, (ax_plane, ax_cross) = plt.subplots(1, 2, figsize=(12, 5))

    ax_plane.plot(pos[:, i_idx], pos[:, r_idx], label="deputy")
    ax_plane.scatter([pos[0, i_idx]], [pos[0, r_idx]], marker="o", color="green", label="start")
    ax_plane.scatter([pos[-1, i_idx]], [pos[-1, r_idx]], marker="x", color="red", label="end")
    ax_plane.scatter([0.0], [0.0], marker="*", color="black", label="chief")
    ax_plane.set_xlabel("In-track (m)")
    ax_plane.set_ylabel("Radial (m)")
    ax_plane.set_title("In-plane relative motion")
    ax_plane.legend()

    ax_cross.plot(trajectory.times, pos[:, c_idx])
    ax_cross.set_xlabel("Time (s)")
    ax_cross.set_ylabel("Cross-track (m)")
    ax_cross.set_title("Out-of-plane relative motion")

    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)

    print(f"[OK] Saved: {path}")
    return path


def plot_solver_comparison(times, position_error, velocity_error, path=None):
    """YA vs HCW difference norms over time."""
    if path is None:
        os.makedirs(OUTPUT_DIR, exist_ok=True)
        path = os.path.join(OUTPUT_DIR, "solver_comparison.png")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.semilogy(times, position_error, label="|dr| (m)")
    ax.semilogy(times, velocity_error, label="|dv| (m/s)")
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("YA - HCW difference")
    ax.set_title("Elliptical vs circular solution")
    ax.legend()

    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)

    print(f"[OK] Saved: {path}")
    return path
