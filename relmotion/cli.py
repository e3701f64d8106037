# relmotion/cli.py
import math

import numpy as np

from relmotion.config import settings
from relmotion.config.settings import (
    DEFAULT_ANGULAR_MOMENTUM,
    DEFAULT_DELTA_T,
    DEFAULT_ECCENTRICITY,
    DEFAULT_FRAME,
    DEFAULT_POSITION,
    DEFAULT_THETA0,
    DEFAULT_VELOCITY,
    EARTH_RADIUS,
    GM,
    clamp_delta_t,
)
from relmotion.physics.state import FRAMES, OrbitalElements, RelativeState


def get_float(prompt, default=None):
    """
    Safe float input with optional default. Non-interactive (EOF) returns default.
    """
    while True:
        try:
            user = input(prompt)
        except EOFError:
            return float(default) if default is not None else None
        if user.strip() == "" and default is not None:
            return float(default)
        try:
            return float(user)
        except (ValueError, TypeError):
            print("❌ Please enter a valid number.")


def get_vector(prompt, default):
    """
    Three comma- or space-separated numbers. Enter / EOF returns default.
    """
    while True:
        try:
            user = input(prompt)
        except EOFError:
            return np.array(default, dtype=float)
        if user.strip() == "":
            return np.array(default, dtype=float)
        parts = user.replace(",", " ").split()
        try:
            vals = [float(p) for p in parts]
        except ValueError:
            vals = []
        if len(vals) == 3:
            return np.array(vals, dtype=float)
        print("❌ Please enter exactly three numbers.")


def choose_frame():
    """
    Choose the frame of the initial state (and of the output).
      1 -> RIC  [radial, in-track, cross-track]
      2 -> LVLH [in-track, cross-track, radial]
    """
    print("\n🧭 Frame")
    print("  1) RIC  - [R, I, C]")
    print("  2) LVLH - [I, C, R]")

    try:
        choice = input(f"Select frame [{1 if DEFAULT_FRAME == 'RIC' else 2}]: ").strip()
    except EOFError:
        choice = ""

    if choice == "1":
        return FRAMES[0]
    if choice == "2":
        return FRAMES[1]
    return DEFAULT_FRAME


def create_elements():
    print("\n🛰️ Reference Orbit")

    while True:
        e = get_float(f"Eccentricity [0, 1) [default {DEFAULT_ECCENTRICITY}]: ", default=DEFAULT_ECCENTRICITY)
        if 0.0 <= e < 1.0:
            break
        print("❌ Eccentricity must be in [0, 1).")

    while True:
        h = get_float(
            f"Specific angular momentum h (m^2/s) [default {DEFAULT_ANGULAR_MOMENTUM:.4e}]: ",
            default=DEFAULT_ANGULAR_MOMENTUM,
        )
        if h > 0.0:
            break
        print("❌ Angular momentum must be > 0.")

    elements = OrbitalElements(eccentricity=e, angular_momentum=h, gravitational_parameter=GM)
    print(f"✔ Reference orbit: a = {elements.semi_major_axis / 1000.0:.1f} km, e = {e}")
    periapsis_alt = h * h / (GM * (1.0 + e)) - EARTH_RADIUS
    if periapsis_alt < 0.0:
        print(f"⚠️ Periapsis is {-periapsis_alt / 1000.0:.1f} km below the surface.")
    return elements


def create_initial_state(frame):
    print("\n☄️ Initial Relative State")
    labels = "[R, I, C]" if frame == "RIC" else "[I, C, R]"

    position = get_vector(f"Position {labels} (m) [default {list(DEFAULT_POSITION)}]: ", DEFAULT_POSITION)
    velocity = get_vector(f"Velocity {labels} (m/s) [default {list(DEFAULT_VELOCITY)}]: ", DEFAULT_VELOCITY)

    return RelativeState(position=position, velocity=velocity)


def ask_interval():
    """
    Initial true anomaly (deg) and elapsed time (s). Elapsed time is clamped to
    the configured window and written back into settings.
    """
    theta0_deg = get_float(
        f"\nInitial true anomaly (deg) [default {math.degrees(DEFAULT_THETA0):.1f}]: ",
        default=math.degrees(DEFAULT_THETA0),
    )
    dt_raw = get_float(f"Elapsed time (s) [default {DEFAULT_DELTA_T}]: ", default=DEFAULT_DELTA_T)
    dt = clamp_delta_t(dt_raw)
    # single place of truth for the run
    setattr(settings, "DEFAULT_DELTA_T", float(dt))
    return math.radians(theta0_deg), dt


def ask_yes_no(prompt, default=False):
    try:
        ans = input(prompt).strip().lower()
    except EOFError:
        return default
    if ans == "":
        return default
    return ans.startswith("y")


def run_cli():
    print("======================================")
    print("  RELATIVE MOTION PROPAGATOR (CLI)  ")
    print("======================================")

    elements = create_elements()
    frame = choose_frame()
    initial = create_initial_state(frame)
    theta0, delta_t = ask_interval()
    make_plot = ask_yes_no("Save trajectory plot? (y/N): ", default=False)

    print("\n✅ CLI input complete.")
    print(f"→ Frame: {frame}")
    print(f"→ Elapsed time: {delta_t:.1f} s")

    return elements, initial, frame, theta0, delta_t, make_plot
