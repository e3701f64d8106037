# relmotion/main.py
import logging
import math

import numpy as np

from relmotion.cli import run_cli
from relmotion.config import settings
from relmotion.physics.cw_relative import propagate_hcw
from relmotion.physics.errors import InvalidEccentricity
from relmotion.physics.kepler import circular_mean_motion, orbital_period, true_anomaly_at_time
from relmotion.physics.yamanaka_ankersen import propagate_ya
from relmotion.simulation.runner import closest_approach, sample_ya

# --- Setup logger ------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%H:%M:%S"
)
log = logging.getLogger("main")


def _labels(frame):
    if frame == "RIC":
        return ("R (radial)", "I (in-track)", "C (cross-track)")
    return ("I (in-track)", "C (cross-track)", "R (radial)")


def print_state(title, state, frame):
    print(f"\n{title}")
    for label, p in zip(_labels(frame), state.position):
        print(f"  {label:<18}: {p:12.2f} m")
    for label, v in zip(_labels(frame), state.velocity):
        print(f"  v{label:<17}: {v:12.3f} m/s")


def main():
    try:
        elements, initial, frame, theta0, delta_t, make_plot = run_cli()
        if not (0.0 <= elements.eccentricity < 1.0):
            raise InvalidEccentricity(f"Eccentricity must be in range [0, 1), got {elements.eccentricity}")

        theta_f = true_anomaly_at_time(elements, theta0, delta_t)
        log.info(
            "Propagating: e=%.4f, theta0=%.2f deg, thetaF=%.2f deg, dt=%.1f s",
            elements.eccentricity, math.degrees(theta0), math.degrees(theta_f), delta_t,
        )

        final = propagate_ya(initial, elements, theta0, theta_f, delta_t, frame)

        print("\n" + "=" * 70)
        print("  Yamanaka-Ankersen Relative Motion Propagation")
        print("=" * 70)
        print(f"  Eccentricity           : {elements.eccentricity}")
        print(f"  Gravitational parameter: {elements.gravitational_parameter:.3e} m^3/s^2")
        print(f"  Angular momentum       : {elements.angular_momentum:.3e} m^2/s")
        print(f"  Orbital period         : {orbital_period(elements):.1f} s")
        print(f"  Initial true anomaly   : {theta0:.4f} rad ({math.degrees(theta0):.1f} deg)")
        print(f"  Time elapsed           : {delta_t} s ({delta_t / 60.0:.1f} min)")
        print(f"  Final true anomaly     : {theta_f:.4f} rad ({math.degrees(theta_f):.1f} deg)")

        print_state("INITIAL STATE:", initial, frame)
        print_state("FINAL STATE:", final, frame)

        d_pos = final.position - initial.position
        d_vel = final.velocity - initial.velocity
        print("\nCHANGES:")
        for label, dp, dv in zip(_labels(frame), d_pos, d_vel):
            print(f"  Delta {label:<18}: {dp:12.2f} m   {dv:10.3f} m/s")

        r0 = float(np.linalg.norm(initial.position))
        r1 = float(np.linalg.norm(final.position))
        print("\nSEPARATION DISTANCE:")
        print(f"  Initial distance : {r0:.2f} m")
        print(f"  Final distance   : {r1:.2f} m")
        print(f"  Change           : {r1 - r0:.2f} m")

        if elements.eccentricity == 0.0:
            hcw = propagate_hcw(initial, circular_mean_motion(elements), delta_t, frame)
            diff = float(np.linalg.norm(hcw.position - final.position))
            log.info("Circular reference orbit: |YA - HCW| position difference = %.3e m", diff)

        times = np.linspace(0.0, delta_t, int(getattr(settings, "TRAJECTORY_SAMPLES", 200)))
        trajectory = sample_ya(initial, elements, theta0, times, frame)
        tca, miss = closest_approach(trajectory)
        log.info("Closest approach over the interval: %.2f m at t=%.1f s", miss, tca)

        if make_plot:
            try:
                from relmotion.visualization.plots import plot_relative_trajectory
                plot_relative_trajectory(trajectory)
            except Exception as e:
                log.warning("Plotting failed: %s", e)

        print("=" * 70)
        print("Propagation complete!")
        print("=" * 70 + "\n")

    except ValueError as e:
        log.error("Invalid input: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
