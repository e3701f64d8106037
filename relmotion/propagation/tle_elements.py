"""
Reference orbits taken from two-line element sets (sgp4).

The elliptical relative-motion solution needs (e, h, mu); a TLE carries e and a
mean motion in rev/day, from which h follows. SGP4 states are TEME; both the chief
and the deputy are kept in TEME, so their difference is consistent.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

import numpy as np
from sgp4.api import SGP4_ERRORS, Satrec, jday
from sgp4.conveniences import sat_epoch_datetime

from relmotion.config.settings import GM
from relmotion.physics.frames import relative_state_ric
from relmotion.physics.kepler import derive_angular_momentum, true_anomaly_from_mean
from relmotion.physics.state import OrbitalElements, RelativeState

MINUTES_PER_DAY = 1440.0


@dataclass(frozen=True)
class Sgp4State:
    r_m: np.ndarray   # position in meters (TEME)
    v_ms: np.ndarray  # velocity in m/s (TEME)


def satrec_from_tle(tle1: str, tle2: str) -> Satrec:
    return Satrec.twoline2rv(tle1, tle2)


def mean_motion_rev_per_day(sat: Satrec) -> float:
    # sgp4 stores the Kozai mean motion in rad/min
    return sat.no_kozai * MINUTES_PER_DAY / (2.0 * math.pi)


def elements_from_tle(tle1: str, tle2: str, mu: float = GM) -> OrbitalElements:
    """OrbitalElements (e, h, mu) of the TLE's osculating-equivalent ellipse."""
    sat = satrec_from_tle(tle1, tle2)
    e = float(sat.ecco)
    h = derive_angular_momentum(e, mean_motion_rev_per_day(sat), mu)
    return OrbitalElements(eccentricity=e, angular_momentum=h, gravitational_parameter=mu)


def true_anomaly_from_tle(tle1: str, tle2: str) -> float:
    """True anomaly (rad) at the TLE epoch, from its mean anomaly."""
    sat = satrec_from_tle(tle1, tle2)
    return true_anomaly_from_mean(float(sat.mo), float(sat.ecco))


def tle_epoch(tle1: str, tle2: str) -> datetime:
    return sat_epoch_datetime(satrec_from_tle(tle1, tle2))


def propagate_teme_m(sat: Satrec, t_utc: datetime) -> Sgp4State:
    """
    Propagate using SGP4 to time t_utc (naive datetimes are taken as UTC).
    Returns TEME state in meters and m/s (sgp4 returns km and km/s).
    """
    if t_utc.tzinfo is None:
        t_utc = t_utc.replace(tzinfo=timezone.utc)
    else:
        t_utc = t_utc.astimezone(timezone.utc)

    jd, fr = jday(
        t_utc.year, t_utc.month, t_utc.day,
        t_utc.hour, t_utc.minute,
        t_utc.second + t_utc.microsecond * 1e-6,
    )

    code, r_km, v_kms = sat.sgp4(jd, fr)
    if code != 0:
        raise RuntimeError(f"SGP4 error code={code}: {SGP4_ERRORS.get(code, 'unknown')}")

    r_m = np.array(r_km, dtype=float) * 1000.0
    v_ms = np.array(v_kms, dtype=float) * 1000.0
    return Sgp4State(r_m=r_m, v_ms=v_ms)


def relative_state_from_tles(
    chief_tle: Tuple[str, str],
    deputy_tle: Tuple[str, str],
    t_utc: Optional[datetime] = None,
) -> RelativeState:
    """
    RIC relative state of the deputy about the chief at t_utc
    (defaults to the chief's TLE epoch).
    """
    chief = satrec_from_tle(*chief_tle)
    deputy = satrec_from_tle(*deputy_tle)
    if t_utc is None:
        t_utc = sat_epoch_datetime(chief)

    c_state = propagate_teme_m(chief, t_utc)
    d_state = propagate_teme_m(deputy, t_utc)
    return relative_state_ric(c_state.r_m, c_state.v_ms, d_state.r_m, d_state.v_ms)
