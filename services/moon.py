"""Mean-element lunar calculator: moon age, illumination, phase, next events (no external deps)."""
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum


J2000 = 2451545.0  # 2000-01-01 12:00
SYNODIC_MONTH = 29.530588853  # days
# Mean new moon of 2000-01-06 (Meeus, ch. 49), zero point of the age cycle.
# Counting from J2000 instead would put age 0 ~5.1 days off the illumination minimum.
MEAN_NEW_MOON_JD = 2451550.09766
FULL_MOON_AGE = 14.8
GREGORIAN_CUTOVER_JD = 2299161
_GREGORIAN_CUTOVER_DATE = (1582, 10, 15)


class MoonPhase(str, Enum):
    NEW_MOON = "new"
    WAXING_CRESCENT = "waxing-crescent"
    FIRST_QUARTER = "first-quarter"
    WAXING_GIBBOUS = "waxing-gibbous"
    FULL_MOON = "full"
    WANING_GIBBOUS = "waning-gibbous"
    LAST_QUARTER = "last-quarter"
    WANING_CRESCENT = "waning-crescent"


@dataclass(frozen=True)
class MoonAgeInfo:
    age: float            # days, 0..29.53
    illumination: float   # percent, 0..100
    phase: MoonPhase
    next_new_moon: datetime
    next_full_moon: datetime


# ─── Calendar ↔ Julian Day ────────────────────────────────────────────────────

def to_julian_day(dt: datetime) -> float:
    """Julian Day of the civil fields of ``dt`` (tzinfo is ignored)."""
    year, month = dt.year, dt.month
    day = dt.day + (
        dt.hour + dt.minute / 60 + (dt.second + dt.microsecond / 1e6) / 3600
    ) / 24

    if month <= 2:
        year -= 1
        month += 12

    if (dt.year, dt.month, dt.day) < _GREGORIAN_CUTOVER_DATE:
        b = 0  # Julian calendar
    else:
        a = year // 100
        b = 2 - a + a // 4

    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day + b - 1524.5
    )


def from_julian_day(jd: float) -> datetime:
    """Naive datetime for a Julian Day, rounded to the nearest second.

    Days before the Gregorian cutover are read as Julian-calendar dates.
    The last second of 9999-12-31 does not carry into year 10000.
    Raises ValueError when the date falls outside datetime's year range.
    """
    z = math.floor(jd + 0.5)
    f = jd + 0.5 - z

    if z < GREGORIAN_CUTOVER_JD:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    start = datetime(year, month, day)
    seconds = round(f * 86400)
    if seconds >= 86400 and start.date() == date.max:
        seconds = 86399
    return start + timedelta(seconds=seconds)


# ─── Mean lunar ephemeris ─────────────────────────────────────────────────────

def mean_moon_age(jd: float) -> float:
    """Days since the last mean new moon, in [0, SYNODIC_MONTH)."""
    age = math.fmod(jd - MEAN_NEW_MOON_JD, SYNODIC_MONTH)
    if age < 0:
        age += SYNODIC_MONTH
    # a tiny negative remainder can round up to the modulus itself
    if age >= SYNODIC_MONTH:
        age = 0.0
    return age


def moon_phase_angle(jd: float) -> float:
    """Sun–Earth–Moon phase angle in radians, in [0, 2π)."""
    t = (jd - J2000) / 36525.0

    sun_longitude = (280.4665 + 36000.7698 * t) % 360
    moon_longitude = (218.3165 + 481267.8813 * t) % 360

    angle = math.fmod(moon_longitude - sun_longitude - 180, 360)
    if angle < 0:
        angle += 360
    return math.radians(angle) % (2 * math.pi)


# ─── Illumination & phase ─────────────────────────────────────────────────────

def moon_illumination(phase_angle: float) -> float:
    """Illuminated fraction 0..1 for a phase angle in radians."""
    fraction = (1 + math.cos(phase_angle)) / 2
    return min(1.0, max(0.0, fraction))


def determine_moon_phase(age: float, illumination: float | None = None) -> MoonPhase:
    # illumination does not affect the classification; ranges are checked in order
    if age < 1.0 or age >= 29.0:
        return MoonPhase.NEW_MOON
    elif age < 7.4:
        return MoonPhase.WAXING_CRESCENT
    elif age < 7.5:
        return MoonPhase.FIRST_QUARTER
    elif age < 14.8:
        return MoonPhase.WAXING_GIBBOUS
    elif age < 15.0:
        return MoonPhase.FULL_MOON
    elif age < 22.1:
        return MoonPhase.WANING_GIBBOUS
    elif age < 22.2:
        return MoonPhase.LAST_QUARTER
    else:
        return MoonPhase.WANING_CRESCENT


# ─── Next events ──────────────────────────────────────────────────────────────

def _strictly_after(jd: float, target: float) -> float:
    if target > jd:
        return target
    return math.nextafter(jd, math.inf)


def next_new_moon(jd: float) -> float:
    return _strictly_after(jd, jd + (SYNODIC_MONTH - mean_moon_age(jd)))


def next_full_moon(jd: float) -> float:
    age = mean_moon_age(jd)
    if age < FULL_MOON_AGE:
        days = FULL_MOON_AGE - age
    else:
        days = SYNODIC_MONTH - age + FULL_MOON_AGE
    return _strictly_after(jd, jd + days)


# ─── Public entry point ───────────────────────────────────────────────────────

def calculate_moon_age(dt: datetime | None = None) -> MoonAgeInfo:
    """Moon age information for ``dt`` (defaults to the local clock).

    ``dt`` must already be expressed in the civil zone the caller wants;
    the returned event times are in that same zone. Raises ValueError when
    the next new or full moon falls after year 9999 (instants in the last
    lunation of 9999-12).
    """
    if dt is None:
        dt = datetime.now()
    jd = to_julian_day(dt)
    age = mean_moon_age(jd)
    illumination = moon_illumination(moon_phase_angle(jd))
    phase = determine_moon_phase(age, illumination)

    try:
        new_moon = from_julian_day(next_new_moon(jd))
        full_moon = from_julian_day(next_full_moon(jd))
    except ValueError as e:
        raise ValueError(f"Next lunar event after {dt} is beyond year 9999") from e

    return MoonAgeInfo(
        age=round(age, 2),
        illumination=min(100.0, max(0.0, round(illumination * 100, 2))),
        phase=phase,
        next_new_moon=new_moon.replace(tzinfo=dt.tzinfo),
        next_full_moon=full_moon.replace(tzinfo=dt.tzinfo),
    )


# ─── Full-moon proximity ──────────────────────────────────────────────────────

def days_to_fullmoon(dt: datetime | None = None) -> float:
    """Return signed days to nearest full moon (negative = past, positive = future)."""
    if dt is None:
        dt = datetime.now()
    jd = to_julian_day(dt)
    ahead = next_full_moon(jd) - jd
    if ahead > SYNODIC_MONTH / 2:
        return ahead - SYNODIC_MONTH
    return ahead


def is_near_fullmoon(tolerance_days: float = 2.0, dt: datetime | None = None) -> bool:
    return abs(days_to_fullmoon(dt)) <= tolerance_days
