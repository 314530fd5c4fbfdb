"""Astronomy computation layer — solar ephemeris, hour angles, and zoned prayer times."""

import math
from datetime import date, datetime, timedelta
from functools import lru_cache

from pytz import (
    AmbiguousTimeError,
    BaseTzInfo,
    NonExistentTimeError,
    UnknownTimeZoneError,
    timezone,
)
from timezonefinder import TimezoneFinder

from prayertimes.cities import find_city
from prayertimes.models import (
    CalculatorConfig,
    City,
    Location,
    PrayerTimeSet,
    SolarParameters,
)

J2000 = 2451545.0  # Julian day of the J2000.0 epoch
MINUTES_PER_DEGREE = 4.0  # The sun moves 1° of hour angle every 4 minutes


class InvalidTimeZone(ValueError):
    """Timezone identifier unknown to the tz database."""


@lru_cache(maxsize=1)
def _timezone_finder() -> TimezoneFinder:
    return TimezoneFinder()


def resolve_zone(tz_name: str) -> BaseTzInfo:
    """Look up an IANA zone, raising InvalidTimeZone if pytz does not know it."""
    try:
        return timezone(tz_name)
    except UnknownTimeZoneError as e:
        raise InvalidTimeZone(f"Unknown timezone: {tz_name!r}") from e


def timezone_for_coordinates(latitude: float, longitude: float) -> str:
    """Resolve the IANA zone containing a point.

    Raises:
        InvalidTimeZone: When the point lies outside every zone polygon.
    """
    tz_str = _timezone_finder().timezone_at(lat=latitude, lng=longitude)
    if tz_str is None:
        raise InvalidTimeZone(f"Timezone not found: lat={latitude}, lng={longitude}")
    return tz_str


# --- JulianDayConverter ---


def julian_day(day: date) -> float:
    """Julian Day at 0h UT of a proleptic Gregorian date (ends in .5)."""
    year, month = day.year, day.month
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day.day
        + b
        - 1524.5
    )


# --- SolarEphemeris ---


def solar_parameters(jd: float) -> SolarParameters:
    """Low-precision solar position (about one minute of accuracy for civil use).

    Args:
        jd: Julian day.

    Returns:
        SolarParameters with declination in radians and the equation of
        time in minutes.
    """
    d = jd - J2000
    g = math.radians(357.529 + 0.98560028 * d)  # Mean anomaly
    q = 280.459 + 0.98564736 * d  # Mean longitude (degrees, unwrapped)
    ecliptic_longitude = math.radians(
        (q + 1.915 * math.sin(g) + 0.020 * math.sin(2 * g)) % 360.0
    )
    obliquity = math.radians(23.439 - 0.00000036 * d)

    right_ascension = (
        math.degrees(
            math.atan2(
                math.cos(obliquity) * math.sin(ecliptic_longitude),
                math.cos(ecliptic_longitude),
            )
        )
        % 360.0
    )
    declination = math.asin(math.sin(obliquity) * math.sin(ecliptic_longitude))

    # Python's float % with a positive modulus is already non-negative
    delta = q % 360.0 - right_ascension
    if delta > 180.0:
        delta -= 360.0
    elif delta < -180.0:
        delta += 360.0

    return SolarParameters(
        declination=declination, equation_of_time=MINUTES_PER_DEGREE * delta
    )


# --- HourAngleSolver ---


def _clamped_hour_angle(altitude: float, latitude: float, declination: float) -> float:
    cos_h = (math.sin(altitude) - math.sin(latitude) * math.sin(declination)) / (
        math.cos(latitude) * math.cos(declination)
    )
    # Sun never reaches the altitude: fall back to the 0 / π boundary
    return math.acos(min(1.0, max(-1.0, cos_h)))


def hour_angle(altitude_deg: float, latitude: float, declination: float) -> float:
    """Hour angle (radians) at which the sun stands at ``altitude_deg``.

    ``latitude`` and ``declination`` are in radians. Where the sun never
    reaches the altitude the cosine is clamped, giving exactly 0 (never
    rises to it) or π (never sinks to it) instead of raising.
    """
    return _clamped_hour_angle(math.radians(altitude_deg), latitude, declination)


def asr_hour_angle(shadow_factor: float, latitude: float, declination: float) -> float:
    """Hour angle (radians) at which a shadow is ``shadow_factor`` times the
    object's height plus its noon shadow."""
    altitude = math.atan(1.0 / (shadow_factor + math.tan(abs(latitude - declination))))
    return _clamped_hour_angle(altitude, latitude, declination)


# --- TimeAssembler ---


def solar_noon(longitude: float, equation_of_time: float) -> float:
    """Transit time in UTC minutes from midnight."""
    return 720.0 - MINUTES_PER_DEGREE * longitude - equation_of_time


def _minutes(angle: float) -> float:
    return MINUTES_PER_DEGREE * math.degrees(angle)


def _localize_midnight(tz: BaseTzInfo, day: date) -> datetime:
    # Inside a DST gap this keeps the pre-gap offset, so offset and instant agree
    naive = datetime(day.year, day.month, day.day)
    try:
        return tz.localize(naive, is_dst=None)
    except AmbiguousTimeError:
        return tz.localize(naive, is_dst=True)
    except NonExistentTimeError:
        return tz.localize(naive, is_dst=False)


def start_of_day(tz: BaseTzInfo, day: date) -> datetime:
    """Local midnight of ``day``.

    An ambiguous midnight resolves to the earlier instant; a midnight inside
    a DST gap resolves to the first instant after the gap.
    """
    return tz.normalize(_localize_midnight(tz, day))


def to_local_time(day: date, utc_minutes: float, tz: BaseTzInfo) -> datetime:
    """Convert UTC minutes-from-midnight on ``day`` into a zoned timestamp.

    The zone's offset at local midnight is added, the total is rounded
    half-up to whole seconds, and the result is laid onto local midnight.
    """
    midnight = _localize_midnight(tz, day)
    offset = midnight.utcoffset()
    assert offset is not None
    offset_minutes = int(offset.total_seconds() / 60)

    total_minutes = utc_minutes + offset_minutes
    total_seconds = math.floor(total_minutes * 60.0 + 0.5)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return tz.normalize(
        midnight + timedelta(hours=hours, minutes=minutes, seconds=seconds)
    )


def _fajr_minutes(
    location: Location, config: CalculatorConfig, solar: SolarParameters
) -> float:
    noon = solar_noon(location.longitude, solar.equation_of_time)
    angle = hour_angle(
        -config.fajr_angle, math.radians(location.latitude), solar.declination
    )
    return noon - _minutes(angle)


def assemble_times(
    day: date,
    location: Location,
    config: CalculatorConfig,
    solar: SolarParameters,
    next_solar: SolarParameters,
) -> PrayerTimeSet:
    """Combine solar noon and hour angles into the eight zoned times of ``day``.

    Args:
        day: Calendar date.
        location: Observer position and zone.
        config: Angles and offsets.
        solar: Sun position for ``day``.
        next_solar: Sun position for the following day, used for midnight.

    Returns:
        PrayerTimeSet in the location's timezone.

    Raises:
        InvalidTimeZone: If the location's zone cannot be resolved.
    """
    tz = resolve_zone(location.timezone)
    latitude = math.radians(location.latitude)
    noon = solar_noon(location.longitude, solar.equation_of_time)

    sun = _minutes(
        hour_angle(config.sunrise_sunset_altitude, latitude, solar.declination)
    )
    isha = _minutes(hour_angle(-config.isha_angle, latitude, solar.declination))
    asr = _minutes(
        asr_hour_angle(config.asr_shadow_factor, latitude, solar.declination)
    )

    sunset_time = to_local_time(day, noon + sun, tz)

    next_day = day + timedelta(days=1)
    next_fajr = to_local_time(
        next_day, _fajr_minutes(location, config, next_solar), tz
    )
    half_night = int((next_fajr - sunset_time).total_seconds()) // 2

    return PrayerTimeSet(
        fajr=to_local_time(day, _fajr_minutes(location, config, solar), tz),
        sunrise=to_local_time(day, noon - sun, tz),
        dhuhr=to_local_time(day, noon, tz),
        asr=to_local_time(day, noon + asr, tz),
        sunset=sunset_time,
        maghrib=tz.normalize(
            sunset_time + timedelta(minutes=config.maghrib_offset_minutes)
        ),
        isha=to_local_time(day, noon + isha, tz),
        midnight=tz.normalize(sunset_time + timedelta(seconds=half_night)),
    )


# --- PrayerTimeCalculator ---


class PrayerTimeCalculator:
    """Prayer times for one date and place, driven by a CalculatorConfig."""

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self.config = config if config is not None else CalculatorConfig()

    def calculate(
        self, day: date, latitude: float, longitude: float, tz_name: str
    ) -> PrayerTimeSet:
        """Compute the full time set for ``day``.

        Raises:
            InvalidTimeZone: If ``tz_name`` is not a known IANA zone.
            ValueError: If the coordinates are out of range.
        """
        location = Location(latitude=latitude, longitude=longitude, timezone=tz_name)
        solar = solar_parameters(julian_day(day))
        next_solar = solar_parameters(julian_day(day + timedelta(days=1)))
        return assemble_times(day, location, self.config, solar, next_solar)


def calculate(
    day: date,
    latitude: float,
    longitude: float,
    tz_name: str,
    config: CalculatorConfig | None = None,
) -> PrayerTimeSet:
    """Top-level entry point: prayer times for one date and place."""
    return PrayerTimeCalculator(config).calculate(day, latitude, longitude, tz_name)


def calculate_range(
    start: date,
    days: int,
    latitude: float,
    longitude: float,
    tz_name: str,
    config: CalculatorConfig | None = None,
) -> tuple[PrayerTimeSet, ...]:
    """Prayer times for ``days`` consecutive dates beginning at ``start``."""
    if days < 1:
        raise ValueError(f"days must be at least 1: {days}")
    calculator = PrayerTimeCalculator(config)
    return tuple(
        calculator.calculate(start + timedelta(days=i), latitude, longitude, tz_name)
        for i in range(days)
    )


def calculate_for_city(
    city: City | str,
    day: date | None = None,
    config: CalculatorConfig | None = None,
) -> PrayerTimeSet:
    """Prayer times for a directory city.

    Args:
        city: A City, or a name/key understood by ``find_city``.
        day: Date to compute. Defaults to today in the city's timezone.
        config: Calculation settings. Defaults to CalculatorConfig().
    """
    if isinstance(city, str):
        city = find_city(city)
    if day is None:
        day = datetime.now(resolve_zone(city.timezone)).date()
    return calculate(day, city.latitude, city.longitude, city.timezone, config)


def calculate_for_coordinates(
    latitude: float,
    longitude: float,
    day: date | None = None,
    tz_name: str | None = None,
    config: CalculatorConfig | None = None,
) -> PrayerTimeSet:
    """Prayer times for arbitrary coordinates.

    When ``tz_name`` is omitted the zone is looked up from the coordinates.
    """
    if tz_name is None:
        tz_name = timezone_for_coordinates(latitude, longitude)
    if day is None:
        day = datetime.now(resolve_zone(tz_name)).date()
    return calculate(day, latitude, longitude, tz_name, config)
