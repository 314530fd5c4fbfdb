"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from collections.abc import Iterator
from dataclasses import dataclass, fields
from datetime import datetime


@dataclass(frozen=True)
class Location:
    """Observer position plus the IANA zone used for local times."""

    latitude: float  # Latitude (decimal degrees, + = North)
    longitude: float  # Longitude (decimal degrees, + = East)
    timezone: str  # IANA zone name ("Asia/Tehran")

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class CalculatorConfig:
    """Angles and offsets that fully determine a calculation."""

    fajr_angle: float = 17.7  # Degrees below horizon
    isha_angle: float = 14.0  # Degrees below horizon
    sunrise_sunset_altitude: float = -0.833  # Refraction + solar radius
    asr_shadow_factor: float = 1.0  # 1 = Shafii, 2 = Hanafi
    maghrib_offset_minutes: int = 21  # Minutes after sunset

    def __post_init__(self) -> None:
        if self.asr_shadow_factor <= 0:
            raise ValueError(
                f"asr_shadow_factor must be positive: {self.asr_shadow_factor}"
            )


@dataclass(frozen=True)
class SolarParameters:
    """Sun position for one Julian day."""

    declination: float  # Radians
    equation_of_time: float  # Signed minutes (apparent - mean solar time)


PRAYER_NAMES: tuple[str, ...] = (
    "fajr",
    "sunrise",
    "dhuhr",
    "asr",
    "sunset",
    "maghrib",
    "isha",
    "midnight",
)


@dataclass(frozen=True)
class PrayerTimeSet:
    """The sole input to renderers. Eight zoned timestamps for one day."""

    fajr: datetime
    sunrise: datetime
    dhuhr: datetime
    asr: datetime
    sunset: datetime
    maghrib: datetime
    isha: datetime
    midnight: datetime  # Midpoint between sunset and the next day's fajr

    def items(self) -> Iterator[tuple[str, datetime]]:
        """Yield (name, time) pairs in chronological prayer order."""
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def as_dict(self) -> dict[str, datetime]:
        return dict(self.items())


@dataclass(frozen=True)
class City:
    """A named place in the built-in directory."""

    key: str  # Lookup key ("tehran")
    name: str  # English display name
    native_name: str  # Name in the local script ("تهران")
    latitude: float
    longitude: float
    timezone: str = "Asia/Tehran"

    @property
    def location(self) -> Location:
        return Location(
            latitude=self.latitude, longitude=self.longitude, timezone=self.timezone
        )
