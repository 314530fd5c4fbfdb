"""Named calculation conventions as ready-made CalculatorConfig values."""

from prayertimes.models import CalculatorConfig

# Twilight angles of the common conventions; everything else keeps the defaults
METHODS: dict[str, CalculatorConfig] = {
    "Tehran": CalculatorConfig(fajr_angle=17.7, isha_angle=14.0),
    "Jafari": CalculatorConfig(fajr_angle=16.0, isha_angle=14.0),
    "MWL": CalculatorConfig(fajr_angle=18.0, isha_angle=17.0, maghrib_offset_minutes=0),
    "ISNA": CalculatorConfig(fajr_angle=15.0, isha_angle=15.0, maghrib_offset_minutes=0),
    "Egypt": CalculatorConfig(
        fajr_angle=19.5, isha_angle=17.5, maghrib_offset_minutes=0
    ),
    "Karachi": CalculatorConfig(
        fajr_angle=18.0, isha_angle=18.0, maghrib_offset_minutes=0
    ),
}

_BY_LOWER: dict[str, str] = {name.lower(): name for name in METHODS}


def get_method(name: str) -> CalculatorConfig:
    """Return the preset for ``name`` (case-insensitive).

    Raises:
        KeyError: If the convention is unknown.
    """
    canonical = _BY_LOWER.get(name.strip().lower())
    if canonical is None:
        raise KeyError(f"Unknown calculation method: {name!r}")
    return METHODS[canonical]
