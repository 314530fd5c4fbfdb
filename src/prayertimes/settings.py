"""Environment-driven configuration.

Entry points call ``load_dotenv()`` first, so values may also come from a
``.env`` file. Recognised variables:

    PRAYERTIMES_METHOD                   preset name ("Tehran", "MWL", ...)
    PRAYERTIMES_FAJR_ANGLE               degrees below horizon
    PRAYERTIMES_ISHA_ANGLE               degrees below horizon
    PRAYERTIMES_SUNRISE_SUNSET_ALTITUDE  degrees
    PRAYERTIMES_ASR_SHADOW_FACTOR        1 (Shafii) or 2 (Hanafi)
    PRAYERTIMES_MAGHRIB_OFFSET_MINUTES   whole minutes after sunset

Individual values override the preset.
"""

import os
from collections.abc import Mapping
from dataclasses import replace

from prayertimes.methods import get_method
from prayertimes.models import CalculatorConfig

_PREFIX = "PRAYERTIMES_"

_FIELDS: dict[str, type] = {
    "fajr_angle": float,
    "isha_angle": float,
    "sunrise_sunset_altitude": float,
    "asr_shadow_factor": float,
    "maghrib_offset_minutes": int,
}


class ConfigError(ValueError):
    """Malformed PRAYERTIMES_* environment value."""


def load_config(environ: Mapping[str, str] | None = None) -> CalculatorConfig:
    """Build a CalculatorConfig from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The preset named by PRAYERTIMES_METHOD (or the defaults), with any
        per-field variables applied on top.

    Raises:
        ConfigError: On an unknown method or an unparsable value.
    """
    env = os.environ if environ is None else environ

    method = env.get(_PREFIX + "METHOD", "").strip()
    try:
        config = get_method(method) if method else CalculatorConfig()
    except KeyError as e:
        raise ConfigError(str(e)) from e

    overrides: dict[str, float | int] = {}
    for field, cast in _FIELDS.items():
        name = _PREFIX + field.upper()
        raw = env.get(name)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[field] = cast(raw.strip())
        except ValueError as e:
            raise ConfigError(f"{name}: cannot parse {raw!r}") from e

    try:
        return replace(config, **overrides)
    except ValueError as e:
        raise ConfigError(str(e)) from e
