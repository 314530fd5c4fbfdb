import pytest

from prayertimes.methods import METHODS
from prayertimes.models import CalculatorConfig
from prayertimes.settings import ConfigError, load_config


def test_empty_environment_gives_defaults():
    assert load_config({}) == CalculatorConfig()


def test_method_preset():
    assert load_config({"PRAYERTIMES_METHOD": "isna"}) == METHODS["ISNA"]


def test_field_overrides_apply_on_top_of_method():
    config = load_config(
        {
            "PRAYERTIMES_METHOD": "MWL",
            "PRAYERTIMES_ISHA_ANGLE": "15.5",
            "PRAYERTIMES_MAGHRIB_OFFSET_MINUTES": "19",
            "PRAYERTIMES_ASR_SHADOW_FACTOR": " ",
        }
    )
    assert config.fajr_angle == 18.0
    assert config.isha_angle == 15.5
    assert config.maghrib_offset_minutes == 19
    assert config.asr_shadow_factor == 1.0


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("PRAYERTIMES_FAJR_ANGLE", "16")
    assert load_config().fajr_angle == 16.0


@pytest.mark.parametrize(
    "env",
    [
        {"PRAYERTIMES_METHOD": "Nowhere"},
        {"PRAYERTIMES_FAJR_ANGLE": "eighteen"},
        {"PRAYERTIMES_MAGHRIB_OFFSET_MINUTES": "19.5"},
        {"PRAYERTIMES_ASR_SHADOW_FACTOR": "-1"},
    ],
)
def test_bad_values_raise_config_error(env):
    with pytest.raises(ConfigError):
        load_config(env)
