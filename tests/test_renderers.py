from datetime import date

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from prayertimes.compute import calculate, calculate_range  # noqa: E402
from prayertimes.renderers.plotly_day import render_day_timeline  # noqa: E402
from prayertimes.renderers.static import (  # noqa: E402
    local_hours,
    render_month_chart,
    save_month_chart,
)
from prayertimes.renderers.text import format_all, render_text  # noqa: E402

TEHRAN = (35.6892, 51.3890, "Asia/Tehran")
DAY = date(2024, 6, 21)


@pytest.fixture(scope="module")
def times():
    return calculate(DAY, *TEHRAN)


def test_format_all_keys_in_order(times):
    formatted = format_all(times)
    assert list(formatted) == [
        "Fajr",
        "Sunrise",
        "Dhuhr",
        "Asr",
        "Sunset",
        "Maghrib",
        "Isha",
        "Midnight",
    ]
    assert formatted["Dhuhr"] == times.dhuhr.strftime("%H:%M")


def test_render_text(times):
    text = render_text(times, title="Tehran")
    lines = text.splitlines()
    assert lines[0] == "Tehran"
    assert len(lines) == 9
    assert lines[1].startswith("Fajr:")
    assert lines[-1].endswith(times.midnight.strftime("%H:%M"))


def test_render_text_default_title(times):
    assert render_text(times).splitlines()[0].startswith("Prayer Times 2024-06-21")


def test_day_timeline(times):
    fig = render_day_timeline(times, title="Tehran")
    assert len(fig.data) == 2
    assert len(fig.data[0].x) == 8
    assert fig.layout.title.text == "Tehran"


def test_local_hours(times):
    hours = local_hours(times)
    assert hours["fajr"] < hours["dhuhr"] < hours["midnight"]
    assert hours["dhuhr"] == pytest.approx(
        times.dhuhr.hour + times.dhuhr.minute / 60 + times.dhuhr.second / 3600
    )


def test_month_chart_and_save(tmp_path):
    sets = calculate_range(DAY, 5, *TEHRAN)
    fig = render_month_chart(sets, title="Tehran")
    assert len(fig.axes[0].lines) == 8

    path = save_month_chart(sets, label="Tehran", output_path=tmp_path / "t.png")
    assert path.exists()
    assert path.stat().st_size > 0


def test_month_chart_rejects_empty():
    with pytest.raises(ValueError):
        render_month_chart([])
