"""Matplotlib static PNG renderer for multi-day timetables."""

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from prayertimes.models import PRAYER_NAMES, PrayerTimeSet

_ROOT = Path(__file__).parent.parent.parent.parent


def local_hours(times: PrayerTimeSet) -> dict[str, float]:
    """Wall-clock hours of each time relative to local midnight of dhuhr's date.

    Times on the following date (usually midnight) continue past 24.
    """
    base = times.dhuhr.date()
    return {
        name: 24.0 * (t.date() - base).days
        + t.hour
        + t.minute / 60.0
        + t.second / 3600.0
        for name, t in times.items()
    }


def render_month_chart(
    sets: Sequence[PrayerTimeSet], title: str = "", chart_size: int = 10
) -> Figure:
    """Render consecutive days as one line per prayer.

    Args:
        sets: Prayer times in date order, e.g. from ``calculate_range``.
        title: Figure title.
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    if not sets:
        raise ValueError("at least one day is required")

    days = np.array([s.dhuhr.date() for s in sets])
    hours = [local_hours(s) for s in sets]

    fig, ax = plt.subplots(figsize=(chart_size, chart_size * 0.6))
    for name in PRAYER_NAMES:
        values = np.array([h[name] for h in hours])
        ax.plot(days, values, label=name.capitalize(), linewidth=1.2)

    ax.set_ylim(0, 26)
    ax.set_yticks(range(0, 27, 2))
    ax.set_ylabel("Local time (h)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left", bbox_to_anchor=(1.0, 1.0), fontsize="small")
    if title:
        ax.set_title(title)
    fig.autofmt_xdate()
    fig.tight_layout()
    return fig


def save_month_chart(
    sets: Sequence[PrayerTimeSet],
    label: str = "timetable",
    output_path: Path | None = None,
) -> Path:
    """Save a multi-day chart as a PNG file.

    Args:
        sets: Prayer times in date order.
        label: Place name used for the title and default filename.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if not sets:
        raise ValueError("at least one day is required")
    first = sets[0].dhuhr.date()
    if output_path is None:
        filename = f"{label}__{first}__{len(sets)}d.png".replace(" ", "_")
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_month_chart(sets, title=f"{label} from {first}")
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
