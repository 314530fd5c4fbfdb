"""Plain-text renderer."""

from prayertimes.models import PrayerTimeSet


def format_all(times: PrayerTimeSet, pattern: str = "%H:%M") -> dict[str, str]:
    """Format every time with ``strftime`` ``pattern``, keyed by display name."""
    return {name.capitalize(): t.strftime(pattern) for name, t in times.items()}


def render_text(
    times: PrayerTimeSet, title: str | None = None, pattern: str = "%H:%M"
) -> str:
    """Render a PrayerTimeSet as an aligned two-column table.

    Args:
        times: Computed prayer times.
        title: Optional heading line. Defaults to the date and zone of dhuhr.
        pattern: ``strftime`` pattern for each time.

    Returns:
        Multi-line string without a trailing newline.
    """
    if title is None:
        title = f"Prayer Times {times.dhuhr.strftime('%Y-%m-%d (%Z, UTC%z)')}"
    formatted = format_all(times, pattern)
    width = max(len(name) for name in formatted) + 1
    rows = [f"{name + ':':<{width}} {value}" for name, value in formatted.items()]
    return "\n".join([title, *rows])
