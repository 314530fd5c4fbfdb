"""CLI entry point for a printed timetable.

Edit the city/start/days variables at the top, then run:
    python -m prayertimes.timetable

Calculation settings come from PRAYERTIMES_* variables (see settings.py).
"""

from datetime import date

from dotenv import load_dotenv

load_dotenv()

from prayertimes.cities import find_city  # noqa: E402
from prayertimes.compute import calculate_range  # noqa: E402
from prayertimes.renderers.static import save_month_chart  # noqa: E402
from prayertimes.renderers.text import render_text  # noqa: E402
from prayertimes.settings import load_config  # noqa: E402

city = "Tehran"
start = date(2024, 6, 21)
days = 7

place = find_city(city)
sets = calculate_range(
    start, days, place.latitude, place.longitude, place.timezone, load_config()
)
for times in sets:
    print(render_text(times, title=f"{place.name} {times.dhuhr:%Y-%m-%d}"))
    print()
path = save_month_chart(sets, label=place.name)
print(f"Saved: {path}")
