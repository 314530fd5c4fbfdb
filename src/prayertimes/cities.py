"""Built-in city directory — a constant table, looked up by key or name."""

from prayertimes.models import City

CITIES: tuple[City, ...] = (
    City("tehran", "Tehran", "تهران", 35.6892, 51.3890),
    City("tabriz", "Tabriz", "تبریز", 38.0800, 46.2919),
    City("mashhad", "Mashhad", "مشهد", 36.3264, 59.5433),
    City("isfahan", "Isfahan", "اصفهان", 32.6525, 51.6746),
    City("shiraz", "Shiraz", "شیراز", 29.5918, 52.5837),
    City("qom", "Qom", "قم", 34.6401, 50.8764),
    City("ahvaz", "Ahvaz", "اهواز", 31.3203, 48.6692),
    City("kermanshah", "Kermanshah", "کرمانشاه", 34.3142, 47.0650),
    City("rasht", "Rasht", "رشت", 37.2808, 49.5831),
    City("yazd", "Yazd", "یزد", 31.8974, 54.3569),
)

_BY_NAME: dict[str, City] = {
    alias: city
    for city in CITIES
    for alias in (city.key, city.name.casefold(), city.native_name)
}


def find_city(name: str) -> City:
    """Look up a city by key, English name (any case), or native name.

    Raises:
        KeyError: If no city matches.
    """
    city = _BY_NAME.get(name.strip().casefold())
    if city is None:
        raise KeyError(f"Unknown city: {name!r}")
    return city
