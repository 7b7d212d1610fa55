"""
messages.py - User-facing strings per language.

Keys with {placeholders} are filled with str.format by the caller.
Unknown languages fall back to English.
"""

MESSAGES = {
    "en": {
        "window_title":      "Placefinder",
        "search_title":      "Find a place",
        "search_hint":       "City, landmark, address…",
        "search":            "Search",
        "searching":         "Searching...",
        "loading":           "Loading weather and places…",
        "back":              "← Back",
        "close":             "Close",
        "enter_place":       "Enter a place name",
        "no_locations":      "No locations found",
        "error":             "Error: {detail}",
        "temperature":       "Temperature",
        "feels_like":        "Feels like",
        "humidity":          "Humidity",
        "wind":              "Wind",
        "wind_unit":         "m/s",
        "places_header":     "Places ({count})",
        "no_places":         "No points of interest found",
        "untitled":          "Untitled",
        "click_for_details": "Click for details",
        "information":       "Information",
        "links":             "Links",
        "website":           "🌐 Website",
        "wikipedia":         "📖 Wikipedia",
        "map":               "🗺️ Map",
    },
    "ru": {
        "window_title":      "Placefinder",
        "search_title":      "Поиск места",
        "search_hint":       "Город, достопримечательность, адрес…",
        "search":            "Поиск",
        "searching":         "Поиск...",
        "loading":           "Загрузка погоды и мест…",
        "back":              "← Назад",
        "close":             "Закрыть",
        "enter_place":       "Введите название места",
        "no_locations":      "Локации не найдены",
        "error":             "Ошибка: {detail}",
        "temperature":       "Температура",
        "feels_like":        "Ощущается",
        "humidity":          "Влажность",
        "wind":              "Ветер",
        "wind_unit":         "м/с",
        "places_header":     "Интересные места ({count})",
        "no_places":         "Интересные места не найдены",
        "untitled":          "Без названия",
        "click_for_details": "Нажмите для просмотра деталей",
        "information":       "Информация",
        "links":             "Ссылки",
        "website":           "🌐 Сайт",
        "wikipedia":         "📖 Wikipedia",
        "map":               "🗺️ Карта",
    },
}


def get_messages(lang: str = "en") -> dict[str, str]:
    if lang not in MESSAGES:
        lang = "en"
    return MESSAGES[lang]
