"""Theme and language preferences, kept in cookies between visits."""

from typing import Mapping, TypeVar

from starlette.responses import Response

from rescort.domain.models import Language, Preferences, Theme


THEME_COOKIE = "theme"
LANGUAGE_COOKIE = "language"
COLOR_SCHEME_HINT = "Sec-CH-Prefers-Color-Scheme"
ONE_YEAR = 60 * 60 * 24 * 365


E = TypeVar("E", Language, Theme)


def _parse(enum: type[E], value: str | None) -> E | None:
    if value is None:
        return None
    try:
        return enum(value.strip().strip('"').lower())
    except ValueError:
        return None


def load_preferences(
    cookies: Mapping[str, str],
    headers: Mapping[str, str],
    *,
    default_language: Language = Language.en,
) -> Preferences:
    """Read preferences saved by `save_preferences`.

    Without a theme cookie the browser's colour-scheme hint decides, then light.
    """
    theme = (
        _parse(Theme, cookies.get(THEME_COOKIE))
        or _parse(Theme, headers.get(COLOR_SCHEME_HINT))
        or Theme.light
    )
    language = _parse(Language, cookies.get(LANGUAGE_COOKIE)) or default_language
    return Preferences(language=language, theme=theme)


def save_preferences(response: Response, preferences: Preferences) -> None:
    response.set_cookie(
        THEME_COOKIE, preferences.theme.value, max_age=ONE_YEAR, samesite="lax"
    )
    response.set_cookie(
        LANGUAGE_COOKIE, preferences.language.value, max_age=ONE_YEAR, samesite="lax"
    )
