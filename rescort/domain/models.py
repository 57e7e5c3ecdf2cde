from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict


SearchQuery: TypeAlias = str
DataUri: TypeAlias = str
ImageSet: TypeAlias = tuple[DataUri, ...]


class Language(Enum):
    en = "en"
    hi = "hi"
    ur = "ur"

    @property
    def display_name(self) -> str:
        return {
            Language.en: "English",
            Language.hi: "हिन्दी",
            Language.ur: "اردو",
        }[self]

    @property
    def direction(self) -> str:
        return "rtl" if self is Language.ur else "ltr"


class Theme(Enum):
    light = "light"
    dark = "dark"

    def toggled(self) -> "Theme":
        return Theme.dark if self is Theme.light else Theme.light


class Dish(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    description: str
    ingredients: list[str]
    recipe: list[str]

    @property
    def ingredients_text(self) -> str:
        return "\n".join(self.ingredients)

    @property
    def recipe_text(self) -> str:
        return "\n".join(f"{i + 1}. {step}" for i, step in enumerate(self.recipe))

    def __repr__(self) -> str:
        return f"<Dish(name={self.name})>"


@dataclass
class Preferences:
    language: Language = Language.en
    theme: Theme = Theme.light


@dataclass
class SearchState:
    """Everything the page shows about the current search.

    Only the `Orchestrator` writes to this. The view layer reads it.
    """

    preferences: Preferences = field(default_factory=Preferences)
    query: SearchQuery = ""
    dish: Dish | None = None
    images: ImageSet = ()
    details_loading: bool = False
    images_loading: bool = False
    error: str | None = None

    @property
    def language(self) -> Language:
        return self.preferences.language

    @property
    def theme(self) -> Theme:
        return self.preferences.theme

    @property
    def is_loading(self) -> bool:
        return self.details_loading or self.images_loading

    @property
    def is_idle(self) -> bool:
        return not self.query

    @property
    def is_settled(self) -> bool:
        return not self.is_idle and not self.is_loading

    @property
    def phase(self) -> str:
        if self.is_idle:
            return "idle"
        if self.details_loading:
            return "details_pending"
        if self.images_loading:
            return "images_pending"
        return "error" if self.error else "success"
