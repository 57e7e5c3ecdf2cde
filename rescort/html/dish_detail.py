from jinja2 import Environment

from rescort.domain.models import Dish, Language
from rescort.i18n import t


class DishDetail:
    def __init__(
        self,
        dish: Dish,
        *,
        environment: Environment,
        language: Language = Language.en,
        template_name: str = "dish-detail.html",
    ) -> None:
        self.dish = dish
        self.env = environment
        self.language = language
        self.name = template_name

    @property
    def title(self) -> str:
        return self.dish.name

    @property
    def sections(self) -> list[tuple[str, str, list[str], str]]:
        """(heading, copy url, items, list tag) for each copyable section."""
        return [
            (
                t(self.language, "ingredients"),
                "/copy/ingredients",
                self.dish.ingredients,
                "ul",
            ),
            (t(self.language, "recipe"), "/copy/recipe", self.dish.recipe, "ol"),
        ]

    def render(self) -> str:
        return self.env.get_template(self.name).render(
            detail=self, dish=self.dish, lang=self.language, t=t
        )
