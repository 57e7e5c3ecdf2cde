"""The search workflow.

A search runs in two steps: `start` wipes the previous result and hands back a
generation token, `run` does the two gateway calls. Details first, then images
generated from the returned dish rather than the raw query. Each completion is
checked against the latest token so a superseded search can never write over a
newer one.
"""
import logging

from rescort.domain.errors import GenerationError, ValidationError
from rescort.domain.gateway import Gateway
from rescort.domain.models import Dish, Preferences, SearchState


logger = logging.getLogger(__name__)


FALLBACK_ERROR = "An unknown error occurred."


def error_message(exc: BaseException) -> str:
    return str(exc).strip() or FALLBACK_ERROR


class Orchestrator:
    def __init__(
        self,
        gateway: Gateway,
        *,
        preferences: Preferences | None = None,
    ) -> None:
        self.gateway = gateway
        self.preferences = Preferences() if preferences is None else preferences
        self.state = SearchState(preferences=self.preferences)
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def use_preferences(self, preferences: Preferences) -> None:
        # Affects the next details request only. In-flight searches keep the
        # language they started with.
        self.preferences = preferences
        self.state.preferences = preferences

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def start(self, query: str) -> int:
        query = query.strip()
        if not query:
            raise ValidationError("Provide a dish name.")

        self._generation += 1
        self.state = SearchState(
            preferences=self.preferences,
            query=query,
            details_loading=True,
        )
        logger.info("Search %d started: %r", self._generation, query)
        return self._generation

    async def run(self, generation: int) -> None:
        if not self.is_current(generation):
            logger.info("Search %d superseded before it ran.", generation)
            return

        query = self.state.query
        language = self.state.language

        try:
            dish = await self.gateway.dish_details(query, language)
        except Exception as e:
            self._fail(generation, e, stage="details")
            return

        if not self._settle_details(generation, dish):
            return

        try:
            images = await self.gateway.dish_images(dish.name, dish.description)
        except Exception as e:
            self._fail(generation, e, stage="images")
            return

        if not self.is_current(generation):
            logger.info("Discarding stale images for search %d.", generation)
            return
        self.state.images = tuple(images)
        self.state.images_loading = False
        logger.info("Search %d settled with %d image(s).", generation, len(images))

    async def search(self, query: str) -> SearchState:
        await self.run(self.start(query))
        return self.state

    def _settle_details(self, generation: int, dish: Dish) -> bool:
        if not self.is_current(generation):
            logger.info("Discarding stale details for search %d.", generation)
            return False
        self.state.dish = dish
        self.state.details_loading = False
        self.state.images_loading = True
        logger.info("Search %d got details for %r.", generation, dish.name)
        return True

    def _fail(self, generation: int, exc: Exception, *, stage: str) -> None:
        if not self.is_current(generation):
            logger.info("Discarding stale %s failure for search %d.", stage, generation)
            return
        if isinstance(exc, GenerationError):
            logger.warning("Search %d failed fetching %s: %s", generation, stage, exc)
        else:
            logger.exception("Search %d failed fetching %s.", generation, stage)
        # The dish, if already fetched, stays on screen.
        self.state.error = error_message(exc)
        self.state.details_loading = False
        self.state.images_loading = False
