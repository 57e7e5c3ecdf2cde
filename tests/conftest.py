import asyncio
from collections import defaultdict
from pathlib import Path

import pytest

from rescort.config import Config
from rescort.domain.models import Dish, ImageSet, Language


HTML_DIR = Path(__file__).parent.parent / "assets" / "html"

IMAGE = "data:image/jpeg;base64,/9j/4AAQSkZJRg=="


def carbonara() -> Dish:
    return Dish(
        name="Spaghetti Carbonara",
        description="A Roman classic of eggs, cheese and cured pork.",
        ingredients=["200g spaghetti", "2 eggs"],
        recipe=["Boil pasta", "Mix eggs"],
    )


class FakeGateway:
    def __init__(
        self,
        *,
        dish: Dish | None = None,
        images: ImageSet = (IMAGE,),
        details_error: Exception | None = None,
        images_error: Exception | None = None,
    ) -> None:
        self.dish = carbonara() if dish is None else dish
        self.images = images
        self.details_error = details_error
        self.images_error = images_error
        self.details_calls: list[tuple[str, Language]] = []
        self.images_calls: list[tuple[str, str]] = []
        self.closed = False

    async def dish_details(self, name: str, language: Language) -> Dish:
        self.details_calls.append((name, language))
        if self.details_error is not None:
            raise self.details_error
        return self.dish

    async def dish_images(self, name: str, description: str) -> ImageSet:
        self.images_calls.append((name, description))
        if self.images_error is not None:
            raise self.images_error
        return self.images

    async def aclose(self) -> None:
        self.closed = True


class BlockingGateway:
    """Each call waits until the test sets the event for its dish name."""

    def __init__(self) -> None:
        self.details_release: defaultdict[str, asyncio.Event] = defaultdict(
            asyncio.Event
        )
        self.images_release: defaultdict[str, asyncio.Event] = defaultdict(
            asyncio.Event
        )
        self.details_calls: list[str] = []
        self.images_calls: list[str] = []
        self.details_errors: dict[str, Exception] = {}

    async def dish_details(self, name: str, language: Language) -> Dish:
        self.details_calls.append(name)
        await self.details_release[name].wait()
        if name in self.details_errors:
            raise self.details_errors[name]
        return Dish(
            name=name,
            description=f"All about {name}.",
            ingredients=[f"{name} ingredient"],
            recipe=[f"Cook {name}"],
        )

    async def dish_images(self, name: str, description: str) -> ImageSet:
        self.images_calls.append(name)
        await self.images_release[name].wait()
        return (f"data:image/jpeg;base64,{name}",)

    async def aclose(self) -> None:
        pass


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def config() -> Config:
    return Config(html_dir=HTML_DIR, openai_api_key="test-key")
