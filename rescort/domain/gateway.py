"""Boundary to the generation service.

Everything coming back from OpenAI is validated here. Callers only ever see a
`Dish`, an `ImageSet` or a `GenerationError`.
"""
import asyncio
import base64
import binascii
import io
import logging
from typing import Protocol

import openai
from PIL import Image
import pydantic

from rescort.config import Config
from rescort.domain.aopenai import openai_client_factory
from rescort.domain.errors import GenerationError
from rescort.domain.models import DataUri, Dish, ImageSet, Language
from rescort.domain.prompts import (
    DISH_SCHEMA,
    dish_details_system_prompt,
    dish_details_user_prompt,
    dish_image_prompt,
)


logger = logging.getLogger(__name__)


ASPECT_RATIO = (4, 3)
JPEG_QUALITY = 90


class Gateway(Protocol):
    async def dish_details(self, name: str, language: Language) -> Dish:
        ...

    async def dish_images(self, name: str, description: str) -> ImageSet:
        ...

    async def aclose(self) -> None:
        ...


def crop_to_aspect(data: bytes, aspect: tuple[int, int] = ASPECT_RATIO) -> bytes:
    """Centre crop the image to `aspect` and re-encode it as JPEG."""
    aw, ah = aspect
    with Image.open(io.BytesIO(data)) as img:
        width, height = img.size
        # Slivers would round down to an empty box.
        w = max(1, min(width, height * aw // ah))
        h = max(1, min(height, width * ah // aw))
        left = (width - w) // 2
        top = (height - h) // 2
        cropped = img.crop((left, top, left + w, top + h)).convert("RGB")
    out = io.BytesIO()
    cropped.save(out, format="JPEG", quality=JPEG_QUALITY)
    return out.getvalue()


def to_data_uri(b64_image: str) -> DataUri:
    cropped = crop_to_aspect(base64.b64decode(b64_image, validate=True))
    return f"data:image/jpeg;base64,{base64.b64encode(cropped).decode('utf-8')}"


class OpenAIGateway:
    def __init__(
        self,
        config: Config | None = None,
        openai_client: openai.AsyncClient | None = None,
    ) -> None:
        self.config = Config() if config is None else config
        self.openai_client = (
            openai_client_factory(
                self.config.openai_api_key, timeout=self.config.timeout
            )
            if openai_client is None
            else openai_client
        )

    async def dish_details(self, name: str, language: Language) -> Dish:
        try:
            resp = await self.openai_client.chat.completions.create(
                model=self.config.details_model,
                messages=[
                    {"role": "system", "content": dish_details_system_prompt(language)},
                    {"role": "user", "content": dish_details_user_prompt(name)},
                ],
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "dish",
                        "strict": True,
                        "schema": DISH_SCHEMA,
                    },
                },
            )
        except openai.OpenAIError as e:
            raise GenerationError("Failed to fetch dish details.") from e

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not content:
            raise GenerationError("Failed to fetch dish details. Empty response.")

        try:
            return Dish.model_validate_json(content)
        except pydantic.ValidationError as e:
            logger.warning("Malformed dish details: %s", content)
            raise GenerationError(
                "Failed to fetch dish details. Unexpected response format."
            ) from e

    async def dish_images(self, name: str, description: str) -> ImageSet:
        try:
            resp = await self.openai_client.images.generate(
                model=self.config.image_model,
                prompt=dish_image_prompt(name, description),
                n=1,
                size=self.config.image_size,  # pyright: ignore[reportArgumentType]
                quality=self.config.image_quality,  # pyright: ignore[reportArgumentType]
                output_format="jpeg",
            )
        except openai.OpenAIError as e:
            raise GenerationError("Failed to fetch dish images.") from e

        encoded = [img.b64_json for img in resp.data or [] if img.b64_json]
        try:
            images = await asyncio.gather(
                *(asyncio.to_thread(to_data_uri, b64) for b64 in encoded)
            )
        except (
            OSError,
            ValueError,
            binascii.Error,
            Image.DecompressionBombError,
        ) as e:
            raise GenerationError(
                "Failed to fetch dish images. Could not decode image."
            ) from e

        return tuple(images)

    async def aclose(self) -> None:
        await self.openai_client.close()
