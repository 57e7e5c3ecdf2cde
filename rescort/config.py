from enum import Enum
import logging
from pathlib import Path

from pydantic_settings import BaseSettings

from rescort.domain.models import Language


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    html_dir: Path = Path("assets/html")
    openai_api_key: str | None = None
    details_model: str = "gpt-4o-mini"
    image_model: str = "gpt-image-1"
    # Landscape output, cropped down to 4:3 by the gateway.
    image_size: str = "1536x1024"
    image_quality: str = "medium"
    timeout: float = 60 * 2
    default_language: Language = Language.en
    log_level: int | str = logging.INFO
