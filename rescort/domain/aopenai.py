import os

import httpx
import openai

from rescort.domain.errors import ConfigurationError


TIMEOUT = 60 * 2


def openai_client_factory(
    token: str | None = None,
    *,
    timeout: float = TIMEOUT,
) -> openai.AsyncClient:
    token = os.environ.get("OPENAI_API_KEY") if token is None else token
    if not token:
        raise ConfigurationError("OPENAI_API_KEY environment variable not set.")
    return openai.AsyncClient(
        api_key=token,
        timeout=timeout,
        max_retries=0,
        http_client=httpx.AsyncClient(timeout=timeout),
    )
