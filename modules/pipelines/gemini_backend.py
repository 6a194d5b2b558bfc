"""Remote image service access through the google-genai SDK."""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Protocol

from google import genai
from google.genai import types

from config.settings import AppConfig
from modules.pipelines.data_types import BackendRequest, ResponsePart
from modules.pipelines.response_parser import parts_from_response
from modules.utils.errors import MissingApiKeyError

logger = logging.getLogger(__name__)


class ImageBackend(Protocol):
    """Anything that turns one request into an ordered list of response parts."""

    async def submit(self, request: BackendRequest) -> List[ResponsePart]:
        ...


class GeminiImageBackend:
    """Facade around ``client.aio.models.generate_content``."""

    def __init__(self, config: AppConfig, client: Optional[genai.Client] = None) -> None:
        self.config = config
        self._client = client

    def _client_instance(self) -> genai.Client:
        if self._client is not None:
            return self._client
        if not self.config.gemini_api_key:
            raise MissingApiKeyError()

        kwargs = {"api_key": self.config.gemini_api_key}
        base_url = self.config.metadata.get("gemini_base_url")
        if base_url:
            kwargs["http_options"] = types.HttpOptions(base_url=base_url)
        self._client = genai.Client(**kwargs)
        return self._client

    def _contents(self, request: BackendRequest) -> List[types.Part]:
        contents: List[types.Part] = []
        if request.image is not None:
            contents.append(
                types.Part.from_bytes(
                    data=request.image.to_bytes(),
                    mime_type=request.image.mime_type,
                )
            )
        contents.append(types.Part.from_text(text=request.instruction))
        return contents

    async def submit(self, request: BackendRequest) -> List[ResponsePart]:
        """Send one request and return the parts of the first candidate."""
        client = self._client_instance()
        started = time.perf_counter()
        response = await client.aio.models.generate_content(
            model=self.config.model_name,
            contents=self._contents(request),
            config=types.GenerateContentConfig(
                response_modalities=list(request.modalities),
            ),
        )
        parts = parts_from_response(response)
        logger.info(
            "%s returned %d part(s) in %.1fs",
            self.config.model_name,
            len(parts),
            time.perf_counter() - started,
        )
        return parts
