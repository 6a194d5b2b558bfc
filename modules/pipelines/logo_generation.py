"""Logo generation service: one-shot generation and concurrent variations."""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import List, Optional

from config.settings import AppConfig
from modules.pipelines.data_types import (
    BackendRequest,
    BaseImage,
    GenerationParams,
    GenerationResult,
)
from modules.pipelines.gemini_backend import GeminiImageBackend, ImageBackend
from modules.pipelines.response_parser import parse_data_url, parse_result
from modules.prompts.builder import build_prompt, build_variation_prompt
from modules.prompts.style_presets import StylePresetRegistry

logger = logging.getLogger(__name__)


class LogoGenerationService:
    """Builds requests, submits them to the image backend and parses the replies."""

    def __init__(
        self,
        config: AppConfig,
        backend: Optional[ImageBackend] = None,
        style_registry: Optional[StylePresetRegistry] = None,
    ) -> None:
        self.config = config
        self.backend: ImageBackend = backend or GeminiImageBackend(config)
        self.style_registry = style_registry

    async def generate(self, params: GenerationParams) -> GenerationResult:
        """Generate one logo. Backend and parse errors propagate unchanged."""
        request = BackendRequest(
            instruction=build_prompt(params, self.style_registry),
            image=params.base_image,
        )
        logger.info(
            "Generating logo for %r (style=%s, base_image=%s)",
            params.company_name,
            params.style,
            params.base_image is not None,
        )
        parts = await self.backend.submit(request)
        return parse_result(parts)

    async def generate_variations(
        self,
        params: GenerationParams,
        original: GenerationResult,
        count: Optional[int] = None,
    ) -> List[GenerationResult]:
        """Request ``count`` variations of ``original`` concurrently.

        All calls must succeed: the first failure is raised and the results
        of calls still in flight are discarded.
        """
        if count is None:
            count = self.config.variation_count
        if count < 1:
            raise ValueError(f"Variation count must be at least 1, got {count}")

        mime_type, raw = parse_data_url(original.image_url)
        request = BackendRequest(
            instruction=build_variation_prompt(params),
            image=BaseImage(mime_type=mime_type, data=base64.b64encode(raw).decode("ascii")),
        )
        logger.info("Requesting %d variation(s) for %r (%d bytes)", count, params.company_name, len(raw))

        async def _one() -> GenerationResult:
            parts = await self.backend.submit(request)
            return parse_result(parts)

        results = await asyncio.gather(*(_one() for _ in range(count)))
        return list(results)
