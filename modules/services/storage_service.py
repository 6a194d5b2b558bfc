"""File storage helpers for the download buttons."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from modules.pipelines.data_types import GenerationResult
from modules.pipelines.response_parser import parse_data_url

logger = logging.getLogger(__name__)


class StorageService:
    """Write generated logos to disk under their download names."""

    def __init__(self, output_dir: Path, clock: Callable[[], float] = time.time) -> None:
        self.output_dir = Path(output_dir)
        self._clock = clock

    def _timestamp(self) -> int:
        return int(self._clock() * 1000)

    def download_name(self, variation_index: Optional[int] = None) -> str:
        """``logo-<ms>.png`` or ``logo-variation-<index>-<ms>.png``."""
        stamp = self._timestamp()
        if variation_index is None:
            return f"logo-{stamp}.png"
        return f"logo-variation-{variation_index}-{stamp}.png"

    def save_result(self, result: GenerationResult, variation_index: Optional[int] = None) -> Path:
        """Persist the image bytes of ``result`` and return the file path."""
        _, raw = parse_data_url(result.image_url)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / self.download_name(variation_index)
        path.write_bytes(raw)
        logger.info("Saved %s (%d bytes)", path, len(raw))
        return path
