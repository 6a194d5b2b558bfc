"""Logo style preset management."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger(__name__)

DEFAULT_STYLE_NAMES = (
    "Minimalist",
    "Vintage",
    "Modern",
    "Playful",
    "Abstract",
    "Corporate",
    "Geometric",
    "Hand-drawn",
)


@dataclass(slots=True)
class StylePreset:
    """A selectable logo style and optional guidance for the prompt."""

    name: str
    description: str = ""


class StylePresetRegistry:
    """In-memory registry of style presets, in insertion order."""

    def __init__(self) -> None:
        self._presets: Dict[str, StylePreset] = {}

    @classmethod
    def with_defaults(cls) -> "StylePresetRegistry":
        registry = cls()
        for name in DEFAULT_STYLE_NAMES:
            registry.add(StylePreset(name=name))
        return registry

    def load_from_file(self, path: Path) -> None:
        """Load presets from a JSON list of ``{"name", "description"}`` objects."""
        if not path.exists():
            return
        with path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)
        for entry in data:
            self.add(
                StylePreset(
                    name=entry["name"],
                    description=entry.get("description", ""),
                )
            )
        logger.info("Loaded %d style presets from %s", len(data), path)

    def add(self, preset: StylePreset) -> None:
        """Register a preset, replacing any existing one with the same name."""
        self._presets[preset.name] = preset

    def list_presets(self) -> List[StylePreset]:
        return list(self._presets.values())

    def names(self) -> List[str]:
        return list(self._presets.keys())

    def get(self, name: str) -> StylePreset:
        """Retrieve a preset by name."""
        try:
            return self._presets[name]
        except KeyError as exc:
            raise KeyError(f"Style preset '{name}' not found") from exc

    def describe(self, name: str) -> str:
        """Return the preset's guidance text, or an empty string for unknown styles."""
        preset = self._presets.get(name)
        return preset.description if preset else ""
