"""Dataclasses shared by the prompt builder, the parser and the generation service."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_MODALITIES: Tuple[str, ...] = ("IMAGE", "TEXT")


@dataclass(frozen=True, slots=True)
class BaseImage:
    """Reference image attached to a request, payload kept base64-encoded."""

    mime_type: str
    data: str

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


@dataclass(frozen=True, slots=True)
class GenerationParams:
    """Everything needed to build one logo request."""

    prompt: str
    company_name: str
    style: str
    base_image: Optional[BaseImage] = None

    def is_complete(self) -> bool:
        """Return True when the required text fields are filled in."""
        return bool(self.prompt.strip() and self.company_name.strip())


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Decoded service output: one image as data URL plus descriptive text."""

    image_url: str
    text: str


@dataclass(frozen=True, slots=True)
class ImageHandle:
    """Uploaded file kept outside the serializable form parameters."""

    path: Path
    name: str
    size: int
    last_modified: float
    mime_type: str

    def same_file(self, other: Optional["ImageHandle"]) -> bool:
        """Identity check by name, byte size and modification time."""
        if other is None:
            return False
        return (
            self.name == other.name
            and self.size == other.size
            and self.last_modified == other.last_modified
        )


@dataclass(frozen=True, slots=True)
class ResponsePart:
    """One part of a multipart service response: inline bytes or text."""

    mime_type: Optional[str] = None
    data: Optional[bytes] = None
    text: Optional[str] = None

    @property
    def has_inline_data(self) -> bool:
        return self.data is not None


@dataclass(frozen=True, slots=True)
class BackendRequest:
    """Payload submitted to the remote image service."""

    instruction: str
    image: Optional[BaseImage] = None
    modalities: Tuple[str, ...] = field(default=DEFAULT_MODALITIES)
