"""Decode multipart service responses into a single logo result."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Any, Iterable, List, Tuple

from modules.pipelines.data_types import GenerationResult, ResponsePart
from modules.utils.errors import MalformedDataUrlError, NoImageError

DEFAULT_TEXT = "No descriptive text was generated."

_DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[^;,]+);base64,(?P<payload>.*)$", re.DOTALL)


def build_data_url(mime_type: str, payload: str) -> str:
    """Return ``data:<mime>;base64,<payload>``."""
    return f"data:{mime_type};base64,{payload}"


def split_data_url(url: str) -> Tuple[str, str]:
    """Split a data URL into its mime type and base64 payload string."""
    match = _DATA_URL_PATTERN.match(url or "")
    if match is None or not match.group("payload"):
        raise MalformedDataUrlError(url or "")
    return match.group("mime"), match.group("payload")


def parse_data_url(url: str) -> Tuple[str, bytes]:
    """Decode a data URL back into its mime type and raw bytes."""
    mime_type, payload = split_data_url(url)
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedDataUrlError(url) from exc
    return mime_type, raw


def parse_result(parts: Iterable[ResponsePart]) -> GenerationResult:
    """Pick the last image part and the last text part of a response.

    Raises NoImageError when none of the parts carries inline data.
    """
    image_url = ""
    text = DEFAULT_TEXT
    for part in parts:
        if part.has_inline_data:
            payload = base64.b64encode(part.data or b"").decode("ascii")
            image_url = build_data_url(part.mime_type or "image/png", payload)
        elif part.text:
            text = part.text

    if not image_url:
        raise NoImageError()
    return GenerationResult(image_url=image_url, text=text)


def parts_from_response(response: Any) -> List[ResponsePart]:
    """Flatten the first candidate of a google-genai response into ResponseParts."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    raw_parts = getattr(content, "parts", None) or []

    parts: List[ResponsePart] = []
    for raw in raw_parts:
        inline = getattr(raw, "inline_data", None)
        if inline is not None and getattr(inline, "data", None) is not None:
            parts.append(ResponsePart(mime_type=inline.mime_type, data=inline.data))
        elif getattr(raw, "text", None):
            parts.append(ResponsePart(text=raw.text))
    return parts
