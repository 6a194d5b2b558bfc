"""Utility helpers for reading uploads and displaying generated images."""

from __future__ import annotations

import asyncio
import base64
import io
import mimetypes
from pathlib import Path
from typing import Union

from PIL import Image

from modules.pipelines.data_types import ImageHandle
from modules.pipelines.response_parser import parse_data_url
from modules.utils.errors import PayloadEncodingError

PathLike = Union[str, Path]


def _read_base64(path: Path) -> str:
    return base64.b64encode(path.read_bytes()).decode("ascii")


async def encode_file(path: PathLike) -> str:
    """Read a file off the event loop and return its base64 payload."""
    target = Path(path)
    try:
        return await asyncio.to_thread(_read_base64, target)
    except OSError as exc:
        raise PayloadEncodingError(target, exc.strerror or str(exc)) from exc


def image_handle_from_path(path: PathLike) -> ImageHandle:
    """Describe an uploaded file by the metadata used for identity checks."""
    target = Path(path)
    stat = target.stat()
    mime_type, _ = mimetypes.guess_type(target.name)
    return ImageHandle(
        path=target,
        name=target.name,
        size=stat.st_size,
        last_modified=stat.st_mtime,
        mime_type=mime_type or "application/octet-stream",
    )


def decode_image(data_url: str) -> Image.Image:
    """Open a data URL as a Pillow image for the Gradio image component."""
    _, raw = parse_data_url(data_url)
    image = Image.open(io.BytesIO(raw))
    image.load()
    return image
