"""LogoGenerationService tests with a scripted backend."""

from __future__ import annotations

import asyncio
import base64
from types import SimpleNamespace
from typing import List, Optional

import pytest

from config.settings import AppConfig
from modules.pipelines import gemini_backend
from modules.pipelines.data_types import (
    BackendRequest,
    BaseImage,
    GenerationParams,
    GenerationResult,
    ResponsePart,
)
from modules.pipelines.logo_generation import LogoGenerationService
from modules.utils.errors import MalformedDataUrlError, MissingApiKeyError, NoImageError

PNG_BYTES = b"\x89PNG\r\n\x1a\nlogo"
ORIGINAL = GenerationResult(
    image_url="data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii"),
    text="original",
)


class ScriptedBackend:
    """Replays scripted responses, one per submit call."""

    def __init__(self, responses: Optional[list] = None) -> None:
        self.responses = list(responses or [])
        self.requests: List[BackendRequest] = []

    async def submit(self, request: BackendRequest) -> List[ResponsePart]:
        self.requests.append(request)
        index = len(self.requests) - 1
        await asyncio.sleep(0)
        outcome = self.responses[index] if index < len(self.responses) else self.responses[-1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def image_parts(label: str) -> List[ResponsePart]:
    return [ResponsePart(mime_type="image/png", data=label.encode()), ResponsePart(text=label)]


def build_service(backend: ScriptedBackend, **config_kwargs) -> LogoGenerationService:
    return LogoGenerationService(AppConfig(**config_kwargs), backend=backend)


def test_generate_from_scratch():
    backend = ScriptedBackend([image_parts("one")])
    service = build_service(backend)

    result = asyncio.run(service.generate(GenerationParams("lion", "Synergize", "Modern")))

    assert result.text == "one"
    assert result.image_url == "data:image/png;base64," + base64.b64encode(b"one").decode("ascii")
    request = backend.requests[0]
    assert request.image is None
    assert "from scratch" in request.instruction
    assert request.modalities == ("IMAGE", "TEXT")


def test_generate_attaches_base_image():
    backend = ScriptedBackend([image_parts("refined")])
    service = build_service(backend)
    base = BaseImage(mime_type="image/jpeg", data="AAAA")

    asyncio.run(service.generate(GenerationParams("lion", "Synergize", "Modern", base_image=base)))

    request = backend.requests[0]
    assert request.image == base
    assert "Refine the provided image" in request.instruction


def test_generate_propagates_backend_error_unchanged():
    error = ConnectionError("network down")
    service = build_service(ScriptedBackend([error]))

    with pytest.raises(ConnectionError) as excinfo:
        asyncio.run(service.generate(GenerationParams("lion", "Synergize", "Modern")))

    assert excinfo.value is error


def test_generate_without_image_part_fails():
    service = build_service(ScriptedBackend([[ResponsePart(text="sorry")]]))

    with pytest.raises(NoImageError):
        asyncio.run(service.generate(GenerationParams("lion", "Synergize", "Modern")))


def test_generate_variations_fans_out_identical_requests():
    backend = ScriptedBackend([image_parts("v1"), image_parts("v2"), image_parts("v3")])
    service = build_service(backend)

    results = asyncio.run(
        service.generate_variations(GenerationParams("lion", "Synergize", "Modern"), ORIGINAL, count=3)
    )

    assert [result.text for result in results] == ["v1", "v2", "v3"]
    assert len(backend.requests) == 3
    assert len({id(request) for request in backend.requests}) == 1
    request = backend.requests[0]
    assert request.image == BaseImage(mime_type="image/png", data=ORIGINAL.image_url.split(",", 1)[1])
    assert "variation" in request.instruction


def test_generate_variations_uses_configured_count():
    backend = ScriptedBackend([image_parts("v")])
    service = build_service(backend, variation_count=2)

    results = asyncio.run(service.generate_variations(GenerationParams("a", "b", "c"), ORIGINAL))

    assert len(results) == 2


def test_generate_variations_fails_if_any_call_fails():
    backend = ScriptedBackend([image_parts("v1"), RuntimeError("quota exceeded"), image_parts("v3")])
    service = build_service(backend)

    with pytest.raises(RuntimeError, match="quota exceeded"):
        asyncio.run(
            service.generate_variations(GenerationParams("lion", "Synergize", "Modern"), ORIGINAL, count=3)
        )


def test_generate_variations_rejects_malformed_original():
    backend = ScriptedBackend([image_parts("v1")])
    service = build_service(backend)
    broken = GenerationResult(image_url="https://example.com/logo.png", text="")

    with pytest.raises(MalformedDataUrlError):
        asyncio.run(service.generate_variations(GenerationParams("a", "b", "c"), broken))

    assert backend.requests == []


def test_generate_variations_rejects_non_positive_count():
    service = build_service(ScriptedBackend([image_parts("v")]))

    with pytest.raises(ValueError):
        asyncio.run(service.generate_variations(GenerationParams("a", "b", "c"), ORIGINAL, count=0))


def test_gemini_backend_requires_api_key():
    backend = gemini_backend.GeminiImageBackend(AppConfig(gemini_api_key=None))

    with pytest.raises(MissingApiKeyError):
        asyncio.run(backend.submit(BackendRequest(instruction="hi")))


def test_gemini_backend_builds_sdk_request():
    captured = {}

    async def fake_generate_content(**kwargs):
        captured.update(kwargs)
        inline = SimpleNamespace(mime_type="image/png", data=b"img")
        return SimpleNamespace(
            candidates=[
                SimpleNamespace(
                    content=SimpleNamespace(
                        parts=[SimpleNamespace(text=None, inline_data=inline)]
                    )
                )
            ]
        )

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=fake_generate_content)))
    config = AppConfig(model_name="test-image-model")
    backend = gemini_backend.GeminiImageBackend(config, client=client)
    request = BackendRequest(instruction="draw", image=BaseImage(mime_type="image/png", data="AAAA"))

    parts = asyncio.run(backend.submit(request))

    assert parts == [ResponsePart(mime_type="image/png", data=b"img")]
    assert captured["model"] == "test-image-model"
    contents = captured["contents"]
    assert len(contents) == 2
    assert contents[0].inline_data.mime_type == "image/png"
    assert contents[0].inline_data.data == b"\x00\x00\x00"
    assert contents[1].text == "draw"
    assert list(captured["config"].response_modalities) == ["IMAGE", "TEXT"]


@pytest.mark.integration
def test_gemini_backend_real_call():
    """Run a real generation when a key is configured."""
    from config.settings import load_config

    config = load_config()
    if not config.gemini_api_key:
        pytest.skip("GEMINI_API_KEY not set, skipping live call.")

    service = LogoGenerationService(config)
    result = asyncio.run(service.generate(GenerationParams("a paper plane", "Skyward", "Minimalist")))

    assert result.image_url.startswith("data:image/")
