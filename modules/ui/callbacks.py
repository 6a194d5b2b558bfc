"""Callback implementations for the Gradio interface."""

from __future__ import annotations

import logging
from typing import Any, Optional

import gradio as gr

from config.settings import AppConfig
from modules.pipelines.data_types import BaseImage, GenerationParams, GenerationResult
from modules.pipelines.logo_generation import LogoGenerationService
from modules.prompts.style_presets import StylePresetRegistry
from modules.services.history_service import FormParams, HistoryState, HistoryStore
from modules.services.storage_service import StorageService
from modules.utils.errors import MalformedDataUrlError
from modules.utils.image_utils import decode_image, encode_file, image_handle_from_path

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please enter both a company name and a logo concept."


def default_state(config: AppConfig) -> HistoryState:
    """Form state the history starts from."""
    return HistoryState(
        params=FormParams(
            prompt=config.default_prompt,
            company_name=config.default_company_name,
            style=config.default_style,
        )
    )


def build_callbacks(
    config: AppConfig,
    service: Optional[LogoGenerationService] = None,
    storage: Optional[StorageService] = None,
    style_registry: Optional[StylePresetRegistry] = None,
) -> dict[str, Any]:
    """Return a dictionary of Gradio callback functions."""

    registry = style_registry or StylePresetRegistry.with_defaults()
    storage = storage or StorageService(config.output_dir)

    def _ensure_service() -> LogoGenerationService:
        if service is None:
            raise RuntimeError("Logo generation service is not configured.")
        return service

    def _controls(history: HistoryStore) -> tuple[dict, dict, dict]:
        return (
            gr.update(interactive=history.can_undo()),
            gr.update(interactive=history.can_redo()),
            gr.update(interactive=_ready(history.current_state())),
        )

    def _form_values(history: HistoryStore) -> tuple:
        state = history.current_state()
        image_path = str(state.base_image.path) if state.base_image else None
        return (
            state.params.company_name,
            state.params.style,
            state.params.prompt,
            image_path,
        )

    def _params_for(state: HistoryState, base_image: Optional[BaseImage] = None) -> GenerationParams:
        return GenerationParams(
            prompt=state.params.prompt,
            company_name=state.params.company_name,
            style=state.params.style,
            base_image=base_image,
        )

    def _ready(state: HistoryState) -> bool:
        return _params_for(state).is_complete()

    def new_history() -> HistoryStore:
        return HistoryStore(default_state(config))

    def on_edit_fields(
        history: HistoryStore,
        company_name: str,
        style: str,
        prompt: str,
    ) -> tuple:
        if style and style not in registry.names():
            logger.warning("Unknown style %r selected", style)
        history.commit(
            lambda prev: prev.with_params(
                company_name=company_name or "",
                style=style or prev.params.style,
                prompt=prompt or "",
            )
        )
        return (history, *_controls(history))

    def on_change_image(history: HistoryStore, image_path: Optional[str]) -> tuple:
        handle = image_handle_from_path(image_path) if image_path else None
        history.commit(lambda prev: prev.with_image(handle))
        return (history, *_controls(history))

    def on_undo(history: HistoryStore) -> tuple:
        history.undo()
        return (history, *_form_values(history), *_controls(history))

    def on_redo(history: HistoryStore) -> tuple:
        history.redo()
        return (history, *_form_values(history), *_controls(history))

    async def on_generate(history: HistoryStore) -> tuple:
        state = history.current_state()
        if not _ready(state):
            return None, "", None, MISSING_FIELDS_MESSAGE, None, gr.update(interactive=False)

        try:
            generator = _ensure_service()
            base_image = None
            if state.base_image is not None:
                data = await encode_file(state.base_image.path)
                base_image = BaseImage(mime_type=state.base_image.mime_type, data=data)
            result = await generator.generate(_params_for(state, base_image))
            download = storage.save_result(result)
            image = decode_image(result.image_url)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Logo generation failed")
            message = str(exc) or "An unknown error occurred."
            return None, "", None, f"Generation failed: {message}", None, gr.update(interactive=False)

        return (
            image,
            result.text,
            str(download),
            "Logo generated.",
            result,
            gr.update(interactive=True),
        )

    async def on_generate_variations(
        history: HistoryStore,
        original: Optional[GenerationResult],
    ) -> tuple:
        if original is None:
            return [], None, "Generate a logo first, then ask for variations."

        state = history.current_state()
        try:
            generator = _ensure_service()
            results = await generator.generate_variations(_params_for(state), original)
            gallery = []
            downloads = []
            for index, result in enumerate(results, start=1):
                gallery.append((decode_image(result.image_url), result.text))
                downloads.append(str(storage.save_result(result, variation_index=index)))
        except MalformedDataUrlError as exc:
            logger.exception("Original logo could not be decoded")
            return [], None, f"Could not read the original logo for variations: {exc}"
        except Exception as exc:  # noqa: BLE001
            logger.exception("Variation generation failed")
            message = str(exc) or "An unknown error occurred."
            return [], None, f"Variation generation failed: {message}"

        return gallery, downloads, f"Generated {len(gallery)} variation(s)."

    return {
        "new_history": new_history,
        "on_edit_fields": on_edit_fields,
        "on_change_image": on_change_image,
        "on_undo": on_undo,
        "on_redo": on_redo,
        "on_generate": on_generate,
        "on_generate_variations": on_generate_variations,
    }
