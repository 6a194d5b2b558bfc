"""Gradio layout for the logo form, result panel and variations."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

try:
    import gradio as gr
except ImportError:  # pragma: no cover
    gr = None  # type: ignore

from config.settings import AppConfig
from modules.pipelines.gemini_backend import ImageBackend
from modules.pipelines.logo_generation import LogoGenerationService
from modules.prompts.style_presets import StylePreset, StylePresetRegistry
from modules.services.storage_service import StorageService
from modules.ui.callbacks import build_callbacks

# Ctrl/Cmd+Z undoes, Ctrl/Cmd+Shift+Z and Ctrl/Cmd+Y redo.
SHORTCUT_SCRIPT = """
<script>
document.addEventListener("keydown", (event) => {
  if (!(event.ctrlKey || event.metaKey)) return;
  const key = event.key.toLowerCase();
  let target = null;
  if (key === "z" && !event.shiftKey) target = "undo-btn";
  else if ((key === "z" && event.shiftKey) || key === "y") target = "redo-btn";
  if (!target) return;
  const button = document.getElementById(target);
  if (!button) return;
  event.preventDefault();
  if (!button.disabled) button.click();
});
</script>
"""


def load_style_registry(config: AppConfig) -> StylePresetRegistry:
    registry = StylePresetRegistry.with_defaults()
    registry.load_from_file(Path(config.assets_dir) / "styles.json")
    if config.default_style not in registry.names():
        registry.add(StylePreset(name=config.default_style))
    return registry


def build_app(config: AppConfig, backend: Optional[ImageBackend] = None) -> Any:
    """Compose and return the Gradio application."""
    if gr is None:
        raise RuntimeError("Gradio is not installed; install the project dependencies first.")

    style_registry = load_style_registry(config)
    service = LogoGenerationService(config, backend=backend, style_registry=style_registry)
    storage = StorageService(config.output_dir)
    callbacks_map = build_callbacks(
        config,
        service=service,
        storage=storage,
        style_registry=style_registry,
    )
    initial = callbacks_map["new_history"]().current_state()

    with gr.Blocks(title="AI Logo Generator", head=SHORTCUT_SCRIPT) as demo:
        gr.Markdown("## AI Logo Generator")
        history = gr.State(value=callbacks_map["new_history"])
        last_result = gr.State(value=None)

        with gr.Row():
            with gr.Column():
                company_name = gr.Textbox(
                    label="1. Company Name",
                    placeholder="e.g., Quantum Leap Inc.",
                    value=initial.params.company_name,
                )
                style_select = gr.Radio(
                    label="2. Choose a Style",
                    choices=style_registry.names(),
                    value=initial.params.style,
                )
                prompt = gr.Textbox(
                    label="3. Describe your logo concept",
                    lines=3,
                    placeholder="e.g., A majestic lion head",
                    value=initial.params.prompt,
                )
                base_image = gr.Image(
                    label="4. Upload a base image (Optional)",
                    type="filepath",
                    sources=["upload"],
                )
                generate_btn = gr.Button("Generate Logo", variant="primary")
                with gr.Row():
                    undo_btn = gr.Button("Undo", elem_id="undo-btn", interactive=False)
                    redo_btn = gr.Button("Redo", elem_id="redo-btn", interactive=False)

            with gr.Column():
                output_image = gr.Image(label="Generated Logo", type="pil", interactive=False)
                description = gr.Textbox(label="Description", interactive=False)
                download = gr.File(label="Download", interactive=False)
                status = gr.Markdown("Fill out the form and click Generate.")
                variations_btn = gr.Button("Generate Variations", interactive=False)

        with gr.Row():
            with gr.Column():
                variations_gallery = gr.Gallery(label="Variations", columns=3)
                variations_files = gr.File(
                    label="Download Variations",
                    file_count="multiple",
                    interactive=False,
                )

        controls = [undo_btn, redo_btn, generate_btn]
        form_fields = [company_name, style_select, prompt]

        for field in form_fields:
            field.input(
                fn=callbacks_map["on_edit_fields"],
                inputs=[history, *form_fields],
                outputs=[history, *controls],
            )

        base_image.upload(
            fn=callbacks_map["on_change_image"],
            inputs=[history, base_image],
            outputs=[history, *controls],
        )
        base_image.clear(
            fn=callbacks_map["on_change_image"],
            inputs=[history, base_image],
            outputs=[history, *controls],
        )

        undo_btn.click(
            fn=callbacks_map["on_undo"],
            inputs=[history],
            outputs=[history, *form_fields, base_image, *controls],
        )
        redo_btn.click(
            fn=callbacks_map["on_redo"],
            inputs=[history],
            outputs=[history, *form_fields, base_image, *controls],
        )

        generate_btn.click(
            fn=callbacks_map["on_generate"],
            inputs=[history],
            outputs=[output_image, description, download, status, last_result, variations_btn],
        )
        variations_btn.click(
            fn=callbacks_map["on_generate_variations"],
            inputs=[history, last_result],
            outputs=[variations_gallery, variations_files, status],
        )

    return demo
