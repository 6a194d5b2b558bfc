"""One-off script for debugging logo generation through the UI callbacks."""

import asyncio
from pathlib import Path

from config.settings import load_config
from modules.pipelines.logo_generation import LogoGenerationService
from modules.services.storage_service import StorageService
from modules.ui.callbacks import build_callbacks
from modules.ui.layout import load_style_registry
from modules.utils.logging import setup_logging


async def run() -> None:
    # 1. Real configuration and services
    config = load_config()
    setup_logging(config)
    registry = load_style_registry(config)
    service = LogoGenerationService(config, style_registry=registry)
    callbacks = build_callbacks(
        config,
        service=service,
        storage=StorageService(config.output_dir),
        style_registry=registry,
    )

    # 2. Edit the form the way a user would
    history = callbacks["new_history"]()
    callbacks["on_edit_fields"](history, "Northwind Coffee", "Vintage", "a steaming cup over rolling hills")

    # 3. Generate, then ask for variations of the result
    image, text, download, status, result, _ = await callbacks["on_generate"](history)
    print("Status:", status)
    if result is None:
        print("No image returned; check the status message.")
        return
    print("Text:", text)
    print("Saved:", Path(download).resolve())

    gallery, downloads, status = await callbacks["on_generate_variations"](history, result)
    print("Variations:", status)
    for path in downloads or []:
        print(" -", Path(path).resolve())


if __name__ == "__main__":
    asyncio.run(run())
