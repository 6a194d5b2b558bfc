"""Layout construction smoke tests."""

from __future__ import annotations

import json

from config.settings import AppConfig
from modules.ui.layout import SHORTCUT_SCRIPT, build_app, load_style_registry


def test_style_registry_includes_assets_and_default_style(tmp_path):
    (tmp_path / "styles.json").write_text(json.dumps([{"name": "Neon", "description": "glow"}]), encoding="utf-8")
    config = AppConfig(assets_dir=tmp_path, default_style="Art Deco")

    registry = load_style_registry(config)

    assert registry.names()[:3] == ["Minimalist", "Vintage", "Modern"]
    assert registry.describe("Neon") == "glow"
    assert "Art Deco" in registry.names()


def test_build_app_without_api_key(tmp_path):
    config = AppConfig(assets_dir=tmp_path, output_dir=tmp_path / "out", gemini_api_key=None)

    demo = build_app(config)

    assert demo is not None
    assert "undo-btn" in SHORTCUT_SCRIPT
    assert "redo-btn" in SHORTCUT_SCRIPT
