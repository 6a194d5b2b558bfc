"""Instruction text sent to the image model."""

from __future__ import annotations

from typing import Optional

from modules.pipelines.data_types import GenerationParams
from modules.prompts.style_presets import StylePresetRegistry


def _style_notes(style: str, registry: Optional[StylePresetRegistry]) -> str:
    if registry is None:
        return ""
    description = registry.describe(style).strip()
    if not description:
        return ""
    return f"\nStyle notes for {style}: {description}."


def build_prompt(params: GenerationParams, registry: Optional[StylePresetRegistry] = None) -> str:
    """Return the refine-image or create-from-scratch instruction for ``params``."""
    notes = _style_notes(params.style, registry)
    if params.base_image is not None:
        return (
            "Act as a professional logo designer.\n"
            f'Refine the provided image into a logo for a company named "{params.company_name}".\n'
            f'The desired style is: "{params.style}".\n'
            f'The logo concept is: "{params.prompt}".{notes}\n'
            f'If it makes sense, elegantly integrate the company name "{params.company_name}" into the logo.\n'
            "Make the final logo look professional, polished, and modern. "
            "Output only the final logo image."
        )
    return (
        "Act as a professional logo designer.\n"
        f'Create a logo from scratch for a company named "{params.company_name}".\n'
        f'The desired style is: "{params.style}".\n'
        f'The logo concept is: "{params.prompt}".{notes}\n'
        "The logo must be a simple, modern, memorable icon in a vector style.\n"
        "It must be on a clean, solid, light-colored background suitable for a logo presentation. "
        "Do not use a transparent background. Output only the final logo image."
    )


def build_variation_prompt(params: GenerationParams) -> str:
    """Instruction asking for a related but distinct take on the attached logo."""
    return (
        "Act as a professional logo designer.\n"
        f'Create a variation of the provided logo for the company "{params.company_name}".\n'
        f'The original concept was: "{params.prompt}", in a "{params.style}" style.\n'
        "Keep the overall theme but explore a different composition, color palette, "
        "or iconography so the result is related to the original yet clearly distinct.\n"
        "Keep a clean, solid, light-colored background. Output only the final logo image."
    )
