"""Pydantic models for the inspection report layout and theme."""
from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

_HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_color(value: str) -> tuple[float, float, float, float]:
    """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` into a normalized RGBA tuple."""

    if value is None:
        raise ValueError("Couleur manquante.")
    value = value.strip()
    if not value:
        raise ValueError("Couleur vide.")
    if value.lower() == "transparent":
        return (0.0, 0.0, 0.0, 0.0)
    match = _HEX_COLOR_RE.match(value)
    if not match:
        raise ValueError(f"Format de couleur non supporté : {value}")
    hex_value = match.group(1)
    if len(hex_value) == 3:
        hex_value = "".join(char * 2 for char in hex_value)
    if len(hex_value) == 6:
        hex_value += "ff"
    r, g, b, a = (int(hex_value[index : index + 2], 16) for index in range(0, 8, 2))
    return (r / 255, g / 255, b / 255, a / 255)


class ReportFormatConfig(BaseModel):
    size: Literal["letter", "a4"] = "letter"
    padding: float = Field(default=20, ge=0)
    footer_reserve: float = Field(default=60, ge=0)
    footer_offset: float = Field(default=40, ge=0)
    line_height: float = Field(default=20, gt=0)
    item_indent: float = Field(default=20, ge=0)
    title_gap: float = Field(default=40, gt=0)
    header_gap: float = Field(default=40, gt=0)


class ReportThemeConfig(BaseModel):
    font_family: str = "Helvetica"
    title_font_size: float = 18
    category_font_size: float = 14
    base_font_size: float = 12
    footer_font_size: float = 10
    text_color: str = "#111827"
    muted_text_color: str = "#64748b"
    accent_color: str = "#1d4ed8"

    @field_validator("text_color", "muted_text_color", "accent_color")
    @classmethod
    def _validate_color(cls, value: str) -> str:
        parse_color(value)
        return value


class ReportConfig(BaseModel):
    title: str = "WalkAround Checklist Record"
    items_heading: str = "Completed Checklist Items:"
    comments_heading: str = "Comments:"
    footer_text: str = "Generated by WalkAround-Checks App"
    creator: str = "WalkAround Checks"
    format: ReportFormatConfig = Field(default_factory=ReportFormatConfig)
    theme: ReportThemeConfig = Field(default_factory=ReportThemeConfig)
