"""ReportLab theme helpers."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics

from walkaround_checks.core.report_config import ReportThemeConfig, parse_color

_BOLD_VARIANTS = {
    "Helvetica": "Helvetica-Bold",
    "Times-Roman": "Times-Bold",
    "Courier": "Courier-Bold",
}


@dataclass(frozen=True)
class ResolvedReportTheme:
    font_family: str
    bold_font_family: str
    title_font_size: float
    category_font_size: float
    base_font_size: float
    footer_font_size: float
    text_color: colors.Color
    muted_text_color: colors.Color
    accent_color: colors.Color

    def style_for(self, kind: str) -> tuple[str, float, colors.Color]:
        if kind in {"title", "items_heading", "comments_heading"}:
            return self.bold_font_family, self.title_font_size, self.text_color
        if kind == "category":
            return self.bold_font_family, self.category_font_size, self.accent_color
        if kind in {"footer", "footer_page"}:
            return self.font_family, self.footer_font_size, self.muted_text_color
        return self.font_family, self.base_font_size, self.text_color


def _available_fonts() -> set[str]:
    return set(pdfmetrics.getRegisteredFontNames()) | set(_BOLD_VARIANTS) | set(_BOLD_VARIANTS.values())


def _resolve_bold(font_family: str) -> str:
    candidate = _BOLD_VARIANTS.get(font_family, f"{font_family}-Bold")
    if candidate in _available_fonts():
        return candidate
    return font_family


def resolve_report_theme(theme: ReportThemeConfig) -> ResolvedReportTheme:
    theme_key = tuple(sorted(theme.model_dump().items()))
    return _resolve_report_theme_cached(theme_key)


@lru_cache(maxsize=16)
def _resolve_report_theme_cached(theme_key: tuple[tuple[str, object], ...]) -> ResolvedReportTheme:
    theme = ReportThemeConfig(**dict(theme_key))
    default_theme = ReportThemeConfig()

    def _safe_color(value: str, fallback: str) -> colors.Color:
        try:
            r, g, b, a = parse_color(value)
        except ValueError:
            r, g, b, a = parse_color(fallback)
        return colors.Color(r, g, b, alpha=a)

    font_family = theme.font_family
    if font_family not in _available_fonts():
        font_family = default_theme.font_family

    return ResolvedReportTheme(
        font_family=font_family,
        bold_font_family=_resolve_bold(font_family),
        title_font_size=theme.title_font_size,
        category_font_size=theme.category_font_size,
        base_font_size=theme.base_font_size,
        footer_font_size=theme.footer_font_size,
        text_color=_safe_color(theme.text_color, default_theme.text_color),
        muted_text_color=_safe_color(theme.muted_text_color, default_theme.muted_text_color),
        accent_color=_safe_color(theme.accent_color, default_theme.accent_color),
    )
