"""Inspection report rendering helpers."""

from .layout import ReportLayout, ReportLine, ReportPage, build_report_layout, page_size_for_format
from .theme import ResolvedReportTheme, resolve_report_theme

__all__ = [
    "ReportLayout",
    "ReportLine",
    "ReportPage",
    "ResolvedReportTheme",
    "build_report_layout",
    "page_size_for_format",
    "resolve_report_theme",
]
