"""Rendu PDF d'un relevé de contrôle."""
from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from reportlab.pdfgen import canvas

from walkaround_checks.core.config import settings
from walkaround_checks.core.models import Record
from walkaround_checks.core.report_config import ReportConfig, ReportFormatConfig
from walkaround_checks.services.pdf.layout import ReportLayout, build_report_layout
from walkaround_checks.services.pdf.theme import resolve_report_theme

logger = logging.getLogger(__name__)

FILENAME_DATE_FORMAT = "%d-%m-%Y"
_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.-]+")


@dataclass(frozen=True)
class ExportedReport:
    filename: str
    content: bytes
    media_type: str = "application/pdf"


def default_report_config() -> ReportConfig:
    return ReportConfig(format=ReportFormatConfig(size=settings.PDF_PAGE_SIZE))


def sanitize_driver_name(name: str) -> str:
    cleaned = _UNSAFE_FILENAME_CHARS.sub("", name.strip().replace(" ", "_"))
    return cleaned or "driver"


def report_filename(record: Record) -> str:
    date_label = record.date.strftime(FILENAME_DATE_FORMAT)
    return f"{sanitize_driver_name(record.driver_name)}_{date_label}_Checklist.pdf"


def _paint_layout(pdf: canvas.Canvas, layout: ReportLayout, config: ReportConfig) -> None:
    theme = resolve_report_theme(config.theme)
    for page in layout.pages:
        for line in page.lines:
            font_name, font_size, color = theme.style_for(line.kind)
            pdf.setFont(font_name, font_size)
            pdf.setFillColor(color)
            baseline = layout.page_height - line.y - font_size
            if line.align == "right":
                pdf.drawRightString(line.x, baseline, line.text)
            elif "\n" in line.text:
                text = pdf.beginText(line.x, baseline)
                text.setFont(font_name, font_size, leading=font_size * 1.25)
                text.textLines(line.text)
                pdf.drawText(text)
            else:
                pdf.drawString(line.x, baseline, line.text)
        pdf.showPage()


def render_record_pdf(record: Record, config: ReportConfig | None = None) -> bytes:
    config = config or default_report_config()
    layout = build_report_layout(record, config)
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(layout.page_width, layout.page_height))
    pdf.setTitle(config.title)
    pdf.setAuthor(config.creator)
    pdf.setCreator(config.creator)
    pdf.setSubject(f"{record.driver_name} / {record.truck_number}")
    _paint_layout(pdf, layout, config)
    pdf.save()
    return buffer.getvalue()


def export_record(record: Record, config: ReportConfig | None = None) -> ExportedReport:
    content = render_record_pdf(record, config)
    report = ExportedReport(filename=report_filename(record), content=content)
    logger.debug("PDF généré pour %s : %d octets", record.id, len(content))
    return report


def write_report(report: ExportedReport, directory: Path | None = None) -> Path | None:
    """Write ``report`` into ``directory``; failures are logged and yield ``None``."""

    target_dir = directory or settings.EXPORT_DIR
    target = target_dir / report.filename
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(report.content)
    except OSError:
        logger.exception("Impossible d'écrire le PDF %s", target)
        return None
    logger.info("PDF exporté vers %s", target)
    return target
