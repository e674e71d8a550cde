"""Page plan of the inspection report.

The plan places every text line on a page before anything is drawn. ``y`` is
measured from the top edge of the page, like the running cursor that drives
pagination.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from reportlab.lib.pagesizes import A4, letter, portrait

from walkaround_checks.core.catalog import CHECKLIST_CATALOG, ChecklistCategory, group_completed_items
from walkaround_checks.core.models import Record
from walkaround_checks.core.report_config import ReportConfig, ReportFormatConfig

PDF_DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class ReportLine:
    kind: str
    text: str
    x: float
    y: float
    align: str = "left"


@dataclass
class ReportPage:
    number: int
    lines: list[ReportLine] = field(default_factory=list)

    def texts(self, kind: str) -> list[str]:
        return [line.text for line in self.lines if line.kind == kind]


@dataclass
class ReportLayout:
    page_width: float
    page_height: float
    pages: list[ReportPage] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def texts(self, kind: str) -> list[str]:
        return [text for page in self.pages for text in page.texts(kind)]


def page_size_for_format(format_config: ReportFormatConfig) -> tuple[float, float]:
    size_map = {"letter": letter, "a4": A4}
    return portrait(size_map.get(format_config.size, letter))


def build_report_layout(
    record: Record,
    config: ReportConfig | None = None,
    catalog: Iterable[ChecklistCategory] = CHECKLIST_CATALOG,
) -> ReportLayout:
    config = config or ReportConfig()
    fmt = config.format
    width, height = page_size_for_format(fmt)
    printable_bottom = height - fmt.footer_reserve
    layout = ReportLayout(page_width=width, page_height=height, pages=[ReportPage(number=1)])
    y = fmt.padding

    def draw(kind: str, text: str, x: float = fmt.padding) -> None:
        layout.pages[-1].lines.append(ReportLine(kind=kind, text=text, x=x, y=y))

    def draw_footer() -> None:
        page = layout.pages[-1]
        footer_y = height - fmt.footer_offset
        page.lines.append(ReportLine(kind="footer", text=config.footer_text, x=fmt.padding, y=footer_y))
        page.lines.append(
            ReportLine(
                kind="footer_page",
                text=f"Page {page.number}",
                x=width - fmt.padding,
                y=footer_y,
                align="right",
            )
        )

    def ensure_space(needed: float) -> None:
        nonlocal y
        if y + needed > printable_bottom:
            draw_footer()
            layout.pages.append(ReportPage(number=len(layout.pages) + 1))
            y = fmt.padding

    draw("title", config.title)
    y += fmt.title_gap
    draw("field", f"Date: {record.date.strftime(PDF_DATE_FORMAT)}")
    y += fmt.line_height
    draw("field", f"Driver: {record.driver_name}")
    y += fmt.line_height
    draw("field", f"Truck: {record.truck_number}")
    y += fmt.header_gap
    draw("items_heading", config.items_heading)
    y += fmt.line_height

    for category_name, items in group_completed_items(record.completed_items, catalog):
        ensure_space(fmt.line_height)
        draw("category", category_name)
        y += fmt.line_height
        for item in items:
            ensure_space(fmt.line_height)
            draw("item", item, x=fmt.padding + fmt.item_indent)
            y += fmt.line_height

    if record.comments:
        ensure_space(2 * fmt.line_height)
        y += fmt.line_height
        draw("comments_heading", config.comments_heading)
        y += fmt.line_height
        # Single block: a long comment is not split across pages.
        draw("comments", record.comments)

    draw_footer()
    return layout
