"""PDF rendering of result cards with reportlab."""

import io
from dataclasses import dataclass

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from gpa_tracker.domain.results import ResultCard, ResultCardDraft

PAGE_W, PAGE_H = A4
MARGIN = 20 * mm
ROW_H = 8 * mm
FOOTER_TEXT = "computer generated result error and omission if any are accepted"
TABLE_HEADERS = ("Subject Name", "Credit Hours", "GPA")


@dataclass
class ReportlabResultCardRenderer:
    """Renders a one-page A4 result card; long subject lists continue overleaf."""

    title_font: str = "Helvetica-Bold"
    body_font: str = "Helvetica"

    def render(self, card: ResultCard | ResultCardDraft) -> bytes:
        """Return the result card as PDF bytes."""
        buf = io.BytesIO()
        c = canvas.Canvas(buf, pagesize=A4)
        c.setTitle(f"Result card - {card.student_name or card.university_name}")
        y = self._draw_header(c, card)
        self._draw_table(c, card, y)
        self._draw_footer(c)
        c.showPage()
        c.save()
        return buf.getvalue()

    def _draw_header(
        self, c: canvas.Canvas, card: ResultCard | ResultCardDraft
    ) -> float:
        c.setFont(self.title_font, 20)
        c.drawCentredString(PAGE_W / 2, PAGE_H - 30 * mm, card.university_name)
        c.setFont(self.body_font, 14)
        y = PAGE_H - 50 * mm
        lines = [
            f"Student Name: {card.student_name}",
            f"Department: {card.department_name}",
            f"Semester: {card.semester}",
            f"CGPA: {card.cgpa:.2f}",
        ]
        for line in lines:
            c.drawString(MARGIN, y, line)
            y -= 10 * mm
        return y

    def _draw_table(
        self, c: canvas.Canvas, card: ResultCard | ResultCardDraft, top: float
    ) -> None:
        col_x = (MARGIN, MARGIN + 100 * mm, MARGIN + 140 * mm)
        y = self._draw_table_header(c, col_x, top)
        c.setFont(self.body_font, 11)
        for subject in card.subjects:
            if y < MARGIN + 2 * ROW_H:
                self._draw_footer(c)
                c.showPage()
                y = self._draw_table_header(c, col_x, PAGE_H - MARGIN)
                c.setFont(self.body_font, 11)
            c.drawString(col_x[0] + 2 * mm, y + 2.5 * mm, subject.name)
            c.drawString(col_x[1] + 2 * mm, y + 2.5 * mm, f"{subject.credit_hours:g}")
            c.drawString(col_x[2] + 2 * mm, y + 2.5 * mm, f"{subject.score:g}")
            c.line(MARGIN, y, PAGE_W - MARGIN, y)
            y -= ROW_H

    def _draw_table_header(
        self, c: canvas.Canvas, col_x: tuple[float, float, float], top: float
    ) -> float:
        y = top - ROW_H
        c.setFillGray(0.85)
        c.rect(MARGIN, y, PAGE_W - 2 * MARGIN, ROW_H, stroke=0, fill=1)
        c.setFillGray(0)
        c.setFont(self.title_font, 11)
        for x, header in zip(col_x, TABLE_HEADERS, strict=True):
            c.drawString(x + 2 * mm, y + 2.5 * mm, header)
        return y - ROW_H

    def _draw_footer(self, c: canvas.Canvas) -> None:
        c.setFont(self.body_font, 10)
        c.drawCentredString(PAGE_W / 2, 10 * mm, FOOTER_TEXT)
