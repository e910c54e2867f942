from __future__ import annotations
import re
from io import BytesIO
from typing import Dict, Iterable, Optional

from PIL import Image
from pypdf import PdfReader, PdfWriter
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from core.helpers.date_time_helper import epoch_ms_to_local_date_str
from signature.logic.artifact_codec import decode_artifact, is_empty_artifact

from ..models.training_models import Attendance, Company, Instructor, Training

_INDIGO = (79 / 255.0, 70 / 255.0, 229 / 255.0)
_SLATE = (100 / 255.0, 116 / 255.0, 139 / 255.0)
_INK = (17 / 255.0, 24 / 255.0, 39 / 255.0)
_BLUE = (37 / 255.0, 99 / 255.0, 235 / 255.0)

# Signature boxes keep the 2:1 aspect of the capture canvas
_SIG_W = 40 * mm
_SIG_H = 20 * mm


def _safe_filename_part(text: str) -> str:
    return re.sub(r"[\\/:*?\"<>|]+", "_", text).strip() or "documento"


def certificate_filename(attendance: Attendance, training: Training) -> str:
    return f"Constancia-{_safe_filename_part(attendance.employee_name)}-{_safe_filename_part(training.title)}.pdf"


def flyer_filename(training: Training, company: Company) -> str:
    return f"Acceso-{_safe_filename_part(company.name)}-{_safe_filename_part(training.title)}.pdf"


def _draw_signature(c: canvas.Canvas, artifact: str, x: float, y: float) -> bool:
    """
    Draw a signature artifact into its fixed box; returns False if there is
    nothing to draw. An undecodable artifact leaves the box blank.
    """
    if is_empty_artifact(artifact):
        return False
    try:
        img = decode_artifact(artifact)
    except ValueError:
        return False
    c.drawImage(ImageReader(img), x, y, width=_SIG_W, height=_SIG_H, mask="auto")
    return True


def render_certificate(attendance: Attendance, training: Training, company: Company,
                       instructor: Optional[Instructor]) -> bytes:
    """
    Attendance certificate (A4) with the employee signature and, when the
    instructor profile has one, the instructor signature.
    """
    buf = BytesIO()
    page_w, page_h = A4
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Constancia de asistencia - {training.title}")

    # Border
    c.setStrokeColorRGB(*_INDIGO)
    c.setLineWidth(1 * mm)
    c.rect(10 * mm, 10 * mm, page_w - 20 * mm, page_h - 20 * mm)

    def centered(text: str, y_from_top_mm: float, size: int, color, bold: bool = False) -> None:
        c.setFillColorRGB(*color)
        c.setFont("Helvetica-Bold" if bold else "Helvetica", size)
        c.drawCentredString(page_w / 2, page_h - y_from_top_mm * mm, text)

    centered("CONSTANCIA DE ASISTENCIA", 40, 30, (30 / 255.0, 41 / 255.0, 59 / 255.0), bold=True)
    centered("CERTIFICAMOS QUE", 60, 14, _SLATE)
    centered(attendance.employee_name.upper(), 75, 24, _INK, bold=True)
    centered(f"DNI: {attendance.employee_dni}", 85, 14, _SLATE)

    c.setStrokeColorRGB(*_SLATE)
    c.line(40 * mm, page_h - 95 * mm, page_w - 40 * mm, page_h - 95 * mm)

    centered("Ha participado y completado satisfactoriamente la capacitación:", 110, 14, _SLATE)
    centered(training.title, 125, 18, _INDIGO, bold=True)
    centered(f"Para la empresa: {company.name}", 140, 14, _SLATE)
    centered(f"Fecha: {epoch_ms_to_local_date_str(attendance.timestamp)}", 155, 14, _SLATE)

    footer_y = 60 * mm  # baseline of the signature captions
    c.setFillColorRGB(*_INK)
    c.setFont("Helvetica", 10)

    # Employee (left)
    _draw_signature(c, attendance.employee_signature, 40 * mm, footer_y + 10 * mm)
    c.line(30 * mm, footer_y + 5 * mm, 90 * mm, footer_y + 5 * mm)
    c.drawCentredString(60 * mm, footer_y, "Firma del Empleado")

    # Instructor (right)
    if instructor is not None:
        _draw_signature(c, instructor.signature, page_w - 80 * mm, footer_y + 10 * mm)
    c.line(page_w - 90 * mm, footer_y + 5 * mm, page_w - 30 * mm, footer_y + 5 * mm)
    c.drawCentredString(page_w - 60 * mm, footer_y,
                        (instructor.name if instructor and instructor.name else "Instructor Responsable"))
    c.drawCentredString(page_w - 60 * mm, footer_y - 5 * mm,
                        (instructor.role if instructor and instructor.role else "Firma Responsable"))

    c.showPage()
    c.save()
    return buf.getvalue()


def render_access_flyer(training: Training, company: Company, link: str, qr_image: Image.Image) -> bytes:
    """A4 flyer with company, training title, QR code and the plain link."""
    buf = BytesIO()
    page_w, page_h = A4
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Acceso - {training.title}")

    # Header band
    c.setFillColorRGB(*_BLUE)
    c.rect(0, page_h - 45 * mm, page_w, 45 * mm, stroke=0, fill=1)
    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 28)
    c.drawCentredString(page_w / 2, page_h - 28 * mm, "ACCESO A CAPACITACIÓN")

    c.setFillColorRGB(30 / 255.0, 41 / 255.0, 59 / 255.0)
    c.setFont("Helvetica-Bold", 22)
    c.drawCentredString(page_w / 2, page_h - 65 * mm, company.name.upper())
    c.setFont("Helvetica-Bold", 24)
    c.drawCentredString(page_w / 2, page_h - 80 * mm, training.title)

    qr_size = 120 * mm
    c.drawImage(ImageReader(qr_image), (page_w - qr_size) / 2, page_h - 100 * mm - qr_size,
                width=qr_size, height=qr_size)

    c.setFillColorRGB(*_SLATE)
    c.setFont("Helvetica", 14)
    c.drawCentredString(page_w / 2, page_h - 240 * mm,
                        "Escanee el código QR para registrar su asistencia y ver el material.")
    c.setFont("Helvetica", 9)
    c.drawCentredString(page_w / 2, page_h - 250 * mm, link)

    c.showPage()
    c.save()
    return buf.getvalue()


def render_attendance_register(attendances: Iterable[Attendance], companies: Iterable[Company]) -> bytes:
    """Numbered attendance list; continues on new pages as needed."""
    names: Dict[str, str] = {co.id: co.name for co in companies}
    buf = BytesIO()
    page_w, page_h = A4
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle("Asistencias TrainerPro")

    c.setFont("Helvetica-Bold", 16)
    c.drawString(20 * mm, page_h - 20 * mm, "Asistencias TrainerPro")
    y = page_h - 30 * mm
    c.setFont("Helvetica", 11)
    for i, att in enumerate(attendances, start=1):
        if y < 20 * mm:
            c.showPage()
            c.setFont("Helvetica", 11)
            y = page_h - 20 * mm
        company = names.get(att.company_id, "-")
        c.drawString(20 * mm, y, f"{i}. {att.employee_name} - DNI: {att.employee_dni} - {company}")
        y -= 10 * mm

    c.showPage()
    c.save()
    return buf.getvalue()


def merge_pdfs(documents: Iterable[bytes]) -> bytes:
    """Concatenate PDF documents (e.g. several certificates) into one."""
    writer = PdfWriter()
    for doc in documents:
        for page in PdfReader(BytesIO(doc)).pages:
            writer.add_page(page)
    out = BytesIO()
    writer.write(out)
    return out.getvalue()
