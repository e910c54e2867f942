"""
training/tests/test_pdf_documents.py

Certificates, flyers and registers rendered with reportlab, read back with pypdf.
"""

from __future__ import annotations

import unittest
from io import BytesIO

from PIL import Image, ImageDraw
from pypdf import PdfReader

from signature.logic.artifact_codec import EMPTY_ARTIFACT, encode_image
from training.logic.access_links import make_qr_image
from training.logic.pdf_documents import (
    certificate_filename, flyer_filename, merge_pdfs, render_access_flyer,
    render_attendance_register, render_certificate,
)
from training.models.training_models import Attendance, Company, Instructor, Training, TrainingItem


def _signature() -> str:
    img = Image.new("RGBA", (400, 200), (0, 0, 0, 0))
    ImageDraw.Draw(img).line([(20, 150), (120, 40), (300, 120)], fill=(15, 23, 42, 255), width=3)
    return encode_image(img)


TRAINING = Training(id="t1", title="Trabajo en altura",
                    items=[TrainingItem(id="i1", title="Manual", url="https://docs/1")])
COMPANY = Company(id="c1", name="Acme SA", cuit="30-1")


def _attendance(name: str = "Juan Gómez", signature: str = "") -> Attendance:
    return Attendance(id="a1", employee_name=name, employee_dni="30111222",
                      employee_signature=signature or _signature(),
                      training_id="t1", company_id="c1", timestamp=1_700_000_000_000)


def _reader(data: bytes) -> PdfReader:
    return PdfReader(BytesIO(data))


class TestPdfDocuments(unittest.TestCase):
    def test_certificate_contents(self) -> None:
        instructor = Instructor(name="Ana Pérez", role="Técnica HyS", signature=_signature())
        data = render_certificate(_attendance(), TRAINING, COMPANY, instructor)
        self.assertTrue(data.startswith(b"%PDF"))
        reader = _reader(data)
        self.assertEqual(len(reader.pages), 1)
        text = reader.pages[0].extract_text()
        self.assertIn("CONSTANCIA DE ASISTENCIA", text)
        self.assertIn("JUAN", text)
        self.assertIn("30111222", text)
        self.assertIn("Ana", text)

    def test_certificate_without_instructor(self) -> None:
        data = render_certificate(_attendance(), TRAINING, COMPANY, None)
        text = _reader(data).pages[0].extract_text()
        self.assertIn("Instructor Responsable", text)

    def test_certificate_with_unsigned_instructor(self) -> None:
        instructor = Instructor(name="Ana", role="Técnica", signature=EMPTY_ARTIFACT)
        data = render_certificate(_attendance(), TRAINING, COMPANY, instructor)
        self.assertEqual(len(_reader(data).pages), 1)

    def test_certificate_with_undecodable_signatures(self) -> None:
        instructor = Instructor(name="Ana", role="Técnica", signature="data:image/jpeg;base64,/9j/")
        attendance = _attendance(signature="data:image/png;base64,***")
        data = render_certificate(attendance, TRAINING, COMPANY, instructor)
        reader = _reader(data)
        self.assertEqual(len(reader.pages), 1)
        self.assertIn("Firma del Empleado", reader.pages[0].extract_text())

    def test_merge_keeps_rows_with_undecodable_signature(self) -> None:
        good = render_certificate(_attendance(), TRAINING, COMPANY, None)
        bad = render_certificate(_attendance(signature="not-an-artifact"), TRAINING, COMPANY, None)
        self.assertEqual(len(_reader(merge_pdfs([good, bad])).pages), 2)

    def test_flyer(self) -> None:
        link = "http://localhost:8000/#/training/t1/c1"
        data = render_access_flyer(TRAINING, COMPANY, link, make_qr_image(link))
        text = _reader(data).pages[0].extract_text()
        self.assertIn("ACME SA", text)
        self.assertIn(link, text)

    def test_register_paginates(self) -> None:
        rows = [_attendance(name=f"Empleado {i}", signature="x") for i in range(60)]
        data = render_attendance_register(rows, [COMPANY])
        reader = _reader(data)
        self.assertGreater(len(reader.pages), 1)
        self.assertIn("1. Empleado 0", reader.pages[0].extract_text())

    def test_merge(self) -> None:
        one = render_certificate(_attendance(), TRAINING, COMPANY, None)
        merged = merge_pdfs([one, one, one])
        self.assertEqual(len(_reader(merged).pages), 3)

    def test_filenames(self) -> None:
        self.assertEqual(certificate_filename(_attendance(name="A/B"), TRAINING),
                         "Constancia-A_B-Trabajo en altura.pdf")
        self.assertEqual(flyer_filename(TRAINING, COMPANY), "Acceso-Acme SA-Trabajo en altura.pdf")


if __name__ == "__main__":
    unittest.main()
