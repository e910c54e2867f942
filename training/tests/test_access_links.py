from __future__ import annotations

import unittest

from training.exceptions.errors import ValidationError
from training.logic.access_links import build_access_link, make_qr_image, parse_access_link


class TestAccessLinks(unittest.TestCase):
    def test_build_and_parse(self) -> None:
        link = build_access_link("t-1", "c-2", base_url="https://trainer.example/app/")
        self.assertEqual(link, "https://trainer.example/app/#/training/t-1/c-2")
        self.assertEqual(parse_access_link(link), ("t-1", "c-2"))

    def test_existing_fragment_is_replaced(self) -> None:
        link = build_access_link("a", "b", base_url="http://localhost:8000/#/old")
        self.assertEqual(link, "http://localhost:8000/#/training/a/b")

    def test_parse_tolerates_whitespace_and_trailing_slash(self) -> None:
        self.assertEqual(parse_access_link("  http://x/#/training/a/b/ \n"), ("a", "b"))

    def test_parse_rejects_other_links(self) -> None:
        for bad in ("", "http://x/", "http://x/#/training/a", "http://x/#/company/a/b"):
            with self.assertRaises(ValidationError):
                parse_access_link(bad)

    def test_qr_image(self) -> None:
        img = make_qr_image("http://localhost:8000/#/training/a/b", box_size=4, border=2)
        self.assertEqual(img.mode, "RGB")
        w, h = img.size
        self.assertEqual(w, h)
        self.assertEqual(w % 4, 0)
        # quiet zone is white
        self.assertEqual(img.getpixel((0, 0)), (255, 255, 255))


if __name__ == "__main__":
    unittest.main()
