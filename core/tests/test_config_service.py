"""
core/tests/test_config_service.py

Layered configuration: type casting and the environment overlay.
"""

from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from core.config.config_service import ConfigService, _cast, _env_overlays, config_service


class TestConfigService(unittest.TestCase):
    def tearDown(self) -> None:
        config_service.reload()

    def test_cast_accepts_string_annotations(self) -> None:
        self.assertEqual(_cast("12", "int"), 12)
        self.assertEqual(_cast("12", int), 12)
        self.assertIs(_cast("yes", "bool"), True)
        self.assertIs(_cast("off", bool), False)
        self.assertEqual(_cast("~/x.db", "Path"), Path("~/x.db").expanduser())
        self.assertEqual(_cast(3, "str"), "3")

    def test_env_overlay_parsing(self) -> None:
        env = {
            "TRAINERPRO_SIGNATURE__STROKE_WIDTH": "4",
            "TRAINERPRO_NOSECTION": "ignored",
            "OTHER_SIGNATURE__STROKE_WIDTH": "9",
        }
        with mock.patch.dict(os.environ, env, clear=False):
            overlay = _env_overlays()
        self.assertEqual(overlay.get("Signature"), {"stroke_width": "4"})
        self.assertNotIn("Nosection", overlay)

    def test_environment_wins_after_reload(self) -> None:
        with mock.patch.dict(os.environ, {"TRAINERPRO_ACCESS__BASE_URL": "https://env.example/"}):
            config_service.reload()
            self.assertEqual(config_service.access.base_url, "https://env.example/")
            self.assertEqual(config_service.meta_source("Access", "base_url")["layer"], "env")

    def test_typed_sections(self) -> None:
        svc = ConfigService()
        self.assertIsInstance(svc.signature.canvas_width, int)
        self.assertIsInstance(svc.database.store, Path)
        self.assertEqual(svc.get("Signature", "canvas_height", cast=int), svc.signature.canvas_height)
        self.assertIsNone(svc.get("Signature", "missing"))


if __name__ == "__main__":
    unittest.main()
