"""PNG data-URL artifact encoding."""
from __future__ import annotations

import base64
import unittest

from PIL import Image

from signature.logic.artifact_codec import (
    EMPTY_ARTIFACT, PNG_DATA_URL_PREFIX, artifact_to_png_bytes, decode_artifact,
    encode_image, is_empty_artifact,
)


class TestArtifactCodec(unittest.TestCase):
    def test_encode_produces_png_data_url(self) -> None:
        artifact = encode_image(Image.new("RGBA", (4, 2), (0, 0, 0, 0)))
        self.assertTrue(artifact.startswith(PNG_DATA_URL_PREFIX))
        self.assertTrue(artifact_to_png_bytes(artifact).startswith(b"\x89PNG\r\n\x1a\n"))

    def test_decode_keeps_size_and_alpha(self) -> None:
        img = Image.new("RGBA", (8, 4), (0, 0, 0, 0))
        img.putpixel((2, 1), (15, 23, 42, 255))
        decoded = decode_artifact(encode_image(img))
        self.assertEqual(decoded.size, (8, 4))
        self.assertEqual(decoded.getpixel((2, 1)), (15, 23, 42, 255))
        self.assertEqual(decoded.getpixel((0, 0))[3], 0)

    def test_empty_sentinel(self) -> None:
        self.assertTrue(is_empty_artifact(EMPTY_ARTIFACT))
        self.assertTrue(is_empty_artifact(None))
        self.assertFalse(is_empty_artifact(PNG_DATA_URL_PREFIX + "AAAA"))
        with self.assertRaises(ValueError):
            artifact_to_png_bytes(EMPTY_ARTIFACT)

    def test_malformed_values_raise_value_error(self) -> None:
        with self.assertRaises(ValueError):
            decode_artifact("data:image/jpeg;base64,AAAA")
        with self.assertRaises(ValueError):
            decode_artifact(PNG_DATA_URL_PREFIX + "***")
        with self.assertRaises(ValueError):
            decode_artifact(PNG_DATA_URL_PREFIX + base64.b64encode(b"not a png").decode("ascii"))


if __name__ == "__main__":
    unittest.main()
