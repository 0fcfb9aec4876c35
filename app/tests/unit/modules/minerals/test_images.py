"""Tests for modules.minerals.images."""

import pytest

from modules.minerals.errors import ValidationError
from modules.minerals.images import (
    content_type_for_extension,
    detect_image_extension,
    to_data_url,
)


class TestDetectImageExtension:
    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("rock.png", "png"),
            ("rock.JPG", "jpg"),
            ("rock.jpeg", "jpg"),
            ("rock.webp", "webp"),
            ("a.b.gif", "gif"),
        ],
    )
    def test_from_filename(self, filename, expected):
        assert detect_image_extension(filename, None) == expected

    @pytest.mark.parametrize(
        "content_type,expected",
        [
            ("image/png", "png"),
            ("image/jpeg", "jpg"),
            ("image/webp", "webp"),
            ("image/gif; charset=binary", "gif"),
        ],
    )
    def test_from_content_type(self, content_type, expected):
        assert detect_image_extension("upload", content_type) == expected

    def test_filename_wins(self):
        assert detect_image_extension("rock.gif", "image/png") == "gif"

    @pytest.mark.parametrize(
        "filename,content_type",
        [("rock.bmp", "image/bmp"), (None, None), ("rock.tiff", None)],
    )
    def test_unsupported(self, filename, content_type):
        with pytest.raises(ValidationError):
            detect_image_extension(filename, content_type)


def test_content_type_for_extension():
    assert content_type_for_extension("jpg") == "image/jpeg"
    assert content_type_for_extension("webp") == "image/webp"


def test_to_data_url():
    assert to_data_url(b"abc", "png") == "data:image/png;base64,YWJj"
