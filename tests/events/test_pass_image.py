from __future__ import annotations

import pytest

from clubhive.core.exceptions import ValidationError
from clubhive.events.pass_image import render_pass_png


def test_render_pass_png_returns_png_bytes():
    png = render_pass_png("CLUBHIVE-0123456789abcdef0123456789abcdef")

    assert png.startswith(b"\x89PNG\r\n\x1a\n")


def test_render_pass_png_requires_token():
    with pytest.raises(ValidationError):
        render_pass_png("  ")
