"""Image helpers for request fields that carry base64 image data."""

from __future__ import annotations

import base64
from pathlib import Path


def encode_image(path: str | Path) -> str:
    """Return the file contents as standard base64 text.

    ``OSError`` from reading the file propagates unchanged.
    """

    data = Path(path).expanduser().read_bytes()
    return base64.b64encode(data).decode("ascii")
