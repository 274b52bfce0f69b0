"""Client for the Youtu face detection and face identity API."""

from .api import DetectMode, YoutuClient
from .auth import Credential
from .errors import (
    DecodingError,
    EncodingError,
    NetworkError,
    ValidationError,
    YoutuError,
)
from .image import encode_image

__all__ = [
    "Credential",
    "DecodingError",
    "DetectMode",
    "EncodingError",
    "NetworkError",
    "ValidationError",
    "YoutuClient",
    "YoutuError",
    "encode_image",
]
