from .client import YoutuClient
from .operations import OPERATIONS, Operation
from .schemas import DetectMode, Face

__all__ = ["DetectMode", "Face", "OPERATIONS", "Operation", "YoutuClient"]
