"""Integration check helpers."""

from .checks import (
    IntegrationCheckResult,
    check_youtu,
    run_all_checks,
)

__all__ = [
    "IntegrationCheckResult",
    "check_youtu",
    "run_all_checks",
]
