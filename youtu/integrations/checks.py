"""Connectivity checks against the configured Youtu host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from youtu.api.client import YoutuClient
from youtu.api.schemas import WireResponse
from youtu.errors import YoutuError


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


def _run_check(
    name: str,
    factory: Callable[[], WireResponse],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        result = factory()
    except YoutuError as exc:
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if result.ok:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(
        name=name,
        success=False,
        message=f"Service responded with errorcode {result.error_code}: {result.error_msg}",
    )


def check_youtu(client: YoutuClient | None = None) -> IntegrationCheckResult:
    """List the application's groups and report whether the call succeeded."""

    try:
        client = client or YoutuClient.from_settings()
    except YoutuError as exc:
        return IntegrationCheckResult(name="Youtu", success=False, message=str(exc))

    return _run_check(
        name="Youtu",
        factory=client.get_group_ids,
        success_message=f"Youtu API at {client.host} accepted the signed request.",
    )


def run_all_checks() -> list[IntegrationCheckResult]:
    """Execute all integration checks."""

    return [check_youtu()]
