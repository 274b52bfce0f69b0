"""Shared fixtures for the Youtu client tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from youtu.api.client import YoutuClient
from youtu.auth.credential import Credential


@pytest.fixture()
def credential() -> Credential:
    return Credential(
        app_id=1001,
        secret_id="AKIDtest",
        secret_key="s3cr3t",
        expired=0,
        user_id="10000",
    )


@pytest.fixture()
def captured() -> list[httpx.Request]:
    return []


@pytest.fixture()
def make_client(
    credential: Credential,
    captured: list[httpx.Request],
) -> Callable[..., YoutuClient]:
    """Build a client whose transport answers every request with ``body``."""

    def _factory(body: Any, status_code: int = 200) -> YoutuClient:
        content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")

        def handler(request: httpx.Request) -> httpx.Response:
            request.read()
            captured.append(request)
            return httpx.Response(status_code, content=content)

        return YoutuClient(credential, "youtu.test", transport=httpx.MockTransport(handler))

    return _factory
