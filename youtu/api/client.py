"""Synchronous client for the Youtu face API."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Sequence

import httpx
import pydantic

from youtu.api import operations as ops
from youtu.api.operations import Operation, RequestT, ResponseT
from youtu.api.schemas import (
    AddFaceRsp,
    DelFaceRsp,
    DelPersonRsp,
    DetectFaceRsp,
    DetectMode,
    FaceCompareRsp,
    FaceIdentifyRsp,
    FaceVerifyRsp,
    GetFaceIdsRsp,
    GetFaceInfoRsp,
    GetGroupIdsRsp,
    GetInfoRsp,
    GetPersonIdsRsp,
    NewPersonRsp,
    SetInfoRsp,
)
from youtu.auth.credential import Credential
from youtu.auth.signer import build_token
from youtu.config.settings import DEFAULT_HOST, DEFAULT_TIMEOUT, Settings, get_settings
from youtu.errors import DecodingError, EncodingError, NetworkError
from youtu.metrics.prometheus_exporter import youtu_request_seconds, youtu_requests_total

logger = logging.getLogger(__name__)


class YoutuClient:
    """Signs and sends Youtu API calls.

    The client holds no mutable state, so one instance can serve concurrent
    callers. Every call opens its own HTTP connection.
    """

    def __init__(
        self,
        credential: Credential,
        host: str = DEFAULT_HOST,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._credential = credential
        self._host = host
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> YoutuClient:
        settings = settings or get_settings()
        return cls(
            Credential.from_settings(settings),
            settings.host,
            timeout=settings.request_timeout,
        )

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def host(self) -> str:
        return self._host

    def interface_url(self, name: str) -> str:
        return f"http://{self._host}/youtu/api/{name}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": build_token(self._credential),
            "Content-Type": "text/json",
            "Accept": "*/*",
            "User-Agent": "",
            "Expect": "100-continue",
        }

    def call(self, operation: Operation[RequestT, ResponseT], request: RequestT) -> ResponseT:
        """Send ``request`` to ``operation`` and decode the typed response.

        A non-zero ``error_code`` in the response is returned, not raised.
        """

        try:
            body = json.dumps(request.to_wire(), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"Cannot serialize {operation.name} request", details=str(exc)) from exc

        url = self.interface_url(operation.name)
        logger.debug("Calling %s on %s", operation.name, self._host)
        with youtu_request_seconds.labels(operation.name).time():
            raw = self._post(operation.name, url, body)

        try:
            payload = json.loads(raw)
            response = operation.response_model.model_validate(payload)
        except (ValueError, RecursionError, pydantic.ValidationError) as exc:
            logger.warning("Undecodable %s response from %s: %s", operation.name, self._host, exc)
            youtu_requests_total.labels(operation.name, "decoding_error").inc()
            raise DecodingError(raw, exc) from exc

        outcome = "ok" if response.ok else "service_error"
        youtu_requests_total.labels(operation.name, outcome).inc()
        if not response.ok:
            logger.debug("%s returned errorcode=%s: %s", operation.name, response.error_code, response.error_msg)
        return response

    def _post(self, name: str, url: str, body: bytes) -> bytes:
        # httpx times each phase separately; the deadline bounds the whole call.
        deadline = time.monotonic() + self._timeout
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                with client.stream("POST", url, content=body, headers=self._headers()) as response:
                    chunks: list[bytes] = []
                    for chunk in response.iter_bytes():
                        chunks.append(chunk)
                        if time.monotonic() > deadline:
                            raise httpx.ReadTimeout(
                                f"response not complete within {self._timeout}s",
                                request=response.request,
                            )
                    return b"".join(chunks)
        except (httpx.TransportError, httpx.InvalidURL) as exc:
            logger.warning("Request %s to %s failed: %s", name, self._host, exc)
            youtu_requests_total.labels(name, "network_error").inc()
            raise NetworkError(f"Request to {url} failed", details=str(exc)) from exc

    def _invoke(self, operation: Operation[RequestT, ResponseT], **fields: Any) -> ResponseT:
        try:
            request = operation.build(self._credential.app_id, **fields)
        except pydantic.ValidationError as exc:
            raise EncodingError(f"Invalid {operation.name} request", details=str(exc)) from exc
        return self.call(operation, request)

    def detect_face(self, image: str, mode: DetectMode = DetectMode.NORMAL) -> DetectFaceRsp:
        """Detect every face in ``image`` with its position and attributes."""

        return self._invoke(ops.DETECT_FACE, image=image, mode=mode)

    def face_compare(self, image_a: str, image_b: str) -> FaceCompareRsp:
        """Similarity of two faces, overall and per facial feature."""

        return self._invoke(ops.FACE_COMPARE, image_a=image_a, image_b=image_b)

    def face_verify(self, image: str, person_id: str) -> FaceVerifyRsp:
        """Decide whether the face in ``image`` belongs to ``person_id``."""

        return self._invoke(ops.FACE_VERIFY, image=image, person_id=person_id)

    def face_identify(self, image: str, group_id: str) -> FaceIdentifyRsp:
        """Find the most similar person within ``group_id``."""

        return self._invoke(ops.FACE_IDENTIFY, image=image, group_id=group_id)

    def new_person(
        self,
        image: str,
        person_id: str,
        group_ids: Sequence[str],
        person_name: str = "",
        tag: str = "",
    ) -> NewPersonRsp:
        """Create a person from one face image and add it to ``group_ids``."""

        return self._invoke(
            ops.NEW_PERSON,
            image=image,
            person_id=person_id,
            group_ids=list(group_ids),
            person_name=person_name,
            tag=tag,
        )

    def del_person(self, person_id: str) -> DelPersonRsp:
        return self._invoke(ops.DEL_PERSON, person_id=person_id)

    def add_face(self, images: Sequence[str], person_id: str, tag: str = "") -> AddFaceRsp:
        """Add faces to a person. A face can belong to one person only."""

        return self._invoke(ops.ADD_FACE, images=list(images), person_id=person_id, tag=tag)

    def del_face(self, person_id: str, face_ids: Sequence[str]) -> DelFaceRsp:
        return self._invoke(ops.DEL_FACE, person_id=person_id, face_ids=list(face_ids))

    def set_info(self, person_id: str, person_name: str = "", tag: str = "") -> SetInfoRsp:
        return self._invoke(ops.SET_INFO, person_id=person_id, person_name=person_name, tag=tag)

    def get_info(self, person_id: str) -> GetInfoRsp:
        """Name, groups and faces of a person."""

        return self._invoke(ops.GET_INFO, person_id=person_id)

    def get_group_ids(self) -> GetGroupIdsRsp:
        return self._invoke(ops.GET_GROUP_IDS)

    def get_person_ids(self, group_id: str) -> GetPersonIdsRsp:
        return self._invoke(ops.GET_PERSON_IDS, group_id=group_id)

    def get_face_ids(self, person_id: str) -> GetFaceIdsRsp:
        return self._invoke(ops.GET_FACE_IDS, person_id=person_id)

    def get_face_info(self, face_id: str) -> GetFaceInfoRsp:
        return self._invoke(ops.GET_FACE_INFO, face_id=face_id)
