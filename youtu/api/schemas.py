"""Request and response models for the Youtu wire protocol.

Response fields default to their zero value, so keys the service omits (or
sends as ``null``) decode the same way as an explicit zero.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DetectMode(IntEnum):
    """Face detection mode."""

    NORMAL = 0
    BIG_FACE = 1


class WireRequest(BaseModel):
    """Base for request bodies; ``omit_when_empty`` lists wire keys dropped when falsy."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    omit_when_empty: ClassVar[frozenset[str]] = frozenset()

    app_id: str

    def to_wire(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True)
        for key in self.omit_when_empty:
            if not payload.get(key):
                payload.pop(key, None)
        return payload


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class WireResponse(_WireModel):
    """Base for response bodies. ``error_code == 0`` means the payload is valid."""

    error_code: int = Field(0, alias="errorcode")
    error_msg: str = Field("", alias="errormsg")

    @property
    def ok(self) -> bool:
        return self.error_code == 0


class Face(_WireModel):
    """Position and attributes of one detected face."""

    face_id: str = ""
    x: int = 0
    y: int = 0
    width: float = 0.0
    height: float = 0.0
    gender: int = 0  # 0 female .. 100 male
    age: int = 0
    expression: int = 0  # 0 normal, 50 smile, 100 laugh
    glass: bool = False
    pitch: int = 0
    yaw: int = 0
    roll: int = 0


class DetectFaceReq(WireRequest):
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"mode"})

    image: str
    mode: DetectMode = DetectMode.NORMAL


class DetectFaceRsp(WireResponse):
    session_id: str = ""
    image_id: str = ""
    image_width: int = 0
    image_height: int = 0
    face: list[Face] = Field(default_factory=list)


class FaceCompareReq(WireRequest):
    image_a: str = Field(alias="imageA")
    image_b: str = Field(alias="imageB")


class FaceCompareRsp(WireResponse):
    eyebrow_sim: float = 0.0
    eye_sim: float = 0.0
    nose_sim: float = 0.0
    mouth_sim: float = 0.0
    similarity: float = 0.0


class FaceVerifyReq(WireRequest):
    image: str
    person_id: str


class FaceVerifyRsp(WireResponse):
    is_match: bool = Field(False, alias="ismatch")
    confidence: float = 0.0
    session_id: str = ""


class FaceIdentifyReq(WireRequest):
    group_id: str
    image: str


class FaceIdentifyRsp(WireResponse):
    session_id: str = ""
    person_id: str = ""
    face_id: str = ""
    confidence: float = 0.0


class NewPersonReq(WireRequest):
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"person_name", "tag"})

    image: str
    person_id: str
    group_ids: list[str]
    person_name: str = ""
    tag: str = ""


class NewPersonRsp(WireResponse):
    session_id: str = ""
    suc_group: int = 0
    suc_face: int = 0
    person_name: str = ""
    person_id: str = ""
    face_id: str = ""


class DelPersonReq(WireRequest):
    person_id: str


class DelPersonRsp(WireResponse):
    session_id: str = ""
    deleted: int = 0


class AddFaceReq(WireRequest):
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"tag"})

    person_id: str
    images: list[str]
    tag: str = ""


class AddFaceRsp(WireResponse):
    session_id: str = ""
    added: int = 0
    face_ids: list[str] = Field(default_factory=list)


class DelFaceReq(WireRequest):
    person_id: str
    face_ids: list[str]


class DelFaceRsp(WireResponse):
    session_id: str = ""
    deleted: int = 0


class SetInfoReq(WireRequest):
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({"person_name", "tag"})

    person_id: str
    person_name: str = ""
    tag: str = ""


class SetInfoRsp(WireResponse):
    session_id: str = ""
    person_id: str = ""


class GetInfoReq(WireRequest):
    person_id: str


class GetInfoRsp(WireResponse):
    person_name: str = ""
    person_id: str = ""
    group_ids: list[str] = Field(default_factory=list)
    face_ids: list[str] = Field(default_factory=list)
    session_id: str = ""


class GetGroupIdsReq(WireRequest):
    pass


class GetGroupIdsRsp(WireResponse):
    group_ids: list[str] = Field(default_factory=list)


class GetPersonIdsReq(WireRequest):
    group_id: str


class GetPersonIdsRsp(WireResponse):
    person_ids: list[str] = Field(default_factory=list)


class GetFaceIdsReq(WireRequest):
    person_id: str


class GetFaceIdsRsp(WireResponse):
    face_ids: list[str] = Field(default_factory=list)


class GetFaceInfoReq(WireRequest):
    face_id: str


class GetFaceInfoRsp(WireResponse):
    face_info: Face = Field(default_factory=Face)
