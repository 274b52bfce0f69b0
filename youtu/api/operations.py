"""Descriptors for the remote procedures exposed by the Youtu API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from youtu.api import schemas
from youtu.api.schemas import WireRequest, WireResponse

RequestT = TypeVar("RequestT", bound=WireRequest)
ResponseT = TypeVar("ResponseT", bound=WireResponse)


@dataclass(frozen=True)
class Operation(Generic[RequestT, ResponseT]):
    """A named remote procedure with fixed request and response models."""

    name: str
    request_model: type[RequestT]
    response_model: type[ResponseT]

    def build(self, app_id: int, **fields: Any) -> RequestT:
        """Fill the request model; the service expects ``app_id`` as a string."""

        return self.request_model(app_id=str(app_id), **fields)


DETECT_FACE = Operation("detectface", schemas.DetectFaceReq, schemas.DetectFaceRsp)
FACE_COMPARE = Operation("facecompare", schemas.FaceCompareReq, schemas.FaceCompareRsp)
FACE_VERIFY = Operation("faceverify", schemas.FaceVerifyReq, schemas.FaceVerifyRsp)
FACE_IDENTIFY = Operation("faceidentify", schemas.FaceIdentifyReq, schemas.FaceIdentifyRsp)
NEW_PERSON = Operation("newperson", schemas.NewPersonReq, schemas.NewPersonRsp)
DEL_PERSON = Operation("delperson", schemas.DelPersonReq, schemas.DelPersonRsp)
ADD_FACE = Operation("addface", schemas.AddFaceReq, schemas.AddFaceRsp)
DEL_FACE = Operation("delface", schemas.DelFaceReq, schemas.DelFaceRsp)
SET_INFO = Operation("setinfo", schemas.SetInfoReq, schemas.SetInfoRsp)
GET_INFO = Operation("getinfo", schemas.GetInfoReq, schemas.GetInfoRsp)
GET_GROUP_IDS = Operation("getgroupids", schemas.GetGroupIdsReq, schemas.GetGroupIdsRsp)
GET_PERSON_IDS = Operation("getpersonids", schemas.GetPersonIdsReq, schemas.GetPersonIdsRsp)
GET_FACE_IDS = Operation("getfaceids", schemas.GetFaceIdsReq, schemas.GetFaceIdsRsp)
GET_FACE_INFO = Operation("getfaceinfo", schemas.GetFaceInfoReq, schemas.GetFaceInfoRsp)

OPERATIONS: dict[str, Operation[Any, Any]] = {
    op.name: op
    for op in (
        DETECT_FACE,
        FACE_COMPARE,
        FACE_VERIFY,
        FACE_IDENTIFY,
        NEW_PERSON,
        DEL_PERSON,
        ADD_FACE,
        DEL_FACE,
        SET_INFO,
        GET_INFO,
        GET_GROUP_IDS,
        GET_PERSON_IDS,
        GET_FACE_IDS,
        GET_FACE_INFO,
    )
}
