"""Tests for wire serialization of requests and decoding of responses."""

from __future__ import annotations

from youtu.api import operations as ops
from youtu.api.schemas import DetectFaceRsp, DetectMode, GetFaceInfoRsp, SetInfoRsp


def test_detect_request_omits_normal_mode() -> None:
    request = ops.DETECT_FACE.build(1001, image="aW1n")

    assert request.to_wire() == {"app_id": "1001", "image": "aW1n"}


def test_detect_request_keeps_big_face_mode() -> None:
    request = ops.DETECT_FACE.build(1001, image="aW1n", mode=DetectMode.BIG_FACE)

    assert request.to_wire() == {"app_id": "1001", "image": "aW1n", "mode": 1}


def test_compare_request_uses_camel_case_image_keys() -> None:
    request = ops.FACE_COMPARE.build(5, image_a="YQ==", image_b="Yg==")

    assert request.to_wire() == {"app_id": "5", "imageA": "YQ==", "imageB": "Yg=="}


def test_new_person_request_drops_empty_optionals() -> None:
    request = ops.NEW_PERSON.build(5, image="aW1n", person_id="p1", group_ids=["g1"], person_name="", tag="")

    assert request.to_wire() == {
        "app_id": "5",
        "image": "aW1n",
        "person_id": "p1",
        "group_ids": ["g1"],
    }


def test_new_person_request_keeps_empty_group_list() -> None:
    request = ops.NEW_PERSON.build(5, image="aW1n", person_id="p1", group_ids=[], person_name="Alice")

    assert request.to_wire()["group_ids"] == []
    assert request.to_wire()["person_name"] == "Alice"


def test_get_group_ids_request_only_carries_app_id() -> None:
    assert ops.GET_GROUP_IDS.build(9).to_wire() == {"app_id": "9"}


def test_detect_response_decodes_faces() -> None:
    payload = {
        "session_id": "s1",
        "image_id": "img",
        "image_width": 640,
        "image_height": 480,
        "face": [
            {
                "face_id": "f1",
                "x": 10,
                "y": 20,
                "width": 100.5,
                "height": 120.0,
                "gender": 99,
                "age": 30,
                "expression": 50,
                "glass": True,
                "pitch": -3,
                "yaw": 4,
                "roll": 0,
            }
        ],
        "errorcode": 0,
        "errormsg": "OK",
    }

    response = DetectFaceRsp.model_validate(payload)

    assert response.ok
    assert response.image_width == 640
    assert response.face[0].face_id == "f1"
    assert response.face[0].width == 100.5
    assert response.face[0].glass is True
    assert response.face[0].pitch == -3


def test_response_defaults_for_omitted_and_null_fields() -> None:
    response = DetectFaceRsp.model_validate({"errorcode": -1101, "errormsg": "no face", "face": None})

    assert not response.ok
    assert response.error_code == -1101
    assert response.session_id == ""
    assert response.image_height == 0
    assert response.face == []


def test_face_info_defaults_to_empty_face() -> None:
    response = GetFaceInfoRsp.model_validate({})

    assert response.face_info.face_id == ""
    assert response.face_info.age == 0
    assert response.ok


def test_set_info_response_exposes_identifiers() -> None:
    response = SetInfoRsp.model_validate({"session_id": "s9", "person_id": "p9", "errorcode": 0, "errormsg": ""})

    assert response.session_id == "s9"
    assert response.person_id == "p9"


def test_response_ignores_unknown_keys() -> None:
    response = SetInfoRsp.model_validate({"person_id": "p9", "extra": [1, 2]})

    assert response.person_id == "p9"


def test_every_operation_is_registered() -> None:
    assert sorted(ops.OPERATIONS) == sorted(
        [
            "detectface",
            "facecompare",
            "faceverify",
            "faceidentify",
            "newperson",
            "delperson",
            "addface",
            "delface",
            "setinfo",
            "getinfo",
            "getgroupids",
            "getpersonids",
            "getfaceids",
            "getfaceinfo",
        ]
    )
