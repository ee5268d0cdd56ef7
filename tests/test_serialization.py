import json

import pytest
from pydantic import BaseModel

from core.models.envelope import Envelope
from core.models.network import RequestError
from core.serialization import decode_envelope, encode_body
from demo.repository import UserInfo


class Item(BaseModel):
    id: str


def test_decode_wire_keys():
    envelope = decode_envelope('{"code": 0, "msg": null, "data": {"id": "u1"}}', Item)

    assert envelope.is_success
    assert envelope.payload == Item(id="u1")
    assert envelope.message is None


def test_decode_failure_envelope():
    envelope = decode_envelope('{"code": 403, "msg": "forbidden"}', Item)

    assert not envelope.is_success
    assert envelope.payload is None
    assert RequestError.from_envelope(envelope) == RequestError(403, "forbidden")


def test_decode_missing_code_defaults_to_failure():
    envelope = decode_envelope("{}", dict)
    assert envelope.code == -1


def test_decode_empty_body():
    with pytest.raises(ValueError, match="Empty response body"):
        decode_envelope("", Item)


def test_decode_wrong_payload_shape():
    with pytest.raises(ValueError):
        decode_envelope('{"code": 0, "data": 12}', Item)


def test_decode_camel_case_payload():
    envelope = decode_envelope(
        '{"code": 0, "data": {"userId": "7", "userName": "ana", "token": "t"}}', UserInfo
    )
    assert envelope.payload.user_id == "7"
    assert envelope.payload.user_name == "ana"
    assert envelope.payload.avatar == ""


def test_envelope_accepts_python_names():
    envelope = Envelope[int](code=0, payload=3, message="ok")
    assert envelope.payload == 3
    assert envelope.message == "ok"


def test_encode_body():
    assert json.loads(encode_body({"userName": "a", "password": "b"})) == {
        "userName": "a",
        "password": "b",
    }
    assert encode_body(None) == "null"
    assert json.loads(encode_body(UserInfo(user_id="1"))) == {
        "userId": "1",
        "userName": "",
        "avatar": "",
        "token": "",
    }


def test_request_error_from_exception():
    assert RequestError.from_exception(RuntimeError("timeout"), "fallback") == RequestError(
        -1, "timeout"
    )
    error = RequestError.from_exception(RuntimeError(), "fallback")
    assert error.message == "fallback"
    assert error.is_transport_error
