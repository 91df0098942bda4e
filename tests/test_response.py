import json

import pytest

from bybitapi.response import (
    AccessDeniedError,
    CommonResponse,
    CommonV5Response,
    ErrorResponse,
    PathNotFoundError,
    RateLimitError,
    check_response_body,
    check_v3_response_body,
    check_v5_response_body,
)


def _body(**fields):
    return json.dumps(fields).encode()


def test_success_returns_none():
    assert check_response_body(_body(ret_code=0, ret_msg="OK")) is None


def test_error_response_carries_code_and_message():
    with pytest.raises(ErrorResponse) as info:
        check_response_body(_body(ret_code=10001, ret_msg="params error"))
    assert info.value.ret_code == 10001
    assert info.value.ret_msg == "params error"
    assert str(info.value) == "10001, params error"


def test_rate_limit_is_reported_separately():
    body = _body(ret_code=10006, ret_msg="too many visits", rate_limit_reset_ms=1700000000000)
    with pytest.raises(RateLimitError) as info:
        check_response_body(body)
    assert info.value.rate_limit_reset_ms == 1700000000000
    assert info.value.ret_msg == "too many visits"
    assert str(info.value).startswith("too many visits, ")


def test_rate_limit_in_the_past_has_negative_duration():
    error = RateLimitError(CommonResponse(ret_msg="slow down", rate_limit_reset_ms=0))
    assert str(error).startswith("slow down, -")


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        check_response_body(b"not json")


def test_non_object_raises():
    with pytest.raises(ValueError):
        check_response_body(b"[1, 2]")


def test_wrong_field_type_raises():
    with pytest.raises(ValueError):
        check_response_body(_body(ret_code="zero"))


def test_v3_rate_limit_code_is_plain_error():
    with pytest.raises(ErrorResponse) as info:
        check_v3_response_body(_body(retCode=10006, retMsg="too many"))
    assert info.value.ret_code == 10006
    assert not isinstance(info.value, RateLimitError)


def test_v3_success():
    assert check_v3_response_body(_body(retCode=0, retMsg="OK")) is None


@pytest.mark.parametrize("code", [10006, 10018])
def test_v5_rate_limit_codes(code):
    with pytest.raises(RateLimitError):
        check_v5_response_body(_body(retCode=code, retMsg="limit"))


def test_v5_other_code_is_error_response():
    with pytest.raises(ErrorResponse) as info:
        check_v5_response_body(_body(retCode=10003, retMsg="invalid key"))
    assert str(info.value) == "10003, invalid key"


def test_v5_ignores_old_style_keys():
    assert check_v5_response_body(_body(ret_code=10001, ret_msg="ignored")) is None


def test_common_response_defaults_when_fields_missing():
    assert CommonResponse.from_dict({}) == CommonResponse()


def test_common_v5_response_from_dict():
    parsed = CommonV5Response.from_dict(
        {"retCode": 0, "retMsg": "OK", "retExtInfo": {}, "time": 1672106576000}
    )
    assert parsed == CommonV5Response(ret_code=0, ret_msg="OK", ret_ext_info={}, time=1672106576000)


def test_sentinel_errors_messages():
    assert str(PathNotFoundError()) == "path not found"
    assert str(AccessDeniedError()) == "access denied"