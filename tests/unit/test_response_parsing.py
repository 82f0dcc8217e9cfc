from __future__ import annotations

import pytest

from roblox_api_client.core.errors import RobloxDecodeError
from roblox_api_client.core.response_parsing import parse_json_payload


def test_parse_json_payload_returns_dict_payload():
    assert parse_json_payload('{"id": "1"}') == {"id": "1"}


def test_parse_json_payload_raises_decode_error_for_invalid_json():
    with pytest.raises(RobloxDecodeError, match="not valid JSON") as info:
        parse_json_payload("<html>oops</html>")
    assert info.value.body == "<html>oops</html>"


def test_parse_json_payload_raises_decode_error_for_empty_body():
    with pytest.raises(RobloxDecodeError):
        parse_json_payload("")


def test_parse_json_payload_raises_decode_error_for_non_dict_payload():
    with pytest.raises(RobloxDecodeError, match="response JSON root must be an object"):
        parse_json_payload("[1, 2, 3]")
