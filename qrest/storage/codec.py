"""
JSON codec for documents and request bodies.

Integer lexemes are materialized as exact ``int`` values and must fit in a
signed 64-bit integer; they never pass through ``float``. Fractional or
exponent numbers stay ``float``.
"""
import json
from typing import Any, Dict, List, Union

from flask.json.provider import DefaultJSONProvider

from ..errors import CodecError

JsonValue = Union[None, bool, int, float, str, Dict[str, "JsonValue"], List["JsonValue"]]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _parse_int(lexeme: str) -> int:
    value = int(lexeme)
    if not INT64_MIN <= value <= INT64_MAX:
        raise CodecError(f"integer out of 64-bit range: {lexeme}")
    return value


def _reject_constant(name: str):
    raise CodecError(f"non-standard JSON constant: {name}")


def decode(data: Union[bytes, bytearray, str]) -> JsonValue:
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CodecError(f"body is not UTF-8: {e}") from e
    try:
        return json.loads(data, parse_int=_parse_int, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise CodecError(f"malformed JSON: {e}") from e


def encode(value: Any, *, pretty: bool = False) -> str:
    try:
        return json.dumps(
            value,
            indent=2 if pretty else None,
            separators=None if pretty else (",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise CodecError(f"value is not JSON-serializable: {e}") from e


class QrestJSONProvider(DefaultJSONProvider):
    """Route Flask request/response JSON through the codec above."""

    sort_keys = False
    ensure_ascii = False

    def loads(self, s, **kwargs):
        return decode(s)

    def dumps(self, obj, **kwargs):
        return encode(obj, pretty=bool(kwargs.get("indent")))
