import contextlib
import json
from json import JSONDecodeError as JSONDecodeError
from typing import Any

try:
    import orjson as _orjson

except ImportError:
    _orjson = None

try:
    import ujson as _ujson
except ImportError:
    _ujson = None


__all__ = [
    "dumps",
    "loads",
    "JSONDecodeError",
]


def dumps(obj: Any, *, sort_keys: bool = False, **kwargs: Any) -> str:
    """
    Serialize ``obj`` to a JSON formatted ``str``.

    Uses ``orjson`` when it is installed, then ``ujson``, falling back to the standard library.

    Parameters
    ----------
    obj : Any
        The object to serialize.
    sort_keys: bool, optional
        If ``True`` (default: ``False``), then the output of dictionaries will be sorted by key.
    kwargs: Any, optional
        Additional keyword arguments are passed to ``json.dumps``.

    Returns
    -------
    str
        The JSON string representation of ``obj``.
    """
    if _orjson:
        with contextlib.suppress(_orjson.JSONEncodeError):
            return _orjson.dumps(obj, option=_orjson.OPT_SORT_KEYS if sort_keys else None).decode()
    if _ujson:
        return _ujson.dumps(obj, sort_keys=sort_keys, ensure_ascii=False, escape_forward_slashes=False)
    return json.dumps(obj, sort_keys=sort_keys, **kwargs)


def loads(obj: str | bytes | bytearray | memoryview, **kwargs: Any) -> Any:
    """Deserialize ``obj`` (a ``str``, ``bytes`` or ``bytearray`` holding a JSON document) to a Python object.

    Parameters
    ----------
    obj: str | bytes | bytearray | memoryview
        The JSON string to deserialize.
    kwargs: Any, optional
        Additional keyword arguments are passed to ``json.loads``.

    Returns
    -------
    Any
        The deserialized object.

    Raises
    ------
    json.JSONDecodeError
        If the input is not valid JSON.
    """
    if _orjson:
        with contextlib.suppress(_orjson.JSONDecodeError):
            return _orjson.loads(obj)
    if _ujson:
        with contextlib.suppress(_ujson.JSONDecodeError):
            return _ujson.loads(obj)
    if isinstance(obj, memoryview):
        obj = obj.tobytes()
    return json.loads(obj, **kwargs)
