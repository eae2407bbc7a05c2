r"""Contain the response decoders and request body encoders.

A decode target is either a dataclass or pydantic model type, whose
fields are validated from the decoded payload, or any callable that
accepts the decoded payload (``dict``, a constructor, a validation
function...).
"""

from __future__ import annotations

__all__ = ["decode_json", "decode_xml", "to_bytes"]

import dataclasses
import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import urlencode
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DefusedET
from pydantic import BaseModel, TypeAdapter

from httpwrap.exceptions import ResponseDecodeError

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def to_bytes(body: bytes | str | Mapping[str, Any] | None) -> bytes:
    """Convert a request body to raw bytes.

    Args:
        body: The request body. ``None`` is an empty body, strings are
            encoded as UTF-8 and mappings are form-encoded.

    Returns:
        The raw request body.

    Example:
        ```pycon
        >>> from httpwrap.serialization import to_bytes
        >>> to_bytes({"user": "ana", "role": "admin"})
        b'user=ana&role=admin'
        >>> to_bytes(None)
        b''

        ```
    """
    if body is None:
        return b""
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, Mapping):
        return urlencode(body, doseq=True).encode("utf-8")
    msg = f"Unsupported request body type: {type(body).__name__}"
    raise TypeError(msg)


def decode_json(
    content: bytes,
    result_type: Callable[..., T],
    *,
    url: str = "",
    status_code: int = 0,
) -> T:
    """Decode a JSON response body.

    Object keys are matched against the fields of a dataclass or
    pydantic model target ignoring case, unknown keys are ignored and
    the values are validated by pydantic.

    Args:
        content: The raw response body.
        result_type: The decode target.
        url: The requested URL, reported on failure.
        status_code: The response status code, reported on failure.

    Returns:
        The decoded value.

    Raises:
        ResponseDecodeError: If the body is not valid JSON or does not
            fit the target.

    Example:
        ```pycon
        >>> from dataclasses import dataclass
        >>> from httpwrap.serialization import decode_json
        >>> @dataclass
        ... class Status:
        ...     ok: bool
        ...
        >>> decode_json(b'{"Ok": true}', Status)
        Status(ok=True)

        ```
    """
    try:
        payload = json.loads(content)
        if _is_model_type(result_type) and isinstance(payload, Mapping):
            return _validate_model(result_type, payload)
        return result_type(payload)
    except (ValueError, TypeError) as exc:
        logger.debug(f"Cannot decode JSON response from {url}: {exc}")
        raise ResponseDecodeError(
            url, status_code=status_code, content=content, cause=exc
        ) from exc


def decode_xml(
    content: bytes,
    result_type: Callable[..., T],
    *,
    url: str = "",
    status_code: int = 0,
) -> T:
    """Decode an XML response body.

    For a dataclass or pydantic model target, each field is read from
    the attribute or the child element of the root with the same name
    (ignoring case). Element text is converted to the field annotation
    by pydantic, and child elements with their own children fill nested
    models. Any other callable receives the parsed root element.

    Args:
        content: The raw response body.
        result_type: The decode target.
        url: The requested URL, reported on failure.
        status_code: The response status code, reported on failure.

    Returns:
        The decoded value.

    Raises:
        ResponseDecodeError: If the body is not well-formed XML, uses
            forbidden constructs (entity expansion, external
            references), or does not fit the target.
    """
    try:
        root = DefusedET.fromstring(content)
        if _is_model_type(result_type):
            return _validate_model(result_type, _element_fields(root))
        return result_type(root)
    except (ParseError, DefusedXmlException, ValueError, TypeError) as exc:
        logger.debug(f"Cannot decode XML response from {url}: {exc}")
        raise ResponseDecodeError(
            url, status_code=status_code, content=content, cause=exc
        ) from exc


def _element_fields(element: Element) -> dict[str, Any]:
    values: dict[str, Any] = dict(element.attrib)
    for child in element:
        if len(child) or child.attrib:
            values.setdefault(child.tag, _element_fields(child))
        else:
            values.setdefault(child.tag, child.text or "")
    return values


def _is_model_type(target: Any) -> bool:
    return dataclasses.is_dataclass(target) or (
        isinstance(target, type) and issubclass(target, BaseModel)
    )


def _field_keys(target: Any) -> list[str]:
    if isinstance(target, type) and issubclass(target, BaseModel):
        return [info.alias or name for name, info in target.model_fields.items()]
    return [field.name for field in dataclasses.fields(target) if field.init]


@lru_cache(maxsize=128)
def _type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _validate_model(target: Callable[..., T], payload: Mapping[str, Any]) -> T:
    """Validate a payload against a dataclass or pydantic model type.

    Payload keys are matched against the field names (or aliases)
    ignoring case, unknown keys are dropped, and values are converted
    with pydantic's lax mode (``"5"`` to ``5``, ``"true"`` to ``True``).
    """
    keys = {key.lower(): key for key in _field_keys(target)}
    matched = {}
    for key, value in payload.items():
        field_key = keys.get(str(key).lower())
        if field_key is not None:
            matched.setdefault(field_key, value)
    return _type_adapter(target).validate_python(matched)
