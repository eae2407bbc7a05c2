r"""Contain the multipart/form-data encoder used by the upload helpers."""

from __future__ import annotations

__all__ = ["FileItem", "encode_multipart"]

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from httpwrap.core.config import CONTENT_TYPE_MULTIPART

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

# The request is never sent, it only drives the httpx multipart encoder
_ENCODING_URL = "http://localhost"


@dataclass(frozen=True)
class FileItem:
    """A file to upload in a multipart body.

    Args:
        key: The form field name.
        file_name: The file name sent to the server.
        content: The raw file content.
        content_type: The content type of the file part.
    """

    key: str
    file_name: str
    content: bytes
    content_type: str = "application/octet-stream"


def encode_multipart(
    fields: Mapping[str, str] | None,
    file_item: FileItem,
    *,
    boundary: str | None = None,
) -> tuple[bytes, str]:
    """Encode text fields and a file as a multipart/form-data body.

    Every text field is written before the file field. The returned body
    is complete, including the closing boundary.

    Args:
        fields: The text fields, or ``None``.
        file_item: The file to upload.
        boundary: An optional boundary. A random one is generated if
            not provided.

    Returns:
        A tuple with the encoded body and the matching content type,
        which includes the boundary.

    Example:
        ```pycon
        >>> from httpwrap.multipart import FileItem, encode_multipart
        >>> body, content_type = encode_multipart(
        ...     {"name": "report"},
        ...     FileItem(key="file", file_name="report.txt", content=b"hello"),
        ...     boundary="xyz",
        ... )
        >>> content_type
        'multipart/form-data; boundary=xyz'
        >>> body.endswith(b"--xyz--\r\n")
        True

        ```
    """
    boundary = boundary or os.urandom(16).hex()
    content_type = f"{CONTENT_TYPE_MULTIPART}; boundary={boundary}"
    request = httpx.Request(
        "POST",
        _ENCODING_URL,
        headers={"Content-Type": content_type},
        data=dict(fields or {}),
        files={file_item.key: (file_item.file_name, file_item.content, file_item.content_type)},
    )
    body = request.read()
    logger.debug(
        f"Encoded {len(fields or {})} field(s) and file {file_item.file_name!r} "
        f"as a {len(body)}-byte multipart body"
    )
    return body, content_type
