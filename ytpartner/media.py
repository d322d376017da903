"""Encoding of media upload request bodies.

A media payload alone is sent as-is with ``uploadType=media``. A media
payload together with a JSON resource is sent as a ``multipart/related``
body with ``uploadType=multipart``: the JSON metadata part first, then the
media part.
"""

import json
import uuid
from typing import Any

from ytpartner.parameters import MediaUpload

__all__ = ('EncodedBody', 'encode_media', 'read_media_body')

EncodedBody = tuple[str, bytes, str]


def read_media_body(body: Any) -> bytes:
    """Read a media body into bytes.

    Accepts bytes, text (encoded as UTF-8), binary file objects and
    iterables of byte chunks.
    """
    if isinstance(body, bytes):
        return body
    if isinstance(body, (bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode('utf-8')
    if hasattr(body, 'read'):
        data = body.read()
        return data.encode('utf-8') if isinstance(data, str) else data
    return b''.join(bytes(chunk) for chunk in body)


def encode_media(
    media: MediaUpload, resource: Any = None, boundary: str | None = None
) -> EncodedBody:
    """Build the upload body for ``media``.

    Returns:
        Tuple of (uploadType value, body bytes, Content-Type header).
    """
    content = read_media_body(media.body)
    if resource is None:
        return 'media', content, media.mime_type

    boundary = boundary or uuid.uuid4().hex
    metadata = json.dumps(resource).encode('utf-8')
    body = b''.join(
        [
            f'--{boundary}\r\n'.encode(),
            b'Content-Type: application/json; charset=UTF-8\r\n\r\n',
            metadata,
            f'\r\n--{boundary}\r\n'.encode(),
            f'Content-Type: {media.mime_type}\r\n\r\n'.encode(),
            content,
            f'\r\n--{boundary}--\r\n'.encode(),
        ]
    )
    return 'multipart', body, f'multipart/related; boundary={boundary}'
