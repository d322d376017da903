"""Parameter classification.

Splits the caller's parameter mapping into path values, query values, the
JSON request body (``resource``) and an optional media payload (``media``),
and checks that every required parameter is present.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ytpartner.descriptors import MEDIA_KEY, RESOURCE_KEY, MethodDescriptor
from ytpartner.exceptions import MissingRequiredParameterError, RequestBuildError

__all__ = ('ClassifiedParameters', 'MediaUpload', 'classify', 'is_absent')


class MediaUpload(BaseModel):
    """Binary payload uploaded alongside (or instead of) a JSON body.

    ``body`` may be bytes, text, a binary file object or an iterable of
    byte chunks.
    """

    model_config = ConfigDict(
        populate_by_name=True, arbitrary_types_allowed=True, frozen=True
    )

    mime_type: str = Field(..., alias='mimeType')
    body: Any


@dataclass(frozen=True)
class ClassifiedParameters:
    """Call parameters sorted by where they travel on the wire."""

    path: dict[str, Any] = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)
    resource: Any = None
    media: MediaUpload | None = None


def is_absent(value: Any) -> bool:
    """Whether a value counts as missing for required-parameter checks.

    ``None``, the empty string and empty collections are absent; ``0`` and
    ``False`` are real values.
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def classify(
    descriptor: MethodDescriptor, params: Mapping[str, Any] | None
) -> ClassifiedParameters:
    """Validate and split call parameters for ``descriptor``.

    Parameters the descriptor does not declare are passed through to the
    query string. Query values that are ``None`` are dropped. The caller's
    mapping is never modified.

    Raises:
        MissingRequiredParameterError: Naming the first absent required
            parameter, in the descriptor's declaration order.
    """
    params = params or {}

    for name in descriptor.required_params:
        if is_absent(params.get(name)):
            raise MissingRequiredParameterError(name, descriptor.name)

    path: dict[str, Any] = {}
    query: dict[str, Any] = {}
    for name, value in params.items():
        if name in (RESOURCE_KEY, MEDIA_KEY):
            continue
        if name in descriptor.path_params:
            if not is_absent(value):
                path[name] = value
        elif value is not None:
            query[name] = value

    media = params.get(MEDIA_KEY)
    if media is not None and not isinstance(media, MediaUpload):
        try:
            media = MediaUpload.model_validate(media)
        except ValidationError as e:
            raise RequestBuildError(
                f'Invalid media payload for {descriptor.name}: {e}'
            ) from e

    return ClassifiedParameters(
        path=path, query=query, resource=params.get(RESOURCE_KEY), media=media
    )
