"""Per-call request options and their merge rule.

Merging is shallow and right-biased: every field the caller sets replaces the
default wholesale. Overriding ``headers`` replaces the entire default header
mapping for that call, it is not combined key by key. A field the caller
leaves as ``None`` keeps the default.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = ('RequestOptions', 'merge')


class RequestOptions(BaseModel):
    """Overridable request settings.

    Callers may override ``url`` and ``method``, for instance to point a call
    at a test server.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    url: str | None = Field(None, description='Request URL or URL template.')
    method: str | None = Field(None, description='HTTP method.')
    headers: dict[str, str] | None = Field(
        None, description='Headers sent with this call, replacing the defaults.'
    )
    encoding: str | None = Field(
        None, description='Text encoding used to decode the response body.'
    )
    timeout: float | None = Field(None, description='Request timeout in seconds.')


def merge(
    defaults: RequestOptions, caller: RequestOptions | None = None
) -> RequestOptions:
    """Combine default options with caller overrides, the caller winning."""
    if caller is None:
        return defaults
    return defaults.model_copy(update=caller.model_dump(exclude_none=True))
