"""Custom exceptions for ytpartner.

This module defines the exceptions raised while building and dispatching
requests against the YouTube Content ID API. Errors detected before any
network I/O (caller errors) derive from RequestBuildError; errors returned by
the server are reported as APIError. Transport failures raised by httpx are
surfaced unchanged.
"""

from dataclasses import dataclass
from typing import Any

from httpx import Response


@dataclass(frozen=True)
class RequestDescription:
    """Describes the request an error originated from.

    Attributes:
        operation: Logical operation name, e.g. ``assets.get``.
        method: HTTP method of the request.
        url: Fully resolved request URL (without the query string).
    """

    operation: str
    method: str
    url: str

    def __str__(self) -> str:
        return f'{self.operation} ({self.method} {self.url})'


class YouTubePartnerError(Exception):
    """Base exception for all ytpartner errors.

    All exceptions raised by ytpartner itself inherit from this class, making
    it easy to catch them with a single except clause. Transport errors from
    httpx are not wrapped.

    Example:
        try:
            client.assets.get({'assetId': 'A123'})
        except YouTubePartnerError as e:
            print(f"ytpartner error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class RequestBuildError(YouTubePartnerError):
    """Base exception for errors detected before a request is sent."""

    pass


class MissingRequiredParameterError(RequestBuildError):
    """A required parameter is absent from the call parameters.

    Attributes:
        parameter: Name of the first missing required parameter.
        operation: The operation being called, if known.
    """

    def __init__(self, parameter: str, operation: str | None = None):
        self.parameter = parameter
        self.operation = operation
        message = f"Missing required parameter '{parameter}'"
        if operation:
            message += f' for {operation}'
        super().__init__(message)


class TemplateResolutionError(RequestBuildError):
    """A URL template placeholder has no corresponding value.

    Attributes:
        template: The URL template being rendered.
        placeholder: The placeholder that could not be resolved.
    """

    def __init__(self, template: str, placeholder: str):
        self.template = template
        self.placeholder = placeholder
        super().__init__(
            f"No value for placeholder '{{{placeholder}}}' in '{template}'"
        )


class InvalidDescriptorError(RequestBuildError):
    """A method descriptor is internally inconsistent.

    Attributes:
        name: The operation name of the descriptor.
        reason: Explanation of what is wrong.
    """

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid method descriptor '{name}': {reason}")


class APIError(YouTubePartnerError):
    """Exception raised when an API request fails with an error response.

    This exception provides detailed error information from the API response,
    including the HTTP status code, the server error payload, and the request
    that produced it.

    Attributes:
        status_code: The HTTP status code of the response.
        response: The httpx Response object.
        detail: Parsed error payload from the response body (if available).
        body: Raw response body text.
        request: Description of the originating request.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response: Response | None = None,
        detail: Any | None = None,
        body: str = '',
        request: RequestDescription | None = None,
    ) -> None:
        self.status_code = status_code
        self.response = response
        self.detail = detail
        self.body = body
        self.request = request
        super().__init__(message)

    @classmethod
    def from_response(
        cls, response: Response, request: RequestDescription | None = None
    ) -> 'APIError':
        status_code = response.status_code
        body = response.text
        detail = None
        try:
            json_body = response.json()
            if isinstance(json_body, dict):
                detail = json_body.get('error', json_body)
            else:
                detail = json_body
        except ValueError:
            detail = body if body else None

        message = f'HTTP {status_code} Error'
        if isinstance(detail, dict) and detail.get('message'):
            message = f'HTTP {status_code} Error: {detail["message"]}'
        elif isinstance(detail, str):
            message = f'HTTP {status_code} Error: {detail}'
        if request:
            message += f' [{request}]'

        return cls(
            message,
            status_code=status_code,
            response=response,
            detail=detail,
            body=body,
            request=request,
        )

    @property
    def reason(self) -> str | None:
        """The reason code of the first error item, e.g. ``notFound``."""
        if isinstance(self.detail, dict):
            errors = self.detail.get('errors') or []
            if errors and isinstance(errors[0], dict):
                return errors[0].get('reason')
        return None

    def __repr__(self) -> str:
        return f'APIError(status_code={self.status_code}, detail={self.detail!r})'


class ResponseDecodeError(YouTubePartnerError):
    """A successful response body could not be decoded or validated.

    Raised when a 2xx body is not valid JSON, cannot be decoded with the
    requested encoding, or does not match the method's response model.

    Attributes:
        request: Description of the originating request.
        response: The httpx Response object.
        cause: The underlying decoding or validation error.
    """

    def __init__(
        self,
        request: RequestDescription,
        cause: Exception,
        response: Response | None = None,
    ):
        self.request = request
        self.cause = cause
        self.response = response
        super().__init__(f'Could not decode response of {request}: {cause}')


class RequestCancelledError(YouTubePartnerError):
    """An in-flight request was aborted through its cancellation token.

    Attributes:
        request: Description of the cancelled request.
    """

    def __init__(self, request: RequestDescription):
        self.request = request
        super().__init__(f'Request cancelled: {request}')


class DiscoveryError(YouTubePartnerError):
    """Failed to load or interpret an API discovery document.

    Attributes:
        source: The source path or URL of the document.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | str | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load discovery document from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ConfigurationError(YouTubePartnerError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
