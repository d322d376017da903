"""Request building and dispatch.

Every API method goes through :func:`build_and_dispatch` (or its coroutine
twin :func:`abuild_and_dispatch`). Building classifies the call parameters,
merges options, renders the URL and attaches credentials; all of it happens
before any network I/O, so caller errors never produce traffic. Dispatch
executes the request over httpx and parses the response.

Nothing here retries. Server errors surface as APIError and undecodable
success bodies as ResponseDecodeError. Transport errors from httpx surface
unchanged with a note naming the request.
"""

import asyncio
import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from httpx import AsyncClient, Client, HTTPError, Response
from pydantic import BaseModel, RootModel, TypeAdapter

from ytpartner.context import RequestContext
from ytpartner.descriptors import MethodDescriptor
from ytpartner.exceptions import (
    APIError,
    RequestBuildError,
    RequestCancelledError,
    RequestDescription,
    ResponseDecodeError,
    YouTubePartnerError,
)
from ytpartner.media import encode_media
from ytpartner.options import RequestOptions, merge
from ytpartner.parameters import classify
from ytpartner.templating import render

__all__ = (
    'Callback',
    'PreparedRequest',
    'abuild_and_dispatch',
    'adispatch',
    'build_and_dispatch',
    'build_request',
    'default_options',
    'dispatch',
)

logger = logging.getLogger(__name__)

Callback = Callable[[Exception | None, Any, Response | None], None]


@dataclass(frozen=True)
class PreparedRequest:
    """A fully resolved request, ready to hand to the transport."""

    operation: str
    method: str
    url: str
    params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None
    content: bytes | None = None
    timeout: float | None = None
    encoding: str | None = None
    response_model: Any = None

    @property
    def description(self) -> RequestDescription:
        return RequestDescription(self.operation, self.method, self.url)


def default_options(
    descriptor: MethodDescriptor, context: RequestContext
) -> RequestOptions:
    """Options a call starts from before caller overrides are applied."""
    return RequestOptions(
        url=descriptor.url_template,
        method=descriptor.http_method,
        headers=context.default_headers(),
        timeout=context.timeout,
    )


def _serialize_resource(resource: Any) -> Any:
    if isinstance(resource, BaseModel):
        return resource.model_dump(mode='json', by_alias=True, exclude_none=True)
    return resource


def build_request(
    descriptor: MethodDescriptor,
    params: Mapping[str, Any] | None = None,
    options: RequestOptions | None = None,
    context: RequestContext | None = None,
) -> PreparedRequest:
    """Resolve a call into a PreparedRequest without sending anything.

    Raises:
        MissingRequiredParameterError: If a required parameter is absent.
        TemplateResolutionError: If a URL placeholder has no value.
        RequestBuildError: If media is supplied to a method without uploads.
    """
    context = context or RequestContext()
    classified = classify(descriptor, params)
    final = merge(default_options(descriptor, context), options)

    url_template = final.url
    if classified.media is not None:
        if options is None or options.url is None:
            if not descriptor.supports_media:
                raise RequestBuildError(
                    f'{descriptor.name} does not accept media uploads'
                )
            url_template = descriptor.media_upload_url_template
    url = render(url_template, classified.path)

    headers = dict(final.headers or {})
    query = dict(classified.query)
    if context.quota_user:
        query.setdefault('quotaUser', context.quota_user)
    if context.auth is not None:
        context.auth.apply(headers, query)

    resource = _serialize_resource(classified.resource)
    json_body = None
    content = None
    if classified.media is not None:
        upload_type, content, content_type = encode_media(classified.media, resource)
        query['uploadType'] = upload_type
        headers['Content-Type'] = content_type
    elif resource is not None:
        json_body = resource

    return PreparedRequest(
        operation=descriptor.name,
        method=final.method.upper(),
        url=url,
        params=query,
        headers=headers,
        json=json_body,
        content=content,
        timeout=final.timeout,
        encoding=final.encoding,
        response_model=descriptor.response_model,
    )


def _request_kwargs(request: PreparedRequest) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        'params': request.params or None,
        'headers': request.headers,
        'timeout': request.timeout,
    }
    if request.content is not None:
        kwargs['content'] = request.content
    elif request.json is not None:
        kwargs['json'] = request.json
    return kwargs


def _send(context: RequestContext, request: PreparedRequest) -> Response:
    if context.http_client is not None:
        return context.http_client.request(
            request.method, request.url, **_request_kwargs(request)
        )
    with Client() as client:
        return client.request(request.method, request.url, **_request_kwargs(request))


async def _asend(context: RequestContext, request: PreparedRequest) -> Response:
    if context.async_http_client is not None:
        return await context.async_http_client.request(
            request.method, request.url, **_request_kwargs(request)
        )
    async with AsyncClient() as client:
        return await client.request(
            request.method, request.url, **_request_kwargs(request)
        )


async def _asend_cancellable(
    context: RequestContext,
    request: PreparedRequest,
    cancel_event: asyncio.Event | None,
) -> Response:
    if cancel_event is None:
        return await _asend(context, request)
    if cancel_event.is_set():
        raise RequestCancelledError(request.description)

    send = asyncio.ensure_future(_asend(context, request))
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        done, _ = await asyncio.wait(
            {send, waiter}, return_when=asyncio.FIRST_COMPLETED
        )
        if send in done:
            return send.result()
        logger.debug(f'Cancelled {request.description}')
        raise RequestCancelledError(request.description)
    finally:
        for task in (send, waiter):
            if not task.done():
                task.cancel()


def _decode_body(request: PreparedRequest, response: Response) -> Any:
    if request.encoding:
        response.encoding = request.encoding
    if not response.content:
        return None
    if 'json' not in response.headers.get('content-type', 'application/json'):
        return response.text
    if request.encoding:
        data = json.loads(response.text)
    else:
        data = response.json()

    if request.response_model is None:
        return data
    validated = TypeAdapter(request.response_model).validate_python(data)
    if isinstance(validated, RootModel):
        return validated.root
    return validated


def _parse_response(request: PreparedRequest, response: Response) -> Any:
    if response.is_error:
        logger.warning(f'{request.description} failed with HTTP {response.status_code}')
        raise APIError.from_response(response, request.description)

    try:
        return _decode_body(request, response)
    # ValueError covers JSONDecodeError, UnicodeDecodeError and ValidationError
    except (ValueError, LookupError) as e:
        logger.warning(f'{request.description} returned an undecodable body: {e}')
        raise ResponseDecodeError(request.description, e, response) from e


def _complete(
    callback: Callback | None,
    error: Exception | None,
    result: Any = None,
    response: Response | None = None,
) -> Any:
    if callback is None:
        if error is not None:
            raise error
        return result
    callback(error, result, response)
    return result


def _note_transport_error(error: HTTPError, request: PreparedRequest) -> None:
    error.add_note(f'while requesting {request.description}')


def dispatch(
    context: RequestContext,
    request: PreparedRequest,
    callback: Callback | None = None,
) -> Any:
    """Execute a prepared request and return the parsed response body.

    With a callback, the outcome is delivered as ``callback(error, body,
    response)`` instead of being raised or returned alone.
    """
    logger.debug(f'{request.operation}: {request.method} {request.url}')
    try:
        response = _send(context, request)
    except HTTPError as e:
        _note_transport_error(e, request)
        return _complete(callback, e)
    try:
        result = _parse_response(request, response)
    except (APIError, ResponseDecodeError) as e:
        return _complete(callback, e, response=response)
    return _complete(callback, None, result, response)


async def adispatch(
    context: RequestContext,
    request: PreparedRequest,
    callback: Callback | None = None,
    cancel_event: asyncio.Event | None = None,
) -> Any:
    """Async version of :func:`dispatch`.

    Setting ``cancel_event`` while the request is in flight aborts it and
    fails the call with RequestCancelledError.
    """
    logger.debug(f'{request.operation}: {request.method} {request.url}')
    try:
        response = await _asend_cancellable(context, request, cancel_event)
    except HTTPError as e:
        _note_transport_error(e, request)
        return _complete(callback, e)
    except RequestCancelledError as e:
        return _complete(callback, e)
    try:
        result = _parse_response(request, response)
    except (APIError, ResponseDecodeError) as e:
        return _complete(callback, e, response=response)
    return _complete(callback, None, result, response)


def build_and_dispatch(
    descriptor: MethodDescriptor,
    params: Mapping[str, Any] | None = None,
    options: RequestOptions | None = None,
    context: RequestContext | None = None,
    callback: Callback | None = None,
) -> Any:
    """Validate, build and execute one API call.

    Caller errors are reported before any network I/O: raised, or passed to
    ``callback`` when one is given.
    """
    context = context or RequestContext()
    try:
        request = build_request(descriptor, params, options, context)
    except YouTubePartnerError as e:
        return _complete(callback, e)
    return dispatch(context, request, callback)


async def abuild_and_dispatch(
    descriptor: MethodDescriptor,
    params: Mapping[str, Any] | None = None,
    options: RequestOptions | None = None,
    context: RequestContext | None = None,
    callback: Callback | None = None,
    cancel_event: asyncio.Event | None = None,
) -> Any:
    """Async version of :func:`build_and_dispatch`."""
    context = context or RequestContext()
    try:
        request = build_request(descriptor, params, options, context)
    except YouTubePartnerError as e:
        return _complete(callback, e)
    return await adispatch(context, request, callback, cancel_event)
