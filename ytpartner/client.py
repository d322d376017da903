"""Client surface for the YouTube Content ID API.

Every resource of the descriptor table is an attribute of the client and
every method a callable on it::

    client = YouTubePartner.from_config()
    asset = client.assets.get({'assetId': 'A123'})
    asset = await client.assets.aget({'assetId': 'A123'})

Sync methods keep the API's method names; their coroutine twins carry an
``a`` prefix.
"""

import asyncio
import dataclasses
import logging
from collections.abc import Callable, Mapping
from typing import Any

from httpx import AsyncClient, Client

from ytpartner.apis import youtube_partner_v1
from ytpartner.config import ClientConfig
from ytpartner.context import RequestContext
from ytpartner.descriptors import DescriptorTable, MethodDescriptor
from ytpartner.dispatcher import Callback, abuild_and_dispatch, build_and_dispatch
from ytpartner.discovery import build_descriptor_table, load_discovery
from ytpartner.options import RequestOptions

__all__ = ('Resource', 'YouTubePartner', 'rebase_table')

logger = logging.getLogger(__name__)


def _sync_method(descriptor: MethodDescriptor, context: RequestContext) -> Callable:
    def method(
        params: Mapping[str, Any] | None = None,
        *,
        options: RequestOptions | None = None,
        callback: Callback | None = None,
    ) -> Any:
        return build_and_dispatch(descriptor, params, options, context, callback)

    method.__name__ = descriptor.method_name
    method.__qualname__ = descriptor.name
    method.__doc__ = descriptor.description
    method.descriptor = descriptor
    return method


def _async_method(descriptor: MethodDescriptor, context: RequestContext) -> Callable:
    async def method(
        params: Mapping[str, Any] | None = None,
        *,
        options: RequestOptions | None = None,
        callback: Callback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> Any:
        return await abuild_and_dispatch(
            descriptor, params, options, context, callback, cancel_event
        )

    method.__name__ = f'a{descriptor.method_name}'
    method.__qualname__ = f'{descriptor.resource_name}.a{descriptor.method_name}'
    method.__doc__ = descriptor.description
    method.descriptor = descriptor
    return method


class Resource:
    """The methods of one API resource, bound to a request context."""

    def __init__(
        self,
        name: str,
        methods: Mapping[str, MethodDescriptor],
        context: RequestContext,
    ):
        self.name = name
        self.methods = dict(methods)
        self._context = context

    def __getattr__(self, attr: str) -> Callable:
        methods = self.__dict__.get('methods', {})
        if attr in methods:
            return _sync_method(methods[attr], self._context)
        if attr.startswith('a') and attr[1:] in methods:
            return _async_method(methods[attr[1:]], self._context)
        raise AttributeError(f"Resource '{self.__dict__.get('name')}' has no method '{attr}'")

    def __dir__(self) -> list[str]:
        names = list(super().__dir__())
        for method in self.methods:
            names.extend([method, f'a{method}'])
        return sorted(names)

    def __repr__(self) -> str:
        return f'Resource({self.name!r}, methods={sorted(self.methods)})'


def rebase_table(table: DescriptorTable, old_root: str, new_root: str) -> DescriptorTable:
    """Point every URL template that starts with ``old_root`` at ``new_root``."""
    if old_root == new_root:
        return table

    def rebase(url: str | None) -> str | None:
        if url is not None and url.startswith(old_root):
            return new_root + url[len(old_root):]
        return url

    return {
        resource: {
            name: dataclasses.replace(
                descriptor,
                url_template=rebase(descriptor.url_template),
                media_upload_url_template=rebase(descriptor.media_upload_url_template),
            )
            for name, descriptor in methods.items()
        }
        for resource, methods in table.items()
    }


class YouTubePartner:
    """Client for the YouTube Content ID API.

    Resources are attributes of the client. A resource whose name collides
    with a client attribute (``close``, ``context``, ``descriptor``, ...) is
    only reachable through :attr:`resources`.

    Clients built by :meth:`from_config` own a sync and an async httpx
    client. ``close()`` and ``with`` release only the sync one; use
    ``aclose()`` or ``async with`` when the async methods are used.

    Args:
        context: Credentials and transport settings shared by all calls.
        descriptors: Descriptor table to expose. Defaults to the built-in
            youtubePartner v1 table.
    """

    def __init__(
        self,
        context: RequestContext | None = None,
        descriptors: DescriptorTable | None = None,
    ) -> None:
        self.context = context or RequestContext()
        self.descriptors = descriptors if descriptors is not None else youtube_partner_v1.TABLE
        self._resources = {
            name: Resource(name, methods, self.context)
            for name, methods in self.descriptors.items()
        }
        self._owned_clients: list[Client | AsyncClient] = []

        for name in self._resources:
            if name in vars(self) or hasattr(type(self), name):
                logger.warning(
                    f"Resource '{name}' is shadowed by a client attribute; "
                    f"use client.resources['{name}']"
                )

    @classmethod
    def from_config(
        cls, config: ClientConfig | None = None, descriptors: DescriptorTable | None = None
    ) -> 'YouTubePartner':
        """Build a client from configuration, with its own pooled httpx clients."""
        config = config or ClientConfig()
        http_client = Client()
        async_http_client = AsyncClient()
        context = config.to_context(
            http_client=http_client, async_http_client=async_http_client
        )
        if descriptors is None:
            descriptors = rebase_table(
                youtube_partner_v1.TABLE, youtube_partner_v1.ROOT_URL, config.root_url
            )
        client = cls(context, descriptors)
        client._owned_clients = [http_client, async_http_client]
        return client

    @classmethod
    def from_discovery(
        cls,
        source: str,
        context: RequestContext | None = None,
        http_client: Client | None = None,
    ) -> 'YouTubePartner':
        """Build a client over the methods of a discovery document."""
        document = load_discovery(source, http_client=http_client)
        return cls(context, build_descriptor_table(document))

    @property
    def resources(self) -> dict[str, Resource]:
        return dict(self._resources)

    def descriptor(self, operation: str) -> MethodDescriptor:
        """Look up a descriptor by its dotted name, e.g. ``assets.get``."""
        resource, _, method = operation.rpartition('.')
        try:
            return self.descriptors[resource][method]
        except KeyError:
            raise KeyError(f'Unknown operation: {operation}') from None

    def __getattr__(self, attr: str) -> Resource:
        resources = self.__dict__.get('_resources', {})
        if attr in resources:
            return resources[attr]
        raise AttributeError(f"'{type(self).__name__}' has no resource '{attr}'")

    def __dir__(self) -> list[str]:
        return sorted([*super().__dir__(), *self._resources])

    def close(self) -> None:
        """Close the owned sync httpx client.

        httpx closes an AsyncClient only from a coroutine, so the owned async
        client stays open until :meth:`aclose`.
        """
        for http_client in self._owned_clients:
            if isinstance(http_client, Client):
                http_client.close()

    async def aclose(self) -> None:
        """Close every httpx client this client created."""
        for http_client in self._owned_clients:
            if isinstance(http_client, AsyncClient):
                await http_client.aclose()
            else:
                http_client.close()

    def __enter__(self) -> 'YouTubePartner':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> 'YouTubePartner':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
