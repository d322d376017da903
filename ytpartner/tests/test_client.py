"""Test the resource-oriented client surface."""

import json
import logging

import httpx
import pytest

from ytpartner.client import Resource, YouTubePartner, rebase_table
from ytpartner.config import ClientConfig
from ytpartner.context import BearerTokenAuth, RequestContext
from ytpartner.descriptors import MethodDescriptor, index_descriptors
from ytpartner.exceptions import MissingRequiredParameterError

from ytpartner.tests.fixtures import (
    ASSET_GET,
    ASSET_LABELS_LIST,
    BASE_URL,
    REFERENCES_INSERT,
    SAMPLE_DISCOVERY,
    RecordingTransport,
)

TABLE = index_descriptors([ASSET_GET, ASSET_LABELS_LIST, REFERENCES_INSERT])


class TestResources:
    """Test resource and method lookup."""

    def test_builtin_table(self):
        """Test the default client exposes the youtubePartner v1 resources."""
        client = YouTubePartner()
        assert isinstance(client.assets, Resource)
        assert 'claimSearch' in client.resources
        assert client.descriptor('assets.get').url_template == f'{BASE_URL}assets/{{assetId}}'

    def test_sync_and_async_methods(self):
        """Test each method has a sync callable and an a-prefixed coroutine twin."""
        client = YouTubePartner(descriptors=TABLE)

        get = client.assets.get
        aget = client.assets.aget

        assert get.__name__ == 'get'
        assert aget.__name__ == 'aget'
        assert get.descriptor is ASSET_GET
        assert aget.descriptor is ASSET_GET

    def test_unknown_resource(self):
        """Test unknown resources raise AttributeError."""
        client = YouTubePartner(descriptors=TABLE)
        with pytest.raises(AttributeError, match='no resource'):
            client.videos

    def test_unknown_method(self):
        """Test unknown methods raise AttributeError."""
        client = YouTubePartner(descriptors=TABLE)
        with pytest.raises(AttributeError, match='no method'):
            client.assets.delete

    def test_dir_lists_resources_and_methods(self):
        """Test resources and methods are discoverable with dir()."""
        client = YouTubePartner(descriptors=TABLE)
        assert 'assets' in dir(client)
        assert {'get', 'aget'} <= set(dir(client.assets))

    def test_descriptor_lookup(self):
        """Test looking up descriptors by dotted name."""
        client = YouTubePartner(descriptors=TABLE)
        assert client.descriptor('references.insert') is REFERENCES_INSERT
        with pytest.raises(KeyError, match='Unknown operation'):
            client.descriptor('assets.delete')

    def test_shadowed_resource_name(self, caplog):
        """Test a resource named like a client attribute is reported and still reachable."""
        close_list = MethodDescriptor('close.list', f'{BASE_URL}close', 'GET')

        with caplog.at_level(logging.WARNING, logger='ytpartner.client'):
            client = YouTubePartner(descriptors=index_descriptors([close_list]))

        assert "Resource 'close' is shadowed" in caplog.text
        assert callable(client.close)
        assert client.resources['close'].list.descriptor is close_list


class TestCalls:
    """Test calls made through resource methods."""

    def test_sync_call(self):
        """Test a sync call goes through the client context."""
        transport = RecordingTransport(json_body={'id': 'A123'})
        context = RequestContext(
            auth=BearerTokenAuth('token-1'), http_client=httpx.Client(transport=transport)
        )
        client = YouTubePartner(context, TABLE)

        result = client.assets.get({'assetId': 'A123'})

        assert result == {'id': 'A123'}
        assert str(transport.last.url) == f'{BASE_URL}assets/A123'
        assert transport.last.headers['Authorization'] == 'Bearer token-1'

    def test_sync_call_missing_parameter(self):
        """Test caller errors are raised before the network."""
        transport = RecordingTransport()
        client = YouTubePartner(
            RequestContext(http_client=httpx.Client(transport=transport)), TABLE
        )

        with pytest.raises(MissingRequiredParameterError):
            client.assets.get()

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_async_call(self):
        """Test the a-prefixed method runs the call asynchronously."""
        transport = RecordingTransport(json_body={'items': []})
        client = YouTubePartner(
            RequestContext(async_http_client=httpx.AsyncClient(transport=transport)), TABLE
        )

        result = await client.assetLabels.alist({'onBehalfOfContentOwner': 'CO1'})

        assert result == {'items': []}
        assert transport.last.url.params['onBehalfOfContentOwner'] == 'CO1'


class TestRebaseTable:
    """Test rebase_table function."""

    def test_rebase(self):
        """Test URL templates are moved to a new root."""
        table = rebase_table(TABLE, 'https://www.googleapis.com/', 'http://localhost:9000/')

        assert (
            table['assets']['get'].url_template
            == 'http://localhost:9000/youtube/partner/v1/assets/{assetId}'
        )
        assert (
            table['references']['insert'].media_upload_url_template
            == 'http://localhost:9000/upload/youtube/partner/v1/references'
        )
        assert table['assets']['get'].required_params == ('assetId',)

    def test_same_root_unchanged(self):
        """Test rebasing onto the same root returns the table itself."""
        assert rebase_table(TABLE, 'a', 'a') is TABLE


class TestConstructors:
    """Test client constructors."""

    def test_from_config(self):
        """Test building a client from configuration."""
        config = ClientConfig(
            root_url='http://localhost:9000/', access_token='token-1', quota_user='u1'
        )

        client = YouTubePartner.from_config(config)

        assert client.descriptor('assets.get').url_template.startswith(
            'http://localhost:9000/youtube/partner/v1/'
        )
        assert isinstance(client.context.auth, BearerTokenAuth)
        assert client.context.quota_user == 'u1'
        assert client.context.http_client is not None
        client.close()
        assert client.context.http_client.is_closed

    def test_context_manager_closes_owned_clients(self):
        """Test the sync context manager closes the pooled client."""
        with YouTubePartner.from_config(ClientConfig()) as client:
            http_client = client.context.http_client
        assert http_client.is_closed

    @pytest.mark.asyncio
    async def test_sync_close_leaves_async_client_for_aclose(self):
        """Test close() releases the sync pool and aclose() the async one."""
        client = YouTubePartner.from_config(ClientConfig())
        context = client.context

        client.close()
        assert context.http_client.is_closed
        assert not context.async_http_client.is_closed

        await client.aclose()
        assert context.async_http_client.is_closed

    def test_close_leaves_injected_clients_open(self):
        """Test clients passed in by the caller are not closed."""
        http_client = httpx.Client(transport=RecordingTransport())
        client = YouTubePartner(RequestContext(http_client=http_client), TABLE)
        client.close()
        assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        """Test the async context manager closes both pooled clients."""
        async with YouTubePartner.from_config(ClientConfig()) as client:
            context = client.context
        assert context.http_client.is_closed
        assert context.async_http_client.is_closed

    def test_from_discovery(self, tmp_path):
        """Test building a client from a discovery document file."""
        path = tmp_path / 'youtubePartner.json'
        path.write_text(json.dumps(SAMPLE_DISCOVERY))

        client = YouTubePartner.from_discovery(str(path))

        assert set(client.resources) == {'assets', 'references', 'claims.history'}
        assert client.descriptor('claims.history.get').path_params == ('claimId',)
        assert client.references.insert.descriptor.supports_media
