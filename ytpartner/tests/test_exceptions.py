"""Test the ytpartner exception hierarchy."""

import httpx
import pytest

from ytpartner.exceptions import (
    APIError,
    ConfigurationError,
    DiscoveryError,
    InvalidDescriptorError,
    MissingRequiredParameterError,
    RequestBuildError,
    RequestCancelledError,
    RequestDescription,
    ResponseDecodeError,
    TemplateResolutionError,
    YouTubePartnerError,
)

from ytpartner.tests.fixtures import GOOGLE_NOT_FOUND

REQUEST = RequestDescription(
    'assets.get', 'GET', 'https://www.googleapis.com/youtube/partner/v1/assets/A1'
)


class TestYouTubePartnerError:
    """Tests for the base exception."""

    def test_basic_message(self):
        """Test that the error stores the message."""
        error = YouTubePartnerError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    @pytest.mark.parametrize(
        'error',
        [
            RequestBuildError('x'),
            MissingRequiredParameterError('assetId'),
            TemplateResolutionError('{a}', 'a'),
            InvalidDescriptorError('x.get', 'bad'),
            APIError('x', status_code=500),
            RequestCancelledError(REQUEST),
            ResponseDecodeError(REQUEST, ValueError('bad')),
            DiscoveryError('doc.json'),
            ConfigurationError('bad'),
        ],
    )
    def test_hierarchy(self, error):
        """Test every error can be caught as YouTubePartnerError."""
        assert isinstance(error, YouTubePartnerError)

    def test_caller_errors(self):
        """Test errors raised before the network derive from RequestBuildError."""
        assert issubclass(MissingRequiredParameterError, RequestBuildError)
        assert issubclass(TemplateResolutionError, RequestBuildError)
        assert not issubclass(APIError, RequestBuildError)


class TestRequestBuildErrors:
    """Tests for caller errors."""

    def test_missing_parameter(self):
        error = MissingRequiredParameterError('assetId', 'assets.get')
        assert error.parameter == 'assetId'
        assert str(error) == "Missing required parameter 'assetId' for assets.get"

    def test_missing_parameter_without_operation(self):
        assert str(MissingRequiredParameterError('assetId')) == (
            "Missing required parameter 'assetId'"
        )

    def test_template_resolution(self):
        error = TemplateResolutionError('assets/{assetId}', 'assetId')
        assert error.placeholder == 'assetId'
        assert "'{assetId}'" in str(error)

    def test_invalid_descriptor(self):
        error = InvalidDescriptorError('x.head', 'unsupported')
        assert error.name == 'x.head'
        assert str(error) == "Invalid method descriptor 'x.head': unsupported"


class TestAPIError:
    """Tests for APIError."""

    def test_from_google_error_envelope(self):
        """Test the error object of a Google error body is extracted."""
        response = httpx.Response(404, json=GOOGLE_NOT_FOUND)

        error = APIError.from_response(response, REQUEST)

        assert error.status_code == 404
        assert error.detail == GOOGLE_NOT_FOUND['error']
        assert error.reason == 'notFound'
        assert error.response is response
        assert error.request is REQUEST
        assert str(error) == (
            'HTTP 404 Error: Asset not found. '
            '[assets.get (GET https://www.googleapis.com/youtube/partner/v1/assets/A1)]'
        )

    def test_from_text_response(self):
        """Test non-JSON bodies are kept as text."""
        response = httpx.Response(502, text='Bad Gateway')

        error = APIError.from_response(response)

        assert error.detail == 'Bad Gateway'
        assert error.body == 'Bad Gateway'
        assert error.reason is None
        assert str(error) == 'HTTP 502 Error: Bad Gateway'

    def test_from_empty_response(self):
        error = APIError.from_response(httpx.Response(500))
        assert error.detail is None
        assert str(error) == 'HTTP 500 Error'

    def test_repr(self):
        error = APIError('x', status_code=403, detail={'message': 'Forbidden'})
        assert repr(error) == "APIError(status_code=403, detail={'message': 'Forbidden'})"


class TestOtherErrors:
    """Tests for the remaining errors."""

    def test_cancelled(self):
        error = RequestCancelledError(REQUEST)
        assert error.request is REQUEST
        assert str(error).startswith('Request cancelled: assets.get (GET ')

    def test_discovery_error(self):
        cause = FileNotFoundError('nope')
        error = DiscoveryError('doc.json', cause)
        assert error.cause is cause
        assert str(error) == "Failed to load discovery document from 'doc.json': nope"

    def test_configuration_error(self):
        error = ConfigurationError('Invalid configuration', 'cfg.yaml', 'timeout')
        assert error.config_path == 'cfg.yaml'
        assert error.field == 'timeout'
        assert str(error) == "Invalid configuration in 'cfg.yaml' (field: timeout)"

    def test_response_decode_error(self):
        cause = ValueError('Expecting value')
        response = httpx.Response(200, content=b'{not json')
        error = ResponseDecodeError(REQUEST, cause, response)
        assert error.cause is cause
        assert error.response is response
        assert str(error).startswith('Could not decode response of assets.get (GET ')
        assert str(error).endswith(': Expecting value')
