"""ytpartner - a client for the YouTube Content ID (partner) API.

Every API method is described by a MethodDescriptor (URL template, HTTP
verb, required and path parameters, media upload URL). Calls go through one
request builder and dispatcher built on httpx: parameters are validated
before any network I/O, path values are percent-encoded into the URL, the
remaining parameters go to the query string and ``resource`` is sent as the
JSON body.

Quick Start:
    >>> from ytpartner import ClientConfig, YouTubePartner
    >>>
    >>> client = YouTubePartner.from_config(ClientConfig(access_token='...'))
    >>> asset = client.assets.get({'assetId': 'A123'})
    >>> labels = await client.assetLabels.alist({'onBehalfOfContentOwner': 'CO1'})

CLI Usage:
    $ ytpartner methods assets
    $ ytpartner call assets.get -p assetId=A123
"""

from ytpartner._version import version as __version__
from ytpartner.client import Resource, YouTubePartner
from ytpartner.config import ClientConfig, get_config
from ytpartner.context import APIKeyAuth, AuthProvider, BearerTokenAuth, RequestContext
from ytpartner.descriptors import MethodDescriptor
from ytpartner.dispatcher import (
    PreparedRequest,
    abuild_and_dispatch,
    build_and_dispatch,
    build_request,
)
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
from ytpartner.options import RequestOptions, merge
from ytpartner.parameters import MediaUpload, classify
from ytpartner.templating import render

__all__ = [
    # Client
    'YouTubePartner',
    'Resource',
    # Request core
    'MethodDescriptor',
    'RequestOptions',
    'RequestContext',
    'MediaUpload',
    'PreparedRequest',
    'classify',
    'render',
    'merge',
    'build_request',
    'build_and_dispatch',
    'abuild_and_dispatch',
    # Authentication
    'AuthProvider',
    'BearerTokenAuth',
    'APIKeyAuth',
    # Configuration
    'ClientConfig',
    'get_config',
    # Exceptions
    'YouTubePartnerError',
    'RequestBuildError',
    'MissingRequiredParameterError',
    'TemplateResolutionError',
    'InvalidDescriptorError',
    'APIError',
    'RequestCancelledError',
    'RequestDescription',
    'ResponseDecodeError',
    'DiscoveryError',
    'ConfigurationError',
    '__version__',
]
