"""Test fixtures for ytpartner tests.

This module provides sample descriptors, a trimmed discovery document and a
recording transport that stands in for the network.
"""

import json

import httpx

from ytpartner.descriptors import MethodDescriptor

BASE_URL = 'https://www.googleapis.com/youtube/partner/v1/'

ASSET_GET = MethodDescriptor(
    name='assets.get',
    url_template=f'{BASE_URL}assets/{{assetId}}',
    http_method='GET',
    required_params=('assetId',),
    path_params=('assetId',),
)

ASSET_LABELS_LIST = MethodDescriptor(
    name='assetLabels.list',
    url_template=f'{BASE_URL}assetLabels',
    http_method='GET',
)

REFERENCES_INSERT = MethodDescriptor(
    name='references.insert',
    url_template=f'{BASE_URL}references',
    http_method='POST',
    media_upload_url_template='https://www.googleapis.com/upload/youtube/partner/v1/references',
)

GOOGLE_NOT_FOUND = {
    'error': {
        'code': 404,
        'message': 'Asset not found.',
        'errors': [
            {'domain': 'global', 'reason': 'notFound', 'message': 'Asset not found.'}
        ],
    }
}

# Trimmed discovery document in the shape Google publishes
SAMPLE_DISCOVERY = {
    'kind': 'discovery#restDescription',
    'name': 'youtubePartner',
    'version': 'v1',
    'rootUrl': 'https://www.googleapis.com/',
    'servicePath': 'youtube/partner/v1/',
    'resources': {
        'assets': {
            'methods': {
                'get': {
                    'id': 'youtubePartner.assets.get',
                    'path': 'assets/{assetId}',
                    'httpMethod': 'GET',
                    'description': 'Retrieves the metadata for the specified asset.',
                    'parameters': {
                        'assetId': {
                            'type': 'string',
                            'required': True,
                            'location': 'path',
                        },
                        'fetchMetadata': {'type': 'string', 'location': 'query'},
                        'onBehalfOfContentOwner': {
                            'type': 'string',
                            'location': 'query',
                        },
                    },
                    'parameterOrder': ['assetId'],
                },
                'list': {
                    'id': 'youtubePartner.assets.list',
                    'path': 'assets',
                    'httpMethod': 'GET',
                    'parameters': {
                        'id': {'type': 'string', 'required': True, 'location': 'query'},
                    },
                    'parameterOrder': ['id'],
                },
            }
        },
        'references': {
            'methods': {
                'insert': {
                    'id': 'youtubePartner.references.insert',
                    'path': 'references',
                    'httpMethod': 'POST',
                    'parameters': {
                        'claimId': {'type': 'string', 'location': 'query'},
                    },
                    'supportsMediaUpload': True,
                    'mediaUpload': {
                        'accept': ['*/*'],
                        'protocols': {
                            'simple': {
                                'multipart': True,
                                'path': '/upload/youtube/partner/v1/references',
                            },
                        },
                    },
                }
            }
        },
        'claims': {
            'methods': {
                'broken': {'id': 'youtubePartner.claims.broken', 'httpMethod': 'GET'},
            },
            'resources': {
                'history': {
                    'methods': {
                        'get': {
                            'path': 'claims/{claimId}/history',
                            'httpMethod': 'GET',
                            'parameters': {
                                'claimId': {
                                    'type': 'string',
                                    'required': True,
                                    'location': 'path',
                                },
                            },
                            'parameterOrder': ['claimId'],
                        }
                    }
                }
            },
        },
    },
}


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records every request it receives.

    Each request is answered with ``status_code`` and ``json_body`` unless a
    ``handler`` is given.
    """

    def __init__(self, status_code=200, json_body=None, handler=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json_body = {'kind': 'youtubePartner#asset'} if json_body is None else json_body
        self._respond = handler or self._default_response
        super().__init__(self._record)

    def _default_response(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(self.status_code, json=self.json_body)

    def _record(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)
