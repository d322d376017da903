"""Loading method descriptors from Google API discovery documents.

A discovery document describes every resource and method of an API in JSON.
This module reads one from a URL or file path and turns its methods into a
descriptor table, so the table can be regenerated from the API description
instead of being maintained by hand.
"""

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

import httpx
import yaml

from ytpartner.descriptors import DescriptorTable, MethodDescriptor, index_descriptors
from ytpartner.exceptions import DiscoveryError, InvalidDescriptorError
from ytpartner.utils import is_url

__all__ = ('build_descriptor_table', 'descriptors_from_discovery', 'load_discovery')

logger = logging.getLogger(__name__)


def load_discovery(source: str, http_client: httpx.Client | None = None) -> dict:
    """Load a discovery document from a URL or file path.

    Args:
        source: URL or path of a JSON (or YAML) discovery document.
        http_client: Optional HTTP client to use for URL requests.

    Raises:
        DiscoveryError: If the document cannot be fetched or parsed.
    """
    try:
        if is_url(source):
            if http_client:
                response = http_client.get(source)
            else:
                response = httpx.get(source, follow_redirects=True, timeout=30.0)
            response.raise_for_status()
            content = response.text
            is_yaml = 'yaml' in response.headers.get('content-type', '')
        else:
            path = Path(source)
            if not path.exists():
                raise DiscoveryError(source, FileNotFoundError(f'File not found: {path}'))
            content = path.read_text(encoding='utf-8')
            is_yaml = path.suffix.lower() in ('.yaml', '.yml')
        document = yaml.safe_load(content) if is_yaml else json.loads(content)
    except DiscoveryError:
        raise
    except (httpx.HTTPError, OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise DiscoveryError(source, cause=e) from e

    if not isinstance(document, dict) or 'resources' not in document:
        raise DiscoveryError(source, 'document has no resources')
    return document


def _base_url(document: dict) -> tuple[str, str]:
    if 'baseUrl' in document:
        base_url = document['baseUrl']
        root_url = document.get('rootUrl', base_url)
    else:
        root_url = document.get('rootUrl', '')
        base_url = urljoin(root_url, document.get('servicePath', ''))
    return root_url, base_url


def _method_descriptor(
    name: str, method: dict[str, Any], root_url: str, base_url: str
) -> MethodDescriptor:
    parameters: dict[str, dict] = method.get('parameters', {})
    order = list(method.get('parameterOrder', []))

    required = [p for p in order if parameters.get(p, {}).get('required')]
    required += [
        p for p, spec in parameters.items() if spec.get('required') and p not in required
    ]
    path_params = [p for p, spec in parameters.items() if spec.get('location') == 'path']
    query_params = [p for p, spec in parameters.items() if spec.get('location') == 'query']

    media_path = (
        method.get('mediaUpload', {}).get('protocols', {}).get('simple', {}).get('path')
    )
    media_url = urljoin(root_url, media_path.lstrip('/')) if media_path else None

    return MethodDescriptor(
        name=name,
        url_template=base_url + method['path'],
        http_method=method['httpMethod'],
        required_params=tuple(required),
        path_params=tuple(path_params),
        media_upload_url_template=media_url,
        query_params=tuple(query_params),
        description=method.get('description'),
    )


def _collect(
    resources: dict[str, Any], prefix: str, root_url: str, base_url: str
) -> list[MethodDescriptor]:
    descriptors: list[MethodDescriptor] = []
    for resource_name, resource in resources.items():
        qualified = f'{prefix}{resource_name}'
        for method_name, method in resource.get('methods', {}).items():
            name = f'{qualified}.{method_name}'
            try:
                descriptors.append(_method_descriptor(name, method, root_url, base_url))
            except (KeyError, InvalidDescriptorError) as e:
                logger.warning(f'Skipping method {name}: {e}')
        descriptors.extend(
            _collect(resource.get('resources', {}), f'{qualified}.', root_url, base_url)
        )
    return descriptors


def descriptors_from_discovery(document: dict) -> list[MethodDescriptor]:
    """All method descriptors of a discovery document, nested resources included."""
    root_url, base_url = _base_url(document)
    return _collect(document.get('resources', {}), '', root_url, base_url)


def build_descriptor_table(document: dict) -> DescriptorTable:
    """Descriptor table of a discovery document, grouped by resource."""
    return index_descriptors(descriptors_from_discovery(document))
