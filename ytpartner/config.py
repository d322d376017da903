import json
import os
from pathlib import Path

from httpx import AsyncClient, Client
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ytpartner.context import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    APIKeyAuth,
    AuthProvider,
    BearerTokenAuth,
    RequestContext,
)
from ytpartner.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['ytpartner.yaml', 'ytpartner.yml']
DEFAULT_ROOT_URL = 'https://www.googleapis.com/'


class ClientConfig(BaseSettings):
    """Client settings, read from a file and/or ``YTPARTNER_*`` variables."""

    model_config = SettingsConfigDict(env_prefix='YTPARTNER_', extra='ignore')

    root_url: str = Field(
        DEFAULT_ROOT_URL, description='Root URL all API endpoints are relative to.'
    )

    timeout: float = Field(DEFAULT_TIMEOUT, description='Request timeout in seconds.')

    access_token: str | None = Field(
        None, description='OAuth 2.0 access token sent as a bearer token.'
    )

    api_key: str | None = Field(
        None, description='API key, used when no access token is configured.'
    )

    quota_user: str | None = Field(
        None, description='Value of the quotaUser parameter sent with every call.'
    )

    user_agent: str = Field(DEFAULT_USER_AGENT, description='User-Agent header.')

    headers: dict[str, str] = Field(
        default_factory=dict, description='Extra headers sent with every call.'
    )

    def auth_provider(self) -> AuthProvider | None:
        if self.access_token:
            return BearerTokenAuth(self.access_token)
        if self.api_key:
            return APIKeyAuth(self.api_key)
        return None

    def to_context(
        self,
        http_client: Client | None = None,
        async_http_client: AsyncClient | None = None,
    ) -> RequestContext:
        return RequestContext(
            auth=self.auth_provider(),
            headers=self.headers,
            timeout=self.timeout,
            user_agent=self.user_agent,
            quota_user=self.quota_user,
            http_client=http_client,
            async_http_client=async_http_client,
        )


def load_yaml(path: str | Path) -> dict:
    import yaml

    try:
        return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Malformed YAML: {e}', str(path)) from e


def load_json(path: str | Path) -> dict:
    try:
        return json.loads(Path(path).read_text())
    except json.JSONDecodeError as e:
        raise ConfigurationError(f'Malformed JSON: {e}', str(path)) from e


def _validate(data: dict | None, path: str | Path) -> ClientConfig:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', str(path))
    try:
        return ClientConfig(**data)
    except ValidationError as e:
        field = '.'.join(str(part) for part in e.errors()[0]['loc']) or None
        raise ConfigurationError('Invalid configuration', str(path), field) from e


def get_config(path: str | None = None) -> ClientConfig:
    """Load configuration from a file, pyproject.toml or the environment.

    Values from a file take precedence over ``YTPARTNER_*`` environment
    variables.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', path)
        if Path(path).suffix.lower() == '.json':
            return _validate(load_json(path), path)
        return _validate(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _validate(load_yaml(path), path)

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        pyproject = tomllib.loads(path.read_text())
        tools = pyproject.get('tool', {})

        if 'ytpartner' in tools:
            return _validate(tools['ytpartner'], path)

    return ClientConfig()
