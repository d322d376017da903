"""Method descriptors: the static description of one API operation.

A descriptor records everything needed to turn call parameters into an HTTP
request: the URL template, the HTTP verb, which parameters are required and
which are substituted into the path, and where media uploads go. Descriptors
are built once, when the descriptor table is loaded, and never mutated.
"""

from dataclasses import dataclass, field
from typing import Any

from ytpartner.exceptions import InvalidDescriptorError
from ytpartner.templating import placeholders

HTTP_METHODS = ('GET', 'POST', 'PUT', 'PATCH', 'DELETE')

# Keys of the call parameters that never reach the query string.
RESOURCE_KEY = 'resource'
MEDIA_KEY = 'media'
RESERVED_KEYS = frozenset({RESOURCE_KEY, MEDIA_KEY})


@dataclass(frozen=True)
class MethodDescriptor:
    """Declarative description of a single API method.

    Attributes:
        name: Logical operation name, e.g. ``assets.get``.
        url_template: Absolute URL with ``{name}`` placeholders.
        http_method: One of GET, POST, PUT, PATCH, DELETE.
        required_params: Required parameter names, in declaration order.
        path_params: Parameter names substituted into the URL template.
        media_upload_url_template: URL template used instead of
            ``url_template`` when a media payload is supplied.
        query_params: Optional query parameters the API documents. Used for
            listings only; undeclared parameters are still sent.
        description: Human readable summary of the method.
        response_model: Type the parsed JSON response is validated against.
            ``None`` returns the decoded JSON unchanged.
    """

    name: str
    url_template: str
    http_method: str
    required_params: tuple[str, ...] = ()
    path_params: tuple[str, ...] = ()
    media_upload_url_template: str | None = None
    query_params: tuple[str, ...] = ()
    description: str | None = None
    response_model: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        method = self.http_method.upper()
        if method not in HTTP_METHODS:
            raise InvalidDescriptorError(
                self.name, f'unsupported HTTP method {self.http_method!r}'
            )
        object.__setattr__(self, 'http_method', method)
        object.__setattr__(self, 'required_params', tuple(self.required_params))
        object.__setattr__(self, 'path_params', tuple(self.path_params))
        object.__setattr__(self, 'query_params', tuple(self.query_params))

        declared = set(placeholders(self.url_template))
        for param in self.path_params:
            if param not in declared:
                raise InvalidDescriptorError(
                    self.name,
                    f"path parameter '{param}' does not appear in '{self.url_template}'",
                )
        for param in self.path_params + self.required_params:
            if param in RESERVED_KEYS:
                raise InvalidDescriptorError(
                    self.name, f"'{param}' is a reserved parameter name"
                )

    @property
    def supports_media(self) -> bool:
        return self.media_upload_url_template is not None

    @property
    def resource_name(self) -> str:
        return self.name.rsplit('.', 1)[0]

    @property
    def method_name(self) -> str:
        return self.name.rsplit('.', 1)[-1]


DescriptorTable = dict[str, dict[str, MethodDescriptor]]


def index_descriptors(descriptors: list[MethodDescriptor]) -> DescriptorTable:
    """Group descriptors by resource, keeping declaration order."""
    table: DescriptorTable = {}
    for descriptor in descriptors:
        methods = table.setdefault(descriptor.resource_name, {})
        if descriptor.method_name in methods:
            raise InvalidDescriptorError(descriptor.name, 'declared more than once')
        methods[descriptor.method_name] = descriptor
    return table
