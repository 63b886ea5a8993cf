"""
Defines the types flowing through the request pipeline.

A request is described by `Request`, and resolves to a `Result`: either a
`Response` carrying the payload, or a `FailedResponse` when the log gateway
chose to suppress an error. Both variants expose `ok` so callers can branch
without type checks.
"""

from dataclasses import dataclass
import json
from typing import Any, ClassVar, Optional, Union

import requests


@dataclass(frozen=True)
class Request:
    """
    A logical request against the API, independent of base URL and auth.
    """

    path: str
    """
    The resource path, relative to the base URL. E.g., "users/octocat/repos".
    """

    method: str = 'GET'
    """
    The HTTP method of the request.
    """

    page: Optional[int] = None
    """
    The page to request, sent as the `page` query parameter.
    """

    per_page: Optional[int] = None
    """
    The page size to request, sent as the `per_page` query parameter.
    """


@dataclass(frozen=True)
class Response:
    """
    A successful API response.

    Responses are cached by resolved URI, so they hold only plain values.
    """

    ok: ClassVar[bool] = True

    status_code: int
    status_text: str

    body: str
    """
    The raw payload, fully read.
    """

    rate_limit_limit: int
    rate_limit_remaining: int

    link_next: Optional[str] = None
    link_previous: Optional[str] = None
    link_first: Optional[str] = None
    link_last: Optional[str] = None

    def json(self) -> Any:
        return json.loads(self.body)


@dataclass(frozen=True)
class FailedResponse:
    """
    Stands in for a response when an error was suppressed. Carries no payload.
    """

    ok: ClassVar[bool] = False

    request_uri: str


Result = Union[Response, FailedResponse]


@dataclass
class AuthResult:
    success: bool

    prepared_request: Optional[requests.Request]
    """
    The outgoing request, decorated with whatever the auth scheme needs. This is
    the request that gets sent.
    """
