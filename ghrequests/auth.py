from abc import ABC, abstractmethod
import logging

import requests
from requests.auth import HTTPBasicAuth

from .model import AuthResult, Request
from .uri import append_query_param


logger = logging.getLogger(__name__)


class AuthGateway(ABC):
    """
    An authentication scheme as seen by the request pipeline.

    A scheme may authenticate through the query string, through the outgoing
    request, or both. The URI returned by `prepare_uri()` is also the cache key,
    so it must be the same for the same logical request.
    """

    def prepare_uri(self, uri: str) -> str:
        """
        Rewrite `uri` for query string based auth. Called before the cache lookup.
        """
        return uri

    @abstractmethod
    def pre_authenticate(self, request: Request, outgoing: requests.Request) -> AuthResult:
        """
        Decorate the outgoing request before it is sent.

        @param request
          The logical request being executed.
        @param outgoing
          The transport request about to be sent.
        @return
          Whether authentication succeeded, and the request to send.
        """


class AnonymousAuth(AuthGateway):
    def pre_authenticate(self, request: Request, outgoing: requests.Request) -> AuthResult:
        return AuthResult(success=True, prepared_request=outgoing)


class TokenQueryAuth(AuthGateway):
    """
    Sends an access token as the `access_token` query parameter.
    """

    def __init__(self, token: str) -> None:
        self.__token = token

    def prepare_uri(self, uri: str) -> str:
        if not self.__token:
            return uri
        return append_query_param(uri, 'access_token', self.__token)

    def pre_authenticate(self, request: Request, outgoing: requests.Request) -> AuthResult:
        if not self.__token:
            logger.warning('No access token configured for {} {}'.format(request.method, request.path))
            return AuthResult(success=False, prepared_request=None)
        return AuthResult(success=True, prepared_request=outgoing)


class TokenHeaderAuth(AuthGateway):
    """
    Sends an access token in the `Authorization` header.
    """

    def __init__(self, token: str) -> None:
        self.__token = token

    def pre_authenticate(self, request: Request, outgoing: requests.Request) -> AuthResult:
        if not self.__token:
            logger.warning('No access token configured for {} {}'.format(request.method, request.path))
            return AuthResult(success=False, prepared_request=None)
        outgoing.headers['Authorization'] = 'token {}'.format(self.__token)
        return AuthResult(success=True, prepared_request=outgoing)


class BasicAuth(AuthGateway):
    def __init__(self, username: str, password: str) -> None:
        self.__username = username
        self.__password = password

    def pre_authenticate(self, request: Request, outgoing: requests.Request) -> AuthResult:
        if not (self.__username and self.__password):
            logger.warning('Incomplete credentials for basic auth on {} {}'.format(request.method, request.path))
            return AuthResult(success=False, prepared_request=None)
        outgoing.auth = HTTPBasicAuth(self.__username, self.__password)
        return AuthResult(success=True, prepared_request=outgoing)
