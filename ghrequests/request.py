import logging
from pathlib import Path
from typing import Callable, Optional

import requests

from .auth import AnonymousAuth, AuthGateway, TokenHeaderAuth
from .cache import CacheGateway, FileCache, MemoryCache
from .config import Config
from .errors import ApiError, AuthenticationFailure, MalformedResponse, TransportError
from .links import parse_link_header
from .log import always_propagate, LogGateway, LoggingGateway
from .model import FailedResponse, Request, Response, Result
from .uri import add_paging, build_uri


logger = logging.getLogger(__name__)


RATE_LIMIT_LIMIT_HEADER = 'X-RateLimit-Limit'
RATE_LIMIT_REMAINING_HEADER = 'X-RateLimit-Remaining'
LINK_HEADER = 'Link'


class RequestPipeline:
    """
    Executes logical requests against the API, one network round trip at most per call.

    Auth, caching and error policy are applied the same way for every resource.
    """

    def __init__(self,
                 auth: AuthGateway,
                 cache: CacheGateway,
                 log: LogGateway,
                 session: Optional[requests.Session] = None,
                 config: Optional[Config] = None,
                 close_cache: bool = False) -> None:
        """
        @param session
          The session used to send requests. If omitted, the pipeline creates
          one and closes it in `close()`. A given session is left to its owner.
        @param close_cache
          Whether `close()` also closes `cache`.
        """
        self.auth = auth
        self.cache = cache
        self.log = log
        self.config = config or Config()
        self.__close_cache = close_cache
        self.__owns_session = session is None
        self.__session = session if session is not None else requests.Session()

    def resolve_uri(self, request: Request) -> str:
        """
        Build the URI that is both requested and used as the cache key.
        """
        uri = build_uri(self.config.base_url, request.path)
        uri = add_paging(uri, request.page, request.per_page)
        return self.auth.prepare_uri(uri)

    def get_response(self, request: Request) -> Result:
        """
        Execute `request`.

        @return
          The response, from the cache if possible. A `FailedResponse` if an
          error occurred and the log gateway chose not to propagate it.
        @throws MalformedResponse
          If a successful response violates the API contract. This is never
          suppressed.
        """
        uri = self.resolve_uri(request)

        if self.cache.has(uri):
            try:
                cached = self.cache.get(uri)
            except KeyError:
                # Expired or removed since `has()`.
                logger.info('Cache entry for {} is gone. Treating as a miss.'.format(uri))
            else:
                self.log.log('Returning cached result for {}', uri)
                return cached

        outgoing = requests.Request(method=request.method,
                                    url=uri,
                                    headers={'Accept': self.config.accept})

        auth_result = self.auth.pre_authenticate(request, outgoing)
        if not auth_result.success:
            return self._fail(AuthenticationFailure(uri), uri)

        try:
            prepared = self.prepare_request(auth_result.prepared_request)
            logger.info('Sending {} {}'.format(prepared.method, uri))
            with self.__session.send(prepared, verify=self.config.verify, stream=True) as http_response:
                if not 200 <= http_response.status_code < 300:
                    raise ApiError(uri, http_response.status_code, http_response.reason, http_response.text)
                response = self._read_response(http_response, uri)
            self.cache.set(response, uri)
        except MalformedResponse:
            raise
        except ApiError as e:
            return self._fail(e, uri)
        except requests.RequestException as e:
            return self._fail(TransportError(uri, e), uri)
        except Exception as e:
            return self._fail(e, uri)

        return response

    def prepare_request(self, outgoing: requests.Request) -> requests.PreparedRequest:
        """
        Turn the authenticated request into the one that is sent.
        """
        prepared = self.__session.prepare_request(outgoing)
        prepared.headers['Accept'] = self.config.accept
        return prepared

    def _read_response(self, http_response: requests.Response, uri: str) -> Response:
        body = http_response.text
        rate_limit_limit = _parse_int_header(http_response, RATE_LIMIT_LIMIT_HEADER, uri)
        rate_limit_remaining = _parse_int_header(http_response, RATE_LIMIT_REMAINING_HEADER, uri)

        links = None
        link_header = http_response.headers.get(LINK_HEADER)
        if link_header:
            links = parse_link_header(link_header, uri)

        return Response(status_code=http_response.status_code,
                        status_text=http_response.reason,
                        body=body,
                        rate_limit_limit=rate_limit_limit,
                        rate_limit_remaining=rate_limit_remaining,
                        link_next=links.next if links else None,
                        link_previous=links.previous if links else None,
                        link_first=links.first if links else None,
                        link_last=links.last if links else None)

    def _fail(self, error: Exception, uri: str) -> FailedResponse:
        if self.log.should_propagate(error):
            raise error
        return FailedResponse(uri)

    def close(self):
        if self.__close_cache:
            self.cache.close()
        if self.__owns_session:
            self.__session.close()

    def __enter__(self) -> 'RequestPipeline':
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _parse_int_header(http_response: requests.Response, name: str, uri: str) -> int:
    value = http_response.headers.get(name)
    if value is None:
        raise MalformedResponse(uri, 'Missing {} header in response from {}'.format(name, uri))
    try:
        return int(value)
    except ValueError:
        raise MalformedResponse(uri, 'Non-numeric {} header in response from {}: {!r}'.format(name, uri, value))


def create(token: Optional[str] = None,
           cache_directory: Optional[Path] = None,
           propagate: Callable[[Exception], bool] = always_propagate,
           config: Optional[Config] = None) -> RequestPipeline:
    auth = TokenHeaderAuth(token) if token else AnonymousAuth()
    cache = FileCache(cache_directory, 5) if cache_directory is not None else MemoryCache()
    return RequestPipeline(auth, cache, LoggingGateway(propagate), config=config, close_cache=True)
