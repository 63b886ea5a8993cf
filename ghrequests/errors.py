from typing import Optional


class GithubError(Exception):
    """
    Base class for every failure raised by the request pipeline.
    """

    def __init__(self, uri: str, message: str) -> None:
        super().__init__(message)
        self.__uri = uri

    @property
    def uri(self) -> str:
        """
        The resolved URI of the request that failed.
        """
        return self.__uri


class AuthenticationFailure(GithubError):
    def __init__(self, uri: str) -> None:
        super().__init__(uri, 'Authentication failed for {}'.format(uri))


class ApiError(GithubError):
    """
    The server answered with a non-success status.
    """

    def __init__(self, uri: str, status_code: Optional[int], reason: Optional[str], body: str = '') -> None:
        super().__init__(uri, 'API request to {} failed with {} {}'.format(uri, status_code, reason))
        self.__status_code = status_code
        self.__reason = reason
        self.__body = body

    @property
    def status_code(self) -> Optional[int]:
        return self.__status_code

    @property
    def reason(self) -> Optional[str]:
        return self.__reason

    @property
    def body(self) -> str:
        return self.__body


class TransportError(GithubError):
    """
    The request could not complete at all, e.g. connection refused or DNS failure.
    """

    def __init__(self, uri: str, cause: Exception) -> None:
        super().__init__(uri, 'Could not complete request to {}: {}'.format(uri, cause))
        self.__cause = cause

    @property
    def cause(self) -> Exception:
        return self.__cause


class MalformedResponse(GithubError):
    """
    A successful response broke the API contract, e.g. a missing rate limit header.

    This is never subject to the propagation policy.
    """


class MalformedLinkHeader(MalformedResponse):
    def __init__(self, uri: str, entry: str) -> None:
        super().__init__(uri, 'Malformed Link header entry from {}: {!r}'.format(uri, entry))
        self.__entry = entry

    @property
    def entry(self) -> str:
        return self.__entry
