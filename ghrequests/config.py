from dataclasses import dataclass
import os
from typing import Mapping, Union


GITHUB_API_BASE_URL = 'https://api.github.com'
GITHUB_MEDIA_TYPE = 'application/vnd.github+json'

_FALSY = {'0', 'false', 'no', 'off'}
_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Config:
    """
    Settings for a single pipeline instance.
    """

    base_url: str = GITHUB_API_BASE_URL

    accept: str = GITHUB_MEDIA_TYPE
    """
    The value of the `Accept` header sent with every request.
    """

    verify: Union[bool, str] = True
    """
    TLS certificate verification, passed to requests as is: a flag, or the path
    to a CA bundle.
    """

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] = os.environ) -> 'Config':
        """
        Build a configuration from `GHREQUESTS_BASE_URL` and `GHREQUESTS_VERIFY`.

        Unset variables keep their defaults.
        """
        base_url = environ.get('GHREQUESTS_BASE_URL', GITHUB_API_BASE_URL).rstrip('/')

        verify: Union[bool, str] = True
        raw_verify = environ.get('GHREQUESTS_VERIFY')
        if raw_verify is not None:
            if raw_verify.lower() in _FALSY:
                verify = False
            elif raw_verify.lower() not in _TRUTHY:
                verify = raw_verify

        return cls(base_url=base_url, verify=verify)
