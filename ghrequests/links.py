"""
Parsing of the `Link` header used by the API for pagination.

The header is a comma separated list of `<url>; rel="name"` entries. Relations
other than next, prev and first all land in `last`, including unknown ones.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import MalformedLinkHeader


@dataclass
class PageLinks:
    next: Optional[str] = None
    previous: Optional[str] = None
    first: Optional[str] = None
    last: Optional[str] = None


_REL_PREFIX = 'rel="'


def parse_link_header(value: str, uri: str = '') -> PageLinks:
    """
    Parse a `Link` header value into its navigation links.

    @param value
      The raw header value.
    @param uri
      The URI of the response the header came from. Only used for error reporting.
    @throws MalformedLinkHeader
      If an entry is not of the form `<url>; rel="name"`.
    """
    links = PageLinks()
    for entry in value.split(','):
        parts = entry.split(';')
        if len(parts) != 2:
            raise MalformedLinkHeader(uri, entry)
        link = parts[0].strip()
        relation = parts[1].strip()
        if not (link.startswith('<') and link.endswith('>')):
            raise MalformedLinkHeader(uri, entry)
        if not (relation.startswith(_REL_PREFIX) and relation.endswith('"') and len(relation) > len(_REL_PREFIX)):
            raise MalformedLinkHeader(uri, entry)

        link = link[1:-1]
        relation = relation[len(_REL_PREFIX):-1]
        if relation == 'next':
            links.next = link
        elif relation == 'prev':
            links.previous = link
        elif relation == 'first':
            links.first = link
        else:
            links.last = link
    return links
