from typing import Optional


def build_uri(base_url: str, path: str) -> str:
    # The path is used as is. Escaping is up to the caller.
    return '{}/{}'.format(base_url, path)


def append_query_param(uri: str, name: str, value) -> str:
    separator = '&' if '?' in uri else '?'
    return '{}{}{}={}'.format(uri, separator, name, value)


def add_paging(uri: str, page: Optional[int] = None, per_page: Optional[int] = None) -> str:
    """
    Append the paging parameters that are set, `page` first.
    """
    if page is not None:
        uri = append_query_param(uri, 'page', page)
    if per_page is not None:
        uri = append_query_param(uri, 'per_page', per_page)
    return uri
