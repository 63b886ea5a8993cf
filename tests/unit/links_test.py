from ddt import ddt, data
from unittest import TestCase

from ghrequests.errors import MalformedLinkHeader, MalformedResponse
from ghrequests.links import PageLinks, parse_link_header


@ddt
class TestParseLinkHeader(TestCase):
    def test_next_and_last(self):
        links = parse_link_header('<https://x/?page=2>; rel="next", <https://x/?page=9>; rel="last"')

        self.assertEqual(PageLinks(next='https://x/?page=2', last='https://x/?page=9'), links)
        self.assertIsNone(links.previous)
        self.assertIsNone(links.first)

    def test_all_relations(self):
        links = parse_link_header(
            '<https://api.github.com/user/repos?page=3&per_page=100>; rel="next", '
            '<https://api.github.com/user/repos?page=1&per_page=100>; rel="prev", '
            '<https://api.github.com/user/repos?page=1&per_page=100>; rel="first", '
            '<https://api.github.com/user/repos?page=50&per_page=100>; rel="last"')

        self.assertEqual(PageLinks(next='https://api.github.com/user/repos?page=3&per_page=100',
                                   previous='https://api.github.com/user/repos?page=1&per_page=100',
                                   first='https://api.github.com/user/repos?page=1&per_page=100',
                                   last='https://api.github.com/user/repos?page=50&per_page=100'),
                         links)

    def test_unknown_relations_fold_into_last(self):
        links = parse_link_header('<https://x/?page=2>; rel="next", <https://x/?page=7>; rel="somewhere"')

        self.assertEqual('https://x/?page=2', links.next)
        self.assertEqual('https://x/?page=7', links.last)

    def test_surrounding_whitespace_is_ignored(self):
        links = parse_link_header('  <https://x/?page=1>  ;   rel="first"  ')

        self.assertEqual(PageLinks(first='https://x/?page=1'), links)

    @data(
        # No ';' separator.
        '<https://x/?page=2> rel="next"',
        # Too many parts.
        '<https://x/?page=2>; rel="next"; type="json"',
        # URL not in angle brackets.
        'https://x/?page=2; rel="next"',
        # Relation not quoted.
        '<https://x/?page=2>; rel=next',
        # Truncated relation.
        '<https://x/?page=2>; rel="',
    )
    def test_malformed_entries_are_rejected(self, value):
        with self.assertRaises(MalformedLinkHeader) as context:
            parse_link_header(value, 'https://api.github.com/user/repos')

        self.assertIsInstance(context.exception, MalformedResponse)
        self.assertEqual('https://api.github.com/user/repos', context.exception.uri)
