#!/usr/bin/env python
# -*- coding: UTF-8 -*-
import html.parser
from contextlib import suppress
from typing import Dict, Iterator, List, Optional

from yt_dlp.compat import compat_HTMLParseError

Attributes = Dict[str, Optional[str]]


class MetaTagParser(html.parser.HTMLParser):
    """HTML parser to gather the attributes of all <meta> elements"""

    def __init__(self):
        html.parser.HTMLParser.__init__(self)
        self.tags: List[Attributes] = []

    def handle_starttag(self, tag, attrs):
        if tag == "meta":
            self.tags.append(dict(attrs))


def iter_meta_tags(webpage: str) -> Iterator[Attributes]:
    """
    yield the decoded attributes of every <meta> element in document order

    comments and <script>/<style> bodies are not markup, so tags inside
    them are skipped. broken markup never raises, the elements parsed up
    to the point of failure are kept
    """
    parser = MetaTagParser()
    # html.parser raises AssertionError on some malformed declarations
    with suppress(compat_HTMLParseError, AssertionError):
        parser.feed(webpage)
        parser.close()
    yield from parser.tags


def search_meta_property(webpage: str, prop: str) -> Optional[str]:
    """content of the first <meta property="..."> element, None if absent"""
    for attributes in iter_meta_tags(webpage):
        if attributes.get("property") == prop:
            return attributes.get("content")
    return None


def og_image(webpage: str) -> Optional[str]:
    return search_meta_property(webpage, "og:image") or None
