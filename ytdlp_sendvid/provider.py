#!/usr/bin/env python
# -*- coding: UTF-8 -*-

"""
    Sendvid video provider

    Turns user input (page URL, embed URL) into a video id and builds
    the pieces a host needs to show the video: an iframe description
    and the remote thumbnail URL.
"""

import re
from contextlib import closing
from typing import Any, Dict, Optional, Union

from yt_dlp import YoutubeDL
from yt_dlp.networking.exceptions import RequestError

from ._helper import create_downloader
from .utils import og_image

PROVIDER_ID = "sendvid"
PROVIDER_TITLE = "Sendvid"

# scheme and host are case-insensitive, the path is not
VALID_URL = (
    r"(?:(?i:https?)?://|//)?"
    r"(?i:(?:www\.)?sendvid\.com)/"
    r"(?:embed/)?(?P<id>[a-z0-9]+)"
)
VALID_URL_RE = re.compile(VALID_URL)

PAGE_URL_TEMPLATE = "https://sendvid.com/{}"
EMBED_URL_TEMPLATE = "https://sendvid.com/embed/{}"

EmbedCode = Dict[str, Any]


class InvalidInputError(ValueError):
    pass


class SendvidProvider:
    """one Sendvid video, identified by the input it was created from"""

    PROVIDER_ID = PROVIDER_ID
    PROVIDER_TITLE = PROVIDER_TITLE

    def __init__(
        self,
        user_input: str,
        *,
        ydl: Optional[YoutubeDL] = None,
        params: Optional[Dict[str, Any]] = None,
    ):
        video_id = self.get_id_from_input(user_input)
        if not video_id:
            raise InvalidInputError(
                f"Tried to create a {self.PROVIDER_TITLE} provider "
                f"with an invalid input {user_input!r}"
            )
        self.input = user_input
        self.video_id: str = video_id
        self._ydl = ydl
        self._params = params

    def __repr__(self):
        return f"{self.__class__.__name__}({self.input!r})"

    @staticmethod
    def get_id_from_input(user_input) -> Union[str, bool]:
        """
        return the video id for a Sendvid URL or False if the input
        is not recognized, never raises
        """
        if not isinstance(user_input, str):
            return False
        match = VALID_URL_RE.fullmatch(user_input)
        return match.group("id") if match else False

    @classmethod
    def is_applicable(cls, user_input) -> bool:
        return bool(cls.get_id_from_input(user_input))

    @property
    def name(self) -> str:
        return f"{self.PROVIDER_TITLE} Video ({self.video_id})"

    @property
    def page_url(self) -> str:
        return PAGE_URL_TEMPLATE.format(self.video_id)

    @property
    def embed_url(self) -> str:
        return EMBED_URL_TEMPLATE.format(self.video_id)

    # pylint: disable=unused-argument
    def render_embed_code(self, width, height, autoplay=False) -> EmbedCode:
        """
        describe the iframe for the host to render

        autoplay is part of the provider interface but Sendvid embeds
        ignore it, so it has no effect on the result
        """
        return {
            "type": "html_tag",
            "tag": "iframe",
            "attributes": {
                "width": width,
                "height": height,
                "frameborder": "0",
                "allowfullscreen": "allowfullscreen",
                "src": self.embed_url,
            },
        }

    def get_remote_thumbnail_url(self) -> Union[str, bool]:
        """og:image of the video page or False if it cannot be found"""
        if self._ydl is not None:
            return self._fetch_thumbnail_url(self._ydl)

        with closing(create_downloader(self._params)) as ydl:
            return self._fetch_thumbnail_url(ydl)

    def _fetch_thumbnail_url(self, ydl: YoutubeDL) -> Union[str, bool]:
        ydl.write_debug(
            f"[{self.PROVIDER_ID}] {self.video_id}: Fetching {self.page_url}"
        )
        try:
            with ydl.urlopen(self.page_url) as response:
                charset = response.headers.get_content_charset() or "utf-8"
                webpage = response.read().decode(charset, "replace")
        except (RequestError, OSError, LookupError):
            return False

        return og_image(webpage) or False
