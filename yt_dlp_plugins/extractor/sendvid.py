# coding: utf-8
import re

from yt_dlp.extractor.common import InfoExtractor
from yt_dlp.utils import ExtractorError, determine_ext, unescapeHTML, urljoin

from ytdlp_sendvid import __version__
from ytdlp_sendvid.provider import (
    EMBED_URL_TEMPLATE,
    PAGE_URL_TEMPLATE,
    PROVIDER_ID,
    PROVIDER_TITLE,
    VALID_URL,
)
from ytdlp_sendvid.utils import og_image

__all__ = ["SendvidIE"]


# pylint: disable=abstract-method
class SendvidIE(InfoExtractor):
    __version__ = __version__
    _WORKING = True
    IE_NAME = PROVIDER_ID
    IE_DESC = PROVIDER_TITLE
    _VALID_URL = rf"^{VALID_URL}\Z"
    _EMBED_REGEX = [
        r"""(?x)
            <iframe[^>]+?\bsrc\s*=\s*(["'])
                (?P<url>(?:https?:)?//(?:www\.)?sendvid\.com/embed/[a-z0-9]+)
            \1
        """
    ]
    _SOURCE_RE = r"""<source[^>]+?\bsrc\s*=\s*(["'])(?P<url>(?:(?!\1).)+)\1"""

    _TESTS = [
        {
            "url": "http://sendvid.com/nys3cjb2",
            "only_matching": True,
        },
        {
            "url": "https://sendvid.com/nys3cjb2",
            "only_matching": True,
        },
        {
            "url": "https://www.sendvid.com/embed/nys3cjb2",
            "only_matching": True,
        },
        {
            "url": "//sendvid.com/nys3cjb2",
            "only_matching": True,
        },
    ]

    def _extract_media_url(self, webpage, video_id, page_url):
        media_url = self._search_regex(
            self._SOURCE_RE, webpage, "video url", group="url", default=None
        ) or self._og_search_video_url(webpage, default=None)
        if media_url:
            media_url = urljoin(page_url, unescapeHTML(media_url).strip())
        if not media_url:
            raise ExtractorError(
                "No video formats found", video_id=video_id, expected=True
            )
        return media_url

    def _real_extract(self, url):
        video_id = self._match_id(url)
        page_url = PAGE_URL_TEMPLATE.format(video_id)
        webpage = self._download_webpage(page_url, video_id)

        title = (
            self._og_search_title(webpage, default=None)
            or self._html_extract_title(webpage, default=None)
            or video_id
        )
        media_url = self._extract_media_url(webpage, video_id, page_url)
        thumbnail = og_image(webpage)
        if thumbnail is None:
            self.write_debug(f"{video_id}: no og:image on {page_url}")

        return {
            "id": video_id,
            "title": re.sub(r"\s+", " ", title).strip(),
            "url": media_url,
            "ext": determine_ext(media_url, "mp4"),
            "thumbnail": thumbnail,
            "webpage_url": page_url,
            "embed_url": EMBED_URL_TEMPLATE.format(video_id),
            "http_headers": {"Referer": "https://sendvid.com/"},
        }
