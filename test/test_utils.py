#!/usr/bin/env python
# -*- coding: UTF-8 -*-
import unittest

from ytdlp_sendvid import utils


class TestUtils(unittest.TestCase):
    def test_iter_meta_tags(self):
        webpage = """
            <META Property="og:type" CONTENT=video>
            <meta charset="utf-8"/>
            <meta property='og:title' content='a > b &amp; c'>
        """
        tags = list(utils.iter_meta_tags(webpage))
        self.assertEqual(len(tags), 3)
        self.assertEqual(tags[0], {"property": "og:type", "content": "video"})
        self.assertEqual(tags[1], {"charset": "utf-8"})
        self.assertEqual(tags[2]["content"], "a > b & c")

    def test_search_meta_property(self):
        webpage = (
            '<meta name="og:image" content="by-name.jpg">'
            '<meta property="og:image:width" content="640">'
            '<meta property="og:image" content="first.jpg">'
            '<meta property="og:image" content="second.jpg">'
        )
        self.assertEqual(utils.search_meta_property(webpage, "og:image"), "first.jpg")
        self.assertEqual(utils.search_meta_property(webpage, "og:image:width"), "640")
        self.assertIsNone(utils.search_meta_property(webpage, "og:video"))

    def test_og_image_malformed_html(self):
        test_cases = (
            ("unclosed tags", '<div><p><meta property="og:image" content="a.jpg">'),
            ("self closing", '<meta property="og:image" content="a.jpg" />'),
            ("unquoted", "<meta property=og:image content=a.jpg>"),
            ("garbage before", '<<<>>> </p><meta property="og:image" content="a.jpg">'),
            ("multiline", '<meta\n  property="og:image"\n  content="a.jpg"\n>'),
        )
        for label, webpage in test_cases:
            with self.subTest(label):
                self.assertEqual(utils.og_image(webpage), "a.jpg")

    def test_og_image_missing(self):
        test_cases = (
            ("empty", ""),
            ("no content", '<meta property="og:image">'),
            ("empty content", '<meta property="og:image" content="">'),
            ("plain text", "og:image a.jpg"),
        )
        for label, webpage in test_cases:
            with self.subTest(label):
                self.assertIsNone(utils.og_image(webpage))

    def test_og_image_skips_non_elements(self):
        real = '<meta property="og:image" content="real.jpg">'
        test_cases = (
            ("comment", '<!-- <meta property="og:image" content="old.jpg"> -->'),
            (
                "script",
                "<script>var s = '<meta property=\"og:image\" content=\"js.jpg\">';"
                "</script>",
            ),
            (
                "style",
                '<style>/* <meta property="og:image" content="css.jpg"> */</style>',
            ),
        )
        for label, prefix in test_cases:
            with self.subTest(label):
                self.assertEqual(utils.og_image(prefix + real), "real.jpg")
                self.assertIsNone(utils.og_image(prefix))

    def test_meta_tags_never_raise(self):
        test_cases = (
            '<![bogus <meta property="og:image" content="a.jpg">',
            "<!DOCTYPE",
            "<meta property=",
            "</meta></meta><meta",
            "<meta \x00 property='og:image' content='�'>",
        )
        for webpage in test_cases:
            with self.subTest(webpage=webpage):
                self.assertIn(utils.og_image(webpage), (None, "a.jpg", "�"))
