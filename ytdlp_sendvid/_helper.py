#!/usr/bin/env python
# -*- coding: UTF-8 -*-

from typing import Any, Dict, Optional

from yt_dlp import YoutubeDL

DEFAULT_PARAMS = {
    "quiet": True,
    "no_warnings": True,
    "noprogress": True,
    "nocheckcertificate": False,
    "socket_timeout": 20,
    "verbose": False,
}


def get_params(override: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    parameters = dict(DEFAULT_PARAMS)
    if override:
        parameters.update(override)
    return parameters


def create_downloader(override: Optional[Dict[str, Any]] = None) -> YoutubeDL:
    """YoutubeDL instance used only for its HTTP client and logger"""
    return YoutubeDL(get_params(override), auto_init=False)
