#!/usr/bin/env python
# -*- coding: UTF-8 -*-

from .provider import InvalidInputError, SendvidProvider

__version__ = "2026.10.19"

__all__ = ["InvalidInputError", "SendvidProvider", "__version__"]
