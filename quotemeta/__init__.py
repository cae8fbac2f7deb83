# -*- coding: utf-8 -*-

"""
Shell-quoting, like Perl's ``quotemeta``, for file names and other data that
need not be valid text.
"""

from .shlext import (ByteClass, QuotingStyle, classify, qjoin, quotemeta,
                     quoting_style)
