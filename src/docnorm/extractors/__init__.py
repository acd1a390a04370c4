# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Comment tag extractors for the documentation normalizer."""

from docnorm.extractors.jsdoc import JSDocTagExtractor

__all__ = ["JSDocTagExtractor"]
