# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Type-expression parsers for the documentation normalizer."""

from docnorm.parsers.jsdoc_type import JSDocTypeParser, render_node

__all__ = ["JSDocTypeParser", "render_node"]
