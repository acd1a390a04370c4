# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Documentation comment normalizer."""

from docnorm.assembler import DocAssembler, assemble
from docnorm.expression import AnnotationNode, TypeParseError
from docnorm.model import DocRecord, NormalizedType, ParamDescriptor, ReturnDescriptor
from docnorm.normalizer import normalize_node, normalize_type

__all__ = [
    "AnnotationNode",
    "DocAssembler",
    "DocRecord",
    "NormalizedType",
    "ParamDescriptor",
    "ReturnDescriptor",
    "TypeParseError",
    "assemble",
    "normalize_node",
    "normalize_type",
]
