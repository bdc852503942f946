"""Code-list container and metadata models."""

from codelists.models.codelist import CodeEntry, CodeList, CodeListType
from codelists.models.metadata import Metadata, MetadataSource, Provenance

__all__ = [
    "CodeEntry",
    "CodeList",
    "CodeListType",
    "Metadata",
    "MetadataSource",
    "Provenance",
]
