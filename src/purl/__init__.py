"""Package URL (purl) models and parsing."""

from .models import Ecosystem, PackageIdentifier
from .parser import parse_purl, to_purl_string

__all__ = [
    "Ecosystem",
    "PackageIdentifier",
    "parse_purl",
    "to_purl_string",
]
