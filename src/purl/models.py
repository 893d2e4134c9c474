"""Data models for package identifiers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class Ecosystem(Enum):
    """Enum for supported ecosystems."""
    MAVEN = "maven"

    @classmethod
    def from_type(cls, purl_type: Optional[str]) -> Optional["Ecosystem"]:
        """Map a purl type tag onto a supported ecosystem, or None if unsupported."""
        if not purl_type:
            return None
        try:
            return cls(purl_type.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class PackageIdentifier:
    """Structured package URL: ecosystem type, namespace, name and version."""
    type: Optional[str]
    namespace: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None
    qualifiers: Mapping[str, str] = field(default_factory=dict, compare=False)
    subpath: Optional[str] = None

    @property
    def ecosystem(self) -> Optional[Ecosystem]:
        """Supported ecosystem for this identifier; None means unsupported."""
        return Ecosystem.from_type(self.type)

    def __str__(self) -> str:
        # Imported lazily: parser depends on this module.
        from .parser import to_purl_string  # pylint: disable=import-outside-toplevel
        return to_purl_string(self)
