"""Package metadata generation.

- maven.py: POM fetch from Maven Central and temp-file materialization
- generator.py: ecosystem dispatch (``generate_metadata``)
"""

from .generator import GENERATORS, generate_metadata  # noqa: F401
from .maven import create_pom_file, fetch_pom, pom_url, validate_identifier  # noqa: F401

__all__ = [
    "GENERATORS",
    "generate_metadata",
    "create_pom_file",
    "fetch_pom",
    "pom_url",
    "validate_identifier",
]
