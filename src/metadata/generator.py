"""Metadata generation entry point dispatching on the identifier's ecosystem."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Union

from config import MetadataConfig
from common.logging_utils import extra_context
from errors import InvalidIdentifierError
from purl.models import Ecosystem, PackageIdentifier
from purl.parser import parse_purl
from . import maven

logger = logging.getLogger(__name__)

Generator = Callable[[PackageIdentifier, MetadataConfig], str]

GENERATORS: Dict[Ecosystem, Generator] = {
    Ecosystem.MAVEN: maven.create_pom_file,
}


def generate_metadata(
    purl: Union[PackageIdentifier, str, None],
    config: Optional[MetadataConfig] = None,
) -> Union[str, bool]:
    """Generate the metadata file for a package identifier.

    Args:
        purl: Identifier object, or a ``pkg:`` string to be parsed.
        config: Runtime settings; defaults to ``MetadataConfig()``.

    Returns:
        Path to the generated metadata file, or False when the identifier's
        ecosystem is not supported. Unsupported is a soft no-op, not an error.

    Raises:
        InvalidIdentifierError: If the identifier is absent or has no type.
        MaterializationError: If a supported identifier could not be resolved.
    """
    config = config or MetadataConfig()
    if isinstance(purl, str):
        purl = parse_purl(purl)
    if purl is None or not getattr(purl, "type", None):
        raise InvalidIdentifierError("Invalid PURL object: missing type")

    if config.debug:
        logger.debug("Generating metadata for PURL: %s", purl, extra=extra_context(
            event="function_entry", component="generator", action="generate_metadata",
            package_manager=purl.type
        ))

    ecosystem = purl.ecosystem
    generator = GENERATORS.get(ecosystem) if ecosystem is not None else None
    if generator is None:
        supported = ", ".join(f"'{e.value}'" for e in GENERATORS)
        logger.error(
            "PURL type '%s' is not supported. Currently only %s is supported.",
            purl.type,
            supported,
        )
        return False
    return generator(purl, config)
