"""Maven Central POM fetching and materialization."""
from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

import requests

from config import MetadataConfig
from constants import Constants
from common import http_client
from common.logging_utils import extra_context
from errors import FetchFailureError, InvalidIdentifierError, MaterializationError
from purl.models import PackageIdentifier

logger = logging.getLogger(__name__)


def validate_identifier(purl: PackageIdentifier) -> None:
    """Ensure the identifier carries Maven coordinates.

    Raises:
        InvalidIdentifierError: If namespace (groupId), name (artifactId) or
            version is missing or empty.
    """
    if not purl.namespace or not purl.name or not purl.version:
        raise InvalidIdentifierError(
            "Invalid PURL: missing required fields. Namespace, name, and version are required."
        )


def pom_url(purl: PackageIdentifier, base_url: str = Constants.MAVEN_CENTRAL_URL) -> str:
    """Construct the Maven Central POM URL for the identifier's coordinates."""
    group_path = purl.namespace.replace(".", "/")
    artifact_path = purl.name.replace(".", "/")
    return (
        f"{base_url.rstrip('/')}/{group_path}/{artifact_path}/{purl.version}/"
        f"{purl.name}-{purl.version}.pom"
    )


def fetch_pom(purl: PackageIdentifier, config: Optional[MetadataConfig] = None) -> bytes:
    """Fetch POM content from Maven Central.

    One GET, no retries and no caching.

    Returns:
        The POM document exactly as served. It is not decoded, since Maven
        Central sends ``text/xml`` without a charset.

    Raises:
        InvalidIdentifierError: Before any network access, if coordinates are missing.
        FetchFailureError: On a non-2xx response or a transport failure.
    """
    config = config or MetadataConfig()
    validate_identifier(purl)
    url = pom_url(purl)

    if config.debug:
        logger.debug("Fetching POM from: %s", url, extra=extra_context(
            event="function_entry", component="maven", action="fetch_pom",
            target=url, package_manager="maven"
        ))

    try:
        response = http_client.safe_get(url, context="maven", timeout=config.timeout)
    except requests.RequestException as exc:
        raise FetchFailureError(
            f"Failed to fetch POM from Maven Central: {exc}", url=url
        ) from exc

    # Response.ok also accepts 3xx
    if not 200 <= response.status_code < 300:
        if config.debug:
            logger.debug("POM fetch failed", extra=extra_context(
                event="function_exit", component="maven", action="fetch_pom",
                outcome="fetch_failed", status_code=response.status_code, package_manager="maven"
            ))
        raise FetchFailureError(
            f"Failed to fetch POM from Maven Central: HTTP {response.status_code} - {response.reason}",
            url=url,
            status_code=response.status_code,
            reason=response.reason,
        )
    return response.content


def _write_pom(content: bytes, prefix: str) -> str:
    temp_dir = tempfile.mkdtemp(prefix=prefix)
    pom_path = os.path.join(os.path.abspath(temp_dir), Constants.POM_XML_FILE)
    with open(pom_path, "wb") as fh:
        fh.write(content)
    return pom_path


def create_pom_file(purl: PackageIdentifier, config: Optional[MetadataConfig] = None) -> str:
    """Fetch the identifier's POM and write it to a fresh temporary directory.

    The directory is unique per call and is never removed here; ownership
    passes to the caller.

    Returns:
        Absolute path to the written ``pom.xml``.

    Raises:
        MaterializationError: Wrapping the fetch or filesystem failure.
    """
    config = config or MetadataConfig()
    try:
        pom_content = fetch_pom(purl, config)
        pom_path = _write_pom(pom_content, config.temp_prefix)
    except (InvalidIdentifierError, FetchFailureError, OSError) as exc:
        logger.error("Failed to create POM file: %s", exc)
        raise MaterializationError(purl, exc) from exc

    if config.debug:
        logger.debug("POM file created at: %s", pom_path)
        logger.debug("POM content size: %d bytes", len(pom_content))
    return pom_path
