"""Package URL parsing and rendering.

Handles the ``pkg:type/namespace/name@version?qualifiers#subpath`` form.
Only structural parsing is done here; whether an identifier carries enough
information for a given ecosystem is decided by the metadata generators.
"""

from typing import Dict, Optional, Tuple
from urllib.parse import quote, unquote

from errors import InvalidIdentifierError
from .models import PackageIdentifier

SCHEME = "pkg"


def _split_subpath(s: str) -> Tuple[str, Optional[str]]:
    """Return (remainder, subpath or None), dropping '.', '..' and empty segments."""
    if "#" not in s:
        return s, None
    remainder, raw = s.split("#", 1)
    segments = [unquote(seg) for seg in raw.strip("/").split("/") if seg not in ("", ".", "..")]
    return remainder, "/".join(segments) or None


def _split_qualifiers(s: str) -> Tuple[str, Dict[str, str]]:
    """Return (remainder, qualifiers); keys are lower-cased, empty values skipped."""
    if "?" not in s:
        return s, {}
    remainder, raw = s.split("?", 1)
    qualifiers: Dict[str, str] = {}
    for pair in raw.split("&"):
        if "=" not in pair:
            continue
        key, value = pair.split("=", 1)
        key = key.strip().lower()
        value = unquote(value)
        if key and value:
            qualifiers[key] = value
    return remainder, qualifiers


def _split_version(s: str) -> Tuple[str, Optional[str]]:
    """Return (remainder, version or None) using the rightmost '@' of the last segment."""
    at = s.rfind("@")
    if at == -1 or at < s.rfind("/"):
        return s, None
    version = unquote(s[at + 1:]).strip()
    return s[:at], version or None


def parse_purl(text: str) -> PackageIdentifier:
    """Parse a package URL string into a PackageIdentifier.

    Raises:
        InvalidIdentifierError: If the string is not a ``pkg:`` URL or lacks
            a type or name.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidIdentifierError("Invalid PURL: empty input")
    s = text.strip()
    scheme, sep, rest = s.partition(":")
    if not sep or scheme.lower() != SCHEME:
        raise InvalidIdentifierError(f"Invalid PURL '{text}': scheme must be '{SCHEME}:'")

    rest, subpath = _split_subpath(rest.lstrip("/"))
    rest, qualifiers = _split_qualifiers(rest)
    rest, version = _split_version(rest.rstrip("/"))

    segments = rest.split("/")
    purl_type = segments[0].strip().lower()
    if not purl_type:
        raise InvalidIdentifierError(f"Invalid PURL '{text}': missing type")
    path = [unquote(seg) for seg in segments[1:] if seg]
    if not path:
        raise InvalidIdentifierError(f"Invalid PURL '{text}': missing name")

    name = path[-1]
    namespace = "/".join(path[:-1]) or None
    return PackageIdentifier(
        type=purl_type,
        namespace=namespace,
        name=name,
        version=version,
        qualifiers=qualifiers,
        subpath=subpath,
    )


def to_purl_string(identifier: PackageIdentifier) -> str:
    """Render a PackageIdentifier in canonical ``pkg:`` form."""
    parts = [f"{SCHEME}:{(identifier.type or '').lower()}"]
    if identifier.namespace:
        parts.extend(quote(seg, safe=":") for seg in identifier.namespace.split("/") if seg)
    parts.append(quote(identifier.name or "", safe=":"))
    out = "/".join(parts)
    if identifier.version:
        out += "@" + quote(identifier.version, safe=":")
    if identifier.qualifiers:
        pairs = sorted((k.lower(), v) for k, v in identifier.qualifiers.items() if v)
        if pairs:
            out += "?" + "&".join(f"{k}={quote(v, safe=':/')}" for k, v in pairs)
    if identifier.subpath:
        out += "#" + "/".join(quote(seg, safe="") for seg in identifier.subpath.split("/") if seg)
    return out
