"""Tests for package URL parsing and rendering."""
import pytest

from errors import InvalidIdentifierError
from purl import Ecosystem, PackageIdentifier, parse_purl, to_purl_string


class TestParsePurl:
    """Test parse_purl structural parsing."""

    def test_maven_coordinates(self):
        purl = parse_purl("pkg:maven/org.example/lib@1.0")
        assert purl.type == "maven"
        assert purl.namespace == "org.example"
        assert purl.name == "lib"
        assert purl.version == "1.0"
        assert purl.ecosystem is Ecosystem.MAVEN

    def test_type_is_lowercased(self):
        purl = parse_purl("pkg:MAVEN/org.example/lib@1.0")
        assert purl.type == "maven"

    def test_qualifiers_and_subpath(self):
        purl = parse_purl("pkg:maven/org.example/lib@1.0?Classifier=sources&type=jar#src/./main/../java")
        assert purl.qualifiers == {"classifier": "sources", "type": "jar"}
        assert purl.subpath == "src/main/java"

    def test_percent_decoding(self):
        purl = parse_purl("pkg:npm/%40angular/core@1.0%2Bbuild")
        assert purl.namespace == "@angular"
        assert purl.name == "core"
        assert purl.version == "1.0+build"

    def test_without_version(self):
        purl = parse_purl("pkg:maven/org.example/lib")
        assert purl.version is None
        assert purl.name == "lib"

    def test_unscoped_at_in_namespace_is_not_a_version(self):
        purl = parse_purl("pkg:npm/@scope/name")
        assert purl.namespace == "@scope"
        assert purl.name == "name"
        assert purl.version is None

    def test_without_namespace(self):
        purl = parse_purl("pkg:pypi/requests@2.31.0")
        assert purl.namespace is None
        assert purl.name == "requests"

    def test_unsupported_ecosystem_is_none(self):
        assert parse_purl("pkg:npm/x/y@1.0").ecosystem is None

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "maven/org.example/lib@1.0",
        "http://example.com/lib",
        "pkg:maven",
        "pkg:maven/@1.0",
    ])
    def test_rejects_malformed(self, text):
        with pytest.raises(InvalidIdentifierError):
            parse_purl(text)


class TestToPurlString:
    """Test canonical rendering."""

    def test_round_trips_maven(self):
        text = "pkg:maven/org.example/lib@1.0"
        assert to_purl_string(parse_purl(text)) == text

    def test_str_uses_canonical_form(self):
        purl = PackageIdentifier(type="maven", namespace="org.example", name="lib", version="1.0",
                                 qualifiers={"type": "jar", "classifier": "sources"})
        assert str(purl) == "pkg:maven/org.example/lib@1.0?classifier=sources&type=jar"

    def test_encodes_reserved_characters(self):
        purl = PackageIdentifier(type="npm", namespace="@angular", name="core", version="1.0+build")
        assert str(purl) == "pkg:npm/%40angular/core@1.0%2Bbuild"


def test_identifier_is_immutable():
    purl = PackageIdentifier(type="maven", namespace="org.example", name="lib", version="1.0")
    with pytest.raises(AttributeError):
        purl.version = "2.0"  # type: ignore[misc]
