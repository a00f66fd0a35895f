"""Tests for the error hierarchy."""

from __future__ import annotations

from resource_path._errors import DirectoryOutOfRange, ResourcePathError, UnknownProtocol


class TestBaseError:
    def test_default_attributes(self) -> None:
        e = ResourcePathError("boom")
        assert e.path is None
        assert str(e) == "boom"

    def test_with_path(self) -> None:
        e = ResourcePathError("boom", path="file://a/b.txt")
        assert e.path == "file://a/b.txt"
        assert "file://a/b.txt" in str(e)

    def test_repr_includes_class_name(self) -> None:
        r = repr(ResourcePathError("boom", path="x"))
        assert r == "ResourcePathError('boom', path='x')"


class TestDirectoryOutOfRange:
    def test_hierarchy(self) -> None:
        assert issubclass(DirectoryOutOfRange, ResourcePathError)
        assert issubclass(DirectoryOutOfRange, IndexError)

    def test_attributes(self) -> None:
        e = DirectoryOutOfRange("too deep", path="file://a/", level=3, count=1)
        assert e.level == 3
        assert e.count == 1
        assert e.path == "file://a/"


class TestUnknownProtocol:
    def test_hierarchy(self) -> None:
        assert issubclass(UnknownProtocol, ResourcePathError)
        assert issubclass(UnknownProtocol, KeyError)

    def test_str_includes_protocol(self) -> None:
        e = UnknownProtocol("missing", protocol="zip")
        assert e.protocol == "zip"
        assert str(e) == "missing | protocol='zip'"

    def test_repr_includes_protocol(self) -> None:
        e = UnknownProtocol("missing", path="zip://a.zip", protocol="zip")
        assert repr(e) == "UnknownProtocol('missing', path='zip://a.zip', protocol='zip')"

    def test_repr_without_protocol(self) -> None:
        assert repr(UnknownProtocol("missing")) == "UnknownProtocol('missing')"


class TestFlatHierarchy:
    def test_all_errors_inherit_directly_from_base(self) -> None:
        for cls in (DirectoryOutOfRange, UnknownProtocol):
            assert cls.__mro__[1] is ResourcePathError, f"{cls.__name__} does not directly inherit ResourcePathError"
