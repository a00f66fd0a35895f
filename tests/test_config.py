"""Tests for PathPolicy."""

from __future__ import annotations

import dataclasses

import pytest

from resource_path._config import DEFAULT_POLICY, PathPolicy


class TestPathPolicy:
    def test_defaults(self) -> None:
        policy = PathPolicy()
        assert policy.drives is False
        assert policy.default_protocol == "file"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            PathPolicy().drives = True  # type: ignore[misc]

    def test_equality(self) -> None:
        assert PathPolicy(drives=True) == PathPolicy(drives=True)
        assert PathPolicy(drives=True) != PathPolicy(drives=False)


class TestPlatform:
    def test_nt_has_drives(self) -> None:
        assert PathPolicy.for_platform("nt").drives is True

    def test_posix_has_no_drives(self) -> None:
        assert PathPolicy.for_platform("posix").drives is False

    def test_default_policy_matches_host(self) -> None:
        assert DEFAULT_POLICY == PathPolicy.for_platform()


class TestValidation:
    def test_empty_protocol_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            PathPolicy(default_protocol="")

    @pytest.mark.parametrize("protocol", ["zip://", "a/b", "mem#1"])
    def test_delimiter_in_protocol_rejected(self, protocol: str) -> None:
        with pytest.raises(ValueError, match="must not contain"):
            PathPolicy(default_protocol=protocol)


class TestFromDict:
    def test_full(self) -> None:
        policy = PathPolicy.from_dict({"drives": True, "default_protocol": "memory"})
        assert policy == PathPolicy(drives=True, default_protocol="memory")

    def test_empty(self) -> None:
        assert PathPolicy.from_dict({}) == PathPolicy()

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="separator"):
            PathPolicy.from_dict({"separator": "\\"})

    def test_drives_must_be_bool(self) -> None:
        with pytest.raises(TypeError, match="drives"):
            PathPolicy.from_dict({"drives": "yes"})

    def test_protocol_must_be_str(self) -> None:
        with pytest.raises(TypeError, match="default_protocol"):
            PathPolicy.from_dict({"default_protocol": 3})
