"""Path policy — immutable description of what the host platform's paths look like."""

from __future__ import annotations

import dataclasses
import os

_RESERVED = ("://", "/", "#")


@dataclasses.dataclass(frozen=True)
class PathPolicy:
    """Decides how raw strings are parsed on a given platform.

    :param drives: Whether a leading ``X:`` token is parsed as a drive letter.
    :param default_protocol: Protocol given to paths without a ``proto://`` prefix.
    :raises ValueError: If ``default_protocol`` is empty or contains a delimiter.
    """

    drives: bool = False
    default_protocol: str = "file"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check that the default protocol can be written out and parsed back.

        :raises ValueError: If the protocol is empty or contains ``://``, ``/`` or ``#``.
        """
        if not self.default_protocol:
            raise ValueError("Default protocol must not be empty")
        for token in _RESERVED:
            if token in self.default_protocol:
                raise ValueError(f"Default protocol {self.default_protocol!r} must not contain {token!r}")

    @classmethod
    def for_platform(cls, name: str = os.name) -> PathPolicy:
        """Policy for an ``os.name`` value. Only ``"nt"`` has drive letters."""
        return cls(drives=name == "nt")

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> PathPolicy:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with optional ``drives`` and ``default_protocol`` keys.
        """
        unknown = sorted(set(data) - {"drives", "default_protocol"})
        if unknown:
            raise ValueError(f"Unknown path policy keys: {unknown}")

        drives = data.get("drives", False)
        if not isinstance(drives, bool):
            msg = "Expected 'drives' to be a bool"
            raise TypeError(msg)
        protocol = data.get("default_protocol", "file")
        if not isinstance(protocol, str):
            msg = "Expected 'default_protocol' to be a string"
            raise TypeError(msg)

        return cls(drives=drives, default_protocol=protocol)


DEFAULT_POLICY: PathPolicy = PathPolicy.for_platform()
