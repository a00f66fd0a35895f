"""ProtocolRegistry — dispatch table from protocol names to resource handlers."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from resource_path._errors import UnknownProtocol
from resource_path._path import ResourcePath, protocol_hash

log = logging.getLogger(__name__)

H = TypeVar("H")


class ProtocolRegistry(Generic[H]):
    """Maps protocols to handlers, keyed by :func:`protocol_hash`.

    Lookups by :class:`ResourcePath` use the path's hash, then compare the
    protocol name once to rule out a collision with a registered protocol.
    """

    def __init__(self) -> None:
        self._handlers: dict[int, H] = {}
        self._names: dict[int, str] = {}

    def register(self, protocol: str, handler: H) -> None:
        """Register *handler* for *protocol*, replacing any previous handler.

        :raises ValueError: If *protocol* is empty or its hash is already taken by another protocol.
        """
        if not protocol:
            raise ValueError("Protocol name must not be empty")
        key = protocol_hash(protocol)
        existing = self._names.get(key)
        if existing is not None and existing != protocol:
            raise ValueError(f"Protocol {protocol!r} has the same hash as registered protocol {existing!r}")
        if existing is not None:
            log.debug("Replacing handler for protocol %r", protocol)
        else:
            log.debug("Registering handler for protocol %r", protocol)
        self._handlers[key] = handler
        self._names[key] = protocol

    def unregister(self, protocol: str) -> None:
        """Remove the handler for *protocol*.

        :raises UnknownProtocol: If nothing is registered for *protocol*.
        """
        key = self._key(protocol)
        del self._handlers[key]
        del self._names[key]
        log.debug("Unregistered handler for protocol %r", protocol)

    def get(self, target: ResourcePath | str) -> H:
        """Handler for a path's protocol, or for a protocol name.

        :raises UnknownProtocol: If nothing is registered for the protocol.
        """
        if isinstance(target, ResourcePath):
            key = self._key(target.protocol, target.protocol_hash, path=target.to_string())
        else:
            key = self._key(target)
        return self._handlers[key]

    def _key(self, protocol: str, key: int | None = None, *, path: str | None = None) -> int:
        if key is None:
            key = protocol_hash(protocol)
        if self._names.get(key) != protocol:
            available = sorted(self._names.values())
            raise UnknownProtocol(
                f"No handler for protocol {protocol!r}. Registered protocols: {available}",
                path=path,
                protocol=protocol,
            )
        return key

    @property
    def protocols(self) -> list[str]:
        """Registered protocol names, sorted."""
        return sorted(self._names.values())

    def __contains__(self, target: object) -> bool:
        if isinstance(target, ResourcePath):
            return self._names.get(target.protocol_hash) == target.protocol
        if isinstance(target, str):
            return self._names.get(protocol_hash(target)) == target
        return False

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"ProtocolRegistry(protocols={self.protocols!r})"
