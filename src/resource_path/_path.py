"""ResourcePath — immutable path value for files on disk and entries inside archives."""

from __future__ import annotations

import logging
import os
import string
import zlib
from typing import TYPE_CHECKING, ClassVar, Final, NamedTuple

from resource_path._config import DEFAULT_POLICY, PathPolicy
from resource_path._errors import DirectoryOutOfRange

if TYPE_CHECKING:
    from collections.abc import Iterable

    from resource_path._types import PathInput

log = logging.getLogger(__name__)

PROTOCOL_SEPARATOR: Final = "://"
SEPARATOR: Final = "/"
PORTION_SEPARATOR: Final = "#"
DRIVE_SEPARATOR: Final = ":"
CURRENT_DIR: Final = "."
PARENT_DIR: Final = ".."


def protocol_hash(protocol: str) -> int:
    """CRC-32 of a protocol name, used as the key of protocol dispatch tables."""
    return zlib.crc32(protocol.encode("utf-8"))


class _Tokens(NamedTuple):
    """Components of a raw string before ``..`` resolution."""

    protocol: str
    drive: str
    absolute: bool
    segments: tuple[str, ...]
    filename: str
    portion: str


def _coerce(raw: object) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, os.PathLike):
        value = os.fspath(raw)
        if isinstance(value, str):
            return value
    raise TypeError(f"Expected str, os.PathLike[str] or ResourcePath, got {type(raw).__name__}")


def _starts_with_drive(text: str) -> bool:
    return len(text) >= 2 and text[1] == DRIVE_SEPARATOR and text[0] in string.ascii_letters


def _tokenize(raw: str, policy: PathPolicy) -> _Tokens:
    text = raw.replace("\\", SEPARATOR)

    protocol, sep, rest = text.partition(PROTOCOL_SEPARATOR)
    if sep:
        protocol = protocol or policy.default_protocol
    else:
        protocol, rest = policy.default_protocol, text

    drive = ""
    absolute = False
    if policy.drives and _starts_with_drive(rest):
        drive, rest, absolute = rest[0], rest[2:], True

    portion = ""
    if PORTION_SEPARATOR in rest:
        rest, _, portion = rest.rpartition(PORTION_SEPARATOR)

    absolute = absolute or rest.startswith(SEPARATOR)

    tokens = rest.split(SEPARATOR)
    filename = ""
    if tokens[-1] not in ("", CURRENT_DIR, PARENT_DIR):
        filename = tokens.pop()
    segments = tuple(token for token in tokens if token and token != CURRENT_DIR)
    return _Tokens(protocol, drive, absolute, segments, filename, portion)


def _resolve(base: Iterable[str], segments: Iterable[str]) -> tuple[str, ...]:
    """Append *segments* to *base*; ``..`` cancels the previous directory or is dropped."""
    resolved = list(base)
    for segment in segments:
        if segment != PARENT_DIR:
            resolved.append(segment)
        elif resolved:
            resolved.pop()
        else:
            log.debug("Dropping '..' with no directory left to cancel")
    return tuple(resolved)


def _split_extension(filename: str) -> tuple[str, str]:
    dot = filename.rfind(".")
    if dot < 0 or dot == len(filename) - 1:
        return filename, ""
    return filename[:dot], filename[dot + 1 :]


class ResourcePath:
    """An immutable path of the form ``protocol://drive:/dir/sub/filename.ext#portion``.

    Parsing never fails on a string: missing segments are left empty, ``.``
    and empty segments are collapsed, and each ``..`` cancels the directory
    before it (or is dropped when there is none). An empty string gives a
    value equal to :data:`BAD_PATH`.

    :param raw: A path string, an ``os.PathLike[str]``, or another ResourcePath to copy.
    :param policy: Platform policy deciding drive parsing and the default protocol.
    :raises TypeError: If *raw* is not a string-like value.
    """

    __slots__ = ("_protocol", "_drive", "_directories", "_filename", "_portion", "_absolute", "_policy")
    _protocol: str
    _drive: str
    _directories: tuple[str, ...]
    _filename: str
    _portion: str
    _absolute: bool
    _policy: PathPolicy

    BAD_PATH: ClassVar[ResourcePath]

    def __init__(self, raw: PathInput = "", *, policy: PathPolicy | None = None) -> None:
        if isinstance(raw, ResourcePath):
            if policy is not None and policy != raw._policy and not raw.is_bad:
                raw = ResourcePath(raw.to_string(), policy=policy)
            self._assign(
                raw._protocol,
                raw._drive,
                raw._directories,
                raw._filename,
                raw._portion,
                raw._absolute,
                policy or raw._policy,
            )
            return

        policy = policy or DEFAULT_POLICY
        text = _coerce(raw)
        if not text:
            self._assign("", "", (), "", "", False, policy)
            return

        tokens = _tokenize(text, policy)
        self._assign(
            tokens.protocol,
            tokens.drive,
            _resolve((), tokens.segments),
            tokens.filename,
            tokens.portion,
            tokens.absolute,
            policy,
        )

    def _assign(
        self,
        protocol: str,
        drive: str,
        directories: tuple[str, ...],
        filename: str,
        portion: str,
        absolute: bool,
        policy: PathPolicy,
    ) -> None:
        object.__setattr__(self, "_protocol", protocol)
        object.__setattr__(self, "_drive", drive)
        object.__setattr__(self, "_directories", directories)
        object.__setattr__(self, "_filename", filename)
        object.__setattr__(self, "_portion", portion)
        object.__setattr__(self, "_absolute", absolute)
        object.__setattr__(self, "_policy", policy)

    @classmethod
    def _from_parts(
        cls,
        protocol: str,
        drive: str,
        directories: tuple[str, ...],
        filename: str,
        portion: str,
        absolute: bool,
        policy: PathPolicy,
    ) -> ResourcePath:
        p = object.__new__(cls)
        p._assign(protocol, drive, directories, filename, portion, absolute, policy)
        return p

    # -- components --

    @property
    def protocol(self) -> str:
        """Protocol name, e.g. ``file``, ``zip`` or ``memory``."""
        return self._protocol

    @property
    def protocol_hash(self) -> int:
        """:func:`protocol_hash` of :attr:`protocol`."""
        return protocol_hash(self._protocol)

    @property
    def drive(self) -> str:
        """Drive letter without the colon, or empty string."""
        return self._drive

    @property
    def directories(self) -> tuple[str, ...]:
        """Directory names from the root to the leaf."""
        return self._directories

    @property
    def directory_count(self) -> int:
        """Number of directories, i.e. how deep the filename is."""
        return len(self._directories)

    @property
    def filename(self) -> str:
        """Filename including its extension, or empty string for a directory."""
        return self._filename

    @property
    def filename_only(self) -> str:
        """Filename without its extension."""
        return _split_extension(self._filename)[0]

    @property
    def extension(self) -> str:
        """Text after the last dot of the filename, without the dot.

        ``.gitignore`` has the extension ``gitignore``; ``name.`` has none.
        """
        return _split_extension(self._filename)[1]

    @property
    def portion(self) -> str:
        """Entry name after ``#``, e.g. a file inside a zip archive."""
        return self._portion

    @property
    def policy(self) -> PathPolicy:
        """Policy this path was parsed with; derived paths inherit it."""
        return self._policy

    @property
    def is_bad(self) -> bool:
        """True if this path carries no content (equal to :data:`BAD_PATH`)."""
        return not self._protocol

    def get_directory(self, level: int = 0) -> str:
        """Directory name *level* steps up from the leaf; ``0`` is the innermost.

        Example: ``ResourcePath("C:/Program Files/Game/Game.exe").get_directory(1)``
        returns ``"Program Files"`` on a platform with drive letters.

        :raises DirectoryOutOfRange: If the path has no directory at that level.
        """
        count = len(self._directories)
        if not 0 <= level < count:
            raise DirectoryOutOfRange(
                f"Directory level {level} is out of range for a path with {count} directories",
                path=self.to_string(),
                level=level,
                count=count,
            )
        return self._directories[count - 1 - level]

    def has_filename(self) -> bool:
        """True unless the path denotes a directory."""
        return bool(self._filename)

    def has_extension(self) -> bool:
        """True if the filename has a non-empty :attr:`extension`."""
        return bool(self.extension)

    def has_portion(self) -> bool:
        """True if the path names an entry inside an archive."""
        return bool(self._portion)

    def has_drive(self) -> bool:
        """True if a drive letter was parsed."""
        return bool(self._drive)

    def is_absolute(self) -> bool:
        """True if the path starts at a drive or at ``/``."""
        return self._absolute

    # -- derived paths --

    @property
    def parent(self) -> ResourcePath:
        """The path one step up.

        The archive for a path with a portion, the containing directory for
        a file, and the directory minus its last component otherwise. A path
        with nothing left to remove is its own parent.
        """
        if self._portion:
            directories, filename = self._directories, self._filename
        elif self._filename:
            directories, filename = self._directories, ""
        elif self._directories:
            directories, filename = self._directories[:-1], ""
        else:
            return self
        return ResourcePath._from_parts(
            self._protocol, self._drive, directories, filename, "", self._absolute, self._policy
        )

    @property
    def relative(self) -> ResourcePath:
        """Directories and filename only: default protocol, no drive, no root, no portion."""
        if self.is_bad:
            return self
        return ResourcePath._from_parts(
            self._policy.default_protocol, "", self._directories, self._filename, "", False, self._policy
        )

    def join(self, other: PathInput) -> ResourcePath:
        """Append *other* below this path.

        Protocol, drive and root come from this path. Its filename, if any,
        becomes a directory, then *other*'s directories are appended with
        ``..`` resolved against the combined chain. Filename and portion come
        from *other*.

        Example: ``ResourcePath("a/b/") / "../c.txt"`` is ``ResourcePath("a/c.txt")``.
        """
        if self.is_bad:
            return ResourcePath(other, policy=self._policy)

        base = (*self._directories, self._filename) if self._filename else self._directories
        if isinstance(other, ResourcePath):
            segments, filename, portion = other._directories, other._filename, other._portion
        else:
            tokens = _tokenize(_coerce(other), self._policy)
            segments, filename, portion = tokens.segments, tokens.filename, tokens.portion

        return ResourcePath._from_parts(
            self._protocol,
            self._drive,
            _resolve(base, segments),
            filename,
            portion,
            self._absolute,
            self._policy,
        )

    def __truediv__(self, other: object) -> ResourcePath:
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return self.join(other)

    def __rtruediv__(self, other: object) -> ResourcePath:
        if not isinstance(other, (str, os.PathLike)):
            return NotImplemented
        return ResourcePath(other, policy=self._policy).join(self)

    # -- formatting --

    def _body(self) -> str:
        if self._drive:
            root = f"{self._drive}{DRIVE_SEPARATOR}{SEPARATOR}"
        elif self._absolute:
            root = SEPARATOR
        else:
            root = ""
            # A leading "X:" directory would read back as a drive
            first = self._directories[0] if self._directories else self._filename
            if self._policy.drives and _starts_with_drive(first):
                root = CURRENT_DIR + SEPARATOR
        return root + "".join(d + SEPARATOR for d in self._directories) + self._filename

    def to_string(self) -> str:
        """Canonical form; parsing it again gives an equal path."""
        if self.is_bad:
            return ""
        text = f"{self._protocol}{PROTOCOL_SEPARATOR}{self._body()}"
        if self._portion:
            text += PORTION_SEPARATOR + self._portion
        return text

    def to_os_string(self) -> str:
        """Form passed to native file calls: no protocol and no portion."""
        return self._body()

    def dump(self) -> str:
        """Multi-line description of every component, for debugging."""
        return "\n".join(
            [
                f"path: {self.to_string()!r}",
                f"protocol: {self._protocol!r} (hash {self.protocol_hash})",
                f"drive: {self._drive!r}",
                f"absolute: {self._absolute}",
                f"directories: {list(self._directories)!r}",
                f"filename: {self._filename!r} (name {self.filename_only!r}, extension {self.extension!r})",
                f"portion: {self._portion!r}",
            ]
        )

    def __str__(self) -> str:
        return self.to_string()

    def __fspath__(self) -> str:
        return self.to_os_string()

    def __repr__(self) -> str:
        return f"ResourcePath({self.to_string()!r})"

    # -- value semantics --

    def _key(self) -> tuple[str, str, tuple[str, ...], str, str, bool]:
        return (self._protocol, self._drive, self._directories, self._filename, self._portion, self._absolute)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResourcePath):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self) -> tuple[object, tuple[object, ...]]:
        return (ResourcePath._from_parts, (*self._key(), self._policy))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"ResourcePath is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"ResourcePath is immutable: cannot delete '{name}'")


BAD_PATH: Final[ResourcePath] = ResourcePath._from_parts("", "", (), "", "", False, DEFAULT_POLICY)
ResourcePath.BAD_PATH = BAD_PATH


def parse(raw: PathInput, *, policy: PathPolicy | None = None) -> ResourcePath:
    """Parse *raw* into a :class:`ResourcePath`.

    Unlike the constructor, an empty input returns the :data:`BAD_PATH`
    singleton itself.
    """
    path = ResourcePath(raw, policy=policy)
    return BAD_PATH if path.is_bad else path
