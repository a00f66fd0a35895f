"""Uniform paths for files on disk and entries inside archives."""

from resource_path._config import DEFAULT_POLICY, PathPolicy
from resource_path._errors import DirectoryOutOfRange, ResourcePathError, UnknownProtocol
from resource_path._path import BAD_PATH, ResourcePath, parse, protocol_hash
from resource_path._registry import ProtocolRegistry
from resource_path._types import PathInput

__version__ = "0.1.0"

__all__ = [
    # Path
    "ResourcePath",
    "BAD_PATH",
    "parse",
    "protocol_hash",
    "PathInput",
    # Policy
    "PathPolicy",
    "DEFAULT_POLICY",
    # Dispatch
    "ProtocolRegistry",
    # Errors
    "ResourcePathError",
    "DirectoryOutOfRange",
    "UnknownProtocol",
    # Version
    "__version__",
]
