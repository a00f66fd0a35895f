"""Type aliases used throughout resource_path."""

from __future__ import annotations

import os  # noqa: TC003
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from resource_path._path import ResourcePath

PathInput = Union[str, "os.PathLike[str]", "ResourcePath"]  # noqa: UP007
