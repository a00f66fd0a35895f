"""Protocol dispatch — route paths to loaders by protocol.

Demonstrates:
- Registering handlers in a ProtocolRegistry
- Dispatching paths by their protocol hash
- Handling an unregistered protocol
"""

from __future__ import annotations

import logging

from resource_path import ProtocolRegistry, ResourcePath, UnknownProtocol


def load_file(path: ResourcePath) -> str:
    return f"open({path.to_os_string()!r})"


def load_zip_entry(path: ResourcePath) -> str:
    return f"ZipFile({path.to_os_string()!r}).open({path.portion!r})"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    loaders = ProtocolRegistry()
    loaders.register("file", load_file)
    loaders.register("zip", load_zip_entry)

    for raw in ["/srv/game/Game.exe", "zip:///srv/game/media.zip#poems/poem.txt", "memory://scratch/"]:
        path = ResourcePath(raw)
        try:
            loader = loaders.get(path)
        except UnknownProtocol as exc:
            print(f"{path}: {exc}")
            continue
        print(f"{path}: {loader(path)}")

    print("\nDone!")
