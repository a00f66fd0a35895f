"""Quickstart — parse, inspect, and compose resource paths.

Demonstrates:
- Parsing paths with protocols, drives and portions
- Reading components
- Building paths with ``/`` and walking up with ``parent``
"""

from __future__ import annotations

from resource_path import PathPolicy, ResourcePath

if __name__ == "__main__":
    windows = PathPolicy(drives=True)

    # Parse an archive entry
    path = ResourcePath("zip://C:/Program Files/Game/media.zip#poem.txt", policy=windows)
    print(f"Protocol: {path.protocol}")
    print(f"Drive: {path.drive}")
    print(f"Directory: {path.get_directory()} (parent directory: {path.get_directory(1)})")
    print(f"Archive: {path.filename} ({path.extension})")
    print(f"Entry: {path.portion}")
    print(f"Native path of the archive: {path.to_os_string()}")

    # '..' is resolved while parsing
    game = ResourcePath("C:/Program Files/My Game/../No my other game/", policy=windows)
    print(f"\nResolved: {game}")

    # Build paths incrementally
    exe = game / "bin/Game.exe"
    exe /= "../Launcher.exe"
    print(f"Composed: {exe}")

    # Walk up, then re-root under another base
    print(f"Parent: {exe.parent}")
    print(f"Re-rooted: {ResourcePath('/mnt/backup/') / exe.relative}")

    print("\nDone!")
