#!/usr/bin/env python3
"""
Print a summary of the Hearthmoor MUD world content.

Loads the configured content directory (or the one given on the command
line) and shows per-area room counts and a sample room.
"""

import sys
from pathlib import Path

from hearthmoor.game.world import load_world


def main():
    """Load the world and print what was found."""
    content_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    print("=" * 70)
    print("Hearthmoor MUD - World Content")
    print("=" * 70)

    index = load_world(content_dir, verbose=True)

    print("\n📊 World Statistics:")
    print(f"   Total rooms: {index.room_count}")
    print(f"   Areas: {index.area_count}")
    for area_id, area in sorted(index.areas.items()):
        rooms = index.rooms_in_area(area_id)
        print(f"     - {area.get_title('en')} ({area_id}): {len(rooms)} rooms")

    if not index.room_count:
        return

    print("\n" + "=" * 70)
    print("Sample Room Display")
    print("=" * 70)

    room = next(iter(index.rooms.values()))
    print(room.format_description())

    for exit in room.get_exits():
        target = index.get_room_at(exit.get("location"))
        name = target.get_title("en") if target else "(unloaded)"
        print(f"   {str(exit.get('direction')):10} → {name}")


if __name__ == "__main__":
    main()
