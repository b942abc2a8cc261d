"""Output layer: raw binary snapshot and JSON rendering of the state."""

from pynmea0183.output.layout import SNAPSHOT_SIZE, pack_snapshot, unpack_snapshot
from pynmea0183.output.render import render_json, write_output

__all__ = ["SNAPSHOT_SIZE", "pack_snapshot", "render_json", "unpack_snapshot", "write_output"]
