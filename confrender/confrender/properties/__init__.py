"""Property document persistence."""

from .store import dump_properties, load_properties, merge_properties, parse_override

__all__ = ["dump_properties", "load_properties", "merge_properties", "parse_override"]
