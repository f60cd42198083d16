from .ranges import Range, overlaps_any, ranges_overlap

__all__ = ["Range", "ranges_overlap", "overlaps_any"]
