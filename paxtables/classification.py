"""Point classification codes and their bit masks."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "Classification",
    "ClassificationMask",
    "has",
    "main_classification",
    "normal_lm_filter",
    "is_synthetic",
    "is_keypoint",
    "is_withheld",
    "is_unmasked",
    "is_classified",
    "is_ground",
    "is_vegetation",
]


class Classification(IntEnum):
    """Standard point classes."""

    NEVER_CLASSIFIED = 0
    UNSPECIFIED = 1
    GROUND = 2
    LOW_VEGETATION = 3
    MEDIUM_VEGETATION = 4
    HIGH_VEGETATION = 5
    BUILDING = 6
    LOW_POINT_NOISE = 7
    WATER = 9
    RAIL = 10
    ROAD = 11
    WIRE_GUARD = 13
    WIRE_CONDUCTOR = 14
    TRANSMISSION_TOWER = 15
    WIRE_STRUCT_CONNECTOR = 16
    BRIDGE = 17
    HIGH_NOISE = 18
    OVERHEAD_STRUCTURE = 19
    IGNORED_GROUND = 20
    SNOW = 21
    TEMPORAL_EXCLUSION = 22


class ClassificationMask(IntEnum):
    """Bit masks applied to a classification byte."""

    CLASSIFIED_MASK = 30
    LOWBIT_MASK = 31
    SYNTHETIC_MASK = 32
    KEYPOINT_MASK = 64
    WITHHELD_MASK = 128
    HIGHBIT_MASK = 32 | 64 | 128


_VEGETATION = frozenset(
    {
        Classification.LOW_VEGETATION,
        Classification.MEDIUM_VEGETATION,
        Classification.HIGH_VEGETATION,
    }
)
_LM_VALID = frozenset(
    {
        Classification.NEVER_CLASSIFIED,
        Classification.UNSPECIFIED,
        Classification.GROUND,
    }
)


def has(classification, mask) -> bool:
    """True if any bit of mask is set in classification."""
    return bool(int(classification) & int(mask))


def main_classification(classification):
    """Classification with the high bits cleared.

    Returns a Classification member where one exists, otherwise the plain code.
    """
    code = int(classification) & ClassificationMask.LOWBIT_MASK
    try:
        return Classification(code)
    except ValueError:
        return code


def normal_lm_filter(classification) -> bool:
    """Is the point valid when processing national survey data?"""
    return main_classification(classification) in _LM_VALID


def is_synthetic(classification) -> bool:
    """Was the point created by a technique other than lidar collection?"""
    return has(classification, ClassificationMask.SYNTHETIC_MASK)


def is_keypoint(classification) -> bool:
    """Is the point a model key-point?"""
    return has(classification, ClassificationMask.KEYPOINT_MASK)


def is_withheld(classification) -> bool:
    """Should the point be left out of processing?"""
    return has(classification, ClassificationMask.WITHHELD_MASK)


def is_unmasked(classification) -> bool:
    """Are all the high bits cleared?"""
    return not has(classification, ClassificationMask.HIGHBIT_MASK)


def is_classified(classification) -> bool:
    """Is the class other than never classified or unspecified?"""
    return has(classification, ClassificationMask.CLASSIFIED_MASK)


def is_ground(classification) -> bool:
    """Is the point classified as ground?"""
    return main_classification(classification) == Classification.GROUND


def is_vegetation(classification) -> bool:
    """Is the point classified as vegetation?"""
    return main_classification(classification) in _VEGETATION