from enum import Enum


class WCAGLevel(str, Enum):
    AA = "AA"
    AAA = "AAA"

    @classmethod
    def coerce(cls, level: "WCAGLevel | str") -> "WCAGLevel":
        """Accept members or case-insensitive names."""
        if isinstance(level, cls):
            return level
        return cls(str(level).strip().upper())


class WCAGSize(str, Enum):
    SMALL = "small"
    LARGE = "large"

    @classmethod
    def coerce(cls, size: "WCAGSize | str") -> "WCAGSize":
        if isinstance(size, cls):
            return size
        return cls(str(size).strip().lower())


# Minimum contrast ratios from WCAG 2.1 success criteria 1.4.3 and 1.4.6
READABILITY_THRESHOLDS = {
    (WCAGLevel.AA, WCAGSize.SMALL): 4.5,
    (WCAGLevel.AA, WCAGSize.LARGE): 3.0,
    (WCAGLevel.AAA, WCAGSize.SMALL): 7.0,
    (WCAGLevel.AAA, WCAGSize.LARGE): 4.5,
}
