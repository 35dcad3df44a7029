from enum import Enum


class BlendMode(str, Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOR_DODGE = "color-dodge"
    COLOR_BURN = "color-burn"
    HARD_LIGHT = "hard-light"
    SOFT_LIGHT = "soft-light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"

    @classmethod
    def coerce(cls, mode: "BlendMode | str") -> "BlendMode":
        """Accept enum members or their CSS names (``"softlight"`` and ``"soft_light"`` too)."""
        if isinstance(mode, cls):
            return mode
        key = str(mode).strip().lower().replace("_", "-")
        for member in cls:
            if key in (member.value, member.value.replace("-", "")):
                return member
        raise ValueError(f"Unknown blend mode: {mode!r}")
