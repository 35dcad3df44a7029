"""Library-wide defaults. Functions accept ``None`` to mean "use the value here"."""
from typing import Optional, TypeVar

T = TypeVar('T')

# Manipulation
DEFAULT_AMOUNT = 10.0
DEFAULT_MIX_AMOUNT = 50.0
DEFAULT_BLEND_AMOUNT = 100.0

# Schemes
ANALOGOUS_COUNT = 6
ANALOGOUS_STEP = 30.0
MONOCHROMATIC_COUNT = 6

# Interpolation
INTERPOLATION_SPACE = "rgb"
HUE_DIRECTION = "shortest"

# Contrast
WCAG_LEVEL = "AA"
WCAG_SIZE = "small"
# (R*299 + G*587 + B*114) / 1000 at or above this is "light"
BRIGHTNESS_THRESHOLD = 128.0

# Formatting
ALLOW_SHORT_HEX = False
ALPHA_DECIMALS = 2
PERCENT_DECIMALS = 1
LAB_DECIMALS = 2
OK_DECIMALS = 4
XYZ_DECIMALS = 4


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
