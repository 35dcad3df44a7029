from enum import Enum
from boundednumbers import BoundType


class GradientType(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


class ExtendMode(str, Enum):
    """How query positions outside [0, 1] are folded back into range."""
    PAD = "pad"
    REPEAT = "repeat"
    REFLECT = "reflect"

    @property
    def bound_type(self) -> BoundType:
        return extend_to_bound_type[self]


extend_to_bound_type = {
    ExtendMode.PAD: BoundType.CLAMP,
    ExtendMode.REPEAT: BoundType.CYCLIC,
    ExtendMode.REFLECT: BoundType.BOUNCE,
}
