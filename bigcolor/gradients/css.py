"""
CSS gradient parser.

Supported: ``linear-gradient``, ``radial-gradient``, ``conic-gradient`` and
their ``repeating-`` forms. Linear accepts an angle (deg/rad/grad/turn) or
``to <side>`` / ``to <corner>``; radial accepts ``circle``/``ellipse`` and
``at <position>``; conic accepts ``from <angle>`` and ``at <position>``.
Stops are ``<color> [<offset>% [<offset>%]]``. Explicit sizes, lengths and
interpolation hints are not supported and raise ``ParseError``.
"""
import logging
import re
from typing import Optional

from ..colors import BigColor
from ..parsing import ParseError
from ..parsing.tokens import is_angle, is_percentage, parse_percentage, parse_raw_angle
from ..types.gradient_types import ExtendMode
from .color_stop import ColorStop
from .geometry import SIDE_ANGLES, ConicGeometry, Geometry, LinearGeometry, RadialGeometry
from .gradient import Gradient

log = logging.getLogger(__name__)

_GRADIENT_RE = re.compile(r"^(repeating-)?(linear|radial|conic)-gradient\s*\((.*)\)$", re.DOTALL)

_POSITION_KEYWORDS = {
    "left": ("x", 0.0),
    "right": ("x", 1.0),
    "top": ("y", 0.0),
    "bottom": ("y", 1.0),
    "center": (None, 0.5),
}
_RADIAL_WORDS = {"circle", "ellipse", "at"}
_CONIC_WORDS = {"from", "at"}


def split_top_level(text: str, separator: Optional[str] = None) -> list[str]:
    """
    Split on ``separator`` (or runs of whitespace) outside parentheses.

    Raises:
        ParseError: on unbalanced parentheses
    """
    parts, current, depth = [], [], 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ParseError("Unbalanced ')'", text)
        is_break = ch.isspace() if separator is None else ch == separator
        if is_break and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    if depth != 0:
        raise ParseError("Unbalanced '('", text)
    parts.append("".join(current).strip())
    if separator is None:
        return [part for part in parts if part]
    return parts


def parse_css_gradient(text: str) -> Gradient:
    """
    Parse a CSS gradient function into a ``Gradient``.

    Raises:
        ParseError: for unsupported or malformed syntax
    """
    normalized = text.strip().lower()
    match = _GRADIENT_RE.match(normalized)
    if not match:
        raise ParseError(f"Not a supported CSS gradient: {text!r}", normalized[:32], text)
    repeating, kind, body = match.groups()
    args = split_top_level(body, ",")
    if any(not arg for arg in args):
        raise ParseError("Empty gradient argument", body, text)

    geometry = _PREFIX_PARSERS[kind](args[0])
    stop_args = args[1:] if geometry is not None else args
    if geometry is None:
        geometry = _DEFAULT_GEOMETRY[kind]()

    stops = _parse_stops(stop_args)
    extend = ExtendMode.REPEAT if repeating else ExtendMode.PAD
    log.debug("Parsed %s gradient with %d stops (extend=%s)", kind, len(stops), extend.value)
    return Gradient(stops, geometry, extend)


## Leading argument

def _parse_linear_prefix(arg: str) -> Optional[Geometry]:
    words = arg.split()
    if words[0] == "to":
        side = " ".join(_normalize_side(words[1:]))
        if side not in SIDE_ANGLES:
            raise ParseError(f"Unsupported direction {arg!r}", arg)
        return LinearGeometry.from_angle(SIDE_ANGLES[side])
    if len(words) == 1 and is_angle(words[0]) and not _is_bare_number(words[0]):
        return LinearGeometry.from_angle(parse_raw_angle(words[0]))
    if len(words) == 1 and words[0] == "0":
        return LinearGeometry.from_angle(0.0)
    return None


def _normalize_side(words: list[str]) -> list[str]:
    # "to right top" is the same corner as "to top right"
    if len(words) == 2 and words[0] in ("left", "right"):
        return [words[1], words[0]]
    return words


def _is_bare_number(token: str) -> bool:
    return token[-1].isdigit() or token[-1] == "."


def _parse_radial_prefix(arg: str) -> Optional[Geometry]:
    words = arg.split()
    if words[0] not in _RADIAL_WORDS:
        return None
    shape = "ellipse"
    if words[0] in ("circle", "ellipse"):
        shape = words.pop(0)
    center = _parse_at(words, arg)
    return RadialGeometry(center=center, shape=shape)


def _parse_conic_prefix(arg: str) -> Optional[Geometry]:
    words = arg.split()
    if words[0] not in _CONIC_WORDS:
        return None
    start = 0.0
    if words[0] == "from":
        if len(words) < 2 or not is_angle(words[1]):
            raise ParseError(f"Expected an angle after 'from' in {arg!r}", arg)
        start = parse_raw_angle(words[1])
        words = words[2:]
    center = _parse_at(words, arg)
    return ConicGeometry(center=center, start_angle=start)


def _parse_at(words: list[str], arg: str) -> tuple[float, float]:
    if not words:
        return 0.5, 0.5
    if words[0] != "at" or len(words) not in (2, 3):
        raise ParseError(f"Unsupported gradient shape or position {arg!r}", arg)
    return _parse_position(words[1:], arg)


def _parse_position(tokens: list[str], arg: str) -> tuple[float, float]:
    if all(is_percentage(token) for token in tokens):
        x = parse_percentage(tokens[0]) / 100
        y = parse_percentage(tokens[1]) / 100 if len(tokens) == 2 else 0.5
        return x, y
    x, y = 0.5, 0.5
    for token in tokens:
        if token not in _POSITION_KEYWORDS:
            raise ParseError(f"Unsupported position {token!r}", token)
        axis, value = _POSITION_KEYWORDS[token]
        if axis == "x":
            x = value
        elif axis == "y":
            y = value
    return x, y


_PREFIX_PARSERS = {
    "linear": _parse_linear_prefix,
    "radial": _parse_radial_prefix,
    "conic": _parse_conic_prefix,
}

_DEFAULT_GEOMETRY = {
    "linear": LinearGeometry,
    "radial": RadialGeometry,
    "conic": ConicGeometry,
}


## Stops

def _parse_stops(args: list[str]) -> list[ColorStop]:
    colors: list[BigColor] = []
    offsets: list[Optional[float]] = []
    for arg in args:
        tokens = split_top_level(arg)
        positions = []
        while len(tokens) > 1 and _is_offset(tokens[-1]):
            positions.insert(0, tokens.pop())
        if len(positions) > 2:
            raise ParseError(f"Too many positions in stop {arg!r}", arg)
        color = BigColor.parse(" ".join(tokens))
        if not positions:
            colors.append(color)
            offsets.append(None)
        for token in positions:
            colors.append(color)
            offsets.append(0.0 if token == "0" else parse_percentage(token) / 100)

    if len(colors) < 2:
        raise ParseError("A CSS gradient needs at least two color stops", ", ".join(args))
    resolved = distribute_offsets(offsets)
    return [ColorStop(color, offset) for color, offset in zip(colors, resolved)]


def _is_offset(token: str) -> bool:
    return token == "0" or is_percentage(token)


def distribute_offsets(offsets: list[Optional[float]]) -> list[float]:
    """
    Fill in missing stop offsets the way CSS does.

    A missing first offset is 0 and a missing last offset is 1; runs of
    missing offsets are spread evenly between their known neighbors. An
    offset smaller than any before it is raised to that maximum.
    """
    resolved = list(offsets)
    if resolved[0] is None:
        resolved[0] = 0.0
    if resolved[-1] is None:
        resolved[-1] = 1.0

    highest = resolved[0]
    for i, value in enumerate(resolved):
        if value is not None:
            highest = max(highest, value)
            resolved[i] = highest

    i = 0
    while i < len(resolved):
        if resolved[i] is not None:
            i += 1
            continue
        start = i - 1
        end = i
        while resolved[end] is None:
            end += 1
        lo, hi = resolved[start], resolved[end]
        span = end - start
        for j in range(i, end):
            resolved[j] = lo + (hi - lo) * (j - start) / span
        log.debug("Distributed %d stop offsets between %s and %s", end - i, lo, hi)
        i = end
    return resolved
