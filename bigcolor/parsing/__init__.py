from .errors import ParseError
from .named_colors import NAMED_COLORS, lookup_name, name_for_rgb
from .tokens import parse_number, parse_percentage, parse_quantity, parse_angle, parse_raw_angle, parse_alpha
from .parser import ParsedColor, parse_color, parse_hex, split_arguments, is_valid_color, SUPPORTED_FUNCTIONS

__all__ = [
    'ParseError',
    'NAMED_COLORS', 'lookup_name', 'name_for_rgb',
    'parse_number', 'parse_percentage', 'parse_quantity', 'parse_angle', 'parse_raw_angle', 'parse_alpha',
    'ParsedColor', 'parse_color', 'parse_hex', 'split_arguments', 'is_valid_color', 'SUPPORTED_FUNCTIONS',
]
