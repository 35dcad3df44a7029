def rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Unit RGB to unit CMYK.

    Pure black (``k == 1``) yields ``c = m = y = 0``.
    """
    k = 1 - max(r, g, b)
    if k >= 1:
        return 0.0, 0.0, 0.0, 1.0
    denom = 1 - k
    return (1 - r - k) / denom, (1 - g - k) / denom, (1 - b - k) / denom, k


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    ink = 1 - k
    return (1 - c) * ink, (1 - m) * ink, (1 - y) * ink
