MIN_MIRED = 153
MAX_MIRED = 500


def srgb_to_xy(r: int, g: int, b: int) -> tuple[float, float]:
    """CIE xy for an sRGB colour with 0..255 channels."""
    def lin(u):
        u = u / 255
        return pow((u + 0.055) / 1.055, 2.4) if u > 0.04045 else u / 12.92

    R, G, B = lin(r), lin(g), lin(b)
    X = R * 0.4124 + G * 0.3576 + B * 0.1805
    Y = R * 0.2126 + G * 0.7152 + B * 0.0722
    Z = R * 0.0193 + G * 0.1192 + B * 0.9505
    denom = (X + Y + Z) or 1e-9
    return round(X / denom, 4), round(Y / denom, 4)


def kelvin_to_mired(kelvin: float) -> int:
    if kelvin <= 0:
        raise ValueError(f"'kelvin' must be positive!\n{kelvin=}")
    return max(MIN_MIRED, min(round(1_000_000 / kelvin), MAX_MIRED))


def mired_to_kelvin(mired: float) -> int:
    if mired <= 0:
        raise ValueError(f"'mired' must be positive!\n{mired=}")
    return round(1_000_000 / mired)
