from functools import lru_cache


@lru_cache(maxsize=64)
def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    s = hex_color.strip()
    if s.startswith("#"):
        s = s[1:]
    if len(s) in (3, 4):        # #rgb / #rgba
        s = "".join(c*2 for c in s)
    if len(s) not in (6, 8):
        raise ValueError(f"Invalid hex: {hex_color!r}")
    r = int(s[0:2], 16)
    g = int(s[2:4], 16)
    b = int(s[4:6], 16)
    # ignore alpha if present
    return r, g, b


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = (int(c) & 255 for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"
