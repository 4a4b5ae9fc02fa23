from enum import Enum
from typing import Any, Iterable, List, NamedTuple, Sequence, Tuple, Union

import numpy as np


class NamedColor(str, Enum):
    """CSS color names accepted by plotly.js."""

    ALICE_BLUE = "aliceblue"
    ANTIQUE_WHITE = "antiquewhite"
    AQUA = "aqua"
    AQUAMARINE = "aquamarine"
    AZURE = "azure"
    BEIGE = "beige"
    BISQUE = "bisque"
    BLACK = "black"
    BLANCHED_ALMOND = "blanchedalmond"
    BLUE = "blue"
    BLUE_VIOLET = "blueviolet"
    BROWN = "brown"
    BURLY_WOOD = "burlywood"
    CADET_BLUE = "cadetblue"
    CHARTREUSE = "chartreuse"
    CHOCOLATE = "chocolate"
    CORAL = "coral"
    CORNFLOWER_BLUE = "cornflowerblue"
    CORNSILK = "cornsilk"
    CRIMSON = "crimson"
    CYAN = "cyan"
    DARK_BLUE = "darkblue"
    DARK_CYAN = "darkcyan"
    DARK_GOLDENROD = "darkgoldenrod"
    DARK_GRAY = "darkgray"
    DARK_GREEN = "darkgreen"
    DARK_GREY = "darkgrey"
    DARK_KHAKI = "darkkhaki"
    DARK_MAGENTA = "darkmagenta"
    DARK_OLIVE_GREEN = "darkolivegreen"
    DARK_ORANGE = "darkorange"
    DARK_ORCHID = "darkorchid"
    DARK_RED = "darkred"
    DARK_SALMON = "darksalmon"
    DARK_SEA_GREEN = "darkseagreen"
    DARK_SLATE_BLUE = "darkslateblue"
    DARK_SLATE_GRAY = "darkslategray"
    DARK_SLATE_GREY = "darkslategrey"
    DARK_TURQUOISE = "darkturquoise"
    DARK_VIOLET = "darkviolet"
    DEEP_PINK = "deeppink"
    DEEP_SKY_BLUE = "deepskyblue"
    DIM_GRAY = "dimgray"
    DIM_GREY = "dimgrey"
    DODGER_BLUE = "dodgerblue"
    FIRE_BRICK = "firebrick"
    FLORAL_WHITE = "floralwhite"
    FOREST_GREEN = "forestgreen"
    FUCHSIA = "fuchsia"
    GAINSBORO = "gainsboro"
    GHOST_WHITE = "ghostwhite"
    GOLD = "gold"
    GOLDENROD = "goldenrod"
    GRAY = "gray"
    GREY = "grey"
    GREEN = "green"
    GREEN_YELLOW = "greenyellow"
    HONEYDEW = "honeydew"
    HOT_PINK = "hotpink"
    INDIAN_RED = "indianred"
    INDIGO = "indigo"
    IVORY = "ivory"
    KHAKI = "khaki"
    LAVENDER = "lavender"
    LAVENDER_BLUSH = "lavenderblush"
    LAWN_GREEN = "lawngreen"
    LEMON_CHIFFON = "lemonchiffon"
    LIGHT_BLUE = "lightblue"
    LIGHT_CORAL = "lightcoral"
    LIGHT_CYAN = "lightcyan"
    LIGHT_GOLDENROD_YELLOW = "lightgoldenrodyellow"
    LIGHT_GRAY = "lightgray"
    LIGHT_GREEN = "lightgreen"
    LIGHT_GREY = "lightgrey"
    LIGHT_PINK = "lightpink"
    LIGHT_SALMON = "lightsalmon"
    LIGHT_SEA_GREEN = "lightseagreen"
    LIGHT_SKY_BLUE = "lightskyblue"
    LIGHT_SLATE_GRAY = "lightslategray"
    LIGHT_SLATE_GREY = "lightslategrey"
    LIGHT_STEEL_BLUE = "lightsteelblue"
    LIGHT_YELLOW = "lightyellow"
    LIME = "lime"
    LIME_GREEN = "limegreen"
    LINEN = "linen"
    MAGENTA = "magenta"
    MAROON = "maroon"
    MEDIUM_AQUAMARINE = "mediumaquamarine"
    MEDIUM_BLUE = "mediumblue"
    MEDIUM_ORCHID = "mediumorchid"
    MEDIUM_PURPLE = "mediumpurple"
    MEDIUM_SEA_GREEN = "mediumseagreen"
    MEDIUM_SLATE_BLUE = "mediumslateblue"
    MEDIUM_SPRING_GREEN = "mediumspringgreen"
    MEDIUM_TURQUOISE = "mediumturquoise"
    MEDIUM_VIOLET_RED = "mediumvioletred"
    MIDNIGHT_BLUE = "midnightblue"
    MINT_CREAM = "mintcream"
    MISTY_ROSE = "mistyrose"
    MOCCASIN = "moccasin"
    NAVAJO_WHITE = "navajowhite"
    NAVY = "navy"
    OLD_LACE = "oldlace"
    OLIVE = "olive"
    OLIVE_DRAB = "olivedrab"
    ORANGE = "orange"
    ORANGE_RED = "orangered"
    ORCHID = "orchid"
    PALE_GOLDENROD = "palegoldenrod"
    PALE_GREEN = "palegreen"
    PALE_TURQUOISE = "paleturquoise"
    PALE_VIOLET_RED = "palevioletred"
    PAPAYA_WHIP = "papayawhip"
    PEACH_PUFF = "peachpuff"
    PERU = "peru"
    PINK = "pink"
    PLUM = "plum"
    POWDER_BLUE = "powderblue"
    PURPLE = "purple"
    REBECCA_PURPLE = "rebeccapurple"
    RED = "red"
    ROSY_BROWN = "rosybrown"
    ROYAL_BLUE = "royalblue"
    SADDLE_BROWN = "saddlebrown"
    SALMON = "salmon"
    SANDY_BROWN = "sandybrown"
    SEA_GREEN = "seagreen"
    SEASHELL = "seashell"
    SIENNA = "sienna"
    SILVER = "silver"
    SKY_BLUE = "skyblue"
    SLATE_BLUE = "slateblue"
    SLATE_GRAY = "slategray"
    SLATE_GREY = "slategrey"
    SNOW = "snow"
    SPRING_GREEN = "springgreen"
    STEEL_BLUE = "steelblue"
    TAN = "tan"
    TEAL = "teal"
    THISTLE = "thistle"
    TOMATO = "tomato"
    TURQUOISE = "turquoise"
    VIOLET = "violet"
    WHEAT = "wheat"
    WHITE = "white"
    WHITE_SMOKE = "whitesmoke"
    YELLOW = "yellow"
    YELLOW_GREEN = "yellowgreen"
    TRANSPARENT = "transparent"


def _format_alpha(a: float) -> str:
    # 1.0 -> "1", 0.5 -> "0.5"
    s = repr(float(a))
    return s[:-2] if s.endswith(".0") else s


class Rgb(NamedTuple):
    r: int
    g: int
    b: int

    def for_json(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: float

    def for_json(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {_format_alpha(self.a)})"


ColorLike = Union[NamedColor, Rgb, Rgba, Tuple[int, int, int], Tuple[int, int, int, float], str]


def to_color(color: ColorLike) -> str:
    """
    Convert any accepted color input to the string plotly.js expects.

    Named colors become their css token, `Rgb`/`Rgba` (or plain 3- and
    4-tuples) become `rgb(...)`/`rgba(...)`, and any other string, such as a
    hex code, is passed through unchanged.
    """
    if isinstance(color, NamedColor):
        return color.value
    if isinstance(color, (Rgb, Rgba)):
        return color.for_json()
    if isinstance(color, str):
        return color
    if isinstance(color, tuple):
        if len(color) == 3:
            return Rgb(*color).for_json()
        if len(color) == 4:
            return Rgba(*color).for_json()
    raise TypeError(f"Cannot interpret {color!r} as a color")


def to_color_array(colors: Iterable[ColorLike]) -> List[str]:
    return [to_color(c) for c in colors]


def to_color_or_array(value: Any) -> Any:
    """
    Marker colors may be a single color, a list of colors, or numeric values
    mapped through a colorscale.
    """
    if isinstance(value, (str, tuple)):
        return to_color(value)
    if np.isscalar(value):
        return value
    if isinstance(value, np.ndarray):
        return value.copy()
    return [to_color(v) if isinstance(v, (str, tuple)) else v for v in value]


class ColorScalePalette(str, Enum):
    GREYS = "Greys"
    YL_GN_BU = "YlGnBu"
    GREENS = "Greens"
    YL_OR_RD = "YlOrRd"
    BLUERED = "Bluered"
    RD_BU = "RdBu"
    REDS = "Reds"
    BLUES = "Blues"
    PICNIC = "Picnic"
    RAINBOW = "Rainbow"
    PORTLAND = "Portland"
    JET = "Jet"
    HOT = "Hot"
    BLACKBODY = "Blackbody"
    EARTH = "Earth"
    ELECTRIC = "Electric"
    VIRIDIS = "Viridis"
    CIVIDIS = "Cividis"


ColorScaleLike = Union[ColorScalePalette, str, Sequence[Tuple[float, ColorLike]]]


def to_color_scale(scale: ColorScaleLike) -> Any:
    """A palette name, or a sequence of (stop, color) pairs."""
    if isinstance(scale, ColorScalePalette):
        return scale.value
    if isinstance(scale, str):
        return scale
    return [[stop, to_color(color)] for stop, color in scale]
