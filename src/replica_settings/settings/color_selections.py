"""Color theme selections"""

from typing import Optional, Union

from PIL import ImageColor

from .base import check_index, resolve_settings_path, root_node_for
from ..config.schema import StorageConfig
from ..core.access import SettingsAccess
from ..core.document import PathLike

Color = Union[int, str]


def color_to_argb(color: Color) -> int:
    """Convert a color name, ``#rrggbb[aa]`` string, or ARGB int to ARGB.

    Args:
        color: Any color string PIL.ImageColor understands, or an unsigned
            32-bit 0xAARRGGBB value

    Returns:
        Unsigned 32-bit ARGB value, fully opaque for names without alpha

    Raises:
        ValueError: If the color is unknown or out of range
    """
    if isinstance(color, str):
        rgb = ImageColor.getrgb(color)
        alpha = rgb[3] if len(rgb) == 4 else 0xFF
        red, green, blue = rgb[:3]
        return (alpha << 24) | (red << 16) | (green << 8) | blue

    if not 0 <= color <= 0xFFFFFFFF:
        raise ValueError(f"ARGB value {color:#x} out of range")
    return color


def _to_stored(argb: int) -> str:
    # Stored as a signed 32-bit decimal for compatibility with existing files
    signed = argb - (1 << 32) if argb & 0x80000000 else argb
    return str(signed)


def _from_stored(text: str) -> Optional[int]:
    if not text:
        return None
    try:
        return int(text) & 0xFFFFFFFF
    except ValueError:
        return None


class ColorSelections:
    """Background, text and holiday colors used by the calendar views.

    Colors are addressed by slot index and returned as unsigned ARGB ints.
    Slots that were never set return the default palette entry.
    """

    BASE_FILE_NAME = "SystemSettings"
    MAIN_NODE = "ColorSelections"

    MAX_COLORS = 8
    MAX_HOLIDAY_COLORS = 2

    XML_NODE_BACKCOLOR = "BackgroundColor"
    XML_NODE_TEXTCOLOR = "TextColor"
    XML_NODE_HOLIDAYCOLOR = "HolidayColor"

    DEFAULT_BACKGROUND_COLORS = tuple(color_to_argb(name) for name in (
        "palegoldenrod",
        "lightsalmon",
        "lightskyblue",
        "lightgreen",
        "lightcoral",
        "lightyellow",
        "lightcyan",
        "lightgray",
    ))
    DEFAULT_TEXT_COLORS = (color_to_argb("black"),) * MAX_COLORS
    DEFAULT_HOLIDAY_COLORS = (color_to_argb("darkblue"), color_to_argb("darkgreen"))

    def __init__(
        self,
        file_path: Optional[PathLike] = None,
        storage: Optional[StorageConfig] = None,
    ):
        path = resolve_settings_path(self.BASE_FILE_NAME, file_path, storage)
        self.access = SettingsAccess.open(path, self.MAIN_NODE, root_node_for(storage))

    def get_background_color(self, index: int) -> int:
        check_index(index, self.MAX_COLORS, "color")
        return self._get_color(self.XML_NODE_BACKCOLOR, index, self.DEFAULT_BACKGROUND_COLORS)

    def set_background_color(self, index: int, color: Color) -> None:
        check_index(index, self.MAX_COLORS, "color")
        self._set_color(self.XML_NODE_BACKCOLOR, index, color)

    def get_text_color(self, index: int) -> int:
        check_index(index, self.MAX_COLORS, "color")
        return self._get_color(self.XML_NODE_TEXTCOLOR, index, self.DEFAULT_TEXT_COLORS)

    def set_text_color(self, index: int, color: Color) -> None:
        check_index(index, self.MAX_COLORS, "color")
        self._set_color(self.XML_NODE_TEXTCOLOR, index, color)

    def get_holiday_color(self, index: int) -> int:
        check_index(index, self.MAX_HOLIDAY_COLORS, "holiday color")
        return self._get_color(self.XML_NODE_HOLIDAYCOLOR, index, self.DEFAULT_HOLIDAY_COLORS)

    def set_holiday_color(self, index: int, color: Color) -> None:
        check_index(index, self.MAX_HOLIDAY_COLORS, "holiday color")
        self._set_color(self.XML_NODE_HOLIDAYCOLOR, index, color)

    def save(self) -> bool:
        return self.access.save_settings()

    def _get_color(self, prefix: str, index: int, defaults: tuple[int, ...]) -> int:
        argb = _from_stored(self.access.get_string(f"{prefix}{index}"))
        return defaults[index] if argb is None else argb

    def _set_color(self, prefix: str, index: int, color: Color) -> None:
        self.access.set_string(f"{prefix}{index}", _to_stored(color_to_argb(color)))
