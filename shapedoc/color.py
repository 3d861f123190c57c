from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


RGBA = tuple[int, int, int, int]


class ColorName(str, Enum):
    """The 16 basic CSS color keywords, in palette order."""

    BLACK = "black"
    SILVER = "silver"
    GRAY = "gray"
    WHITE = "white"
    MAROON = "maroon"
    RED = "red"
    PURPLE = "purple"
    FUCHSIA = "fuchsia"
    GREEN = "green"
    LIME = "lime"
    OLIVE = "olive"
    YELLOW = "yellow"
    NAVY = "navy"
    BLUE = "blue"
    TEAL = "teal"
    AQUA = "aqua"


NAMED_RGB: dict[ColorName, tuple[int, int, int]] = {
    ColorName.BLACK: (0x00, 0x00, 0x00),
    ColorName.SILVER: (0xC0, 0xC0, 0xC0),
    ColorName.GRAY: (0x80, 0x80, 0x80),
    ColorName.WHITE: (0xFF, 0xFF, 0xFF),
    ColorName.MAROON: (0x80, 0x00, 0x00),
    ColorName.RED: (0xFF, 0x00, 0x00),
    ColorName.PURPLE: (0x80, 0x00, 0x80),
    ColorName.FUCHSIA: (0xFF, 0x00, 0xFF),
    ColorName.GREEN: (0x00, 0x80, 0x00),
    ColorName.LIME: (0x00, 0xFF, 0x00),
    ColorName.OLIVE: (0x80, 0x80, 0x00),
    ColorName.YELLOW: (0xFF, 0xFF, 0x00),
    ColorName.NAVY: (0x00, 0x00, 0x80),
    ColorName.BLUE: (0x00, 0x00, 0xFF),
    ColorName.TEAL: (0x00, 0x80, 0x80),
    ColorName.AQUA: (0x00, 0xFF, 0xFF),
}


@dataclass(frozen=True)
class Color:
    """Either a named palette color or an explicit RGB triple.

    Build values with `Color.named`, `Color.rgb` or `Color.from_gray`; exactly
    one of `name` / `channels` is populated.
    """

    name: ColorName | None = None
    channels: tuple[int, int, int] | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.channels is None):
            raise ValueError("Color requires exactly one of `name` or `channels`")
        if self.name is not None and not isinstance(self.name, ColorName):
            raise ValueError(f"Color.name must be a ColorName, got {self.name!r}")
        if self.channels is not None:
            object.__setattr__(self, "channels", tuple(self.channels))
            if len(self.channels) != 3:
                raise ValueError("Color.channels must have exactly 3 values")
            for value in self.channels:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"Color channel must be an int, got {value!r}")
                if value < 0 or value > 255:
                    raise ValueError(f"Color channel must be in [0, 255], got {value}")

    @classmethod
    def named(cls, name: ColorName | str) -> "Color":
        try:
            resolved = ColorName(name)
        except ValueError as exc:
            raise ValueError(f"Unknown color name: {name!r}") from exc
        return cls(name=resolved)

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        return cls(channels=(red, green, blue))

    @classmethod
    def from_gray(cls, level: int) -> "Color":
        return cls.rgb(level, level, level)

    @property
    def is_named(self) -> bool:
        return self.name is not None

    def describe(self) -> str:
        if self.name is not None:
            return self.name.value
        red, green, blue = self.channels  # type: ignore[misc]
        return f"#{red:02X}{green:02X}{blue:02X}"

    def as_rgba(self, alpha: int = 255) -> RGBA:
        if alpha < 0 or alpha > 255:
            raise ValueError("alpha must be in [0, 255]")
        if self.name is not None:
            red, green, blue = NAMED_RGB[self.name]
        else:
            red, green, blue = self.channels  # type: ignore[misc]
        return (red, green, blue, alpha)

    def __str__(self) -> str:
        return self.describe()
