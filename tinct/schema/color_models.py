# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color model value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Value semantics: No identity, equal components mean equal colors
- Hex is canonical: Every record round-trips through ``#rrggbb``

Range conventions:
- RGB: integers 0-255
- HSL / HSV / HWB: hue 0-360 (exclusive), other channels 0-100
- CMYK: 0-100 per channel
- Lab / LCH: L 0-100, a/b/C unbounded, hue 0-360
- Oklab / Oklch: L roughly 0-1, a/b/C small floats, hue 0-360

Validation only guards hand-built records. The conversion kernels clamp and
round before constructing a record, so they never trip these checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Enumerations
# =============================================================================


class Deficiency(Enum):
    """Color vision deficiency simulated by the vision module."""
    PROTANOPIA = "protanopia"        # red-blind
    DEUTERANOPIA = "deuteranopia"    # green-blind
    TRITANOPIA = "tritanopia"        # blue-blind
    ACHROMATOPSIA = "achromatopsia"  # monochromacy


class BlendMode(Enum):
    """Per-channel blend modes."""
    NORMAL = "normal"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    SOFT_LIGHT = "soft-light"
    HARD_LIGHT = "hard-light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"


class MixSpace(Enum):
    """Interpolation space used when mixing two colors."""
    RGB = "rgb"
    LAB = "lab"
    OKLCH = "oklch"


class GradientKind(Enum):
    """CSS gradient function."""
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


class TemperatureKind(Enum):
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


class Preference(Enum):
    """Direction in which the accessible-color search moves lightness."""
    ANY = "any"
    LIGHTER = "lighter"
    DARKER = "darker"


class CodeTarget(Enum):
    """Snippet formats understood by the code exporter."""
    CSS_HEX = "css-hex"
    CSS_RGB = "css-rgb"
    CSS_RGBA = "css-rgba"
    CSS_HSL = "css-hsl"
    CSS_HSLA = "css-hsla"
    CSS_HWB = "css-hwb"
    CSS_LAB = "css-lab"
    CSS_LCH = "css-lch"
    CSS_OKLCH = "css-oklch"
    CSS_VARIABLE = "css-variable"
    SASS_VARIABLE = "sass-variable"
    TAILWIND = "tailwind"
    SWIFT = "swift"
    SWIFTUI = "swiftui"
    OBJECTIVE_C = "objective-c"
    FLUTTER = "flutter"
    KOTLIN = "kotlin"
    ANDROID_XML = "android-xml"
    ARGB_HEX = "argb-hex"
    CSHARP = "csharp"
    JAVA_AWT = "java-awt"
    INTEGER = "integer"
    HEX_INTEGER = "hex-integer"


# =============================================================================
# Helpers
# =============================================================================


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be {low:g}-{high:g}, got {value}")


def _check_hue(value: float) -> None:
    if not 0.0 <= value < 360.0:
        raise ValueError(f"Hue must be 0-360, got {value}")


# =============================================================================
# Device Spaces
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    An sRGB color with 8-bit integer channels.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are 8-bit values."""
        for name in ("r", "g", "b"):
            _check_range(name.upper(), getattr(self, name), 0, 255)

    @property
    def hex(self) -> str:
        """Canonical ``#rrggbb`` form."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSL:
    """
    Hue, saturation, lightness.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation (0-100)
        l: Lightness (0-100)
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        _check_hue(self.h)
        _check_range("Saturation", self.s, 0, 100)
        _check_range("Lightness", self.l, 0, 100)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class HSV:
    """Hue, saturation, value. Same ranges as HSL."""
    h: float
    s: float
    v: float

    def __post_init__(self) -> None:
        _check_hue(self.h)
        _check_range("Saturation", self.s, 0, 100)
        _check_range("Value", self.v, 0, 100)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "v": self.v}

    @classmethod
    def from_dict(cls, data: dict) -> HSV:
        return cls(h=data["h"], s=data["s"], v=data["v"])


@dataclass(frozen=True, slots=True)
class HWB:
    """Hue, whiteness, blackness."""
    h: float
    w: float
    b: float

    def __post_init__(self) -> None:
        _check_hue(self.h)
        _check_range("Whiteness", self.w, 0, 100)
        _check_range("Blackness", self.b, 0, 100)

    def to_dict(self) -> dict:
        return {"h": self.h, "w": self.w, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> HWB:
        return cls(h=data["h"], w=data["w"], b=data["b"])


@dataclass(frozen=True, slots=True)
class CMYK:
    """
    Subtractive process color.

    Pure black is ``CMYK(0, 0, 0, 100)``; the chromatic channels are zero
    rather than undefined.
    """
    c: float
    m: float
    y: float
    k: float

    def __post_init__(self) -> None:
        for name in ("c", "m", "y", "k"):
            _check_range(name.upper(), getattr(self, name), 0, 100)

    def to_dict(self) -> dict:
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}

    @classmethod
    def from_dict(cls, data: dict) -> CMYK:
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])


# =============================================================================
# Perceptual Spaces
# =============================================================================


@dataclass(frozen=True, slots=True)
class Lab:
    """
    CIE L*a*b* relative to the D65 white point.

    Attributes:
        l: Lightness (0 = black, 100 = diffuse white)
        a: Green (-) to red (+) axis
        b: Blue (-) to yellow (+) axis
    """
    l: float
    a: float
    b: float

    def to_dict(self) -> dict:
        return {"l": self.l, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Lab:
        return cls(l=data["l"], a=data["a"], b=data["b"])


@dataclass(frozen=True, slots=True)
class LCH:
    """Cylindrical form of CIE Lab: ``c = hypot(a, b)``, ``h = atan2(b, a)``."""
    l: float
    c: float
    h: float

    def __post_init__(self) -> None:
        if self.c < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.c}")
        _check_hue(self.h)

    def to_dict(self) -> dict:
        return {"l": self.l, "c": self.c, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> LCH:
        return cls(l=data["l"], c=data["c"], h=data["h"])


@dataclass(frozen=True, slots=True)
class Oklab:
    """
    A color in OKLab.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        a: Green (-) to red (+) axis
        b: Blue (-) to yellow (+) axis
    """
    l: float
    a: float
    b: float

    def to_dict(self) -> dict:
        return {"l": self.l, "a": self.a, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Oklab:
        return cls(l=data["l"], a=data["a"], b=data["b"])


@dataclass(frozen=True, slots=True)
class Oklch:
    """
    A color in OKLCH.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        c: Chroma (0.0 = neutral gray, typical max ~0.32 for sRGB)
        h: Hue in degrees [0, 360)
    """
    l: float
    c: float
    h: float

    def __post_init__(self) -> None:
        if self.c < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.c}")
        _check_hue(self.h)

    def to_dict(self) -> dict:
        return {"l": self.l, "c": self.c, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> Oklch:
        return cls(l=data["l"], c=data["c"], h=data["h"])


# =============================================================================
# Palettes
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    """A named reference color (``name`` -> ``#rrggbb``)."""
    name: str
    hex: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Palette entry name cannot be empty")

    def to_dict(self) -> dict:
        return {"name": self.name, "hex": self.hex}

    @classmethod
    def from_dict(cls, data: dict) -> PaletteEntry:
        return cls(name=data["name"], hex=data["hex"])


@dataclass(frozen=True, slots=True)
class SavedPalette:
    """
    A user palette as persisted by the host application.

    The engine never stores these. It only produces and consumes the
    ``colors`` hex arrays, and offers a dictionary form matching the
    host's JSON keys.

    Attributes:
        id: Opaque identifier chosen by the host
        name: Display name
        colors: Hex colors in palette order
        created_at: Creation time in epoch milliseconds
        tags: Optional free-form labels
    """
    id: str
    name: str
    colors: tuple[str, ...]
    created_at: int
    tags: Optional[tuple[str, ...]] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary (host JSON layout)."""
        d = {
            "id": self.id,
            "name": self.name,
            "colors": list(self.colors),
            "createdAt": self.created_at,
        }
        if self.tags is not None:
            d["tags"] = list(self.tags)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> SavedPalette:
        """Deserialize from dictionary."""
        tags = data.get("tags")
        return cls(
            id=data["id"],
            name=data["name"],
            colors=tuple(data.get("colors", ())),
            created_at=data.get("createdAt", 0),
            tags=tuple(tags) if tags is not None else None,
        )


# =============================================================================
# Gradient Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A single stop in a gradient.

    Attributes:
        color: Hex color at this stop
        position: Position along the gradient axis in percent. Usually
            0-100; positions outside that range are kept, as in CSS.
    """
    color: str
    position: float

    def to_dict(self) -> dict:
        return {"color": self.color, "position": self.position}

    @classmethod
    def from_dict(cls, data: dict) -> GradientStop:
        return cls(color=data["color"], position=data["position"])


@dataclass(frozen=True, slots=True)
class GradientPreset:
    """A named multi-color gradient with a default angle."""
    name: str
    colors: tuple[str, ...]
    angle: float


@dataclass(frozen=True, slots=True)
class Gradient:
    """
    A gradient descriptor.

    Stops may be given in any order; rendering sorts them by position.
    """
    kind: GradientKind
    angle: float
    stops: tuple[GradientStop, ...] = field(default_factory=tuple)

    def sorted_stops(self) -> tuple[GradientStop, ...]:
        """Stops ordered by position (stable for equal positions)."""
        return tuple(sorted(self.stops, key=lambda s: s.position))

    def to_css(self) -> str:
        from tinct.derive.gradient import render_gradient
        return render_gradient(self.kind, self.angle, self.stops)

    @classmethod
    def from_preset(
        cls,
        preset: GradientPreset,
        kind: GradientKind = GradientKind.LINEAR,
    ) -> Gradient:
        """Spread the preset's colors evenly from 0% to 100%."""
        n = len(preset.colors)
        if n == 1:
            stops = (GradientStop(color=preset.colors[0], position=0.0),)
        else:
            stops = tuple(
                GradientStop(color=c, position=round(i * 100 / (n - 1), 2))
                for i, c in enumerate(preset.colors)
            )
        return cls(kind=kind, angle=preset.angle, stops=stops)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "angle": self.angle,
            "stops": [s.to_dict() for s in self.stops],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Gradient:
        return cls(
            kind=GradientKind(data["kind"]),
            angle=data["angle"],
            stops=tuple(GradientStop.from_dict(s) for s in data["stops"]),
        )


# =============================================================================
# Metric Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorTemperature:
    """
    Warm/cool classification with an approximate Kelvin figure.

    The Kelvin value is a hue-proportional heuristic for display purposes,
    not a correlated color temperature.
    """
    kind: TemperatureKind
    kelvin: int

    def to_dict(self) -> dict:
        return {"type": self.kind.value, "kelvin": self.kelvin}


@dataclass(frozen=True, slots=True)
class ApcaLevel:
    """APCA readability bucket and the smallest font size (px) it allows."""
    level: str
    min_size: int


@dataclass(frozen=True, slots=True)
class ContrastComparison:
    """WCAG ratio and APCA Lc for one foreground against a background."""
    fg: str
    wcag: float
    apca: float

    def to_dict(self) -> dict:
        return {"fg": self.fg, "wcag": self.wcag, "apca": self.apca}


@dataclass(frozen=True, slots=True)
class AccessibleSuggestion:
    hex: str
    reason: str
