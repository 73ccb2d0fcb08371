from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class Orientation(Enum):
    """Which screen axis carries the argument of an element."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def default(cls) -> "Orientation":
        return cls.VERTICAL


@dataclass(frozen=True)
class PlotPoint:
    """A point in plot (logical) coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Pos2:
    """A point in screen coordinates, Y pointing down."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Pos2:
        return Pos2(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Rect:
    min: Pos2
    max: Pos2

    @classmethod
    def from_two_pos(cls, a: Pos2, b: Pos2) -> Rect:
        return cls(
            min=Pos2(min(a.x, b.x), min(a.y, b.y)),
            max=Pos2(max(a.x, b.x), max(a.y, b.y)),
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


@dataclass(frozen=True)
class Color32:
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, value: str) -> Color32:
        """Parse ``#rrggbb`` or ``#rrggbbaa``."""
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            raise ValueError(f"Expected #rrggbb or #rrggbbaa, got {value!r}")
        channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
        return cls(*channels)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def opacity(self) -> float:
        return self.a / 255.0

    def is_transparent(self) -> bool:
        return self.a == 0


TRANSPARENT = Color32(0, 0, 0, 0)
BLACK = Color32(0, 0, 0)


@dataclass(frozen=True)
class Stroke:
    width: float
    color: Color32

    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.color.is_transparent()


@dataclass(frozen=True)
class PlotBounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: list[PlotPoint]) -> PlotBounds:
        if not points:
            raise ValueError("PlotBounds.from_points needs at least one point")
        xs = [point.x for point in points]
        ys = [point.y for point in points]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> PlotPoint:
        return PlotPoint((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def union(self, other: PlotBounds) -> PlotBounds:
        return PlotBounds(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def expanded(self, margin_fraction: float) -> PlotBounds:
        dx = self.width * margin_fraction
        dy = self.height * margin_fraction
        return PlotBounds(self.min_x - dx, self.min_y - dy, self.max_x + dx, self.max_y + dy)


# Drawable primitives appended to a render batch.


StrokeKind = Literal["inside", "middle", "outside"]


@dataclass(frozen=True)
class RectShape:
    rect: Rect
    corner_radius: float
    fill: Color32
    stroke: Stroke
    stroke_kind: StrokeKind = "inside"


@dataclass(frozen=True)
class LineSegment:
    points: tuple[Pos2, Pos2]
    stroke: Stroke


@dataclass(frozen=True)
class TextShape:
    pos: Pos2
    text: str
    color: Color32
    font_size: float
    anchor: str = "left_bottom"


Shape = RectShape | LineSegment | TextShape


@dataclass(frozen=True)
class Cursor:
    """A ruler line the host draws across the whole plot."""

    kind: Literal["vertical", "horizontal"]
    value: float

    @classmethod
    def vertical(cls, x: float) -> Cursor:
        return cls("vertical", x)

    @classmethod
    def horizontal(cls, y: float) -> Cursor:
        return cls("horizontal", y)
