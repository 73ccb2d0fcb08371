from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import svgwrite

REQUIRED_GROUP_IDS = [
    "figure_root",
    "g_background",
    "g_boxes",
    "g_lines",
    "g_text",
]

DEFAULT_FONT_FAMILY = "Arial, sans-serif"
DEFAULT_TEXT_ANCHOR = "start"
LINE_HEIGHT_FACTOR = 1.3


@dataclass
class SvgBuilder:
    drawing: svgwrite.Drawing
    root: svgwrite.container.Group
    groups: dict[str, svgwrite.container.Group]
    width: int
    height: int

    @classmethod
    def create(cls, width: int, height: int) -> "SvgBuilder":
        drawing = svgwrite.Drawing(size=(width, height), profile="full")
        root = drawing.g(id="figure_root")
        drawing.add(root)

        groups: dict[str, svgwrite.container.Group] = {}
        for group_id in REQUIRED_GROUP_IDS:
            if group_id == "figure_root":
                continue
            group = drawing.g(id=group_id)
            root.add(group)
            groups[group_id] = group

        return cls(
            drawing=drawing,
            root=root,
            groups=groups,
            width=int(width),
            height=int(height),
        )

    def add_background(self, fill: str) -> None:
        self.groups["g_background"].add(
            self.drawing.rect(insert=(0, 0), size=(self.width, self.height), fill=fill, id="bg")
        )

    def add_text(
        self,
        content: str,
        x: float,
        y: float,
        text_id: str,
        font_size: float,
        fill: str = "#000000",
        anchor: str | None = None,
        bottom_aligned: bool = False,
    ) -> None:
        """Add a possibly multi-line text block.

        With ``bottom_aligned`` the last line sits on ``y`` and earlier lines
        stack upwards.
        """
        text_group = self.groups["g_text"]
        lines = [line for line in str(content).splitlines() if line.strip()]
        text_kwargs = {
            "insert": (x, y),
            "id": text_id,
            "font_family": DEFAULT_FONT_FAMILY,
            "font_size": float(font_size),
            "text_anchor": anchor or DEFAULT_TEXT_ANCHOR,
            "fill": fill,
        }
        if len(lines) <= 1:
            text_group.add(self.drawing.text(lines[0] if lines else "", **text_kwargs))
            return
        line_height = float(font_size) * LINE_HEIGHT_FACTOR
        if bottom_aligned:
            y -= line_height * (len(lines) - 1)
            text_kwargs["insert"] = (x, y)
        text = self.drawing.text("", **text_kwargs)
        for idx, line in enumerate(lines):
            if idx == 0:
                tspan = self.drawing.tspan(line, x=[x], y=[y], id=f"{text_id}_line{idx}")
            else:
                tspan = self.drawing.tspan(line, x=[x], dy=[line_height], id=f"{text_id}_line{idx}")
            text.add(tspan)
        text_group.add(text)

    def add_frame(self, x: float, y: float, width: float, height: float, stroke: str = "#000000") -> None:
        self.groups["g_background"].add(
            self.drawing.rect(
                insert=(x, y),
                size=(width, height),
                fill="none",
                stroke=stroke,
                stroke_width=1,
                id="plot_frame",
            )
        )

    def to_string(self) -> str:
        return self.drawing.tostring()

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.drawing.saveas(str(path))
