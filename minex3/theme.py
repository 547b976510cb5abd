"""Colours, text and button widgets, and their reaction to the pointer."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

Color = tuple[int, int, int]
Rect = tuple[float, float, float, float]

LABEL_TEXT: Color = (0xDD, 0xD3, 0x69)
HEADER_TEXT: Color = (0xFC, 0xFB, 0xCC)
BUTTON_TEXT: Color = (0xEC, 0xEC, 0xEC)
BUTTON_BACKGROUND: Color = (0x46, 0x66, 0xBF)
BUTTON_HOVERED_BACKGROUND: Color = (0x62, 0x99, 0xD1)
BUTTON_PRESSED_BACKGROUND: Color = (0x3D, 0x49, 0x99)

HEADER_FONT_SIZE = 40.0
LABEL_FONT_SIZE = 24.0
BUTTON_FONT_SIZE = 40.0
UI_ROW_GAP = 20.0

HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
CLICK_SOUND = "audio/sound_effects/button_click.ogg"
INTERACTION_SOUNDS = (HOVER_SOUND, CLICK_SOUND)

# Rough glyph width relative to the font size, used to size text for layout.
_CHAR_WIDTH_RATIO = 0.5


class Interaction(enum.Enum):
    """How the pointer currently relates to a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


def _button_palette() -> InteractionPalette:
    return InteractionPalette(
        none=BUTTON_BACKGROUND,
        hovered=BUTTON_HOVERED_BACKGROUND,
        pressed=BUTTON_PRESSED_BACKGROUND,
    )


@dataclass(eq=False)
class Text:
    """A line of text; ``rect`` is set once it has been laid out."""

    content: str
    font_size: float
    color: Color
    name: str = "Text"
    rect: Rect | None = None

    @property
    def width(self) -> float:
        return len(self.content) * self.font_size * _CHAR_WIDTH_RATIO

    @property
    def height(self) -> float:
        return self.font_size


@dataclass(eq=False)
class Button:
    """A clickable button whose background follows its interaction state."""

    text: str
    action: Callable[[], Any]
    width: float
    height: float
    border_radius: float = 0.0
    font_size: float = BUTTON_FONT_SIZE
    text_color: Color = BUTTON_TEXT
    palette: InteractionPalette = field(default_factory=_button_palette)
    interaction: Interaction = Interaction.NONE
    background: Color = BUTTON_BACKGROUND
    rect: Rect | None = None

    def set_interaction(self, interaction: Interaction) -> bool:
        """Update the interaction state; returns whether it changed."""
        if interaction is self.interaction:
            return False
        self.interaction = interaction
        self.background = self.palette.color_for(interaction)
        return True

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies on the laid-out button."""
        if self.rect is None:
            return False
        x, y, w, h = self.rect
        px, py = point
        return x <= px < x + w and y <= py < y + h


Widget = Union[Text, Button]


def header(text: str) -> Text:
    """A large header line."""
    return Text(text, HEADER_FONT_SIZE, HEADER_TEXT, name="Header")


def label(text: str) -> Text:
    """A plain text label."""
    return Text(text, LABEL_FONT_SIZE, LABEL_TEXT, name="Label")


def button(text: str, action: Callable[[], Any]) -> Button:
    """A large rounded button."""
    return Button(text, action, width=380.0, height=80.0, border_radius=24.0)


def button_small(text: str, action: Callable[[], Any]) -> Button:
    """A small square button."""
    return Button(text, action, width=30.0, height=30.0)


def layout_column(
    widgets: Sequence[Widget],
    center: tuple[float, float],
    row_gap: float = UI_ROW_GAP,
) -> list[Rect]:
    """Stack ``widgets`` vertically, centred on ``center``, and set their rects."""
    if not widgets:
        return []
    cx, cy = center
    total = sum(w.height for w in widgets) + row_gap * (len(widgets) - 1)
    top = cy - total / 2.0
    rects = []
    for widget in widgets:
        rect = (cx - widget.width / 2.0, top, widget.width, widget.height)
        widget.rect = rect
        rects.append(rect)
        top += widget.height + row_gap
    return rects