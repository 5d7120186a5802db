"""Viewing window over a contig and conversion to screen coordinates."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from tgv.contig import Contig
from tgv.errors import TGVValueError

_MAX_INT = 2**64 - 1


@dataclass(frozen=True)
class Area:
    """A rectangle of terminal cells."""

    width: int
    height: int
    x: int = 0
    y: int = 0


class Side(enum.Enum):
    LEFT = "left"
    ON_SCREEN = "on_screen"
    RIGHT = "right"


@dataclass(frozen=True)
class OnScreenCoordinate:
    """Position relative to the screen.

    For ``LEFT`` the last off-screen pixel is 1; for ``ON_SCREEN`` the first
    pixel is 0; for ``RIGHT`` the first off-screen pixel is 1.
    """

    side: Side
    value: int

    @staticmethod
    def width(left: OnScreenCoordinate, right: OnScreenCoordinate, area: Area) -> int:
        """Number of pixels spanned by ``[left, right]``."""
        a, b = left.value, right.value
        sides = (left.side, right.side)
        if left.side is right.side:
            return abs(a - b) + 1
        if sides in ((Side.LEFT, Side.ON_SCREEN), (Side.ON_SCREEN, Side.LEFT)):
            return a + b + 1
        if sides in ((Side.LEFT, Side.RIGHT), (Side.RIGHT, Side.LEFT)):
            return a + b + area.width
        if sides == (Side.ON_SCREEN, Side.RIGHT):
            return area.width - a + b
        return area.width - b + a

    @staticmethod
    def onscreen_start_and_length(
        left: OnScreenCoordinate, right: OnScreenCoordinate, area: Area
    ) -> tuple[int, int] | None:
        """The visible part of ``[left, right]`` as ``(start, length)``, if any."""
        if left.side is Side.LEFT:
            if right.side is Side.ON_SCREEN:
                return 0, right.value + 1
            if right.side is Side.RIGHT:
                return 0, area.width
            return None
        if left.side is Side.ON_SCREEN:
            if right.side is Side.ON_SCREEN:
                if left.value > right.value:
                    return None
                return left.value, right.value - left.value + 1
            if right.side is Side.RIGHT:
                return left.value, area.width - left.value
            return None
        return None


@dataclass
class ViewingWindow:
    """The visible part of a contig.

    ``left`` is the leftmost genome coordinate shown (1-based), ``top`` the
    first alignment track shown (0-based), ``zoom`` the bases per pixel.
    """

    contig: Contig
    left: int
    top: int
    zoom: int = 1

    @classmethod
    def basewise(cls, contig: Contig, left: int, top: int) -> ViewingWindow:
        return cls(contig, left, top, 1)

    @classmethod
    def zoomed_out(cls, contig: Contig, left: int, top: int, zoom: int) -> ViewingWindow:
        return cls(contig, left, top, zoom)

    def is_basewise(self) -> bool:
        return self.zoom == 1

    # Horizontal coordinates

    def set_left(self, left: int, area: Area, contig_length: int | None) -> None:
        """Set the leftmost coordinate, keeping the window on the contig."""
        self.left = max(left, 1)
        self.self_correct(area, contig_length)

    def set_middle(self, area: Area, middle: int, contig_length: int | None) -> None:
        """Centre the window on ``middle``."""
        self.set_left(max(middle - self.width(area) // 2, 0), area, contig_length)

    def self_correct(self, area: Area, contig_length: int | None) -> None:
        """Keep zoom and right edge within the contig."""
        if contig_length is None:
            return
        self.zoom = min(self.zoom, contig_length // area.width)
        right = self.right(area)
        if right > contig_length:
            self.left = max(self.left - (right - contig_length), 0)

    def set_top(self, top: int) -> None:
        self.top = top

    def right(self, area: Area) -> int:
        """Rightmost coordinate shown, 1-based and inclusive."""
        return self.left + self.width(area) - 1

    def middle(self, area: Area) -> int:
        """Middle coordinate; right of centre for an even width."""
        return self.left + self.width(area) // 2

    def width(self, area: Area) -> int:
        """Width of the window in bases."""
        return area.width * self.zoom

    def overlaps_x_interval(self, left: int, right: int, area: Area) -> bool:
        """Whether ``[left, right]`` is at least partly visible."""
        return left <= self.right(area) and right >= self.left

    def onscreen_x_coordinate(self, x: int, area: Area) -> OnScreenCoordinate:
        """Screen column of the 1-based genome coordinate ``x``."""
        right = self.right(area)
        if x < self.left:
            return OnScreenCoordinate(Side.LEFT, max((self.left - x) // self.zoom, 1))
        if x > right:
            return OnScreenCoordinate(Side.RIGHT, max((x - right) // self.zoom, 1))
        return OnScreenCoordinate(Side.ON_SCREEN, (x - self.left) // self.zoom)

    # Vertical coordinates

    def bottom(self, area: Area) -> int:
        """First track below the window, 0-based."""
        return self.top + self.height(area)

    def height(self, area: Area) -> int:
        return area.height

    def overlaps_y(self, y: int, area: Area) -> bool:
        return self.top <= y < self.bottom(area)

    def onscreen_y_coordinate(self, y: int, area: Area) -> OnScreenCoordinate:
        """Screen row of the 0-based track ``y``."""
        bottom = self.bottom(area)
        if y < self.top:
            return OnScreenCoordinate(Side.LEFT, self.top - y)
        if y >= bottom:
            return OnScreenCoordinate(Side.RIGHT, y - bottom)
        return OnScreenCoordinate(Side.ON_SCREEN, y - self.top)

    # Zoom

    def zoom_out(self, r: int, area: Area, contig_length: int | None) -> None:
        """Zoom out by a factor of ``r``, keeping the middle in place."""
        if r == 0:
            raise TGVValueError("Zoom factor cannot be 0")
        if r == 1:
            return
        limit = contig_length if contig_length is not None else _MAX_INT
        max_zoom = limit // area.width
        middle_before = self.middle(area)
        self.zoom = min(self.zoom * r, max_zoom)
        self.set_middle(area, middle_before, contig_length)
        self.self_correct(area, contig_length)

    def zoom_in(self, r: int, area: Area, contig_length: int | None) -> None:
        """Zoom in by a factor of ``r``, keeping the middle in place."""
        if r == 0:
            raise TGVValueError("Zoom factor cannot be 0")
        if r == 1 or self.is_basewise():
            return
        middle_before = self.middle(area)
        self.zoom = max(self.zoom // r, 1)
        self.set_middle(area, middle_before, contig_length)
        self.self_correct(area, contig_length)