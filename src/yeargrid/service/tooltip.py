# SPDX-License-Identifier: MIT

from typing import Optional

from yeargrid.model.layout import Point, Size, TooltipPhase, TooltipPlacement

TOOLTIP_OFFSET = 12
VIEWPORT_PADDING = 12


def _is_known(size: Optional[Size]) -> bool:
    return size is not None and size["width"] > 0 and size["height"] > 0


def _place_axis(
    origin: float,
    tooltip_extent: float,
    viewport_extent: float,
    padding: float,
    offset: float,
) -> float:
    space_after = viewport_extent - origin - padding
    space_before = origin - padding
    if space_after >= tooltip_extent + offset:
        return origin + offset
    if space_before >= tooltip_extent + offset:
        return origin - tooltip_extent - offset
    # Neither side fits: center on the origin and clamp into the viewport
    return max(
        padding,
        min(origin - tooltip_extent / 2, viewport_extent - tooltip_extent - padding),
    )


def place_tooltip(
    origin: Point,
    tooltip_size: Optional[Size],
    viewport: Optional[Size],
    padding: float = VIEWPORT_PADDING,
    offset: float = TOOLTIP_OFFSET,
) -> TooltipPlacement:
    """
    Position a tooltip near origin while keeping it inside the viewport.

    Until both the tooltip and the viewport have been measured the result
    is a provisional placement anchored at the origin, which callers keep
    hidden. Once measured, the tooltip goes right of and below the origin
    when there is room, flips left or above when there is not, and is
    centered and clamped when neither side fits.
    """
    if tooltip_size is None or viewport is None:
        return _provisional(origin, offset)
    if not _is_known(tooltip_size) or not _is_known(viewport):
        return _provisional(origin, offset)

    return {
        "left": _place_axis(
            origin["x"], tooltip_size["width"], viewport["width"], padding, offset
        ),
        "top": _place_axis(
            origin["y"], tooltip_size["height"], viewport["height"], padding, offset
        ),
        "phase": TooltipPhase.MEASURED,
    }


def _provisional(origin: Point, offset: float) -> TooltipPlacement:
    return {
        "left": origin["x"] + offset,
        "top": origin["y"] + offset,
        "phase": TooltipPhase.PROVISIONAL,
    }


class TooltipLayout:
    """
    Two-phase measure-then-place state for one open tooltip.

    The renderer reports measurements as they arrive; the placement is only
    recomputed when a measurement actually changes, so repeated identical
    reports are no-ops.
    """

    def __init__(
        self,
        origin: Point,
        viewport: Optional[Size] = None,
        padding: float = VIEWPORT_PADDING,
        offset: float = TOOLTIP_OFFSET,
    ) -> None:
        self.origin = origin
        self.viewport = viewport
        self.tooltip_size: Optional[Size] = None
        self.padding = padding
        self.offset = offset
        self.recompute_count = 0
        self._placement = self.__compute()

    @property
    def placement(self) -> TooltipPlacement:
        return self._placement

    @property
    def is_visible(self) -> bool:
        return self._placement["phase"] == TooltipPhase.MEASURED

    def measure(self, tooltip_size: Size) -> TooltipPlacement:
        if tooltip_size != self.tooltip_size:
            self.tooltip_size = tooltip_size
            self._placement = self.__compute()
        return self._placement

    def resize_viewport(self, viewport: Size) -> TooltipPlacement:
        if viewport != self.viewport:
            self.viewport = viewport
            self._placement = self.__compute()
        return self._placement

    def __compute(self) -> TooltipPlacement:
        self.recompute_count += 1
        return place_tooltip(
            self.origin,
            self.tooltip_size,
            self.viewport,
            padding=self.padding,
            offset=self.offset,
        )
