"""Index arithmetic for the infinite image carousel.

The carousel pretends to scroll forever over a finite image set. Logically
the set is concatenated CAROUSEL_COPIES (3) times; the strip position is a
*virtual* index into that sequence and the page shown to the user is the
*real* index ``virtual % count``. Nothing is duplicated in memory: callers
ask for a small window of (virtual, real) pairs around the current page.

Whenever a settled position comes within one page of either end of the
sequence it is moved, without animation, to the same real index in the
middle copy, so both swipe directions always have a full copy of slack.

A single image (or none) does not get the tripled sequence at all.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import CAROUSEL_COPIES

DIRECTION_PREV = -1
DIRECTION_NEXT = 1

_DIRECTION_NAMES = {"prev": DIRECTION_PREV, "previous": DIRECTION_PREV, "next": DIRECTION_NEXT}


def clamp_index(index: int, count: int) -> int:
    """Clamp ``index`` into ``[0, count-1]`` (0 for an empty set)."""
    if count <= 0:
        return 0
    return max(0, min(count - 1, int(index)))


def parse_direction(direction) -> int:
    """Normalize ``"prev"``/``"next"`` or a signed number to -1/+1.

    Raises:
        ValueError: For an unknown name or zero.
    """
    if isinstance(direction, str):
        try:
            return _DIRECTION_NAMES[direction.lower()]
        except KeyError:
            raise ValueError(f"Unknown direction: {direction!r}") from None
    if direction == 0:
        raise ValueError("direction must be non-zero")
    return DIRECTION_NEXT if direction > 0 else DIRECTION_PREV


@dataclass(frozen=True)
class ScrollRequest:
    """Ask the rendering layer to move the strip to ``virtual_index``."""

    virtual_index: int
    animated: bool = True


@dataclass(frozen=True)
class CarouselPosition:
    """Position of the strip within the (logically) tripled image sequence."""

    count: int
    virtual_index: int = 0

    @classmethod
    def start(cls, count: int, initial_index: int = 0) -> "CarouselPosition":
        """Place the strip on ``initial_index`` inside the middle copy."""
        real = clamp_index(initial_index, count)
        if count < 2:
            return cls(count, real)
        return cls(count, count + real)

    @property
    def is_infinite(self) -> bool:
        return self.count >= 2

    @property
    def copies(self) -> int:
        return CAROUSEL_COPIES if self.is_infinite else 1

    @property
    def length(self) -> int:
        """Length of the virtual sequence."""
        return self.count * self.copies

    @property
    def real_index(self) -> int:
        if self.count <= 0:
            return 0
        return self.virtual_index % self.count

    def real_for(self, virtual_index: int) -> int:
        if self.count <= 0:
            return 0
        return virtual_index % self.count

    def middle(self, real_index: int) -> int:
        """Virtual index of ``real_index`` in the middle copy."""
        if not self.is_infinite:
            return clamp_index(real_index, self.count)
        return self.count + real_index % self.count

    def needs_recenter(self, virtual_index: Optional[int] = None) -> bool:
        """True when ``virtual_index`` is within one page of either end."""
        if not self.is_infinite:
            return False
        v = self.virtual_index if virtual_index is None else virtual_index
        return v < 1 or v > self.length - 2

    def settle(self, virtual_index: int) -> Tuple["CarouselPosition", Optional[ScrollRequest]]:
        """Settle on ``virtual_index`` after a swipe.

        Returns the new position and, when the strip had to be re-centered,
        a non-animated ScrollRequest to the middle-copy equivalent. The real
        index is the same before and after re-centering.
        """
        if not self.is_infinite:
            return CarouselPosition(self.count, clamp_index(virtual_index, self.count)), None
        if self.needs_recenter(virtual_index):
            target = self.middle(virtual_index)
            return CarouselPosition(self.count, target), ScrollRequest(target, animated=False)
        return CarouselPosition(self.count, virtual_index), None

    def adjacent(self, direction) -> Tuple["CarouselPosition", Optional[ScrollRequest]]:
        """Step one page with wraparound, targeting the middle copy."""
        if not self.is_infinite:
            return self, None
        step = parse_direction(direction)
        real = (self.real_index + step + self.count) % self.count
        target = self.middle(real)
        return CarouselPosition(self.count, target), ScrollRequest(target, animated=True)

    def jump_to(self, real_index: int) -> Tuple["CarouselPosition", Optional[ScrollRequest]]:
        """Move to ``real_index`` (clamped) inside the middle copy."""
        if self.count <= 0:
            return self, None
        target = self.middle(clamp_index(real_index, self.count))
        if target == self.virtual_index:
            return self, None
        return CarouselPosition(self.count, target), ScrollRequest(target, animated=self.is_infinite)

    def window(self, radius: int = 1, center: Optional[int] = None) -> List[Tuple[int, int]]:
        """(virtual, real) pairs of the pages that need to be materialized.

        Args:
            radius: Pages on each side of the center.
            center: Virtual index to center on (defaults to the current one).
        """
        if self.count <= 0:
            return []
        c = self.virtual_index if center is None else center
        lo = max(0, c - radius)
        hi = min(self.length - 1, c + radius)
        return [(v, self.real_for(v)) for v in range(lo, hi + 1)]
