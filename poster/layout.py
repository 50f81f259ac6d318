"""
Poster layout table.

All frame dimensions, resize targets and layer offsets of the poster are
kept here as data. Vertical offsets are measured from the bottom edge of
the frame: a layer with ``bottom_offset=250`` has its top edge 250px above
the frame's bottom.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class DecorationSpec:
    """Resize target and position of a theme-independent decorative asset."""
    asset: str              # Asset filename
    width: int              # Target width
    height: Optional[int]   # Target height; None keeps aspect ratio
    left: int               # Left position (may be negative)
    bottom_offset: int      # Top edge = frame height - bottom_offset
    cover: bool = False     # Cover-fit to (width, height) instead of scaling by width
    blend: str = "over"

    def top(self, frame_height: int) -> int:
        return frame_height - self.bottom_offset


@dataclass(frozen=True)
class PosterLayout:
    """Complete layout specification for one poster."""
    frame_width: int = 1080
    frame_height: int = 1350

    # Subject is inside-fitted into this box
    subject_max_width: int = 900
    subject_max_height: int = 1200
    subject_bottom_margin: int = 150

    # White fade softening the seam under the subject
    gradient_height: int = 500

    motif: DecorationSpec = field(default_factory=lambda: DecorationSpec(
        asset="babyTree.png", width=450, height=None, left=-40, bottom_offset=520,
    ))
    logo: DecorationSpec = field(default_factory=lambda: DecorationSpec(
        asset="evolveLogo.png", width=700, height=None, left=200, bottom_offset=250,
    ))
    accent: DecorationSpec = field(default_factory=lambda: DecorationSpec(
        asset="blue.png", width=1080, height=550, left=0, bottom_offset=150,
        cover=True, blend="over",
    ))

    @property
    def frame_size(self) -> Tuple[int, int]:
        return (self.frame_width, self.frame_height)

    @property
    def subject_box(self) -> Tuple[int, int]:
        return (self.subject_max_width, self.subject_max_height)

    @property
    def gradient_position(self) -> Tuple[int, int]:
        return (0, self.frame_height - self.gradient_height)

    def subject_position(self, subject_width: int, subject_height: int) -> Tuple[int, int]:
        """
        Calculate subject placement from its resized dimensions.

        The subject is centered horizontally and its bottom edge sits
        ``subject_bottom_margin`` above the bottom of the frame.

        Args:
            subject_width: Actual width after resizing
            subject_height: Actual height after resizing

        Returns:
            Tuple of (left, top)
        """
        left = (self.frame_width - subject_width) // 2
        top = self.frame_height - subject_height - self.subject_bottom_margin
        return (left, top)


DEFAULT_LAYOUT = PosterLayout()
