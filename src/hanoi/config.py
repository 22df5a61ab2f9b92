"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           ENGINE CONFIGURATION                                ║
║                                                                               ║
║  Every solver entry point and renderer takes an EngineConfig instead of      ║
║  reading a process-wide disk count.                                           ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

from pydantic import BaseModel, Field, model_validator

from .state import Peg, third_peg


class EngineConfig(BaseModel):
    """
    Settings for one Tower of Hanoi session.

    The disk count is validated here, so solvers can trust it. Use
    with_disk_count() to get a changed copy rather than mutating a shared one.
    """

    # ══════════════════════════════════════════════════════════════════════════
    #  PUZZLE SETTINGS
    # ══════════════════════════════════════════════════════════════════════════

    disk_count: int = Field(
        default=3,
        ge=1,
        description="Number of disks stacked on the source peg at the start"
    )

    max_disks: int = Field(
        default=20,
        ge=1,
        description="Hard ceiling on disk_count for generated solutions (history length is 2^N)"
    )

    source: Peg = Field(
        default=Peg.A,
        description="Peg holding every disk at the start"
    )

    target: Peg = Field(
        default=Peg.C,
        description="Peg every disk must end up on"
    )

    # ══════════════════════════════════════════════════════════════════════════
    #  RENDERING SETTINGS
    # ══════════════════════════════════════════════════════════════════════════

    image_size: tuple[int, int] = Field(default=(512, 512))

    hold_frames: int = Field(
        default=2,
        ge=0,
        description="Frames to hold at the start/end of an animation (lower = faster/smaller files)"
    )

    transition_frames: int = Field(
        default=8,
        ge=1,
        description="Frames for each disk movement transition (lower = faster/smaller files)"
    )

    frame_duration_ms: int = Field(
        default=100,
        ge=1,
        description="Display time of each animation frame"
    )

    @model_validator(mode="after")
    def _check_pegs(self) -> "EngineConfig":
        if self.source is self.target:
            raise ValueError("source and target must be different pegs")
        return self

    @property
    def auxiliary(self) -> Peg:
        """The peg that is neither source nor target."""
        return third_peg(self.source, self.target)

    def with_disk_count(self, disk_count: int) -> "EngineConfig":
        """Return a validated copy with a different disk count."""
        return self.model_validate({**self.model_dump(), "disk_count": disk_count})
