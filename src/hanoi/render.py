"""
Tower of Hanoi rendering.

Text rendering draws a tower the way a console shows it. Image rendering uses
matplotlib to draw towers and turns a whole history into an animated GIF.
"""

import logging
from collections import OrderedDict
from pathlib import Path
from typing import List, Optional, Tuple, Union

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
import numpy as np
from PIL import Image

from .config import EngineConfig
from .history import History
from .state import Disk, Move, Peg, Tower, disk_multiset

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════════
#  TEXT
# ══════════════════════════════════════════════════════════════════════════════

def _widest(tower: Tower) -> int:
    disks = disk_multiset(tower)
    return max(disks[-1], 1) if disks else 1


def render_tower(tower: Tower, filled: str = "-") -> str:
    """
    Draw a tower as text, top row first.

    Every peg column is as wide as the widest disk on the tower. An empty
    slot shows the peg as `|` in the middle of the column.
    """
    max_length = _widest(tower)
    empty = "".join("|" if i == (max_length - 1) // 2 else " " for i in range(max_length))

    def view_disk(disk: Disk) -> str:
        half = (max_length - disk) // 2
        return (" " * half + filled * disk).ljust(max_length)

    def cell(disks, row: int) -> str:
        return view_disk(disks[row - 1]) if len(disks) >= row else empty

    lines = []
    for row in range(tower.disk_count(), 0, -1):
        lines.append(
            " " + " ".join(cell(tower.peg(p), row) for p in Peg) + " "
        )

    # the base spans all three columns and the separating spaces
    lines.append("_" * (4 + max_length * 3))
    return "\n".join(lines)


def render_history(history: History) -> str:
    """Draw every tower of a history, separated by blank lines."""
    return "\n\n".join(render_tower(tower) for tower in history)


def render_moves(history: History) -> str:
    """One line per move, e.g. `1. disk 1: A (left) -> C (right)`."""
    return "\n".join(
        f"{i}. disk {disk}: {src.value} ({src.label}) -> {dst.value} ({dst.label})"
        for i, (src, dst, disk) in enumerate(history.moves(), start=1)
    )


# ══════════════════════════════════════════════════════════════════════════════
#  IMAGES
# ══════════════════════════════════════════════════════════════════════════════

DISK_COLORS = ['#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFE66D', '#A8E6CF']


class TowerRenderer:
    """
    Draws towers as images with matplotlib.

    Disk widths are scaled to the widest disk of the tower being drawn, and
    the target peg from the config is highlighted as the goal.
    """

    def __init__(self, config: EngineConfig):
        self.config = config

        # Small LRU cache for rendered static towers (speed-up for animations)
        self._cache: OrderedDict[Tower, Image.Image] = OrderedDict()
        self._cache_max = 256

    # ──────────────────────────────────────────────────────────────────────────
    #  Geometry
    # ──────────────────────────────────────────────────────────────────────────

    def _peg_x(self, peg: Peg) -> float:
        width, _ = self.config.image_size
        return width * {Peg.A: 0.25, Peg.B: 0.5, Peg.C: 0.75}[peg]

    def _base_height(self) -> float:
        return self.config.image_size[1] * 0.1

    def _disk_height(self, disk_count: int) -> float:
        # leave room for every disk on one peg below the top of the peg
        height = self.config.image_size[1]
        return min(height * 0.08, height * 0.55 / max(disk_count, 1))

    def _disk_width(self, disk: Disk, widest: int) -> float:
        return self.config.image_size[0] * 0.25 * (disk / widest)

    @staticmethod
    def _disk_color(disk: Disk) -> str:
        # widths are odd, so halving gives consecutive indices
        return DISK_COLORS[(disk // 2) % len(DISK_COLORS)]

    # ──────────────────────────────────────────────────────────────────────────
    #  Drawing
    # ──────────────────────────────────────────────────────────────────────────

    def _draw(
        self,
        tower: Tower,
        widest: int,
        disk_count: int,
        moving: Optional[Tuple[Disk, float, float]] = None,
    ) -> Image.Image:
        """
        Draw `tower`, optionally with one extra disk at an arbitrary position.

        `moving` is (disk, x, y) for a disk in transit; it must not also be
        on `tower`.
        """
        width, height = self.config.image_size
        fig, ax = plt.subplots(figsize=(width/100, height/100), dpi=100)

        # Base platform
        base_height = self._base_height()
        ax.add_patch(Rectangle(
            (width * 0.05, 0),
            width * 0.9,
            base_height,
            facecolor='#8B4513',
            edgecolor='none',
            linewidth=0
        ))

        # Pegs
        peg_width = width * 0.02
        peg_height = height * 0.6
        for peg in Peg:
            ax.add_patch(Rectangle(
                (self._peg_x(peg) - peg_width/2, base_height),
                peg_width,
                peg_height,
                facecolor='#A0522D',
                edgecolor='none',
                linewidth=0
            ))

        # Disks
        disk_height = self._disk_height(disk_count)
        for peg in Peg:
            for disk_idx, disk in enumerate(tower.peg(peg)):
                disk_width = self._disk_width(disk, widest)
                ax.add_patch(Rectangle(
                    (self._peg_x(peg) - disk_width / 2, base_height + disk_idx * disk_height),
                    disk_width,
                    disk_height * 0.9,
                    facecolor=self._disk_color(disk),
                    edgecolor='black',
                    linewidth=2
                ))

        if moving is not None:
            disk, disk_x, disk_y = moving
            disk_width = self._disk_width(disk, widest)
            ax.add_patch(Rectangle(
                (disk_x - disk_width / 2, disk_y),
                disk_width,
                disk_height * 0.9,
                facecolor=self._disk_color(disk),
                edgecolor='black',
                linewidth=2
            ))

        # Goal highlight (green dashed box around the target peg)
        target = self.config.target
        goal_box_width = width * 0.3
        goal_box_height = height * 0.7
        ax.add_patch(Rectangle(
            (self._peg_x(target) - goal_box_width/2, base_height),
            goal_box_width,
            goal_box_height,
            fill=False,
            edgecolor='green',
            linewidth=3,
            linestyle='--'
        ))

        # Labels
        label_y = -height * 0.05
        for peg in Peg:
            is_target = peg is target
            label = peg.label.capitalize()
            if is_target:
                label += " (Goal)"
            elif peg is self.config.auxiliary:
                label += " (Aux)"
            ax.text(
                self._peg_x(peg), label_y, label,
                ha='center', va='top',
                fontsize=max(10, width // 50),
                color='green' if is_target else 'black',
                fontweight='bold' if is_target else 'normal'
            )

        ax.set_xlim(0, width)
        ax.set_ylim(-height * 0.1, height)
        ax.set_aspect('equal')
        ax.axis('off')

        # Convert to PIL Image
        fig.canvas.draw()
        buf = np.frombuffer(fig.canvas.buffer_rgba(), dtype=np.uint8)
        fig_width, fig_height = fig.canvas.get_width_height()
        buf = buf.reshape((fig_height, fig_width, 4))
        # Convert RGBA to RGB
        buf = buf[:, :, :3]
        plt.close(fig)

        return Image.fromarray(buf).convert("RGB")

    def render(self, tower: Tower) -> Image.Image:
        """Render a tower as an RGB image of config.image_size."""
        cached = self._cache.get(tower)
        if cached is not None:
            # refresh LRU
            self._cache.move_to_end(tower)
            return cached

        out = self._draw(tower, _widest(tower), tower.disk_count())

        # Update cache (LRU)
        self._cache[tower] = out
        self._cache.move_to_end(tower)
        while len(self._cache) > self._cache_max:
            self._cache.popitem(last=False)

        return out

    # ──────────────────────────────────────────────────────────────────────────
    #  Animation
    # ──────────────────────────────────────────────────────────────────────────

    def move_frames(self, before: Tower, after: Tower, move: Move) -> List[Image.Image]:
        """
        Create frames for a single disk move.

        The moving disk slides in a straight line from the top of the source
        peg to its resting place on the destination peg.
        """
        src, dst, disk = move
        transition_frames = self.config.transition_frames
        widest = _widest(before)

        # Y positions computed from current stacks BEFORE the move
        base_height = self._base_height()
        disk_height = self._disk_height(before.disk_count())
        src_x, dst_x = self._peg_x(src), self._peg_x(dst)
        src_y = base_height + (len(before.peg(src)) - 1) * disk_height
        dst_y = base_height + len(before.peg(dst)) * disk_height

        # the tower without the disk in transit
        lifted = before.replace(**{src.label: before.peg(src)[:-1]})

        frames = [self.render(before)]
        for i in range(transition_frames):
            progress = i / (transition_frames - 1) if transition_frames > 1 else 1.0
            if progress >= 1.0:
                frames.append(self.render(after))
            else:
                frames.append(self._draw(
                    lifted,
                    widest,
                    before.disk_count(),
                    moving=(
                        disk,
                        src_x + (dst_x - src_x) * progress,
                        src_y + (dst_y - src_y) * progress,
                    ),
                ))
        return frames

    def history_frames(self, history: History) -> List[Image.Image]:
        """All frames of an animation of `history`, holding the first and last tower."""
        hold_frames = self.config.hold_frames
        frames = [self.render(history.initial)] * hold_frames

        for (before, after), move in zip(zip(history, history[1:]), history.moves()):
            frames.extend(self.move_frames(before, after, move))

        frames.extend([self.render(history.last)] * hold_frames)
        return frames or [self.render(history.last)]


def render_history_gif(
    history: History,
    path: Union[str, Path],
    config: EngineConfig,
    renderer: Optional[TowerRenderer] = None,
) -> Path:
    """Write `history` as an animated GIF and return the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    renderer = renderer or TowerRenderer(config)

    frames = renderer.history_frames(history)
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=config.frame_duration_ms,
        loop=0,
    )
    logger.info("Wrote %d frames to %s", len(frames), path)
    return path
