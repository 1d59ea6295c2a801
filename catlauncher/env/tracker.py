from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..constants import CAMERA_LEAD_FRAC

if TYPE_CHECKING:
    from ..config import ViewportConfig


def compute_score(x: float, launcher_x: float) -> int:
    # Current displacement, not the peak: a backward bounce lowers the score.
    return int(math.floor(max(0.0, x - launcher_x)))


def compute_camera_x(x: float, viewport: ViewportConfig) -> float:
    return x - viewport.width * CAMERA_LEAD_FRAC
