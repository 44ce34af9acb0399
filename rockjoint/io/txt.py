from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..types import LineSegment

logger = logging.getLogger(__name__)


def read_segments_txt(path: str | Path) -> List[LineSegment]:
    """Read raw line-detector output from a whitespace- or comma-separated text file.

    Expected columns per line (at minimum): x1 y1 x2 y2 in pixels.
    Extra columns are ignored. Blank lines and lines starting with '#' are skipped;
    malformed lines are skipped with a warning.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    segments: List[LineSegment] = []
    with p.open("r", encoding="utf-8") as f:
        for lineno, ln in enumerate(f, start=1):
            line = ln.strip()
            if not line or line.startswith("#"):
                continue
            # Support comma or whitespace delimiters
            parts: List[str]
            if "," in line:
                parts = [x.strip() for x in line.split(",") if x.strip()]
            else:
                parts = line.split()
            if len(parts) < 4:
                logger.warning("%s:%d: expected 4 values, got %d; skipped", p, lineno, len(parts))
                continue
            try:
                x1, y1, x2, y2 = map(float, parts[:4])
            except ValueError:
                logger.warning("%s:%d: non-numeric coordinates; skipped", p, lineno)
                continue
            segments.append(LineSegment.from_coords(x1, y1, x2, y2))
    logger.debug("Read %d segments from %s", len(segments), p)
    return segments
