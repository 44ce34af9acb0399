from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

import matplotlib.pyplot as plt

from .config import DETECTION_MATCH_THRESHOLD, MAX_JOINT_SETS, MIN_JOINT_LENGTH_M
from .io import read_segments_txt
from .joints import detect_joints
from .plots import plot_rose, plot_tracemap
from .stats import cluster_joint_sets, fracture_stats
from .types import FractureStats, JointSet, ScaleData
from .units import convert_area, convert_density, convert_frequency, convert_length, unit_labels

logger = logging.getLogger(__name__)


def format_summary(stats: FractureStats, joint_sets: Sequence[JointSet], imperial: bool = False) -> str:
    """Plain-text report of the statistics and joint sets."""
    u = unit_labels(imperial)
    lines: List[str] = [
        "FRACTURE STATISTICS",
        f"Total joints:        {stats.joint_count}",
        f"Total trace length:  {convert_length(stats.total_length, imperial):.3f} {u['length']}",
        f"Mean length:         {convert_length(stats.mean_length, imperial):.3f} {u['length']}",
        f"Median length:       {convert_length(stats.median_length, imperial):.3f} {u['length']}",
        f"Length range:        {convert_length(stats.min_length, imperial):.3f} - "
        f"{convert_length(stats.max_length, imperial):.3f} {u['length']}",
        f"Area analyzed:       {convert_area(stats.area_analyzed, imperial):.2f} {u['area']}",
        f"P21 density:         {convert_density(stats.p21, imperial):.4f} {u['density']}",
        f"Frequency (approx.): {convert_frequency(stats.frequency, imperial):.2f} {u['frequency']}",
    ]
    if joint_sets:
        lines.append("")
        lines.append("JOINT SETS (15° bins)")
        lines.append(f"{'Set':>3}  {'Orient':>6}  {'Count':>5}  {'%':>5}  {'Mean len':>9}  {'Total len':>9}")
        for js in joint_sets:
            pct = 100.0 * js.count / stats.joint_count if stats.joint_count else 0.0
            lines.append(
                f"{js.id:>3}  {js.mean_orientation:>5.0f}°  {js.count:>5}  {pct:>5.1f}  "
                f"{convert_length(js.mean_length, imperial):>9.3f}  {convert_length(js.total_length, imperial):>9.3f}"
            )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="rockjoint: joint trace statistics from line-detector output")
    p.add_argument("input", type=Path, help="Path to input TXT file (x1 y1 x2 y2 per line, pixels)")
    p.add_argument("--ppm", type=float, required=True, help="Scale in pixels per metre")
    p.add_argument("--width", type=int, required=True, help="Photo width in pixels")
    p.add_argument("--height", type=int, required=True, help="Photo height in pixels")
    p.add_argument("--threshold", type=float, default=DETECTION_MATCH_THRESHOLD,
                   help="Duplicate-match tolerance in pixels")
    p.add_argument("--min-length", type=float, default=MIN_JOINT_LENGTH_M,
                   help="Discard joints shorter than this (metres)")
    p.add_argument("--max-sets", type=int, default=MAX_JOINT_SETS, help="Maximum number of joint sets")
    p.add_argument("--imperial", action="store_true", help="Report lengths in feet")
    p.add_argument("--show", action="store_true", help="Show plots interactively")
    p.add_argument("--save-prefix", type=Path, default=None, help="Prefix path to save figures")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.ppm > 0:
        logger.error("Scale must be positive, got --ppm %s", args.ppm)
        return 1

    try:
        raw = read_segments_txt(args.input)
    except FileNotFoundError:
        logger.error("Input file not found: %s", args.input)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read %s: %s", args.input, e)
        return 1
    if not raw:
        logger.error("No valid segments found in %s", args.input)
        return 1

    scale = ScaleData(pixels_per_meter=args.ppm)
    joints = detect_joints(raw, scale, threshold=args.threshold, min_length_m=args.min_length)
    if not joints:
        logger.error("No joints left after filtering (min length %.3f m)", args.min_length)
        return 1

    joint_sets = cluster_joint_sets(joints, max_sets=args.max_sets)
    stats = fracture_stats(joints, scale, args.width, args.height)
    print(format_summary(stats, joint_sets, imperial=args.imperial))

    if args.show or args.save_prefix is not None:
        ax_map = plot_tracemap(joints, joint_sets)
        ax_rose = plot_rose(joint_sets)
        if args.save_prefix is not None:
            prefix = Path(args.save_prefix)
            map_path = prefix.with_name(prefix.name + "_tracemap.png")
            rose_path = prefix.with_name(prefix.name + "_rose.png")
            ax_map.figure.savefig(map_path)
            ax_rose.figure.savefig(rose_path)
            logger.info("Saved %s and %s", map_path, rose_path)
        if args.show:
            plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
