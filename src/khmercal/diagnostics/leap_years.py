#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import khmercal
from khmercal.core.types import LeapType


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "khmercal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "khmercal[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[LeapType, Style] = {
    LeapType.LEAP_MONTH: Style("Leap month (384 days)", marker="s", size=60, hollow=False),
    LeapType.LEAP_DAY: Style("Leap day (355 days)", marker="o", size=60, hollow=True),
}


def build_points(np, start_be: int, end_be: int) -> Dict[LeapType, "np.ndarray"]:
    out: Dict[LeapType, List[int]] = {lt: [] for lt in DEFAULT_STYLES}
    for be in range(start_be, end_be + 1):
        lt = khmercal.leap_type(be)
        if lt in out:
            out[lt].append(be)
    return {lt: np.array(v, dtype=int) for lt, v in out.items()}


def cycle_position(np, years: "np.ndarray", cycle: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Fold BE years onto a (cycle start, position in cycle) grid."""
    return years - years % cycle, years % cycle


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Barcode diagram of leap-month and leap-day BE years (folded by a Metonic-like cycle)."
    )
    p.add_argument("--start-be", type=int, default=2400)
    p.add_argument("--end-be", type=int, default=2700)
    p.add_argument("--cycle", type=int, default=19, help="Years per row (default: 19).")
    p.add_argument("--out", default="leap_years_barcode.png")
    p.add_argument("--title", default="Khmer leap years")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    start_be, end_be = args.start_be, args.end_be
    if end_be < start_be:
        raise SystemExit("--end-be must be >= --start-be")
    cycle = max(1, int(args.cycle))

    row0 = start_be - start_be % cycle
    row1 = end_be - end_be % cycle
    n_rows = (row1 - row0) // cycle + 1

    fig, ax = plt.subplots(figsize=(16, 3.6))

    x_edges = np.arange(row0 - 0.5 * cycle, row1 + 0.5 * cycle + 1, cycle, dtype=float)
    y_edges = np.arange(-0.5, cycle + 0.5, 1.0)
    Z = np.zeros((cycle, n_rows), dtype=float)

    white = ListedColormap(["white"])
    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=white,
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )
    ax.set_xlim(x_edges[0], x_edges[-1])
    ax.set_ylim(-0.5, cycle - 0.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel(f"BE year (row start, {cycle}-year rows)")
    ax.set_ylabel("Year in cycle")

    points = build_points(np, start_be, end_be)
    for lt, st in DEFAULT_STYLES.items():
        x, y = cycle_position(np, points[lt], cycle)
        counts = len(points[lt])
        label = f"{st.label}: {counts}"
        if st.hollow:
            ax.scatter(
                x, y,
                s=st.size,
                marker=st.marker,
                facecolors="none",
                edgecolors=st.color,
                linewidths=st.lw,
                alpha=st.alpha,
                label=label,
                zorder=5,
            )
        else:
            ax.scatter(
                x, y,
                s=st.size,
                marker=st.marker,
                c=st.color,
                linewidths=0.0,
                alpha=st.alpha,
                label=label,
                zorder=5,
            )

    ax.set_title(f"{args.title} (BE {start_be}..{end_be})")
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
