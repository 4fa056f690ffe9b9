"""
common/plot_utils.py
--------------------
Top-down preview of an arrangement:
- Room bounds rectangle
- One circle per footprint, colored by category
- Identity labels
"""

import os
from typing import Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from .io_utils import log


CATEGORY_COLORS = {
    "couch": "tab:blue",
    "chair": "tab:orange",
    "table": "tab:green",
    "other": "tab:gray",
}


def visualize_arrangement(
    result,
    config,
    output_path: str,
    show_ids: bool = True,
    figsize: Tuple[int, int] = (8, 5),
    dpi: int = 150,
) -> str:
    """
    Plot an ArrangeResult's targets inside the room bounds and save a PNG.
    The z axis is drawn upward so "forward" (-z) is at the bottom.
    """
    fig, ax = plt.subplots(figsize=figsize, dpi=dpi)

    min_x, max_x, min_z, max_z = config.bounds
    ax.plot(
        [min_x, max_x, max_x, min_x, min_x],
        [min_z, min_z, max_z, max_z, min_z],
        color="black", linewidth=2, label="Room bounds",
    )

    for t in result.targets:
        color = CATEGORY_COLORS.get(t.category.value, "tab:gray")
        ax.add_patch(Circle((t.x, t.z), t.radius, fill=False, edgecolor=color, linewidth=1.5))
        ax.scatter([t.x], [t.z], c=color, s=12)
        if show_ids:
            ax.text(t.x, t.z + 0.05, str(t.identity), fontsize=7, ha="center", color=color)

    pad = config.max_radius
    ax.set_xlim(min_x - pad, max_x + pad)
    ax.set_ylim(min_z - pad, max_z + pad)
    ax.set_aspect("equal")
    ax.set_xlabel("x (m)")
    ax.set_ylabel("z (m)")
    ax.set_title(f"Arrangement: {result.archetype.value}")
    ax.legend(loc="upper right", fontsize=8)
    plt.tight_layout()

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    plt.savefig(output_path, bbox_inches="tight")
    plt.close(fig)

    log(f"Arrangement preview saved → {output_path}", "OK")
    return output_path
