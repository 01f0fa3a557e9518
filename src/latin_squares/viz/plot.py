from __future__ import annotations

import matplotlib.pyplot as plt

from latin_squares.core.square import LatinSquare


def plot_square(square: LatinSquare, *, ax=None, title: str | None = None, annotate: bool = True):
    """Heatmap of a Latin square colored by symbol index, cells labeled by symbol."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)

    n = square.order
    im = ax.imshow(square.index_grid(), cmap="viridis", vmin=0, vmax=max(n - 1, 1))
    plt.colorbar(im, ax=ax, shrink=0.7, pad=0.05)

    if annotate:
        for i, row in enumerate(square.rows):
            for j, sym in enumerate(row):
                ax.text(j, i, str(sym), ha="center", va="center", color="white", fontsize=9)

    ax.set_xticks(range(n))
    ax.set_yticks(range(n))
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    ax.set_title(title or f"Latin square n={n}")
    return ax
