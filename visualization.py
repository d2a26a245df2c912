import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, alpha=0.6, s=10)
    else:
        ax.scatter(x, y, alpha=0.6, s=10)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r'):
    """
    Draw the closed hull boundary. Degenerate hulls are drawn as a segment or a single marker.
    """
    if ax is None:
        ax = plt.gca()

    if len(hull) > 2:
        ax.add_patch(Polygon([(p.x, p.y) for p in hull], alpha=0.2, facecolor=color, edgecolor=color))

    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    if len(hull) > 2:
        xs.append(hull[0].x)
        ys.append(hull[0].y)
    ax.plot(xs, ys, 'o-', color=color, markersize=4)


def plot_analysis(points: list[Point], hull: list[Point], filename: str | None = None) -> Figure:
    fig = Figure(figsize=(8, 8))
    ax = fig.add_subplot(111)

    plot_points(points, ax=ax)
    plot_hull(hull, ax=ax)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"Convex hull ({len(hull)} of {len(points)} points)")
    ax.grid(True, alpha=0.3)
    ax.axis('equal')

    if filename is not None:
        fig.savefig(filename, dpi=150, bbox_inches='tight')
    return fig
