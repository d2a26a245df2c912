from geometry import Point, convex_hull_andrew
from quickhull import as_points


class MonotoneChainBuilder:
    """
    Reference builder based on Andrew's monotone chain.
    Produces the same vertex set as QuickHull, starting at the smallest point by (x, y).
    """

    def compute_hull(self, points) -> list[Point]:
        return convex_hull_andrew(as_points(points))
