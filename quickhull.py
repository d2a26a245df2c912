import logging

import numpy as np

from geometry import Point, cross, is_left_of_line

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """
    Raised when a hull is requested for an empty or absent point set.
    """


def as_points(points) -> list[Point]:
    """
    Normalize input into a fresh list of points.
    Accepts points, (x, y) pairs or an (n, 2) numpy array.

    Coordinates are expected to be all int or all float. Mixed input is not
    rejected: the predicates then fall back to float arithmetic and lose
    the exactness integer input has.
    """
    if points is None:
        raise InvalidInputError("Cannot compute convex hull of zero points.")

    if isinstance(points, np.ndarray):
        if points.size == 0:
            raise InvalidInputError("Cannot compute convex hull of zero points.")
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidInputError(f"Expected an array of shape (n, 2), got {points.shape}")
        return [Point(x, y) for x, y in points.tolist()]

    result = [p if isinstance(p, Point) else Point(*p) for p in points]
    if not result:
        raise InvalidInputError("Cannot compute convex hull of zero points.")
    return result


class QuickHull:
    """
    Divide and conquer convex hull (quickhull).

    The hull starts at the leftmost point, follows the chain above the line
    leftmost -> rightmost, then the rightmost point and the chain below it.
    With the y axis pointing up that is a clockwise traversal.

    Time complexity: O(n*log(n)) on average, O(n^2) in the worst case.
    """

    def compute_hull(self, points) -> list[Point]:
        points = as_points(points)

        leftmost, rightmost = self.extreme_points(points)
        logger.debug("Extreme points: leftmost=%s rightmost=%s", leftmost, rightmost)
        if leftmost == rightmost:
            return [leftmost]

        # upper half-plane goes first, lower half-plane after it
        upper, lower = [], []
        for p in points:
            if p == leftmost or p == rightmost:
                continue
            if is_left_of_line(p, leftmost, rightmost):
                upper.append(p)
            elif is_left_of_line(p, rightmost, leftmost):
                lower.append(p)
        logger.debug("Partitioned %d points: upper=%d lower=%d", len(points), len(upper), len(lower))

        work = upper + lower
        scratch = [None] * len(work)

        hull = [leftmost]
        hull.extend(self.divide(work, scratch, 0, len(upper), leftmost, rightmost))
        hull.append(rightmost)
        hull.extend(self.divide(work, scratch, len(upper), len(work), rightmost, leftmost))

        logger.debug("Hull of %d points has %d vertices", len(points), len(hull))
        return hull

    @staticmethod
    def extreme_points(points: list[Point]) -> tuple[Point, Point]:
        """
        Points with minimal and maximal x coordinate.

        Among points sharing the minimal x the lowest one is taken, among points
        sharing the maximal x the highest one, i.e. the smallest and the largest
        point by (x, y). A point in the middle of a vertical hull edge is thus
        never picked. Exact duplicates keep the first one in iteration order.
        """
        leftmost = rightmost = points[0]
        for p in points:
            if p < leftmost:
                leftmost = p
            if p > rightmost:
                rightmost = p
        return leftmost, rightmost

    @staticmethod
    def partition(
        work: list[Point],
        scratch: list,
        lo: int,
        hi: int,
        top: Point,
        bottom: Point,
    ) -> tuple[Point, int, int]:
        """
        Partition work[lo:hi] around the point farthest from the line top -> bottom.

        Points strictly left of top -> far are moved to work[lo:mid],
        points strictly left of far -> bottom to work[mid:end]. Everything else
        lies inside the triangle (top, far, bottom) and is dropped.
        Both groups keep their relative order.
        """
        # The base edge is fixed for the whole range, so |cross| ranks points
        # exactly as their distance to the line does.
        # Equally far points lie on a line parallel to the base; the one nearest
        # to top along the base is taken, a middle one would not be a vertex.
        dx, dy = bottom.x - top.x, bottom.y - top.y

        def along(p: Point):
            return (p.x - top.x) * dx + (p.y - top.y) * dy

        far_idx = lo
        max_dist = abs(cross(top, bottom, work[lo]))
        for i in range(lo + 1, hi):
            dist = abs(cross(top, bottom, work[i]))
            if dist > max_dist or dist == max_dist and along(work[i]) < along(work[far_idx]):
                max_dist = dist
                far_idx = i
        far = work[far_idx]

        mid = lo
        n_right = 0
        for i in range(lo, hi):
            if i == far_idx:
                continue
            p = work[i]
            if is_left_of_line(p, top, far):
                work[mid] = p
                mid += 1
            elif is_left_of_line(p, far, bottom):
                scratch[n_right] = p
                n_right += 1

        work[mid:mid + n_right] = scratch[:n_right]
        return far, mid, mid + n_right

    def divide(
        self,
        work: list[Point],
        scratch: list,
        lo: int,
        hi: int,
        top: Point,
        bottom: Point,
    ) -> list[Point]:
        """
        Hull vertices strictly left of the directed edge top -> bottom,
        ordered from top to bottom.

        Uses an explicit stack instead of recursion. A stack entry is either
        a pending range or a confirmed vertex; the left sub-range is pushed
        last so it is emitted before its farthest point.
        """
        hull = []
        stack = [(lo, hi, top, bottom)]
        while stack:
            task = stack.pop()
            if isinstance(task, Point):
                hull.append(task)
                continue

            lo, hi, top, bottom = task
            if hi - lo == 0:
                continue
            if hi - lo == 1:
                hull.append(work[lo])
                continue

            far, mid, end = self.partition(work, scratch, lo, hi, top, bottom)
            stack.append((mid, end, far, bottom))
            stack.append(far)
            stack.append((lo, mid, top, far))

        return hull


def quickhull(points) -> list[Point]:
    return QuickHull().compute_hull(points)
