from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    Positive when b lies left of the directed line o -> a.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def is_left_of_line(p: Point, start: Point, end: Point) -> bool:
    """
    Strict left-of test for the directed line start -> end.
    No tolerance: collinear points are never "left".
    """
    return cross(start, end, p) > 0


def signed_area(polygon: list[Point]) -> float:
    """
    Shoelace formula. Positive for counter-clockwise polygons (y axis up).
    """
    n = len(polygon)
    if n < 3:
        return 0.0
    s = 0
    for i in range(n):
        a, b = polygon[i], polygon[(i + 1) % n]
        s += a.x * b.y - b.x * a.y
    return s / 2


def hull_area(hull: list[Point]) -> float:
    return abs(signed_area(hull))


def polygon_contains(hull: list[Point], p: Point, tol: float = 0.0) -> bool:
    """
    Checks that p lies inside or on the boundary of a convex polygon.
    The polygon may be traced in either direction; hulls with one or two
    vertices are treated as a point and a segment.
    """
    n = len(hull)
    if n == 0:
        return False
    if n == 1:
        return p == hull[0]
    if n == 2:
        a, b = hull
        if abs(cross(a, b, p)) > tol:
            return False
        return (
            min(a.x, b.x) - tol <= p.x <= max(a.x, b.x) + tol
            and min(a.y, b.y) - tol <= p.y <= max(a.y, b.y) + tol
        )

    sgn = 1 if signed_area(hull) > 0 else -1
    for i in range(n):
        if sgn * cross(hull[i], hull[(i + 1) % n], p) < -tol:
            return False
    return True


def is_convex(hull: list[Point]) -> bool:
    """
    True when every consecutive triple turns the same way
    and no triple is collinear.
    """
    n = len(hull)
    if n < 3:
        return True

    sign = 0
    for i in range(n):
        c = cross(hull[i], hull[(i + 1) % n], hull[(i + 2) % n])
        if c == 0:
            return False
        if sign == 0:
            sign = 1 if c > 0 else -1
        elif (c > 0) != (sign > 0):
            return False
    return True


def convex_hull_andrew(points: list[Point]) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Collinear boundary points are dropped. The hull starts at the smallest
    point by (x, y) and is traced clockwise (y axis up).
    Time complexity: O(n*log(n)).
    """
    points = sorted(set(points))
    if len(points) <= 2:
        return points

    lower = []  # lower hull
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []  # upper hull
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    ccw = lower[:-1] + upper[:-1]
    if len(ccw) <= 2:
        return ccw
    return [ccw[0]] + ccw[:0:-1]

