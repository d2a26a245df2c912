import pytest
import numpy as np

from convex_hull_naive import MonotoneChainBuilder
from generators import square_with_interior
from geometry import Point, cross, is_convex, polygon_contains
from quickhull import InvalidInputError, QuickHull, quickhull


def check_hull(points: list[Point], hull: list[Point], tol: float = 0.0):
    point_set = set(points)

    assert len(hull) == len(set(hull)), f"Hull has repeated vertices: {hull}"
    for p in hull:
        assert p in point_set, f"Hull vertex {p} is not an input point"

    for p in points:
        assert polygon_contains(hull, p, tol=tol), f"Point {p} lies outside of hull {hull}"

    n = len(hull)
    if n >= 3:
        for i in range(n):
            turn = cross(hull[i], hull[(i + 1) % n], hull[(i + 2) % n])
            assert turn < 0, f"Hull is not traced clockwise at vertex {hull[(i + 1) % n]}"

    # no vertex can be dropped: it would fall outside of the remaining polygon
    if n >= 2:
        for i in range(n):
            rest = hull[:i] + hull[i + 1:]
            assert not polygon_contains(rest, hull[i]), f"Vertex {hull[i]} is redundant"


def test_single_point():
    assert quickhull([Point(5, 5)]) == [Point(5, 5)]


def test_two_points():
    assert quickhull([Point(0, 0), Point(4, 0)]) == [Point(0, 0), Point(4, 0)]
    assert quickhull([Point(4, 0), Point(0, 0)]) == [Point(0, 0), Point(4, 0)]


def test_square_with_interior_point():
    points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]
    hull = quickhull(points)

    assert hull == [Point(0, 0), Point(0, 4), Point(4, 4), Point(4, 0)]
    check_hull(points, hull)


def test_collinear_points():
    assert quickhull([Point(0, 0), Point(2, 0), Point(4, 0)]) == [Point(0, 0), Point(4, 0)]
    assert quickhull([Point(2, 2), Point(0, 0), Point(3, 3), Point(1, 1)]) == [Point(0, 0), Point(3, 3)]


def test_vertical_line():
    points = [Point(0, 3), Point(0, 1), Point(0, 5), Point(0, 2)]
    hull = quickhull(points)

    assert hull == [Point(0, 1), Point(0, 5)]
    check_hull(points, hull)


def test_identical_points():
    assert quickhull([Point(1, 1)] * 5) == [Point(1, 1)]


def test_duplicates_are_not_repeated():
    points = [Point(0, 0), Point(4, 0), Point(2, 3), Point(2, 3), Point(0, 0), Point(2, -3), Point(2, -3)]
    hull = quickhull(points)

    assert hull == [Point(0, 0), Point(2, 3), Point(4, 0), Point(2, -3)]
    check_hull(points, hull)


def test_leftmost_tie_takes_lowest_point():
    hull = quickhull([Point(0, 5), Point(0, 0), Point(3, 1)])
    assert hull == [Point(0, 0), Point(0, 5), Point(3, 1)]

    hull = quickhull([Point(0, 0), Point(0, 5), Point(3, 1)])
    assert hull == [Point(0, 0), Point(0, 5), Point(3, 1)]


def test_tie_on_left_edge():
    points = [Point(0, 5), Point(0, 0), Point(0, 10), Point(3, 1)]
    hull = quickhull(points)

    assert hull == [Point(0, 0), Point(0, 10), Point(3, 1)]
    assert is_convex(hull)
    check_hull(points, hull)


def test_tie_on_right_edge():
    points = [Point(3, 5), Point(3, 0), Point(3, 10), Point(0, 1)]
    hull = quickhull(points)

    assert hull == [Point(0, 1), Point(3, 10), Point(3, 0)]
    assert is_convex(hull)
    check_hull(points, hull)


def test_ties_on_both_vertical_edges():
    points = [Point(x, y) for x in (0, 9) for y in (5, 2, 8, 0, 9)] + [Point(4, 4), Point(9, 5)]
    hull = quickhull(points)

    assert hull == [Point(0, 0), Point(0, 9), Point(9, 9), Point(9, 0)]
    check_hull(points, hull)
    assert set(hull) == set(MonotoneChainBuilder().compute_hull(points))


def test_extreme_points_duplicates_keep_first():
    points = [Point(0, 0), Point(2, 1), Point(0, 0)]
    leftmost, rightmost = QuickHull.extreme_points(points)

    assert leftmost is points[0]
    assert rightmost == Point(2, 1)


def test_mixed_int_and_float_input():
    points = [(0, 0), (4.0, 0.0), (4, 4), (0.0, 4.0), (2, 2.5)]
    hull = quickhull(points)

    assert set(hull) == {Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)}
    check_hull([Point(*p) for p in points], hull)


def test_tuple_and_array_input():
    expected = [Point(0, 0), Point(0, 4), Point(4, 4), Point(4, 0)]
    pairs = [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]

    assert quickhull(pairs) == expected
    assert quickhull(np.array(pairs)) == expected


@pytest.mark.parametrize("points", [[], None, np.empty((0, 2))])
def test_empty_input(points):
    with pytest.raises(InvalidInputError):
        QuickHull().compute_hull(points)


def test_bad_array_shape():
    with pytest.raises(InvalidInputError):
        quickhull(np.zeros((4, 3)))


def test_input_is_not_modified():
    points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]
    original = list(points)
    hull = quickhull(points)

    assert points == original
    hull.append(Point(9, 9))
    assert quickhull(points) == [Point(0, 0), Point(0, 4), Point(4, 4), Point(4, 0)]


def test_bounding_square_scenario():
    np.random.seed(7)
    points = square_with_interior(1000, n_boundary=10)
    interior = points[10:]
    assert len(interior) == 990

    hull = quickhull(points)
    assert len(hull) <= 10
    assert set(hull) == {Point(0, 0), Point(1000, 0), Point(1000, 1000), Point(0, 1000)}
    for p in interior:
        assert polygon_contains(hull, p)


def test_partition_keeps_order():
    top, bottom = Point(0, 0), Point(10, 0)
    work = [Point(8, 5), Point(1, 5), Point(5, 2), Point(5, 10), Point(9, 3), Point(2, 8)]
    scratch = [None] * len(work)

    far, mid, end = QuickHull.partition(work, scratch, 0, len(work), top, bottom)

    assert far == Point(5, 10)
    assert (mid, end) == (2, 4)
    assert work[:mid] == [Point(1, 5), Point(2, 8)]
    assert work[mid:end] == [Point(8, 5), Point(9, 3)]


def test_farthest_point_tie_takes_point_nearest_top():
    top, bottom = Point(0, 0), Point(4, 0)

    far, _, _ = QuickHull.partition([Point(3, 2), Point(1, 2)], [None] * 2, 0, 2, top, bottom)
    assert far == Point(1, 2)

    far, _, _ = QuickHull.partition([Point(1, 2), Point(3, 2)], [None] * 2, 0, 2, top, bottom)
    assert far == Point(1, 2)

    work = [Point(2, 2), Point(1, 2), Point(3, 2)]
    far, mid, end = QuickHull.partition(work, [None] * 3, 0, 3, top, bottom)
    assert far == Point(1, 2)
    assert work[mid:end] == [Point(2, 2), Point(3, 2)]


def test_farthest_point_duplicates_keep_first():
    top, bottom = Point(0, 0), Point(4, 0)
    work = [Point(2, 2), Point(2, 2)]

    far, mid, end = QuickHull.partition(work, [None] * 2, 0, 2, top, bottom)
    assert far is work[0]
    assert (mid, end) == (0, 0)


def test_edge_parallel_to_base():
    # the middle point of the top edge is as far from the base as its ends
    points = [Point(0, 0), Point(4, 0), Point(2, 2), Point(1, 2), Point(3, 2)]
    hull = quickhull(points)

    assert hull == [Point(0, 0), Point(1, 2), Point(3, 2), Point(4, 0)]
    check_hull(points, hull)


def test_points_on_circle():
    # every point is a hull vertex; a deep split sequence for the work stack
    n = 2000
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    points = [Point(x, y) for x, y in zip((10**6 * np.cos(angles)).tolist(), (10**6 * np.sin(angles)).tolist())]
    points = list(set(points))

    hull = quickhull(points)
    assert len(hull) == len(points)
    assert set(hull) == set(points)


def test_points_on_parabola():
    points = [Point(x, x * x) for x in range(-300, 300)]
    hull = quickhull(points)

    assert set(hull) == set(points)
    check_hull(points, hull)


@pytest.fixture
def distribution_gen_func():
    return {
        "uniform": lambda low, high, s: np.random.rand(s) * (high - low) + low,
        "normal": lambda low, high, s: np.random.randn(s) * (high - low) / 4 + (high + low) / 2,
        "uniform_int": np.random.randint,
    }


@pytest.fixture
def n_trials():
    # n_points -> n_trials
    return {
        10: 300,
        30: 100,
        100: 50,
        1000: 5,
    }


@pytest.mark.parametrize("n_points", [10, 30, 100, 1000])
@pytest.mark.parametrize("distribution_type", ["uniform_int", "uniform", "normal"])
@pytest.mark.parametrize("limits", [(0, 10), (0, 100), (-100, 100), (-10**9, 10**9)])
def test_hull_properties(n_points, distribution_type, limits, distribution_gen_func, n_trials):
    np.random.seed(42)

    seeds = np.random.randint(0, 100_000, size=n_trials[n_points])
    for seed in seeds:
        np.random.seed(seed)

        gen_func = distribution_gen_func[distribution_type]
        low, high = limits
        xs = gen_func(low, high, n_points).tolist()
        ys = gen_func(low, high, n_points).tolist()
        points = [Point(xs[i], ys[i]) for i in range(n_points)]

        hull = QuickHull().compute_hull(points)
        check_hull(points, hull)

        assert set(hull) == set(MonotoneChainBuilder().compute_hull(points))
        assert set(QuickHull().compute_hull(hull)) == set(hull)
