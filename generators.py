import numpy as np

from geometry import Point

DISTRIBUTIONS = ("uniform", "uniform_int", "circle", "gaussian", "clusters", "square_with_interior")


def square_with_interior(n: int, n_boundary: int = 10, size: int = 1000) -> list[Point]:
    """
    Corners of the square [0, size]^2, extra points on its edges
    and the remaining points strictly inside.
    """
    if n_boundary < 4:
        raise ValueError(f"Need at least 4 boundary points for the square corners, got {n_boundary}")
    if n < n_boundary:
        raise ValueError(f"Number of points {n} is smaller than n_boundary={n_boundary}")

    points = [Point(0, 0), Point(size, 0), Point(size, size), Point(0, size)]
    for i in range(n_boundary - 4):
        t = int(np.random.randint(1, size))
        side = i % 4
        if side == 0:
            points.append(Point(t, 0))
        elif side == 1:
            points.append(Point(size, t))
        elif side == 2:
            points.append(Point(t, size))
        else:
            points.append(Point(0, t))

    xs = np.random.randint(1, size, n - n_boundary)
    ys = np.random.randint(1, size, n - n_boundary)
    points.extend(Point(int(x), int(y)) for x, y in zip(xs, ys))
    return points


def generate_points(n: int, distribution: str = "uniform", seed: int | None = 42) -> list[Point]:
    if n <= 0:
        raise ValueError(f"Number of points must be positive, got {n}")
    if distribution not in DISTRIBUTIONS:
        raise ValueError(f"Unknown distribution: {distribution}")

    if seed is not None:
        np.random.seed(seed)

    if distribution == "uniform":
        xs = np.random.uniform(0, 1000, n)
        ys = np.random.uniform(0, 1000, n)
    elif distribution == "uniform_int":
        xs = np.random.randint(0, 1000, n)
        ys = np.random.randint(0, 1000, n)
        return [Point(int(x), int(y)) for x, y in zip(xs, ys)]
    elif distribution == "circle":
        angle = np.random.uniform(0, 2 * np.pi, n)
        r = np.random.uniform(0, 500, n) ** 0.5
        xs = 500 + r * np.cos(angle)
        ys = 500 + r * np.sin(angle)
    elif distribution == "gaussian":
        xs = np.random.normal(500, 150, n)
        ys = np.random.normal(500, 150, n)
    elif distribution == "clusters":
        n_clusters = min(5, n)
        centers = np.random.uniform(100, 900, (n_clusters, 2))
        labels = np.arange(n) % n_clusters
        xs = np.random.normal(centers[labels, 0], 50)
        ys = np.random.normal(centers[labels, 1], 50)
    else:
        return square_with_interior(n, n_boundary=min(10, n))

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
