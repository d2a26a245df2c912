import csv
import logging
import os

from geometry import Point

logger = logging.getLogger(__name__)


class PointFileError(ValueError):
    pass


def _parse_number(token: str, filename: str, line_no: int) -> int | float:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise PointFileError(f"{filename}:{line_no}: not a number: {token!r}") from None


def load_points(filename: str) -> list[Point]:
    """
    Read points from a text file.

    The first non-empty line holds the number of points n, followed by n lines
    with two whitespace separated coordinates. Files with integral coordinates
    only produce integer points; any fractional value promotes all of them to float.
    """
    with open(filename, 'r', encoding='utf-8') as f:
        lines = [(i + 1, line.strip()) for i, line in enumerate(f)]
    lines = [(i, line) for i, line in lines if line]

    if not lines:
        raise PointFileError(f"{filename}: file is empty")

    header_no, header = lines[0]
    try:
        n = int(header)
    except ValueError:
        raise PointFileError(f"{filename}:{header_no}: expected number of points, got {header!r}") from None
    if n < 0:
        raise PointFileError(f"{filename}:{header_no}: negative number of points")

    body = lines[1:]
    if len(body) < n:
        raise PointFileError(f"{filename}: expected {n} points, found {len(body)}")

    coords = []
    for line_no, line in body[:n]:
        tokens = line.split()
        if len(tokens) != 2:
            raise PointFileError(f"{filename}:{line_no}: expected 2 coordinates, got {len(tokens)}")
        coords.append((
            _parse_number(tokens[0], filename, line_no),
            _parse_number(tokens[1], filename, line_no),
        ))

    if any(isinstance(v, float) for pair in coords for v in pair):
        points = [Point(float(x), float(y)) for x, y in coords]
    else:
        points = [Point(x, y) for x, y in coords]

    logger.info("Loaded %d points from %s", len(points), os.path.basename(filename))
    return points


def save_points(filename: str, points: list[Point]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f"{len(points)}\n")
        for p in points:
            f.write(f"{p.x} {p.y}\n")
    logger.info("Saved %d points to %s", len(points), os.path.basename(filename))


def save_hull_report(filename: str, hull: list[Point], report: str):
    """
    Save hull vertices as CSV (index, x, y) for .csv files,
    otherwise write the text report.
    """
    if filename.endswith('.csv'):
        with open(filename, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(["index", "x", "y"])
            for i, p in enumerate(hull):
                writer.writerow([i, p.x, p.y])
    else:
        with open(filename, 'w', encoding='utf-8') as f:
            f.write(report)
    logger.info("Saved results to %s", os.path.basename(filename))
