import argparse
import logging
import os
import sys
import time

from dataclasses import replace

from config import ALGORITHMS, LOG_LEVELS, AnalyzerConfig, load_config
from convex_hull_naive import MonotoneChainBuilder
from generators import DISTRIBUTIONS, generate_points
from geometry import Point, hull_area
from points_io import load_points, save_hull_report
from quickhull import QuickHull

logger = logging.getLogger(__name__)

BUILDERS = {
    "quickhull": QuickHull,
    "monotone_chain": MonotoneChainBuilder,
}


def run_builder(name: str, points: list[Point]) -> tuple[list[Point], float]:
    builder = BUILDERS[name]()
    start_time = time.perf_counter()
    hull = builder.compute_hull(points)
    return hull, time.perf_counter() - start_time


def generate_report(
    points: list[Point],
    hull: list[Point],
    algorithm: str,
    execution_time: float,
    source: str | None = None,
) -> str:
    report = f"""
{'='*60}
CONVEX HULL REPORT
{'='*60}

INPUT:
------
Source: {source if source else 'generated'}
Number of points: {len(points)}
Algorithm: {algorithm}

RESULTS:
--------
Hull vertices: {len(hull)}
Hull area: {hull_area(hull):.4f}
Execution time: {execution_time:.6f} s

VERTICES:
---------
"""
    for i, p in enumerate(hull):
        report += f"{i:5d}: {p.x} {p.y}\n"

    report += f"""
{'='*60}
Generated: {time.strftime('%Y-%m-%d %H:%M:%S')}
{'='*60}
"""
    return report


def compare_algorithms(points: list[Point]) -> str:
    results = {name: run_builder(name, points) for name in BUILDERS}
    vertex_sets = [set(hull) for hull, _ in results.values()]
    agree = all(s == vertex_sets[0] for s in vertex_sets)

    lines = [f"{'Algorithm':<20}{'Time (s)':>12}{'Vertices':>10}{'Points/s':>14}"]
    for name, (hull, exec_time) in results.items():
        speed = len(points) / exec_time if exec_time > 0 else 0
        lines.append(f"{name:<20}{exec_time:>12.6f}{len(hull):>10}{speed:>14.0f}")
    lines.append(f"Vertex sets agree: {'yes' if agree else 'NO'}")
    if not agree:
        logger.warning("Builders returned different vertex sets for %d points", len(points))
    return "\n".join(lines)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convex hull analyzer")
    parser.add_argument("--config", help="YAML file with analyzer settings")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", help="point file: number of points, then 'x y' per line")
    source.add_argument("--generate", type=int, metavar="N", help="generate N random points")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--algorithm", choices=ALGORITHMS)
    parser.add_argument("--output", help="save report (.txt) or hull vertices (.csv)")
    parser.add_argument("--compare", action="store_true", help="compare all algorithms")
    parser.add_argument("--plot", metavar="FILE", help="save a plot of points and hull")
    parser.add_argument("--log-level", choices=LOG_LEVELS)
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AnalyzerConfig:
    config = load_config(args.config)
    overrides = {
        "algorithm": args.algorithm,
        "distribution": args.distribution,
        "n_points": args.generate,
        "seed": args.seed,
        "log_level": args.log_level,
    }
    if args.plot:
        overrides["plot"] = True
        overrides["plot_path"] = args.plot
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (ValueError, OSError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.input:
            points = load_points(args.input)
            source = os.path.basename(args.input)
        else:
            points = generate_points(config.n_points, config.distribution, config.seed)
            source = f"generated_{config.distribution}_{config.n_points}"
            logger.info("Generated %d points (%s)", len(points), config.distribution)

        hull, execution_time = run_builder(config.algorithm, points)
    except (ValueError, OSError) as e:
        logger.error("Analysis failed: %s", e)
        return 2

    logger.info("Analysis finished in %.4f s, hull has %d vertices", execution_time, len(hull))
    report = generate_report(points, hull, config.algorithm, execution_time, source)
    print(report)

    if args.compare:
        print(compare_algorithms(points))

    try:
        if args.output:
            save_hull_report(args.output, hull, report)
        if config.plot:
            from visualization import plot_analysis

            plot_analysis(points, hull, config.plot_path or f"{source}_hull.png")
    except OSError as e:
        logger.error("Could not save results: %s", e)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
