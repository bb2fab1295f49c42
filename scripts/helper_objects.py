#!/usr/bin/env python3

"""Set up termination criteria and use them to run k-means."""

import sys

import numpy as np

from cvtutorials.cli import make_parser, parse_args, print_error
from cvtutorials.core_types import format_matrix
from cvtutorials.helper_objects import (
    TerminationCriteria,
    cluster_points,
    random_clustering_problem,
)


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Termination criteria for k-means", display=False)
    parser.add_argument("--seed", type=int, default=12345, help="Random seed")
    parser.add_argument("--max-clusters", type=int, default=5, help="Most clusters")
    parser.add_argument(
        "--max-count", type=int, default=10, help="Terminate after this many iterations"
    )
    parser.add_argument(
        "--epsilon", type=float, default=1.0, help="Terminate at this accuracy"
    )
    parser.add_argument("--attempts", type=int, default=3, help="k-means attempts")
    parsed = parse_args(parser, args)
    rng = np.random.default_rng(parsed.seed)

    try:
        criteria = TerminationCriteria(parsed.max_count, parsed.epsilon)
        points, cluster_count = random_clustering_problem(rng, parsed.max_clusters)
        result = cluster_points(points, cluster_count, criteria, parsed.attempts, rng)
    except ValueError as e:
        return print_error(e)

    print(f"\nTermination criteria: {criteria.to_cv()}")
    print(f"Clustered {len(points)} points into {cluster_count} clusters.")
    print(f"Compactness: {result.compactness:.4f}")
    print(f"Centers:\n{format_matrix(result.centers)}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
