"""Termination criteria and the k-means call that uses them."""

import logging
from dataclasses import dataclass

import cv2
import numpy as np

from cvtutorials.structs import Array
from cvtutorials.utils import sample_seed_from_rng


@dataclass(frozen=True)
class TerminationCriteria:
    """When an iterative algorithm should stop (cv::TermCriteria).

    The algorithm stops after max_count iterations, or once the accuracy
    reaches epsilon, whichever of the enabled conditions is met first.
    """

    max_count: int = 10
    epsilon: float = 1.0
    use_count: bool = True
    use_epsilon: bool = True

    def __post_init__(self) -> None:
        if not (self.use_count or self.use_epsilon):
            raise ValueError("At least one termination condition must be enabled.")
        if self.use_count and self.max_count <= 0:
            raise ValueError(f"max_count must be positive, got {self.max_count}")

    @property
    def type_flags(self) -> int:
        """The cv::TermCriteria type bit flags."""
        flags = 0
        if self.use_count:
            flags |= cv2.TERM_CRITERIA_MAX_ITER
        if self.use_epsilon:
            flags |= cv2.TERM_CRITERIA_EPS
        return flags

    def to_cv(self) -> tuple[int, int, float]:
        """The criteria tuple the OpenCV bindings expect."""
        return (self.type_flags, self.max_count, self.epsilon)


@dataclass(frozen=True)
class KMeansResult:
    """The output of a k-means run."""

    compactness: float
    labels: Array
    centers: Array


def sample_points(
    rng: np.random.Generator, num_points: int, low: float = 0.0, high: float = 500.0
) -> Array:
    """Sample 2-D points uniformly from a square, one point per row."""
    return rng.uniform(low, high, size=(num_points, 2)).astype(np.float32)


def cluster_points(
    points: Array,
    cluster_count: int,
    criteria: TerminationCriteria,
    attempts: int = 3,
    rng: np.random.Generator | None = None,
) -> KMeansResult:
    """Group points into clusters with k-means++ initialisation.

    The cluster count is capped at the number of points. If rng is given,
    OpenCV's global random number generator is seeded from it.
    """
    if len(points) == 0:
        raise ValueError("Cannot cluster an empty set of points.")
    samples = np.asarray(points, dtype=np.float32).reshape(len(points), -1)
    if cluster_count <= 0:
        raise ValueError(f"cluster_count must be positive, got {cluster_count}")
    cluster_count = min(cluster_count, len(samples))
    if rng is not None:
        cv2.setRNGSeed(sample_seed_from_rng(rng))
    logging.debug(
        f"Running k-means on {len(samples)} points with {cluster_count} clusters."
    )
    compactness, labels, centers = cv2.kmeans(
        samples,
        cluster_count,
        None,
        criteria.to_cv(),
        attempts,
        cv2.KMEANS_PP_CENTERS,
    )
    return KMeansResult(float(compactness), labels.ravel(), centers)


def random_clustering_problem(
    rng: np.random.Generator, max_clusters: int = 5, max_samples: int = 1000
) -> tuple[Array, int]:
    """Draw a random number of points and clusters for a k-means demo.

    The cluster count is in [2, max_clusters] and the number of points is in
    [1, max_samples].
    """
    if max_clusters < 2:
        raise ValueError(f"max_clusters must be at least 2, got {max_clusters}")
    cluster_count = int(rng.integers(2, max_clusters + 1))
    sample_count = int(rng.integers(1, max_samples + 1))
    return sample_points(rng, sample_count), min(cluster_count, sample_count)
