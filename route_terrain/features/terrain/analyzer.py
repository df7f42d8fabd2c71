"""
Elevation Profile Analyzer

Turns an ordered sequence of elevation samples into distance-weighted
terrain statistics and a flat / hilly / mountainous classification.

Pure computation: no I/O, no shared state. Malformed input (NaN elevation)
propagates into the result instead of being rejected; validating samples is
the job of whoever fetched them.
"""

import logging
from typing import Iterable, Optional

from route_terrain.shared.geo import distance_between, grade_percent
from route_terrain.shared.terrain import classify_terrain
from .models import ElevationSample, ProfileAnalysis, RouteStats

logger = logging.getLogger(__name__)


class ProfileAccumulator:
    """
    Running ascent/descent/grade totals over samples fed in travel order.

    analyze_profile() is a fold over a fresh accumulator, so feeding the
    same samples one by one gives the same result as a batch call.
    Not thread-safe; one accumulator per caller.
    """

    def __init__(self):
        self._last: Optional[ElevationSample] = None
        self._count = 0

        self.total_ascent_m = 0.0
        self.total_descent_m = 0.0
        self.max_elevation_m = 0.0
        self.min_elevation_m = 0.0
        self.max_grade_percent = 0.0

        self._weighted_grade_sum = 0.0
        self._total_distance_m = 0.0

    @property
    def samples_count(self) -> int:
        return self._count

    def add(self, sample: ElevationSample) -> None:
        """Fold one sample into the running totals."""
        prev = self._last
        self._last = sample
        self._count += 1

        if prev is None:
            self.max_elevation_m = sample.elevation
            self.min_elevation_m = sample.elevation
            return

        delta = sample.elevation - prev.elevation
        if delta > 0:
            self.total_ascent_m += delta
        else:
            self.total_descent_m += -delta

        self.max_elevation_m = max(self.max_elevation_m, sample.elevation)
        self.min_elevation_m = min(self.min_elevation_m, sample.elevation)

        distance_m = distance_between(prev.location, sample.location)
        # Coincident points carry no grade term
        if distance_m > 0:
            grade = grade_percent(delta, distance_m)
            self.max_grade_percent = max(self.max_grade_percent, grade)
            self._weighted_grade_sum += grade * distance_m
            self._total_distance_m += distance_m

    def extend(self, samples: Iterable[ElevationSample]) -> None:
        for sample in samples:
            self.add(sample)

    def stats(self) -> RouteStats:
        """Snapshot of the current totals."""
        if self._total_distance_m > 0:
            avg_grade = self._weighted_grade_sum / self._total_distance_m
        else:
            avg_grade = 0.0

        return RouteStats(
            total_ascent_m=self.total_ascent_m,
            total_descent_m=self.total_descent_m,
            max_elevation_m=self.max_elevation_m,
            min_elevation_m=self.min_elevation_m,
            max_grade_percent=self.max_grade_percent,
            avg_grade_percent=avg_grade,
            total_distance_m=self._total_distance_m,
            samples_count=self._count,
        )

    def analysis(self) -> ProfileAnalysis:
        stats = self.stats()
        return ProfileAnalysis(
            stats=stats,
            classification=classify_terrain(
                stats.total_ascent_m, stats.max_grade_percent
            ),
        )


def analyze_profile(samples: Iterable[ElevationSample]) -> ProfileAnalysis:
    """
    Compute route statistics and terrain class from elevation samples.

    Args:
        samples: ElevationSample sequence in travel order (may be empty)

    Returns:
        ProfileAnalysis. Fewer than two samples yield zero ascent, descent
        and grades with classification FLAT; a single sample sets both
        max and min elevation to its own elevation.
    """
    accumulator = ProfileAccumulator()
    accumulator.extend(samples)
    result = accumulator.analysis()

    logger.debug(
        "Analyzed %d samples: ascent=%.1fm max_grade=%.2f%% -> %s",
        accumulator.samples_count,
        result.stats.total_ascent_m,
        result.stats.max_grade_percent,
        result.classification.value,
    )
    return result
