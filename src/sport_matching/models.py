from dataclasses import dataclass


@dataclass
class MatchMetrics:
    """Track hit/miss and computation counters for the matching service."""

    total_lookups: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    computations: int = 0
    shared_computations: int = 0
    invalidations: int = 0
    total_compute_time_ms: float = 0.0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_lookups == 0:
            return 0.0
        return self.cache_hits / self.total_lookups

    @property
    def avg_compute_time_ms(self) -> float:
        """Calculate average candidate scan time."""
        if self.computations == 0:
            return 0.0
        return self.total_compute_time_ms / self.computations

    def record_hit(self) -> None:
        """Record a cache hit."""
        self.total_lookups += 1
        self.cache_hits += 1

    def record_miss(self) -> None:
        """Record a cache miss."""
        self.total_lookups += 1
        self.cache_misses += 1

    def record_computation(self, duration_ms: float) -> None:
        """Record a completed candidate scan."""
        self.computations += 1
        self.total_compute_time_ms += duration_ms

    def record_shared(self) -> None:
        """Record a miss served by another caller's in-flight computation."""
        self.shared_computations += 1

    def record_invalidation(self) -> None:
        """Record an explicit entry removal."""
        self.invalidations += 1

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "total_lookups": self.total_lookups,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "hit_rate": self.hit_rate,
            "computations": self.computations,
            "shared_computations": self.shared_computations,
            "avg_compute_time_ms": self.avg_compute_time_ms,
            "invalidations": self.invalidations,
        }
