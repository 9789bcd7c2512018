from __future__ import annotations

"""Prometheus counters for the prime generators."""

from prometheus_client import Counter, Histogram

from .config import settings


class GenerationMetricsRecorder:
    def __init__(self) -> None:
        self._candidates = Counter(
            "modprime_candidates_total",
            "Candidates drawn by generator",
            labelnames=["generator"],
        )
        self._rejections = Counter(
            "modprime_candidate_rejections_total",
            "Candidates discarded by generator and filter stage",
            labelnames=["generator", "stage"],
        )
        self._accepted = Counter(
            "modprime_primes_generated_total",
            "Primes returned by generator",
            labelnames=["generator"],
        )
        self._latency = Histogram(
            "modprime_generation_seconds",
            "Wall-clock time spent producing one prime",
            labelnames=["generator"],
            buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 4, 8, 15, 30, 60, float("inf")),
        )

    @staticmethod
    def _enabled() -> bool:
        return settings.enable_metrics

    def record_candidate(self, generator: str) -> None:
        if self._enabled():
            self._candidates.labels(generator=generator).inc()

    def record_rejection(self, generator: str, stage: str) -> None:
        if self._enabled():
            self._rejections.labels(generator=generator, stage=stage).inc()

    def record_accepted(self, generator: str, latency_seconds: float | None) -> None:
        if not self._enabled():
            return
        self._accepted.labels(generator=generator).inc()
        self._latency.labels(generator=generator).observe(latency_seconds or 0.0)


generation_metrics = GenerationMetricsRecorder()
