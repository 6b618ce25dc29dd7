"""Shared fakes for the S3 extended exporter tests."""

from datetime import datetime, timedelta, timezone
from typing import Dict, List

from provider.interfaces import MetricsProvider
from provider.sample import Sample

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def sample_at(minutes_ago: int, **values) -> Sample:
    return Sample(timestamp=FIXED_NOW - timedelta(minutes=minutes_ago), **values)


class MockProvider(MetricsProvider):
    """Provider returning canned samples per metric name; raises for names in `failures`."""

    def __init__(self, samples: Dict[str, List[Sample]] = None, failures: Dict[str, Exception] = None):
        self.samples = samples or {}
        self.failures = failures or {}
        self.calls = []

    def query_samples(self, namespace, metric_name, statistics, dimensions,
                      start_time, end_time, period):
        self.calls.append({
            'namespace': namespace,
            'metric_name': metric_name,
            'statistics': tuple(statistics),
            'dimensions': dict(dimensions),
            'start_time': start_time,
            'end_time': end_time,
            'period': period,
        })
        if metric_name in self.failures:
            raise self.failures[metric_name]
        return list(self.samples.get(metric_name, []))
