"""
Tests for the Prometheus collector.

Run with: python -m pytest tests/ -v
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from collector.collector import S3MetricsCollector
from collector.plugin import S3ExtendedPlugin
from tests.helpers import FIXED_NOW, MockProvider, sample_at


def labels(graph, metric):
    return {
        'prefix': 's3-extended',
        'bucket_name': 'my-bucket',
        'filter_id': 'EntireBucket',
        'graph': graph,
        'metric': metric,
    }


class TestS3MetricsCollector(unittest.TestCase):

    def setUp(self):
        self.provider = MockProvider(
            samples={
                'GetRequests': [sample_at(1, sum=42.0)],
                '4xxErrors': [sample_at(1, sum=3.0)],
                'TotalRequestLatency': [sample_at(1, average=2.5, maximum=9.0, minimum=1.0)],
            },
            failures={'PutRequests': RuntimeError('boom')}
        )
        plugin = S3ExtendedPlugin(self.provider, 'my-bucket', 'EntireBucket', now_func=lambda: FIXED_NOW)
        self.collector = S3MetricsCollector(plugin)
        self.registry = self.collector.registry

    def test_collect_sets_gauges(self):
        stats = self.collector.collect()

        self.assertEqual(stats['GetRequests'], 42.0)
        self.assertEqual(self.registry.get_sample_value('s3_extended_metric', labels('requests', 'GetRequests')), 42.0)
        self.assertEqual(self.registry.get_sample_value('s3_extended_metric', labels('errors', '4xxErrors')), 3.0)
        self.assertEqual(
            self.registry.get_sample_value('s3_extended_metric', labels('latency', 'TotalRequestLatencyMin')), 1.0)
        self.assertIsNone(self.registry.get_sample_value('s3_extended_metric', labels('requests', 'PutRequests')))

    def test_errors_are_counted_by_type(self):
        self.collector.collect()
        self.collector.collect()

        self.assertEqual(self.registry.get_sample_value(
            's3_extended_fetch_errors_total', {'metric_name': 'PutRequests', 'error_type': 'api_error'}), 2.0)
        self.assertEqual(self.registry.get_sample_value(
            's3_extended_fetch_errors_total', {'metric_name': 'HeadRequests', 'error_type': 'no_data'}), 2.0)
        self.assertIsNone(self.registry.get_sample_value(
            's3_extended_fetch_errors_total', {'metric_name': 'GetRequests', 'error_type': 'no_data'}))

    def test_stale_values_are_cleared(self):
        self.collector.collect()
        self.provider.samples['GetRequests'] = []

        self.collector.collect()

        self.assertIsNone(self.registry.get_sample_value('s3_extended_metric', labels('requests', 'GetRequests')))
        self.assertEqual(self.registry.get_sample_value('s3_extended_metric', labels('errors', '4xxErrors')), 3.0)

    def test_duration_is_observed(self):
        self.collector.collect()
        self.assertEqual(self.registry.get_sample_value('s3_extended_fetch_duration_seconds_count'), 1.0)

    def test_get_metrics_text(self):
        self.collector.collect()
        text = self.collector.get_metrics()

        self.assertIn('s3_extended_metric{', text)
        self.assertIn('metric="GetRequests"', text)

    def test_collectors_do_not_share_registry(self):
        other = S3MetricsCollector(self.collector.plugin)
        self.assertIsNot(other.registry, self.registry)


if __name__ == '__main__':
    unittest.main()
