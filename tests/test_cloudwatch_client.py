"""
Tests for the boto3 CloudWatch client, using botocore's Stubber instead of the network.

Run with: python -m pytest tests/ -v
"""

import os
import sys
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from botocore.exceptions import ClientError, NoRegionError
from botocore.stub import Stubber

from cloudwatch.client import CloudWatchClient
from provider.errors import SetupFailureError

END = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
START = END - timedelta(seconds=180)
DIMENSIONS = {'BucketName': 'my-bucket', 'FilterId': 'EntireBucket'}


def expected_params(metric_name, statistics):
    return {
        'Namespace': 'AWS/S3',
        'MetricName': metric_name,
        'Dimensions': [
            {'Name': 'BucketName', 'Value': 'my-bucket'},
            {'Name': 'FilterId', 'Value': 'EntireBucket'},
        ],
        'StartTime': START,
        'EndTime': END,
        'Period': 600,
        'Statistics': statistics,
    }


class TestCloudWatchClient(unittest.TestCase):

    def setUp(self):
        self.cw = CloudWatchClient(region='us-east-1', access_key='AKIDEXAMPLE', secret_key='SECRETEXAMPLE')
        self.stubber = Stubber(self.cw.client)
        self.stubber.activate()

    def tearDown(self):
        self.stubber.deactivate()

    def query(self, metric_name, statistics):
        return self.cw.query_samples(
            namespace='AWS/S3',
            metric_name=metric_name,
            statistics=statistics,
            dimensions=DIMENSIONS,
            start_time=START,
            end_time=END,
            period=600
        )

    def test_datapoints_become_samples(self):
        self.stubber.add_response(
            'get_metric_statistics',
            {
                'Label': 'TotalRequestLatency',
                'Datapoints': [
                    {'Timestamp': END - timedelta(minutes=2), 'Average': 10.0, 'Maximum': 30.0,
                     'Minimum': 1.0, 'Unit': 'Milliseconds'},
                    {'Timestamp': END - timedelta(minutes=1), 'Average': 20.0, 'Maximum': 40.0,
                     'Minimum': 2.0, 'Unit': 'Milliseconds'},
                ]
            },
            expected_params('TotalRequestLatency', ['Average', 'Maximum', 'Minimum'])
        )

        samples = self.query('TotalRequestLatency', ('Average', 'Maximum', 'Minimum'))

        self.assertEqual(len(samples), 2)
        self.assertEqual(samples[1].average, 20.0)
        self.assertEqual(samples[1].maximum, 40.0)
        self.assertEqual(samples[1].minimum, 2.0)
        self.assertIsNone(samples[1].sum)
        self.assertEqual(samples[1].unit, 'Milliseconds')
        self.stubber.assert_no_pending_responses()

    def test_no_datapoints(self):
        self.stubber.add_response(
            'get_metric_statistics',
            {'Label': 'GetRequests', 'Datapoints': []},
            expected_params('GetRequests', ['Sum'])
        )

        self.assertEqual(self.query('GetRequests', ('Sum',)), [])

    def test_client_error_propagates(self):
        self.stubber.add_client_error(
            'get_metric_statistics',
            service_error_code='InvalidParameterValue',
            service_message='bad dimension',
            http_status_code=400
        )

        with self.assertRaises(ClientError):
            self.query('GetRequests', ('Sum',))


class TestCloudWatchClientSetup(unittest.TestCase):

    def test_session_failure_is_setup_failure(self):
        with patch('cloudwatch.client.boto3.Session', side_effect=NoRegionError()):
            with self.assertRaises(SetupFailureError):
                CloudWatchClient(region='us-east-1')

    def test_explicit_credentials_are_used(self):
        with patch('cloudwatch.client.boto3.Session') as session_cls:
            CloudWatchClient(region='eu-west-1', access_key='AK', secret_key='SK')

        session_cls.assert_called_once_with(aws_access_key_id='AK', aws_secret_access_key='SK')
        session_cls.return_value.client.assert_called_once_with('cloudwatch', region_name='eu-west-1')

    def test_default_credential_chain(self):
        with patch('cloudwatch.client.boto3.Session') as session_cls:
            CloudWatchClient(region='', access_key='AK', secret_key='')

        session_cls.assert_called_once_with()
        session_cls.return_value.client.assert_called_once_with('cloudwatch', region_name=None)


if __name__ == '__main__':
    unittest.main()
