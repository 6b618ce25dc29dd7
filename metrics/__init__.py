# -*- coding: utf-8 -*-
"""
S3 指标定义模块

功能：
- 静态定义要采集的 CloudWatch 指标组（AWS/S3 请求指标）
- 静态定义图表分组（显示名称、单位、序列）
"""

from .definitions import (
    MetricSpec,
    MetricsGroup,
    S3_REQUEST_METRICS_GROUPS,
    NAMESPACE,
)
from .graphs import Graph, GraphMetric, graph_definition

__all__ = [
    'MetricSpec',
    'MetricsGroup',
    'S3_REQUEST_METRICS_GROUPS',
    'NAMESPACE',
    'Graph',
    'GraphMetric',
    'graph_definition',
]
