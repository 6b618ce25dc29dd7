# -*- coding: utf-8 -*-
"""
CloudWatch 指标组定义

功能：
- 一个 CloudWatch 指标名对应 N 个输出指标（显示名 + 统计方法）
- 指标组列表在导入时构建，不可变，进程生命周期内无需重新初始化
"""

from dataclasses import dataclass
from typing import Tuple

NAMESPACE = 'AWS/S3'

# 统计方法
STATISTIC_AVERAGE = 'Average'
STATISTIC_SUM = 'Sum'
STATISTIC_MAXIMUM = 'Maximum'
STATISTIC_MINIMUM = 'Minimum'

# 查询参数：最近 3 分钟，统计周期 600 秒
LOOKBACK_SECONDS = 180
PERIOD_SECONDS = 600

# 维度名称
DIMENSION_BUCKET_NAME = 'BucketName'
DIMENSION_FILTER_ID = 'FilterId'


@dataclass(frozen=True)
class MetricSpec:
    """单个输出指标：显示名 + 统计方法"""
    name: str        # 输出名称，如 "TotalRequestLatencyAvg"
    statistic: str   # 统计方法，如 "Average"


@dataclass(frozen=True)
class MetricsGroup:
    """一个 CloudWatch 指标名及其对应的输出指标"""
    cloudwatch_name: str             # CloudWatch 指标名，如 "TotalRequestLatency"
    metrics: Tuple[MetricSpec, ...]

    @property
    def statistics(self) -> Tuple[str, ...]:
        """查询时需要请求的统计方法（保持配置顺序）"""
        return tuple(m.statistic for m in self.metrics)

    def __str__(self) -> str:
        return self.cloudwatch_name


def _sum_group(name: str) -> MetricsGroup:
    return MetricsGroup(cloudwatch_name=name, metrics=(MetricSpec(name, STATISTIC_SUM),))


S3_REQUEST_METRICS_GROUPS: Tuple[MetricsGroup, ...] = (
    _sum_group('GetRequests'),
    _sum_group('PutRequests'),
    _sum_group('DeleteRequests'),
    _sum_group('HeadRequests'),
    _sum_group('PostRequests'),
    _sum_group('ListRequests'),
    _sum_group('4xxErrors'),
    _sum_group('5xxErrors'),
    _sum_group('BytesDownloaded'),
    _sum_group('BytesUploaded'),
    MetricsGroup(cloudwatch_name='TotalRequestLatency', metrics=(
        MetricSpec('TotalRequestLatencyAvg', STATISTIC_AVERAGE),
        MetricSpec('TotalRequestLatencyMax', STATISTIC_MAXIMUM),
        MetricSpec('TotalRequestLatencyMin', STATISTIC_MINIMUM),
    )),
)
