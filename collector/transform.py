# -*- coding: utf-8 -*-
"""
数据点转换模块

功能：
- 从多个数据点中选出最新的一个
- 按指标组配置提取统计值并合并到结果字典
- 计算派生指标（success = total - error）
"""

import logging
from typing import Dict, Iterable

from metrics.definitions import (
    MetricsGroup,
    STATISTIC_AVERAGE,
    STATISTIC_SUM,
    STATISTIC_MAXIMUM,
    STATISTIC_MINIMUM,
)
from provider.errors import NoDataError
from provider.sample import Sample

logger = logging.getLogger(__name__)

# 派生指标使用的 key
TOTAL_KEY = 'TEMPORARY_invocations_total'
ERROR_KEY = 'invocations_error'
SUCCESS_KEY = 'invocations_success'

# 统计方法 -> Sample 字段
_STATISTIC_FIELDS = {
    STATISTIC_AVERAGE: 'average',
    STATISTIC_SUM: 'sum',
    STATISTIC_MAXIMUM: 'maximum',
    STATISTIC_MINIMUM: 'minimum',
}


def select_latest_sample(samples: Iterable[Sample], metric_name: str) -> Sample:
    """
    选出时间戳最大的数据点

    时间戳相同时保留先出现的数据点（只有严格更新的数据点才会替换）

    Args:
        samples: 数据点列表
        metric_name: 指标名称（用于错误信息）

    Returns:
        最新的数据点

    Raises:
        NoDataError: 没有任何数据点
    """
    latest = None
    for sample in samples:
        if latest is None or sample.timestamp > latest.timestamp:
            latest = sample

    if latest is None:
        raise NoDataError(metric_name)
    return latest


def merge_stats_from_sample(stats: Dict[str, float], sample: Sample, group: MetricsGroup) -> Dict[str, float]:
    """
    将数据点的统计值按配置写入结果字典

    未知的统计方法、或数据点中缺少的统计值直接跳过，不影响本轮采集

    Args:
        stats: 结果字典（原地修改）
        sample: 选中的数据点
        group: 指标组配置

    Returns:
        stats
    """
    for metric in group.metrics:
        field = _STATISTIC_FIELDS.get(metric.statistic)
        if field is None:
            continue
        value = getattr(sample, field)
        if value is None:
            logger.debug(f"{group.cloudwatch_name}: 数据点缺少 {metric.statistic}，跳过 {metric.name}")
            continue
        stats[metric.name] = value
    return stats


def transform_metrics(stats: Dict[str, float]) -> Dict[str, float]:
    """
    将 total 和 error 两个指标转换为 success 指标

    - total 和 error 都存在: success = total - error
    - 只有 total: success = total
    - total 总是从结果中删除

    Args:
        stats: 结果字典（原地修改）

    Returns:
        stats
    """
    if TOTAL_KEY in stats:
        total_count = stats[TOTAL_KEY]
        if ERROR_KEY in stats:
            stats[SUCCESS_KEY] = total_count - stats[ERROR_KEY]
        else:
            stats[SUCCESS_KEY] = total_count
        del stats[TOTAL_KEY]
    return stats
