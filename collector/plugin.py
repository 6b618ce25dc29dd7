# -*- coding: utf-8 -*-
"""
S3 请求指标采集模块

功能：
- 按顺序查询每个指标组（单线程，同步）
- 单个指标组失败只记录日志，不影响其他指标组
- 汇总结果并计算派生指标
- 提供图表定义
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional, Sequence

from cloudwatch.client import CloudWatchClient
from collector.group_result import GroupResult, GroupStatus
from collector.transform import select_latest_sample, merge_stats_from_sample, transform_metrics
from metrics.definitions import (
    MetricsGroup,
    S3_REQUEST_METRICS_GROUPS,
    NAMESPACE,
    LOOKBACK_SECONDS,
    PERIOD_SECONDS,
    DIMENSION_BUCKET_NAME,
    DIMENSION_FILTER_ID,
)
from metrics.graphs import Graph, graph_definition
from provider.errors import NoDataError
from provider.interfaces import MetricsProvider

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = 's3-extended'


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class S3ExtendedPlugin:
    """
    S3 请求指标采集插件

    功能：
    - fetch_metrics(): 返回 {显示名: 数值}，永远不会抛出异常
    - graph_definition(): 返回静态图表定义
    """

    def __init__(
        self,
        provider: MetricsProvider,
        bucket_name: str,
        filter_id: str,
        prefix: str = DEFAULT_PREFIX,
        metrics_groups: Sequence[MetricsGroup] = S3_REQUEST_METRICS_GROUPS,
        now_func: Optional[Callable[[], datetime]] = None
    ):
        """
        初始化插件

        Args:
            provider: 指标 Provider（如 CloudWatchClient）
            bucket_name: S3 桶名称（BucketName 维度）
            filter_id: 请求指标过滤器 ID（FilterId 维度）
            prefix: 指标前缀
            metrics_groups: 指标组配置
            now_func: 获取当前时间的函数（测试时可替换）
        """
        self.provider = provider
        self.bucket_name = bucket_name
        self.filter_id = filter_id
        self.prefix = prefix
        self.metrics_groups = tuple(metrics_groups)
        self.now_func = now_func or _utcnow

        # 最近一次采集的各指标组结果
        self.last_results: List[GroupResult] = []

    def metric_key_prefix(self) -> str:
        """指标 key 前缀，未配置时使用默认值"""
        return self.prefix or DEFAULT_PREFIX

    def _dimensions(self) -> Dict[str, str]:
        return {
            DIMENSION_BUCKET_NAME: self.bucket_name,
            DIMENSION_FILTER_ID: self.filter_id,
        }

    def _collect_group(self, group: MetricsGroup, now: datetime) -> GroupResult:
        """
        采集单个指标组

        Returns:
            GroupResult，失败时 status 为 no_data 或 failed
        """
        try:
            samples = self.provider.query_samples(
                namespace=NAMESPACE,
                metric_name=group.cloudwatch_name,
                statistics=group.statistics,
                dimensions=self._dimensions(),
                start_time=now - timedelta(seconds=LOOKBACK_SECONDS),
                end_time=now,
                period=PERIOD_SECONDS
            )
            latest = select_latest_sample(samples, group.cloudwatch_name)
        except NoDataError as e:
            logger.warning(f"{group}: {e}")
            return GroupResult(metric_name=group.cloudwatch_name, status=GroupStatus.NO_DATA, error=str(e))
        except Exception as e:
            logger.error(f"{group}: {e}")
            return GroupResult(metric_name=group.cloudwatch_name, status=GroupStatus.FAILED, error=str(e))

        values = merge_stats_from_sample({}, latest, group)
        logger.debug(f"{group}: {values}")
        return GroupResult(metric_name=group.cloudwatch_name, status=GroupStatus.SUCCESS, values=values)

    def fetch_metrics(self) -> Dict[str, float]:
        """
        采集所有指标组

        Returns:
            {显示名: 数值} 字典，部分指标组失败时只包含成功的部分
        """
        now = self.now_func()
        stats: Dict[str, float] = {}
        results: List[GroupResult] = []

        for group in self.metrics_groups:
            result = self._collect_group(group, now)
            results.append(result)
            if result.is_success():
                stats.update(result.values)

        self.last_results = results

        failed = sum(1 for r in results if not r.is_success())
        logger.info(f"S3 指标采集完成: bucket={self.bucket_name}, filter_id={self.filter_id}, "
                    f"指标组={len(results)}, 失败={failed}")
        return transform_metrics(stats)

    def graph_definition(self) -> Dict[str, Graph]:
        """获取图表定义"""
        return graph_definition(self.prefix)


def create_plugin(config) -> S3ExtendedPlugin:
    """
    根据配置创建插件（包含 CloudWatch 客户端）

    Args:
        config: PluginConfig 对象

    Returns:
        S3ExtendedPlugin 对象

    Raises:
        SetupFailureError: CloudWatch 客户端初始化失败
    """
    client = CloudWatchClient(
        region=config.region,
        access_key=config.access_key,
        secret_key=config.secret_key
    )
    return S3ExtendedPlugin(
        provider=client,
        bucket_name=config.bucket_name,
        filter_id=config.filter_id,
        prefix=config.metric_key_prefix
    )
