# -*- coding: utf-8 -*-
"""
Prometheus Collector 实现模块

功能：
- 调用 S3ExtendedPlugin 执行一次采集
- 更新 Prometheus 指标
- 提供指标数据供 /metrics 端点使用
"""

import time
import logging
from typing import Dict
from prometheus_client import CollectorRegistry, Gauge, Counter, Histogram, generate_latest

from collector.group_result import GroupStatus
from collector.plugin import S3ExtendedPlugin

logger = logging.getLogger(__name__)


class S3MetricsCollector:
    """
    S3 指标收集器

    功能：
    - 每次 collect() 同步执行一次采集
    - 将采集结果写入 Gauge（每次先清空，未采集到的指标不会残留）
    - 统计失败的指标组
    """

    def __init__(self, plugin: S3ExtendedPlugin, registry: CollectorRegistry = None):
        """
        初始化收集器

        Args:
            plugin: S3 指标采集插件
            registry: Prometheus registry（默认新建，避免重复注册）
        """
        self.plugin = plugin
        self.registry = registry or CollectorRegistry()

        # S3 请求指标
        self.metric_value = Gauge(
            's3_extended_metric',
            'S3 request metric value from CloudWatch',
            ['prefix', 'bucket_name', 'filter_id', 'graph', 'metric'],
            registry=self.registry
        )

        # Exporter 自身指标
        self.fetch_errors_total = Counter(
            's3_extended_fetch_errors_total',
            'Total number of metric group fetch errors',
            ['metric_name', 'error_type'],
            registry=self.registry
        )

        self.fetch_duration_seconds = Histogram(
            's3_extended_fetch_duration_seconds',
            'Duration of S3 metrics collection in seconds',
            buckets=[0.1, 0.5, 1.0, 5.0, 10.0, 30.0, 60.0],
            registry=self.registry
        )

        # 指标名 -> 图表 key
        self._graph_of: Dict[str, str] = {}
        for key, graph in plugin.graph_definition().items():
            for metric in graph.metrics:
                self._graph_of[metric.name] = key

    def collect(self) -> Dict[str, float]:
        """
        执行一次采集并更新指标

        Returns:
            本次采集到的 {显示名: 数值}
        """
        start_time = time.time()
        stats = self.plugin.fetch_metrics()
        self.fetch_duration_seconds.observe(time.time() - start_time)

        self.metric_value.clear()
        for name, value in stats.items():
            self.metric_value.labels(
                prefix=self.plugin.metric_key_prefix(),
                bucket_name=self.plugin.bucket_name,
                filter_id=self.plugin.filter_id,
                graph=self._graph_of.get(name, ''),
                metric=name
            ).set(value)

        for result in self.plugin.last_results:
            if result.is_success():
                continue
            error_type = 'no_data' if result.status == GroupStatus.NO_DATA else 'api_error'
            self.fetch_errors_total.labels(
                metric_name=result.metric_name,
                error_type=error_type
            ).inc()

        return stats

    def get_metrics(self) -> str:
        """
        获取 Prometheus 格式的指标数据

        Returns:
            Prometheus text format 字符串
        """
        return generate_latest(self.registry).decode('utf-8')
