# -*- coding: utf-8 -*-
"""
Provider 接口定义

功能：
- 定义 MetricsProvider 接口
- 采集流程（选择最新数据点、提取统计值、派生指标）只依赖该接口，
  测试时可以替换为 Mock，不需要真实的网络依赖
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Sequence

from .sample import Sample


class MetricsProvider(ABC):
    """
    指标查询接口

    只有一个能力：按指标名、维度和时间窗口查询数据点
    """

    @abstractmethod
    def query_samples(
        self,
        namespace: str,
        metric_name: str,
        statistics: Sequence[str],
        dimensions: Dict[str, str],
        start_time: datetime,
        end_time: datetime,
        period: int
    ) -> List[Sample]:
        """
        查询指标数据点

        Args:
            namespace: 命名空间（如 'AWS/S3'）
            metric_name: 指标名称（如 'GetRequests'）
            statistics: 统计方法列表（'Average', 'Sum', 'Maximum', 'Minimum'）
            dimensions: 维度字典（如 {'BucketName': ..., 'FilterId': ...}）
            start_time: 开始时间
            end_time: 结束时间
            period: 统计周期（秒）

        Returns:
            数据点列表（可能为空）

        Raises:
            查询失败时抛出异常（由调用方决定如何处理）
        """
        pass
