# -*- coding: utf-8 -*-
"""
CloudWatch 模块

功能：
- 封装 CloudWatch GetMetricStatistics 调用
- 作为 MetricsProvider 的 AWS 实现
"""

from .client import CloudWatchClient

__all__ = ['CloudWatchClient']
