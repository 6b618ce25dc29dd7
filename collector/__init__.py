# -*- coding: utf-8 -*-
"""
S3 指标采集模块

功能：
- 按指标组查询 CloudWatch 并汇总结果
- 暴露 Prometheus 格式的指标
- 输出 Mackerel 插件格式的指标
"""

from .plugin import S3ExtendedPlugin
from .collector import S3MetricsCollector
from .group_result import GroupResult, GroupStatus
