# -*- coding: utf-8 -*-
"""
指标 Provider 模块

功能：
- 定义 MetricsProvider 接口（主流程只依赖接口，不关心具体实现）
- 定义数据点 Sample 结构
- 定义采集过程中的错误类型
"""

from .errors import NoDataError, SetupFailureError
from .interfaces import MetricsProvider
from .sample import Sample

__all__ = [
    'MetricsProvider',
    'Sample',
    'NoDataError',
    'SetupFailureError',
]
