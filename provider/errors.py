# -*- coding: utf-8 -*-
"""
采集错误类型

- NoDataError: 某个指标组没有返回数据点（局部错误，记录日志后跳过该组）
- SetupFailureError: CloudWatch 客户端初始化失败（致命错误，采集开始前直接退出）
"""


class NoDataError(Exception):
    """指标组没有返回任何数据点"""

    def __init__(self, metric_name: str):
        self.metric_name = metric_name
        super().__init__(f"fetched no datapoints: {metric_name}")


class SetupFailureError(Exception):
    """Provider 客户端初始化失败（凭证或配置错误）"""
