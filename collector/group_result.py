# -*- coding: utf-8 -*-
"""
指标组采集结果数据结构

功能：
- 定义单个指标组的采集状态和原因
- 供 Exporter 统计失败次数
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from enum import Enum


class GroupStatus(Enum):
    """指标组采集状态"""
    SUCCESS = "success"    # 成功获取数据点
    NO_DATA = "no_data"    # 查询成功但没有数据点
    FAILED = "failed"      # 查询失败


@dataclass
class GroupResult:
    """指标组采集结果"""
    metric_name: str                                         # CloudWatch 指标名
    status: GroupStatus                                      # 采集状态
    values: Dict[str, float] = field(default_factory=dict)   # 提取到的值（success 时）
    error: Optional[str] = None                              # 错误信息（no_data / failed 时）

    def is_success(self) -> bool:
        """判断是否成功"""
        return self.status == GroupStatus.SUCCESS
