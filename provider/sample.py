# -*- coding: utf-8 -*-
"""
数据点结构

功能：
- 表示 Provider 返回的单个带时间戳的数据点
- 每个数据点包含请求的各个统计值（Average / Sum / Maximum / Minimum）
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Sample:
    """单个数据点"""
    timestamp: datetime
    average: Optional[float] = None
    sum: Optional[float] = None
    maximum: Optional[float] = None
    minimum: Optional[float] = None
    unit: str = ''

    @classmethod
    def from_datapoint(cls, datapoint: Dict[str, Any]) -> 'Sample':
        """
        从 CloudWatch GetMetricStatistics 返回的 Datapoint 字典构建

        Args:
            datapoint: 形如 {'Timestamp': ..., 'Sum': 1.0, 'Unit': 'Count'} 的字典

        Returns:
            Sample 对象（未请求的统计值为 None）
        """
        return cls(
            timestamp=datapoint['Timestamp'],
            average=datapoint.get('Average'),
            sum=datapoint.get('Sum'),
            maximum=datapoint.get('Maximum'),
            minimum=datapoint.get('Minimum'),
            unit=datapoint.get('Unit', '')
        )
