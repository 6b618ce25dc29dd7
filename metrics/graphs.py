# -*- coding: utf-8 -*-
"""
图表分组定义

功能：
- 返回静态的图表元数据（标签、单位、序列）
- 标签 = 前缀（每个单词首字母大写）+ 固定后缀
"""

import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

_WORD_START = re.compile(r'(^|[^\w])(\w)')


@dataclass(frozen=True)
class GraphMetric:
    """图表中的一个序列"""
    name: str
    label: str
    stacked: bool = False


@dataclass(frozen=True)
class Graph:
    """一个图表分组"""
    label: str
    unit: str
    metrics: Tuple[GraphMetric, ...]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def title_prefix(prefix: str) -> str:
    """
    将前缀中每个单词的首字母大写，其余字符保持不变

    单词由字母、数字、下划线组成，例如 "s3-extended" -> "S3-Extended"
    """
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), prefix)


def graph_definition(prefix: str) -> Dict[str, Graph]:
    """
    获取图表定义

    Args:
        prefix: 指标前缀（如 's3-extended'）

    Returns:
        {graph_key: Graph} 字典，每次调用返回相同内容
    """
    label_prefix = title_prefix(prefix)

    return {
        'requests': Graph(
            label=label_prefix + ' Requests',
            unit='integer',
            metrics=(
                GraphMetric('GetRequests', 'Get', stacked=True),
                GraphMetric('PutRequests', 'Put', stacked=True),
                GraphMetric('DeleteRequests', 'Delete', stacked=True),
                GraphMetric('HeadRequests', 'Head', stacked=True),
                GraphMetric('PostRequests', 'Post', stacked=True),
                GraphMetric('ListRequests', 'List', stacked=True),
            )
        ),
        'errors': Graph(
            label=label_prefix + ' Errors',
            unit='integer',
            metrics=(
                GraphMetric('4xxErrors', '4xx'),
                GraphMetric('5xxErrors', '5xx'),
            )
        ),
        'bytes': Graph(
            label=label_prefix + ' Bytes',
            unit='bytes',
            metrics=(
                GraphMetric('BytesDownloaded', 'Downloaded'),
                GraphMetric('BytesUploaded', 'Uploaded'),
            )
        ),
        'latency': Graph(
            label=label_prefix + ' TotalRequestLatency',
            unit='float',
            metrics=(
                GraphMetric('TotalRequestLatencyAvg', 'Average'),
                GraphMetric('TotalRequestLatencyMax', 'Maximum'),
                GraphMetric('TotalRequestLatencyMin', 'Minimum'),
            )
        ),
    }
