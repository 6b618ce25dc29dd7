# -*- coding: utf-8 -*-
"""
Mackerel 插件输出格式

功能：
- 指标值输出: "<prefix>.<graph>.<metric>\t<value>\t<epoch>"
- 图表定义输出: "# mackerel-agent-plugin" + JSON
"""

import json
import time
from typing import Dict, List, Optional

from metrics.graphs import Graph

META_ENV = 'MACKEREL_AGENT_PLUGIN_META'
META_HEADER = '# mackerel-agent-plugin'


def format_values(prefix: str, stats: Dict[str, float], graphs: Dict[str, Graph],
                  now: Optional[int] = None) -> List[str]:
    """
    生成指标值输出行

    只输出图表定义中存在、且本次采集到的指标

    Args:
        prefix: 指标 key 前缀
        stats: 采集结果
        graphs: 图表定义
        now: epoch 秒（默认当前时间）

    Returns:
        输出行列表
    """
    if now is None:
        now = int(time.time())

    lines = []
    for key, graph in graphs.items():
        for metric in graph.metrics:
            if metric.name not in stats:
                continue
            lines.append(f"{prefix}.{key}.{metric.name}\t{stats[metric.name]:f}\t{now}")
    return lines


def format_meta(prefix: str, graphs: Dict[str, Graph]) -> str:
    """
    生成图表定义输出

    Returns:
        "# mackerel-agent-plugin\n{json}"
    """
    payload = {
        'graphs': {
            f"{prefix}.{key}": graph.to_dict()
            for key, graph in graphs.items()
        }
    }
    return META_HEADER + '\n' + json.dumps(payload)
