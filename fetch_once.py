#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
单次采集并输出 Mackerel 插件格式

功能：
1. 加载配置并采集一次 S3 请求指标
2. 输出 "<prefix>.<graph>.<metric>\t<value>\t<epoch>"
3. 设置 MACKEREL_AGENT_PLUGIN_META 时输出图表定义

用法：
    python3 fetch_once.py
    MACKEREL_AGENT_PLUGIN_META=1 python3 fetch_once.py
"""

import logging
import os
import sys

from config.loader import load_plugin_config, resolve_config_path
from config.validator import validate_config
from collector.mackerel import META_ENV, format_meta, format_values
from collector.plugin import create_plugin
from provider.errors import SetupFailureError

logger = logging.getLogger(__name__)


def run(plugin) -> None:
    """采集一次并输出到标准输出"""
    prefix = plugin.metric_key_prefix()
    graphs = plugin.graph_definition()

    if os.environ.get(META_ENV):
        print(format_meta(prefix, graphs))
        return

    stats = plugin.fetch_metrics()
    for line in format_values(prefix, stats, graphs):
        print(line)


def main():
    try:
        config = load_plugin_config(resolve_config_path())
    except Exception as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"加载配置失败: {e}")
        sys.exit(1)

    # 日志输出到 stderr，stdout 只输出指标
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    is_valid, error_message = validate_config(config)
    if not is_valid:
        logger.error(f"配置验证失败: {error_message}")
        sys.exit(1)

    try:
        plugin = create_plugin(config)
    except SetupFailureError as e:
        logger.error(f"初始化失败: {e}")
        sys.exit(1)

    run(plugin)


if __name__ == '__main__':
    main()
