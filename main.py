#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
S3 Extended Exporter 主程序入口

功能：
- 启动 Flask HTTP 服务器
- 暴露 /metrics 端点供 Prometheus 抓取（每次抓取同步采集一次）
- 暴露 /graphs 端点返回图表定义
- 暴露 /health 健康检查端点
"""

from flask import Flask, jsonify
from prometheus_client import CONTENT_TYPE_LATEST
import logging
import sys
from typing import Optional

from config.loader import load_plugin_config, resolve_config_path
from config.validator import validate_config
from collector.collector import S3MetricsCollector
from collector.plugin import create_plugin
from provider.errors import SetupFailureError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)

# 创建 Flask 应用
app = Flask(__name__)

# 全局指标收集器（在 main 函数中初始化）
metrics_collector: Optional[S3MetricsCollector] = None


@app.route('/metrics')
def metrics():
    """
    Prometheus metrics 端点

    每次请求执行一次采集，返回 Prometheus text format
    """
    if metrics_collector is None:
        # 如果收集器未初始化，返回空指标
        return "# Exporter not initialized\n", 200, {'Content-Type': CONTENT_TYPE_LATEST}

    metrics_collector.collect()
    return metrics_collector.get_metrics(), 200, {'Content-Type': CONTENT_TYPE_LATEST}


@app.route('/graphs')
def graphs():
    """
    图表定义端点

    返回 JSON 格式的图表定义
    """
    if metrics_collector is None:
        return jsonify({'error': 'Exporter 未初始化'}), 503

    plugin = metrics_collector.plugin
    return jsonify({
        'prefix': plugin.metric_key_prefix(),
        'graphs': {key: graph.to_dict() for key, graph in plugin.graph_definition().items()}
    }), 200


@app.route('/health')
def health():
    """
    健康检查端点

    返回 exporter 的健康状态
    """
    status = {'status': 'healthy' if metrics_collector is not None else 'initializing'}

    if metrics_collector is not None:
        plugin = metrics_collector.plugin
        status['bucket_name'] = plugin.bucket_name
        status['filter_id'] = plugin.filter_id
        status['last_results'] = {
            r.metric_name: r.status.value for r in plugin.last_results
        }

    return status, 200


def main():
    """
    主函数：启动 Flask 服务器

    功能：
    1. 加载配置文件
    2. 初始化 CloudWatch 客户端（失败直接退出）
    3. 启动 HTTP 服务器
    """
    config_path = resolve_config_path()

    try:
        config = load_plugin_config(config_path)
    except FileNotFoundError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"配置文件不存在: {e}")
        sys.exit(1)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(f"加载配置失败: {e}")
        sys.exit(1)

    # 配置日志
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO), format=LOG_FORMAT)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)  # 减少 Flask 日志
    logging.getLogger('botocore').setLevel(logging.WARNING)

    is_valid, error_message = validate_config(config)
    if not is_valid:
        logger.error(f"配置验证失败: {error_message}")
        sys.exit(1)

    logger.info("Starting S3 Extended Exporter...")
    logger.info(f"配置文件: {config_path}")
    logger.info(f"bucket_name: {config.bucket_name}, filter_id: {config.filter_id}, "
                f"region: {config.region or '默认'}")

    try:
        plugin = create_plugin(config)
    except SetupFailureError as e:
        logger.error(f"初始化失败: {e}")
        sys.exit(1)

    global metrics_collector
    metrics_collector = S3MetricsCollector(plugin)

    port = config.metrics_port
    logger.info(f"Starting HTTP server on port {port}")
    print(f"\n{'=' * 60}")
    print(f"Exporter 已启动")
    print(f"访问 http://localhost:{port}/metrics 查看指标")
    print(f"访问 http://localhost:{port}/graphs 查看图表定义")
    print(f"访问 http://localhost:{port}/health 查看健康状态")
    print(f"{'=' * 60}\n")
    app.run(host='0.0.0.0', port=port, debug=False)


if __name__ == '__main__':
    main()
