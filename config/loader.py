# -*- coding: utf-8 -*-
"""
插件配置加载模块

功能：
- 从 YAML 文件加载插件配置
- 定义清晰的数据结构（PluginConfig）
- 读取失败时给出明确错误
"""

import yaml
import os
from dataclasses import dataclass

DEFAULT_CONFIG_PATH = 'config/s3-extended.yaml'
CONFIG_PATH_ENV = 'S3_EXTENDED_CONFIG'


@dataclass
class PluginConfig:
    """插件配置的根数据结构"""
    bucket_name: str                        # S3 桶名称
    filter_id: str                          # 请求指标过滤器 ID
    access_key: str = ''                    # AWS Access Key（为空时使用默认凭证链）
    secret_key: str = ''                    # AWS Secret Key
    region: str = ''                        # AWS 区域（为空时使用默认配置）
    metric_key_prefix: str = 's3-extended'  # 指标前缀
    log_level: str = 'INFO'                 # 日志级别
    metrics_port: int = 8000                # HTTP 端口


def resolve_config_path() -> str:
    """获取配置文件路径（环境变量优先）"""
    return os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH


def load_plugin_config(config_path: str) -> PluginConfig:
    """
    从 YAML 文件加载插件配置

    Args:
        config_path: 配置文件路径（如 'config/s3-extended.yaml'）

    Returns:
        PluginConfig 对象

    Raises:
        FileNotFoundError: 文件不存在
        yaml.YAMLError: YAML 解析错误
        ValueError: 配置格式错误
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"配置文件不存在: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            content = f.read()
    except IOError as e:
        raise IOError(f"无法读取配置文件 {config_path}: {e}")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"YAML 解析失败: {e}")

    if data is None:
        raise ValueError("配置文件为空")
    if not isinstance(data, dict):
        raise ValueError("配置格式错误: 根节点必须是字典类型")

    aws_data = data.get('aws') or {}
    if not isinstance(aws_data, dict):
        raise ValueError("配置格式错误: 'aws' 必须是字典类型")

    s3_data = data.get('s3')
    if not isinstance(s3_data, dict):
        raise ValueError("配置格式错误: 缺少 's3' 或 's3' 不是字典类型")

    for field in ['bucket_name', 'filter_id']:
        if field not in s3_data:
            raise ValueError(f"配置格式错误: 's3' 缺少必填字段: {field}")

    metrics_port = data.get('metrics_port', 8000)
    if not isinstance(metrics_port, int) or isinstance(metrics_port, bool):
        raise ValueError("metrics_port 必须是整数")

    return PluginConfig(
        bucket_name=_as_str(s3_data['bucket_name'], 's3.bucket_name'),
        filter_id=_as_str(s3_data['filter_id'], 's3.filter_id'),
        access_key=_as_str(aws_data.get('access_key'), 'aws.access_key'),
        secret_key=_as_str(aws_data.get('secret_key'), 'aws.secret_key'),
        region=_as_str(aws_data.get('region'), 'aws.region'),
        metric_key_prefix=_as_str(data.get('metric_key_prefix', 's3-extended'), 'metric_key_prefix'),
        log_level=_as_str(data.get('log_level', 'INFO'), 'log_level').upper(),
        metrics_port=metrics_port
    )


def _as_str(value, name: str) -> str:
    """将可选字段转换为字符串（None 视为空字符串）"""
    if value is None:
        return ''
    if not isinstance(value, (str, int)) or isinstance(value, bool):
        raise ValueError(f"{name} 必须是字符串")
    return str(value).strip()
