# -*- coding: utf-8 -*-
"""
配置验证模块

功能：
- 验证配置文件的完整性和正确性
- 检查必填字段
- 验证字段格式和取值范围
"""

from typing import Tuple

from .loader import PluginConfig

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def validate_config(config: PluginConfig) -> Tuple[bool, str]:
    """
    验证配置对象

    Args:
        config: 配置对象

    Returns:
        (is_valid, error_message) 元组，验证通过时 error_message 为空字符串
    """
    if not config.bucket_name:
        return False, "bucket_name 不能为空"

    if not config.filter_id:
        return False, "filter_id 不能为空"

    # 凭证必须成对出现
    if bool(config.access_key) != bool(config.secret_key):
        return False, "access_key 和 secret_key 必须同时提供或同时为空"

    if not 1 <= config.metrics_port <= 65535:
        return False, f"metrics_port 必须在 1-65535 之间: {config.metrics_port}"

    if config.log_level not in VALID_LOG_LEVELS:
        return False, f"log_level 必须是以下值之一: {', '.join(VALID_LOG_LEVELS)}"

    return True, ''
