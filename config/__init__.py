# -*- coding: utf-8 -*-
"""
配置模块

功能：
- 从 YAML 文件加载插件配置
- 验证配置的完整性和正确性
"""

from .loader import PluginConfig, load_plugin_config, resolve_config_path, DEFAULT_CONFIG_PATH, CONFIG_PATH_ENV
from .validator import validate_config
