# -*- coding: utf-8 -*-
"""
AWS CloudWatch 指标查询模块

功能：
- 创建 CloudWatch 客户端（指定凭证或默认凭证链）
- 构建 GetMetricStatistics 请求
- 将响应中的 Datapoints 转换为 Sample 列表
"""

import boto3
import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence
from botocore.exceptions import ClientError, BotoCoreError

from provider.errors import SetupFailureError
from provider.interfaces import MetricsProvider
from provider.sample import Sample

logger = logging.getLogger(__name__)


class CloudWatchClient(MetricsProvider):
    """
    CloudWatch 指标查询客户端

    功能：
    - 调用 CloudWatch API 获取指标数据点
    - 不做重试，不做缓存，失败直接抛给调用方
    """

    def __init__(self, region: Optional[str] = None, access_key: Optional[str] = None,
                 secret_key: Optional[str] = None):
        """
        初始化 CloudWatch 客户端

        Args:
            region: AWS 区域（可选，为空时使用默认配置）
            access_key: AWS Access Key（可选，与 secret_key 同时提供时使用指定凭证）
            secret_key: AWS Secret Key（可选）

        Raises:
            SetupFailureError: 会话或客户端创建失败
        """
        self.region = region or None
        try:
            if access_key and secret_key:
                session = boto3.Session(
                    aws_access_key_id=access_key,
                    aws_secret_access_key=secret_key
                )
                logger.debug(f"CloudWatch 客户端使用指定凭证，区域: {self.region or '默认'}")
            else:
                session = boto3.Session()
                logger.debug(f"CloudWatch 客户端使用默认凭证链，区域: {self.region or '默认'}")
            self.client = session.client('cloudwatch', region_name=self.region)
        except (BotoCoreError, ValueError) as e:
            logger.error(f"初始化 CloudWatch 客户端失败: {e}")
            raise SetupFailureError(f"初始化 CloudWatch 客户端失败: {e}") from e

    def query_samples(
        self,
        namespace: str,
        metric_name: str,
        statistics: Sequence[str],
        dimensions: Dict[str, str],
        start_time: datetime,
        end_time: datetime,
        period: int
    ) -> List[Sample]:
        """
        获取 CloudWatch 指标数据点

        Args:
            namespace: 命名空间（如 'AWS/S3'）
            metric_name: 指标名称
            statistics: 统计方法列表
            dimensions: 维度字典
            start_time: 开始时间
            end_time: 结束时间
            period: 统计周期（秒）

        Returns:
            Sample 列表，无数据时返回空列表
        """
        # 构建维度列表
        dimension_list = [
            {'Name': k, 'Value': v}
            for k, v in dimensions.items()
        ]

        try:
            response = self.client.get_metric_statistics(
                Namespace=namespace,
                MetricName=metric_name,
                Dimensions=dimension_list,
                StartTime=start_time,
                EndTime=end_time,
                Period=period,
                Statistics=list(statistics)
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            error_message = e.response.get("Error", {}).get("Message")
            logger.error(f"CloudWatch API 调用异常 {namespace}/{metric_name}: {error_code} - {error_message}")
            raise
        except BotoCoreError as e:
            logger.error(f"AWS SDK 错误 {namespace}/{metric_name}: {e}")
            raise

        datapoints = response.get('Datapoints', [])
        logger.debug(f"CloudWatch 返回 {len(datapoints)} 个数据点: {namespace}/{metric_name} (dimensions: {dimensions})")
        return [Sample.from_datapoint(dp) for dp in datapoints]
