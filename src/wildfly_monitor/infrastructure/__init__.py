# -*- coding: utf-8 -*-
"""
Infrastructure Layer 패키지.

외부 시스템과의 통신을 담당합니다:
- transport: Slack webhook 알림 전송
"""

from wildfly_monitor.infrastructure.transport.slack_client import SlackWebhookClient

__all__ = [
    "SlackWebhookClient",
]
