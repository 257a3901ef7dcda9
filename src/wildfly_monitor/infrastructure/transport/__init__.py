# -*- coding: utf-8 -*-
"""
Transport Infrastructure 패키지.

알림 전송 클라이언트를 담당합니다:
- Slack webhook 클라이언트
"""

from wildfly_monitor.infrastructure.transport.slack_client import SlackWebhookClient

__all__ = [
    "SlackWebhookClient",
]
