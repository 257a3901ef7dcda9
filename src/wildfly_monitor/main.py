"""
wildfly_monitor 진입점

설정 로드, 로깅 설정, 컴포넌트 배선, 폴링 루프 실행을 담당합니다.

Usage:
    wildfly-state-monitor --config config.yaml
"""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import Sequence

from wildfly_monitor import __version__
from wildfly_monitor.application.monitor.loop import EXIT_ERROR, EXIT_OK, MonitorLoop
from wildfly_monitor.application.notify.dispatcher import NotificationDispatcher
from wildfly_monitor.common.errors import ConfigError
from wildfly_monitor.common.logging import configure_logging, get_logger
from wildfly_monitor.domain.interfaces.sink import NotificationSink
from wildfly_monitor.infrastructure.transport.slack_client import SlackWebhookClient
from wildfly_monitor.interface.config.loader import ConfigLoader
from wildfly_monitor.interface.config.schema import AppConfig

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wildfly-state-monitor",
        description="WildFly 배포 마커 상태를 감시하고 Slack으로 알립니다",
    )
    parser.add_argument(
        "-c", "--config",
        default=os.getenv("CONFIG_PATH", "config.yaml"),
        help="Specify config file path",
    )
    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Output version number.",
    )
    return parser


def setup_logging(config: AppConfig) -> None:
    """설정 파일의 app 섹션으로 로깅을 재설정합니다."""
    configure_logging(
        level=config.app.log_level,
        json_output=config.app.log_format == "json",
        log_file=config.app.log_path or None,
    )


def setup_signal_handlers(loop: MonitorLoop) -> None:
    """SIGINT/SIGTERM 수신 시 루프 종료를 요청합니다."""
    def signal_handler(signum, frame):
        loop.stop()
        logger.info(f"시그널 수신: {signum}")

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)


def create_loop(
    config: AppConfig,
    sink: NotificationSink,
    loader: ConfigLoader,
) -> MonitorLoop:
    """
    설정으로 디스패처와 폴링 루프를 만듭니다.

    Raises:
        ConfigError: 알림 마커 설정이 잘못된 경우
    """
    dispatcher = NotificationDispatcher(
        sink,
        channel=config.slack.channel,
        notify_filter=loader.notify_filter(config),
        username=config.slack.username,
        icon_url=config.slack.icon_url,
    )
    return MonitorLoop(
        directory=config.wildfly.marker_directory,
        interval_seconds=config.app.duration,
        dispatcher=dispatcher,
        order_sensitive=config.app.order_sensitive,
    )


def run(argv: Sequence[str] | None = None) -> int:
    """
    모니터를 실행하고 종료 코드를 반환합니다.

    Returns:
        EXIT_OK: 시그널로 정상 종료 / EXIT_ERROR: 설정 오류 또는 관측 실패
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return EXIT_OK

    loader = ConfigLoader()
    try:
        config = loader.load_from_file(args.config)
    except ConfigError as e:
        logger.error(e.message, code=e.code.value, **e.details)
        return EXIT_ERROR

    try:
        setup_logging(config)
    except OSError as e:
        configure_logging()
        logger.error(f"Failed open log file. {config.app.log_path}", error=str(e))
        return EXIT_ERROR

    with SlackWebhookClient(
        config.slack.api_url,
        timeout_seconds=config.slack.timeout_seconds,
    ) as client:
        try:
            loop = create_loop(config, client, loader)
        except ConfigError as e:
            logger.error(e.message, code=e.code.value, **e.details)
            return EXIT_ERROR

        setup_signal_handlers(loop)

        logger.info("Start Monitoring...", directory=loop.directory, interval=loop.interval_seconds)
        exit_code = loop.run()
        logger.info("End Monitoring", exit_code=exit_code, **loop.get_stats())

    return exit_code


def main() -> None:
    """메인 진입점."""
    sys.exit(run())


if __name__ == "__main__":
    main()
