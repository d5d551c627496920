from __future__ import annotations

from typing import Protocol

import requests

from sideslacker.agent.extremities.name_directory import NameDirectory, load_name_directory
from sideslacker.agent.observability.log_manager import get_component_logger
from sideslacker.config.settings import get_slack_timeout_sec, get_slack_webhook_url

logger = get_component_logger("extremities.notification")


class NotificationChannel(Protocol):
    def notify(self, recipient_name: str, requester_name: str) -> bool: ...


class LoggingNotificationChannel:
    """Records the visit in the log only; used when no webhook is configured."""

    def notify(self, recipient_name: str, requester_name: str) -> bool:
        logger.info(
            "event=notification.sent channel=log recipient=%s requester=%s",
            _kv(recipient_name),
            _kv(requester_name),
        )
        return True


class SlackWebhookChannel:
    def __init__(
        self,
        webhook_url: str,
        *,
        directory: NameDirectory | None = None,
        timeout_sec: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._directory = directory or NameDirectory()
        self._timeout_sec = timeout_sec
        self._session = session or requests.Session()

    def notify(self, recipient_name: str, requester_name: str) -> bool:
        message = {"text": self.format_message(recipient_name, requester_name)}
        try:
            resp = self._session.post(self._webhook_url, json=message, timeout=self._timeout_sec)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning(
                "event=notification.failed channel=slack recipient=%s error_code=%s",
                _kv(recipient_name),
                type(exc).__name__,
            )
            return False
        logger.info(
            "event=notification.sent channel=slack recipient=%s requester=%s",
            _kv(recipient_name),
            _kv(requester_name),
        )
        return True

    def format_message(self, recipient_name: str, requester_name: str) -> str:
        handle = self._directory.mention(recipient_name)
        return f"{handle}, {requester_name} is here to see you at the front desk."


def build_notification_channel(directory: NameDirectory | None = None) -> NotificationChannel:
    webhook_url = get_slack_webhook_url()
    if not webhook_url:
        logger.info("event=notification.configured channel=log")
        return LoggingNotificationChannel()
    return SlackWebhookChannel(
        webhook_url,
        directory=directory or load_name_directory(),
        timeout_sec=get_slack_timeout_sec(),
    )


def _kv(value: str) -> str:
    return "_".join(str(value).split()) or "-"
