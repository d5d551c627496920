from sideslacker.agent.extremities.name_directory import NameDirectory
from sideslacker.agent.extremities.name_directory import load_name_directory
from sideslacker.agent.extremities.notification import LoggingNotificationChannel
from sideslacker.agent.extremities.notification import NotificationChannel
from sideslacker.agent.extremities.notification import SlackWebhookChannel
from sideslacker.agent.extremities.notification import build_notification_channel

__all__ = [
    "LoggingNotificationChannel",
    "NameDirectory",
    "NotificationChannel",
    "SlackWebhookChannel",
    "build_notification_channel",
    "load_name_directory",
]
