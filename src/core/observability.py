"""
Logfire setup for processes embedding the optimizer.

The engine only emits spans and logs; configuring where they go is the
host application's job, done once at startup.
"""

from typing import Optional

import logfire
from dotenv import load_dotenv

from src.core.config import Settings, settings as default_settings


def configure_observability(settings: Optional[Settings] = None, console: bool = True) -> None:
    """
    Configure logfire from settings.

    Spans are only shipped when a token is configured.

    Args:
        settings: Settings to use (defaults to the global settings)
        console: Whether logfire echoes spans to the console
    """
    load_dotenv()
    settings = settings or default_settings

    logfire.configure(
        **settings.get_logfire_settings(),
        send_to_logfire="if-token-present",
        console=None if console else False
    )
    logfire.info(
        "Observability configured",
        app=settings.app_name,
        version=settings.app_version,
        environment=settings.environment
    )
