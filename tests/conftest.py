from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _disable_slack_webhook_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep tests off the network unless a test configures a channel explicitly.
    monkeypatch.delenv("SIDESLACKER_SLACK_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("SIDESLACKER_NAME_DIRECTORY_PATH", raising=False)
