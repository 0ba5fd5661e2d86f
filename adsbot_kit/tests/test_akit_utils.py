import asyncio
import logging

import pytest

from adsbot_kit.core.akit_utils import DISCORD_MESSAGE_LIMIT, fit_message, report_crash, truncate_middle


def test_truncate_middle():
    text = "a" * 50 + "b" * 50
    short = truncate_middle(text, max_length=20)
    assert short == "a" * 10 + "\n...\n" + "b" * 10
    assert truncate_middle("short", max_length=20) == "short"


def test_fit_message_short_untouched():
    assert fit_message("🤖 hi") == "🤖 hi"


def test_fit_message_long():
    lines = [f"line {i}" for i in range(1000)]
    text = "\n".join(lines)
    fitted = fit_message(text)
    assert len(fitted) <= DISCORD_MESSAGE_LIMIT
    assert fitted.startswith("line 0\n")
    assert fitted.endswith("line 999")
    assert "\n...\n" in fitted


@pytest.mark.asyncio
async def test_report_crash_logs(caplog):
    async def boom():
        raise RuntimeError("kaboom")

    task = asyncio.create_task(boom())
    await asyncio.wait([task])
    with caplog.at_level(logging.ERROR):
        report_crash(task, logging.getLogger("test_utils"))
    assert "kaboom" in caplog.text


@pytest.mark.asyncio
async def test_report_crash_ignores_cancel(caplog):
    task = asyncio.create_task(asyncio.sleep(10))
    task.cancel()
    await asyncio.wait([task])
    with caplog.at_level(logging.ERROR):
        report_crash(task, logging.getLogger("test_utils"))
    assert caplog.text == ""
