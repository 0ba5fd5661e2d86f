"""
SIGINT/SIGTERM for the bot process. The first signal sets shutdown_event and
cancels the registered tasks, the main loop then closes the Discord
connection. A second signal exits right away.
"""

import asyncio
import logging
import signal
import sys
from typing import Dict, Optional

logger = logging.getLogger("shutdown")

shutdown_event = asyncio.Event()

_cancel_on_shutdown: Dict[str, asyncio.Task] = {}


def give_task_to_cancel(name: str, task: asyncio.Task) -> None:
    _cancel_on_shutdown[name] = task


def take_away_task_to_cancel(name: str) -> Optional[asyncio.Task]:
    return _cancel_on_shutdown.pop(name, None)


def spiral_down_now(exit_on_repeat: bool = True) -> None:
    if shutdown_event.is_set():
        if exit_on_repeat:
            logger.info("second signal, exit(1)")
            sys.exit(1)
        return
    shutdown_event.set()
    for name, task in list(_cancel_on_shutdown.items()):
        if not task.done():
            logger.info("cancel %s", name)
            task.cancel()


def setup_signals() -> None:
    loop = asyncio.get_running_loop()

    def on_signal(signame: str):
        logger.info("✋ Got %s", signame)
        spiral_down_now()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, on_signal, sig.name)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(sig, lambda signum, frame: on_signal(signal.Signals(signum).name))


async def wait(timeout: float) -> bool:
    """True if shutdown was requested before the timeout ran out."""
    try:
        await asyncio.wait_for(shutdown_event.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        return False
    return True
