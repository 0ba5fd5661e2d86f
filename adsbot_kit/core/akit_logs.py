import sys
import logging

LEVEL_TAGS = {
    logging.DEBUG: "[DEBUG]",
    logging.INFO: "[INFO]",
    logging.WARNING: "[WARN] ⚠️ ",
    logging.ERROR: "[ERROR] 🛑",
    logging.CRITICAL: "[ERROR] 🛑",
}

# httpx logs every request, discord.py every gateway heartbeat
QUIET_LOGGERS = ["httpx", "httpcore", "discord.gateway", "discord.client", "discord.http"]


class BotLogHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.setFormatter(logging.Formatter('%(asctime)s.%(msecs)03d %(name)s !!LEVEL!! %(message)s', datefmt='%Y%m%d %H:%M:%S'))

    def emit(self, record):
        try:
            line = self.format(record).replace("!!LEVEL!!", LEVEL_TAGS.get(record.levelno, "[INFO]"), 1)
            sys.stderr.write(line + "\n")
            sys.stderr.flush()
        except Exception:
            self.handleError(record)


def setup_logger(level: int = logging.INFO):
    """
    Everything goes to stderr through the root logger. Calling it again only
    changes the level.
    """
    root = logging.getLogger()
    if any(isinstance(h, BotLogHandler) for h in root.handlers):
        root.setLevel(level)
        return

    # Loggers created before this point keep no handlers of their own
    for name in list(logging.Logger.manager.loggerDict.keys()):
        existing = logging.getLogger(name)
        existing.handlers = []
        existing.propagate = True

    root.handlers = [BotLogHandler()]
    root.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
