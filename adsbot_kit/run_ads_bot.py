#!/usr/bin/env python
import argparse
import asyncio
import logging

from adsbot_kit import akit_config
from adsbot_kit.core import akit_logs, akit_shutdown
from adsbot_kit.integrations.fi_discord_ads import IntegrationDiscordAds

logger = logging.getLogger("run_ads_bot")


async def ads_bot_main_loop(config: akit_config.AdsBotConfig) -> int:
    akit_shutdown.setup_signals()
    discord_bot = IntegrationDiscordAds(config)
    if discord_bot.problems_other:
        for problem in discord_bot.problems_other:
            logger.error("Cannot start: %s", problem)
        return 1

    await discord_bot.start_reactive()
    if not discord_bot.reactive_task:
        return 1
    akit_shutdown.give_task_to_cancel("discord", discord_bot.reactive_task)
    try:
        while not akit_shutdown.shutdown_event.is_set():
            if discord_bot.reactive_task.done():
                logger.error("Discord client stopped")
                return 1
            await akit_shutdown.wait(5.0)
    finally:
        akit_shutdown.take_away_task_to_cancel("discord")
        await discord_bot.close()
        logger.info("ads bot exit")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Discord bot for Meta ad sets")
    parser.add_argument("--env-file", default=None, help="Path to .env, default is to search from the current directory")
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    args = parser.parse_args()

    akit_logs.setup_logger(logging.DEBUG if args.debug else logging.INFO)
    config = akit_config.load_config(args.env_file)
    raise SystemExit(asyncio.run(ads_bot_main_loop(config)))


if __name__ == "__main__":
    main()
