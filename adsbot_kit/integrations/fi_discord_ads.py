import asyncio
import logging
from typing import List, Optional

import discord
from discord import app_commands
from discord.errors import DiscordException

from adsbot_kit.akit_ads_commands import AdsCommands
from adsbot_kit.akit_config import AdsBotConfig
from adsbot_kit.core import akit_utils

logger = logging.getLogger("discord_ads")


TOGGLE_ACTIONS = [
    app_commands.Choice(name="ACTIVE", value="ACTIVE"),
    app_commands.Choice(name="PAUSED", value="PAUSED"),
]

UNEXPECTED_ERROR = "❌ Something went wrong, please try again."


class AdsDiscordClient(discord.Client):
    def __init__(self, guild_id: str = ""):
        # Slash commands only, no message content intent needed
        super().__init__(intents=discord.Intents.default())
        self.tree = app_commands.CommandTree(self)
        self.guild_id = guild_id

    async def setup_hook(self) -> None:
        if self.guild_id:
            guild = discord.Object(id=int(self.guild_id))
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            logger.info("Synced %d commands to guild %s", len(synced), self.guild_id)
        else:
            synced = await self.tree.sync()
            logger.info("Synced %d global commands, may take a while to show up", len(synced))

    async def on_ready(self) -> None:
        logger.info("🤖 %s is online", self.user)


class IntegrationDiscordAds:
    def __init__(self, config: AdsBotConfig, commands: Optional[AdsCommands] = None):
        self.bot_token = config.discord_token
        self.commands = commands or AdsCommands(config)
        self.problems_other: List[str] = []
        self.reactive_task: Optional[asyncio.Task] = None
        self.client: Optional[AdsDiscordClient] = None

        if not self.bot_token:
            self.problems_other.append("DISCORD_TOKEN is not configured")
            return
        if config.discord_guild_id and not config.discord_guild_id.isdigit():
            self.problems_other.append(f"DISCORD_GUILD_ID must be a number, got {config.discord_guild_id!r}")
            return

        self.client = AdsDiscordClient(config.discord_guild_id)
        self._setup_commands(self.client.tree)

    async def start_reactive(self) -> None:
        if not self.client or self.reactive_task:
            return
        try:
            self.reactive_task = asyncio.create_task(self.client.start(self.bot_token))
            self.reactive_task.add_done_callback(lambda t: akit_utils.report_crash(t, logger))
        except Exception as e:
            logger.exception("Failed to start discord client")
            self.problems_other.append(f"{type(e).__name__} {e}")
            self.client = None

    async def close(self) -> None:
        if self.client and not self.client.is_closed():
            await self.client.close()
        if self.reactive_task and not self.reactive_task.done():
            self.reactive_task.cancel()
            try:
                await self.reactive_task
            except asyncio.CancelledError:
                pass
        self.reactive_task = None
        self.client = None

    def _setup_commands(self, tree: app_commands.CommandTree) -> None:
        @tree.command(name="hello", description="The bot says hello")
        async def hello(interaction: discord.Interaction):
            await self._send(interaction, self.commands.hello())

        ads = app_commands.Group(name="ads", description="Inspect and switch Meta ad sets")

        @ads.command(name="search", description="Find ad sets by name")
        @app_commands.describe(name="Part of the ad set name, case does not matter")
        async def ads_search(interaction: discord.Interaction, name: str):
            await self._run(interaction, "search", name=name)

        @ads.command(name="toggle", description="Switch ad sets to ACTIVE or PAUSED")
        @app_commands.describe(ids="Ad set ids, comma separated", action="New status")
        @app_commands.choices(action=TOGGLE_ACTIONS)
        async def ads_toggle(interaction: discord.Interaction, ids: str, action: app_commands.Choice[str]):
            await self._run(interaction, "toggle", ids=ids, action=action.value)

        @ads.command(name="status", description="Spend, budget and warnings for all ad sets")
        async def ads_status(interaction: discord.Interaction):
            await self._run(interaction, "status")

        @ads.command(name="list", description="List ad sets")
        async def ads_list(interaction: discord.Interaction):
            await self._run(interaction, "list")

        @ads.command(name="api-test", description="Check Meta API settings and connectivity")
        async def ads_api_test(interaction: discord.Interaction):
            await self._run(interaction, "api-test")

        tree.add_command(ads)

        @tree.error
        async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
            logger.warning("Slash command %r failed: %s", getattr(interaction.command, "qualified_name", "?"), error, exc_info=error)
            await self._send(interaction, UNEXPECTED_ERROR)

    async def _run(self, interaction: discord.Interaction, op: str, **kwargs) -> None:
        logger.info("/ads %s by %s %s", op, interaction.user, kwargs)
        try:
            # Graph API calls can take longer than the 3 seconds Discord waits for a reply
            await interaction.response.defer(thinking=True)
        except DiscordException as e:
            logger.warning("Cannot defer /ads %s: %s", op, e)
            return
        text = await self.commands.run(op, **kwargs)
        await self._send(interaction, text)

    async def _send(self, interaction: discord.Interaction, text: str) -> None:
        text = akit_utils.fit_message(text)
        try:
            if interaction.response.is_done():
                await interaction.followup.send(text)
            else:
                await interaction.response.send_message(text)
        except DiscordException as e:
            logger.warning("Cannot reply to %s: %s", interaction.user, e)
