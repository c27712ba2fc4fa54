"""Discord adapter for the bot.

Architectural role:
- Owns the `discord.Client`, its gateway events and the `/ai` command group.
- Translates Discord objects into the plain values `aibot.core.engine` expects
  (text, channel id, administrator flag) and sends the engine's replies back.

Event lifecycle:
- `on_ready`: log guilds, register the command tree in every guild.
- `on_message`: in enabled channels, show typing and reply to the message.

Command lifecycle (`/ai setup|disable|status|image`):
1. Defer the interaction (generation can exceed the 3s response window).
2. Run the engine operation.
3. Edit the deferred response with text and optional image attachment.

Error handling strategy:
- Per-guild registration failures are logged and skipped.
- Command exceptions reach `AICommands.on_error`, which logs them and shows
  the generic Arabic failure text.
"""

import io
import logging
from typing import Optional

import discord
from discord import app_commands

from aibot.core import engine
from aibot.image.service import STYLES


logger = logging.getLogger(__name__)


def default_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    intents.members = True
    return intents


def _is_admin(interaction: discord.Interaction) -> bool:
    permissions = getattr(interaction, "permissions", None)
    return bool(permissions and permissions.administrator)


async def _send_reply(interaction: discord.Interaction, reply: engine.CommandReply) -> None:
    if reply.image is not None:
        attachment = discord.File(io.BytesIO(reply.image), filename=reply.filename)
        await interaction.edit_original_response(content=reply.content, attachments=[attachment])
    else:
        await interaction.edit_original_response(content=reply.content)


class AICommands(app_commands.Group):
    """`/ai` slash-command group."""

    def __init__(self, registry):
        super().__init__(name="ai", description="أوامر الذكاء الاصطناعي")
        self.registry = registry

    @app_commands.command(name="setup", description="تفعيل الذكاء الاصطناعي في هذه القناة")
    async def setup_command(self, interaction: discord.Interaction):
        await interaction.response.defer()
        reply = await engine.setup_channel(interaction.channel_id, _is_admin(interaction), self.registry)
        await _send_reply(interaction, reply)

    @app_commands.command(name="disable", description="تعطيل الذكاء الاصطناعي في هذه القناة")
    async def disable_command(self, interaction: discord.Interaction):
        await interaction.response.defer()
        reply = await engine.disable_channel(interaction.channel_id, _is_admin(interaction), self.registry)
        await _send_reply(interaction, reply)

    @app_commands.command(name="status", description="عرض حالة الذكاء الاصطناعي في هذه القناة")
    async def status_command(self, interaction: discord.Interaction):
        await interaction.response.defer()
        await _send_reply(interaction, engine.channel_status(interaction.channel_id, self.registry))

    @app_commands.command(name="image", description="إنشاء صورة باستخدام الذكاء الاصطناعي")
    @app_commands.describe(prompt="وصف الصورة التي تريد إنشاءها", style="نمط الصورة")
    @app_commands.choices(
        style=[app_commands.Choice(name=label, value=value) for value, label in STYLES.items()]
    )
    async def image_command(
        self,
        interaction: discord.Interaction,
        prompt: str,
        style: Optional[app_commands.Choice[str]] = None,
    ):
        await interaction.response.defer()
        await interaction.edit_original_response(content=engine.IMAGE_IN_PROGRESS)

        reply = await engine.render_image(prompt, style.value if style else None)
        await _send_reply(interaction, reply)

    async def on_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        logger.error(
            "Command /ai %s failed",
            interaction.command.name if interaction.command else "?",
            exc_info=error,
        )
        try:
            if interaction.response.is_done():
                await interaction.edit_original_response(content=engine.COMMAND_FAILED)
            else:
                await interaction.response.send_message(engine.COMMAND_FAILED, ephemeral=True)
        except discord.DiscordException:
            logger.exception("Could not report command failure to user")


class AIBot(discord.Client):
    """Discord client answering in enabled channels."""

    def __init__(self, registry, *, intents: discord.Intents | None = None):
        super().__init__(intents=intents or default_intents())
        self.registry = registry
        self.tree = app_commands.CommandTree(self)
        self.tree.add_command(AICommands(registry))

    async def on_ready(self):
        logger.info("Logged in as %s", self.user)
        for guild in self.guilds:
            logger.info("- %s (%s)", guild.name, guild.id)

        await self.register_commands()

        logger.info("Bot ready. Enabled channels: %s", list(self.registry.channels))

    async def register_commands(self):
        """Register the command tree per guild so commands appear immediately."""
        for guild in self.guilds:
            try:
                self.tree.copy_global_to(guild=guild)
                await self.tree.sync(guild=guild)
                logger.info("Registered commands in guild %s", guild.name)
            except discord.DiscordException:
                logger.exception("Failed to register commands in guild %s", guild.name)

    async def on_message(self, message: discord.Message):
        if message.author.bot:
            return

        channel_id = message.channel.id
        if not self.registry.is_enabled(channel_id):
            return

        logger.info("Message in %s from %s: %r", channel_id, message.author, message.content)

        try:
            async with message.channel.typing():
                reply = await engine.handle_message(message.content, channel_id, self.registry)

            if reply:
                await message.channel.send(
                    reply,
                    reference=message.to_reference(fail_if_not_exists=False),
                )
        except discord.DiscordException:
            logger.exception("Failed to reply to message %s", message.id)
            try:
                await message.channel.send(
                    engine.MESSAGE_FAILED,
                    reference=message.to_reference(fail_if_not_exists=False),
                )
            except discord.DiscordException:
                logger.exception("Failed to send failure notice for message %s", message.id)
