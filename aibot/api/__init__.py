"""Interface adapters.

Architectural role:
- Discord client, event handlers and `/ai` slash commands (`discord_bot`).
- Process entrypoint for the Discord bot (`main`).
- Local console for trying replies without Discord (`cli`).

Scope:
- Transport concerns only. Reply and command behavior lives in `aibot.core.engine`.
"""
