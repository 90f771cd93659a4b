"""Command implementations for the ClipKeeper REPL.

Commands:
    list             - Show history, most recent first
    pick N  (or N)   - Copy entry N back to the clipboard
    clear            - Remove all history entries
    size [N]         - Show or set history capacity (applies live)
    icon [on|off]    - Show or toggle the status indicator
    status           - Show watcher health
    help             - Display help text
    quit             - Exit

Example:
    ctx = CommandContext(extension=extension)
    output = await execute_command(ctx, "pick 2")
    if output.message:
        console.print(output.message)
"""

from __future__ import annotations

import time

from clipkeeper.commands.protocol import CommandContext, CommandOutput
from clipkeeper.config.schema import ENABLE_PANEL_ICON_KEY, HISTORY_SIZE_KEY
from clipkeeper.core.errors import ClipkeeperError

HELP_TEXT = """\
Commands:
  list             Show history, most recent first
  pick N  (or N)   Copy entry N back to the clipboard
  clear            Remove all history entries
  size [N]         Show or set history capacity
  icon [on|off]    Show or toggle the status indicator
  status           Show clipboard watcher health
  help             Show this help
  quit             Exit"""

_ON_VALUES = {"on", "true", "yes", "1"}
_OFF_VALUES = {"off", "false", "no", "0"}


def cmd_list(ctx: CommandContext) -> CommandOutput:
    """List history entries.

    Returns:
        CommandOutput with entries (HistoryEntry objects) in data field.
    """
    entries = ctx.extension.get_entries()
    return CommandOutput.success(data={"entries": entries})


async def cmd_pick(ctx: CommandContext, position: int) -> CommandOutput:
    """Copy the entry at a one-based position back to the clipboard."""
    snapshot = ctx.extension.get_snapshot()
    if not snapshot:
        return CommandOutput.error("History is empty")
    if not 1 <= position <= len(snapshot):
        return CommandOutput.error(f"No entry {position} (history has {len(snapshot)})")
    try:
        await ctx.extension.select_entry(snapshot[position - 1])
    except ClipkeeperError as e:
        return CommandOutput.error(e.message)
    return CommandOutput.success(data={"position": position})


def cmd_clear(ctx: CommandContext) -> CommandOutput:
    """Remove all history entries."""
    try:
        ctx.extension.clear_history()
    except ClipkeeperError as e:
        return CommandOutput.error(e.message)
    return CommandOutput.success(message="History cleared")


def cmd_size(ctx: CommandContext, value: str | None = None) -> CommandOutput:
    """Show or set the history capacity."""
    settings = ctx.extension.settings
    if value is None:
        size = settings.get(HISTORY_SIZE_KEY)
        return CommandOutput.success(message=f"History size: {size}", data={"size": size})
    try:
        size = int(value)
    except ValueError:
        return CommandOutput.error(f"Invalid size: {value!r} (expected a whole number)")
    if size < 1:
        return CommandOutput.error("History size must be at least 1")
    settings.set(HISTORY_SIZE_KEY, size)
    return CommandOutput.success(message=f"History size set to {size}", data={"size": size})


def cmd_icon(ctx: CommandContext, value: str | None = None) -> CommandOutput:
    """Show or set indicator visibility."""
    settings = ctx.extension.settings
    if value is None:
        state = "on" if settings.get_bool(ENABLE_PANEL_ICON_KEY) else "off"
        return CommandOutput.success(message=f"Indicator: {state}")
    lowered = value.lower()
    if lowered in _ON_VALUES:
        visible = True
    elif lowered in _OFF_VALUES:
        visible = False
    else:
        return CommandOutput.error(f"Invalid value: {value!r} (expected on or off)")
    settings.set(ENABLE_PANEL_ICON_KEY, visible)
    return CommandOutput.success(message=f"Indicator {'on' if visible else 'off'}")


def cmd_status(ctx: CommandContext) -> CommandOutput:
    """Report watcher health."""
    health = ctx.extension.health
    if health is None:
        return CommandOutput.error("Clipboard history is not enabled")

    now = time.time()

    def ago(ts: float | None) -> str:
        return "never" if ts is None else f"{now - ts:.1f}s ago"

    lines = [
        f"Ticks: {health.ticks}",
        f"Last successful read: {ago(health.last_success_at)}",
        f"Last change: {ago(health.last_change_at)}",
        f"Consecutive failures: {health.consecutive_failures}",
    ]
    if health.last_error:
        lines.append(f"Last error: {health.last_error}")
    if not health.is_healthy:
        lines.append("Clipboard appears unreadable")
    return CommandOutput.success(
        message="\n".join(lines),
        data={
            "ticks": health.ticks,
            "last_success_at": health.last_success_at,
            "last_change_at": health.last_change_at,
            "consecutive_failures": health.consecutive_failures,
            "healthy": health.is_healthy,
        },
    )


async def execute_command(ctx: CommandContext, line: str) -> CommandOutput:
    """Parse and run one command line."""
    parts = line.split()
    if not parts:
        return CommandOutput.success()
    name, args = parts[0].lower().lstrip("/"), parts[1:]

    if name.isdigit() and not args:
        return await cmd_pick(ctx, int(name))

    if name in ("list", "ls"):
        return cmd_list(ctx)
    if name in ("pick", "p"):
        if len(args) != 1 or not args[0].isdigit():
            return CommandOutput.error("Usage: pick N")
        return await cmd_pick(ctx, int(args[0]))
    if name == "clear":
        return cmd_clear(ctx)
    if name == "size":
        return cmd_size(ctx, args[0] if args else None)
    if name == "icon":
        return cmd_icon(ctx, args[0] if args else None)
    if name == "status":
        return cmd_status(ctx)
    if name in ("help", "?"):
        return CommandOutput.success(message=HELP_TEXT)
    if name in ("quit", "q", "exit"):
        return CommandOutput.quit()
    return CommandOutput.error(f"Unknown command: {name} (try 'help')")
