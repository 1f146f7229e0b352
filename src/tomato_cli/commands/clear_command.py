"""Clear command - Discard the current session or break."""

from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper


@command_wrapper
def clear() -> None:
    """Discard the current session or break without archiving it."""
    service = get_timer_service()
    if service.clear():
        format_success("Cleared the current session")
    else:
        format_info("Nothing to clear")
