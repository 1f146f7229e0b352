"""Check command - Finish the current timer once it has run out.

Meant to be called by a scheduler (systemd timer, cron) rather than by hand.
"""

from tomato_cli.models.status import describe
from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils.clock import local_now
from tomato_cli.utils.ui.formatters import format_info, format_success
from tomato_cli.utils.ui.status_view import print_hook_result

from .decorators import command_wrapper


@command_wrapper
def check() -> None:
    """Finish the current session or break if its time is up."""
    service = get_timer_service()
    transition = service.check(local_now())

    if transition is None:
        format_info("Nothing to finish")
        return

    format_success(f"Finished {describe(transition.previous)}")
    print_hook_result(transition.hook)
