"""Finish command - Finish and archive the current session."""

from tomato_cli.services.timer_service import get_timer_service
from tomato_cli.utils.clock import local_now
from tomato_cli.utils.durations import format_human
from tomato_cli.utils.ui.formatters import format_success
from tomato_cli.utils.ui.status_view import print_hook_result

from .decorators import command_wrapper


@command_wrapper
def finish() -> None:
    """Finish the current session (archiving it) or break."""
    service = get_timer_service()
    transition = service.finish(local_now())

    if transition.archived is not None:
        actual = transition.archived.actual_duration
        format_success(
            f"Archived a {format_human(actual)} session to "
            f"{service.history_repository.history_file}"
        )
    else:
        format_success("Break finished")
    print_hook_result(transition.hook)
