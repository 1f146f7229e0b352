"""Service layer: the timer state machine and its side effects."""

from .hook_service import Hook, HookResult, HookRunner
from .scheduler_service import CheckScheduler
from .timer_service import TimerService, Transition, get_timer_service

__all__ = [
    "CheckScheduler",
    "Hook",
    "HookResult",
    "HookRunner",
    "TimerService",
    "Transition",
    "get_timer_service",
]
