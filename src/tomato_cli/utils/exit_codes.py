"""
Exit codes for Tomato.

Scripts (status bars, scheduler units) can branch on these instead of
parsing error messages.
"""

# Success
SUCCESS = 0

# General error, including I/O failures
ERROR_GENERAL = 1

# Invalid arguments, e.g. a malformed duration
ERROR_INVALID_ARGS = 2

# Command not allowed in the current state (already running, nothing to finish)
ERROR_INVALID_TRANSITION = 3

# State, history or config file could not be parsed
ERROR_CORRUPT_FILE = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_INVALID_TRANSITION: "ERROR_INVALID_TRANSITION",
        ERROR_CORRUPT_FILE: "ERROR_CORRUPT_FILE",
    }
    return code_names.get(code, f"UNKNOWN({code})")

