"""Exit codes for the platpick CLI."""

EXIT_SUCCESS = 0
EXIT_AMBIGUOUS = 1
EXIT_INVALID_CONFIG = 1
EXIT_NO_MATCH = 2
EXIT_INVALID_USAGE = 3
