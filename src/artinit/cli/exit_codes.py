"""Exit codes returned by the artinit CLI."""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INVALID_USAGE = 3
