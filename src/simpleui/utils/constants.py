"""Constants used throughout simpleui."""

# Labels of the reserved option 0
EXIT_LABEL = "Exit"
BACK_LABEL = "Back"

# Selection recorded before the first read
NO_SELECTION = -1

# Printed before every read
INPUT_MARKER = "> "

INVALID_OPTION_MESSAGE = "Invalid option."
INVALID_INPUT_MESSAGE = "Invalid input."

# Native clear-screen commands
CLEAR_COMMAND_WINDOWS = "cls"
CLEAR_COMMAND_POSIX = "clear"

# Prefix for environment overrides (SIMPLEUI_DEBUG=1, ...)
ENV_PREFIX = "SIMPLEUI_"
