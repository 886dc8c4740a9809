"""Style tokens used when rendering menus.

Values are rich style names, so a token can be passed straight to
``Console.print(style=...)``.
"""

from enum import Enum


class Style(str, Enum):
    """Named colours plus the roles the menu renderer gives them."""

    RESET = "none"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"

    # Roles (aliases of the colours above)
    HEADER = "yellow"
    OPTION = "cyan"
    RESERVED = "magenta"
    ERROR = "red"

    def __str__(self) -> str:
        return self.value
