"""Menu actions that enter other menus."""

import weakref
from typing import Protocol, Union

from simpleui.utils.exceptions import SubmenuGoneError


class Invokable(Protocol):
    """Anything a parent menu can enter as a submenu."""

    def invoke(self) -> None:
        """Run the menu loop until its option 0 is chosen."""
        ...


class SubmenuAction:
    """Action that enters a submenu.

    The submenu is owned (kept alive by this action) unless borrowed=True,
    in which case only a weak reference is held and entering a submenu
    that has since been collected raises SubmenuGoneError.
    """

    def __init__(self, label: str, target: Invokable, borrowed: bool = False):
        self.label = label
        self.borrowed = borrowed
        self._target: Union[Invokable, weakref.ref] = (
            weakref.ref(target) if borrowed else target
        )

    @property
    def target(self) -> Invokable:
        if not self.borrowed:
            return self._target
        target = self._target()
        if target is None:
            raise SubmenuGoneError(f"Submenu '{self.label}' no longer exists")
        return target

    @property
    def alive(self) -> bool:
        """False once a borrowed submenu has been collected."""
        return not self.borrowed or self._target() is not None

    def __call__(self) -> None:
        self.target.invoke()

    def __repr__(self) -> str:
        kind = "borrowed" if self.borrowed else "owned"
        return f"SubmenuAction({self.label!r}, {kind})"
