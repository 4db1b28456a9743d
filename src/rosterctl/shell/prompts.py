"""Console input helpers built on ``click.prompt``.

Validation lives in :class:`click.ParamType` subclasses, so a malformed
entry is reported and re-prompted by click itself. Callers always receive
a well-formed value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import click

if TYPE_CHECKING:
    from rosterctl.domain.ids import IdAllocator, PlayerId


class NonBlankText(click.ParamType):
    """Text that is not empty after stripping whitespace."""

    name = "text"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        text = str(value).strip()
        if not text:
            self.fail("Input must not be blank.", param, ctx)
        return text


class SentinelBool(click.ParamType):
    """A yes/no answer entered as one of two integers.

    Converts to ``True`` exactly when the entry equals *true_value*.
    """

    name = "sentinel"

    def __init__(self, true_value: int = 1, false_value: int = 0) -> None:
        if true_value == false_value:
            msg = "True and false sentinels must differ"
            raise ValueError(msg)
        self.true_value = true_value
        self.false_value = false_value

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> bool:
        if isinstance(value, bool):
            return value
        try:
            number = int(str(value).strip())
        except ValueError:
            number = None
        if number not in (self.true_value, self.false_value):
            self.fail(
                f"{value!r} is not one of {self.true_value}, {self.false_value}.", param, ctx
            )
        return number == self.true_value


class PlayerIdType(click.ParamType):
    """Player id parsed by the active id strategy."""

    name = "player id"

    def __init__(self, allocator: IdAllocator) -> None:
        self.allocator = allocator

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> PlayerId:
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            try:
                return self.allocator.parse_id(str(value))
            except ValueError as exc:
                self.fail(f"{value!r} is not a valid player id ({exc}).", param, ctx)
        self.fail(f"{value!r} is not a valid player id.", param, ctx)


class InputCollaborator(Protocol):
    """What commands and the run loop need from the console."""

    def read_text(self, prompt: str) -> str: ...

    def read_integer(self, prompt: str) -> int: ...

    def read_boolean(self, prompt: str, true_value: int = 1, false_value: int = 0) -> bool: ...

    def read_player_id(self, prompt: str, allocator: IdAllocator) -> PlayerId: ...

    def confirm(self, prompt: str) -> bool: ...

    def acknowledge(self, prompt: str) -> None: ...

    def clear(self) -> None: ...


class Prompter:
    """Interactive console prompts.

    Args:
        pause: Wait for a key press after each command.
        clear_screen: Clear the terminal between commands.
    """

    def __init__(self, *, pause: bool = True, clear_screen: bool = True) -> None:
        self.pause = pause
        self.clear_screen = clear_screen

    def read_text(self, prompt: str) -> str:
        return click.prompt(prompt, type=NonBlankText())

    def read_integer(self, prompt: str) -> int:
        return click.prompt(prompt, type=int)

    def read_boolean(self, prompt: str, true_value: int = 1, false_value: int = 0) -> bool:
        return click.prompt(
            f"{prompt} [{true_value}/{false_value}]",
            type=SentinelBool(true_value, false_value),
            show_choices=False,
        )

    def read_player_id(self, prompt: str, allocator: IdAllocator) -> PlayerId:
        return click.prompt(prompt, type=PlayerIdType(allocator))

    def confirm(self, prompt: str) -> bool:
        return click.confirm(prompt, default=True)

    def acknowledge(self, prompt: str) -> None:
        # click.pause is a no-op when stdin is not a terminal.
        if self.pause:
            click.pause(prompt)

    def clear(self) -> None:
        if self.clear_screen:
            click.clear()
