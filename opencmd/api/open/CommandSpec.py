"""Unexecuted command descriptor."""

import shlex
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandSpec:
    """A program and its ordered arguments, ready to hand to ``subprocess``.

    Nothing is executed here: callers run ``argv`` themselves, which leaves
    them free to redirect stdin/stdout/stderr first.

    Examples:
        >>> spec = CommandSpec("xdg-open", ("https://example.com/x",))
        >>> spec.argv
        ['xdg-open', 'https://example.com/x']
        >>> subprocess.Popen(spec.argv, stdout=subprocess.DEVNULL)  # doctest: +SKIP
    """

    program: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.program:
            raise ValueError("CommandSpec program must be a non-empty string")
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def argv(self) -> list[str]:
        """Program followed by its arguments."""
        return [self.program, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)
