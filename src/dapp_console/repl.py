"""Interactive console for dapp-console."""

import code
import logging
from typing import Any, Callable, Dict, Optional

from .context import build_context
from .transport import Transport
from .types import Registry

logger = logging.getLogger(__name__)

HELP_TEXT = """\
.reset  Rebuild all bindings and forget local variables
.help   Show this help
.exit   Leave the console (or press Ctrl-D)"""


class ConsoleRepl(code.InteractiveConsole):
    """
    Interactive loop whose namespace is an execution context.

    Lines starting with a dot are console commands when no statement is
    being continued.
    """

    def __init__(self, context_factory: Callable[[], Dict[str, Any]]):
        self._context_factory = context_factory
        self._closed = False
        super().__init__(locals=self._fresh_locals())

    def _fresh_locals(self) -> Dict[str, Any]:
        context = self._context_factory()
        context["__name__"] = "__console__"
        return context

    def reset(self) -> None:
        """Replace the live namespace with a freshly built context."""
        self.locals.clear()
        self.locals.update(self._fresh_locals())
        self.resetbuffer()
        logger.debug("Console context reset")

    def close(self) -> None:
        self._closed = True

    def raw_input(self, prompt: str = "") -> str:
        if self._closed:
            raise EOFError
        return super().raw_input(prompt)

    def push(self, line: str, *args: Any, **kwargs: Any) -> bool:
        command = line.strip()
        if not self.buffer and command in self.commands():
            self.commands()[command]()
            return False
        return super().push(line, *args, **kwargs)

    def commands(self) -> Dict[str, Callable[[], None]]:
        return {
            ".reset": self.reset,
            ".help": lambda: self.write(HELP_TEXT + "\n"),
            ".exit": self.close,
        }


def make_banner(registry: Registry) -> str:
    names = registry.names()
    lines = [
        f"dapp-console (network {registry.network_id})",
        "Contracts: " + (", ".join(names) if names else "(none)"),
        "Type .help for console commands.",
    ]
    return "\n".join(lines)


def start_repl(
    registry: Registry, transport: Transport, banner: Optional[str] = None
) -> None:
    """
    Run the interactive console until the user leaves it.

    Args:
        registry: Contract registry
        transport: Connected transport
        banner: Text printed on start (defaults to a summary of the registry)
    """
    repl = ConsoleRepl(lambda: build_context(registry, transport))
    if banner is None:
        banner = make_banner(registry)
    repl.interact(banner=banner, exitmsg="")
