"""Script execution for dapp-console."""

import ast
import asyncio
import inspect
import logging
import sys
from pathlib import Path
from types import CodeType
from typing import Any, Awaitable, Dict, NoReturn, Optional, Union

from .constants import INLINE_FILENAME, SCRIPT_FUNCTION_NAME
from .context import build_context
from .transport import Transport
from .types import Immediate, Pending, Registry

logger = logging.getLogger(__name__)

ScriptResult = Union[Immediate, Pending]

# Nodes that open a new scope; an await inside them is not top-level
_SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda, ast.ClassDef)


def _has_top_level_await(tree: ast.Module) -> bool:
    stack = list(tree.body)
    while stack:
        node = stack.pop()
        if isinstance(node, (ast.Await, ast.AsyncFor, ast.AsyncWith)):
            return True
        if isinstance(node, ast.comprehension) and node.is_async:
            return True
        if isinstance(node, _SCOPE_NODES):
            continue
        stack.extend(ast.iter_child_nodes(node))
    return False


def _module_prologue_length(body: list) -> int:
    # A leading docstring and __future__ imports must stay at module level
    count = 0
    if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant) \
            and isinstance(body[0].value.value, str):
        count = 1
    while count < len(body) and isinstance(body[count], ast.ImportFrom) \
            and body[count].module == "__future__":
        count += 1
    return count


def compile_script(source: str, filename: str = INLINE_FILENAME) -> CodeType:
    """
    Compile user code as the body of a function.

    Wrapping lets a top-level `return` hand a value back to the console.
    When the code awaits at top level the wrapper is a coroutine function.
    A leading docstring and `from __future__` imports stay at module level.
    Line numbers match the user code.

    Args:
        source: User code
        filename: Name reported in tracebacks

    Returns:
        Code object that defines the wrapper function when executed

    Raises:
        SyntaxError: If the code does not compile
    """
    tree = ast.parse(source, filename=filename, mode="exec")

    prefix = "async def" if _has_top_level_await(tree) else "def"
    wrapper = ast.parse(f"{prefix} {SCRIPT_FUNCTION_NAME}():\n    pass\n").body[0]
    split = _module_prologue_length(tree.body)
    prologue, body = tree.body[:split], tree.body[split:]
    if body:
        wrapper.body = body
    tree.body = prologue + [wrapper]

    ast.fix_missing_locations(tree)
    return compile(tree, filename, "exec")


def execute(
    source: str, context: Dict[str, Any], filename: str = INLINE_FILENAME
) -> ScriptResult:
    """
    Run user code with context as its only globals.

    Args:
        source: User code
        context: Globals for the code; mutated by assignments to globals
        filename: Name reported in tracebacks

    Returns:
        Immediate(value) for a plain result, Pending(awaitable) when the
        result has yet to settle

    Raises:
        SyntaxError: If the code does not compile
        Exception: Anything the code raises before returning
    """
    code = compile_script(source, filename)
    exec(code, context)
    script = context.pop(SCRIPT_FUNCTION_NAME)

    result = script()
    if inspect.isawaitable(result):
        return Pending(result)
    return Immediate(result)


async def _wait_for(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def settle(result: ScriptResult) -> Any:
    """
    Wait for a script result to settle.

    There is no timeout: a result that never settles blocks forever.
    A failed pending result is reported through sys.excepthook and
    still counts as settled.

    Args:
        result: Value returned by execute()

    Returns:
        The settled value, or None if the pending result failed
    """
    if isinstance(result, Immediate):
        return result.value

    try:
        return asyncio.run(_wait_for(result.awaitable))
    except Exception:
        sys.excepthook(*sys.exc_info())
        return None


def run_script(
    source: str,
    registry: Registry,
    transport: Transport,
    script_path: Optional[Union[Path, str]] = None,
) -> NoReturn:
    """
    Run user code once, then exit the process with status 0.

    Args:
        source: User code
        registry: Contract registry
        transport: Connected transport
        script_path: Path the code was read from, for --input-file runs
    """
    context = build_context(registry, transport, script_path=script_path)
    filename = context.get("__file__", INLINE_FILENAME)

    logger.debug("Running %s", filename)
    value = settle(execute(source, context, filename))
    logger.debug("%s settled with %r", filename, value)

    sys.exit(0)
