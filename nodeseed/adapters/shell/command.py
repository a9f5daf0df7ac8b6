"""
Shell command adapter — execute external commands.

This is the most fundamental adapter: it runs commands and captures
their output. The git and node adapters spawn their tools through
``run_process`` as well, so every process receipt has the same shape.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import time
from pathlib import Path

from nodeseed.adapters.base import Adapter, ExecutionContext
from nodeseed.core.models.action import Receipt

logger = logging.getLogger(__name__)

# Exit status a POSIX shell reports for a command it cannot find
COMMAND_NOT_FOUND = 127


def run_process(
    adapter: str,
    ctx: ExecutionContext,
    cmd: list[str] | str,
    cwd: str | None = None,
) -> Receipt:
    """Spawn a process, wait for it, and turn the outcome into a Receipt.

    Args:
        adapter: Name recorded on the receipt.
        ctx: Execution context (action id, working dir, timeout).
        cmd: Argument vector, or a command string to run through ``sh``.
        cwd: Override working directory (default: ``ctx.working_dir``).

    Returns:
        Success receipt on exit status 0, failure receipt otherwise.
        The exit status is always recorded in ``metadata["return_code"]``.
    """
    cwd = cwd or ctx.working_dir
    use_shell = isinstance(cmd, str)
    display = cmd if use_shell else shlex.join(cmd)

    logger.debug("Executing: %s (cwd=%s)", display, cwd)
    start = time.monotonic()

    try:
        result = subprocess.run(
            cmd,
            shell=use_shell,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=ctx.timeout,
        )
    except subprocess.TimeoutExpired:
        return Receipt.failure(
            adapter=adapter,
            action_id=ctx.action.id,
            error=f"Command timed out after {ctx.timeout}s: {display}",
            metadata={"command": display, "timeout": ctx.timeout},
        )
    except FileNotFoundError as e:
        return Receipt.failure(
            adapter=adapter,
            action_id=ctx.action.id,
            error=f"{e.filename or display}: command not found",
            metadata={"command": display, "return_code": COMMAND_NOT_FOUND},
        )
    except OSError as e:
        return Receipt.failure(
            adapter=adapter,
            action_id=ctx.action.id,
            error=f"Command execution error: {e}",
            metadata={"command": display},
        )

    elapsed_ms = int((time.monotonic() - start) * 1000)
    output = result.stdout.strip()
    stderr = result.stderr.strip()

    if result.returncode == 0:
        return Receipt.success(
            adapter=adapter,
            action_id=ctx.action.id,
            output=output,
            duration_ms=elapsed_ms,
            metadata={
                "command": display,
                "return_code": result.returncode,
                "stderr": stderr,
            },
        )

    return Receipt.failure(
        adapter=adapter,
        action_id=ctx.action.id,
        error=stderr or f"Command exited with code {result.returncode}",
        duration_ms=elapsed_ms,
        metadata={
            "command": display,
            "return_code": result.returncode,
            "stdout": output,
        },
    )


class ShellCommandAdapter(Adapter):
    """Execute commands and capture output.

    Action params:
        command (str | list[str]): The command to execute. A list is
            spawned directly; a string goes through ``sh``.
        cwd (str): Override working directory (default: context.working_dir).
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return shutil.which("sh") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        command = context.action.params.get("command", "")
        if not command:
            return False, "Missing required param: 'command'"

        if not isinstance(command, (str, list)):
            return False, "Param 'command' must be a string or a list of strings"

        # The working directory may not exist yet when nothing is executed
        cwd = context.action.params.get("cwd", context.working_dir)
        if not context.dry_run and cwd and not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        command = context.action.params["command"]
        cwd = context.action.params.get("cwd", context.working_dir)
        cmd = command if isinstance(command, str) else [str(part) for part in command]
        return run_process(self.name, context, cmd, cwd=cwd)
