"""Optional CSS toolchain step (e.g. the Tailwind CLI)."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence, Union

from pagesmith.core.exceptions import BuildError
from pagesmith.core.utils.subprocess import flatten_cmd, run_with_timeout

logger = logging.getLogger(__name__)


def compile_css(command: Union[str, Sequence[str]], *, cwd: Path, timeout: float) -> None:
    """Run the configured CSS command in ``cwd``.

    Raises:
        BuildError: When the command is empty or unparsable, can't be started,
            times out, or exits non-zero
    """
    try:
        argv = list(flatten_cmd(command))
    except ValueError as exc:
        raise BuildError(f"Cannot parse CSS command {command!r}: {exc}", context={"command": command}) from exc
    if not argv:
        raise BuildError("CSS command is empty", context={"command": command})

    logger.info("Compiling CSS: %s", " ".join(argv))
    ctx = {"command": argv, "cwd": str(cwd)}
    try:
        result = run_with_timeout(argv, timeout=timeout, cwd=cwd)
    except FileNotFoundError as exc:
        raise BuildError(f"CSS command not found: {argv[0]}", context=ctx) from exc
    except subprocess.TimeoutExpired as exc:
        raise BuildError(f"CSS command timed out after {timeout}s", context=ctx) from exc
    except OSError as exc:
        raise BuildError(f"Cannot run CSS command {argv[0]}: {exc}", context=ctx) from exc

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise BuildError(
            f"CSS command failed with exit code {result.returncode}: {stderr}",
            context={**ctx, "returncode": result.returncode},
        )
    if result.stdout and result.stdout.strip():
        logger.debug(result.stdout.strip())


__all__ = ["compile_css"]
