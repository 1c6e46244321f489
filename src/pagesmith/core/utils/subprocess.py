"""Subprocess helpers for external build tooling (CSS compilers).

- Commands given as a string are split with shlex (no shell=True)
- The child runs in its own process group so a timeout kills the whole tree
"""
from __future__ import annotations

import logging
import os
import shlex
import signal
import subprocess
from pathlib import Path
from time import perf_counter
from typing import Any, Sequence

logger = logging.getLogger(__name__)


def flatten_cmd(cmd: Any) -> Sequence[str]:
    if isinstance(cmd, (list, tuple)):
        return [str(p) for p in cmd]
    return shlex.split(str(cmd))


def _popen_process_group_kwargs() -> dict[str, Any]:
    if os.name == "posix":
        return {"start_new_session": True}
    if os.name == "nt":
        creationflags = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", None)
        if isinstance(creationflags, int):
            return {"creationflags": creationflags}
    return {}


def _terminate_process_group(proc: subprocess.Popen[Any]) -> None:
    if proc.poll() is not None:
        return
    if os.name == "posix":
        try:
            os.killpg(proc.pid, signal.SIGTERM)
        except OSError:
            proc.terminate()
        try:
            proc.wait(timeout=0.2)
        except subprocess.TimeoutExpired:
            pass
        if proc.poll() is None:
            try:
                os.killpg(proc.pid, signal.SIGKILL)
            except OSError:
                proc.kill()
        return

    proc.kill()


def run_with_timeout(
    cmd: Any,
    *,
    timeout: float,
    cwd: Path | str | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess:
    """Run a command, capturing text output, and kill its process group on timeout.

    Args:
        cmd: Command list or string.
        timeout: Seconds before the command is terminated.
        cwd: Working directory.
        env: Environment for the child (defaults to the current environment).

    Returns:
        CompletedProcess with stdout/stderr captured as text.

    Raises:
        subprocess.TimeoutExpired: When the command exceeds ``timeout``.
        FileNotFoundError: When the executable does not exist.
    """
    argv = list(flatten_cmd(cmd))
    start = perf_counter()
    logger.debug("Running %s (cwd=%s, timeout=%ss)", argv, cwd, timeout)

    proc = subprocess.Popen(
        argv,
        cwd=cwd,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        **_popen_process_group_kwargs(),
    )
    try:
        stdout, stderr = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired as exc:
        _terminate_process_group(proc)
        try:
            stdout, stderr = proc.communicate(timeout=0.2)
        except subprocess.TimeoutExpired:
            stdout = getattr(exc, "output", None)
            stderr = getattr(exc, "stderr", None)
        raise subprocess.TimeoutExpired(argv, timeout, output=stdout, stderr=stderr) from None

    logger.debug("%s exited %s in %.2fs", argv[0], proc.returncode, perf_counter() - start)
    return subprocess.CompletedProcess(argv, proc.returncode, stdout=stdout, stderr=stderr)


__all__ = ["flatten_cmd", "run_with_timeout"]
