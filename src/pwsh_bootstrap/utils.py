# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: utils.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Subprocess and filesystem helpers shared by the setup steps.
# -----------------------------------------------------------------------------
import logging
import os
import shutil
import subprocess
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 600


def run_command(
    cmd: Union[List[str], str],
    check: bool = True,
    capture_output: bool = False,
    text: bool = True,
    shell: bool = False,
    timeout: Optional[int] = DEFAULT_TIMEOUT,
    **kwargs,
) -> subprocess.CompletedProcess:
    cmd_str = " ".join(cmd) if isinstance(cmd, list) and not shell else cmd
    logger.debug(f"Executing command: {cmd_str}")
    try:
        return subprocess.run(
            cmd,
            check=check,
            capture_output=capture_output,
            text=text,
            shell=shell,
            timeout=timeout,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"Command failed: {cmd_str} with exit code {e.returncode}")
        logger.debug(f"Error output: {getattr(e, 'stderr', 'N/A')}")
        raise


def powershell_executable() -> str:
    """Prefer PowerShell 7 (pwsh) and fall back to Windows PowerShell."""
    return shutil.which("pwsh") or "powershell"


def run_powershell_command(
    command: str,
    capture_output: bool = False,
    check: bool = True,
    text: bool = True,
) -> subprocess.CompletedProcess:
    """Run a PowerShell command and return the result."""
    cmd = [
        powershell_executable(),
        "-NoProfile",
        "-ExecutionPolicy",
        "Bypass",
        "-Command",
        command,
    ]
    return run_command(cmd, capture_output=capture_output, check=check, text=text)


def command_exists(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def ensure_directory(path: Union[str, os.PathLike]) -> None:
    try:
        os.makedirs(path, exist_ok=True)
        logger.debug(f"Ensured directory exists: {path}")
    except OSError as e:
        logger.error(f"Failed to create directory '{path}': {e}")
        raise


def remove_path(path: Union[str, os.PathLike]) -> None:
    """Delete a file or directory tree if it exists."""
    if os.path.isdir(path):
        shutil.rmtree(path)
    elif os.path.exists(path):
        os.remove(path)
