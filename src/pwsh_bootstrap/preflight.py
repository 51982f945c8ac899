# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: preflight.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Administrator and network connectivity checks.
# -----------------------------------------------------------------------------
import ctypes
import logging
import platform
from typing import List, Optional

from pwsh_bootstrap.utils import run_command

logger = logging.getLogger(__name__)


class PrivilegeChecker:
    def is_admin(self) -> bool:
        """Check if the process runs with administrator privileges."""
        try:
            return ctypes.windll.shell32.IsUserAnAdmin() != 0
        except (AttributeError, OSError):
            # No windll outside Windows
            return False


class ConnectivityChecker:
    def __init__(self, host: str = "www.google.com", wait_seconds: int = 5) -> None:
        self.host = host
        self.wait_seconds = wait_seconds

    def ping_command(self, host: str) -> List[str]:
        if platform.system().lower() == "windows":
            return ["ping", "-n", "1", "-w", str(self.wait_seconds * 1000), host]
        return ["ping", "-c", "1", "-W", str(self.wait_seconds), host]

    def check(self, host: Optional[str] = None) -> bool:
        host = host or self.host
        logger.info(f"Performing network connectivity check against {host}...")
        try:
            result = run_command(
                self.ping_command(host),
                check=False,
                capture_output=True,
                timeout=self.wait_seconds + 5,
            )
        except Exception as e:
            logger.debug(f"Ping to {host} failed: {e}")
            return False
        if result.returncode == 0:
            logger.info(f"Network connectivity verified via {host}.")
            return True
        logger.warning(f"No response from {host}.")
        return False
