# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: packages.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: winget, Chocolatey and PSGallery installs.
# -----------------------------------------------------------------------------
import logging
import os
from typing import List

from pwsh_bootstrap.utils import command_exists, run_command, run_powershell_command

logger = logging.getLogger(__name__)

CHOCOLATEY_BIN = "C:\\ProgramData\\chocolatey\\bin"


class PackageInstaller:
    def __init__(
        self, chocolatey_url: str = "https://community.chocolatey.org/install.ps1"
    ) -> None:
        self.chocolatey_url = chocolatey_url

    def winget_install_command(self, package_id: str) -> List[str]:
        return [
            "winget",
            "install",
            "-e",
            "--id",
            package_id,
            "--accept-source-agreements",
            "--accept-package-agreements",
        ]

    def winget_install(self, package_id: str) -> bool:
        logger.info(f"Installing {package_id} via winget...")
        try:
            result = run_command(
                self.winget_install_command(package_id),
                check=False,
                capture_output=True,
            )
        except Exception as e:
            logger.error(f"Failed to install {package_id}: {e}")
            return False
        if result.returncode != 0:
            logger.error(
                f"winget install {package_id} exited with code {result.returncode}"
            )
            return False
        logger.info(f"{package_id} installed successfully.")
        return True

    def winget_is_installed(self, name: str) -> bool:
        try:
            result = run_command(
                ["winget", "list", "--name", name, "-e"],
                check=False,
                capture_output=True,
            )
        except Exception as e:
            logger.debug(f"winget list {name} failed: {e}")
            return False
        return result.returncode == 0

    def install_chocolatey(self) -> bool:
        logger.info("Installing Chocolatey package manager...")
        if command_exists("choco"):
            logger.info("Chocolatey already installed.")
            return True

        installation_cmd = (
            "Set-ExecutionPolicy Bypass -Scope Process -Force; "
            "[System.Net.ServicePointManager]::SecurityProtocol = "
            "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072; "
            f"iex ((New-Object System.Net.WebClient).DownloadString('{self.chocolatey_url}'))"
        )
        try:
            run_powershell_command(installation_cmd)
        except Exception as e:
            logger.error(f"Chocolatey installation error: {e}")
            return False

        # Refresh PATH for this process
        os.environ["PATH"] = os.environ.get("PATH", "") + os.pathsep + CHOCOLATEY_BIN

        if command_exists("choco"):
            logger.info("Chocolatey installed successfully.")
            return True
        logger.error("Chocolatey installation verification failed.")
        return False

    def install_module(self, name: str) -> bool:
        logger.info(f"Installing PowerShell module {name}...")
        try:
            run_powershell_command(
                f"Install-Module -Name {name} -Repository PSGallery -Force"
            )
        except Exception as e:
            logger.error(f"Failed to install {name} module: {e}")
            return False
        logger.info(f"{name} module installed successfully.")
        return True
