# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: config.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Pydantic-based settings management from environment variables.
# -----------------------------------------------------------------------------
import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwsh_bootstrap.fonts import NERD_FONTS_BASE_URL

DEFAULT_LOG_FILE = os.path.join(
    os.path.expanduser("~"), "pwsh_bootstrap_logs", "pwsh_bootstrap.log"
)


class AppSettings(BaseSettings):
    """
    Bootstrap settings loaded from environment variables.

    Every field can be overridden with a ``PWSH_BOOTSTRAP_`` prefixed
    variable or from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="PWSH_BOOTSTRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = Field("INFO", description="Logging level for the console.")
    LOG_FILE: str = Field(DEFAULT_LOG_FILE, description="Rotating log file path.")

    # Profile
    PROFILE_URL: str = (
        "https://github.com/ChrisTitusTech/powershell-profile/raw/main/"
        "Microsoft.PowerShell_profile.ps1"
    )
    PROFILE_PATH: Optional[str] = Field(
        None, description="Explicit profile path; derived from the edition if unset."
    )
    POWERSHELL_EDITION: str = Field("core", description="'core' or 'desktop'.")

    # Nerd Font
    NERD_FONTS_BASE_URL: str = NERD_FONTS_BASE_URL
    FONT_NAME: str = "CascadiaCode"
    FONT_DISPLAY_NAME: str = "CaskaydiaCove NF"
    FONT_VERSION: str = "3.2.1"

    # Network
    CONNECTIVITY_HOST: str = "www.google.com"
    DOWNLOAD_TIMEOUT: int = 600

    # Packages
    OH_MY_POSH_ID: str = "JanDeDobbeleer.OhMyPosh"
    OH_MY_POSH_NAME: str = "OhMyPosh"
    ZOXIDE_ID: str = "ajeetdsouza.zoxide"
    TERMINAL_ICONS_MODULE: str = "Terminal-Icons"
    CHOCOLATEY_INSTALL_URL: str = "https://community.chocolatey.org/install.ps1"

    def resolve_profile_path(self) -> Path:
        """Return the profile path PowerShell loads for the configured edition."""
        if self.PROFILE_PATH:
            return Path(self.PROFILE_PATH).expanduser()
        folder = (
            "WindowsPowerShell"
            if self.POWERSHELL_EDITION.lower() == "desktop"
            else "PowerShell"
        )
        return (
            Path.home() / "Documents" / folder / "Microsoft.PowerShell_profile.ps1"
        )


settings = AppSettings()
