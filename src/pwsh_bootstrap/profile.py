# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: profile.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Backs up the PowerShell profile and fetches the hosted one.
# -----------------------------------------------------------------------------
import logging
import os
from pathlib import Path
from typing import Optional

import requests

from pwsh_bootstrap.utils import ensure_directory

logger = logging.getLogger(__name__)

BACKUP_NAME = "oldprofile.ps1"


class ProfileError(Exception):
    pass


class ProfileManager:
    def __init__(
        self,
        profile_url: str,
        default_path: Path,
        session: Optional[requests.Session] = None,
        timeout: int = 60,
    ) -> None:
        self.profile_url = profile_url
        self.default_path = default_path
        self.session = session or requests.Session()
        self.timeout = timeout

    def backup(self, profile_path: Path) -> Optional[Path]:
        """Move an existing profile aside, replacing any earlier backup."""
        if not profile_path.is_file():
            return None
        backup = profile_path.with_name(BACKUP_NAME)
        os.replace(profile_path, backup)
        logger.info(f"Backed up {profile_path} to {backup}")
        return backup

    def fetch(self, profile_path: Path) -> None:
        response = self.session.get(self.profile_url, timeout=self.timeout)
        response.raise_for_status()
        profile_path.write_bytes(response.content)

    def update(self, profile_path: Optional[Path] = None) -> Path:
        """
        Replace the profile with the hosted one.

        An existing profile is moved to ``oldprofile.ps1`` first. If the
        download or write then fails, it is moved back so the user is never
        left without a profile.
        """
        profile_path = Path(profile_path or self.default_path)
        logger.info(f"Updating PowerShell profile at {profile_path}...")
        backup = None
        try:
            backup = self.backup(profile_path)
            if backup is None:
                ensure_directory(profile_path.parent)
            self.fetch(profile_path)
        except (requests.RequestException, OSError) as e:
            if backup is not None:
                self._restore(backup, profile_path)
            raise ProfileError(f"Failed to create or update the profile: {e}") from e

        if backup:
            logger.info(
                f"The profile @ [{profile_path}] has been created and the old "
                f"profile moved to [{backup}]."
            )
        else:
            logger.info(f"The profile @ [{profile_path}] has been created.")
        return profile_path

    def _restore(self, backup: Path, profile_path: Path) -> None:
        try:
            os.replace(backup, profile_path)
        except OSError as e:
            logger.warning(f"Could not restore {profile_path} from {backup}: {e}")
        else:
            logger.info(f"Restored the previous profile from {backup}")
