# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: fonts.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Idempotent Nerd Font download, extraction and registration.
# -----------------------------------------------------------------------------
"""
Nerd Font installation.

A font is identified by three strings: the release artifact name used in
the download URL (``CascadiaCode``), the family name it registers under in
the OS font catalog (``CaskaydiaCove NF``) and the release version.

``FontInstaller.install`` checks the catalog for the family name first and
returns ``InstallOutcome.ALREADY_PRESENT`` without touching the network or
the filesystem when it is there. Otherwise the release archive is
downloaded to ``<temp>/<font_name>.zip``, extracted to
``<temp>/<font_name>/`` and every ``.ttf`` inside is registered with the
OS unless a file with the same name already sits in the system font
directory. Both temporary paths are removed afterwards, on success and on
failure. Fonts registered before a failure stay installed.
"""

import logging
import os
import shutil
import subprocess
import tempfile
import zipfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set, Union

import requests
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from pwsh_bootstrap.console import NordColors, console
from pwsh_bootstrap.utils import ensure_directory, remove_path, run_powershell_command

logger = logging.getLogger(__name__)

NERD_FONTS_BASE_URL = "https://github.com/ryanoasis/nerd-fonts/releases/download"
FONT_EXTENSION = ".ttf"
CHUNK_SIZE = 8192


class InstallOutcome(Enum):
    INSTALLED = "installed"
    ALREADY_PRESENT = "already_present"


class InstallError(Exception):
    """Base class for font installation failures; ``cause`` is the original error."""

    kind = "InstallError"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class NetworkError(InstallError):
    kind = "NetworkError"


class ExtractionError(InstallError):
    kind = "ExtractionError"


class RegistrationError(InstallError):
    kind = "RegistrationError"


class QueryError(InstallError):
    kind = "QueryError"


@dataclass(frozen=True)
class FontRequest:
    font_name: str
    display_name: str
    version: str

    def download_url(self, base_url: str = NERD_FONTS_BASE_URL) -> str:
        return f"{base_url.rstrip('/')}/v{self.version}/{self.font_name}.zip"

    def archive_path(self, temp_dir: Union[str, os.PathLike]) -> Path:
        return Path(temp_dir) / f"{self.font_name}.zip"

    def extract_dir(self, temp_dir: Union[str, os.PathLike]) -> Path:
        return Path(temp_dir) / self.font_name


#####################################
# Font catalog
#####################################


class FontCatalog:
    """Source of the font family names currently registered with the OS."""

    def list_installed_families(self) -> Set[str]:
        raise NotImplementedError


class PowerShellFontCatalog(FontCatalog):
    QUERY = (
        "Add-Type -AssemblyName System.Drawing; "
        "(New-Object System.Drawing.Text.InstalledFontCollection).Families "
        "| ForEach-Object { $_.Name }"
    )

    def list_installed_families(self) -> Set[str]:
        try:
            result = run_powershell_command(self.QUERY, capture_output=True)
        except (subprocess.SubprocessError, OSError) as e:
            raise QueryError(f"Could not enumerate installed fonts: {e}", e) from e
        return {line.strip() for line in result.stdout.splitlines() if line.strip()}


#####################################
# Font registration
#####################################


class FontRegistrar:
    """Installs a single font file into the system font store."""

    fonts_dir: Path

    def register(self, font_path: Path) -> None:
        raise NotImplementedError


class WindowsFontRegistrar(FontRegistrar):
    FONTS_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion\Fonts"
    HWND_BROADCAST = 0xFFFF
    WM_FONTCHANGE = 0x001D
    SMTO_ABORTIFHUNG = 0x0002

    def __init__(self, fonts_dir: Optional[Union[str, os.PathLike]] = None) -> None:
        if fonts_dir is None:
            fonts_dir = os.path.join(os.environ.get("WINDIR", "C:\\Windows"), "Fonts")
        self.fonts_dir = Path(fonts_dir)

    def register(self, font_path: Path) -> None:
        """
        Copy ``font_path`` into the system font directory and register it.

        A failed registration removes the copy made by this call, otherwise
        later runs would find the file and never register it.
        """
        target = self.fonts_dir / font_path.name
        copied = False
        loaded = False
        try:
            import winreg
            import ctypes

            if not target.exists():
                shutil.copy2(font_path, target)
                copied = True

            if not ctypes.windll.gdi32.AddFontResourceW(str(target)):
                raise OSError(f"AddFontResourceW rejected {target}")
            loaded = True

            key = winreg.CreateKeyEx(
                winreg.HKEY_LOCAL_MACHINE, self.FONTS_KEY, 0, winreg.KEY_WRITE
            )
            try:
                winreg.SetValueEx(
                    key, f"{font_path.stem} (TrueType)", 0, winreg.REG_SZ, target.name
                )
            finally:
                winreg.CloseKey(key)

            # Tell running applications the font table changed
            ctypes.windll.user32.SendMessageTimeoutW(
                self.HWND_BROADCAST,
                self.WM_FONTCHANGE,
                0,
                0,
                self.SMTO_ABORTIFHUNG,
                5000,
                ctypes.byref(ctypes.c_ulong()),
            )
        except (ImportError, AttributeError, OSError) as e:
            self._undo_copy(target, copied, loaded)
            raise RegistrationError(f"Failed to register {font_path.name}: {e}", e) from e
        logger.debug(f"Registered font {target}")

    def _undo_copy(self, target: Path, copied: bool, loaded: bool) -> None:
        if not copied:
            return
        try:
            if loaded:
                import ctypes

                ctypes.windll.gdi32.RemoveFontResourceW(str(target))
            target.unlink()
        except (AttributeError, OSError) as e:
            logger.warning(f"Could not remove partially installed font {target}: {e}")


#####################################
# Installer
#####################################


class FontInstaller:
    def __init__(
        self,
        catalog: FontCatalog,
        registrar: FontRegistrar,
        base_url: str = NERD_FONTS_BASE_URL,
        temp_dir: Optional[Union[str, os.PathLike]] = None,
        session: Optional[requests.Session] = None,
        timeout: int = 600,
        show_progress: bool = True,
    ) -> None:
        self.catalog = catalog
        self.registrar = registrar
        self.base_url = base_url
        self.temp_dir = Path(temp_dir or tempfile.gettempdir())
        self.session = session or requests.Session()
        self.timeout = timeout
        self.show_progress = show_progress

    def is_installed(self, request: FontRequest) -> bool:
        try:
            families = self.catalog.list_installed_families()
        except QueryError:
            raise
        except Exception as e:
            raise QueryError(f"Could not enumerate installed fonts: {e}", e) from e
        return request.display_name in families

    def install(self, request: FontRequest) -> InstallOutcome:
        """
        Ensure ``request.display_name`` is installed.

        Returns:
            ``InstallOutcome.ALREADY_PRESENT`` if the family was registered
            before the call, ``InstallOutcome.INSTALLED`` otherwise.

        Raises:
            InstallError: One of its subclasses, with the original exception
            chained, for any failed step.
        """
        if self.is_installed(request):
            logger.info(f"Font '{request.display_name}' is already installed.")
            return InstallOutcome.ALREADY_PRESENT

        url = request.download_url(self.base_url)
        archive = request.archive_path(self.temp_dir)
        extract_dir = request.extract_dir(self.temp_dir)
        logger.info(f"Installing font '{request.display_name}' from {url}")

        try:
            self.download(url, archive)
            self.extract(archive, extract_dir)
            registered = self.register_fonts(self.find_font_files(extract_dir))
        except InstallError:
            self._discard_temp_files(archive, extract_dir)
            raise

        try:
            remove_path(extract_dir)
            remove_path(archive)
        except OSError as e:
            raise InstallError(f"Failed to clean up temporary files: {e}", e) from e

        logger.info(
            f"Font '{request.display_name}' installed ({len(registered)} file(s) registered)."
        )
        return InstallOutcome.INSTALLED

    def download(self, url: str, destination: Path) -> None:
        """Stream ``url`` to ``destination``; returns once the file is complete."""
        try:
            ensure_directory(destination.parent)
            with self.session.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                total = int(response.headers.get("content-length") or 0)
                with Progress(
                    SpinnerColumn(style=f"bold {NordColors.FROST_1}"),
                    TextColumn(f"[bold {NordColors.FROST_2}]Downloading {destination.name}"),
                    BarColumn(style=NordColors.FROST_4, complete_style=NordColors.FROST_2),
                    TaskProgressColumn(),
                    TimeRemainingColumn(),
                    console=console,
                    transient=True,
                    disable=not self.show_progress,
                ) as progress:
                    task = progress.add_task("download", total=total or None)
                    with open(destination, "wb") as f:
                        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                            if chunk:
                                f.write(chunk)
                                progress.advance(task, len(chunk))
        except requests.RequestException as e:
            raise NetworkError(f"Download of {url} failed: {e}", e) from e
        except OSError as e:
            # requests errors are OSErrors too, so this must come second
            raise ExtractionError(f"Could not write {destination}: {e}", e) from e
        logger.debug(f"Downloaded {url} to {destination}")

    def extract(self, archive: Path, extract_dir: Path) -> None:
        try:
            # Leftovers from an earlier failed run
            remove_path(extract_dir)
            with zipfile.ZipFile(archive) as zf:
                zf.extractall(extract_dir)
        except (zipfile.BadZipFile, OSError) as e:
            raise ExtractionError(f"Failed to extract {archive}: {e}", e) from e

    def find_font_files(self, root: Path) -> List[Path]:
        try:
            return sorted(
                path
                for path in root.rglob("*")
                if path.is_file() and path.suffix.lower() == FONT_EXTENSION
            )
        except OSError as e:
            raise ExtractionError(f"Failed to enumerate fonts in {root}: {e}", e) from e

    def register_fonts(self, font_files: List[Path]) -> List[Path]:
        registered = []
        for font_file in font_files:
            if (self.registrar.fonts_dir / font_file.name).exists():
                logger.debug(f"{font_file.name} already present in system fonts; skipping.")
                continue
            try:
                self.registrar.register(font_file)
            except RegistrationError:
                raise
            except OSError as e:
                raise RegistrationError(
                    f"Failed to register {font_file.name}: {e}", e
                ) from e
            registered.append(font_file)
        return registered

    def _discard_temp_files(self, archive: Path, extract_dir: Path) -> None:
        for path in (extract_dir, archive):
            try:
                remove_path(path)
            except OSError as e:
                logger.warning(f"Could not remove temporary path {path}: {e}")
