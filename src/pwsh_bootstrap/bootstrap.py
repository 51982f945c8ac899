# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: bootstrap.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Ordered bootstrap steps with per-step status tracking.
# -----------------------------------------------------------------------------
import datetime
import logging
import time
from typing import Callable, Dict, Optional

from pwsh_bootstrap import APP_NAME, VERSION
from pwsh_bootstrap.config import AppSettings
from pwsh_bootstrap.console import (
    console,
    create_header,
    print_error,
    print_section,
    print_status_report,
    print_step,
    print_success,
    print_warning,
)
from pwsh_bootstrap.fonts import (
    FontCatalog,
    FontInstaller,
    FontRequest,
    InstallError,
    InstallOutcome,
    PowerShellFontCatalog,
    WindowsFontRegistrar,
)
from pwsh_bootstrap.packages import PackageInstaller
from pwsh_bootstrap.preflight import ConnectivityChecker, PrivilegeChecker
from pwsh_bootstrap.profile import ProfileError, ProfileManager

logger = logging.getLogger(__name__)

STEP_DESCRIPTIONS: Dict[str, str] = {
    "preflight": "Pre-flight Checks",
    "profile": "PowerShell Profile",
    "oh_my_posh": "Oh My Posh",
    "font": "Nerd Font",
    "verify": "Setup Verification",
    "chocolatey": "Chocolatey",
    "terminal_icons": "Terminal-Icons Module",
    "zoxide": "zoxide",
}


def font_request_from_settings(settings: AppSettings) -> FontRequest:
    return FontRequest(
        font_name=settings.FONT_NAME,
        display_name=settings.FONT_DISPLAY_NAME,
        version=settings.FONT_VERSION,
    )


def build_font_installer(
    settings: AppSettings, catalog: Optional[FontCatalog] = None
) -> FontInstaller:
    return FontInstaller(
        catalog=catalog or PowerShellFontCatalog(),
        registrar=WindowsFontRegistrar(),
        base_url=settings.NERD_FONTS_BASE_URL,
        timeout=settings.DOWNLOAD_TIMEOUT,
    )


class BootstrapSetup:
    def __init__(
        self,
        settings: AppSettings,
        privilege: Optional[PrivilegeChecker] = None,
        connectivity: Optional[ConnectivityChecker] = None,
        profile_manager: Optional[ProfileManager] = None,
        packages: Optional[PackageInstaller] = None,
        catalog: Optional[FontCatalog] = None,
        font_installer: Optional[FontInstaller] = None,
    ) -> None:
        self.settings = settings
        self.privilege = privilege or PrivilegeChecker()
        self.connectivity = connectivity or ConnectivityChecker(
            settings.CONNECTIVITY_HOST
        )
        self.profile_manager = profile_manager or ProfileManager(
            settings.PROFILE_URL, settings.resolve_profile_path()
        )
        self.packages = packages or PackageInstaller(settings.CHOCOLATEY_INSTALL_URL)
        self.catalog = catalog or PowerShellFontCatalog()
        self.font_installer = font_installer or build_font_installer(
            settings, self.catalog
        )
        self.status: Dict[str, Dict[str, str]] = {
            task: {"status": "pending", "message": ""} for task in STEP_DESCRIPTIONS
        }
        self.success = True

    def set_status(self, task: str, status: str, message: str = "") -> None:
        self.status[task] = {"status": status, "message": message}

    def run_step(self, task: str, func: Callable[[], bool]) -> bool:
        """Run one non-fatal step, recording its outcome instead of raising."""
        description = STEP_DESCRIPTIONS[task]
        print_step(f"{description}...")
        self.set_status(task, "in_progress", f"{description} in progress...")
        start_time = time.time()
        try:
            ok = func()
        except Exception as e:
            logger.error(f"{description} error: {e}")
            ok = False
            message = f"{description} failed: {e}"
        else:
            message = (
                f"{description} completed successfully."
                if ok
                else f"{description} failed."
            )
        elapsed = time.time() - start_time

        if ok:
            print_success(f"{description} completed in {elapsed:.2f}s")
            self.set_status(task, "success", message)
        else:
            print_error(f"{description} failed in {elapsed:.2f}s")
            self.set_status(task, "failed", message)
            self.success = False
        return ok

    #####################################
    # Steps
    #####################################

    def preflight(self) -> bool:
        if not self.privilege.is_admin():
            print_error("This script must be run as administrator.")
            self.set_status("preflight", "failed", "Administrator privileges required")
            return False
        logger.info("Administrator privileges confirmed.")

        if not self.connectivity.check():
            print_error(
                "Internet connection is required but not available. "
                "Please check your connection."
            )
            self.set_status("preflight", "failed", "Network check failed")
            return False

        self.set_status("preflight", "success", "Administrator and network OK")
        return True

    def update_profile(self) -> bool:
        try:
            self.profile_manager.update()
        except ProfileError as e:
            logger.error(str(e))
            return False
        return True

    def install_oh_my_posh(self) -> bool:
        return self.packages.winget_install(self.settings.OH_MY_POSH_ID)

    def install_font(self) -> bool:
        request = font_request_from_settings(self.settings)
        try:
            outcome = self.font_installer.install(request)
        except InstallError as e:
            logger.error(f"Failed to install {request.display_name} ({e.kind}): {e}")
            return False
        if outcome is InstallOutcome.ALREADY_PRESENT:
            logger.info(f"Font {request.display_name} already installed.")
        else:
            logger.info(f"Font {request.display_name} installed successfully.")
        return True

    def verify(self) -> bool:
        checks = {
            "profile": self.settings.resolve_profile_path().is_file(),
            "oh_my_posh": self.packages.winget_is_installed(
                self.settings.OH_MY_POSH_NAME
            ),
        }
        try:
            checks["font"] = (
                self.settings.FONT_DISPLAY_NAME
                in self.catalog.list_installed_families()
            )
        except InstallError as e:
            logger.warning(f"Could not query installed fonts: {e}")
            checks["font"] = False

        missing = [name for name, ok in checks.items() if not ok]
        if missing:
            logger.warning(
                f"Setup completed with errors; missing: {', '.join(missing)}"
            )
            return False
        logger.info(
            "Setup completed successfully. Please restart your PowerShell "
            "session to apply changes."
        )
        return True

    def install_chocolatey(self) -> bool:
        return self.packages.install_chocolatey()

    def install_terminal_icons(self) -> bool:
        return self.packages.install_module(self.settings.TERMINAL_ICONS_MODULE)

    def install_zoxide(self) -> bool:
        return self.packages.winget_install(self.settings.ZOXIDE_ID)

    #####################################
    # Driver
    #####################################

    def run(self) -> int:
        start_time = time.time()
        console.print(create_header(APP_NAME, VERSION))
        logger.info(f"Starting {APP_NAME} v{VERSION} at {datetime.datetime.now()}")

        print_section("Pre-flight Checks")
        if not self.preflight():
            print_status_report(self.status, STEP_DESCRIPTIONS)
            return 1

        print_section("Profile & Prompt")
        self.run_step("profile", self.update_profile)
        self.run_step("oh_my_posh", self.install_oh_my_posh)
        self.run_step("font", self.install_font)
        self.run_step("verify", self.verify)

        print_section("Package Managers & Modules")
        self.run_step("chocolatey", self.install_chocolatey)
        self.run_step("terminal_icons", self.install_terminal_icons)
        self.run_step("zoxide", self.install_zoxide)

        minutes, seconds = divmod(time.time() - start_time, 60)
        if self.success:
            logger.info(f"Setup completed successfully in {int(minutes)}m {int(seconds)}s.")
        else:
            print_warning(
                f"Setup completed with warnings in {int(minutes)}m {int(seconds)}s."
            )
        print_status_report(self.status, STEP_DESCRIPTIONS)
        return 0 if self.success else 1
