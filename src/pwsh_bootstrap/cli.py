# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: cli.py
# author: dunamismax
# version: 1.0.0
# date: 10-19-2026
# github: https://github.com/dunamismax
# description: Typer command line interface for the bootstrap.
# -----------------------------------------------------------------------------
import logging
from pathlib import Path
from typing import Optional

import typer

from pwsh_bootstrap.bootstrap import BootstrapSetup, build_font_installer
from pwsh_bootstrap.config import settings
from pwsh_bootstrap.console import print_error, print_success, print_warning
from pwsh_bootstrap.fonts import FontRequest, InstallError, InstallOutcome
from pwsh_bootstrap.logging_config import setup_logging
from pwsh_bootstrap.preflight import ConnectivityChecker, PrivilegeChecker
from pwsh_bootstrap.profile import ProfileError, ProfileManager

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Bootstrap a PowerShell environment: profile, Oh My Posh, Nerd Font and tools."
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        settings.LOG_LEVEL, "--log-level", "-L", help="Console logging level."
    ),
) -> None:
    """
    Run the full setup when no subcommand is given.
    """
    setup_logging(log_level, settings.LOG_FILE)
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@app.command()
def run() -> None:
    """Run every setup step (requires administrator rights)."""
    try:
        code = BootstrapSetup(settings).run()
    except KeyboardInterrupt:
        print_warning("Process interrupted by user.")
        raise typer.Exit(code=130)
    raise typer.Exit(code=code)


@app.command("install-font")
def install_font(
    font_name: str = typer.Option(
        settings.FONT_NAME, "--font-name", help="Release artifact name."
    ),
    display_name: str = typer.Option(
        settings.FONT_DISPLAY_NAME,
        "--display-name",
        help="Family name the font registers under.",
    ),
    version: str = typer.Option(
        settings.FONT_VERSION, "--version", help="Nerd Fonts release version."
    ),
) -> None:
    """Install a Nerd Font unless its family is already registered."""
    request = FontRequest(font_name, display_name, version)
    try:
        outcome = build_font_installer(settings).install(request)
    except InstallError as e:
        logger.debug("Font installation failed", exc_info=True)
        print_error(f"Failed to install {display_name} ({e.kind}): {e}")
        raise typer.Exit(code=1)

    if outcome is InstallOutcome.ALREADY_PRESENT:
        print_success(f"Font {display_name} already installed.")
    else:
        print_success(f"Font {display_name} installed successfully.")


@app.command()
def profile(
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Profile file to replace."
    ),
) -> None:
    """Back up the PowerShell profile and download the hosted one."""
    manager = ProfileManager(settings.PROFILE_URL, settings.resolve_profile_path())
    try:
        written = manager.update(path)
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_success(f"Profile written to {written}")


@app.command()
def check() -> None:
    """Report administrator rights and network connectivity."""
    ok = True
    if PrivilegeChecker().is_admin():
        print_success("Running with administrator privileges.")
    else:
        print_error("Not running as administrator.")
        ok = False

    host = settings.CONNECTIVITY_HOST
    if ConnectivityChecker(host).check():
        print_success(f"Network connectivity verified via {host}.")
    else:
        print_error(f"No network connectivity to {host}.")
        ok = False

    if not ok:
        raise typer.Exit(code=1)


def entrypoint() -> None:
    app()


if __name__ == "__main__":
    entrypoint()
