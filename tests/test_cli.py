"""Tests for the Typer command line interface."""

import pytest
from typer.testing import CliRunner

from pwsh_bootstrap import cli, logging_config
from pwsh_bootstrap.fonts import InstallOutcome, RegistrationError
from pwsh_bootstrap.profile import ProfileError

runner = CliRunner()


class StubInstaller:
    def __init__(self, outcome=InstallOutcome.INSTALLED, exc=None):
        self.outcome = outcome
        self.exc = exc
        self.requests = []

    def install(self, request):
        self.requests.append(request)
        if self.exc:
            raise self.exc
        return self.outcome


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch, test_settings):
    monkeypatch.setattr(cli, "settings", test_settings)
    monkeypatch.setattr(cli, "setup_logging", lambda level, log_file=None: None)


def use_installer(monkeypatch, installer):
    monkeypatch.setattr(cli, "build_font_installer", lambda settings: installer)


def test_install_font_success(monkeypatch):
    installer = StubInstaller()
    use_installer(monkeypatch, installer)

    result = runner.invoke(
        cli.app,
        ["install-font", "--font-name", "Hack", "--display-name", "Hack Nerd Font", "--version", "3.1.0"],
    )

    assert result.exit_code == 0
    assert "installed successfully" in result.output
    request = installer.requests[0]
    assert (request.font_name, request.display_name, request.version) == (
        "Hack",
        "Hack Nerd Font",
        "3.1.0",
    )


def test_install_font_already_present(monkeypatch):
    use_installer(monkeypatch, StubInstaller(InstallOutcome.ALREADY_PRESENT))

    result = runner.invoke(cli.app, ["install-font"])

    assert result.exit_code == 0
    assert "already installed" in result.output


def test_install_font_failure_exits_nonzero(monkeypatch):
    use_installer(
        monkeypatch, StubInstaller(exc=RegistrationError("Access is denied"))
    )

    result = runner.invoke(cli.app, ["install-font"])

    assert result.exit_code == 1
    assert "RegistrationError" in result.output


def test_profile_command_failure(monkeypatch):
    class FailingManager:
        def __init__(self, *args, **kwargs):
            pass

        def update(self, path=None):
            raise ProfileError("Failed to create or update the profile: offline")

    monkeypatch.setattr(cli, "ProfileManager", FailingManager)

    result = runner.invoke(cli.app, ["profile"])

    assert result.exit_code == 1


def test_check_reports_missing_admin(monkeypatch):
    monkeypatch.setattr(cli.PrivilegeChecker, "is_admin", lambda self: False)
    monkeypatch.setattr(cli.ConnectivityChecker, "check", lambda self, host=None: True)

    result = runner.invoke(cli.app, ["check"])

    assert result.exit_code == 1
    assert "Not running as administrator" in result.output


def test_check_all_good(monkeypatch):
    monkeypatch.setattr(cli.PrivilegeChecker, "is_admin", lambda self: True)
    monkeypatch.setattr(cli.ConnectivityChecker, "check", lambda self, host=None: True)

    result = runner.invoke(cli.app, ["check"])

    assert result.exit_code == 0


def test_no_subcommand_runs_full_setup(monkeypatch):
    runs = []

    class FakeSetup:
        def __init__(self, settings):
            runs.append(settings)

        def run(self):
            return 1

    monkeypatch.setattr(cli, "BootstrapSetup", FakeSetup)

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 1
    assert len(runs) == 1


def test_debug_logging_of_install_failure_does_not_crash(
    monkeypatch, restore_root_handlers
):
    monkeypatch.setattr(cli, "setup_logging", logging_config.setup_logging)
    use_installer(
        monkeypatch,
        StubInstaller(exc=RegistrationError("Access is denied", PermissionError(5))),
    )

    result = runner.invoke(cli.app, ["--log-level", "DEBUG", "install-font"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Font installation failed" in result.output
    assert "Failed to install" in result.output
    assert "RegistrationError" in result.output
