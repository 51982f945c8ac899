"""
pytest fixtures: fake font catalog, registrar and HTTP session, plus
Nerd Font style release archives built inside ``tmp_path``.
"""

import io
import logging
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Set

import pytest
import requests

from pwsh_bootstrap.config import AppSettings
from pwsh_bootstrap.fonts import FontCatalog, FontRegistrar, FontRequest, QueryError

FONT_FILES = [
    "CaskaydiaCoveNerdFont-Regular.ttf",
    "CaskaydiaCoveNerdFont-Bold.ttf",
]


class FakeCatalog(FontCatalog):
    def __init__(self, families: Optional[Set[str]] = None, fail: bool = False):
        self.families = set(families or ())
        self.fail = fail
        self.calls = 0

    def list_installed_families(self) -> Set[str]:
        self.calls += 1
        if self.fail:
            raise QueryError("font catalog unavailable")
        return set(self.families)


class FakeRegistrar(FontRegistrar):
    """Copies fonts into ``fonts_dir`` and publishes the family to the catalog."""

    def __init__(
        self,
        fonts_dir: Path,
        catalog: Optional[FakeCatalog] = None,
        family: Optional[str] = None,
        fail_on: Optional[str] = None,
    ):
        self.fonts_dir = fonts_dir
        self.catalog = catalog
        self.family = family
        self.fail_on = fail_on
        self.registered: List[str] = []

    def register(self, font_path: Path) -> None:
        if font_path.name == self.fail_on:
            raise PermissionError(f"Access denied: {font_path.name}")
        (self.fonts_dir / font_path.name).write_bytes(font_path.read_bytes())
        self.registered.append(font_path.name)
        if self.catalog is not None and self.family:
            self.catalog.families.add(self.family)


class FakeResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200):
        self.content = content
        self.status_code = status_code
        self.headers = {"content-length": str(len(content))}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i : i + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeSession:
    def __init__(self, responses: Optional[Dict[str, object]] = None):
        self.responses = responses or {}
        self.calls: List[str] = []

    def get(self, url: str, **kwargs):
        self.calls.append(url)
        response = self.responses.get(url, FakeResponse(status_code=404))
        if isinstance(response, Exception):
            raise response
        return response


def build_font_zip(files: Optional[Dict[str, bytes]] = None) -> bytes:
    if files is None:
        files = {name: b"\x00\x01\x00\x00" + name.encode() for name in FONT_FILES}
        files["LICENSE"] = b"SIL Open Font License"
        files["readme.md"] = b"# Caskaydia Cove"
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, data in files.items():
            zf.writestr(name, data)
    return buffer.getvalue()


@pytest.fixture
def font_request() -> FontRequest:
    return FontRequest("CascadiaCode", "CaskaydiaCove NF", "3.2.1")


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    path = tmp_path / "temp"
    path.mkdir()
    return path


@pytest.fixture
def fonts_dir(tmp_path: Path) -> Path:
    path = tmp_path / "Fonts"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        LOG_FILE=str(tmp_path / "logs" / "pwsh_bootstrap.log"),
        PROFILE_PATH=str(tmp_path / "Documents" / "PowerShell" / "profile.ps1"),
    )


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in saved[0]:
        root.addHandler(handler)
    root.setLevel(saved[1])
