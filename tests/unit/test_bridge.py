"""Unit tests for the front-end bridge, using a recording dialog host."""

import base64
import sys
from pathlib import Path

import pytest

from rishah.bridge import (
    ALL_FILES_FILTER,
    DRAWING_FILTER,
    Bridge,
    FileFilter,
    export_filter,
)
from rishah.config import AppConfig
from rishah.core.errors import MalformedSettingsError
from rishah.core.settings import SettingsStore
from rishah.generation import GenerationPipeline, GeneratorConfig, GeneratorNotFoundError


class RecordingDialogs:
    """DialogHost that records calls and returns canned answers."""

    def __init__(self, answer: str = "", confirm: bool = True):
        self.calls: list[tuple] = []
        self.answer = answer
        self.confirm = confirm

    def open_file(self, title, filters):
        self.calls.append(("open_file", title, filters))
        return self.answer

    def save_file(self, title, default_filename, filters):
        self.calls.append(("save_file", title, default_filename, filters))
        return self.answer

    def select_directory(self, title):
        self.calls.append(("select_directory", title))
        return self.answer

    def ask(self, title, message):
        self.calls.append(("ask", title, message))
        return self.confirm

    def inform(self, title, message):
        self.calls.append(("inform", title, message))

    def set_title(self, title):
        self.calls.append(("set_title", title))

    def quit(self):
        self.calls.append(("quit",))


@pytest.fixture
def bridge(config_root: Path, tmp_path: Path) -> Bridge:
    return Bridge(
        dialogs=RecordingDialogs(answer="/home/user/drawing.tldr"),
        settings=SettingsStore(config_dir=lambda: config_root),
        pipeline=GenerationPipeline(GeneratorConfig(
            script_name="generate.py",
            launcher=[sys.executable],
            program_dir=tmp_path / "program",
        )),
    )


class TestStartupDocument:
    """Test the startup document operation."""

    def test_no_args_returns_none(self, bridge):
        assert bridge.get_startup_file_content() is None

    def test_non_document_arg_returns_none(self, tmp_path):
        assert Bridge(startup_args=["somefile.txt"]).get_startup_file_content() is None

    def test_document_arg_returns_path_and_content(self, tmp_path):
        path = tmp_path / "test.tldr"
        content = '{"schema":{},"records":[],"tldrawFileFormatVersion":1}'
        path.write_text(content, encoding="utf-8")

        result = Bridge(startup_args=[str(path)]).get_startup_file_content()

        assert result == [str(path), content]


def test_settings_round_trip(bridge):
    assert bridge.load_settings() == "{}"

    bridge.save_settings('{"theme":"dark"}')

    assert bridge.load_settings() == '{"theme":"dark"}'


def test_invalid_settings_raise(bridge):
    with pytest.raises(MalformedSettingsError):
        bridge.save_settings("{invalid json")


def test_file_operations(bridge, tmp_path):
    path = str(tmp_path / "out.tldr")
    bridge.write_file(path, "hello world")
    assert bridge.read_file(path) == "hello world"

    export = str(tmp_path / "out.png")
    bridge.write_file_base64(export, base64.b64encode(b"Hello, World!").decode("ascii"))
    assert Path(export).read_bytes() == b"Hello, World!"


def test_generation_errors_surface(bridge, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(GeneratorNotFoundError):
        bridge.generate_image_with_ai(base64.b64encode(b"png").decode("ascii"), "all")


class TestDialogs:
    """Test dialog operations are delegated with fixed titles and filters."""

    def test_open_file_dialog(self, bridge):
        assert bridge.open_file_dialog() == "/home/user/drawing.tldr"
        assert bridge.dialogs.calls == [("open_file", "Open Drawing", [DRAWING_FILTER])]

    def test_save_file_dialog(self, bridge):
        bridge.save_file_dialog("Untitled.tldr")
        assert bridge.dialogs.calls == [
            ("save_file", "Save Drawing", "Untitled.tldr", [DRAWING_FILTER])
        ]

    def test_export_dialog_uses_format_filter(self, bridge):
        bridge.save_file_dialog_for_export("drawing.svg", "svg")
        _, title, name, filters = bridge.dialogs.calls[0]
        assert title == "Export Drawing"
        assert name == "drawing.svg"
        assert filters == [FileFilter("SVG Image (*.svg)", "*.svg")]

    def test_select_directory_dialog(self, bridge):
        bridge.select_directory_dialog()
        assert bridge.dialogs.calls == [("select_directory", "Select Output Directory")]

    def test_ask_dialog(self, bridge):
        assert bridge.ask_dialog("Unsaved changes", "Discard?") is True
        bridge.dialogs.confirm = False
        assert bridge.ask_dialog("Unsaved changes", "Discard?") is False

    def test_info_title_and_quit(self, bridge):
        bridge.info_dialog("About", "Rishah")
        bridge.set_title("drawing.tldr - Rishah")
        bridge.quit()
        assert bridge.dialogs.calls == [
            ("inform", "About", "Rishah"),
            ("set_title", "drawing.tldr - Rishah"),
            ("quit",),
        ]

    def test_missing_dialog_host(self):
        with pytest.raises(RuntimeError):
            Bridge().open_file_dialog()


class TestExportFilter:
    """Test export format to dialog filter mapping."""

    @pytest.mark.parametrize("format,pattern", [
        ("png", "*.png"),
        ("svg", "*.svg"),
        ("jpeg", "*.jpeg;*.jpg"),
        ("webp", "*.webp"),
        ("json", "*.json"),
        ("PNG", "*.png"),
    ])
    def test_known_formats(self, format, pattern):
        assert export_filter(format).pattern == pattern

    def test_unknown_format_allows_all_files(self):
        assert export_filter("bmp") is ALL_FILES_FILTER

    def test_qt_filter_string(self):
        assert DRAWING_FILTER.to_qt() == "TLDraw Files (*.tldr)"
        assert FileFilter("Drawings", "*.tldr;*.json").to_qt() == "Drawings (*.tldr *.json)"


class TestAppConfig:
    """Test environment-driven configuration."""

    def test_defaults(self):
        config = AppConfig.from_env({})
        assert config.log_level == "INFO"
        assert config.generator.launcher == ["npx", "tsx"]
        assert config.get_frontend_url().endswith("/frontend/dist/index.html")

    def test_overrides(self):
        config = AppConfig.from_env({
            "RISHAH_LOG_LEVEL": "debug",
            "RISHAH_FRONTEND_URL": "http://localhost:5173",
            "RISHAH_GENERATOR_LAUNCHER": "node --import tsx",
        })
        assert config.log_level == "DEBUG"
        assert config.get_frontend_url() == "http://localhost:5173"
        assert config.generator.launcher == ["node", "--import", "tsx"]
