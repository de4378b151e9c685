"""Tests for the bundled writers"""

import io
from unittest.mock import Mock

from timberlog.formatters import ColorFormatter
from timberlog.writers import (
    BaseWriter,
    ColorWriter,
    ConsoleColorWriter,
    ConsoleWriter,
    FileWriter,
    supports_color,
)


class TestConsoleWriter:
    """Test console output."""

    def test_write_appends_newline(self):
        stream = io.StringIO()
        ConsoleWriter(stream).write("hello")
        assert stream.getvalue() == "hello\n"

    def test_defaults_to_stderr(self, capsys):
        ConsoleWriter().write("to stderr")
        captured = capsys.readouterr()
        assert captured.err == "to stderr\n"
        assert captured.out == ""

    def test_color_writer_plain_write(self):
        stream = io.StringIO()
        ConsoleColorWriter(stream).write("plain")
        assert stream.getvalue() == "plain\n"

    def test_color_writer_colored_write(self):
        stream = io.StringIO()
        ConsoleColorWriter(stream).write_colored("alert", ColorFormatter("red"))
        assert stream.getvalue() == "\033[31malert\033[0m\n"

    def test_color_writer_accepts_any_formatter(self):
        stream = io.StringIO()
        formatter = Mock()
        formatter.format.return_value = "<styled>"
        ConsoleColorWriter(stream).write_colored("x", formatter)

        formatter.format.assert_called_once_with("x")
        assert stream.getvalue() == "<styled>\n"


class TestFileWriter:
    """Test file output."""

    def test_write_and_close(self, tmp_path):
        path = tmp_path / "nested" / "app.log"
        with FileWriter(str(path)) as writer:
            writer.write("one")
            writer.write("two")

        assert path.read_text(encoding="utf-8") == "one\ntwo\n"

    def test_appends_to_existing(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("old\n", encoding="utf-8")
        writer = FileWriter(str(path))
        writer.write("new")
        writer.close()

        assert path.read_text(encoding="utf-8") == "old\nnew\n"

    def test_write_after_close_ignored(self, tmp_path):
        path = tmp_path / "app.log"
        writer = FileWriter(str(path))
        writer.close()
        writer.write("late")
        writer.close()

        assert path.read_text(encoding="utf-8") == ""


class TestCapabilities:
    """Test color capability detection."""

    def test_bundled_writers(self, tmp_path):
        file_writer = FileWriter(str(tmp_path / "a.log"))
        assert supports_color(ConsoleColorWriter())
        assert not supports_color(ConsoleWriter())
        assert not supports_color(file_writer)
        file_writer.close()

    def test_duck_typed_writers(self):
        class Plain:
            def write(self, message):
                pass

        class Colored(Plain):
            def write_colored(self, message, color_formatter):
                pass

        class NotCallable(Plain):
            write_colored = "nope"

        assert not supports_color(Plain())
        assert supports_color(Colored())
        assert not supports_color(NotCallable())
        assert not supports_color(Mock(spec=["write"]))

    def test_abstract_base_classes(self):
        class Minimal(ColorWriter):
            def write(self, message):
                self.last = ("plain", message)

            def write_colored(self, message, color_formatter):
                self.last = ("colored", message)

        writer = Minimal()
        assert isinstance(writer, BaseWriter)
        assert supports_color(writer)
        writer.flush()
        writer.close()
