"""Tests for the CLI."""

from pathlib import Path

from click.testing import CliRunner

from licenseit import __version__
from licenseit.cli import main


def test_cli_help() -> None:
    """Test that --help exits cleanly."""
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "preview" in result.output


def test_cli_no_args_shows_help() -> None:
    """Test that running without arguments prints help."""
    runner = CliRunner()
    result = runner.invoke(main, [])
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_cli_version() -> None:
    """Test that --version shows the version."""
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestGenerateCommand:
    """Tests for generating a license from the command line."""

    def test_template_as_first_argument(self, tmp_path: Path) -> None:
        """Test `licenseit MIT --author ...` writes MIT.txt."""
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["MIT", "--author", "Jane Doe", "--dir", str(tmp_path), "--date", "2024"],
        )

        assert result.exit_code == 0, result.output
        text = (tmp_path / "MIT.txt").read_text()
        assert text.startswith("MIT License\n\nCopyright (c) 2024 Jane Doe\n")
        assert "created" in result.output
        assert "Jane Doe" in result.output

    def test_explicit_generate_command(self, tmp_path: Path) -> None:
        """Test that `licenseit generate MIT` is equivalent."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["generate", "ISC", "-a", "Jane", "-d", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "ISC.txt").exists()

    def test_file_option(self, tmp_path: Path) -> None:
        """Test that --file overrides the output name."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["MIT", "-a", "Jane", "-d", str(tmp_path), "--file", "LICENSE"]
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "LICENSE").exists()
        assert not (tmp_path / "MIT.txt").exists()

    def test_md_template(self, tmp_path: Path) -> None:
        """Test that a markdown template produces a .md file."""
        runner = CliRunner()
        result = runner.invoke(main, ["CC-BY-4.0", "-a", "Jane", "-d", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "CC-BY-4.0.md").exists()

    def test_author_from_config_option(self, tmp_path: Path) -> None:
        """Test that --config supplies the author."""
        config = tmp_path / "config.json"
        config.write_text('{"author": "Configured Author"}')
        runner = CliRunner()
        result = runner.invoke(
            main, ["MIT", "--config", str(config), "-d", str(tmp_path / "out")]
        )

        assert result.exit_code == 0, result.output
        assert "Configured Author" in (tmp_path / "out" / "MIT.txt").read_text()

    def test_bad_config_warns_and_prompts(self, tmp_path: Path) -> None:
        """Test that an unreadable --config warns, then prompts."""
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["MIT", "-c", str(tmp_path / "missing.json"), "-d", str(tmp_path)],
            input="Prompted Author\n",
        )

        assert result.exit_code == 0, result.output
        assert "Warning" in result.output
        assert "Prompted Author" in (tmp_path / "MIT.txt").read_text()

    def test_prompt_for_author(self, tmp_path: Path) -> None:
        """Test that the author is prompted for when not provided."""
        runner = CliRunner()
        result = runner.invoke(
            main, ["MIT", "-d", str(tmp_path)], input="  Typed Name  \n"
        )

        assert result.exit_code == 0, result.output
        assert "enter the author's name" in result.output
        assert "Copyright (c)" in (tmp_path / "MIT.txt").read_text()
        assert "Typed Name" in (tmp_path / "MIT.txt").read_text()

    def test_missing_author(self, tmp_path: Path) -> None:
        """Test that an empty prompt answer fails with usage help."""
        runner = CliRunner()
        result = runner.invoke(main, ["MIT", "-d", str(tmp_path)], input="\n")

        assert result.exit_code == 1
        assert "Author is required" in result.output
        assert "--author" in result.output
        assert not (tmp_path / "MIT.txt").exists()

    def test_missing_template(self, tmp_path: Path) -> None:
        """Test that an unknown template exits non-zero without writing."""
        out_dir = tmp_path / "out"
        runner = CliRunner()
        result = runner.invoke(main, ["missing", "-a", "Jane", "-d", str(out_dir)])

        assert result.exit_code == 1
        assert "Error loading template" in result.output
        assert not out_dir.exists()

    def test_overwrite_declined(self, tmp_path: Path) -> None:
        """Test that answering no keeps the existing file."""
        existing = tmp_path / "MIT.txt"
        existing.write_text("original")
        runner = CliRunner()
        result = runner.invoke(
            main, ["MIT", "-a", "Jane", "-d", str(tmp_path)], input="n\n"
        )

        assert result.exit_code == 1
        assert "Overwrite?" in result.output
        assert existing.read_text() == "original"

    def test_overwrite_confirmed(self, tmp_path: Path) -> None:
        """Test that answering yes replaces the existing file."""
        existing = tmp_path / "MIT.txt"
        existing.write_text("original")
        runner = CliRunner()
        result = runner.invoke(
            main, ["MIT", "-a", "Jane", "-d", str(tmp_path)], input="y\n"
        )

        assert result.exit_code == 0, result.output
        assert "Jane" in existing.read_text()

    def test_yes_skips_confirmation(self, tmp_path: Path) -> None:
        """Test that --yes overwrites without asking."""
        existing = tmp_path / "MIT.txt"
        existing.write_text("original")
        runner = CliRunner()
        result = runner.invoke(main, ["MIT", "-a", "Jane", "-d", str(tmp_path), "-y"])

        assert result.exit_code == 0, result.output
        assert "Overwrite?" not in result.output
        assert "Jane" in existing.read_text()

    def test_config_directory_ignored_with_explicit_author(
        self, tmp_path: Path
    ) -> None:
        """Test that --config is not checked when --author is given."""
        config_dir = tmp_path / "confdir"
        config_dir.mkdir()
        out_dir = tmp_path / "out"
        runner = CliRunner()
        result = runner.invoke(
            main, ["MIT", "-a", "Jane", "-c", str(config_dir), "-d", str(out_dir)]
        )

        assert result.exit_code == 0, result.output
        assert "Warning" not in result.output
        assert "Jane" in (out_dir / "MIT.txt").read_text()

    def test_config_directory_warns_and_prompts(self, tmp_path: Path) -> None:
        """Test that an unreadable --config path only warns."""
        config_dir = tmp_path / "confdir"
        config_dir.mkdir()
        out_dir = tmp_path / "out"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["MIT", "-c", str(config_dir), "-d", str(out_dir)],
            input="Prompted Author\n",
        )

        assert result.exit_code == 0, result.output
        assert "Warning" in result.output
        assert "Prompted Author" in (out_dir / "MIT.txt").read_text()

    def test_undecodable_author_bytes(self, tmp_path: Path) -> None:
        """Test that a non-UTF-8 byte in --author is written back as is."""
        runner = CliRunner()
        result = runner.invoke(main, ["MIT", "-a", "Jane\udcff", "-d", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert result.exception is None
        assert b"Jane\xff" in (tmp_path / "MIT.txt").read_bytes()

    def test_unencodable_author(self, tmp_path: Path) -> None:
        """Test that an author that cannot be encoded fails with a message."""
        runner = CliRunner()
        result = runner.invoke(main, ["MIT", "-a", "Jane\ud800", "-d", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error saving license" in result.output
        assert not (tmp_path / "MIT.txt").exists()

    def test_directory_error(self, tmp_path: Path) -> None:
        """Test that an uncreatable directory exits non-zero."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        runner = CliRunner()
        result = runner.invoke(main, ["MIT", "-a", "Jane", "-d", str(blocker / "sub")])

        assert result.exit_code == 1
        assert "Error saving license" in result.output


class TestPreviewCommand:
    """Tests for the preview command."""

    def test_lists_templates(self) -> None:
        """Test that preview lists bundled template names."""
        runner = CliRunner()
        result = runner.invoke(main, ["preview"])

        assert result.exit_code == 0
        assert "Available license templates" in result.output
        assert "MIT.txt" in result.output
        assert "CC-BY-4.0.md" in result.output

    def test_show_template(self) -> None:
        """Test that --show prints the raw template body."""
        runner = CliRunner()
        result = runner.invoke(main, ["preview", "--show", "MIT"])

        assert result.exit_code == 0
        assert "Copyright (c) {date} {author}" in result.output

    def test_show_missing_template(self) -> None:
        """Test that --show with an unknown name fails."""
        runner = CliRunner()
        result = runner.invoke(main, ["preview", "--show", "missing"])

        assert result.exit_code == 1
        assert "Error loading template" in result.output
