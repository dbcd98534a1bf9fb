"""Tests for the command-line interface."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cvwork import cli, cli_gather
from cvwork.cli_config import RenderStage, UserConfig


class TestGatherUserRequirements:
    """Tests for argument parsing (phase 1)."""

    def test_minimal_arguments(self):
        config = cli_gather.gather_user_requirements(["--data", "in.json", "--output", "out.docx"])
        assert config.render == RenderStage(data=Path("in.json"), output=Path("out.docx"))
        assert config.strict is False
        assert config.debug is False
        assert config.verbosity == 0

    def test_all_render_options(self):
        config = cli_gather.gather_user_requirements([
            "--data", "in.json",
            "--output", "out.txt",
            "--renderer", "text",
            "--title", "Jobs",
            "--marker", "*",
            "--date-format", "%Y",
            "--width", "100",
            "--strict",
            "--verbosity", "2",
            "--log-file", "run.log",
        ])
        stage = config.render
        assert stage.renderer == "text"
        assert stage.title == "Jobs"
        assert stage.marker == "*"
        assert stage.date_format == "%Y"
        assert stage.width == 100
        assert config.strict is True
        assert config.verbosity == 2
        assert config.log_file == "run.log"

    def test_list_renderers_needs_no_paths(self):
        config = cli_gather.gather_user_requirements(["--list-renderers"])
        assert config.list_renderers is True
        assert config.render is None

    def test_missing_paths_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            cli_gather.gather_user_requirements(["--data", "in.json"])
        assert exc_info.value.code == 2

    def test_docx_template_requires_template(self):
        with pytest.raises(SystemExit):
            cli_gather.gather_user_requirements(
                ["--data", "in.json", "--output", "o.docx", "--renderer", "docx-template"]
            )


class TestRenderStage:
    """Tests for RenderStage.renderer_kwargs."""

    def test_no_kwargs_by_default(self):
        assert RenderStage(data=Path("a"), output=Path("b")).renderer_kwargs() == {}

    def test_template_and_width(self):
        stage = RenderStage(data=Path("a"), output=Path("b"), template=Path("t.docx"), width=60)
        assert stage.renderer_kwargs() == {"template_path": Path("t.docx"), "width": 60}


class TestMainFunction:
    """Tests for the main CLI entry point."""

    @patch('cvwork.cli.execute')
    @patch('cvwork.cli.gather_user_requirements')
    def test_main_success(self, mock_gather, mock_execute):
        """main() returns the exit code from execute()."""
        mock_config = MagicMock()
        mock_config.log_file = None
        mock_config.debug = False
        mock_config.verbosity = 0
        mock_gather.return_value = mock_config
        mock_execute.return_value = 0

        assert cli.main(["--data", "a.json", "--output", "b.docx"]) == 0
        mock_execute.assert_called_once_with(mock_config)

    @patch('cvwork.cli.execute')
    @patch('cvwork.cli.gather_user_requirements')
    def test_main_returns_1_on_exception(self, mock_gather, mock_execute, caplog):
        """main() logs the error and returns 1 when execution raises."""
        mock_config = MagicMock()
        mock_config.log_file = None
        mock_config.debug = True
        mock_config.verbosity = 0
        mock_gather.return_value = mock_config
        mock_execute.side_effect = ValueError("boom")

        with caplog.at_level("ERROR", logger="cvwork"):
            assert cli.main([]) == 1
        assert "boom" in caplog.text
        assert "Traceback" in caplog.text

    def test_render_docx(self, make_section_json, section_data, tmp_path):
        out = tmp_path / "out" / "cv.docx"
        code = cli.main(["--data", str(make_section_json(section_data)), "--output", str(out)])
        assert code == 0
        assert out.exists()

    def test_render_text_with_options(self, make_section_json, section_data, tmp_path):
        out = tmp_path / "cv.txt"
        code = cli.main([
            "--data", str(make_section_json(section_data)),
            "--output", str(out),
            "--renderer", "text",
            "--title", "Jobs",
            "--marker", "*",
            "--width", "40",
        ])
        assert code == 0
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "**Jobs**"
        assert lines[1].startswith("* _Owner_")

    def test_width_with_docx_renderer_is_ignored(self, make_section_json, section_data, tmp_path, caplog):
        out = tmp_path / "cv.docx"
        with caplog.at_level("WARNING", logger="cvwork"):
            code = cli.main([
                "--data", str(make_section_json(section_data)),
                "--output", str(out),
                "--width", "100",
            ])
        assert code == 0
        assert out.exists()
        assert "ignores option 'width'" in caplog.text

    def test_template_with_text_renderer_is_ignored(self, make_section_json, section_data, tmp_path, caplog):
        out = tmp_path / "cv.txt"
        with caplog.at_level("WARNING", logger="cvwork"):
            code = cli.main([
                "--data", str(make_section_json(section_data)),
                "--output", str(out),
                "--renderer", "text",
                "--template", str(tmp_path / "t.docx"),
            ])
        assert code == 0
        assert out.read_text(encoding="utf-8").startswith("**Experience**")
        assert "ignores option 'template_path'" in caplog.text

    def test_missing_input_returns_1(self, tmp_path):
        code = cli.main(["--data", str(tmp_path / "missing.json"), "--output", str(tmp_path / "o.docx")])
        assert code == 1

    def test_unknown_renderer_returns_1(self, make_section_json, tmp_path):
        code = cli.main([
            "--data", str(make_section_json({})),
            "--output", str(tmp_path / "o"),
            "--renderer", "nope",
        ])
        assert code == 1

    def test_strict_mode_fails_on_warnings(self, make_section_json, tmp_path):
        data = make_section_json({"entries": [{"body": "x", "pay": 1}]})
        args = ["--data", str(data), "--output", str(tmp_path / "o.txt"), "--renderer", "text"]
        assert cli.main(args) == 0
        assert cli.main(args + ["--strict"]) == 2

    def test_list_renderers(self, capsys):
        assert cli.main(["--list-renderers"]) == 0
        out = capsys.readouterr().out
        assert "docx" in out
        assert "docx-template" in out
        assert "text" in out

    def test_log_file_created(self, make_section_json, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        code = cli.main([
            "--data", str(make_section_json({})),
            "--output", str(tmp_path / "o.txt"),
            "--renderer", "text",
            "--log-file", str(log_file),
        ])
        assert code == 0
        assert log_file.exists()
        for handler in list(logging.root.handlers):
            if isinstance(handler, logging.FileHandler):
                logging.root.removeHandler(handler)
                handler.close()
