# =============================================================================
# test_cli.py - loxscan Command-Line Tests
# =============================================================================
# Tests for the loxscan CLI: input sources, listing output, error policy
# options and exit codes.
# =============================================================================

from pathlib import Path

from click.testing import CliRunner

from loxscan import __version__
from loxscan.cli.errors import ExitCode
from loxscan.cli.loxscan import main


class TestInputs:
    """Test the different ways of providing source text."""

    def test_scan_file(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("hello.lox").write_text('print "hello";\n')

            result = runner.invoke(main, ["hello.lox"])

            assert result.exit_code == ExitCode.SUCCESS, result.output
            assert "PRINT" in result.output
            assert "'\"hello\"'" in result.output
            assert "EOF" in result.output

    def test_scan_expr(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "var a = 1;"])
        assert result.exit_code == 0, result.output
        assert "   1 VAR                3 'var'" in result.output
        assert "   | SEMICOLON          1 ';'" in result.output

    def test_scan_stdin(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-"], input="while (true) {}\n")
        assert result.exit_code == 0, result.output
        assert "WHILE" in result.output
        assert "TRUE" in result.output

    def test_file_and_expr_rejected(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("a.lox").write_text("")
            result = runner.invoke(main, ["a.lox", "-e", "x"])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_missing_file(self):
        runner = CliRunner()
        result = runner.invoke(main, ["does-not-exist.lox"])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestErrorReporting:
    """Test scan error output and exit codes."""

    def test_bad_character_exit_code(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "var a @ 1;"])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "<expr>:1:7: error: unexpected character '@'" in result.output
        assert "1 error" in result.output

    def test_keep_going_lists_whole_file(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "@ x # y"])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "IDENTIFIER" in result.output
        assert "2 errors" in result.output

    def test_stop_on_error(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--stop-on-error", "-e", "@ x # y"])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "unexpected character '@'" in result.output
        assert "unexpected character '#'" not in result.output

    def test_max_errors(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--max-errors", "1", "-e", "@ @ @"])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "1 error" in result.output

    def test_negative_max_errors_rejected(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--max-errors", "-1", "-e", "x"])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_unterminated_string(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", 'print "abc'])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "unterminated string literal" in result.output


class TestOutputOptions:
    """Test quiet and verbose modes."""

    def test_quiet_suppresses_listing(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-q", "-e", "var a;"])
        assert result.exit_code == 0
        assert "VAR" not in result.output

    def test_verbose_summary(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-v", "-e", "a b"])
        assert result.exit_code == 0, result.output
        assert "Tokenized: 3 tokens" in result.output
