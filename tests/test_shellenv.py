"""Tests for shell integration output (wt shellenv)."""

import pytest
from typer.testing import CliRunner

from tree_me.cli import app
from tree_me.shell import CD_MARKER, Shell, cd_marker, detect_shell, render_shellenv

runner = CliRunner()


class TestCdMarker:
    def test_marker_format(self):
        assert cd_marker("/wt/repo/feature-x") == "TREE_ME_CD:/wt/repo/feature-x"

    def test_path_with_colon_survives_cut(self):
        # the shell splits on the first colon only (cut -d: -f2-)
        line = cd_marker("/tmp/a:b")
        assert line.split(":", 1)[1] == "/tmp/a:b"


class TestDetectShell:
    @pytest.mark.parametrize(
        ("environ", "os_name", "expected"),
        [
            ({"SHELL": "/usr/bin/fish"}, "posix", Shell.FISH),
            ({"SHELL": "/opt/homebrew/bin/fish"}, "posix", Shell.FISH),
            ({"SHELL": "/bin/zsh"}, "posix", Shell.POSIX),
            ({"SHELL": "/bin/bash"}, "posix", Shell.POSIX),
            ({}, "posix", Shell.POSIX),
            ({}, "nt", Shell.PWSH),
        ],
    )
    def test_detection(self, environ, os_name, expected):
        assert detect_shell(environ, os_name) is expected


class TestPosixSnippet:
    @pytest.fixture
    def snippet(self):
        return render_shellenv(Shell.POSIX)

    def test_bash_and_zsh_share_snippet(self, snippet):
        assert render_shellenv(Shell.BASH) == snippet
        assert render_shellenv(Shell.ZSH) == snippet

    def test_defines_wrapper_function(self, snippet):
        assert "wt() {" in snippet

    def test_output_is_logged_not_captured(self, snippet):
        """Interactive pickers need a terminal, so output is teed through a log file."""
        assert 'log_file=$(mktemp' in snippet
        assert "script -q" in snippet
        assert "$(command wt" not in snippet

    def test_extracts_last_marker(self, snippet):
        assert f"cd_path=$(grep '^{CD_MARKER}' \"$log_file\" | tail -n 1" in snippet

    def test_cds_only_on_success(self, snippet):
        assert '[ $exit_code -eq 0 ] && [ -n "$cd_path" ]' in snippet
        assert "return $exit_code" in snippet

    def test_no_special_cased_commands(self, snippet):
        # every subcommand goes through the same path
        assert 'if [ "$1" = "pr" ]' not in snippet
        assert "case \"$1\"" not in snippet

    def test_bash_completion(self, snippet):
        assert "complete -F _wt_complete wt" in snippet
        assert "checkout co create pr mr list ls remove rm prune shellenv version" in snippet

    def test_zsh_compdef_is_guarded(self, snippet):
        assert "if (( $+functions[compdef] )); then" in snippet

    def test_completes_worktree_branches(self, snippet):
        assert "git worktree list" in snippet
        assert "checkout|co|remove|rm)" in snippet


class TestOtherShells:
    def test_fish(self):
        snippet = render_shellenv(Shell.FISH)
        assert "function wt" in snippet
        assert "grep '^TREE_ME_CD:'" in snippet
        assert "complete -c wt" in snippet

    def test_pwsh(self):
        snippet = render_shellenv(Shell.PWSH)
        assert "function wt" in snippet
        assert "'TREE_ME_CD:*'" in snippet
        assert "Set-Location" in snippet
        assert "Register-ArgumentCompleter" in snippet


class TestShellenvCommand:
    def test_default_detects_shell(self):
        result = runner.invoke(app, ["shellenv"], env={"SHELL": "/bin/bash"})
        assert result.exit_code == 0
        assert result.output == render_shellenv(Shell.POSIX)

    def test_explicit_shell(self):
        result = runner.invoke(app, ["shellenv", "--shell", "fish"])
        assert result.exit_code == 0
        assert result.output == render_shellenv(Shell.FISH)

    def test_shell_option_is_case_insensitive(self):
        result = runner.invoke(app, ["shellenv", "-s", "PWSH"])
        assert result.exit_code == 0
        assert "Set-Location" in result.output

    def test_unknown_shell_is_usage_error(self):
        result = runner.invoke(app, ["shellenv", "--shell", "tcsh"])
        assert result.exit_code == 2
