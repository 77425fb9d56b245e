"""Tests for commitmuse.cli module."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from typer.testing import CliRunner

from commitmuse.cli import app
from commitmuse.config import API_KEY_ENV_VARS
from commitmuse.failures import FailureKind
from commitmuse.git import GitError
from commitmuse.cli.utils import get_current_branch_safe
from commitmuse.global_config import (
    GlobalConfigError,
    get_config_file_path,
    get_credential,
    load_global_config,
    save_global_config,
)
from commitmuse.llm import LLMError


runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, mocker):
    """Keep real keys, .env files and git branch lookups out of CLI tests."""
    for env_var in API_KEY_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    mocker.patch("commitmuse.global_config.load_dotenv")
    mocker.patch("commitmuse.cli.utils.get_current_branch_safe", return_value="main")


class TestMainCommand:
    """Tests for the default generate command."""

    def test_offline_generation(self, mocker, temp_dir, file_diff):
        """Test generating a message locally with --offline."""
        mocker.patch("commitmuse.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch(
            "commitmuse.cli.main.get_staged_diff",
            return_value=file_diff("tests/test_login.py", added=12, line="assert login()"),
        )

        result = runner.invoke(app, ["--offline"])

        assert result.exit_code == 0
        assert "test(tests): test test_login" in result.output
        assert "=" * 60 in result.output

    def test_passes_style_and_overrides(self, mocker, temp_dir, sample_diff):
        mocker.patch("commitmuse.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.main.get_staged_diff", return_value=sample_diff)
        mock_generate = mocker.patch(
            "commitmuse.cli.main.generate_commit_message",
            new_callable=AsyncMock,
            return_value="✨ Add helper",
        )

        result = runner.invoke(app, ["--style", "emoji", "--provider", "anthropic", "--model", "claude-3-5-sonnet-latest"])

        assert result.exit_code == 0
        assert "✨ Add helper" in result.output
        diff, style_id, provider_config, _ = mock_generate.await_args.args
        assert diff == sample_diff
        assert style_id == "emoji"
        assert provider_config.provider == "anthropic"
        assert provider_config.model == "claude-3-5-sonnet-latest"

    def test_uses_configured_style(self, mocker, temp_dir, sample_diff):
        save_global_config({"style": "custom", "custom_instruction": "Rhyme."})
        mocker.patch("commitmuse.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.main.get_staged_diff", return_value=sample_diff)
        mock_generate = mocker.patch(
            "commitmuse.cli.main.generate_commit_message",
            new_callable=AsyncMock,
            return_value="added a line, feeling fine",
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        _, style_id, _, custom_instruction = mock_generate.await_args.args
        assert style_id == "custom"
        assert custom_instruction == "Rhyme."

    def test_nothing_staged(self, mocker, temp_dir):
        """Test the git-style message when nothing is staged."""
        mock_branch = mocker.patch("commitmuse.cli.utils.get_current_branch_safe", return_value="feature/login")
        mocker.patch("commitmuse.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.main.get_staged_diff", return_value=None)
        mock_generate = mocker.patch("commitmuse.cli.main.generate_commit_message", new_callable=AsyncMock)

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "nothing to commit" in result.output
        assert "On branch feature/login" in result.output
        mock_branch.assert_called_once_with(temp_dir)
        mock_generate.assert_not_called()

    def test_missing_key(self, mocker, temp_dir, sample_diff):
        """Test that a missing key is reported with a hint."""
        mocker.patch("commitmuse.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.main.get_staged_diff", return_value=sample_diff)

        result = runner.invoke(app, ["--provider", "mistral"])

        assert result.exit_code == 1
        assert "Mistral API key not configured" in result.output

    def test_backend_error(self, mocker, temp_dir, sample_diff):
        mocker.patch("commitmuse.cli.main.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.main.get_staged_diff", return_value=sample_diff)
        mocker.patch(
            "commitmuse.cli.main.generate_commit_message",
            new_callable=AsyncMock,
            side_effect=LLMError.of(FailureKind.INVALID_CREDENTIALS, "openai", 401),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Invalid OpenAI API key" in result.output

    def test_git_error(self, mocker):
        mocker.patch("commitmuse.cli.main.get_repo_root", side_effect=GitError("not a repo"))

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Git error" in result.output


class TestSummarizeCommand:
    """Tests for commitmuse summarize."""

    def test_offline_summary(self, mocker, temp_dir, sample_diff):
        mocker.patch("commitmuse.cli.summarize.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.summarize.get_branch_diff", return_value=sample_diff)

        result = runner.invoke(app, ["summarize", "--offline"])

        assert result.exit_code == 0
        assert "Updates 2 files with 6 additions and 1 deletion." in result.output

    def test_on_trunk(self, mocker, temp_dir):
        mocker.patch("commitmuse.cli.summarize.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.summarize.get_branch_diff", return_value=None)

        result = runner.invoke(app, ["summarize"])

        assert result.exit_code == 1
        assert "Nothing to summarize" in result.output


class TestCommitCommand:
    """Tests for commitmuse commit."""

    def test_commit_with_yes(self, mocker, temp_dir, sample_diff):
        """Test that --yes commits the generated message through git."""
        mocker.patch("commitmuse.cli.commit.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.commit.get_staged_diff", return_value=sample_diff)
        mocker.patch(
            "commitmuse.cli.commit.generate_commit_message",
            new_callable=AsyncMock,
            return_value="feat: add helper",
        )
        mock_run = mocker.patch(
            "commitmuse.cli.commit.subprocess.run",
            return_value=MagicMock(returncode=0, stdout="[feature abc123] feat: add helper", stderr=""),
        )

        result = runner.invoke(app, ["commit", "--yes"])

        assert result.exit_code == 0
        assert "Commit successful" in result.output
        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "-C", str(temp_dir), "commit", "-F", "-"]
        assert kwargs["input"] == "feat: add helper"

    def test_commit_cancelled(self, mocker, temp_dir):
        mocker.patch("commitmuse.cli.commit.get_repo_root", return_value=temp_dir)
        mock_run = mocker.patch("commitmuse.cli.commit.subprocess.run")

        result = runner.invoke(app, ["commit", "--message", "fix: typo"], input="n\n")

        assert result.exit_code == 0
        assert "cancelled" in result.output
        mock_run.assert_not_called()

    def test_malformed_config(self, mocker, temp_dir, isolated_config_dir, sample_diff):
        """Test that a broken config.yaml is reported instead of crashing."""
        isolated_config_dir.mkdir(parents=True)
        (isolated_config_dir / "config.yaml").write_text("- just\n- a list\n")
        mocker.patch("commitmuse.cli.commit.get_repo_root", return_value=temp_dir)
        mocker.patch("commitmuse.cli.commit.get_staged_diff", return_value=sample_diff)
        mock_run = mocker.patch("commitmuse.cli.commit.subprocess.run")

        result = runner.invoke(app, ["commit", "--yes"])

        assert result.exit_code == 1
        assert "Config error" in result.output
        assert not isinstance(result.exception, GlobalConfigError)
        mock_run.assert_not_called()

    def test_commit_failure(self, mocker, temp_dir):
        mocker.patch("commitmuse.cli.commit.get_repo_root", return_value=temp_dir)
        mocker.patch(
            "commitmuse.cli.commit.subprocess.run",
            return_value=MagicMock(returncode=1, stdout="", stderr="nothing added to commit"),
        )

        result = runner.invoke(app, ["commit", "--message", "fix: typo", "--yes"])

        assert result.exit_code == 1
        assert "Commit failed" in result.output


class TestStyleCommands:
    """Tests for commitmuse style subcommands."""

    def test_list_marks_default(self):
        save_global_config({"style": "genz"})

        result = runner.invoke(app, ["style", "list"])

        assert result.exit_code == 0
        assert " * genz" in result.output
        assert "tldr" in result.output
        assert "custom" in result.output

    def test_show(self):
        result = runner.invoke(app, ["style", "show", "corporate"])

        assert result.exit_code == 0
        assert "Corporate Professional" in result.output

    def test_show_unknown(self):
        result = runner.invoke(app, ["style", "show", "xyz"])

        assert result.exit_code == 1
        assert "Unknown style" in result.output


class TestConfigCommands:
    """Tests for commitmuse config subcommands."""

    def test_show_empty(self):
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "No configuration found" in result.output

    def test_show_masks_keys(self, monkeypatch):
        save_global_config({"provider": "openai", "model": "gpt-4o-mini"})
        monkeypatch.setenv("OPENAI_API_KEY", "sk-abcdefgh1234567890wxyz")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "sk-abcde...wxyz" in result.output
        assert "sk-abcdefgh1234567890wxyz" not in result.output

    def test_set_key(self):
        result = runner.invoke(app, ["config", "set-key", "mistral"], input="m" * 32 + "\n")

        assert result.exit_code == 0
        assert get_credential("MISTRAL_API_KEY") == "m" * 32

    def test_set_key_warns_on_odd_shape(self):
        result = runner.invoke(app, ["config", "set-key", "openai"], input="not-a-key\n")

        assert result.exit_code == 0
        assert "does not look like" in result.output
        assert get_credential("OPENAI_API_KEY") == "not-a-key"

    def test_set_provider(self):
        result = runner.invoke(app, ["config", "set-provider", "mistral"])

        assert result.exit_code == 0
        assert load_global_config() == {"provider": "mistral", "model": "mistral-small-latest"}

    def test_invalid_provider(self):
        result = runner.invoke(app, ["config", "set-provider", "cohere"])

        assert result.exit_code == 1
        assert "Invalid provider" in result.output

    def test_set_style_with_instruction(self):
        result = runner.invoke(app, ["config", "set-style", "custom", "--instruction", "Be brief."])

        assert result.exit_code == 0
        assert load_global_config() == {"style": "custom", "custom_instruction": "Be brief."}

    def test_set_invalid_style(self):
        result = runner.invoke(app, ["config", "set-style", "xyz"])

        assert result.exit_code == 1

    def test_list_providers(self):
        result = runner.invoke(app, ["config", "list-providers"])

        assert result.exit_code == 0
        for provider in ("openai:", "anthropic:", "mistral:"):
            assert provider in result.output

    def test_show_empty_file(self):
        """Test that an existing but empty config file reads as not configured."""
        get_config_file_path().parent.mkdir(parents=True)
        get_config_file_path().write_text("")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "No configuration found" in result.output

    def test_show_malformed(self):
        get_config_file_path().parent.mkdir(parents=True)
        get_config_file_path().write_text("- a\n- list\n")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Error reading configuration" in result.output


class TestCurrentBranchSafe:
    """Tests for get_current_branch_safe."""

    def test_runs_in_repo(self, mocker, temp_dir):
        """Test that the branch is read from the given working tree."""
        mock_run = mocker.patch(
            "commitmuse.cli.utils.subprocess.run",
            return_value=MagicMock(returncode=0, stdout="feature/login\n"),
        )

        assert get_current_branch_safe(temp_dir) == "feature/login"
        assert mock_run.call_args[0][0] == ["git", "-C", str(temp_dir), "branch", "--show-current"]

    def test_defaults_to_current_directory(self, mocker):
        mock_run = mocker.patch(
            "commitmuse.cli.utils.subprocess.run",
            return_value=MagicMock(returncode=0, stdout="main\n"),
        )

        assert get_current_branch_safe() == "main"
        assert mock_run.call_args[0][0] == ["git", "branch", "--show-current"]

    def test_unknown_on_failure(self, mocker):
        mocker.patch("commitmuse.cli.utils.subprocess.run", side_effect=OSError("no git"))

        assert get_current_branch_safe() == "unknown"
