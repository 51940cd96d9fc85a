from pathlib import Path

import pytest
from typer.testing import CliRunner

from mdpdf import cli
from mdpdf.settings import get_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MDPDF_CONFIG_PATH", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


def use_launcher(monkeypatch, launcher) -> None:
    monkeypatch.setattr(cli, "PlaywrightLauncher", lambda: launcher)


def test_renders_pdf(tmp_path: Path, manuscript: Path, launcher, monkeypatch) -> None:
    use_launcher(monkeypatch, launcher)
    result = runner.invoke(cli.app, ["--src=paper", "--browser=/opt/chromium/chrome", "--outputHTML"])

    assert result.exit_code == 0, result.output
    assert "开始生成" in result.output
    assert "生成成功" in result.output
    assert (tmp_path / "paper.pdf").exists()
    assert (tmp_path / "paper.html").exists()
    assert launcher.executables == ["/opt/chromium/chrome"]


def test_parameter_error_exit_code(launcher, monkeypatch) -> None:
    use_launcher(monkeypatch, launcher)
    result = runner.invoke(cli.app, ["--src=x", "--unknown"])

    assert result.exit_code == 2
    assert "参数错误, 正确格式:" in result.output
    assert "mdpdf --src=xxx [--out=xxx]" in result.output
    assert "开始生成" not in result.output
    assert launcher.executables == []


def test_missing_arguments_is_parameter_error(launcher, monkeypatch) -> None:
    use_launcher(monkeypatch, launcher)
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 2


def test_fatal_error_exit_code(tmp_path: Path, manuscript: Path, make_launcher, monkeypatch) -> None:
    use_launcher(monkeypatch, make_launcher(fail_launch=True))
    result = runner.invoke(cli.app, ["--src=paper", "--browser=/no/such/browser"])

    assert result.exit_code == 1
    assert "未知错误, 错误信息:" in result.output
    assert "FileNotFoundError" in result.output
    assert not (tmp_path / "paper.pdf").exists()


def test_config_supplies_default_browser_and_log(
    tmp_path: Path, manuscript: Path, launcher, monkeypatch
) -> None:
    config_path = tmp_path / "custom.toml"
    config_path.write_text(
        '[runtime]\nbrowser = "/usr/bin/chromium"\nlog_file = "logs/run.jsonl"\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("MDPDF_CONFIG_PATH", str(config_path))
    get_settings.cache_clear()
    use_launcher(monkeypatch, launcher)

    result = runner.invoke(cli.app, ["--src=paper"])

    assert result.exit_code == 0, result.output
    assert launcher.executables == ["/usr/bin/chromium"]
    assert (tmp_path / "logs" / "run.jsonl").exists()


def test_invalid_config_is_fatal(tmp_path: Path, launcher, monkeypatch) -> None:
    (tmp_path / "mdpdf.toml").write_text("[runtime\n", encoding="utf-8")
    use_launcher(monkeypatch, launcher)

    result = runner.invoke(cli.app, ["--src=paper"])

    assert result.exit_code == 1
    assert "ConfigError" in result.output


def test_unwritable_run_log_still_reports_success(
    tmp_path: Path, manuscript: Path, launcher, monkeypatch
) -> None:
    (tmp_path / "logdir").mkdir()
    (tmp_path / "mdpdf.toml").write_text('[runtime]\nlog_file = "logdir"\n', encoding="utf-8")
    use_launcher(monkeypatch, launcher)

    result = runner.invoke(cli.app, ["--src=paper", "--browser=/opt/chromium/chrome"])

    assert result.exit_code == 0, result.output
    assert "生成成功" in result.output
    assert "Cannot write run log" in result.output
    assert (tmp_path / "paper.pdf").exists()
