from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from ..browser import BrowserLauncher, PlaywrightLauncher
from ..config import AppConfig, ConfigError, load_config
from ..constraint import USAGE
from ..core import RenderPipeline, TransitionCallback
from ..logging import RunLogger
from ..models import OutcomeStatus, PipelineState, RenderOutcome
from ..renderer import MarkdownRenderer
from ..settings import detect_default_browser, get_settings
from ..styles import load_stylesheet

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Render a Markdown manuscript into a journal formatted PDF", add_completion=False)


def _say(target: Console, message: str) -> None:
    target.print(message, markup=False, highlight=False, soft_wrap=True)


def _announce(state: PipelineState) -> None:
    if state is PipelineState.RENDERING:
        _say(console, "\n开始生成\n")


def report_fatal(name: str, message: str) -> None:
    _say(err_console, f"\n未知错误, 错误信息:\n{name}\n{message}\n")


def report(outcome: RenderOutcome) -> None:
    if outcome.log_error:
        _say(err_console, outcome.log_error)
    if outcome.status is OutcomeStatus.SUCCEEDED:
        _say(console, "生成成功\n")
    elif outcome.status is OutcomeStatus.PARAMETER_ERROR:
        _say(err_console, f"\n参数错误, 正确格式:\n{USAGE}\n")
    else:
        report_fatal(outcome.error_name or "Error", outcome.message or "")


def build_pipeline(
    config: AppConfig,
    *,
    cwd: Path,
    launcher: BrowserLauncher | None = None,
    on_transition: TransitionCallback | None = None,
) -> RenderPipeline:
    log_file = config.runtime.log_file
    return RenderPipeline(
        launcher=launcher or PlaywrightLauncher(),
        load_stylesheet=load_stylesheet,
        renderer=MarkdownRenderer(config.markdown.extensions),
        default_browser=config.runtime.browser or detect_default_browser(),
        run_logger=RunLogger(cwd / log_file) if log_file else None,
        on_transition=on_transition,
    )


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def render(ctx: typer.Context) -> None:
    """mdpdf --src=xxx [--out=xxx] [--outputHTML] [--browser=xxx] [--showTitle]"""

    cwd = Path.cwd()
    try:
        config = load_config(get_settings().config_path)
    except ConfigError as exc:
        report_fatal(type(exc).__name__, str(exc))
        raise typer.Exit(OutcomeStatus.FATAL_ERROR.exit_code) from exc

    pipeline = build_pipeline(config, cwd=cwd, on_transition=_announce)
    outcome = asyncio.run(pipeline.run(list(ctx.args), cwd))
    report(outcome)
    if not outcome.succeeded:
        raise typer.Exit(outcome.status.exit_code)


if __name__ == "__main__":
    app()
