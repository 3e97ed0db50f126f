"""
CLI entrypoint.

doctor: print effective settings.
xpath: translate a selector to XPath.
validate: offline step script check.
run: execute a step script against a page with the selected driver.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core import registry
from ..core.action import StepSpec
from ..core.controller.runner import Runner, StepOutcome
from ..core.errors import (
    BrowserSessionError,
    InvalidSelector,
    TranslatorUnavailable,
    UnsupportedSelectorType,
)
from ..core.log import configure_logging
from ..core.session import Session
from ..core.settings import settings
from ..io.driver import Driver
from ..selectors import registry as selectors_registry
from ..selectors.handler import SelectorsHandler

app = typer.Typer(help="browser-session CLI")
console = Console()


def _load_specs(script: Path, cmd: str) -> list[StepSpec]:
    if not script.exists():
        typer.secho(f"[{cmd}] file not found: {script}", fg=typer.colors.RED)
        raise typer.Exit(code=2)
    try:
        data = json.loads(script.read_text(encoding="utf-8"))
        return TypeAdapter(list[StepSpec]).validate_python(data)
    except (ValidationError, json.JSONDecodeError) as e:
        typer.secho(f"[{cmd}] invalid file format for StepSpec[]", fg=typer.colors.RED)
        console.print(e)
        raise typer.Exit(code=2)


def _make_driver(name: str) -> Driver:
    if name == "playwright":
        from ..io.playwright_driver import PlaywrightDriver  # lazy: browser stack is optional at import

        return PlaywrightDriver(
            headless=settings.headless,
            slow_mo_ms=settings.slow_mo_ms,
            default_timeout_ms=settings.default_timeout_ms,
        )
    if name == "lxml":
        from ..io.lxml_driver import LxmlDriver

        return LxmlDriver()
    typer.secho(f"unknown driver: {name}", fg=typer.colors.RED)
    raise typer.Exit(code=2)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override BS_LOG_LEVEL"),
) -> None:
    configure_logging(log_level)


@app.command("doctor")
def doctor() -> None:
    """Environment check: print key settings and registered selector types."""
    console.print("[bold green]browser-session[/] environment")
    console.print(f"- driver:    {settings.driver}")
    console.print(f"- headless:  {settings.headless}")
    console.print(f"- timeout:   {settings.default_timeout_ms}ms")
    console.print(f"- selectors: {', '.join(sorted(selectors_registry.list_translators()))}")


@app.command("xpath")
def xpath(
    selector_type: str = typer.Argument(..., help="Selector type, e.g. css, link, field"),
    locator: str = typer.Argument(..., help="Locator interpreted by the selector type"),
) -> None:
    """Print the XPath a selector translates to."""
    try:
        result = SelectorsHandler().selector_to_xpath(selector_type, locator)
        console.print(result, markup=False, highlight=False, soft_wrap=True)
    except (UnsupportedSelectorType, TranslatorUnavailable, InvalidSelector) as e:
        typer.secho(f"[xpath] {e}", fg=typer.colors.RED)
        raise typer.Exit(code=2)


@app.command("validate")
def validate(script: Path = typer.Argument(..., help="Path to JSON file of StepSpec[]")) -> None:
    """
    Offline validation: check each step is registered and its args match the
    bound params model. Exits non-zero on any failure.
    """
    specs = _load_specs(script, "validate")
    import browser_session.actions.impl  # noqa: F401

    table = Table(title="Validation Results", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("name")
    table.add_column("result")
    table.add_column("detail")

    failures = 0
    for i, spec in enumerate(specs, start=1):
        try:
            registry.validate_spec(spec)
            table.add_row(str(i), spec.name, "[green]OK[/]", "-")
        except KeyError as ke:
            failures += 1
            table.add_row(str(i), spec.name, "[red]Not Registered[/]", escape(str(ke)))
        except ValidationError as ve:
            failures += 1
            msg = ve.errors()[0].get("msg", "invalid args")
            table.add_row(str(i), spec.name, "[red]Invalid Args[/]", escape(msg))

    console.print(table)
    if failures:
        raise typer.Exit(code=1)
    typer.secho("[validate] all steps passed", fg=typer.colors.GREEN)


@app.command("run")
def run(
    script: Path = typer.Argument(..., help="Path to JSON file of StepSpec[]"),
    url: Optional[str] = typer.Option(None, "--url", help="Page to open before the first step"),
    driver: str = typer.Option(settings.driver, "--driver", help="lxml | playwright"),
    retries: int = typer.Option(0, "--retries", help="Retry times on driver failure (missing elements fail at once)"),
    stop_on_failure: bool = typer.Option(False, "--stop-on-failure/--keep-going"),
) -> None:
    """
    Execute a step script: read JSON -> validate -> run against one session.
    Prints a table of results; exits non-zero on any failure.
    """
    specs = _load_specs(script, "run")
    import browser_session.actions.impl  # noqa: F401

    session = Session(_make_driver(driver))
    try:
        with session:
            if url:
                session.visit(url)
            rows: list[StepOutcome] = Runner(retries=retries, stop_on_failure=stop_on_failure).run(
                session, specs
            )
    except BrowserSessionError as e:
        typer.secho(f"[run] {e}", fg=typer.colors.RED)
        raise typer.Exit(code=2)

    table = Table(title="Run Results", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("name")
    table.add_column("result")
    table.add_column("detail")

    failures = 0
    for r in rows:
        if not r.ok:
            failures += 1
        result = "[green]OK[/]" if r.ok else "[red]FAIL[/]"
        table.add_row(str(r.index), r.name, result, escape(r.detail))

    console.print(table)
    if failures:
        raise typer.Exit(code=1)
    typer.secho("[run] completed successfully", fg=typer.colors.GREEN)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
