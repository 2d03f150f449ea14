"""Typer-based command line interface for sample-mean Monte Carlo animations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import AnimationConfig
from ..core.functions import get_integrand, list_integrands
from ..core.layout import LayoutMode
from ..core.validator import SampleMeanError
from ..engine import SampleMeanRun, prepare_sample_mean, render_frames
from ..visualization import (
    MatplotlibFrameRenderer,
    PlotlyFrameCollector,
    build_convergence_plot,
    resolve_theme,
)

app = typer.Typer(help="Sample mean Monte Carlo integration over [0, 1], animated")
console = Console()


def _format_optional(value: Optional[float], digits: int = 6) -> str:
    return f"{value:.{digits}f}" if value is not None else "N/A"


def _build_summary_table(run: SampleMeanRun, exact: Optional[float]) -> Table:
    summary = run.result.summary(exact=exact)
    table = Table(title="Sample Mean Monte Carlo", show_lines=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Integrand", run.label)
    table.add_row("Samples", f"{run.result.n:,}")
    table.add_row("Layout", run.layout_mode.value)
    table.add_row("Estimate", _format_optional(summary["estimate"]))
    table.add_row("Std. error", _format_optional(summary["standard_error"]))
    table.add_row("Exact integral", _format_optional(summary["exact"]))
    table.add_row("Abs. error", _format_optional(summary["abs_error"]))
    return table


def _animate(
    run: SampleMeanRun,
    integrand,
    config: AnimationConfig,
    *,
    show: bool,
    gif: Optional[Path],
    border: bool,
) -> Dict[str, Path]:
    outputs: Dict[str, Path] = {}
    renderer = MatplotlibFrameRenderer(
        integrand,
        label=run.label,
        interval=config.interval,
        theme=resolve_theme(config.theme),
        show=show,
        record=gif is not None,
    )
    frames = run.frames.with_options(draw_options={} if border else {"edgecolor": "none"})
    try:
        render_frames(frames, renderer)
    except KeyboardInterrupt:
        console.print("[yellow]Animation interrupted; the estimate below is unaffected.[/yellow]")
    if gif is not None:
        path = renderer.save_gif(gif)
        if path is not None:
            outputs["gif"] = path
    renderer.close()
    return outputs


@app.command()
def run(
    function: str = typer.Option("parabola", "--function", "-f", help="Named integrand (see `functions`)"),
    n: Optional[int] = typer.Option(None, "--n", "-n", help="Number of uniform samples (frames)"),
    layout: str = typer.Option(
        LayoutMode.ADJUSTED.value,
        case_sensitive=False,
        help="Rectangle layout: adjusted (side by side) | exact (at sampled x)",
    ),
    seed: Optional[int] = typer.Option(None, help="Random seed for sampling and tie-breaking"),
    interval: Optional[float] = typer.Option(None, help="Seconds between animation frames"),
    theme: Optional[str] = typer.Option(None, help="Colour theme: light | dark"),
    settled_color: Optional[str] = typer.Option(None, help="Colour of past rectangles"),
    current_color: Optional[str] = typer.Option(None, help="Colour of the newest rectangle"),
    border: bool = typer.Option(True, help="Draw rectangle borders (disable for large n)"),
    show: bool = typer.Option(False, help="Show the live matplotlib animation"),
    gif: Optional[Path] = typer.Option(None, help="Write the animation as a GIF"),
    html: Optional[Path] = typer.Option(None, help="Write an animated Plotly HTML page"),
    convergence_html: Optional[Path] = typer.Option(None, help="Write the convergence chart as HTML"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Estimate the integral of a named function and optionally animate it."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        integrand = get_integrand(function)
        config = AnimationConfig.from_env().with_overrides(
            nmax=n,
            interval=interval,
            random_seed=seed,
            theme=theme.lower() if theme else None,
        )
        palette = resolve_theme(config.theme)["palette"]
        style = (settled_color or palette["settled"], current_color or palette["current"])
        run_state = prepare_sample_mean(integrand, None, layout, style, config=config)

        outputs: Dict[str, Path] = {}
        if show or gif is not None:
            outputs.update(
                _animate(run_state, integrand, config, show=show, gif=gif, border=border)
            )
        if html is not None:
            collector = PlotlyFrameCollector(
                integrand,
                label=run_state.label,
                interval=config.interval,
                theme=resolve_theme(config.theme),
            )
            plotly_options = {} if border else {"marker_line_width": 0}
            render_frames(run_state.frames.with_options(draw_options=plotly_options), collector)
            outputs["html"] = collector.write_html(html)
        if convergence_html is not None:
            convergence_html.parent.mkdir(parents=True, exist_ok=True)
            figure = build_convergence_plot(
                run_state.result, exact=integrand.exact, theme=resolve_theme(config.theme)
            )
            figure.write_html(convergence_html, include_plotlyjs="cdn")
            outputs["convergence_html"] = convergence_html
    except SampleMeanError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(_build_summary_table(run_state, integrand.exact))
    for name, path in outputs.items():
        console.print(f"  - {name}: {path}")


@app.command()
def functions() -> None:
    """List the named integrands and their exact integrals."""
    table = Table(title="Integrands", show_lines=False)
    table.add_column("Name")
    table.add_column("Function")
    table.add_column("Integral over [0, 1]", justify="right")
    for integrand in list_integrands():
        table.add_row(integrand.name, integrand.label, f"{integrand.exact:.6f}")
    console.print(table)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
