"""
Contrast command - print the WCAG contrast ratio between two colors.

Usage:
    contrast L1 L2
    contrast "#FF0080" 0,0,0 --precision 2 --wcag
"""

import json
import logging
import sys
from typing import Optional

import click

from cli import __version__
from core.color import contrast_ratio_for_tokens, evaluate_conformance
from core.config import LogLevel, OutputFormat, get_settings

logger = logging.getLogger("contrast.cli")

CONTRAST_RATIO_URL = (
    "https://www.w3.org/TR/UNDERSTANDING-WCAG20/"
    "visual-audio-contrast-contrast.html#contrast-ratiodef"
)


def configure_logging(level: LogLevel, verbose: bool = False) -> None:
    """Send log records to stderr so stdout only carries results."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.value),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def format_ratio(ratio: float, precision: Optional[int]) -> str:
    if precision is None:
        return str(ratio)
    return f"{ratio:.{precision}f}"


def _pass_fail(passed: bool) -> str:
    return "PASS" if passed else "FAIL"


@click.command(
    "contrast",
    context_settings={"ignore_unknown_options": True},
    help=(
        "A CLI app for calculating the contrast ratio between two colours. "
        f"For details, see: {CONTRAST_RATIO_URL}"
    ),
    epilog=(
        "\b\n"
        "Arguments:\n"
        "  L1  A color as hex (RRGGBB, #RRGGBB, 0xRRGGBB) or comma-separated\n"
        "      RGB (R,G,B). E.g.: 255,0,128\n"
        "  L2  See L1."
    ),
)
@click.argument("l1", metavar="L1")
@click.argument("l2", metavar="L2")
@click.option(
    "--precision",
    "-p",
    type=click.IntRange(0, 15),
    default=None,
    help="Round the printed ratio to this many decimal places.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format (default: text).",
)
@click.option(
    "--wcag",
    is_flag=True,
    default=False,
    help="Also report WCAG AA/AAA pass/fail for normal and large text.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
@click.version_option(__version__, prog_name="contrast")
def app(
    l1: str,
    l2: str,
    precision: Optional[int],
    output_format: Optional[str],
    wcag: bool,
    verbose: bool,
):
    settings = get_settings()
    configure_logging(settings.log_level, verbose)

    if precision is None:
        precision = settings.precision
    fmt = OutputFormat(output_format.lower()) if output_format else settings.output_format

    result = contrast_ratio_for_tokens(l1, l2)

    if not result.ok:
        logger.warning(f"Invalid color input ({result.error_kind.value}): {result.message}")
        if fmt == OutputFormat.JSON:
            click.echo(json.dumps(result.failure.error_dict()))
        else:
            click.echo(f"Error: {result.message}")
        sys.exit(settings.error_exit_code)

    logger.info(f"Contrast ratio for {l1!r} and {l2!r}: {result.ratio}")

    report = evaluate_conformance(result.ratio) if wcag else None

    if fmt == OutputFormat.JSON:
        payload = result.to_dict(precision)
        if report is not None:
            payload["wcag"] = report.to_dict()
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(format_ratio(result.ratio, precision))
    if report is not None:
        click.echo(f"AA normal text: {_pass_fail(report.aa_normal)}")
        click.echo(f"AA large text: {_pass_fail(report.aa_large)}")
        click.echo(f"AAA normal text: {_pass_fail(report.aaa_normal)}")
        click.echo(f"AAA large text: {_pass_fail(report.aaa_large)}")


def main():
    app()


if __name__ == "__main__":
    main()
