"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorcomp import __version__
from colorcomp.complement import hsv_complement, rgb_complement
from colorcomp.exceptions import ColorCompError, ErrorContext, format_error_for_display
from colorcomp.models import Color, ConverterConfig, HuePolicy

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Diagnostics always go to stderr so they never mix with the color output.
    A rotating log file is only written when --debug or --log-file is given.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    package_logger = logging.getLogger("colorcomp")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    package_logger.addHandler(stream_handler)

    if debug and not log_file:
        log_path = Path.cwd() / "colorcomp-debug.log"
    else:
        log_path = log_file

    file_level = level
    if log_path is not None:
        if log_file:
            file_level = getattr(logging, log_level.upper())

        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(min(level, file_level))

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


def parse_input_color(
    rgb: Optional[tuple[int, int, int]],
    hex_code: Optional[str],
    hsv: Optional[tuple[float, float, float]],
    config: ConverterConfig,
) -> Color:
    """
    Build the input color from whichever input form was supplied.

    Exactly one of ``rgb``, ``hex_code`` and ``hsv`` is set; the CLI
    rejects every other combination before calling this.

    Raises:
        InvalidHexCodeError: If the hex code is malformed
    """
    if rgb is not None:
        return Color.from_rgb(*rgb)
    if hex_code is not None:
        return Color.from_hex(hex_code)
    return Color.from_hsv(*hsv, hue_policy=config.hue_policy)


@click.command()
@click.version_option(version=__version__, prog_name="colorcomp")
@click.option(
    '--rgb',
    nargs=3,
    type=click.IntRange(0, 255),
    default=None,
    metavar='R G B',
    help='Input color as RGB values (0-255)'
)
@click.option(
    '--hex',
    'hex_code',
    type=str,
    default=None,
    metavar='HEX',
    help='Input color as a HEX code (e.g., #RRGGBB)'
)
@click.option(
    '--hsv',
    nargs=3,
    type=float,
    default=None,
    metavar='H S V',
    help='Input color as HSV values (Hue 0-360, Saturation 0-1, Value 0-1)'
)
@click.option(
    '--hue-policy',
    type=click.Choice([policy.value for policy in HuePolicy], case_sensitive=False),
    default=HuePolicy.BLACK.value,
    help='Handling of HSV hue outside 0-360: black (default) or wrap modulo 360'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./colorcomp-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    rgb: Optional[tuple[int, int, int]],
    hex_code: Optional[str],
    hsv: Optional[tuple[float, float, float]],
    hue_policy: str,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Calculate complementary colors in RGB, HEX, or HSV.

    Give exactly one input color. The input and its two complements
    (RGB inversion and 180 degree HSV hue rotation) are printed.

    \b
    Examples:
      colorcomp --rgb 255 0 0
      colorcomp --hex '#FF5733'
      colorcomp --hsv 210 0.5 0.8
      colorcomp --hsv 420 1 1 --hue-policy wrap
    """
    setup_logging(verbose, debug, log_file, log_level)

    supplied = [
        name for name, value in (("--rgb", rgb), ("--hex", hex_code), ("--hsv", hsv))
        if value is not None
    ]
    if len(supplied) > 1:
        raise click.UsageError(
            f"Options {', '.join(supplied)} are mutually exclusive; provide exactly one color"
        )
    if not supplied:
        click.echo("No color input provided.", err=True)
        return

    config = ConverterConfig.model_validate({"hue_policy": hue_policy.lower()})

    try:
        with ErrorContext("parse input color", logger_instance=logger):
            color = parse_input_color(rgb, hex_code, hsv, config)
    except ColorCompError as e:
        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "="*70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("="*70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        sys.exit(1)

    click.echo(f"Input Color: {color}")
    click.echo(f"Complementary Color (RGB Complement): {rgb_complement(color)}")
    click.echo(f"Complementary Color (HSV Complement): {hsv_complement(color)}")


if __name__ == "__main__":
    cli()
