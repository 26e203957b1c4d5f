"""CLI entry point for numkit."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import click

from numkit.config.defaults import default_config
from numkit.config.schema import NumkitConfig
from numkit.core.conversion import float_to_int
from numkit.core.generators import random_float, random_int, random_int_not_in_blacklist
from numkit.core.ranges import BoundType, in_range
from numkit.core.rng import RandomEngine, configure_engine
from numkit.core.rounding import is_whole_number, round_to_nearest_10th, round_to_precision
from numkit.io.serialize import dump_samples_csv, dump_samples_json
from numkit.io.yaml_loader import load_config_file
from numkit.utils.exceptions import NumkitError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _engine_for(config: NumkitConfig, seed: int | None) -> RandomEngine:
    random_config = config.random
    if seed is not None:
        random_config = random_config.model_copy(update={"seed": seed})
    return configure_engine(random_config)


def _write_samples(values: Sequence[float], seed: int, output_path: Path | None) -> None:
    for value in values:
        click.echo(value)
    if output_path is None:
        return
    if output_path.suffix.lower() == ".csv":
        output_path.write_text(dump_samples_csv(values))
    else:
        output_path.write_text(dump_samples_json(values, seed))
    click.echo(f"\nSamples written to {output_path}")


@click.group()
@click.version_option(package_name="numkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a JSON or YAML config file. Uses defaults if not provided.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """numkit — numeric utility toolkit."""
    setup_logging(verbose)
    if config_path is None:
        ctx.obj = default_config()
        return
    try:
        ctx.obj = load_config_file(config_path)
    except NumkitError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("low", type=int)
@click.argument("high", type=int)
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--seed", default=None, type=click.IntRange(min=0), help="Random seed.")
@click.option("--exclude", "-x", multiple=True, type=int, help="Value to never return.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Write samples to a .json or .csv file.",
)
@click.pass_obj
def randint(
    config: NumkitConfig,
    low: int,
    high: int,
    count: int,
    seed: int | None,
    exclude: tuple[int, ...],
    output_path: Path | None,
) -> None:
    """Draw random integers in [LOW, HIGH)."""
    engine = _engine_for(config, seed)
    try:
        if exclude:
            values = [
                random_int_not_in_blacklist(exclude, low, high, engine=engine)
                for _ in range(count)
            ]
        else:
            values = [random_int(low, high, engine=engine) for _ in range(count)]
    except NumkitError as exc:
        raise click.ClickException(str(exc)) from exc
    _write_samples(values, engine.seed, output_path)


@cli.command()
@click.argument("low", type=float, default=0.0)
@click.argument("high", type=float, default=1.0)
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--seed", default=None, type=click.IntRange(min=0), help="Random seed.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Write samples to a .json or .csv file.",
)
@click.pass_obj
def randfloat(
    config: NumkitConfig,
    low: float,
    high: float,
    count: int,
    seed: int | None,
    output_path: Path | None,
) -> None:
    """Draw random floats between LOW and HIGH (default 0 and 1)."""
    engine = _engine_for(config, seed)
    try:
        values = [random_float(low, high, engine=engine) for _ in range(count)]
    except NumkitError as exc:
        raise click.ClickException(str(exc)) from exc
    _write_samples(values, engine.seed, output_path)


@cli.command(name="round")
@click.argument("value", type=float)
@click.option("--precision", "-p", default=None, type=int, help="Decimal digits to keep.")
@click.option("--tenth", is_flag=True, help="Round to the nearest tenth.")
@click.pass_obj
def round_cmd(config: NumkitConfig, value: float, precision: int | None, tenth: bool) -> None:
    """Round VALUE, ties away from zero."""
    if tenth:
        click.echo(round_to_nearest_10th(value))
        return
    if precision is None:
        precision = config.rounding.precision
    click.echo(round_to_precision(value, precision))


@cli.command()
@click.argument("value", type=float)
def whole(value: float) -> None:
    """Report whether VALUE is a whole number."""
    click.echo("true" if is_whole_number(value) else "false")


@cli.command(name="in-range")
@click.argument("value", type=float)
@click.argument("low", type=float)
@click.argument("high", type=float)
@click.option("--exclusive", is_flag=True, help="Exclude both endpoints.")
def in_range_cmd(value: float, low: float, high: float, exclusive: bool) -> None:
    """Report whether VALUE lies between LOW and HIGH."""
    bound_type = BoundType.EXCLUSIVE if exclusive else BoundType.INCLUSIVE
    click.echo("true" if in_range(value, low, high, bound_type) else "false")


@cli.command(name="to-int")
@click.argument("value", type=float)
@click.option(
    "--underflow",
    type=click.Choice(["max", "min"]),
    default=None,
    help="Clamp target for values below INT_MIN.",
)
@click.pass_obj
def to_int(config: NumkitConfig, value: float, underflow: str | None) -> None:
    """Truncate VALUE to a clamped 32-bit integer."""
    target = underflow or config.conversion.underflow
    click.echo(float_to_int(value, underflow=target))  # type: ignore[arg-type]


@cli.command()
@click.option("--seed", default=None, type=click.IntRange(min=0), help="Random seed.")
@click.pass_obj
def demo(config: NumkitConfig, seed: int | None) -> None:
    """Walk through every group of helpers."""
    engine = _engine_for(config, seed)

    click.echo("=== Rounding ===")
    pi = 3.14159
    click.echo(f"round_to_nearest_10th({pi}) = {round_to_nearest_10th(pi)}")
    click.echo(f"round_to_precision({pi}, 2) = {round_to_precision(pi, 2)}")
    click.echo(f"round_to_precision({pi}, 4) = {round_to_precision(pi, 4)}")
    click.echo(f"is_whole_number(10.0) = {is_whole_number(10.0)}")

    click.echo("\n=== Random numbers ===")
    ints = [random_int(0, 100, engine=engine) for _ in range(5)]
    click.echo(f"5 integers in [0, 100): {ints}")
    floats = [f"{random_float(engine=engine):.6f}" for _ in range(5)]
    click.echo(f"5 floats in [0, 1]: {', '.join(floats)}")
    blacklist = [12, 15, 18]
    picks = [random_int_not_in_blacklist(blacklist, 10, 20, engine=engine) for _ in range(5)]
    click.echo(f"5 integers in [10, 20) excluding {blacklist}: {picks}")

    click.echo("\n=== Conversion ===")
    for x in (3.7, -5.2, 42.9):
        click.echo(f"float_to_int({x}) = {float_to_int(x)}")

    click.echo("\n=== Range checks ===")
    for value in (5, 10):
        inclusive = in_range(value, 0, 10, BoundType.INCLUSIVE)
        exclusive = in_range(value, 0, 10, BoundType.EXCLUSIVE)
        click.echo(f"{value} in [0, 10]: {inclusive}; in (0, 10): {exclusive}")

    click.echo("\n=== Raw engine outputs ===")
    for _ in range(5):
        click.echo(f"  {engine()}")
    click.echo(f"\nEngine seed: {engine.seed}")


if __name__ == "__main__":
    cli()
