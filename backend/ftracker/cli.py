"""
CLI interface for training summaries.

Usage:
    ftracker summary --type Running --action 1000 --duration 1 --weight 70
    ftracker summary --type Swimming --action 500 --duration 1 --weight 70 \
        --length-pool 25 --count-pool 40
"""

import logging
import sys

import click

from ftracker.config import settings
from ftracker.shared.constants import (
    TrainingType,
    UNKNOWN_TRAINING_TYPE,
    UnknownTrainingTypeError,
)
from ftracker.features.training import render_summary


@click.group()
def cli():
    """Training metrics tools."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


@cli.command()
@click.option("--type", "training_type", required=True, help="Training type label, e.g. Running")
@click.option("--action", required=True, type=int, help="Steps or strokes")
@click.option("--duration", required=True, type=float, help="Duration in hours")
@click.option("--weight", required=True, type=float, help="Body weight in kg")
@click.option("--height", default=0.0, type=float, help="Body height in cm (walking)")
@click.option("--length-pool", default=0, type=int, help="Pool length in meters (swimming)")
@click.option("--count-pool", default=0, type=int, help="Number of laps (swimming)")
def summary(training_type, action, duration, weight, height, length_pool, count_pool):
    """Print distance, speed and calories for a training."""
    try:
        is_walking = TrainingType.from_label(training_type) is TrainingType.WALKING
    except UnknownTrainingTypeError:
        is_walking = False
    if is_walking and height <= 0:
        raise click.UsageError("--height must be positive for walking")

    text = render_summary(
        action, training_type, duration, weight, height, length_pool, count_pool
    )
    click.echo(text, nl=False)
    if text == UNKNOWN_TRAINING_TYPE:
        click.echo()
        sys.exit(1)


@cli.command()
def types():
    """List accepted training type labels."""
    for training_type in TrainingType:
        click.echo(f"{training_type.value}: {', '.join(training_type.labels)}")


if __name__ == "__main__":
    cli()
