"""
Shared click options and output helpers for CLI commands.
"""
import json
from typing import List

import click

from docdirectory.core.models import Doctor

format_option = click.option(
    '--format', 'output_format',
    type=click.Choice(['text', 'json']),
    default='text',
    help='Output format'
)


def echo_doctors_json(doctors: List[Doctor]) -> None:
    click.echo(json.dumps([doctor.to_dict() for doctor in doctors], indent=2))


def echo_doctor_line(doctor: Doctor) -> None:
    """Print a one-line summary: name, specialty and where they practice."""
    place = ""
    if doctor.location is not None:
        parts = [p for p in (doctor.location.city, doctor.location.state) if p]
        place = ", ".join(parts)
    click.echo(f"  {doctor.name} - {doctor.specialty}" + (f" ({place})" if place else ""))
