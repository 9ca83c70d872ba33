"""
Directory search CLI commands (search, facets, show).
"""
import json
import traceback

import click

from docdirectory.cli.common import echo_doctor_line, echo_doctors_json, format_option
from docdirectory.core.models import ActiveFilters
from docdirectory.core.search import has_active_filters, narrow_options
from docdirectory.services.search import DirectorySearchService


def _service(ctx) -> DirectorySearchService:
    return DirectorySearchService(ctx.obj.get_store())


def _fail(ctx, message: str, error: Exception):
    click.secho(f"{message}: {error}", fg='red', err=True)
    if ctx.obj.verbose:
        click.echo(traceback.format_exc(), err=True)
    raise click.Abort()


@click.command()
@click.argument('query', nargs=-1)
@click.option(
    '--specialty', '-s', 'specialties',
    multiple=True,
    help='Only doctors practicing this specialty (repeatable, OR)'
)
@click.option(
    '--state', 'states',
    multiple=True,
    help='Only doctors in this state (repeatable, OR)'
)
@click.option('--limit', type=click.IntRange(min=1), default=50, help='Maximum results to show')
@format_option
@click.pass_context
def search(ctx, query, specialties, states, limit, output_format):
    """
    Search doctors by keywords.

    Every keyword must match the doctor's name, a specialty, or a condition
    they treat. Specialty and state filters narrow the results further.
    """
    query_text = " ".join(query)
    active = ActiveFilters(specialties=list(specialties), states=list(states))

    try:
        results, total, _ = _service(ctx).search_with_facets(query_text, active, limit=limit)
    except ValueError as e:
        _fail(ctx, "Error loading directory", e)

    if output_format == 'json':
        echo_doctors_json(results)
        return

    label = f"'{query_text}'" if query_text.strip() else "all doctors"
    if has_active_filters(active):
        label += " with filters " + ", ".join(active.specialties + active.states)
    click.echo(f"Found {total} doctors for {label}:")
    for doctor in results:
        echo_doctor_line(doctor)
    if total > len(results):
        click.echo(f"  ... and {total - len(results)} more")


@click.command()
@click.option('--specialty-filter', default=None, help='Only list specialties containing this text')
@click.option('--state-filter', default=None, help='Only list states containing this text')
@format_option
@click.pass_context
def facets(ctx, specialty_filter, state_filter, output_format):
    """List the specialties and states available as filters."""
    try:
        options = _service(ctx).filter_options()
    except ValueError as e:
        _fail(ctx, "Error loading directory", e)

    specialties = narrow_options(options.specialties, specialty_filter)
    states = narrow_options(options.states, state_filter)

    if output_format == 'json':
        click.echo(json.dumps({"specialties": specialties, "states": states}, indent=2))
        return

    click.echo(f"Specialties ({len(specialties)}):")
    for specialty in specialties:
        click.echo(f"  {specialty}")
    click.echo(f"\nStates ({len(states)}):")
    for state in states:
        click.echo(f"  {state}")


@click.command()
@click.argument('doctor')
@format_option
@click.pass_context
def show(ctx, doctor, output_format):
    """Show a doctor profile by id or slug."""
    try:
        service = _service(ctx)
        found = service.get_doctor(doctor) or service.get_doctor_by_slug(doctor)
    except ValueError as e:
        _fail(ctx, "Error loading directory", e)

    if not found:
        click.secho(f"Doctor not found: {doctor}", fg='red', err=True)
        raise click.Abort()

    if output_format == 'json':
        click.echo(json.dumps(found.to_dict(), indent=2))
        return

    click.secho(found.name, bold=True)
    click.echo(f"Specialty: {found.specialty}")
    if found.specialties:
        click.echo(f"Specialties: {', '.join(found.specialties)}")
    if found.location is not None:
        parts = [p for p in (found.location.address, found.location.city, found.location.state) if p]
        click.echo(f"Location: {', '.join(parts)}")
    if found.conditions:
        click.echo(f"Conditions treated: {', '.join(found.conditions)}")
    if found.bio:
        click.echo(f"\n{found.bio}")
