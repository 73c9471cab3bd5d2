"""
Site CLI Commands - Compute and report site metrics from exported records.

Provides command-line interface for:
- Per-site budget snapshots
- Portfolio risk summary
- Record validation
"""
import json
import logging
import sys
from datetime import date
from typing import Optional, Tuple

import click

from sitetrack import __version__
from sitetrack.config import ConfigurationError, get_config
from sitetrack.data import load_dataset, snapshots_to_frame
from sitetrack.domain.entities import SiteStatus
from sitetrack.domain.exceptions import DomainError, SiteNotFoundError
from sitetrack.domain.services import (
    compute_all_site_snapshots,
    summarize_payments,
    summarize_portfolio,
    validate_records,
)

logger = logging.getLogger(__name__)

RISK_COLORS = {
    'DANGER': 'red',
    'WARNING': 'yellow',
    'SAFE': 'green',
}

STATUS_CHOICES = click.Choice([s.value for s in SiteStatus], case_sensitive=False)


def _parse_today(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date", param_hint='--today')


def _load(ctx: click.Context, data_path: str):
    config = ctx.obj['config']
    try:
        return load_dataset(data_path, files=config.data_files)
    except (DomainError, FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError) as e:
        click.echo(click.style(f"Failed to load site data: {e}", fg='red'), err=True)
        sys.exit(2)


@click.group()
@click.version_option(version=__version__)
@click.option('--config', 'config_path', default=None, type=click.Path(exists=True),
              help='Path to configuration YAML file')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool):
    """SiteTrack - construction site budget and risk metrics.

    DATA_PATH is either a JSON document with sites, daily_reports,
    execution_costs and payments lists, or a directory of CSV exports.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    try:
        config = get_config(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))
    ctx.ensure_object(dict)
    ctx.obj['config'] = config


@cli.command()
@click.argument('data_path', type=click.Path(exists=True))
@click.option('--site', 'site_id', default=None, help='Only report this site id')
@click.option('--today', default=None, help='Reference date (YYYY-MM-DD), defaults to today')
@click.option('--status', 'statuses', multiple=True, type=STATUS_CHOICES,
              help='Only report sites in these statuses (repeatable)')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.pass_context
def snapshot(ctx: click.Context, data_path: str, site_id: Optional[str], today: Optional[str],
             statuses: Tuple[str, ...], output_format: str):
    """Print budget snapshots per site."""
    config = ctx.obj['config']
    reference_day = _parse_today(today)
    dataset = _load(ctx, data_path)

    sites = dataset.sites
    if site_id is not None:
        try:
            sites = [dataset.require_site(site_id)]
        except SiteNotFoundError as e:
            click.echo(click.style(e.message, fg='red'), err=True)
            sys.exit(1)
    if statuses:
        wanted = {SiteStatus(s.upper()) for s in statuses}
        sites = [s for s in sites if s.status in wanted]

    snapshots = compute_all_site_snapshots(
        sites, dataset.labor_reports, dataset.execution_costs,
        today=reference_day, thresholds=config.risk_thresholds,
    )

    if output_format == 'json':
        click.echo(json.dumps([s.to_dict() for s in snapshots], ensure_ascii=False, indent=2))
        return

    if not snapshots:
        click.echo("No sites to report.")
        return

    places = config.margin_decimal_places
    names = {s.id: s.name for s in sites}
    for snap in snapshots:
        risk = snap.risk_level.value
        click.echo(click.style(f"[{risk}] ", fg=RISK_COLORS[risk], bold=True)
                   + f"{names.get(snap.site_id) or snap.site_id} ({snap.site_id})")
        click.echo(f"  Budget:     {config.format_currency(snap.budget_amount)}")
        cost_lines = [
            ('labor', snap.total_labor_cost),
            ('material', snap.total_material_cost),
            ('outsource', snap.total_outsource_cost),
            ('other', snap.total_other_cost),
        ]
        for line, amount in cost_lines:
            label = config.get_cost_label(line) + ":"
            click.echo(f"  {label:<12}{config.format_currency(amount)}")
        click.echo(f"  Executed:   {config.format_currency(snap.total_execution_cost)}")
        click.echo(f"  Remaining:  {config.format_currency(snap.remaining_budget)}")
        click.echo(f"  Margin:     {snap.margin_rate:.{places}f}%")
        if snap.days_remaining is None:
            click.echo("  Deadline:   none")
        else:
            click.echo(f"  Deadline:   {snap.deadline.isoformat()} (D{-snap.days_remaining:+d})")


@cli.command()
@click.argument('data_path', type=click.Path(exists=True))
@click.option('--today', default=None, help='Reference date (YYYY-MM-DD), defaults to today')
@click.option('--status', 'statuses', multiple=True, type=STATUS_CHOICES,
              help='Statuses to include (default: ACTIVE)')
@click.option('--payments', 'show_payments', is_flag=True, help='Include payment totals per site')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table',
              help='Output format')
@click.pass_context
def summary(ctx: click.Context, data_path: str, today: Optional[str], statuses: Tuple[str, ...],
            show_payments: bool, output_format: str):
    """Print the portfolio risk summary, riskiest sites first."""
    config = ctx.obj['config']
    reference_day = _parse_today(today)
    dataset = _load(ctx, data_path)

    wanted = tuple(SiteStatus(s.upper()) for s in statuses) or (SiteStatus.ACTIVE,)
    snapshots = compute_all_site_snapshots(
        dataset.sites, dataset.labor_reports, dataset.execution_costs,
        today=reference_day, thresholds=config.risk_thresholds,
    )
    result = summarize_portfolio(dataset.sites, snapshots, statuses=wanted)
    payments = {}
    if show_payments:
        for site in dataset.sites:
            payments[site.id] = summarize_payments(site, dataset.payments)

    if output_format == 'json':
        data = result.to_dict()
        if show_payments:
            data['payments'] = [payments[s.site_id].to_dict() for s in result.snapshots]
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    click.echo(f"Sites:     {result.site_count}")
    click.echo(click.style(f"Danger:    {result.danger_count}", fg='red' if result.danger_count else None))
    click.echo(click.style(f"Warning:   {result.warning_count}", fg='yellow' if result.warning_count else None))
    click.echo(f"Budget:    {config.format_currency(result.total_budget)}")
    click.echo(f"Executed:  {config.format_currency(result.total_execution_cost)}")
    click.echo(f"Remaining: {config.format_currency(result.total_remaining_budget)}")

    if result.snapshots:
        click.echo("")
        frame = snapshots_to_frame(result.snapshots)
        columns = ['site_id', 'risk_level', 'margin_rate', 'remaining_budget', 'days_remaining']
        click.echo(frame[columns].to_string(index=False, float_format=lambda v: f"{v:,.1f}"))

    if show_payments:
        click.echo("\nPayments:")
        for snap in result.snapshots:
            p = payments[snap.site_id]
            click.echo(
                f"  {p.site_id}: received {config.format_currency(p.total_received)} "
                f"of {config.format_currency(p.contract_amount)}, "
                f"outstanding {config.format_currency(p.outstanding)}"
            )


@cli.command()
@click.argument('data_path', type=click.Path(exists=True))
@click.pass_context
def validate(ctx: click.Context, data_path: str):
    """Check exported records for data-quality problems."""
    dataset = _load(ctx, data_path)
    is_valid, errors = validate_records(
        dataset.sites, dataset.labor_reports, dataset.execution_costs, dataset.payments,
    )

    if is_valid:
        click.echo(click.style("✓ No data-quality problems found", fg='green'))
        return

    click.echo(click.style(f"✗ {len(errors)} problem(s) found:", fg='red'))
    for error in errors:
        click.echo(f"  - {error}")
    sys.exit(1)
