import json
import logging
import sys

import click

from pricepath.config import Settings
from pricepath.logging_config import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """pricepath - Monte Carlo GBM price simulation and VaR"""
    settings = Settings()
    setup_logging(settings.log_dir, settings.log_level)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)
    ctx.obj = settings


@cli.command()
@click.option("--price", "-p", type=float, required=True, help="Current price (> 0)")
@click.option("--volatility", "-s", type=float, required=True,
              help="Annualized volatility in percent (0-200)")
@click.option("--days", "-d", type=int, required=True, help="Horizon in days (1-365)")
@click.option("--paths", "-n", type=int, default=1000, show_default=True,
              help="Number of simulated paths (100-10000)")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible run")
@click.option("--workers", "-w", type=int, default=None,
              help="Worker processes for path generation (default: from settings)")
@click.option("--full", is_flag=True, help="Include the full trajectory matrix")
@click.pass_obj
def simulate(settings: Settings, price: float, volatility: float, days: int, paths: int,
             seed: int | None, workers: int | None, full: bool):
    """Run a single simulation and print the result as JSON."""
    from pricepath.analysis.sim_models.normal import RandomNormalSource
    from pricepath.analysis.simulation import run_simulation
    from pricepath.analysis.validation import Rejection, validate_parameters

    outcome = validate_parameters({
        "precio_actual": price,
        "volatilidad": volatility,
        "dias": days,
        "simulaciones": paths,
    })
    if isinstance(outcome, Rejection):
        click.echo(f"Error: {outcome.message}", err=True)
        sys.exit(2)

    if seed is None:
        seed = settings.simulation_seed
    if workers is None:
        workers = settings.simulation_max_workers

    result = run_simulation(outcome, RandomNormalSource(seed), max_workers=workers)
    payload = result.to_dict() if full else result.summary()
    click.echo(json.dumps(payload, indent=None if full else 2))


@cli.command()
@click.option("--host", default=None, help="Bind address (default: from settings)")
@click.option("--port", type=int, default=None, help="Bind port (default: from settings)")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None):
    """Start the HTTP API server."""
    import uvicorn

    from pricepath.web.app import create_app

    host = host or settings.api_host
    port = port or settings.api_port
    click.echo(f"Starting pricepath API on {host}:{port}")
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


if __name__ == "__main__":
    cli()
