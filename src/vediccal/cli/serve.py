"""CLI command to start the Vedic calendar API server."""

import logging
import sys
import click
import uvicorn
from pydantic import ValidationError

from ..api.rest import VedicRestAPI
from ..core.timezones import DEFAULT_RESOLVER
from ..errors import VedicCalendarError
from ..io.json_store import JsonCalendarStore
from ..model.config import load_config
from ..model.location import validate_location

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Configuration file path",
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (default: 127.0.0.1)",
)
@click.option(
    "--port",
    default=8000,
    type=int,
    help="Port to bind to (default: 8000)",
)
def main(config, host, port):
    """Start the Vedic calendar API server.

    Examples:
        # Serve the default Tallinn configuration
        vediccal-serve

        # Serve a custom location
        vediccal-serve --config my-location.yaml --port 9000
    """
    try:
        cfg = load_config(config)
        validate_location(cfg.latitude, cfg.longitude)
        DEFAULT_RESOLVER.tzinfo_for(cfg.timezone)
        store = JsonCalendarStore(cfg.store_path)
    except (VedicCalendarError, ValidationError) as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)
    api = VedicRestAPI(cfg, store)

    click.echo(f"Location: {cfg.location_name} ({cfg.latitude}, {cfg.longitude}), {cfg.timezone}")
    click.echo(f"Events loaded: {store.count()}")
    click.echo(f"Starting API server on http://{host}:{port}")

    try:
        uvicorn.run(api.app, host=host, port=port, log_level="info")
    except KeyboardInterrupt:
        click.echo("\nShutting down...")


if __name__ == "__main__":
    main()
