"""Create or update tomorrow's Vedic events. Meant to be called once a day by cron."""

from datetime import date
import logging
import sys

import click
from pydantic import ValidationError

from ..errors import VedicCalendarError
from ..io.json_store import JsonCalendarStore
from ..io.write_ics import write_ics
from ..model.config import load_config
from ..runtime.runner import DailyRunner

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", type=click.Path(exists=True), help="Configuration file path")
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Target date (default: tomorrow)")
@click.option("--days", default=1, type=int, help="Number of consecutive days to materialize")
@click.option("--store", type=click.Path(), help="Override the JSON event store path")
@click.option("--ics", type=click.Path(), help="Also export the whole store as an .ics file")
def main(config, day, days, store, ics):
    """Compute Vedic windows and upsert them into the event store."""
    try:
        cfg = load_config(config)
        st = JsonCalendarStore(store or cfg.store_path)
        runner = DailyRunner(cfg, st)
        start: date = day.date() if day else runner.tomorrow()
        events = runner.run_range(start, days)
    except (VedicCalendarError, ValidationError) as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    for e in events:
        click.echo(f"{e.title}: {e.start:%H:%M} - {e.end:%H:%M}")

    ics_path = ics or cfg.ics_path
    if ics_path:
        n = write_ics(st.get_all_events(), ics_path, cfg.calendar_name)
        logger.info("Exported %d events to %s", n, ics_path)
    click.echo(f"Done. {st.count()} events in {st.path}")


if __name__ == "__main__":
    main()
