from pathlib import Path
import sys

import click
from pydantic import ValidationError

from ..core.timebase import Timebase
from ..errors import VedicCalendarError
from ..io.manifest import write_manifest
from ..io.schema import window_row
from ..io.write_parquet import write_windows_parquet
from ..model.config import load_config
from ..pipeline import compute_daily_vedic_windows


def generate_year(cfg, year: int, out_dir: Path) -> dict:
  months = {}
  rows_by_month = {}
  for d in Timebase(year).days():
    windows = compute_daily_vedic_windows(d, cfg.location, cfg.timezone, cfg.periods)
    rows_by_month.setdefault(d.month, []).extend(window_row(d, w) for w in windows)
  for month, rows in sorted(rows_by_month.items()):
    path = out_dir / f"{year:04d}" / f"windows_{year:04d}_{month:02d}.parquet"
    months[f"{year:04d}-{month:02d}"] = write_windows_parquet(rows, str(path))
  meta = {
    "year": year,
    "location": cfg.location_name,
    "latitude": cfg.latitude,
    "longitude": cfg.longitude,
    "timezone": cfg.timezone,
    "periods": cfg.periods.model_dump(),
    "months": months,
  }
  return write_manifest(str(out_dir / f"{year:04d}" / "manifest.json"), meta)


@click.command()
@click.option("--config", type=click.Path(exists=True))
@click.option("--year", required=True, type=int)
@click.option("--out", "out_dir", default="out/", type=click.Path())
def main(config, year, out_dir):
  try:
    cfg = load_config(config)
    meta = generate_year(cfg, year, Path(out_dir))
  except (VedicCalendarError, ValidationError) as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)
  click.echo(f"Done. Wrote {sum(meta['months'].values()):,} windows to {out_dir}")


if __name__ == "__main__":
  main()
