import calendar
import sys

import click

from ..io.manifest import dataset_hash, read_manifest


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = read_manifest(manifest)
  months = m.get("months", {})
  if not months:
    click.echo("ERROR: no months found in manifest", err=True)
    sys.exit(1)
  if m.get("dataset_hash") != dataset_hash(m):
    click.echo("ERROR: dataset hash mismatch", err=True)
    sys.exit(1)
  total = sum(months.values())
  click.echo(f"Found {len(months)} months with {total:,} windows total")
  year = m.get("year")
  if year:
    expected = 4 * (366 if calendar.isleap(year) else 365)
    if total != expected:
      click.echo(f"WARNING: expected {expected:,} windows for {year}")
  click.echo("Validation OK")


if __name__ == "__main__":
  main()
