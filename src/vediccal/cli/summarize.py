import click

from ..io.manifest import read_manifest


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = read_manifest(manifest)
  months = m.get("months", {})
  rows = sorted(months.items())
  width = max(len(k) for k, _ in rows) if rows else 7
  click.echo("Month".ljust(width) + " | Windows")
  click.echo("-" * width + "-|---------")
  for k, v in rows:
    click.echo(k.ljust(width) + f" | {v:,}")
  click.echo(f"Location: {m.get('location')} ({m.get('timezone')}), Year: {m.get('year')}")


if __name__ == "__main__":
  main()
