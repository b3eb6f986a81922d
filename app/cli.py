import click
from flask.cli import with_appcontext

from models import db
from app.services.menu_csv import MenuFileError, import_menu, read_menu_csv, write_menu_csv


@click.command("init-db")
@with_appcontext
def init_db():
    """Create any missing tables."""
    db.create_all()
    click.echo("Database tables created.")


@click.command("import-menu")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--mid", required=True, help="Merchant ID")
@click.option("--sid", required=True, help="Store ID")
@with_appcontext
def import_menu_command(csv_path, mid, sid):
    """Replace a store's menu with the rows of CSV_PATH."""
    try:
        rows = read_menu_csv(csv_path)
    except MenuFileError as e:
        raise click.ClickException(str(e))
    summary = import_menu(rows, mid, sid)
    counts = ", ".join(f"{k}={v}" for k, v in summary.to_dict().items())
    click.echo(f"Imported {len(rows)} rows: {counts}")


@click.command("export-menu")
@click.argument("out_path", type=click.Path(dir_okay=False, writable=True))
@click.option("--mid", required=True, help="Merchant ID")
@click.option("--sid", required=True, help="Store ID")
@with_appcontext
def export_menu_command(out_path, mid, sid):
    """Write a store's menu to OUT_PATH as CSV."""
    count = write_menu_csv(mid, sid, out_path)
    click.echo(f"Exported {count} rows to {out_path}")


def register_cli(app):
    app.cli.add_command(init_db)
    app.cli.add_command(import_menu_command)
    app.cli.add_command(export_menu_command)
