"""CLI entry point for the form builder navigation shell."""

import argparse

from rich.console import Console
from rich.table import Table

from .config import settings
from .logging import configure_logging
from .routing import build_route_table
from .routing.table import describe_type


def print_routes(console: Console = None) -> None:
    """Print the route table."""
    console = console or Console()
    table = Table(title="Routes")
    table.add_column("Name", style="cyan")
    table.add_column("Access")
    table.add_column("Parameters")
    table.add_column("Description", style="dim")

    nav = settings.navigation
    for definition in build_route_table():
        access = "auth" if definition.requires_auth else "public"
        if definition.name in (nav.home_route, nav.login_route, nav.not_found_route):
            access += " (well-known)"
        schema = definition.parameter_schema or {}
        params = ", ".join(f"{key}: {describe_type(kind)}" for key, kind in schema.items())
        table.add_row(definition.name, access, params or "-", definition.description)
    console.print(table)


def run_tui(token_path: str = None) -> None:
    """Run the Textual shell."""
    from .services import SessionStore
    from .tui import FormNavApp

    store = SessionStore(token_path) if token_path else None
    FormNavApp(session_store=store).run()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Form Builder - navigation shell")
    parser.add_argument(
        "--list-routes", action="store_true", help="Print the route table and exit"
    )
    parser.add_argument(
        "--token-path",
        default=None,
        help="Session token file (defaults to NAV_SESSION_TOKEN_PATH)",
    )
    args = parser.parse_args(argv)

    if args.list_routes:
        print_routes()
        return

    configure_logging()
    run_tui(token_path=args.token_path)


if __name__ == "__main__":
    main()
