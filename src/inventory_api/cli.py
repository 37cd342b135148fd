"""Inventory API command line interface."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

app = typer.Typer(
    help="📦 Inventory API - server and maintenance commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind the server to"),
    port: int = typer.Option(3000, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the Inventory API server.
    """
    import uvicorn

    console.print(
        Panel.fit(
            "[bold green]Starting Inventory API[/bold green]", border_style="green"
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")

    uvicorn.run(
        "src.inventory_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


@app.command(name="init-db")
def init_db() -> None:
    """
    🗄️  Create the database tables.
    """
    from src.inventory_api.runtime.init_db import init_db as create_tables

    create_tables()
    console.print("[green]✅ Database tables created[/green]")


@app.command(name="low-stock")
def low_stock() -> None:
    """
    📉 Show products below their low-stock threshold, lowest stock first.
    """
    from src.inventory_api.core.services import (
        DbManageService,
        DbSessionService,
        InventoryService,
    )
    from src.inventory_api.entities.service.product import ProductRepository
    from src.inventory_api.runtime.context import get_config

    database_service = DbSessionService()
    if get_config().database.create_tables:
        DbManageService(database_service.engine).create_all()

    with database_service.session_scope() as session:
        products = InventoryService(ProductRepository(session)).list_low_stock()

    if not products:
        console.print("[green]No products are low on stock[/green]")
        return

    table = Table(title="Low-stock products")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Stock", justify="right", style="red")
    table.add_column("Threshold", justify="right")

    for product in products:
        table.add_row(
            product.id,
            product.name,
            str(product.stock_quantity),
            str(product.low_stock_threshold),
        )

    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
