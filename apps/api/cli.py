"""Command line entry point for serving the web application."""

from __future__ import annotations

import typer
import uvicorn

from shared.config import settings

cli = typer.Typer(add_completion=False)


@cli.callback()
def main() -> None:
    """CLI entry point for the tubeseo web application."""
    pass


@cli.command()
def run(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """Run the web server."""
    uvicorn.run(
        "apps.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":  # pragma: no cover
    cli()
