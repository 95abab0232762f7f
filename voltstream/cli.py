"""
Command-line interface for voltstream.

Usage:
    voltstream serve      # Run the feedback API
    voltstream init-db    # Create the feedback table
    voltstream health     # Check database connectivity
    voltstream score TEXT # Score a piece of feedback without storing it
"""

import asyncio
import json
import sys

import click

from voltstream.config.settings import get_settings
from voltstream.observability.logging import setup_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Voltstream - customer feedback triage."""
    if debug:
        import os
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.option("--host", default=None, help="Bind address (default: API_HOST)")
@click.option("--port", default=None, type=int, help="Port (default: API_PORT or PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the feedback API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    click.echo("=" * 50)
    click.echo("VOLTSTREAM FEEDBACK API")
    click.echo("=" * 50)
    click.echo(f"Server running at http://{host}:{port}")
    click.echo(f"API docs available on http://{host}:{port}/docs")
    click.echo("=" * 50)

    uvicorn.run(
        "voltstream.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


@main.command("init-db")
def init_db() -> None:
    """Initialize the database schema."""
    from voltstream.feedback.repository import FeedbackRepository
    from voltstream.storage.database import Database

    async def run():
        async with Database() as db:
            await FeedbackRepository(db).create_tables()

        click.echo("Database initialized successfully")

    asyncio.run(run())


@main.command()
def health() -> None:
    """Check database connectivity."""
    import structlog
    logger = structlog.get_logger()

    async def check() -> bool:
        from voltstream.storage.database import Database

        try:
            async with Database() as db:
                return await db.health_check()
        except Exception as e:
            logger.error("Postgres health check failed", error=str(e))
            return False

    healthy = asyncio.run(check())
    status = click.style("OK", fg="green") if healthy else click.style("FAIL", fg="red")
    click.echo(f"  postgres: {status}")

    if not healthy:
        sys.exit(1)


@main.command()
@click.argument("text")
@click.option(
    "--sentiment",
    default="auto",
    show_default=True,
    help="Positive, Neutral, Negative, or auto to infer from TEXT",
)
@click.option("--source", default="Unknown", show_default=True, help="Source channel, e.g. Zendesk")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def score(text: str, sentiment: str, source: str, as_json: bool) -> None:
    """Score TEXT and show priority, owner, and rationale."""
    from voltstream.feedback.scoring import score_feedback
    from voltstream.feedback.sentiment import resolve_sentiment

    resolved = resolve_sentiment(text, sentiment)
    result = score_feedback(text, resolved, source)

    if as_json:
        click.echo(json.dumps({
            "sentiment": resolved,
            "priority": result.priority,
            "owner": result.owner,
            "rationale": [entry.to_dict() for entry in result.rationale],
        }, indent=2))
        return

    click.echo(f"Sentiment: {resolved}")
    click.echo(f"Priority:  {result.priority}")
    click.echo(f"Owner:     {result.owner}")
    click.echo("Rationale:")
    for entry in result.rationale:
        click.echo(f"  {entry.label:<45} {entry.value}")


if __name__ == "__main__":
    main()
