# cli.py

import asyncio
import json
from typing import List

import typer
import uvicorn
from loguru import logger

from product_scraper.core.config import HOST, LOG_LEVEL, OUTPUT_DIR, PORT
from product_scraper.core.logger import setup_logging
from product_scraper.services.exporter import ExportFormat, export_products
from product_scraper.services.fetcher import TransportError
from product_scraper.strategies.search import InputError, run_search_flow

app = typer.Typer()


@app.command()
def scrape(
    keyword: str = typer.Option(..., "--keyword", "-k", help="Search term to look up"),
    export: bool = typer.Option(False, "--export/--no-export", help="Write results to the output directory"),
    output_dir: str = typer.Option(OUTPUT_DIR, "--output-dir", help="Where exported files go"),
    formats: List[ExportFormat] = typer.Option([ExportFormat.json], "--format", help="Export format: json and/or csv"),
    log_level: str = typer.Option(LOG_LEVEL, "--log-level"),
):
    """
    Scrape one search-results page and print the products as JSON.
    Example:
        python main.py scrape --keyword "wireless mouse" --export --format json --format csv
    """
    setup_logging(log_level=log_level)

    try:
        ctx = asyncio.run(run_search_flow(keyword))
    except InputError as e:
        logger.error(f"Invalid input: {e}")
        raise typer.Exit(1)
    except TransportError as e:
        logger.error(f"Failed to scrape data: {e}")
        if e.diagnostic_path:
            logger.info(f"Error page HTML saved to {e.diagnostic_path}")
        raise typer.Exit(1)

    if ctx.blocked:
        logger.warning("The site returned a blocking page; try again later")

    payload = [product.to_payload() for product in ctx.products]
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))

    if export:
        export_products(ctx.products, output_dir=output_dir, formats=formats)


@app.command()
def serve(
    host: str = typer.Option(HOST, "--host"),
    port: int = typer.Option(PORT, "--port"),
    log_level: str = typer.Option(LOG_LEVEL, "--log-level"),
):
    """Run the HTTP API."""
    setup_logging(log_level=log_level)
    logger.info(f"🚀 Backend server running on http://{host}:{port}")
    uvicorn.run("product_scraper.api.http_api:app", host=host, port=port, log_level=log_level.lower())
