import json

from typer.testing import CliRunner

from product_scraper.interface import cli
from product_scraper.models.products import PageClassification, ProductRecord
from product_scraper.services.fetcher import TransportError
from product_scraper.strategies.search import SearchContext, SearchStrategy

runner = CliRunner()


def _fake_flow(ctx=None, error=None):
    async def flow(keyword):
        if error is not None:
            raise error
        return ctx
    return flow


def test_scrape_prints_products_and_exports(monkeypatch, tmp_path):
    ctx = SearchContext(
        keyword="mouse",
        url="https://www.amazon.com/s?k=mouse",
        classification=PageClassification.valid_results,
        products=[ProductRecord(title="Mouse", rating="4.4", review_count=10, image_url="https://img/m.jpg")],
    )
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "run_search_flow", _fake_flow(ctx))

    result = runner.invoke(
        cli.app,
        ["scrape", "--keyword", "mouse", "--export", "--output-dir", str(tmp_path), "--format", "csv"],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"title": "Mouse", "rating": "4.4", "reviews": 10, "imageUrl": "https://img/m.jpg"}
    ]
    assert (tmp_path / "products.csv").exists()


def test_scrape_blank_keyword_exits_with_error(monkeypatch, recording_fetcher, tmp_path):
    fetcher = recording_fetcher()

    async def flow(keyword):
        return await SearchStrategy(fetcher=fetcher, diagnostic_path=tmp_path / "dump.html").run(keyword)

    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "run_search_flow", flow)

    result = runner.invoke(cli.app, ["scrape", "--keyword", "   "])

    assert result.exit_code == 1
    assert fetcher.calls == []


def test_scrape_transport_failure_exits_with_error(monkeypatch):
    error = TransportError("https://www.amazon.com/s?k=mouse", "status 503", status_code=503)
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "run_search_flow", _fake_flow(error=error))

    result = runner.invoke(cli.app, ["scrape", "--keyword", "mouse"])

    assert result.exit_code == 1


def test_scrape_rejects_unknown_export_format(monkeypatch, tmp_path):
    called = []

    async def flow(keyword):
        called.append(keyword)

    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli, "run_search_flow", flow)

    result = runner.invoke(
        cli.app,
        ["scrape", "--keyword", "mouse", "--export", "--output-dir", str(tmp_path), "--format", "xml"],
    )

    assert result.exit_code == 2
    assert called == []
    assert list(tmp_path.iterdir()) == []
