from product_scraper.interface.cli import app


if __name__ == "__main__":
    app()
