import pytest

PLACEHOLDER_SRC = "data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"


def _result_item(title=None, rating=None, reviews=None, src=None, title_markup=None):
    parts = ['<div data-component-type="s-search-result" data-asin="B000TEST">']
    if src is not None:
        parts.append(f'<img class="s-image" src="{src}" alt="">')
    if title_markup is not None:
        parts.append(title_markup)
    elif title is not None:
        parts.append(f'<h2 class="a-size-mini a-spacing-none a-text-normal"><span>{title}</span></h2>')
    if rating is not None:
        parts.append(f'<i class="a-icon a-icon-star-small"><span class="a-icon-alt">{rating}</span></i>')
    if reviews is not None:
        parts.append(
            '<a class="a-link-normal s-underline-text s-underline-link-text" href="#customerReviews">'
            f'<span class="a-size-base s-underline-text">{reviews}</span></a>'
        )
    parts.append("</div>")
    return "".join(parts)


def _results_page(*items, title="Amazon.com : wireless mouse"):
    head = f"<title>{title}</title>" if title is not None else ""
    return (
        f"<!doctype html><html><head>{head}</head><body>"
        f'<div class="s-main-slot">{"".join(items)}</div>'
        "</body></html>"
    )


@pytest.fixture
def result_item():
    return _result_item


@pytest.fixture
def results_page():
    return _results_page


@pytest.fixture
def placeholder_src():
    return PLACEHOLDER_SRC


class RecordingFetcher:
    """Stands in for PageFetcher; remembers every URL it was asked for."""

    def __init__(self, html="", error=None):
        self.html = html
        self.error = error
        self.calls = []

    async def fetch(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture
def recording_fetcher():
    return RecordingFetcher
