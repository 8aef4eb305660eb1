import pytest

from sitepipe.models.site import Site

PORTFOLIO = {
    "siteName": "TestPortfolio",
    "pages": [
        {
            "title": "Home",
            "slug": "index",
            "sections": [
                {"type": "hero", "heading": "Welcome", "text": "I build things for the web."},
                {"type": "skills", "heading": "Skills", "items": ["Python", "FastAPI", "Jinja"]},
            ],
        },
        {
            "title": "Contact",
            "slug": "contact",
            "sections": [
                {"type": "form", "heading": "Get in touch", "fields": ["Name", "Email", "Message"]},
            ],
        },
    ],
}


@pytest.fixture
def portfolio_payload() -> dict:
    """The portfolio site as the JSON document a caller would submit."""
    return {
        "siteName": PORTFOLIO["siteName"],
        "pages": [dict(page) for page in PORTFOLIO["pages"]],
    }


@pytest.fixture
def portfolio_site(portfolio_payload) -> Site:
    return Site.model_validate(portfolio_payload)
