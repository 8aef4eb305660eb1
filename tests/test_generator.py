"""Tests for sitepipe.services.generator.generate_site."""

import json

import pytest

from sitepipe.models.site import Site
from sitepipe.services.errors import RenderError, SiteGenerationError, SiteValidationError
from sitepipe.services.generator import generate_site, page_filename


def _tree(root):
    return sorted(str(p.relative_to(root)) for p in root.rglob("*") if p.is_file())


class RecordingRenderer:
    """Renderer stand-in that records every call."""

    def __init__(self):
        self.calls = []

    def render(self, template_name, context):
        self.calls.append((template_name, context))
        return f"<html>{context['page'].slug}</html>"


class FailingRenderer:
    def render(self, template_name, context):
        raise RenderError("boom")


class TestPageFilename:
    def test_index_slug(self):
        assert page_filename("index") == "index.html"

    @pytest.mark.parametrize("slug", ["contact", "about-me", "page-2"])
    def test_other_slugs(self, slug):
        assert page_filename(slug) == f"{slug}.html"


class TestGenerateSite:
    def test_result_fields(self, portfolio_site, tmp_path):
        result = generate_site(portfolio_site, output_root=tmp_path)

        assert result.site_name == "TestPortfolio"
        assert result.output_path == str(tmp_path / "TestPortfolio")
        assert result.pages_generated == 2
        assert result.message == "Site generated successfully"

    def test_writes_generated_tree(self, portfolio_site, tmp_path):
        generate_site(portfolio_site, output_root=tmp_path)

        assert _tree(tmp_path / "TestPortfolio") == [
            "assets/script.js",
            "assets/styles.css",
            "config.json",
            "contact.html",
            "index.html",
        ]

    def test_config_json(self, portfolio_site, tmp_path):
        generate_site(portfolio_site, output_root=tmp_path)

        config = json.loads((tmp_path / "TestPortfolio" / "config.json").read_text())
        assert config["siteName"] == "TestPortfolio"
        assert config["pages"] == 2
        assert isinstance(config["generatedAt"], int)

    def test_pages_are_rendered_html(self, portfolio_site, tmp_path):
        generate_site(portfolio_site, output_root=tmp_path)

        index = (tmp_path / "TestPortfolio" / "index.html").read_text()
        assert index.startswith("<!DOCTYPE html>")
        assert "Welcome" in index
        assert "Get in touch" in (tmp_path / "TestPortfolio" / "contact.html").read_text()

    def test_assets_are_site_independent(self, portfolio_site, tmp_path):
        other = portfolio_site.model_copy(update={"name": "OtherSite"})
        generate_site(portfolio_site, output_root=tmp_path)
        generate_site(other, output_root=tmp_path)

        for asset in ("assets/styles.css", "assets/script.js"):
            assert (tmp_path / "TestPortfolio" / asset).read_text() == (
                tmp_path / "OtherSite" / asset
            ).read_text()

    def test_generation_is_repeatable(self, portfolio_site, tmp_path):
        first = generate_site(portfolio_site, output_root=tmp_path)
        first_tree = _tree(tmp_path / "TestPortfolio")
        second = generate_site(portfolio_site, output_root=tmp_path)

        assert first.pages_generated == second.pages_generated
        assert first_tree == _tree(tmp_path / "TestPortfolio")

    def test_renders_pages_in_order_with_context(self, portfolio_site, tmp_path):
        renderer = RecordingRenderer()
        generate_site(portfolio_site, output_root=tmp_path, renderer=renderer)

        assert [ctx["page"].slug for _name, ctx in renderer.calls] == ["index", "contact"]
        template_name, context = renderer.calls[0]
        assert template_name == "page.html"
        assert context["site"] is portfolio_site
        assert context["sections"] == list(portfolio_site.pages[0].sections)
        assert (tmp_path / "TestPortfolio" / "index.html").read_text() == "<html>index</html>"

    def test_site_is_not_mutated(self, portfolio_site, tmp_path):
        before = portfolio_site.model_dump()
        generate_site(portfolio_site, output_root=tmp_path)
        assert portfolio_site.model_dump() == before


class TestGenerationFailures:
    def test_validation_failure_writes_nothing(self, portfolio_payload, tmp_path):
        portfolio_payload["pages"][1]["slug"] = "index"
        site = Site.model_validate(portfolio_payload)

        with pytest.raises(SiteValidationError, match="Page slugs must be unique"):
            generate_site(site, output_root=tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_none_site(self, tmp_path):
        with pytest.raises(SiteValidationError, match="Site cannot be null"):
            generate_site(None, output_root=tmp_path)

    def test_site_name_with_path_separator(self, portfolio_payload, tmp_path):
        portfolio_payload["siteName"] = "../escape"
        site = Site.model_validate(portfolio_payload)

        with pytest.raises(SiteValidationError):
            generate_site(site, output_root=tmp_path / "output")
        assert not (tmp_path / "escape").exists()

    def test_filesystem_error_is_wrapped(self, portfolio_site, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(SiteGenerationError) as excinfo:
            generate_site(portfolio_site, output_root=blocker)
        assert isinstance(excinfo.value.__cause__, OSError)
        assert not isinstance(excinfo.value, SiteValidationError)

    def test_render_error_is_wrapped(self, portfolio_site, tmp_path):
        with pytest.raises(SiteGenerationError, match="page 'index' could not be rendered"):
            generate_site(portfolio_site, output_root=tmp_path, renderer=FailingRenderer())
