"""Tests for sitepipe.services.deployment.emit_deployment_files."""

import pytest

from sitepipe.services.deployment import emit_deployment_files


class TestEmitDeploymentFiles:
    def test_writes_three_manifests(self, tmp_path):
        written = emit_deployment_files(tmp_path, "TestPortfolio")

        assert sorted(p.name for p in written) == [".htaccess", "README.md", "netlify.toml"]
        assert all(p.is_file() for p in written)

    def test_htaccess_rules(self, tmp_path):
        emit_deployment_files(tmp_path, "TestPortfolio")

        htaccess = (tmp_path / ".htaccess").read_text()
        assert "RewriteEngine On" in htaccess
        assert "RewriteRule ^(.*)$ index.html [QSA,L]" in htaccess
        assert "mod_deflate.c" in htaccess
        assert 'ExpiresByType text/css "access plus 1 month"' in htaccess

    def test_netlify_config(self, tmp_path):
        emit_deployment_files(tmp_path, "TestPortfolio")

        netlify = (tmp_path / "netlify.toml").read_text()
        assert 'publish = "."' in netlify
        assert 'to = "/index.html"' in netlify
        assert "status = 200" in netlify

    def test_readme_names_site(self, tmp_path):
        emit_deployment_files(tmp_path, "TestPortfolio")

        readme = (tmp_path / "README.md").read_text()
        assert readme.startswith("# TestPortfolio - Deployment Instructions")
        assert "### 2. Netlify" in readme

    def test_only_site_name_varies(self, tmp_path):
        first, second = tmp_path / "a", tmp_path / "b"
        first.mkdir()
        second.mkdir()
        emit_deployment_files(first, "Alpha")
        emit_deployment_files(second, "Alpha")

        for name in (".htaccess", "netlify.toml", "README.md"):
            assert (first / name).read_text() == (second / name).read_text()

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            emit_deployment_files(tmp_path / "missing", "TestPortfolio")
