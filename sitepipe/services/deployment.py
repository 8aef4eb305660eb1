"""Deployment manifests written into every Built Tree.

Three files are emitted: an Apache ``.htaccess`` with rewrite and caching
rules, a ``netlify.toml`` build manifest, and a ``README.md`` with
deployment instructions for the site.
"""

import logging
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger(__name__)

HTACCESS_FILENAME = ".htaccess"
NETLIFY_FILENAME = "netlify.toml"
README_FILENAME = "README.md"

HTACCESS = """# Apache configuration for static site
RewriteEngine On

# Handle client routing
RewriteCond %{REQUEST_FILENAME} !-f
RewriteCond %{REQUEST_FILENAME} !-d
RewriteRule ^(.*)$ index.html [QSA,L]

# Enable compression
<IfModule mod_deflate.c>
    AddOutputFilterByType DEFLATE text/plain
    AddOutputFilterByType DEFLATE text/html
    AddOutputFilterByType DEFLATE text/xml
    AddOutputFilterByType DEFLATE text/css
    AddOutputFilterByType DEFLATE application/xml
    AddOutputFilterByType DEFLATE application/xhtml+xml
    AddOutputFilterByType DEFLATE application/rss+xml
    AddOutputFilterByType DEFLATE application/javascript
    AddOutputFilterByType DEFLATE application/x-javascript
</IfModule>

# Set cache headers
<IfModule mod_expires.c>
    ExpiresActive On
    ExpiresByType text/css "access plus 1 month"
    ExpiresByType application/javascript "access plus 1 month"
    ExpiresByType image/png "access plus 1 month"
    ExpiresByType image/jpg "access plus 1 month"
    ExpiresByType image/jpeg "access plus 1 month"
    ExpiresByType image/gif "access plus 1 month"
    ExpiresByType image/svg+xml "access plus 1 month"
</IfModule>
"""

NETLIFY_TOML = """[build]
  publish = "."

[[redirects]]
  from = "/*"
  to = "/index.html"
  status = 200

[build.environment]
  NODE_VERSION = "18"
"""

README_TEMPLATE = """# {site_name} - Deployment Instructions

This directory contains the built static site ready for deployment.

## Deployment Options

### 1. GitHub Pages
1. Push this directory to a GitHub repository
2. Enable GitHub Pages in repository settings
3. Select source as "Deploy from a branch"
4. Choose the branch containing this directory

### 2. Netlify
1. Drag and drop this directory to Netlify
2. Or connect your GitHub repository
3. Set build command to empty (already built)
4. Set publish directory to this directory

### 3. Vercel
1. Install Vercel CLI: `npm i -g vercel`
2. Run `vercel` in this directory
3. Follow the prompts

### 4. Apache/Nginx
1. Upload all files to your web server
2. Configure your web server to serve static files
3. Use the included .htaccess file for Apache

## Files Included
- HTML pages
- CSS and JavaScript assets
- Configuration files for various platforms
- Deployment instructions

Generated by sitepipe
"""

# Platform name -> one-line instructions, served by the deployment-info endpoint.
SUPPORTED_PLATFORMS: Dict[str, str] = {
    "GitHub Pages": "Push to GitHub repository and enable Pages",
    "Netlify": "Drag and drop build directory or connect repository",
    "Vercel": "Use Vercel CLI or connect repository",
    "Apache/Nginx": "Upload files to web server",
}


def emit_deployment_files(build_path: Path, site_name: str) -> List[Path]:
    """Write the deployment manifests into *build_path* and return their paths.

    Raises:
        OSError: if any file cannot be written.
    """
    files = {
        HTACCESS_FILENAME: HTACCESS,
        NETLIFY_FILENAME: NETLIFY_TOML,
        README_FILENAME: README_TEMPLATE.format(site_name=site_name),
    }

    written: List[Path] = []
    for filename, content in files.items():
        target = Path(build_path) / filename
        target.write_text(content, encoding="utf-8")
        written.append(target)

    logger.info("Wrote %d deployment file(s) to %s", len(written), build_path)
    return written
