from flask import request, g
from impact_api.config import DEFAULT_SLUG


def slug_middleware(app):
    @app.before_request
    def load_slug():
        # Every report installation is addressed by ?slug=; missing or blank
        # falls back to the default report.
        slug = (request.args.get("slug") or "").strip()
        g.slug = slug or DEFAULT_SLUG
