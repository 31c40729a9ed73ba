import logging

from flask import Flask, abort, current_app, jsonify, redirect, render_template, request, url_for

from .bans import BanKind
from .cat_api import CatApiClient
from .catalog import load_catalog
from .config import Settings, configure_logging
from .discovery import DiscoverySession

logger = logging.getLogger(__name__)


def create_app(settings=None, client=None):
    settings = settings or Settings.from_env()
    client = client or CatApiClient(
        base_url=settings.base_url,
        api_key=settings.api_key,
        timeout=settings.timeout,
    )

    app = Flask(__name__)
    app.extensions["cat_client"] = client
    app.extensions["cat_session"] = DiscoverySession(catalog=load_catalog(client))

    @app.route("/")
    def index():
        return render_template("index.html", state=_session().snapshot())

    @app.route("/api/state")
    def state():
        return jsonify(_session().snapshot().to_dict())

    @app.route("/discover", methods=["POST"])
    def discover():
        session = _session()
        if session.loading:
            logger.info("Ignoring discover request, one is already in progress")
        else:
            session.discover(current_app.extensions["cat_client"])
        return redirect(url_for("index"))

    @app.route("/bans/toggle", methods=["POST"])
    def toggle_ban():
        kind = request.form.get("kind", "")
        value = request.form.get("value", "")
        if kind not in (k.value for k in BanKind) or not value:
            abort(400)
        _session().toggle_ban(kind, value)
        return redirect(url_for("index"))

    @app.route("/bans/remove", methods=["POST"])
    def remove_ban():
        try:
            _session().unban(request.form.get("key", ""))
        except ValueError:
            abort(400)
        return redirect(url_for("index"))

    return app


def _session():
    return current_app.extensions["cat_session"]


if __name__ == "__main__":
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    create_app(settings).run(host=settings.host, port=settings.port, debug=settings.debug)
