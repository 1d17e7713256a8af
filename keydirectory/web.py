"""
Web front end: one HTML page per slice of the keyspace, plus a redirect from a
WIF private key to the page that lists it.
"""

import logging
from typing import Optional

from flask import Flask, abort, redirect, render_template, url_for

from .config import Settings
from .deriver import KeyDeriver
from .encoding import get_network
from .errors import KeyDirectoryError
from .keyspace import Keyspace

logger = logging.getLogger(__name__)

LOOKUP_PREFIX = "/warning:understand-how-this-works!/"


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()
    keyspace = Keyspace.create(page_size=settings.page_size)
    deriver = KeyDeriver(keyspace, get_network(settings.network))

    app = Flask(__name__)
    app.config["KEYSPACE"] = keyspace
    app.config["DERIVER"] = deriver

    @app.route("/")
    def index():
        return page("1")

    @app.route("/<number>")
    def page(number: str):
        try:
            current = keyspace.parse_page(number)
            keys, length = deriver.derive_page(current)
        except KeyDirectoryError as e:
            logger.info("Rejected page %.40r: %s", number, e)
            abort(404)
        logger.debug("Rendering page %d with %d keys", current, length)
        return render_template(
            "page.html",
            page=current,
            pages=keyspace.pages(),
            previous=current - 1,
            next=current + 1 if current < keyspace.pages() else None,
            keys=keys,
            explorer_url=settings.explorer_url,
        )

    @app.route(LOOKUP_PREFIX + "<wif>")
    def lookup(wif: str):
        try:
            index = deriver.decode_index(wif)
            anchor = deriver.canonical_wif(wif)
        except KeyDirectoryError as e:
            # the submitted text may be a real key, keep it out of the log
            logger.info("Rejected lookup: %s", type(e).__name__)
            abort(404)
        target = keyspace.page_for_index(index)
        location = url_for("page", number=target) + "#" + anchor
        return redirect(location, code=307)

    return app
