"""Launch the Greeter Flask service on the configured address."""
from __future__ import annotations

import logging

from greeter import app
from greeter.server_options import load_server_options

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    options = load_server_options()
    logger.info("Serving greeting on http://%s:%d/", options["host"], options["port"])

    app.run(host=options["host"], port=options["port"], debug=False)


if __name__ == "__main__":
    main()
