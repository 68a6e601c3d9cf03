import os
import sys

from qrest import create_app
from qrest.config import DevConfig, ProdConfig
from qrest.storage import Database, FlushScheduler, install_signal_handlers

USAGE = "Usage: {} /path/to/db.json (or set QREST_DB_PATH)"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    debug = os.getenv("DEBUG", "false").strip().lower() in {"1", "true", "yes", "on"}
    config_class = DevConfig if debug else ProdConfig

    db_path = argv[0] if len(argv) == 1 else config_class.DB_PATH
    if len(argv) > 1 or not db_path:
        sys.exit(USAGE.format(os.path.basename(sys.argv[0])))

    # A missing or malformed file is fatal: no degraded start
    database = Database.load(db_path)
    app = create_app(config_class, database)

    # Flush the JSON to the backing file every interval, and once more on exit
    scheduler = FlushScheduler(database, app.config["FLUSH_INTERVAL"])
    scheduler.start()
    install_signal_handlers(scheduler)

    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=debug, use_reloader=False)


if __name__ == "__main__":
    main()
