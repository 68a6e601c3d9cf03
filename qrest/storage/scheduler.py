import logging
import signal
import threading
from typing import Optional

from ..errors import QrestError
from .database import Database

logger = logging.getLogger("qrest")

DEFAULT_FLUSH_INTERVAL = 30.0


class FlushScheduler:
    """
    Background thread that flushes the database every ``interval`` seconds,
    and once more when stopped.

    Each cycle waits on whichever comes first: the interval elapsing or
    ``stop()`` being called.
    """

    def __init__(self, database: Database, interval: float = DEFAULT_FLUSH_INTERVAL):
        self.database = database
        self.interval = float(interval)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="qrest-flush", daemon=True)
        self._thread.start()
        logger.info("Flushing %s every %.0fs", self.database.path, self.interval)

    def stop(self, timeout: Optional[float] = None):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
        else:
            self.flush_once()

    def flush_once(self) -> bool:
        try:
            return self.database.flush()
        except QrestError:
            logger.exception("Flush of %s failed; keeping changes for the next cycle", self.database.path)
            return False
        except Exception:
            # the loop must outlive any single failed cycle
            logger.exception("Unexpected error flushing %s", self.database.path)
            return False

    def _run(self):
        while True:
            stopping = self._stop.wait(self.interval)
            self.flush_once()
            if stopping:
                return


def install_signal_handlers(scheduler: FlushScheduler):
    """Flush and exit on SIGINT/SIGTERM. Must be called from the main thread."""

    def _handle(signum, frame):
        logger.info("Received %s, flushing before exit", signal.Signals(signum).name)
        scheduler.stop()
        raise SystemExit(0)

    signal.signal(signal.SIGINT, _handle)
    signal.signal(signal.SIGTERM, _handle)
    return _handle
