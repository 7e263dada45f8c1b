# Utils package
import logging
import time


def setup_logging(log_file):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()],
    )


def elapsed_ms(started):
    """Milliseconds elapsed since a time.perf_counter() reading."""
    return int((time.perf_counter() - started) * 1000)
