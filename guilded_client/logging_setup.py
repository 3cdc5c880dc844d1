import logging


def setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every request at INFO; keep it quiet unless we are debugging.
    if logging.getLevelName(log_level) != logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
