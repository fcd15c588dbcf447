import logging
import sys


def setup_logging(level="WARNING"):
    """
    Send client logs to stderr so they stay out of the rendered page on stdout.

    Call once before the console loop starts.
    """
    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # requests/urllib3 connection chatter is only useful when debugging
    logging.getLogger("urllib3").setLevel(max(root.level, logging.WARNING))
