import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure le logger racine: un seul handler stderr, format horodaté.

    A appeler une fois au démarrage, avant le premier logger.info.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # évite les doublons si l'app est rechargée
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
    logging.captureWarnings(True)
