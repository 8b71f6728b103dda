import logging

LOG_FORMAT = "[mdtodo] %(levelname)s %(message)s"


def setup_logging(level: str | int = logging.WARNING, verbose: bool = False) -> None:
    """Configure the process-wide stderr handler. Call once per CLI invocation."""
    if verbose:
        level = logging.DEBUG
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("mdtodo").setLevel(level)
