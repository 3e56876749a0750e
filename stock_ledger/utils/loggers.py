import logging


def get_logger(name="stock_ledger"):
    """
    Logger with one stderr handler attached. Calling it on the package root
    ("stock_ledger") makes every module's `logging.getLogger(__name__)` output
    visible; repeated calls never stack handlers.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(ch)
    return logger
