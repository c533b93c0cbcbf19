import logging

_LOGGER_CONFIGURED = False


def setup_logging(level=logging.INFO):
    """Console logging for the package. Safe to call more than once."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger('pixelraster')
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    _LOGGER_CONFIGURED = True
