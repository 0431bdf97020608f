import logging
import os


DEFAULT_LOG_FILENAME = 'ffbp-log.txt'

LINE_FMT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
            "%(levelname)-8s %(message)s")
DATE_FMT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER_NAME = 'ffbp'


def setup_logging(filename=None, stdout=True, level=logging.DEBUG):
    """ Sets up logging formatting, etc. for the package logger

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file (which is
        overwritten). Use :code:`DEFAULT_LOG_FILENAME` for a file in the
        current directory.

    stdout: bool, default=True
        If True, log records are written to the console as well

    level: int, default=logging.DEBUG
        The level of the package logger

    Returns
    -------
    logger: logging.Logger
        The configured package logger

    Note
    ----
    Calling this function again replaces the handlers installed by the
    previous call, so it is safe to call once per training run.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, '_ffbp_handler', False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LINE_FMT, datefmt=DATE_FMT)

    handlers = []

    if filename is not None:
        handlers.append(
            logging.FileHandler(os.path.abspath(filename), mode='w'))

    if stdout:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler._ffbp_handler = True
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def progress_message(msg, i, n):
    """ Prepend a zero-padded "(i / n)" counter to `msg`
    """
    return "({:0{width}d} / {:d}) {}".format(i, n, msg, width=len(str(n)))
