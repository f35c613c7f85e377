# ripples/viewer/logging_config.py
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level=logging.INFO, log_file=None):
    """
    Routes everything under the ``ripples`` logger to stdout, plus ``log_file``
    when given, and returns that logger for the application to use.

    Calling it again replaces the handlers of the previous call.
    """
    root = logging.getLogger("ripples")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root
