import os
import logging
from hashlib import sha256
from threading import Lock
from urllib.parse import urlparse, urldefrag

from utils.errors import SetupError


FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_log_dir = None
_file_handlers = {}  # filename -> shared FileHandler
_handlers_lock = Lock()


def init_logging(log_dir):
    """
    Enable file logging under ``log_dir``.

    Raises:
        SetupError: if the directory cannot be created or written to
    """
    global _log_dir
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        raise SetupError(f"Cannot create log directory {log_dir}: {e}") from e
    if not os.access(log_dir, os.W_OK):
        raise SetupError(f"Log directory {log_dir} is not writable.")
    _log_dir = log_dir


def _get_file_handler(filename):
    # One handler per file, so workers sharing a log file share its lock.
    with _handlers_lock:
        path = os.path.join(_log_dir, f"{filename}.log")
        handler = _file_handlers.get(path)
        if handler is None:
            try:
                handler = logging.FileHandler(path)
            except OSError as e:
                raise SetupError(f"Cannot open log file {path}: {e}") from e
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(FORMAT))
            _file_handlers[path] = handler
        return handler


def get_logger(name, filename=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        logger.propagate = False

        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(ch)

    # Loggers created before init_logging() pick up their file on a later call
    if _log_dir is not None:
        fh = _get_file_handler(filename if filename else name)
        if fh not in logger.handlers:
            logger.addHandler(fh)
    return logger


def get_urlhash(url):
    parsed = urlparse(url)
    # everything other than scheme.
    return sha256(
        f"{parsed.netloc}/{parsed.path}/{parsed.params}/"
        f"{parsed.query}/{parsed.fragment}".encode("utf-8")).hexdigest()


def normalize(url):
    url, _ = urldefrag(url.strip())
    if url.endswith("/"):
        return url.rstrip("/")
    return url
