import requests

from utils.errors import TransportError
from utils.response import Response


def download(url, config, logger=None):
    """
    Fetch ``url`` once, following redirects.

    Non-2xx responses are returned like any other; only failures to get a
    response at all raise.

    Raises:
        TransportError: connection error, timeout, invalid URL, too many
            redirects
    """
    try:
        resp = requests.get(
            url,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
            allow_redirects=True,
        )
    except requests.exceptions.Timeout:
        raise TransportError(url, f"timed out after {config.timeout}s")
    except requests.exceptions.ConnectionError as e:
        raise TransportError(url, f"connection error: {e}")
    except requests.exceptions.RequestException as e:
        raise TransportError(url, f"request error: {e}")

    if logger and resp.history:
        logger.info(f"Redirected {url} -> {resp.url}")
    return Response(resp.url, resp.status_code, resp.content, resp.headers)
