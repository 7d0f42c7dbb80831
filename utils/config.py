from utils.errors import SetupError


DEFAULTS = {
    "USERAGENT": "DepthCrawler/0.1",
    "MAXDEPTH": "3",
    "THREADCOUNT": "4",
    "TIMEOUT": "10",
    "MAXRUNTIME": "0",
    "LOGDIR": "Logs",
}


def _get(cparser, section, key):
    if cparser.has_section(section) and cparser.has_option(section, key):
        return cparser.get(section, key)
    return DEFAULTS.get(key, "")


def _split(value):
    return [part.strip() for part in value.split(",") if part.strip()]


class Config(object):
    """
    Read-only crawl configuration.

    Built from a ConfigParser; keyword arguments override the file. Any
    attribute assignment after construction raises AttributeError.
    """

    def __init__(self, cparser, seed_urls=None, max_depth=None,
                 threads_count=None, log_dir=None):
        try:
            values = {
                "user_agent": _get(cparser, "IDENTIFICATION", "USERAGENT").strip(),
                "seed_urls": tuple(seed_urls) if seed_urls else tuple(
                    _split(_get(cparser, "CRAWLER", "SEEDURL"))),
                "max_depth": int(max_depth if max_depth is not None
                                 else _get(cparser, "CRAWLER", "MAXDEPTH")),
                "allowed_domains": tuple(
                    _split(_get(cparser, "CRAWLER", "ALLOWEDDOMAINS"))),
                "max_runtime": float(_get(cparser, "CRAWLER", "MAXRUNTIME")),
                "timeout": float(_get(cparser, "CONNECTION", "TIMEOUT")),
                "threads_count": int(threads_count if threads_count is not None
                                     else _get(cparser, "LOCAL PROPERTIES", "THREADCOUNT")),
                "log_dir": log_dir or _get(cparser, "LOCAL PROPERTIES", "LOGDIR"),
            }
        except ValueError as e:
            raise SetupError(f"Invalid configuration value: {e}") from e

        if not values["seed_urls"]:
            raise SetupError("No seed URLs supplied.")
        if values["max_depth"] < 0:
            raise SetupError(f"MAXDEPTH must be >= 0, got {values['max_depth']}.")
        if values["threads_count"] < 1:
            raise SetupError(
                f"THREADCOUNT must be >= 1, got {values['threads_count']}.")
        if values["timeout"] <= 0:
            raise SetupError(f"TIMEOUT must be > 0, got {values['timeout']}.")

        for name, value in values.items():
            object.__setattr__(self, name, value)

    @property
    def depth_limit(self):
        """Exclusive depth bound: items at this depth are never fetched."""
        return self.max_depth + 1

    def __setattr__(self, name, value):
        raise AttributeError(f"Config is read-only (tried to set {name!r})")

    def __repr__(self):
        return (f"Config(seeds={len(self.seed_urls)}, max_depth={self.max_depth}, "
                f"threads={self.threads_count})")
