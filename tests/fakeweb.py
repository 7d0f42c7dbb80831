"""In-memory link graph standing in for the network in crawler tests."""

from configparser import ConfigParser
from threading import Lock
import time

from utils.config import Config
from utils.errors import TransportError
from utils.response import Response


def make_config(seeds, max_depth=3, threads=4, **crawler_options):
    cparser = ConfigParser()
    cparser.read_dict({"CRAWLER": {k.upper().replace("_", ""): str(v) for k, v in crawler_options.items()}})
    return Config(cparser, seed_urls=seeds, max_depth=max_depth, threads_count=threads)


def page(*links):
    anchors = "".join(f'<a href="{link}">{link}</a>' for link in links)
    return f"<html><body>{anchors}</body></html>".encode("utf-8")


class FakeWeb(object):
    """
    fetch() serves pages from ``graph`` (url -> list of links).

    URLs listed in ``failures`` raise TransportError, URLs in ``statuses``
    answer with that status, anything else unknown is a 404.
    """

    def __init__(self, graph, failures=(), statuses=None, delay=0):
        self.graph = graph
        self.failures = set(failures)
        self.statuses = statuses or {}
        self.delay = delay
        self.lock = Lock()
        self.fetched = []

    def fetch(self, url):
        with self.lock:
            self.fetched.append(url)
        if self.delay:
            time.sleep(self.delay)
        if url in self.failures:
            raise TransportError(url, "connection refused")
        if url in self.statuses:
            return Response(url, self.statuses[url], b"")
        if url not in self.graph:
            return Response(url, 404, b"")
        return Response(url, 200, page(*self.graph[url]))

    def fetch_counts(self):
        counts = {}
        for url in self.fetched:
            counts[url] = counts.get(url, 0) + 1
        return counts
