"""
worker.py - Crawler Worker Threads

Worker threads that take work items from the frontier, download pages,
extract links using the scraper module, and publish newly claimed links
back to the frontier one hop deeper.

Key role: Executes the fetch -> extract -> publish loop for one item at a
time and always releases the item with mark_done().
"""

from collections import namedtuple
from threading import Thread

from crawler.frontier import WorkItem
from utils.download import download
from utils.errors import ExtractionError, TransportError
from utils import get_logger, normalize
import scraper


FetchRecord = namedtuple("FetchRecord", ["url", "depth", "status", "error"])


class Worker(Thread):
    """
    Worker thread that downloads pages and feeds their links to the frontier.

    Runs until the frontier reports completion (or is shut down). Fetch and
    extraction failures only cost the children of the failing item.
    """

    def __init__(self, worker_id, config, frontier, visited,
                 fetch=None, extract_links=None):
        """
        Initialize a worker thread.

        Args:
            worker_id: Unique identifier for logging
            config: Configuration object
            frontier: Shared frontier
            visited: Shared VisitedSet
            fetch: callable(url) -> Response; defaults to utils.download
            extract_links: callable(body, base_url) -> list of URLs;
                defaults to scraper.extract_links
        """
        self.worker_id = worker_id
        self.logger = get_logger(f"Worker-{worker_id}", "Worker")
        self.config = config
        self.frontier = frontier
        self.visited = visited
        self.fetch = fetch or self._download
        self.extract_links = extract_links or scraper.extract_links

        self.records = []  # FetchRecord per fetch attempt, read after join()

        super().__init__(name=f"Worker-{worker_id}", daemon=True)

    def _download(self, url):
        return download(url, self.config, self.logger)

    def run(self):
        """
        Main crawl loop.

        Process:
            1. Take an item from the frontier (blocks while siblings are busy)
            2. Skip items beyond the depth limit
            3. Download the page
            4. Extract, validate and claim links; push claimed ones
            5. Mark the item done, whatever happened in 2-4
        """
        while True:
            item = self.frontier.get_tbd_item()
            if item is None:
                self.logger.info("Frontier is empty. Stopping worker.")
                break

            try:
                self.process(item)
            except Exception:
                self.logger.exception(f"Unexpected error while crawling {item.url}")
            finally:
                self.frontier.mark_done()

    def process(self, item):
        if item.depth >= self.config.depth_limit:
            self.logger.debug(f"Skipping {item.url} at depth {item.depth}")
            return

        try:
            resp = self.fetch(item.url)
        except TransportError as e:
            self.logger.warning(f"Failed {item.url}: {e.reason}")
            self.records.append(FetchRecord(item.url, item.depth, None, e.reason))
            return

        self.logger.info(
            f"Downloaded {item.url}, status <{resp.status}>, depth {item.depth}.")
        self.records.append(FetchRecord(item.url, item.depth, resp.status, None))
        if not resp.ok:
            return

        child_depth = item.depth + 1
        if child_depth >= self.config.depth_limit:
            # Children could never be fetched; leave them unclaimed.
            return

        try:
            links = self.extract_links(resp.body, resp.url or item.url)
        except ExtractionError as e:
            self.logger.warning(f"Could not extract links from {item.url}: {e}")
            return

        added = 0
        for link in links:
            link = normalize(link)
            if not scraper.is_valid(link, self.config.allowed_domains):
                continue
            if self.visited.try_claim(link):
                self.frontier.push(WorkItem(link, child_depth))
                added += 1
        if added:
            self.logger.debug(f"Queued {added} links from {item.url}")
