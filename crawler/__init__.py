"""
crawler/__init__.py - Crawler Orchestrator

Coordinates the multi-threaded web crawler by:
- Creating the shared frontier and visited set, and seeding them
- Spawning worker threads and waiting until they all terminate
- Cancelling the run on request or when the deadline passes
- Merging the workers' fetch records once they are done

Key role: High-level coordinator that ties together frontier and workers
"""

from threading import Timer

from utils import get_logger, normalize
from utils.errors import SetupError
from scraper import is_valid
from crawler.frontier import Frontier, WorkItem
from crawler.visited import VisitedSet
from crawler.worker import Worker


class Crawler(object):
    """
    Multi-threaded web crawler coordinator.

    Workers share one frontier and one visited set. The run ends when every
    worker has observed the frontier complete (or shut down).
    """

    def __init__(self, config, frontier_factory=Frontier, visited_factory=VisitedSet,
                 worker_factory=Worker, fetch=None, extract_links=None):
        """
        Initialize the crawler and seed the frontier at depth 0.

        Args:
            config: Configuration object (threads, seeds, depth, etc.)
            frontier_factory: Factory for creating frontier (for testing)
            visited_factory: Factory for creating the visited set (for testing)
            worker_factory: Factory for creating workers (for testing)
            fetch: Fetcher passed to every worker (defaults to utils.download)
            extract_links: Link extractor passed to every worker
        """
        self.config = config
        self.logger = get_logger("CRAWLER")
        self.frontier = frontier_factory()
        self.visited = visited_factory()
        self.workers = []
        self.worker_factory = worker_factory
        self.fetch = fetch
        self.extract_links = extract_links
        self.records = []
        self._deadline = None

        for url in config.seed_urls:
            url = normalize(url)
            if not is_valid(url, config.allowed_domains):
                raise SetupError(f"Invalid or out-of-scope seed URL: {url}")
            if self.visited.try_claim(url):
                self.frontier.push(WorkItem(url, 0))
            else:
                self.logger.info(f"Ignoring duplicate seed {url}")

    def start_async(self):
        """Spawn worker threads without blocking."""
        self.workers = [
            self.worker_factory(worker_id, self.config, self.frontier, self.visited,
                                fetch=self.fetch, extract_links=self.extract_links)
            for worker_id in range(self.config.threads_count)
        ]
        self.logger.info(
            f"Starting {len(self.workers)} workers on {len(self.frontier)} seeds, "
            f"max depth {self.config.max_depth}.")
        if self.config.max_runtime > 0:
            self._deadline = Timer(self.config.max_runtime, self._on_deadline)
            self._deadline.daemon = True
            self._deadline.start()
        for worker in self.workers:
            worker.start()

    def start(self):
        """Start crawler and block until all workers complete."""
        self.start_async()
        return self.join()

    def join(self):
        """
        Wait for all worker threads to complete.

        Returns:
            FetchRecord list merged from every worker, in worker order
        """
        for worker in self.workers:
            worker.join()
        if self._deadline is not None:
            self._deadline.cancel()

        self.records = [record for worker in self.workers for record in worker.records]
        failed = sum(1 for record in self.records if record.error is not None)
        self.logger.info(
            f"Crawl finished: {len(self.records)} fetch attempts, {failed} failed, "
            f"{len(self.visited)} urls claimed.")
        return self.records

    def stop(self):
        """Stop claiming new work; workers finish their current item and exit."""
        self.frontier.shutdown()

    def _on_deadline(self):
        self.logger.warning(
            f"Deadline of {self.config.max_runtime}s reached, stopping.")
        self.stop()
