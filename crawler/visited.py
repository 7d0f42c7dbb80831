"""
visited.py - Claim-on-First-Sight URL Set

Records every URL that has been enqueued so each one enters the frontier
at most once per crawl, however many pages link to it. URLs are keyed by
get_urlhash(), so http:// and https:// variants of a page share a claim.
"""

from threading import Lock

from utils import get_urlhash


class VisitedSet(object):

    def __init__(self):
        self.lock = Lock()
        self.seen = set()  # url hashes

    def try_claim(self, url):
        """
        Insert ``url`` if absent (thread-safe).

        Returns:
            True if this call claimed the URL and the caller must enqueue it,
            False if it was already claimed.
        """
        urlhash = get_urlhash(url)
        with self.lock:
            if urlhash in self.seen:
                return False
            self.seen.add(urlhash)
            return True

    def __contains__(self, url):
        urlhash = get_urlhash(url)
        with self.lock:
            return urlhash in self.seen

    def __len__(self):
        with self.lock:
            return len(self.seen)
