import threading
import unittest

from crawler.visited import VisitedSet


class TestVisitedSet(unittest.TestCase):
    def setUp(self):
        self.visited = VisitedSet()

    def test_first_claim_wins(self):
        self.assertTrue(self.visited.try_claim("http://a/page"))
        self.assertFalse(self.visited.try_claim("http://a/page"))
        self.assertIn("http://a/page", self.visited)
        self.assertEqual(len(self.visited), 1)

    def test_scheme_variants_share_a_claim(self):
        self.assertTrue(self.visited.try_claim("http://a/page"))
        self.assertFalse(self.visited.try_claim("https://a/page"))

    def test_distinct_queries_are_distinct_urls(self):
        self.assertTrue(self.visited.try_claim("http://a/page?x=1"))
        self.assertTrue(self.visited.try_claim("http://a/page?x=2"))
        self.assertNotIn("http://a/page", self.visited)

    def test_each_url_claimed_exactly_once_across_threads(self):
        urls = [f"http://site/{i}" for i in range(200)]
        barrier = threading.Barrier(8)
        wins = []
        lock = threading.Lock()

        def claimer():
            barrier.wait()
            mine = [url for url in urls if self.visited.try_claim(url)]
            with lock:
                wins.extend(mine)

        threads = [threading.Thread(target=claimer) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        self.assertEqual(sorted(wins), sorted(urls))
        self.assertEqual(len(self.visited), len(urls))


if __name__ == "__main__":
    unittest.main()
