import logging
import os
import tempfile
import unittest
from unittest import mock

import launch
import utils
from utils import get_logger


class TestLaunch(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.config_file = os.path.join(self.tmp.name, "missing.ini")

    @mock.patch("launch.init_logging")
    @mock.patch("launch.Crawler")
    def test_completed_crawl_exits_zero(self, crawler_cls, init_logging):
        status = launch.main(["http://a"], self.config_file, max_depth=1, threads=2,
                             log_dir=self.tmp.name)

        self.assertEqual(status, 0)
        config = crawler_cls.call_args.args[0]
        self.assertEqual(config.seed_urls, ("http://a",))
        self.assertEqual(config.max_depth, 1)
        self.assertEqual(config.threads_count, 2)
        init_logging.assert_called_once_with(self.tmp.name)
        crawler_cls.return_value.start_async.assert_called_once_with()
        crawler_cls.return_value.join.assert_called_once_with()

    @mock.patch("launch.Crawler")
    def test_no_seeds_exits_one(self, crawler_cls):
        self.assertEqual(launch.main([], self.config_file), 1)
        crawler_cls.assert_not_called()

    @mock.patch("launch.Crawler")
    def test_unavailable_log_sink_exits_one(self, crawler_cls):
        blocker = os.path.join(self.tmp.name, "file")
        with open(blocker, "w") as f:
            f.write("not a directory")

        status = launch.main(["http://a"], self.config_file,
                             log_dir=os.path.join(blocker, "logs"))

        self.assertEqual(status, 1)
        crawler_cls.assert_not_called()

    @mock.patch("launch.init_logging")
    def test_invalid_seed_exits_one(self, init_logging):
        self.assertEqual(launch.main(["nonsense"], self.config_file), 1)

    @mock.patch("launch.init_logging")
    @mock.patch("launch.Crawler")
    def test_interrupt_stops_the_crawl(self, crawler_cls, init_logging):
        crawler = crawler_cls.return_value
        crawler.join.side_effect = [KeyboardInterrupt, []]

        status = launch.main(["http://a"], self.config_file)

        self.assertEqual(status, 130)
        crawler.stop.assert_called_once_with()
        self.assertEqual(crawler.join.call_count, 2)

    @mock.patch("launch.Crawler")
    def test_interrupt_warning_reaches_the_log_file(self, crawler_cls):
        crawler_cls.return_value.join.side_effect = [KeyboardInterrupt, []]
        log_dir = os.path.join(self.tmp.name, "logs")
        with mock.patch.object(utils, "_log_dir", None), \
                mock.patch.dict(utils._file_handlers, clear=True):
            self.addCleanup(self._drop_file_handlers, "LAUNCH")
            get_logger("LAUNCH")  # already cached before file logging starts

            status = launch.main(["http://a"], self.config_file, log_dir=log_dir)

            for handler in logging.getLogger("LAUNCH").handlers:
                handler.flush()
        self.assertEqual(status, 130)
        with open(os.path.join(log_dir, "LAUNCH.log")) as f:
            self.assertIn("Interrupted, waiting for in-flight pages.", f.read())

    def _drop_file_handlers(self, name):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                logger.removeHandler(handler)


if __name__ == "__main__":
    unittest.main()
