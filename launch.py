"""
launch.py - Web Crawler Entry Point

Main entry point for the web crawler application.
Handles configuration loading, log setup and crawler initialization.

Usage:
    python launch.py URL [URL ...]            # Crawl from the given seeds
    python launch.py                          # Seeds from config.ini SEEDURL
    python launch.py --max_depth 1 --threads 8 URL
    python launch.py --config_file path URL   # Use custom config file

Exit status: 0 when the crawl completes, 1 on setup failure, 130 when
interrupted.
"""

import sys
from configparser import ConfigParser, Error as ConfigParserError
from argparse import ArgumentParser

from utils import get_logger, init_logging
from utils.config import Config
from utils.errors import SetupError
from crawler import Crawler


def main(seeds, config_file, max_depth=None, threads=None, log_dir=None):
    """
    Build the configuration and run one crawl.

    Args:
        seeds: Seed URLs from the command line (may be empty)
        config_file: Path to configuration file (default: config.ini)
        max_depth: Overrides MAXDEPTH when not None
        threads: Overrides THREADCOUNT when not None
        log_dir: Overrides LOGDIR when not None

    Returns:
        Process exit status
    """
    logger = get_logger("LAUNCH")
    try:
        cparser = ConfigParser()
        cparser.read(config_file)
        config = Config(cparser, seed_urls=seeds, max_depth=max_depth,
                        threads_count=threads, log_dir=log_dir)
        init_logging(config.log_dir)
        logger = get_logger("LAUNCH")
        crawler = Crawler(config)
    except (SetupError, ConfigParserError) as e:
        logger.error(f"Setup failed: {e}")
        return 1

    crawler.start_async()
    try:
        crawler.join()
    except KeyboardInterrupt:
        logger.warning("Interrupted, waiting for in-flight pages.")
        crawler.stop()
        crawler.join()
        return 130
    return 0


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("seeds", nargs="*", metavar="URL",
                        help="Seed URL(s); defaults to SEEDURL from the config file")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--max_depth", type=int, default=None,
                        help="Link hops from a seed that may be fetched")
    parser.add_argument("--threads", type=int, default=None,
                        help="Number of worker threads")
    parser.add_argument("--log_dir", type=str, default=None,
                        help="Directory for log files")
    args = parser.parse_args()
    sys.exit(main(args.seeds, args.config_file, args.max_depth, args.threads,
                  args.log_dir))
