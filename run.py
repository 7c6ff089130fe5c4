import argparse
import logging
import sys
from typing import Optional

from wordcrawl import config
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigurationError, ParseError
from wordcrawl.services.result_writer import CrawlResultWriter

logger = logging.getLogger("wordcrawl")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crawl pages and report the most popular words.")
    parser.add_argument(
        "config_path",
        nargs="?",
        help="JSON or YAML crawl configuration file (default: $WORDCRAWL_CONFIG)",
    )
    return parser


def main(argv: Optional[list] = None, container: Optional[Container] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s")

    container = container or Container()
    if args.config_path:
        container.config.CRAWL_CONFIG_PATH.from_value(args.config_path)

    try:
        crawl_config = container.crawl_configuration()
        result = container.crawler().crawl(crawl_config.starting_urls)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2
    except ParseError as e:
        logger.error("Crawl aborted: %s", e)
        return 1

    writer = CrawlResultWriter(result)
    if crawl_config.result_path:
        writer.write(crawl_config.result_path)
    else:
        writer.write_to(sys.stdout)

    profiler = container.profiler()
    if crawl_config.profile_output_path:
        profiler.write_data(crawl_config.profile_output_path)
    else:
        profiler.write_to(sys.stdout)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
