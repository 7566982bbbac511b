from __future__ import annotations

import argparse
import logging
import time

from nursery.config import load_config, setup_logging
from nursery.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Seed the greenhouse and run the lifecycle ticker until interrupted."""
    parser = argparse.ArgumentParser(prog="nursery-ticker")
    parser.add_argument(
        "--stock",
        type=int,
        default=None,
        help="Plants to stock per species before ticking (default: restock batch size)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=0,
        help="Stop after this many ticks (default: run until Ctrl+C)",
    )
    parser.add_argument("--interval", type=float, default=None, help="Override the tick interval in seconds")
    args = parser.parse_args(argv)

    config = load_config()
    if args.interval is not None:
        config.tick_interval_seconds = args.interval
    setup_logging(debug=config.DEBUG, level=config.log_level)

    container = ServiceContainer.build(config)
    stock = args.stock if args.stock is not None else config.restock_batch_size
    for record in container.catalog.all():
        container.greenhouse.receive_shipment(record.sku, stock)
    logger.info("Greenhouse stocked with %d plants", len(container.greenhouse))

    if args.ticks > 0:
        for _ in range(args.ticks):
            container.ticker.run_once()
            time.sleep(config.tick_interval_seconds)
        logger.info("Finished: %s", container.ticker.get_stats())
        container.shutdown()
        return 0

    container.ticker.start()
    logger.info("Ticker running (press Ctrl+C to stop)")
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Stopping ticker...")
    finally:
        container.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
