"""
Main entry point for running the sample request stream.
"""

import logging
from typing import Optional

from .core.config import StreamConfig
from .demo import run_demo
from .utils.logging import setup_logging


def main(config: Optional[StreamConfig] = None) -> None:
    """Run the sample request stream."""
    config = config or StreamConfig()
    setup_logging(config)
    statuses = run_demo(config=config)
    logging.getLogger("reactive_stream").info(
        "Handled %d requests, %d ok", len(statuses), sum(s.is_ok for s in statuses)
    )


if __name__ == "__main__":
    main()
