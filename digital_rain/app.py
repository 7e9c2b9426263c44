"""
Digital Rain - Matrix-style falling glyphs for the terminal

Usage:
    digital-rain
    python -m digital_rain

Press Ctrl+C (or send SIGTERM) to quit. Resizing the terminal restarts the
rain for the new dimensions.
"""

import logging
import random
import sys
from typing import Optional, TextIO

from .config import RainConfig
from .errors import NotATerminalError
from .renderer import Renderer
from .scheduler import Scheduler
from .session import TerminalSession

logger = logging.getLogger(__name__)


def run(config: Optional[RainConfig] = None, stream: Optional[TextIO] = None,
        input_stream: Optional[TextIO] = None, rng: Optional[random.Random] = None) -> int:
    """
    Run the animation until a stop is requested.

    Args:
        config: animation tunables (defaults to RainConfig())
        stream: output terminal (defaults to sys.stdout)
        input_stream: terminal whose echo is suppressed (defaults to sys.stdin)
        rng: random source, seed it for reproducible rain

    Returns:
        Process exit code: 0 on a requested stop, 1 when stream is not a TTY
    """
    config = (config or RainConfig()).validate()
    stream = stream if stream is not None else sys.stdout
    logger.debug(f"Starting rain with config {config.to_dict()}")

    try:
        with TerminalSession(stream, input_stream) as session:
            scheduler = Scheduler(Renderer(stream), session.size, config=config, rng=rng)
            scheduler.install_signal_handlers()
            try:
                scheduler.run()
            finally:
                scheduler.restore_signal_handlers()
    except NotATerminalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> int:
    """CLI entry point for digital-rain command."""
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return run()


if __name__ == "__main__":
    sys.exit(main())
