"""
audioscrobbler - command line entry point.
"""

import sys

from .core import setup_logging
from .ui.cli import AudioscrobblerCLI

logger = setup_logging()


def main(args=None):
    """Main entry point."""
    logger.debug("Starting audioscrobbler")
    try:
        cli = AudioscrobblerCLI()
        return cli.run(args)
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    sys.exit(main())
