"""Entry point for Waypoint."""

import logging
import sys

from .app import run_app
from .config import Config


def main() -> int:
    """Main entry point for Waypoint."""
    try:
        config = Config.load()

        # Keep the terminal free for Textual; log to a file only when asked
        log_path = config.get_log_path()
        if log_path is not None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=log_path,
                level=logging.DEBUG,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )

        run_app(config)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
