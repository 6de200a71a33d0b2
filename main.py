#!/usr/bin/env python3
"""
Pulse Dashboard - Main Entry Point

Account status cards, a live countdown to the membership expiry and a
streaming usage chart with a projected tail.

Usage:
    python main.py                # Run the dashboard
    python main.py --offscreen    # Run without a display (Qt offscreen platform)

Settings are read from PULSE_* environment variables or a .env file
(see telemetry/config.py).
"""
import sys
import os
import logging

# Load environment variables from .env file FIRST, so PULSE_LOG_LEVEL applies
from dotenv import find_dotenv, load_dotenv
load_dotenv(find_dotenv(usecwd=True))

from telemetry.config import log_level_from_env
from telemetry.errors import ConfigurationError

# Configure logging before any other imports; a bad level is reported by main()
try:
    _log_level = log_level_from_env()
except ConfigurationError:
    _log_level = logging.INFO
logging.basicConfig(
    level=_log_level,
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

if "--offscreen" in sys.argv:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import matplotlib
from PyQt5 import QtWidgets

from telemetry.config import DashboardConfig
from ui.main_window import MainWindow
from ui.styles import MATPLOTLIB_DARK_THEME

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Entry point for the dashboard.

    Returns:
        Process exit code
    """
    print("=" * 60)
    print("PULSE DASHBOARD STARTING...")
    print("=" * 60)

    # Validate configuration before any window or timer exists
    try:
        logging.getLogger().setLevel(log_level_from_env())
        config = DashboardConfig.from_env(dotenv=False)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    print(f"Expiry date: {config.expiry_date} 23:59:59 ({config.timezone or 'local time'})")
    print(f"Sampling every {config.period_ms}ms, window {config.capacity}, projected tail {config.tail_size}")

    matplotlib.rcParams.update(MATPLOTLIB_DARK_THEME)

    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(config)
    window.start()
    window.show()

    print("DASHBOARD READY")
    print("=" * 60 + "\n")

    # Run Qt event loop
    result = app.exec_()

    # Clean shutdown
    window.stop()
    print("Goodbye!")
    return result


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print("\n" + "=" * 60)
        print("FATAL ERROR:")
        print("=" * 60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
