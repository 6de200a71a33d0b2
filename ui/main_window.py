"""
Main window for the Pulse dashboard.
"""
import logging
from typing import Optional

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from telemetry.config import DashboardConfig
from telemetry.countdown import CountdownEngine, format_hms
from telemetry.drivers import CountdownDriver, StreamDriver
from telemetry.event_log import EventLog
from telemetry.model import RenderSplit
from telemetry.stream import SampleStreamEngine
from ui.canvases import UsageCanvas
from ui.cards import StatCard, UpdateLogPanel
from ui.sidebar import Sidebar
from ui.styles import DARK_STYLESHEET

logger = logging.getLogger(__name__)

AXIS_CAPTION = "60 seconds      45 seconds      30 seconds      15 seconds      0 seconds"


class MainWindow(QMainWindow):
    """
    Main dashboard window.

    Displays:
    - Sidebar navigation with search
    - Membership, time-left and expiry date cards
    - Live usage chart (observed area + projected tail)
    - Update log, newest first

    The window owns the three engines and their timer drivers. It only reads
    engine state; mutation goes through the drivers' ticks and EventLog.append.
    """

    def __init__(self, config: Optional[DashboardConfig] = None,
                 stream_engine: Optional[SampleStreamEngine] = None,
                 countdown_engine: Optional[CountdownEngine] = None):
        super().__init__()

        self.config = config or DashboardConfig()

        self.setWindowTitle("Pulse Services")
        self.resize(1280, 760)

        # Engines (configuration errors surface here, before any timer starts)
        self.stream_engine = stream_engine or SampleStreamEngine(
            capacity=self.config.capacity,
            tail_size=self.config.tail_size,
            period_ms=self.config.period_ms,
        )
        self.countdown_engine = countdown_engine or CountdownEngine(self.config.target_instant())
        self.event_log = EventLog(
            initial=self.config.initial_log,
            max_entries=self.config.log_capacity,
        )

        # Drivers
        self.stream_driver = StreamDriver(self.stream_engine, parent=self)
        self.countdown_driver = CountdownDriver(
            self.countdown_engine, interval_ms=self.config.countdown_interval_ms, parent=self
        )

        # Create central widget and root layout
        central = QWidget()
        central.setObjectName("central")
        self.setCentralWidget(central)

        root_layout = QHBoxLayout()
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)
        central.setLayout(root_layout)

        self.sidebar = Sidebar(self.config.user_name, self.config.membership, self)
        root_layout.addWidget(self.sidebar)
        root_layout.addLayout(self._build_main_column(), 1)

        self.setStyleSheet(DARK_STYLESHEET)

        # Wiring
        self.sidebar.item_activated.connect(self.handle_nav_item)
        self.stream_driver.split_changed.connect(self.update_usage_chart)
        self.countdown_driver.display_changed.connect(self.time_left_card.set_value)
        self.countdown_driver.expired.connect(self.handle_expired)
        self.stream_driver.status_update.connect(lambda msg: logger.info(msg))
        self.countdown_driver.status_update.connect(lambda msg: logger.info(msg))

        self.refresh_log()

    def _build_main_column(self):
        """Build main column: header, cards row, chart + update log."""
        main_col = QVBoxLayout()
        main_col.setContentsMargins(24, 24, 24, 24)
        main_col.setSpacing(16)

        # Header
        welcome = QLabel(f"Welcome Back, {self.config.user_name}")
        welcome.setStyleSheet("font-size: 14pt; font-weight: bold;")
        thanks = QLabel("Thank you for choosing Pulse Services!")
        thanks.setObjectName("muted")
        main_col.addWidget(welcome)
        main_col.addWidget(thanks)

        # Cards row
        cards = QGridLayout()
        cards.setSpacing(16)
        self.membership_card = StatCard("Membership", self.config.membership)
        self.time_left_card = StatCard("Time Left:", format_hms(self.countdown_engine.tick()))
        self.expiry_card = StatCard("Expiry Date", self.config.expiry_date)
        cards.addWidget(self.membership_card, 0, 0)
        cards.addWidget(self.time_left_card, 0, 1)
        cards.addWidget(self.expiry_card, 0, 2)
        main_col.addLayout(cards)

        # Chart + update log
        lower = QHBoxLayout()
        lower.setSpacing(16)

        chart_col = QVBoxLayout()
        self.usage_canvas = UsageCanvas(capacity=self.config.capacity, parent=self)
        chart_col.addWidget(self.usage_canvas)
        caption = QLabel(AXIS_CAPTION)
        caption.setObjectName("muted")
        caption.setAlignment(QtCore.Qt.AlignCenter)
        chart_col.addWidget(caption)

        self.update_log_panel = UpdateLogPanel(self)

        lower.addLayout(chart_col, 1)
        lower.addWidget(self.update_log_panel)
        main_col.addLayout(lower, 1)

        return main_col

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    def start(self):
        """Start the periodic drivers."""
        self.stream_driver.start()
        self.countdown_driver.start()

    def stop(self):
        """Stop the periodic drivers; no engine is mutated afterwards."""
        self.stream_driver.stop()
        self.countdown_driver.stop()

    def closeEvent(self, event):
        self.stop()
        super().closeEvent(event)

    # ==========================================================================
    # Data Update Methods
    # ==========================================================================

    def update_usage_chart(self, split: RenderSplit):
        try:
            self.usage_canvas.update_split(split)
        except Exception as e:
            logger.error(f"Error in usage chart update: {e}", exc_info=True)

    def handle_nav_item(self, label: str):
        self.event_log.append(f"Opened {label}", "Action executed")
        self.refresh_log()

    def handle_expired(self):
        self.event_log.append("Membership Expired", f"Expired on {self.config.expiry_date}")
        self.refresh_log()

    def refresh_log(self):
        self.update_log_panel.set_entries(self.event_log.snapshot())
