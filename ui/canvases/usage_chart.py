"""
Usage chart canvas: observed history as a filled area, projected tail as a line.
"""
import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from matplotlib.ticker import PercentFormatter

from telemetry.model import RenderSplit
from ui.styles import (
    ACCENT,
    AREA_ALPHA,
    CARD_COLOR,
    PROJECTED_COLOR,
    STROKE_COLOR,
    TEXT_COLOR,
    TEXT_COLOR_MUTED,
)

Y_MIN = 0
Y_MAX = 100


def split_arrays(split: RenderSplit):
    """
    Convert a RenderSplit into ((x_obs, y_obs), (x_proj, y_proj)) arrays.
    """
    def to_arrays(samples):
        xs = np.fromiter((s.sequence for s in samples), dtype=float, count=len(samples))
        ys = np.fromiter((s.value for s in samples), dtype=float, count=len(samples))
        return xs, ys

    return to_arrays(split.observed), to_arrays(split.projected)


class UsageCanvas(FigureCanvas):
    """
    Matplotlib canvas for the live utilization chart.

    The observed segment is drawn as an accent-filled area and the projected
    tail as a grey line. The y axis is fixed to 0-100%; the x axis is hidden
    and follows the window.
    """

    def __init__(self, title: str = "Total Hours Using Pulse", capacity: int = 60,
                 parent=None, width=6, height=3, dpi=100):
        """
        Initialize usage canvas.

        Args:
            title: Chart title
            capacity: Window capacity, used for the x range before it fills
            parent: Parent QWidget
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.capacity = capacity

        self.fig.patch.set_facecolor(CARD_COLOR)
        self.ax.set_facecolor(CARD_COLOR)

        for spine in self.ax.spines.values():
            spine.set_color(STROKE_COLOR)
        self.ax.tick_params(colors=TEXT_COLOR_MUTED, labelsize=8)
        self.ax.title.set_color("#FFFFFF")

        self.title = title
        self.ax.set_title(title, fontsize=10, loc="left")
        self.ax.set_ylim(Y_MIN, Y_MAX)
        self.ax.yaxis.set_major_formatter(PercentFormatter(xmax=100, decimals=0))
        self.ax.get_xaxis().set_visible(False)

        self.observed_line, = self.ax.plot([], [], linewidth=2, color=ACCENT)
        self.projected_line, = self.ax.plot([], [], linewidth=2, color=PROJECTED_COLOR)
        self.observed_fill = None

        # Hover tooltip: "<value>%" of the sample nearest the cursor
        self._xs = np.empty(0)
        self._ys = np.empty(0)
        self.tooltip = self.ax.annotate(
            "", xy=(0, 0), xytext=(8, 8), textcoords="offset points",
            color=TEXT_COLOR, fontsize=8,
            bbox=dict(boxstyle="round,pad=0.3", fc=STROKE_COLOR, ec=ACCENT),
        )
        self.tooltip.set_visible(False)
        self.mpl_connect("motion_notify_event", self._on_hover)

        self.fig.tight_layout(pad=0.8)

    def update_split(self, split: RenderSplit):
        """
        Redraw both segments from the window's current split.
        """
        (x_obs, y_obs), (x_proj, y_proj) = split_arrays(split)

        self.observed_line.set_data(x_obs, y_obs)
        self.projected_line.set_data(x_proj, y_proj)
        self._xs = np.concatenate([x_obs, x_proj])
        self._ys = np.concatenate([y_obs, y_proj])

        # fill_between has no set_data; swap the collection instead
        if self.observed_fill is not None:
            self.observed_fill.remove()
            self.observed_fill = None
        if x_obs.size > 0:
            self.observed_fill = self.ax.fill_between(
                x_obs, y_obs, Y_MIN, color=ACCENT, alpha=AREA_ALPHA, linewidth=0
            )

        if not split.is_empty:
            last = split.live_edge.sequence
            self.ax.set_xlim(last - max(self.capacity - 1, 1), last)

        self.draw_idle()

    def nearest_sample(self, xdata):
        """(x, y) of the plotted sample closest to ``xdata``, or None."""
        if xdata is None or self._xs.size == 0:
            return None
        i = int(np.abs(self._xs - xdata).argmin())
        return self._xs[i], self._ys[i]

    def tooltip_at(self, xdata):
        point = self.nearest_sample(xdata)
        if point is None:
            return None
        return f"{int(point[1])}%"

    def _on_hover(self, event):
        point = self.nearest_sample(event.xdata) if event.inaxes is self.ax else None
        if point is None:
            if self.tooltip.get_visible():
                self.tooltip.set_visible(False)
                self.draw_idle()
            return

        self.tooltip.xy = point
        self.tooltip.set_text(f"{int(point[1])}%")
        self.tooltip.set_visible(True)
        self.draw_idle()
