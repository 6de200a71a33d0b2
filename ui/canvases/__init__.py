"""
Matplotlib canvas widgets for dashboard visualization.
"""
from ui.canvases.usage_chart import UsageCanvas

__all__ = ['UsageCanvas']
