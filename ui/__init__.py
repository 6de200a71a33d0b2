"""
PyQt5 presentation shell for the Pulse dashboard.
"""
