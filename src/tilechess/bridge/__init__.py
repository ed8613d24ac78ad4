"""Qt-facing adapters for the turn controller."""

from tilechess.bridge.qt_bridge import GameBridge

__all__ = ["GameBridge"]
