from __future__ import annotations

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6 import QtCore, QtGui


class MplCanvas(FigureCanvas):
    def __init__(self, width: float = 5, height: float = 4, dpi: int = 100, polar: bool = False):
        self.figure = Figure(figsize=(width, height), dpi=dpi)
        self.polar = polar
        self.ax = self._new_axes()
        # Initialize QWidget/QT base before using QWidget methods
        super().__init__(self.figure)
        self.figure.set_facecolor("white")
        self.figure.set_constrained_layout(True)
        # Hint Qt that we paint opaquely to reduce edge artifacts
        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent, True)

    def _new_axes(self):
        if self.polar:
            return self.figure.add_subplot(111, projection="polar")
        return self.figure.add_subplot(111)

    def reset_axes(self):
        """Clear the figure and return a fresh axes for replotting."""
        self.figure.clear()
        self.ax = self._new_axes()
        self.ax.set_facecolor("white")
        return self.ax

    def set_placeholder_background(self, color: QtGui.QColor) -> None:
        """Set a neutral background and hide axes for placeholder state.

        The color should typically come from the surrounding Qt palette.
        """
        rgb = (color.redF(), color.greenF(), color.blueF())
        self.figure.set_facecolor(rgb)
        self.ax.set_facecolor(rgb)
        self.ax.axis('off')
        self.draw_idle()

    def set_plot_background_white(self) -> None:
        """Set a white plot background and show axes for plotted state."""
        self.figure.set_facecolor("white")
        self.ax.set_facecolor("white")
        self.ax.axis('on')
        self.draw_idle()
