from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from PySide6 import QtGui, QtWidgets as QtW

from ..cli import format_summary
from ..config import DETECTION_MATCH_THRESHOLD, MAX_JOINT_SETS, MIN_JOINT_LENGTH_M
from ..io import read_segments_txt
from ..joints import detect_joints
from ..plots import plot_rose, plot_tracemap
from ..stats import cluster_joint_sets, fracture_stats
from ..types import FractureStats, Joint, JointSet, LineSegment, ScaleData
from ..units import convert_length, unit_labels
from .widgets import MplCanvas

logger = logging.getLogger(__name__)


class MainWindow(QtW.QMainWindow):
    def __init__(self, parent: Optional[QtW.QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("RockJoint")
        self.resize(1200, 800)

        # Data
        self._raw: List[LineSegment] = []
        self._joints: List[Joint] = []
        self._sets: List[JointSet] = []
        self._stats: Optional[FractureStats] = None

        central = QtW.QWidget()
        self.setCentralWidget(central)
        body = QtW.QHBoxLayout(central)
        body.addWidget(self._build_left_panel(), 0)
        body.addWidget(self._build_right_panel(), 1)

        # Menu / toolbar
        open_act = QtGui.QAction("Open...", self)
        open_act.triggered.connect(self.action_open)
        save_act = QtGui.QAction("Save figures...", self)
        save_act.triggered.connect(self.action_save_figures)
        file_menu = self.menuBar().addMenu("File")
        file_menu.addAction(open_act)
        file_menu.addAction(save_act)

        self._clear_canvases()
        self.statusBar().showMessage("Ready")

    # ----- UI builders -----
    def _build_left_panel(self) -> QtW.QWidget:
        left = QtW.QGroupBox("Input")
        v = QtW.QVBoxLayout(left)

        row = QtW.QGridLayout()
        row.addWidget(QtW.QLabel("Segments file"), 0, 0)
        self.edit_filename = QtW.QLineEdit()
        self.edit_filename.setPlaceholderText("[no file selected]")
        self.edit_filename.setReadOnly(True)
        row.addWidget(self.edit_filename, 0, 1)
        self.btn_browse = QtW.QPushButton("Browse…")
        self.btn_browse.clicked.connect(self.action_open)
        row.addWidget(self.btn_browse, 0, 2)
        v.addLayout(row)

        # Scale and photo
        scale_box = QtW.QGroupBox("Scale and photo")
        sg = QtW.QGridLayout(scale_box)
        r = 0
        sg.addWidget(QtW.QLabel("Pixels per metre"), r, 0)
        self.edit_ppm = QtW.QDoubleSpinBox(); self.edit_ppm.setRange(0.0, 1e6); self.edit_ppm.setDecimals(2); self.edit_ppm.setValue(100.0)
        sg.addWidget(self.edit_ppm, r, 1); r += 1
        sg.addWidget(QtW.QLabel("Photo width (px)"), r, 0)
        self.edit_width = QtW.QSpinBox(); self.edit_width.setRange(1, 100000); self.edit_width.setValue(4000)
        sg.addWidget(self.edit_width, r, 1); r += 1
        sg.addWidget(QtW.QLabel("Photo height (px)"), r, 0)
        self.edit_height = QtW.QSpinBox(); self.edit_height.setRange(1, 100000); self.edit_height.setValue(3000)
        sg.addWidget(self.edit_height, r, 1); r += 1
        v.addWidget(scale_box)

        # Post-processing
        proc_box = QtW.QGroupBox("Post-processing")
        pg = QtW.QGridLayout(proc_box)
        r = 0
        pg.addWidget(QtW.QLabel("Duplicate tolerance (px)"), r, 0)
        self.edit_threshold = QtW.QDoubleSpinBox(); self.edit_threshold.setRange(0.0, 1000.0); self.edit_threshold.setValue(DETECTION_MATCH_THRESHOLD)
        pg.addWidget(self.edit_threshold, r, 1); r += 1
        pg.addWidget(QtW.QLabel("Discard lengths less than (m)"), r, 0)
        self.edit_minlength = QtW.QDoubleSpinBox(); self.edit_minlength.setRange(0.0, 1000.0); self.edit_minlength.setDecimals(3); self.edit_minlength.setValue(MIN_JOINT_LENGTH_M)
        pg.addWidget(self.edit_minlength, r, 1); r += 1
        pg.addWidget(QtW.QLabel("Max joint sets"), r, 0)
        self.edit_maxsets = QtW.QSpinBox(); self.edit_maxsets.setRange(1, 100); self.edit_maxsets.setValue(MAX_JOINT_SETS)
        pg.addWidget(self.edit_maxsets, r, 1); r += 1
        self.chk_imperial = QtW.QCheckBox("Imperial units")
        self.chk_imperial.toggled.connect(self._update_report)
        pg.addWidget(self.chk_imperial, r, 0, 1, 2)
        v.addWidget(proc_box)

        self.btn_run = QtW.QPushButton("Run")
        self.btn_run.setEnabled(False)
        self.btn_run.clicked.connect(self.action_run)
        v.addWidget(self.btn_run)

        stats_box = QtW.QGroupBox("Statistics")
        stats_layout = QtW.QVBoxLayout(stats_box)
        self.txt_stats = QtW.QTextEdit(); self.txt_stats.setReadOnly(True)
        self.txt_stats.setFontFamily("monospace")
        stats_layout.addWidget(self.txt_stats)
        v.addWidget(stats_box, 1)
        return left

    def _build_right_panel(self) -> QtW.QWidget:
        self.tabs = QtW.QTabWidget()
        self.tabs.setDocumentMode(True)

        self.canvas_map = MplCanvas(width=8, height=6, dpi=100, polar=False)
        self.tabs.addTab(self.canvas_map, "Trace map")

        self.canvas_rose = MplCanvas(width=6, height=6, dpi=100, polar=True)
        self.tabs.addTab(self.canvas_rose, "Rose diagram")

        self.table_sets = QtW.QTableWidget(0, 6)
        self.table_sets.setHorizontalHeaderLabels(["Set", "Orientation (°)", "Count", "%", "Mean length", "Total length"])
        self.table_sets.horizontalHeader().setStretchLastSection(True)
        self.table_sets.setEditTriggers(QtW.QAbstractItemView.NoEditTriggers)
        self.tabs.addTab(self.table_sets, "Joint sets")
        return self.tabs

    # ----- Actions -----
    def action_open(self) -> None:
        fn, _ = QtW.QFileDialog.getOpenFileName(
            self,
            "Open detected segments",
            str(Path.cwd()),
            "Text Files (*.txt *.csv);;All Files (*)",
        )
        if not fn:
            return
        self.load_file(Path(fn))

    def load_file(self, path: Path) -> None:
        try:
            raw = read_segments_txt(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Failed to load %s", path)
            QtW.QMessageBox.critical(self, "Error", f"Failed to load file:\n{e}")
            return
        if not raw:
            QtW.QMessageBox.warning(self, "No data", "No valid segments found in file.")
            return
        self._raw = raw
        self.edit_filename.setText(str(path))
        self.btn_run.setEnabled(True)
        self.statusBar().showMessage(f"Loaded {len(raw)} raw segments. Click Run to analyse.")

    def action_run(self) -> None:
        if not self._raw:
            QtW.QMessageBox.information(self, "No data", "Open a segments file first.")
            return
        if self.edit_ppm.value() <= 0:
            QtW.QMessageBox.information(self, "No scale", "Enter the scale in pixels per metre.")
            return
        scale = ScaleData(pixels_per_meter=self.edit_ppm.value())
        # Every run recomputes joints, sets and statistics from the raw segments
        self._joints = detect_joints(
            self._raw, scale, threshold=self.edit_threshold.value(), min_length_m=self.edit_minlength.value()
        )
        self._sets = cluster_joint_sets(self._joints, max_sets=self.edit_maxsets.value())
        self._stats = fracture_stats(self._joints, scale, self.edit_width.value(), self.edit_height.value())
        self._replot()
        self._update_report()
        self.statusBar().showMessage(f"{len(self._joints)} joints in {len(self._sets)} sets")

    def action_save_figures(self) -> None:
        if not self._joints:
            QtW.QMessageBox.information(self, "Nothing to save", "Run an analysis first.")
            return
        fn, _ = QtW.QFileDialog.getSaveFileName(
            self,
            "Save figure prefix",
            "figures",
            "PNG (*.png);;SVG (*.svg);;PDF (*.pdf)",
        )
        if not fn:
            return
        base = Path(fn)
        if base.suffix.lower() not in {".png", ".svg", ".pdf"}:
            base = base.with_suffix(".png")
        self.canvas_map.figure.savefig(base.with_name(base.stem + "_tracemap" + base.suffix))
        self.canvas_rose.figure.savefig(base.with_name(base.stem + "_rose" + base.suffix))
        self.statusBar().showMessage(f"Saved figures to {base.parent}")

    # ----- Helpers -----
    def _clear_canvases(self) -> None:
        bg = self.palette().color(QtGui.QPalette.Window)
        self.canvas_map.set_placeholder_background(bg)
        self.canvas_rose.set_placeholder_background(bg)

    def _replot(self) -> None:
        if not self._joints:
            self._clear_canvases()
            return
        ax = self.canvas_map.reset_axes()
        plot_tracemap(self._joints, self._sets, ax=ax)
        self.canvas_map.set_plot_background_white()
        ax = self.canvas_rose.reset_axes()
        plot_rose(self._sets, ax=ax)
        self.canvas_rose.set_plot_background_white()

    def _update_report(self) -> None:
        stats = self._stats
        if stats is None:
            return
        imperial = self.chk_imperial.isChecked()
        self.txt_stats.setPlainText(format_summary(stats, self._sets, imperial=imperial))

        unit = unit_labels(imperial)["length"]
        self.table_sets.setHorizontalHeaderItem(4, QtW.QTableWidgetItem(f"Mean length ({unit})"))
        self.table_sets.setHorizontalHeaderItem(5, QtW.QTableWidgetItem(f"Total length ({unit})"))
        self.table_sets.setRowCount(len(self._sets))
        for row, js in enumerate(self._sets):
            pct = 100.0 * js.count / stats.joint_count if stats.joint_count else 0.0
            cells = [
                f"{js.id}",
                f"{js.mean_orientation:.0f}",
                f"{js.count}",
                f"{pct:.1f}",
                f"{convert_length(js.mean_length, imperial):.3f}",
                f"{convert_length(js.total_length, imperial):.3f}",
            ]
            for col, text in enumerate(cells):
                item = QtW.QTableWidgetItem(text)
                if col == 0:
                    item.setBackground(QtGui.QColor(js.color))
                self.table_sets.setItem(row, col, item)
