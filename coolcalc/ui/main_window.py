# coolcalc/ui/main_window.py
from pathlib import Path

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox, QLabel,
    QDoubleSpinBox, QComboBox, QCheckBox, QPushButton, QTableWidget, QTableWidgetItem,
    QAction, QFileDialog, QMessageBox, QInputDialog, QHeaderView, QAbstractItemView
)
from PyQt5.QtCore import Qt

from ..version import APP_NAME
from ..core.calculation import adjustment_percent, reference_table, round_half_up, to_fixed
from ..core.load_factors import SURCHARGES
from ..core.models import RoomType
from ..core.translations import LANGUAGE_NAMES, Language, factor_label, short_room_type_label
from ..services.advisor import CoolingAdvisor
from ..services.autosave import AutoSaveController
from ..services.session import CoolCalcSession
from ..utils.qt import signals

DARK_STYLESHEET = """
QWidget { background-color: #1e293b; color: #e2e8f0; }
QGroupBox { border: 1px solid #334155; border-radius: 8px; margin-top: 12px; }
QGroupBox::title { subcontrol-origin: margin; left: 8px; padding: 0 4px; }
QTableWidget, QDoubleSpinBox, QComboBox { background-color: #0f172a; border: 1px solid #334155; }
QPushButton { background-color: #334155; border-radius: 6px; padding: 6px 12px; }
QPushButton:disabled { color: #64748b; }
"""

COLUMNS = 6


class MainWindow(QMainWindow):
    def __init__(self, session: CoolCalcSession, parent=None):
        super().__init__(parent)
        self.session = session
        self.advisor = CoolingAdvisor()
        self.autosaver = AutoSaveController(lambda: self.session.store, self.session.settings, self)

        self.setWindowTitle(APP_NAME)
        self.resize(1100, 820)

        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)

        # ---- Inputs ---------------------------------------------------------
        self.grp_inputs = QGroupBox()
        grid = QGridLayout(self.grp_inputs)

        self.lbl_area = QLabel()
        self.spin_area = QDoubleSpinBox()
        self.spin_area.setRange(2.0, 1000.0)
        self.spin_area.setDecimals(1)
        self.spin_area.setSingleStep(0.1)
        self.spin_area.setSuffix(" m²")
        self.spin_area.setValue(self.session.area)
        self.spin_area.valueChanged.connect(self._on_area_changed)
        grid.addWidget(self.lbl_area, 0, 0)
        grid.addWidget(self.spin_area, 0, 1)

        self.lbl_room_type = QLabel()
        self.cmb_room_type = QComboBox()
        for rt in RoomType:
            self.cmb_room_type.addItem("", rt.value)
        self.cmb_room_type.currentIndexChanged.connect(self._on_room_type_changed)
        grid.addWidget(self.lbl_room_type, 1, 0)
        grid.addWidget(self.cmb_room_type, 1, 1)

        self.lbl_factors = QLabel()
        grid.addWidget(self.lbl_factors, 2, 0, 1, 2)
        self.factor_boxes = {}
        for i, name in enumerate(SURCHARGES):
            cb = QCheckBox()
            cb.setChecked(getattr(self.session.factors, name))
            cb.toggled.connect(lambda checked, n=name: self._on_factor_toggled(n, checked))
            self.factor_boxes[name] = cb
            grid.addWidget(cb, 3 + i // 2, i % 2)

        self.cb_tropical = QCheckBox()
        self.cb_tropical.setChecked(self.session.tropical)
        self.cb_tropical.toggled.connect(self._on_tropical_toggled)
        grid.addWidget(self.cb_tropical, 5, 0, 1, 2)
        root.addWidget(self.grp_inputs)

        # ---- Results + reference -------------------------------------------
        row = QHBoxLayout()
        self.grp_results = QGroupBox()
        res = QVBoxLayout(self.grp_results)
        self.lbl_kw = QLabel()
        self.lbl_btu = QLabel()
        self.lbl_hp = QLabel()
        self.lbl_notice = QLabel()
        self.lbl_notice.setWordWrap(True)
        self.lbl_recommendation = QLabel()
        self.lbl_recommendation.setWordWrap(True)
        for w in (self.lbl_kw, self.lbl_btu, self.lbl_hp, self.lbl_notice, self.lbl_recommendation):
            res.addWidget(w)
        btns = QHBoxLayout()
        self.btn_confirm = QPushButton()
        self.btn_confirm.clicked.connect(self._do_confirm)
        self.btn_advisor = QPushButton()
        self.btn_advisor.clicked.connect(self._do_advisor)
        btns.addWidget(self.btn_confirm)
        btns.addWidget(self.btn_advisor)
        res.addLayout(btns)
        row.addWidget(self.grp_results, 2)

        self.grp_reference = QGroupBox()
        ref = QVBoxLayout(self.grp_reference)
        self.lbl_reference = QLabel()
        self.lbl_reference.setWordWrap(True)
        ref.addWidget(self.lbl_reference)
        row.addWidget(self.grp_reference, 1)
        root.addLayout(row)

        # ---- Records --------------------------------------------------------
        self.grp_records = QGroupBox()
        rec = QVBoxLayout(self.grp_records)
        self.table = QTableWidget(0, COLUMNS)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.itemChanged.connect(self._on_item_changed)
        rec.addWidget(self.table)

        rec_btns = QHBoxLayout()
        self.btn_delete = QPushButton()
        self.btn_delete.clicked.connect(self._do_delete)
        self.btn_clear = QPushButton()
        self.btn_clear.clicked.connect(self._do_clear)
        self.btn_export = QPushButton()
        self.btn_export.clicked.connect(self._do_export)
        self.lbl_count = QLabel()
        rec_btns.addWidget(self.btn_delete)
        rec_btns.addWidget(self.btn_clear)
        rec_btns.addWidget(self.btn_export)
        rec_btns.addStretch(1)
        rec_btns.addWidget(self.lbl_count)
        rec.addLayout(rec_btns)

        self.lbl_summary = QLabel()
        self.lbl_summary.setWordWrap(True)
        rec.addWidget(self.lbl_summary)
        root.addWidget(self.grp_records)

        # ---- Status bar: language + theme ---------------------------------
        self.cmb_language = QComboBox()
        for lang in Language:
            self.cmb_language.addItem(LANGUAGE_NAMES[lang], lang.value)
        self.cmb_language.setCurrentIndex(self.cmb_language.findData(self.session.language.value))
        self.cmb_language.currentIndexChanged.connect(self._on_language_changed)
        self.statusBar().addPermanentWidget(self.cmb_language)

        self._build_menu()
        signals.records_changed.connect(self._refresh_records)
        signals.preferences_changed.connect(self._on_preferences_changed)

        self._apply_theme()
        self._retranslate()

    # ======================= Menu / Actions =================================
    def _build_menu(self):
        m = self.menuBar()
        self.menu_file = m.addMenu("File")
        self.act_export = QAction("Export CSV…", self)
        self.act_export.triggered.connect(self._do_export)
        self.menu_file.addAction(self.act_export)

        self.menu_view = m.addMenu("View")
        self.act_dark = QAction("Dark Mode", self)
        self.act_dark.setCheckable(True)
        self.act_dark.setChecked(self.session.dark_mode)
        self.act_dark.triggered.connect(self._do_toggle_dark)
        self.menu_view.addAction(self.act_dark)

    def _do_confirm(self):
        if self.session.confirm() is None:
            self.statusBar().showMessage(f"Record limit reached ({self.session.store.limit})")

    def _do_delete(self):
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return
        item = self.table.item(rows[0].row(), 0)
        self.session.delete(item.data(Qt.UserRole))

    def _do_clear(self):
        r = QMessageBox.question(self, self.session.t("clear_all_btn"), self.session.t("clear_all_btn") + "?")
        if r == QMessageBox.Yes:
            self.session.clear()

    def _do_export(self):
        if not len(self.session.store):
            return
        directory = QFileDialog.getExistingDirectory(self, self.session.t("export_btn"), str(Path.home()))
        if not directory:
            return
        path = self.session.export_csv(Path(directory))
        if path is not None:
            self.statusBar().showMessage(f"Exported: {path.name}")

    def _do_advisor(self):
        text, ok = QInputDialog.getMultiLineText(self, self.session.t("advisor_btn"), self.session.t("advisor_prompt"))
        if not ok:
            return
        answer = self.advisor.analyze(self.session.area, self.session.room_type, text, self.session.language)
        QMessageBox.information(self, self.session.t("advisor_btn"), answer)

    def _do_toggle_dark(self):
        self.session.toggle_dark_mode()

    # ======================= Input handlers =================================
    def _on_area_changed(self, value: float):
        self.session.set_area(value)
        self._refresh_result()

    def _on_room_type_changed(self, index: int):
        self.session.set_room_type(self.cmb_room_type.itemData(index))
        self._refresh_result()

    def _on_factor_toggled(self, name: str, checked: bool):
        self.session.set_factor(name, checked)
        self._refresh_result()

    def _on_tropical_toggled(self, checked: bool):
        self.session.set_tropical(checked)
        self._refresh_result()

    def _on_language_changed(self, index: int):
        self.session.set_language(self.cmb_language.itemData(index))

    def _on_preferences_changed(self, key: str):
        if key == "language":
            self._retranslate()
        elif key == "darkMode":
            self._apply_theme()

    def _on_item_changed(self, item: QTableWidgetItem):
        if item.column() != 0:
            return
        if not self.session.rename(item.data(Qt.UserRole), item.text()):
            # rejected (blank name): put the stored name back
            self._refresh_records()

    # ======================= Rendering ======================================
    def _apply_theme(self):
        self.setStyleSheet(DARK_STYLESHEET if self.session.dark_mode else "")
        self.act_dark.setChecked(self.session.dark_mode)

    def _retranslate(self):
        s = self.session
        self.setWindowTitle(f"{s.t('title')} - {s.t('subtitle')}")
        self.grp_inputs.setTitle(s.t("title"))
        self.lbl_area.setText(s.t("area_label"))
        self.lbl_room_type.setText(s.t("room_type_label"))
        for i in range(self.cmb_room_type.count()):
            self.cmb_room_type.setItemText(i, s.room_type_label(self.cmb_room_type.itemData(i)))
        self.cmb_room_type.setCurrentIndex(self.cmb_room_type.findData(s.room_type.value))
        self.lbl_factors.setText(s.t("factors_title"))
        for name, cb in self.factor_boxes.items():
            cb.setText(factor_label(name, s.language))
        self.grp_results.setTitle(s.t("results_title"))
        self.btn_confirm.setText(s.t("confirm_btn"))
        self.btn_advisor.setText(s.t("advisor_btn"))
        self.grp_reference.setTitle(s.t("reference_title"))
        lines = [f"{short_room_type_label(rt, s.language)}: {load:.0f} W/m²" for rt, load in reference_table()]
        self.lbl_reference.setText("\n".join(lines) + "\n\n" + s.t("disclaimer"))
        self.grp_records.setTitle(s.t("records_title"))
        self.btn_delete.setText(s.t("delete_btn"))
        self.btn_clear.setText(s.t("clear_all_btn"))
        self.btn_export.setText(s.t("export_btn"))
        self.act_dark.setText(s.t("dark_mode"))
        self.cmb_language.setToolTip(s.t("language_label"))
        self.table.setHorizontalHeaderLabels([
            s.t("records_title"), s.t("room_type_label"), "m²", "kW", "BTU/h", "HP",
        ])
        self._refresh_result()
        self._refresh_records()

    def _refresh_result(self):
        s = self.session
        r = s.result
        self.lbl_kw.setText(f"{s.t('kw_label')}: {to_fixed(r.kw)}")
        self.lbl_btu.setText(f"{s.t('btu_label')}: {round_half_up(r.btu):,}")
        self.lbl_hp.setText(f"{s.t('hp_label')}: {to_fixed(r.hp)}")
        notes = [s.t("tropical_on") if r.tropical else s.t("tropical_off")]
        if r.adjustment_multiplier > 1:
            notes.append(s.t("adjustment_notice").format(percent=adjustment_percent(r)))
        self.lbl_notice.setText("\n".join(notes))
        self.cb_tropical.setText(s.t("tropical_label"))
        rec = s.recommendation()
        self.lbl_recommendation.setText(f"{s.t('recommendation_title')}: {rec.size}\n{rec.units} - {rec.tip}")

    def _refresh_records(self):
        s = self.session
        self.table.blockSignals(True)
        try:
            self.table.setRowCount(len(s.store))
            for row, rec in enumerate(s.store):
                name = QTableWidgetItem(rec.room_name)
                name.setData(Qt.UserRole, rec.id)
                self.table.setItem(row, 0, name)
                cells = [
                    short_room_type_label(rec.room_type, s.language),
                    f"{rec.area:g}", to_fixed(rec.kw), f"{round_half_up(rec.btu):,}", to_fixed(rec.hp),
                ]
                for col, text in enumerate(cells, start=1):
                    item = QTableWidgetItem(text)
                    item.setFlags(item.flags() & ~Qt.ItemIsEditable)
                    self.table.setItem(row, col, item)
        finally:
            self.table.blockSignals(False)

        has_records = len(s.store) > 0
        self.btn_confirm.setEnabled(s.can_confirm)
        self.btn_delete.setEnabled(has_records)
        self.btn_clear.setEnabled(has_records)
        self.btn_export.setEnabled(has_records)
        self.act_export.setEnabled(has_records)
        self.lbl_count.setText(f"{len(s.store)} / {s.store.limit}")

        summary = s.summary()
        if summary is None:
            self.lbl_summary.setText(s.t("no_records"))
        else:
            text = s.t("summary").format(
                rooms=summary.total_rooms, area=summary.total_area, kw=summary.total_kw,
                btu=summary.total_btu, rating=summary.efficiency_rating or "-",
                cost=summary.estimated_monthly_cost,
            )
            self.lbl_summary.setText(f"{s.t('summary_title')}\n{text}\n{s.t('cost_note')}")
