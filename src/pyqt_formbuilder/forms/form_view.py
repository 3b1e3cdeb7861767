"""
Form views.

FormView arranges bound field views:
- columns side by side in column-index order
- inside a column: ungrouped fields by order, then one QGroupBox per group
  in registration order
- fields sharing a row_key in one horizontal row
- FULL_WIDTH fields below the columns

FormWidget adds the submit row (button + validation summary) and owns the
session of its render pass.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional, Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QGroupBox, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from pyqt_formbuilder.protocols.form_config import FormBuilderConfig, get_form_config
from .field_binding import FormFieldView
from .form_field import FULL_WIDTH
from .labels import invalid_message
from .runtime_binder import FormSession

logger = logging.getLogger(__name__)


class FormView(QWidget):
    """Lays out field views by column, group and row."""

    def __init__(self, field_views: Sequence[FormFieldView], groups: Sequence[str] = (),
                 config: Optional[FormBuilderConfig] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._config = config or get_form_config()
        self._groups = list(groups)
        self.field_views = list(field_views)
        self.group_boxes: Dict[tuple, QGroupBox] = {}
        layout_config = self._config.layout

        main_layout = QVBoxLayout(self)
        main_layout.setSpacing(layout_config.main_layout_spacing)
        main_layout.setContentsMargins(*layout_config.main_layout_margins)

        columns_layout = QHBoxLayout()
        columns_layout.setSpacing(layout_config.column_spacing)
        main_layout.addLayout(columns_layout)

        columns = sorted({v.snapshot.column for v in self.field_views if v.snapshot.column != FULL_WIDTH})
        for column in columns:
            column_layout = QVBoxLayout()
            column_layout.setSpacing(layout_config.content_layout_spacing)
            columns_layout.addLayout(column_layout, 1)
            self._build_column(column_layout, column)
            column_layout.addStretch()

        full_width = [v for v in self.field_views if v.snapshot.column == FULL_WIDTH]
        self._add_rows(main_layout, sorted(full_width, key=lambda v: v.snapshot.order))

        # Views are parented now; hidden ones stay hidden with the form
        for view in self.field_views:
            view.set_field_visible(view.field_visible)

    def _build_column(self, column_layout: QVBoxLayout, column: int) -> None:
        views = [v for v in self.field_views if v.snapshot.column == column]
        ungrouped = [v for v in views if v.snapshot.group is None]
        self._add_rows(column_layout, sorted(ungrouped, key=lambda v: v.snapshot.order))

        grouped: Dict[str, List[FormFieldView]] = {}
        for view in views:
            if view.snapshot.group is not None:
                grouped.setdefault(view.snapshot.group, []).append(view)
        names = [name for name in self._groups if name in grouped]
        names += [name for name in grouped if name not in names]

        for name in names:
            box = QGroupBox(name, self)
            box_layout = QVBoxLayout(box)
            box_layout.setSpacing(self._config.layout.groupbox_spacing)
            box_layout.setContentsMargins(*self._config.layout.groupbox_margins)
            self._add_rows(box_layout, sorted(grouped[name], key=lambda v: v.snapshot.order))
            column_layout.addWidget(box)
            self.group_boxes[(column, name)] = box

    def _add_rows(self, layout: QVBoxLayout, views: List[FormFieldView]) -> None:
        rows: Dict[object, List[FormFieldView]] = {}
        for view in views:
            rows.setdefault(view.snapshot.row_key, []).append(view)
        for row in rows.values():
            if len(row) == 1:
                layout.addWidget(row[0])
                continue
            row_layout = QHBoxLayout()
            row_layout.setSpacing(self._config.layout.row_spacing)
            layout.addLayout(row_layout)
            for view in row:
                row_layout.addWidget(view, 1)


class ValidationSummaryView(QWidget):
    """Muted invalid-field count, shown only while the count is positive."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.message_label = QLabel(self)
        self.message_label.setStyleSheet("color: gray;")
        self.message_label.hide()
        layout.addWidget(self.message_label)
        layout.addStretch()

    @property
    def message(self) -> Optional[str]:
        return self.message_label.text() if not self.message_label.isHidden() else None

    def set_invalid_count(self, count: int) -> None:
        if count > 0:
            self.message_label.setText(invalid_message(count))
        self.message_label.setVisible(count > 0)


@dataclass
class FormHandle:
    """Pieces of a bound form, for callers assembling their own layout."""

    submit: Callable[[], Awaitable[bool]]
    form_view: FormView
    validation_view: ValidationSummaryView
    session: FormSession

    @property
    def loading(self) -> bool:
        return self.session.submitting


class FormWidget(QWidget):
    """
    Form view above a row of submit button and validation summary.

    A submit that raises (e.g. ModelCloneError at commit) is logged, shown
    under the submit row and emitted through submit_failed.
    """

    submit_failed = pyqtSignal(Exception)

    def __init__(self, handle: FormHandle, config: Optional[FormBuilderConfig] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._config = config or get_form_config()
        self.handle = handle
        self.session = handle.session
        self._pending_task: Optional[asyncio.Task] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(self._config.layout.main_layout_spacing)
        layout.addWidget(handle.form_view)

        submit_row = QHBoxLayout()
        submit_row.setSpacing(self._config.layout.submit_row_spacing)
        self.submit_button = QPushButton(self._config.submit_title, self)
        self.submit_button.clicked.connect(self._on_submit_clicked)
        submit_row.addWidget(self.submit_button)
        submit_row.addWidget(handle.validation_view, 1)
        layout.addLayout(submit_row)

        self.submit_error_label = QLabel(self)
        self.submit_error_label.setWordWrap(True)
        self.submit_error_label.setStyleSheet("color: #c0392b;")
        self.submit_error_label.hide()
        layout.addWidget(self.submit_error_label)

        self.session.submitting_changed.connect(self._on_submitting_changed)
        session = self.session
        self.destroyed.connect(lambda *_: session.dispose())

    @property
    def form_view(self) -> FormView:
        return self.handle.form_view

    @property
    def validation_view(self) -> ValidationSummaryView:
        return self.handle.validation_view

    @property
    def submit_error(self) -> Optional[str]:
        return self.submit_error_label.text() if not self.submit_error_label.isHidden() else None

    def dispose(self) -> None:
        self.session.dispose()

    def _on_submitting_changed(self, submitting: bool) -> None:
        self.submit_button.setEnabled(not submitting)
        self.submit_button.setText(self._config.submitting_title if submitting else self._config.submit_title)

    def _on_submit_clicked(self) -> None:
        if self.session.submitting:
            return
        self._show_submit_error(None)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            self._pending_task = loop.create_task(self.handle.submit())
            self._pending_task.add_done_callback(self._on_submit_done)
            return

        # No asyncio loop on the GUI thread: run the submit to completion here
        loop = asyncio.new_event_loop()
        try:
            loop.run_until_complete(self.handle.submit())
        except Exception as e:
            self._report_submit_error(e)
        finally:
            loop.close()

    def _on_submit_done(self, task: asyncio.Task) -> None:
        if task is self._pending_task:
            self._pending_task = None
        if task.cancelled():
            logger.debug("Submit task cancelled")
            return
        error = task.exception()
        if error is not None:
            self._report_submit_error(error)

    def _report_submit_error(self, error: Exception) -> None:
        logger.error(f"Submit failed: {error}", exc_info=error)
        self._show_submit_error(str(error))
        self.submit_failed.emit(error)

    def _show_submit_error(self, message: Optional[str]) -> None:
        self.submit_error_label.setText(message or "")
        self.submit_error_label.setVisible(bool(message))
