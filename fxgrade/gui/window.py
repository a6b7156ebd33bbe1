"""Desktop grade calculator form."""

import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QApplication,
    QGridLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QWidget,
)

from ..config import ERROR_DIALOG_TITLE, RESULT_PLACEHOLDER, WINDOW_SIZE, WINDOW_TITLE
from ..grading.form import FormState, handle_calculate, render


class GradeCalculatorWindow(QWidget):
    """Marks input, a calculate button and three result labels."""

    def __init__(self):
        super().__init__()
        self.state = FormState()

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        layout = QGridLayout(self)
        layout.setContentsMargins(10, 5, 10, 5)
        layout.setVerticalSpacing(5)

        layout.addWidget(QLabel("Enter marks separated by commas: "), 0, 0, 1, 2)

        self.marks_input = QLineEdit()
        layout.addWidget(self.marks_input, 1, 0, 1, 2)

        self.calculate_button = QPushButton("Calculate Grade")
        layout.addWidget(self.calculate_button, 2, 0, 1, 2)

        self.total_label = self._add_result_row(layout, 3, "Total Marks: ")
        self.average_label = self._add_result_row(layout, 4, "Average Percentage: ")
        self.grade_label = self._add_result_row(layout, 5, "Final Grade: ")
        grade_font = QFont("Arial", 18)
        grade_font.setBold(True)
        self.grade_label.setFont(grade_font)

        self.calculate_button.clicked.connect(self.on_calculate)
        self.marks_input.returnPressed.connect(self.on_calculate)

        self._center()

    def _add_result_row(self, layout: QGridLayout, row: int, caption: str) -> QLabel:
        layout.addWidget(
            QLabel(caption), row, 0, alignment=Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        value = QLabel(RESULT_PLACEHOLDER)
        layout.addWidget(value, row, 1, alignment=Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        return value

    def _center(self) -> None:
        screen = self.screen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    def on_calculate(self) -> None:
        """Grade the current input, repaint the labels and report any error."""
        self.state = handle_calculate(self.state, self.marks_input.text())
        self.refresh()
        if self.state.error:
            self.show_error(self.state.error)

    def refresh(self) -> None:
        labels = render(self.state.report)
        self.total_label.setText(labels.total)
        self.average_label.setText(labels.average)
        self.grade_label.setText(labels.grade)

    def show_error(self, message: str) -> None:
        QMessageBox.critical(self, ERROR_DIALOG_TITLE, message)


def run_app(argv: list[str] | None = None) -> int:
    """Open the grade calculator window and run the Qt event loop."""
    app = QApplication(argv if argv is not None else sys.argv)
    window = GradeCalculatorWindow()
    window.show()
    return app.exec()
