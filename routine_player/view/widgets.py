from pathlib import Path
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from ..model.captions import PlayerCaption
from ..model.entities import DURATION_STEP, Pose, Routine


def build_step_button(text: str, solid: bool) -> QtWidgets.QPushButton:
    button = QtWidgets.QPushButton(text)
    button.setCursor(QtCore.Qt.PointingHandCursor)
    button.setFixedSize(48, 30)
    background = "#2563eb" if solid else "transparent"
    color = "#ffffff" if solid else "#1e293b"
    button.setStyleSheet(
        f"""
        QPushButton {{
            background-color: {background};
            color: {color};
            border: 1px solid #2563eb;
            border-radius: 10px;
            font-weight: 600;
        }}
        QPushButton:hover {{
            background-color: {"#1d4ed8" if solid else "#eef4ff"};
        }}
        """
    )
    return button


class PoseImage(QtWidgets.QLabel):
    """Shows a pose picture, or a text placeholder when it cannot be loaded."""

    def __init__(self, size: QtCore.QSize, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self._size = size
        self.setFixedSize(size)
        self.setAlignment(QtCore.Qt.AlignCenter)
        self.setStyleSheet("background-color: #e2e8f0; border-radius: 12px; color: #64748b;")

    def show_pose(self, image_path: Optional[Path], fallback: str) -> None:
        pixmap = QtGui.QPixmap(str(image_path)) if image_path is not None else QtGui.QPixmap()
        if pixmap.isNull():
            self.show_placeholder(fallback)
            return
        self.setPixmap(
            pixmap.scaled(self._size, QtCore.Qt.KeepAspectRatioByExpanding, QtCore.Qt.SmoothTransformation)
        )

    def show_placeholder(self, text: str) -> None:
        self.clear()
        self.setText(text)


class RoutineButton(QtWidgets.QPushButton):
    def __init__(self, routine: Routine, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.routine_id = routine.id
        self.setCheckable(True)
        self.setCursor(QtCore.Qt.PointingHandCursor)
        self.setMinimumHeight(56)
        self.setText(f"{routine.name}\n{len(routine.poses)} poses")
        self.setStyleSheet(
            """
            QPushButton {
                background-color: #f1f5f9;
                color: #1e293b;
                border: 1px solid #cbd5e1;
                border-radius: 14px;
                padding: 6px 16px;
                text-align: left;
            }
            QPushButton:checked {
                background-color: #2563eb;
                color: #ffffff;
                border-color: #2563eb;
            }
            QPushButton:hover:!checked {
                background-color: #d4e3ff;
            }
            """
        )


class PoseCard(QtWidgets.QFrame):
    durationChangeRequested = QtCore.pyqtSignal(str, int)

    def __init__(
        self,
        pose: Pose,
        image_path: Optional[Path] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.pose_id = pose.id
        self.setObjectName("poseCard")
        self.setStyleSheet(
            """
            QFrame#poseCard {
                background-color: #ffffff;
                border: 1px solid #e2e8f0;
                border-radius: 16px;
            }
            """
        )
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        self.image = PoseImage(QtCore.QSize(64, 64))
        self.image.show_pose(image_path, pose.name[:1])
        layout.addWidget(self.image)

        text_layout = QtWidgets.QVBoxLayout()
        text_layout.setSpacing(2)
        title = QtWidgets.QLabel(pose.name)
        title.setStyleSheet("font-size: 15px; font-weight: 600; color: #0f172a;")
        self.subtitle = QtWidgets.QLabel()
        self.subtitle.setStyleSheet("font-size: 12px; color: #64748b;")
        text_layout.addWidget(title)
        text_layout.addWidget(self.subtitle)
        layout.addLayout(text_layout, stretch=1)

        self.decrease_button = build_step_button(f"-{DURATION_STEP}s", solid=False)
        self.increase_button = build_step_button(f"+{DURATION_STEP}s", solid=True)
        self.decrease_button.clicked.connect(lambda: self.durationChangeRequested.emit(self.pose_id, -DURATION_STEP))
        self.increase_button.clicked.connect(lambda: self.durationChangeRequested.emit(self.pose_id, DURATION_STEP))
        layout.addWidget(self.decrease_button)
        layout.addWidget(self.increase_button)

        self.set_duration(pose.duration)

    def set_duration(self, seconds: int) -> None:
        self.subtitle.setText(f"Hold for {seconds} sec")


class PlayerPanel(QtWidgets.QFrame):
    pauseRequested = QtCore.pyqtSignal()
    resetRequested = QtCore.pyqtSignal()
    exitRequested = QtCore.pyqtSignal()

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(10)

        self.image = PoseImage(QtCore.QSize(320, 240))
        layout.addWidget(self.image, alignment=QtCore.Qt.AlignHCenter)

        self.title_label = QtWidgets.QLabel()
        self.title_label.setStyleSheet("font-size: 24px; font-weight: 700; color: #0f172a;")
        self.subtitle_label = QtWidgets.QLabel()
        self.subtitle_label.setStyleSheet("font-size: 14px; color: #475569;")
        self.timer_label = QtWidgets.QLabel()
        self.timer_label.setStyleSheet("font-size: 56px; font-weight: 700; color: #2563eb;")
        self.info_label = QtWidgets.QLabel()
        self.info_label.setStyleSheet("font-size: 14px; color: #475569;")
        for label in (self.title_label, self.subtitle_label, self.timer_label, self.info_label):
            label.setAlignment(QtCore.Qt.AlignCenter)
            layout.addWidget(label)

        buttons = QtWidgets.QHBoxLayout()
        buttons.setSpacing(12)
        self.pause_button = QtWidgets.QPushButton("Pause")
        self.reset_button = QtWidgets.QPushButton("Restart")
        self.exit_button = QtWidgets.QPushButton("Exit")
        for button in (self.pause_button, self.reset_button, self.exit_button):
            button.setCursor(QtCore.Qt.PointingHandCursor)
            button.setMinimumHeight(40)
            buttons.addWidget(button)
        self.exit_button.setStyleSheet(
            "QPushButton { background-color: #2563eb; color: #ffffff; border-radius: 12px; font-weight: 600; }"
        )
        layout.addLayout(buttons)
        layout.addStretch(1)

        self.pause_button.clicked.connect(lambda: self.pauseRequested.emit())
        self.reset_button.clicked.connect(lambda: self.resetRequested.emit())
        self.exit_button.clicked.connect(lambda: self.exitRequested.emit())

    def show_state(self, caption: PlayerCaption, remaining: int, paused: bool, image_path: Optional[Path]) -> None:
        if caption.is_transition:
            self.image.show_placeholder("Transition")
        else:
            fallback = caption.display_pose.name if caption.display_pose is not None else "Pose"
            self.image.show_pose(image_path, fallback)
        self.title_label.setText(caption.title)
        self.subtitle_label.setText(caption.subtitle)
        self.timer_label.setText(f"{remaining}s")
        self.info_label.setText(caption.info)
        self.pause_button.setText("Resume" if paused else "Pause")
