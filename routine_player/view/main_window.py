from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional
import logging

from PyQt5 import QtCore, QtWidgets

from ..model.captions import format_total
from ..model.entities import DURATION_STEP, Pose
from .ticker import PlaybackTicker
from .widgets import PlayerPanel, PoseCard, RoutineButton, build_step_button

if TYPE_CHECKING:  # pragma: no cover - for static analysis only
    from ..controller import RoutinePlayerController


class RoutinePlayerWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: "RoutinePlayerController", assets_root: Optional[Path] = None) -> None:
        super().__init__()
        self.controller = controller
        self._assets_root = assets_root
        self._log = logging.getLogger(__name__)

        general = self.controller.settings.general
        self.setWindowTitle("Yoga Routine Planner")
        self.resize(general.window_width, general.window_height)

        self._routine_buttons: List[RoutineButton] = []
        self._pose_cards: Dict[str, PoseCard] = {}
        self._rendered_routine_id: Optional[str] = None

        self._build_ui()
        self._setup_connections()

        self.ticker = PlaybackTicker(self.controller.on_tick, parent=self)
        self.controller.add_listener(self.refresh)
        self.refresh()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        central.setStyleSheet(
            """
            QWidget {
                background-color: #f8fafc;
                color: #0f172a;
                font-size: 13px;
            }
            """
        )
        self.setCentralWidget(central)
        outer = QtWidgets.QVBoxLayout(central)
        outer.setContentsMargins(0, 0, 0, 0)

        self.pages = QtWidgets.QStackedWidget()
        self.planner_page = self._build_planner_page()
        self.player_panel = PlayerPanel()
        self.pages.addWidget(self.planner_page)
        self.pages.addWidget(self.player_panel)
        outer.addWidget(self.pages)

    def _build_planner_page(self) -> QtWidgets.QScrollArea:
        scroll = QtWidgets.QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QtWidgets.QFrame.NoFrame)

        page = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(page)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        title = QtWidgets.QLabel("Yoga Routine Planner")
        title.setStyleSheet("font-size: 24px; font-weight: 700;")
        subtitle = QtWidgets.QLabel("Pick a body area, tweak durations, start the flow.")
        subtitle.setStyleSheet("font-size: 14px; color: #475569;")
        layout.addWidget(title)
        layout.addWidget(subtitle)

        parts_row = QtWidgets.QHBoxLayout()
        parts_row.setSpacing(10)
        self._routine_group = QtWidgets.QButtonGroup(self)
        self._routine_group.setExclusive(True)
        for routine in self.controller.routines:
            button = RoutineButton(routine)
            self._routine_group.addButton(button)
            self._routine_buttons.append(button)
            parts_row.addWidget(button)
        parts_row.addStretch(1)
        layout.addLayout(parts_row)

        layout.addWidget(self._build_routine_card())
        layout.addWidget(self._build_transition_card())

        self.poses_layout = QtWidgets.QVBoxLayout()
        self.poses_layout.setSpacing(10)
        layout.addLayout(self.poses_layout)
        layout.addStretch(1)

        scroll.setWidget(page)
        return scroll

    def _build_routine_card(self) -> QtWidgets.QFrame:
        card = QtWidgets.QFrame()
        card.setObjectName("routineCard")
        card.setStyleSheet(
            """
            QFrame#routineCard {
                background-color: #ffffff;
                border: 1px solid #e2e8f0;
                border-radius: 18px;
            }
            """
        )
        layout = QtWidgets.QVBoxLayout(card)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        header = QtWidgets.QHBoxLayout()
        text_column = QtWidgets.QVBoxLayout()
        self.routine_title = QtWidgets.QLabel()
        self.routine_title.setStyleSheet("font-size: 18px; font-weight: 700;")
        self.routine_description = QtWidgets.QLabel()
        self.routine_description.setWordWrap(True)
        self.routine_description.setStyleSheet("color: #475569;")
        text_column.addWidget(self.routine_title)
        text_column.addWidget(self.routine_description)
        header.addLayout(text_column, stretch=1)
        self.total_chip = QtWidgets.QLabel()
        self.total_chip.setStyleSheet(
            "background-color: #dbeafe; color: #1d4ed8; border-radius: 12px; padding: 4px 10px; font-weight: 600;"
        )
        header.addWidget(self.total_chip, alignment=QtCore.Qt.AlignTop)
        layout.addLayout(header)

        footer = QtWidgets.QHBoxLayout()
        meta_column = QtWidgets.QVBoxLayout()
        meta_label = QtWidgets.QLabel("Poses")
        meta_label.setStyleSheet("color: #64748b; font-size: 12px;")
        self.pose_count_label = QtWidgets.QLabel()
        self.pose_count_label.setStyleSheet("font-size: 16px; font-weight: 700;")
        meta_column.addWidget(meta_label)
        meta_column.addWidget(self.pose_count_label)
        footer.addLayout(meta_column)
        footer.addStretch(1)
        self.start_button = QtWidgets.QPushButton("Start Routine")
        self.start_button.setCursor(QtCore.Qt.PointingHandCursor)
        self.start_button.setMinimumHeight(40)
        self.start_button.setStyleSheet(
            """
            QPushButton {
                background-color: #2563eb;
                color: #ffffff;
                border-radius: 14px;
                padding: 8px 18px;
                font-weight: 600;
            }
            QPushButton:disabled {
                background-color: #94a3b8;
            }
            """
        )
        footer.addWidget(self.start_button)
        layout.addLayout(footer)
        return card

    def _build_transition_card(self) -> QtWidgets.QFrame:
        card = QtWidgets.QFrame()
        card.setObjectName("transitionCard")
        card.setStyleSheet(
            """
            QFrame#transitionCard {
                background-color: #eef4ff;
                border: 1px solid #d4e3ff;
                border-radius: 18px;
            }
            """
        )
        layout = QtWidgets.QHBoxLayout(card)
        layout.setContentsMargins(16, 16, 16, 16)

        text_column = QtWidgets.QVBoxLayout()
        title = QtWidgets.QLabel("Transition Duration")
        title.setStyleSheet("font-size: 15px; font-weight: 700;")
        subtitle = QtWidgets.QLabel("Time you want between poses before the next hold begins.")
        subtitle.setWordWrap(True)
        subtitle.setStyleSheet("color: #475569; font-size: 12px;")
        text_column.addWidget(title)
        text_column.addWidget(subtitle)
        layout.addLayout(text_column, stretch=1)

        self.transition_decrease = build_step_button(f"-{DURATION_STEP}s", solid=False)
        self.transition_value = QtWidgets.QLabel()
        self.transition_value.setAlignment(QtCore.Qt.AlignCenter)
        self.transition_value.setFixedWidth(52)
        self.transition_value.setStyleSheet("font-weight: 700; color: #1d4ed8;")
        self.transition_increase = build_step_button(f"+{DURATION_STEP}s", solid=True)
        layout.addWidget(self.transition_decrease)
        layout.addWidget(self.transition_value)
        layout.addWidget(self.transition_increase)
        return card

    def _setup_connections(self) -> None:
        for button in self._routine_buttons:
            button.clicked.connect(lambda checked, routine_id=button.routine_id: self.controller.select_routine(routine_id))
        self.start_button.clicked.connect(self.controller.start)
        self.transition_decrease.clicked.connect(lambda: self.controller.adjust_transition(-DURATION_STEP))
        self.transition_increase.clicked.connect(lambda: self.controller.adjust_transition(DURATION_STEP))
        self.player_panel.pauseRequested.connect(self.controller.toggle_pause)
        self.player_panel.resetRequested.connect(self.controller.reset)
        self.player_panel.exitRequested.connect(self.controller.exit)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        if self.controller.is_playing():
            self._render_player()
        else:
            self._render_planner()
        self.ticker.sync(self.controller.should_tick())

    def _render_player(self) -> None:
        caption = self.controller.caption()
        self.player_panel.show_state(
            caption,
            self.controller.remaining_seconds(),
            self.controller.is_paused(),
            self._image_path(caption.display_pose),
        )
        self.pages.setCurrentWidget(self.player_panel)

    def _render_planner(self) -> None:
        routine = self.controller.selected_routine
        for button in self._routine_buttons:
            button.setChecked(routine is not None and button.routine_id == routine.id)

        self.routine_title.setText(routine.name if routine else "")
        self.routine_description.setText(routine.description if routine else "")
        self.pose_count_label.setText(str(len(routine.poses)) if routine else "0")
        self.total_chip.setText(format_total(self.controller.total_routine_seconds()))
        self.start_button.setEnabled(bool(routine and routine.poses))
        self.transition_value.setText(f"{self.controller.transition_seconds}s")

        routine_id = routine.id if routine else None
        if routine_id != self._rendered_routine_id:
            self._rebuild_pose_cards(routine.poses if routine else [])
            self._rendered_routine_id = routine_id
        elif routine is not None:
            for pose in routine.poses:
                card = self._pose_cards.get(pose.id)
                if card is not None:
                    card.set_duration(pose.duration)
        self.pages.setCurrentWidget(self.planner_page)

    def _rebuild_pose_cards(self, poses: List[Pose]) -> None:
        for card in self._pose_cards.values():
            self.poses_layout.removeWidget(card)
            card.deleteLater()
        self._pose_cards.clear()
        for pose in poses:
            card = PoseCard(pose, self._image_path(pose))
            card.durationChangeRequested.connect(self.controller.adjust_pose_duration)
            self.poses_layout.addWidget(card)
            self._pose_cards[pose.id] = card
        self._log.debug("UI: rebuilt pose cards count=%s", len(poses))

    def _image_path(self, pose: Optional[Pose]) -> Optional[Path]:
        if pose is None or not pose.image:
            return None
        path = Path(pose.image)
        if not path.is_absolute() and self._assets_root is not None:
            path = self._assets_root / path
        return path

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.ticker.stop()
        self.controller.remove_listener(self.refresh)
        super().closeEvent(event)
