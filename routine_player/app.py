import sys
from pathlib import Path
import logging

from PyQt5 import QtWidgets

from .controller import RoutinePlayerController
from .model import RoutinePlayerModel, SettingsManager, get_settings_path
from .model.settings import resolve_log_level
from .view import RoutinePlayerWindow

# Runs the GUI
def main() -> None:
    root_path = Path(__file__).resolve().parent.parent
    settings_manager = SettingsManager(get_settings_path(root_path))
    logging.basicConfig(
        level=resolve_log_level(settings_manager.settings.general.log_level),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    app = QtWidgets.QApplication(sys.argv)
    model = RoutinePlayerModel(root_path, settings_manager=settings_manager)
    controller = RoutinePlayerController(model=model)
    window = RoutinePlayerWindow(controller, assets_root=root_path / "assets")
    window.show()
    sys.exit(app.exec_())
