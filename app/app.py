import logging
from core.config import BASE_URL, LOG_FILE, LOG_LEVEL
from core.logging_setup import setup_logging
from storage.task_store import TaskStoreClient
from controller.app_controller import AppController
from services.worker import BackgroundRunner, UiDispatcher

log = logging.getLogger(__name__)


def main():
    setup_logging(LOG_LEVEL, LOG_FILE)
    log.info("Task store at %s", BASE_URL)

    # tkinter import deferred so the headless parts stay importable without Tk
    from gui.main_window import MainWindow

    client = TaskStoreClient(BASE_URL)
    controller = AppController(client, runner=BackgroundRunner())
    ui = MainWindow(controller, UiDispatcher())
    ui.mainloop()


if __name__ == "__main__":
    main()
