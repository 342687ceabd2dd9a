"""
Imports the matplotlib Qt backend off the GUI thread.

Pulling in matplotlib takes a noticeable moment; the window is shown first and
the chart appears once the import finished (see chart.gate).
"""
import importlib
import logging
import time

from PyQt5 import QtCore

logger = logging.getLogger(__name__)


class BackendLoader(QtCore.QThread):
    """
    Background import of one module.

    ``library`` stays None until the import has fully completed, so it can be
    polled directly as a gate probe.
    """
    loaded = QtCore.pyqtSignal(str)
    failed = QtCore.pyqtSignal(str)

    def __init__(self, module_name: str, parent=None):
        super().__init__(parent)
        self.module_name = module_name
        self.library = None

    def run(self):
        tic = time.perf_counter()
        try:
            module = importlib.import_module(self.module_name)
        except ImportError as e:
            logger.error(f"Could not import {self.module_name}: {e}")
            self.failed.emit(str(e))
            return

        self.library = module
        logger.info(f"Loading {self.module_name} took {time.perf_counter() - tic:.2f} seconds")
        self.loaded.emit(self.module_name)

    def probe(self):
        return self.library
