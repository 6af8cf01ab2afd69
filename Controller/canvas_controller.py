from __future__ import annotations
import logging
from typing import Callable, Dict

from PyQt6.QtCore import QObject, pyqtSignal, QThreadPool, QRunnable
from PyQt6.QtGui import QImage

import config
from Controller.enums import PanelId, RequestKind
from Controller.image_loader import ImageLoader
from Model.campus_client import CampusClient
from Model.edge_parser import parse_edge_list
from Model.errors import CampusClientError
from Model.geometry import GridSpec
from Model.path_converter import convert_path
from Model.render_state import RenderState, cleared, with_background, with_edges, with_path
from View.canvas_renderer import CanvasRenderer

logger = logging.getLogger(__name__)

# Worker infrastructure: server requests block, so they run in the QThreadPool and
# send their result back to the GUI thread through queued signals.
# Every request carries a version (generation token). Only the answer to the latest
# request of its kind is applied - older answers that arrive late are dropped.
class _FetchSignal(QObject):
    finished = pyqtSignal(str, int, object)   # kind, version, result
    failed = pyqtSignal(str, int, str)        # kind, version, message


# noinspection PyUnresolvedReferences
class _FetchTask(QRunnable):
    def __init__(self, kind: RequestKind, version: int, call: Callable[[], object], sig: _FetchSignal):
        super().__init__()
        self.kind = kind
        self.version = version
        self.call = call
        self.sig = sig

    def run(self):
        try:
            result = self.call()
        except CampusClientError as e:
            self.sig.failed.emit(self.kind.name, self.version, str(e))
            return
        except Exception:
            # anything escaping run() would abort the process
            logger.exception(f"Unexpected failure in {self.kind.name} request #{self.version}")
            self.sig.failed.emit(self.kind.name, self.version, "The request could not be processed.")
            return
        self.sig.finished.emit(self.kind.name, self.version, result)


# --- Controller ---
class CanvasController(QObject):
    def __init__(self, view, client: CampusClient | None = None, pool: QThreadPool | None = None):
        super().__init__()
        self.view = view
        self.pool = pool or QThreadPool.globalInstance()
        self.client = client or CampusClient(config.SERVER_URL, timeout=config.HTTP_TIMEOUT)

        # One immutable snapshot per canvas - replaced, never modified
        self.states: Dict[PanelId, RenderState] = {
            PanelId.DOTS: RenderState(),
            PanelId.CAMPUS: RenderState(),
        }
        self.renderers: Dict[PanelId, CanvasRenderer] = {
            PanelId.DOTS: CanvasRenderer(config.CANVAS_SIZE, config.CANVAS_SIZE),
            PanelId.CAMPUS: CanvasRenderer(config.CANVAS_SIZE, config.CANVAS_SIZE, fit_to_background=True),
        }
        self.grid_size: int = config.DEFAULT_GRID_SIZE
        self.buildings: Dict[str, str] = {}

        # generation tokens
        self.versions: Dict[RequestKind, int] = {kind: 0 for kind in RequestKind}
        self.sig = _FetchSignal()
        self.sig.finished.connect(self._on_fetch_finished)
        self.sig.failed.connect(self._on_fetch_failed)

        # Backgrounds are loaded once per canvas
        self.loaders: Dict[PanelId, ImageLoader] = {
            PanelId.DOTS: ImageLoader(config.DOTS_BACKGROUND_PATH, self.pool, self),
            PanelId.CAMPUS: ImageLoader(config.CAMPUS_MAP_PATH, self.pool, self),
        }
        for pid, loader in self.loaders.items():
            loader.ready.connect(lambda img, pid=pid: self._on_background_ready(pid, img))

        self._wire_view()

        # first paint without background, then ask the server for the buildings
        self.redraw(PanelId.DOTS)
        self.redraw(PanelId.CAMPUS)
        self.fetch_buildings()

    def _wire_view(self):
        v = self.view
        v.dotsPanel.toolbarButtons["Draw"].clicked.connect(self.draw_edges)
        v.dotsPanel.toolbarButtons["Clear"].clicked.connect(self.clear_edges)
        v.gridSizeInput.valueChanged.connect(self.set_grid_size)

        v.campusPanel.toolbarButtons["Go"].clicked.connect(self.find_path)
        v.campusPanel.toolbarButtons["Clear"].clicked.connect(self.clear_path)

    # ---- Connect the Dots ----
    def grid_spec(self) -> GridSpec:
        r = self.renderers[PanelId.DOTS]
        return GridSpec(self.grid_size, r.width(), r.height())

    def draw_edges(self):
        result = parse_edge_list(self.view.edgeInput.toPlainText())
        if not result.ok:
            # nothing is drawn if a single line is wrong
            logger.info(f"Edge list rejected: {len(result.diagnostics)} problem(s)")
            self.view.show_error(result.message())
            return
        self.states[PanelId.DOTS] = with_edges(self.states[PanelId.DOTS], result.edges)
        self.redraw(PanelId.DOTS)

    def clear_edges(self):
        self.states[PanelId.DOTS] = cleared(self.states[PanelId.DOTS])
        self.redraw(PanelId.DOTS)

    def set_grid_size(self, size: int):
        self.grid_size = int(size)
        self.redraw(PanelId.DOTS)

    # ---- Campus Paths ----
    def fetch_buildings(self):
        self._start_fetch(RequestKind.BUILDINGS, self.client.get_buildings)

    def find_path(self):
        src = self.view.sourceSelect.currentText()
        dst = self.view.destinationSelect.currentText()
        if not src or not dst or src == dst:
            return
        self._start_fetch(RequestKind.PATH, lambda: self.client.get_path(src, dst))

    def clear_path(self):
        # also invalidates a request that is still running
        self.versions[RequestKind.PATH] += 1
        self.states[PanelId.CAMPUS] = cleared(self.states[PanelId.CAMPUS])
        self.redraw(PanelId.CAMPUS)

    def _start_fetch(self, kind: RequestKind, call: Callable[[], object]) -> int:
        self.versions[kind] += 1
        version = self.versions[kind]
        logger.debug(f"Starting {kind.name} request #{version}")
        self.pool.start(_FetchTask(kind, version, call, self.sig))
        return version

    def _on_fetch_finished(self, kind_name: str, version: int, result):
        kind = RequestKind[kind_name]
        # Ignore answers to outdated requests
        if version != self.versions[kind]:
            logger.debug(f"Dropping stale {kind_name} response #{version}")
            return

        if kind is RequestKind.BUILDINGS:
            self.buildings = dict(result)
            self.view.set_buildings(sorted(self.buildings))
            logger.info(f"Loaded {len(self.buildings)} buildings")
        elif kind is RequestKind.PATH:
            overlay = convert_path(result)
            self.states[PanelId.CAMPUS] = with_path(self.states[PanelId.CAMPUS], overlay)
            self.redraw(PanelId.CAMPUS)

    def _on_fetch_failed(self, kind_name: str, version: int, message: str):
        if version != self.versions[RequestKind[kind_name]]:
            return
        # previous state stays as it is
        logger.warning(f"{kind_name} request failed: {message}")
        self.view.show_error(message)

    # ---- Rendering ----
    def _on_background_ready(self, panel_id: PanelId, img: QImage):
        self.states[panel_id] = with_background(self.states[panel_id], img)
        self.redraw(panel_id)

    def redraw(self, panel_id: PanelId):
        grid = self.grid_spec() if panel_id is PanelId.DOTS else None
        image = self.renderers[panel_id].redraw(self.states[panel_id], grid)
        canvas = self._canvas_of(panel_id)
        if canvas:
            canvas.show_qimage(image)

    def _canvas_of(self, panel_id: PanelId):
        v = self.view
        return {PanelId.DOTS: v.dotsCanvas, PanelId.CAMPUS: v.campusCanvas}.get(panel_id)
