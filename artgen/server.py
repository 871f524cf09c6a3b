"""Random Art Generator -- Web UI Server.

Pick a pattern family (and an accent color for fractals), generate, re-roll,
and download the canvas as ``random-art-<pattern>.png``.

Launch:
    python -m artgen.server
    # or: uvicorn artgen.server:app --reload
"""

from __future__ import annotations

import io
import logging
import threading
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response, StreamingResponse
from pydantic import BaseModel

from artgen import config
from artgen.art.export import encode_base64, export_canvas
from artgen.art.palettes import hex_to_rgb, normalize_hex
from artgen.canvas.surface import PillowSurface
from artgen.patterns.generator import PATTERN_LABELS, PATTERN_TYPES, generate, get_pattern_type
from artgen.patterns.renderer import new_canvas, render_pattern
from artgen.theme import ThemeStore

STATIC_DIR = Path(__file__).parent / "static"

logger = logging.getLogger(__name__)

app = FastAPI(title="Random Art Generator")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Application state
# ---------------------------------------------------------------------------

class AppState:
    def __init__(self, theme_store: ThemeStore | None = None):
        self.pattern_type: str = config.DEFAULT_PATTERN
        self.color: str = config.DEFAULT_COLOR
        self.surface: PillowSurface | None = None
        self.theme_store = theme_store or ThemeStore(config.SETTINGS_PATH)
        self.thumb_size: int = config.THUMB_SIZE
        self._samples_cache: dict[str, str] | None = None
        self._samples_color: str | None = None
        self._lock = threading.Lock()

    # ---- Selection ----

    def _apply_selection(self, pattern_type: str | None, color: str | None) -> None:
        # Validate both before touching state so a bad color keeps the old pattern.
        new_type = get_pattern_type(pattern_type) if pattern_type is not None else self.pattern_type
        new_color = normalize_hex(color) if color is not None else self.color
        self.pattern_type = new_type
        self.color = new_color

    def select(self, pattern_type: str | None = None, color: str | None = None) -> None:
        with self._lock:
            self._apply_selection(pattern_type, color)

    # ---- Generate / export ----

    def generate(self, pattern_type: str | None = None, color: str | None = None) -> None:
        with self._lock:
            self._apply_selection(pattern_type, color)
            if self.surface is None:
                self.surface = new_canvas()
            generate(self.surface, self.pattern_type, hex_to_rgb(self.color))
            logger.info("Generated %s pattern", self.pattern_type)

    def export(self) -> tuple[str, bytes] | None:
        with self._lock:
            exported = export_canvas(self.surface, self.pattern_type)
        if exported is None:
            logger.info("Export requested before first generation; nothing to export")
        else:
            logger.info("Exported %s", exported[0])
        return exported

    # ---- Samples ----

    def get_samples(self, refresh: bool = False) -> dict[str, str]:
        """One thumbnail per pattern family, without touching the live canvas."""
        with self._lock:
            if self._samples_cache is None or refresh or self._samples_color != self.color:
                accent = hex_to_rgb(self.color)
                self._samples_cache = {
                    p: encode_base64(render_pattern(p, accent, self.thumb_size))
                    for p in PATTERN_TYPES
                }
                self._samples_color = self.color
            return self._samples_cache

    # ---- State payload ----

    def get_state_payload(self) -> dict:
        with self._lock:
            image = encode_base64(self.surface) if self.surface is not None else None
            return {
                "pattern_type": self.pattern_type,
                "color": self.color,
                "patterns": [{"value": p, "label": PATTERN_LABELS[p]} for p in PATTERN_TYPES],
                "canvas_size": config.CANVAS_SIZE,
                "theme": self.theme_store.get(),
                "image": image,
                "has_image": image is not None,
            }


state = AppState()


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class SelectRequest(BaseModel):
    pattern_type: str | None = None
    color: str | None = None

class GenerateRequest(BaseModel):
    pattern_type: str | None = None
    color: str | None = None

class ThemeRequest(BaseModel):
    theme: str


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------

@app.get("/api/state")
def api_state():
    return JSONResponse(state.get_state_payload())


@app.post("/api/select")
def api_select(req: SelectRequest):
    try:
        state.select(req.pattern_type, req.color)
    except ValueError as e:
        return _error(str(e))
    return JSONResponse(state.get_state_payload())


@app.post("/api/generate")
def api_generate(req: GenerateRequest):
    try:
        state.generate(req.pattern_type, req.color)
    except ValueError as e:
        return _error(str(e))
    return JSONResponse(state.get_state_payload())


@app.get("/api/export")
def api_export():
    exported = state.export()
    if exported is None:
        return Response(status_code=204)
    filename, data = exported
    return StreamingResponse(
        io.BytesIO(data),
        media_type="image/png",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@app.get("/api/samples")
def api_samples(refresh: int = 0):
    return JSONResponse(state.get_samples(refresh=bool(refresh)))


@app.get("/api/theme")
def api_theme():
    return JSONResponse({"theme": state.theme_store.get()})


@app.post("/api/theme")
def api_set_theme(req: ThemeRequest):
    try:
        theme = state.theme_store.set(req.theme)
    except ValueError as e:
        return _error(str(e))
    return JSONResponse({"theme": theme})


@app.post("/api/theme/toggle")
def api_toggle_theme():
    return JSONResponse({"theme": state.theme_store.toggle()})


# ---------------------------------------------------------------------------
# Serve frontend
# ---------------------------------------------------------------------------

@app.get("/", response_class=HTMLResponse)
def index():
    html_path = STATIC_DIR / "index.html"
    return HTMLResponse(html_path.read_text())


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn
    import webbrowser
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    url = f"http://localhost:{config.PORT}"
    print(f"Starting server at {url}")
    webbrowser.open(url)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
