"""
Interactive SQL Visualizer — FastAPI Backend
Serves the topic catalog, the step playback state and the AI explainer panel.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from config import config
from sqlviz import explainer
from sqlviz.page import render_page
from sqlviz.playback import PlaybackEngine
from sqlviz.session import VisualizerSession
from sqlviz.topics import SQL_TOPICS

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ── Pydantic models ────────────────────────────────────────────────────

class SelectRequest(BaseModel):
    topic: str
    example: int = 0

class RevealReport(BaseModel):
    key: str
    ratio: float = Field(..., ge=0.0, le=1.0)

class RevealRequest(BaseModel):
    entries: list[RevealReport]

class ExplainRequest(BaseModel):
    query: str = ""


# ── Application state ──────────────────────────────────────────────────

class VisualizerState:
    """The single visualizer view served by this process. Nothing is persisted."""

    def __init__(self):
        self.session: Optional[VisualizerSession] = None

    def start(self) -> None:
        engine = PlaybackEngine(threshold=config.REVEAL_THRESHOLD)
        self.session = VisualizerSession(SQL_TOPICS, engine)

    def stop(self) -> None:
        if self.session is not None:
            self.session.close()
        self.session = None

    def current(self) -> VisualizerSession:
        if self.session is None:
            self.start()
        return self.session


state = VisualizerState()


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    state.start()
    logger.info("SQL visualizer started with %d topics", len(SQL_TOPICS.topic_names()))
    yield
    state.stop()
    logger.info("SQL visualizer stopped")


# ── FastAPI app ────────────────────────────────────────────────────────

app = FastAPI(title="Interactive SQL Visualizer", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── API Routes ─────────────────────────────────────────────────────────

@app.get("/api/topics")
async def list_topics() -> dict:
    """Topic names in menu order."""
    return {"topics": SQL_TOPICS.topic_names()}


@app.get("/api/topics/{topic}")
async def get_topic(topic: str) -> dict:
    try:
        info = SQL_TOPICS.topic(topic)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown topic: {topic}")
    return {
        "topic": topic,
        "description": info.description,
        "syntax": info.syntax,
        "use_case": info.use_case,
        "examples": SQL_TOPICS.example_titles(topic),
    }


@app.get("/api/state")
async def get_state() -> dict:
    """Current selection, its steps, and which of them have been revealed."""
    return _state_payload(state.current())


@app.post("/api/select")
async def select_example(req: SelectRequest) -> dict:
    """Select a topic/example pair; always restarts playback."""
    session = state.current()
    try:
        session.select(req.topic, req.example)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown topic: {req.topic}")
    except IndexError:
        raise HTTPException(status_code=404, detail=f"Unknown example {req.example} for topic {req.topic}")
    return _state_payload(session)


@app.post("/api/reveal")
async def reveal(req: RevealRequest) -> dict:
    """Relay browser intersection reports into the playback engine."""
    session = state.current()
    session.engine.notifier.report_many((e.key, e.ratio) for e in req.entries)
    return {"revealed": sorted(session.revealed)}


@app.post("/api/explainer")
async def explain(req: ExplainRequest) -> dict:
    """Explain a SQL query with the model; errors come back as inline text."""
    result = explainer.explain_and_format(req.query)
    return {"explanation": result.explanation, "error": result.error}


# ── Serve frontend ─────────────────────────────────────────────────────

@app.get("/", response_class=HTMLResponse)
async def serve_index(tab: str = "visualizer") -> str:
    return render_page(state.current(), config.DEFAULT_QUERY, config.REVEAL_THRESHOLD, tab)


# ── Internal helpers ───────────────────────────────────────────────────

def _state_payload(session: VisualizerSession) -> dict:
    return {
        "topic": session.selected_topic,
        "example": session.selected_example_index,
        "examples": session.example_titles(),
        "title": session.example.title,
        "steps": [
            {
                "key": element.key,
                **step.model_dump(mode="json"),
            }
            for step, element in zip(session.steps, session.step_elements)
        ],
        "revealed": sorted(session.revealed),
    }
