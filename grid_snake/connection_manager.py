"""WebSocket connection management and state serialization."""

import json
import logging

from fastapi import WebSocket

from .constants import BACKGROUND_COLOR, CELL_SIZE, FOOD_COLOR, SNAKE_COLOR
from .game import GameController

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: set[WebSocket] = set()

    async def connect(self, ws: WebSocket):
        await ws.accept()
        self.connections.add(ws)

    def disconnect(self, ws: WebSocket):
        self.connections.discard(ws)

    async def broadcast(self, message: str):
        disconnected = []
        for ws in self.connections:
            try:
                await ws.send_text(message)
            except Exception as exc:
                logger.warning("Dropping connection after failed send: %s", exc)
                disconnected.append(ws)
        for ws in disconnected:
            self.connections.discard(ws)

    async def send_personal(self, ws: WebSocket, message: str):
        await ws.send_text(message)


def build_state_msg(game: GameController) -> str:
    return json.dumps({"type": "state", **game.snapshot().to_dict()})


def build_welcome_msg(game: GameController) -> str:
    return json.dumps({
        "type": "welcome",
        "grid": [game.columns, game.rows],
        "cell_size": CELL_SIZE,
        "colors": {
            "background": BACKGROUND_COLOR,
            "snake": SNAKE_COLOR,
            "food": FOOD_COLOR,
        },
    })
