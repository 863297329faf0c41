"""FastAPI application: HTTP route, WebSocket endpoint, game loop."""

import asyncio
import json
import logging
import os

from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse

from .constants import HOST, PORT, TICK_RATE
from .connection_manager import ConnectionManager, build_state_msg, build_welcome_msg
from .game import GameController
from .models import Direction

logger = logging.getLogger(__name__)


def log_loop_exit(task: asyncio.Task):
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Game loop stopped", exc_info=exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    task = asyncio.create_task(game_loop())
    task.add_done_callback(log_loop_exit)
    yield
    task.cancel()
    with suppress(asyncio.CancelledError):
        await task


app = FastAPI(lifespan=lifespan)
game = GameController()
manager = ConnectionManager()

HTML_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "index.html")


@app.get("/")
async def serve_index():
    return FileResponse(HTML_PATH, media_type="text/html")


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await manager.connect(ws)
    try:
        await manager.send_personal(ws, build_welcome_msg(game))
        await manager.send_personal(ws, build_state_msg(game))
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                break
            raw = message.get("text")
            if raw is None:
                logger.warning("Ignoring non-text frame")
                continue
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Ignoring malformed message: %r", raw[:80])
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("type") == "input":
                d = Direction.parse(msg.get("direction"))
                if d is not None:
                    game.request_direction(d)
            elif msg.get("type") == "restart":
                if game.request_restart():
                    await manager.broadcast(build_state_msg(game))
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(ws)


async def game_loop():
    was_ended = game.ended
    while True:
        if game.ended and was_ended:
            await asyncio.sleep(1 / TICK_RATE)
            continue

        game.tick()
        was_ended = game.ended
        await manager.broadcast(build_state_msg(game))

        await asyncio.sleep(1 / TICK_RATE)


def run():
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    logger.info("Snake server starting on http://localhost:%d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
