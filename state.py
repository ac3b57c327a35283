import time
from typing import Iterable

import cv2
import numpy as np
import streamlit as st
from numpy.typing import NDArray

from game.config import BOARD_HEIGHT, BOARD_WIDTH, TILE_SIZE
from game.session import GameSession, State, Tile, background_color, key_press, new_session, tiles_to_draw, update
from utils.color import hex_to_rgb

# A stalled tab (hidden, slow rerun) must not bank seconds of game time
MAX_FRAME_DT = 0.25


# ---------------- Per-tab session ----------------
def get_session() -> GameSession | None:
    return st.session_state.get('game')


def start_session() -> GameSession:
    session = new_session()
    st.session_state.game = session
    st.session_state.last_update = time.monotonic()
    return session


def end_session() -> None:
    st.session_state.pop('game', None)
    st.session_state.pop('last_update', None)


def submit_key(session: GameSession, key) -> None:
    key_press(session, key)


def advance_clock(session: GameSession, now: float | None = None) -> float:
    """
    Feed the wall-clock time since the previous call into the session.
    Returns the dt that was applied.
    """
    if now is None:
        now = time.monotonic()
    last = st.session_state.get('last_update', now)
    st.session_state.last_update = now

    dt = min(max(now - last, 0.0), MAX_FRAME_DT)
    update(session, dt)
    return dt


# ---------------- Frame rendering ----------------
def render_tiles_into(tiles: Iterable[Tile], frame: NDArray[np.uint8]) -> None:
    """
    Paint visible tiles into an (H,W,3) RGB frame, one pixel per cell.
    Later tiles overwrite earlier ones.
    """
    for tile in tiles:
        if not tile.visible:
            continue
        frame[tile.position.y, tile.position.x, :3] = hex_to_rgb(tile.color)


def render_frame(session: GameSession) -> NDArray[np.uint8]:
    """(BOARD_HEIGHT, BOARD_WIDTH, 3) uint8 frame; a game over blanks the board."""
    frame = np.empty((BOARD_HEIGHT, BOARD_WIDTH, 3), dtype=np.uint8)
    frame[...] = hex_to_rgb(background_color(session))
    if session.state is not State.GAME_OVER:
        render_tiles_into(tiles_to_draw(session), frame)
    return frame


def upscale(frame: NDArray[np.uint8], tile_size: int = TILE_SIZE) -> NDArray[np.uint8]:
    """Pixel-perfect upscale: every cell becomes a tile_size x tile_size square."""
    if tile_size <= 1:
        return frame
    h, w = frame.shape[:2]
    return cv2.resize(frame, (w * tile_size, h * tile_size), interpolation=cv2.INTER_NEAREST)
