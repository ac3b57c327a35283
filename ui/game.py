import base64
import io

import streamlit as st
import streamlit_hotkeys as hotkeys
from PIL import Image

from game.board import Key
from game.config import TILE_SIZE
from game.session import GameSession, State
from state import advance_clock, end_session, get_session, render_frame, submit_key, upscale

MAX_RENDER_RATE = 20  # keep it snappy
PERIOD = 1.0 / float(MAX_RENDER_RATE)
HOTKEYS_KEY = 'game-hotkeys'
KEY_BINDINGS = {
    Key.UP: ['ArrowUp', 'W'],
    Key.DOWN: ['ArrowDown', 'S'],
    Key.LEFT: ['ArrowLeft', 'A'],
    Key.RIGHT: ['ArrowRight', 'D'],
    Key.PAUSE: ['P'],
    Key.RESTART: ['R'],
    Key.QUIT: ['Escape'],
}
KEY_HELP = {
    Key.PAUSE: 'Pause / resume',
    Key.RESTART: 'Restart on a new level',
    Key.QUIT: 'Quit to the menu',
}


# module-level cache: tile size -> {"html": str, "stamp": (session id, generation)}
_FRAME_CACHE = {}

def get_frame(session: GameSession, tile_size: int = TILE_SIZE) -> str:
    """
    Return a cached <img> unless the session changed since we last built one.
    """
    stamp = (id(session), session.generation)
    cache = _FRAME_CACHE.get(tile_size)
    if cache is not None and cache["stamp"] == stamp:
        return cache["html"]

    frame = upscale(render_frame(session), tile_size)

    buf = io.BytesIO()
    Image.fromarray(frame).save(buf, format="PNG")
    b64 = base64.b64encode(buf.getvalue()).decode("ascii")
    html = f'<img src="data:image/png;base64,{b64}" style="image-rendering: pixelated;">'

    _FRAME_CACHE[tile_size] = {"html": html, "stamp": stamp}
    return html


def status_line(session: GameSession) -> str:
    if session.state is State.GAME_OVER:
        return f'Game over! Score: {session.score}. Press R to restart, Esc to quit'
    status = f'Level: {session.level_name}, score: {session.score}, speed: {1.0 / session.tick_interval:.1f} ticks/s'
    if session.state is State.PAUSED:
        status += ' (paused, press P to resume)'
    return status


@st.fragment  # isolate hotkeys to avoid unnecessary re-render
def init_hotkeys() -> None:
    hotkeys_list = []
    for key, bindings in KEY_BINDINGS.items():
        for binding in bindings:
            hotkeys_list.append(hotkeys.hk(
                str(key), binding,
                ignore_repeat=key not in KEY_HELP,
                help=KEY_HELP.get(key, f'Move {key.name.lower()}'),
                prevent_default=True
            ))

    hotkeys.activate(hotkeys_list, key=HOTKEYS_KEY)


def pressed_keys() -> list[Key]:
    return [key for key in KEY_BINDINGS if hotkeys.pressed(str(key), key=HOTKEYS_KEY)]


class GameUI:

    def __init__(self):
        if 'session' not in st.session_state:
            st.session_state.session = 'menu'
        if 'tile_size' not in st.session_state:
            st.session_state.tile_size = TILE_SIZE

        self.placeholders_ready = False

        self.game_info = None
        self.game_screen = None

    def init_placeholders(self):
        if self.placeholders_ready:
            return

        with st.container():
            self.game_info = st.empty()
            self.game_screen = st.empty()

        self.placeholders_ready = True

    @st.fragment(run_every=PERIOD)
    def render(self):
        self.init_placeholders()

        keys = pressed_keys()
        session = get_session()
        if session is None or st.session_state.session != 'playing':
            self.game_info.caption('Press Start to play')
            self.game_screen.empty()
            return

        for key in keys:
            if key is Key.QUIT:
                end_session()
                st.session_state.session = 'menu'
                self.game_info.caption('Press Start to play')
                self.game_screen.empty()
                return
            submit_key(session, key)

        advance_clock(session)

        self.game_info.caption(status_line(session))
        self.game_screen.markdown(get_frame(session, st.session_state.tile_size), unsafe_allow_html=True)

    @classmethod
    def init(cls):
        if 'game_ui' in st.session_state:
            return st.session_state.game_ui
        return cls()
