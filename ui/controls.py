import streamlit as st

from game.board import Key
from game.config import TILE_SIZE
from game.session import State
from state import end_session, get_session, start_session, submit_key


def start_game(*_, **__):
    start_session()
    st.session_state.session = 'playing'


def quit_game(*_, **__):
    end_session()
    st.session_state.session = 'menu'


def restart_game(*_, **__):
    session = get_session()
    if session is None:
        start_game()
        return
    submit_key(session, Key.RESTART)


def toggle_pause(*_, **__):
    session = get_session()
    if session is not None:
        submit_key(session, Key.PAUSE)


class ControlsUI:

    def __init__(self):
        if 'session' not in st.session_state:
            st.session_state.session = 'menu'

        if 'tile_size' not in st.session_state:
            st.session_state.tile_size = TILE_SIZE

        self.placeholders_ready = False

        self.info_panel = None
        self.tile_size_slider = None
        self.session_buttons_columns = None
        self.controls_divider = None

    def init_placeholders(self):
        if self.placeholders_ready:
            return

        with st.container():
            self.info_panel = st.empty()
            self.tile_size_slider = st.empty()
            self.session_buttons_columns = st.empty()
            self.controls_divider = st.empty()

        self.placeholders_ready = True

    @st.fragment(run_every=1)
    def render(self):
        self.init_placeholders()
        session = get_session()
        playing = st.session_state.session == 'playing' and session is not None

        if not playing:
            self.info_panel.info(':material/sports_esports: Two snakes, one keyboard. Press Start!')
        elif session.state is State.GAME_OVER:
            self.info_panel.error(f':material/skull: Game over, final score {session.score}')
        elif session.state is State.PAUSED:
            self.info_panel.warning(f':material/pause: Paused, score {session.score}')
        else:
            self.info_panel.success(f':material/check: Score {session.score}')

        self.tile_size_slider.slider(
            min_value=10,
            max_value=80,
            key='tile_size',
            step=5,
            label='Tile size',
            help='Slide to adjust the size of a board cell in pixels',
            disabled=playing,
        )

        col_start, col_pause, col_restart, col_quit = self.session_buttons_columns.columns([1, 1, 1, 1])
        with col_start:
            st.button(
                'Start',
                type='primary',
                disabled=playing,
                use_container_width=True,
                on_click=start_game,
            )
        with col_pause:
            st.button(
                'Resume' if playing and session.state is State.PAUSED else 'Pause',
                type='secondary',
                disabled=not playing or session.state is State.GAME_OVER,
                use_container_width=True,
                on_click=toggle_pause,
            )
        with col_restart:
            st.button(
                'Restart',
                type='secondary',
                disabled=not playing,
                use_container_width=True,
                on_click=restart_game,
            )
        with col_quit:
            st.button(
                'Quit',
                type='secondary',
                disabled=not playing,
                use_container_width=True,
                on_click=quit_game,
            )

        self.controls_divider.divider()

    @classmethod
    def init(cls):
        if 'controls_ui' in st.session_state:
            return st.session_state.controls_ui
        return cls()
