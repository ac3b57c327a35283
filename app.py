import logging
import os

import streamlit as st
import streamlit_hotkeys as hotkeys

from ui.controls import ControlsUI
from ui.game import HOTKEYS_KEY, GameUI, init_hotkeys

logging.basicConfig(
    level=os.environ.get('SNAKE_LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

st.set_page_config(page_title='Snake Duel', page_icon=':snake:')

expander_ph = st.empty()

# initialize the UI
controls_ui = ControlsUI.init()
game_ui = GameUI.init()

init_hotkeys()

with expander_ph.expander('How to play?'):
    st.markdown('Click `Start`, then steer with the arrows or WASD. Both snakes follow every turn you '
                'type, so keep both of them off the walls and out of their own tails!  \n >Hint: if the '
                'controls are not working, try clicking outside of the game window.')
    hotkeys.legend(key=HOTKEYS_KEY)

controls_ui.render()
game_ui.render()
