# pages/01_Parabens.py
from __future__ import annotations

import streamlit as st

from modules.form.state import consume_flash
from modules.form.ui_sections import confirmation_card, inject_styles

st.set_page_config(page_title="Parabéns | Mentoria RW MasterClass", page_icon="🎉", layout="centered")

inject_styles()
consume_flash()
confirmation_card()
