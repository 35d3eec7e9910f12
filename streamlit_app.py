"""
# Carbon Dividend Calculator

This is the main entry point for the Streamlit application.

It hands over to the calculator page in ``app/main.py``, which holds the
Calculator, Background Assumptions and Calculation Details tabs.

"""

import streamlit as st

# Redirect to the main application page.
# This is a workaround to use a multi-page app structure where the main app
# is not in the root script.
st.switch_page("app/main.py")
