"""
Streamlit dashboard and its console launcher.
"""
