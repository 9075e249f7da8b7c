"""
Streamlit client for the Multilingual Document QA API.
"""
