"""
Streamlit front end: run with `streamlit run app/streamlit_app.py`.
"""
