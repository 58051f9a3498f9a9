"""Streamlit front end: page rendering and console entry point."""
from __future__ import annotations

import sys
from pathlib import Path
from unittest import mock

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
APP_PATH = PROJECT_ROOT / "app" / "streamlit_app.py"


def test_app_imports():
    from app import streamlit_app

    assert callable(streamlit_app.main)
    assert streamlit_app.CONFIG.max_months == 600


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setattr("pricing.coingecko.fetch_btc_price", lambda **kwargs: 90000.0)
    st.cache_data.clear()
    yield AppTest.from_file(str(APP_PATH), default_timeout=30).run()
    st.cache_data.clear()


class TestPage:

    def test_initial_page_asks_for_model(self, app):
        assert not app.exception
        assert app.title[0].value == "🏎️ When Lambo?"
        assert any("$90,000" in md.value for md in app.markdown)
        assert "Select Your Dream Lambo" in app.info[0].value

    def test_selecting_model_and_holdings_shows_target_date(self, app):
        app.selectbox[0].select_index(0).run()
        app.number_input[0].set_value(0.5).run()

        assert not app.exception
        banner = app.success[0].value
        assert "That's only 11 years, 7 months away!" in banner
        assert len(app.metric) >= 3

    def test_fallback_price_notice(self, monkeypatch):
        from pricing.coingecko import PriceFetchError

        def _fail(**kwargs):
            raise PriceFetchError("offline")

        monkeypatch.setattr("pricing.coingecko.fetch_btc_price", _fail)
        st.cache_data.clear()
        at = AppTest.from_file(str(APP_PATH), default_timeout=30).run()
        st.cache_data.clear()

        assert not at.exception
        assert any("~$95,000" in md.value for md in at.markdown)
        assert any("API unavailable" in c.value for c in at.caption)


class TestConsoleEntryPoint:

    def test_run_launches_streamlit_server_on_page(self, monkeypatch):
        from app import streamlit_app

        monkeypatch.setattr(sys, "argv", ["when-lambo"])
        with mock.patch("streamlit.web.cli.main", return_value=0) as cli_main:
            with pytest.raises(SystemExit) as excinfo:
                streamlit_app.run()

        cli_main.assert_called_once_with()
        assert excinfo.value.code == 0
        assert sys.argv == ["streamlit", "run", str(APP_PATH.resolve())]

    def test_setup_script_points_at_run(self):
        setup_text = (PROJECT_ROOT / "setup.py").read_text(encoding="utf-8")
        assert "when-lambo=app.streamlit_app:run" in setup_text
