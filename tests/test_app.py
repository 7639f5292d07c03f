"""
Front-end tests for the Streamlit app, driven through AppTest.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP, default_timeout=30)
    return at.run()


def submit(at, text):
    at.text_input(key="annual_income").input(text)
    at.button[0].click()
    return at.run()


class TestIncomeForm:

    def test_initial_page_has_no_result(self, app):
        assert not app.exception
        assert len(app.metric) == 0
        assert len(app.error) == 0

    @pytest.mark.parametrize("text", ["abc", "-1000", ""])
    def test_invalid_income_shows_message(self, app, text):
        at = submit(app, text)
        assert at.error[0].value == "Please enter a valid income amount"
        assert len(at.metric) == 0
        assert "result" not in at.session_state

    def test_valid_income_shows_summary(self, app):
        at = submit(app, "1600000")
        assert not at.exception
        assert len(at.error) == 0
        assert [m.label for m in at.metric] == [
            "Gross Income", "Standard Deduction", "Taxable Income", "Total Tax",
        ]
        assert [m.value for m in at.metric] == [
            "₹16,00,000.00", "₹75,000.00", "₹15,25,000.00", "₹1,13,100.00",
        ]

    def test_zero_tax_income(self, app):
        at = submit(app, "12,00,000")
        assert at.metric[3].value == "₹0.00"
        assert at.session_state["result"].breakdown[0].label == "No Tax"

    def test_invalid_after_valid_clears_result(self, app):
        at = submit(app, "3000000")
        assert len(at.metric) == 4
        at = submit(at, "three million")
        assert at.error[0].value == "Please enter a valid income amount"
        assert len(at.metric) == 0
