#!/usr/bin/env python3
"""
Income Tax Calculator 2025: Interactive Interface
==================================================
Streamlit app wrapping the tax_engine calculator.

Run with:
    streamlit run app.py
"""

import logging
import os

import streamlit as st
import pandas as pd
from tax_engine import (
    compute_tax, parse_income, InvalidIncomeError, format_inr, rate_label,
    summary_figures, breakdown_frame, bar_chart_frame, NEW_REGIME_2025,
)

logging.basicConfig(
    level=getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO),
    format="[%(asctime)s] [%(levelname)-8s] [%(module)s:%(funcName)s:%(lineno)d] %(message)s",
)
logger = logging.getLogger(__name__)

# ── Page config ──────────────────────────────────────────────

st.set_page_config(
    page_title="Income Tax Calculator 2025",
    page_icon="🧮",
    layout="wide",
)

# ── Sidebar: current parameters ──────────────────────────────

with st.sidebar:
    st.markdown("## 2025 New Regime")

    st.markdown("**Tax Slabs**")
    slab_rows = []
    previous = 0
    for slab in NEW_REGIME_2025.slabs:
        slab_rows.append({
            'From': f"₹{format_inr(previous, 0)}",
            'To': f"₹{format_inr(slab.upper_bound, 0)}" if slab.upper_bound is not None else "—",
            'Rate': rate_label(slab.rate),
        })
        previous = slab.upper_bound
    st.dataframe(pd.DataFrame(slab_rows), hide_index=True, use_container_width=True)

    st.markdown(f"**Standard Deduction:** ₹{format_inr(NEW_REGIME_2025.standard_deduction, 0)}")
    st.markdown(f"**Cess:** {NEW_REGIME_2025.cess_rate * 100:.0f}% of slab tax")

    st.divider()
    st.caption("No tax is payable up to ₹12 lakh gross income "
               "or ₹12.75 lakh taxable income.")


# ── Main content ─────────────────────────────────────────────

st.title("🧮 Income Tax Calculator 2025")

st.subheader("Enter your annual income (INR)")
in_col, btn_col = st.columns([3, 1])
with in_col:
    annual_income = st.text_input("Annual income (INR)", placeholder="Enter amount in INR",
                                  key="annual_income", label_visibility="collapsed")
with btn_col:
    calculate = st.button("Calculate", type="primary", use_container_width=True)

if calculate:
    try:
        income = parse_income(annual_income)
    except InvalidIncomeError as exc:
        logger.info("Rejected income input %r", exc.text)
        st.session_state.pop('result', None)
        st.error(str(exc))
    else:
        with st.spinner("Calculating..."):
            st.session_state['result'] = compute_tax(income)

result = st.session_state.get('result')

# ── Results ──────────────────────────────────────────────────

if result is not None:
    st.divider()

    cards = st.columns(4)
    for card, (label, value) in zip(cards, summary_figures(result).items()):
        with card:
            st.metric(label, f"₹{format_inr(value)}")

    col_table, col_chart = st.columns(2)

    with col_table:
        st.subheader("Detailed Breakdown")
        st.dataframe(breakdown_frame(result), hide_index=True, use_container_width=True)

    with col_chart:
        st.subheader("Bar Chart - Slab Wise Tax")
        st.bar_chart(bar_chart_frame(result))
        st.caption("  ·  ".join(
            f"{rate_label(entry.rate)}: ₹ {format_inr(entry.tax, 0)}"
            for entry in result.breakdown
        ))
