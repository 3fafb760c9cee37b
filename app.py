# app.py
import streamlit as st
import pandas as pd

from config import APP_NAME, DEFAULTS, FEE_RATES, LIMITS, TAXABLE_ACCOUNT_RATE, configure_logging
from ui import inject_css, app_header, section_header, kpi_card, small_help
from returns_presets import PRESETS
from simulation import SimulationParams, run_simulation, earnings_ratio
from scenarios import risk_scenarios
from settings import UserSettings, apply_settings
from taxes import net_income, monthly_net_income, deduction
from cashflow import (
    BankAccount, ExpenseItem, annual_gross, expense_totals, initial_assets,
    savings, savings_rate, total_expense, total_income, yearly_income_series,
)
from historical import yearly_returns
from formatting import format_currency, format_percent
from charts import investment_chart, scenario_chart, income_chart, historical_chart
from exporters import export_yearly_series, export_income_series, export_params

configure_logging()

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="📈", layout="wide")
inject_css()
app_header(APP_NAME, "Monthly investing and household cash flow, year by year.")

if "params" not in st.session_state:
    st.session_state["params"] = {
        "monthly_amount": DEFAULTS["monthly_amount"],
        "years": DEFAULTS["years"],
        "annual_return": DEFAULTS["annual_return"],
    }
if "settings" not in st.session_state:
    st.session_state["settings"] = dict(DEFAULTS["settings"])

# ------------- Sidebar (settings) -------------
st.sidebar.header("Settings")
saved = UserSettings.from_dict(st.session_state["settings"])
consider_fees = st.sidebar.toggle("Include fees", value=saved.consider_fees,
                                  help="Fund running costs reduce the return every year.")
fee_rate = saved.fee_rate
if consider_fees:
    fee_rate = st.sidebar.select_slider("Fee rate (%/yr)", options=FEE_RATES, value=saved.fee_rate)
consider_tax = st.sidebar.toggle("Include tax on gains", value=saved.consider_tax)
is_nisa = st.sidebar.toggle("NISA account (tax-free)", value=saved.is_nisa)
user_settings = UserSettings(consider_fees, fee_rate, consider_tax, is_nisa)
st.session_state["settings"] = user_settings.to_dict()

st.sidebar.header("Presets")
for preset in PRESETS:
    if st.sidebar.button(preset.name, help=preset.description, use_container_width=True):
        p = preset.params
        st.session_state["params"] = {
            "monthly_amount": p.monthly_amount, "years": p.years, "annual_return": p.annual_return,
        }

# ------------- Investment -------------
section_header(1, "Investment simulation", "Contributions land at the start of each month and compound monthly.")
current = st.session_state["params"]
c1, c2, c3 = st.columns(3)
lo, hi, step = LIMITS["monthly_amount"]
monthly_amount = c1.slider("Monthly amount (yen)", lo, hi, int(current["monthly_amount"]), step)
lo, hi, step = LIMITS["years"]
years = c2.slider("Years", lo, hi, int(current["years"]), step)
lo, hi, step = LIMITS["annual_return"]
annual_return = c3.slider("Expected return (%/yr)", lo, hi, float(current["annual_return"]), step)
st.session_state["params"] = {"monthly_amount": monthly_amount, "years": years, "annual_return": annual_return}

params = apply_settings(
    SimulationParams(monthly_amount=monthly_amount, years=years, annual_return=annual_return),
    user_settings, taxable_rate=TAXABLE_ACCOUNT_RATE,
)
result = run_simulation(params)
ratio = earnings_ratio(result)

k1, k2, k3 = st.columns(3)
kpi_card(k1, "Final amount", format_currency(result.final_amount))
kpi_card(k2, "Total contributed", format_currency(result.total_principal))
kpi_card(k3, "Earnings", format_currency(result.total_earnings),
         f"Earnings are {format_percent(ratio)} of the final amount")
if params.fees:
    small_help(f"Return after fees: {format_percent(params.annual_return - params.fees)} a year.")

st.plotly_chart(investment_chart(result), use_container_width=True)

risk = risk_scenarios(params)
st.plotly_chart(scenario_chart(risk), use_container_width=True)
o, b, p = st.columns(3)
kpi_card(o, "Optimistic (+2 pts)", format_currency(risk.optimistic.final_amount))
kpi_card(b, "Base", format_currency(risk.base.final_amount))
kpi_card(p, "Pessimistic (-2 pts, floor 0%)", format_currency(risk.pessimistic.final_amount))

with st.expander("Past 20 years of world equities"):
    st.plotly_chart(historical_chart(), use_container_width=True)
    small_help("Markets fell hard in 2008 and 2020 and recovered both times. Past returns do not guarantee future ones.")
    worst = yearly_returns()
    small_help(f"Worst single year: {worst.idxmin()} ({format_percent(float(worst.min()))}).")

# ------------- Expense ledger & accounts -------------
section_header(2, "Expenses and accounts", "Itemise fixed costs and list bank balances (10,000 yen). Annual items count as 1/12 per month.")
l1, l2 = st.columns(2)
expense_df = l1.data_editor(
    pd.DataFrame({"name": ["Rent", "Insurance"], "amount": [8.0, 12.0], "type": ["monthly", "annual"]}),
    num_rows="dynamic", use_container_width=True, key="expenses",
    column_config={"type": st.column_config.SelectboxColumn(options=["monthly", "annual"], required=True)},
)
account_df = l2.data_editor(
    pd.DataFrame({"bank_name": ["Main bank"], "current_balance": [100.0], "expected_deposit": [0.0], "kind": ["personal"]}),
    num_rows="dynamic", use_container_width=True, key="accounts",
    column_config={"kind": st.column_config.SelectboxColumn(options=["personal", "corporate"], required=True)},
)
items = [ExpenseItem(str(r["name"]), float(r["amount"]), r["type"]) for r in expense_df.dropna().to_dict("records")]
accounts = [BankAccount(**r) for r in account_df.dropna().to_dict("records")]
ledger = expense_totals(items)
starting_assets = initial_assets(accounts)
k1, k2, k3 = st.columns(3)
kpi_card(k1, "Itemised expenses (monthly)", f"{ledger['monthly']:,.1f}")
kpi_card(k2, "Itemised expenses (annual)", f"{ledger['annual']:,.0f}")
kpi_card(k3, "Assets today", f"{starting_assets:,.0f}")

# ------------- Income & expenses -------------
section_header(3, "Income and expenses", "Amounts in 10,000 yen. Take-home pay uses a flat deduction by income bracket.")
monthly_mode = st.toggle("Enter salary per month", value=DEFAULTS["monthly_mode"])
i1, i2, i3, i4 = st.columns(4)
if monthly_mode:
    lo, hi, step = LIMITS["monthly_salary"]
    gross = annual_gross(i1.slider("Monthly salary", lo, hi, DEFAULTS["monthly_salary"], step))
else:
    gross = i1.number_input("Annual salary", min_value=0, value=annual_gross(DEFAULTS["monthly_salary"]), step=10)
lo, hi, step = LIMITS["bonus"]
bonus = i2.slider("Annual bonus", lo, hi, DEFAULTS["bonus"], step)
use_ledger = st.toggle("Use itemised expenses", value=False)
if use_ledger:
    monthly_expense = ledger["monthly"]
    i3.metric("Monthly expenses", f"{monthly_expense:,.1f}")
else:
    lo, hi, step = LIMITS["monthly_expense"]
    monthly_expense = i3.slider("Monthly expenses", lo, hi, DEFAULTS["monthly_expense"], step)
lo, hi, step = LIMITS["income_years"]
income_years = i4.slider("Years", lo, hi, DEFAULTS["income_years"], step)

net = net_income(gross)
k1, k2, k3, k4 = st.columns(4)
kpi_card(k1, "Take-home salary (annual)", f"{net:,.0f}", f"Deductions {deduction(gross):,.0f}")
kpi_card(k2, "Take-home (monthly)", f"{monthly_net_income(net):,.1f}")
kpi_card(k3, "Savings over the period", f"{savings(gross, bonus, monthly_expense, income_years):,.0f}")
kpi_card(k4, "Savings rate", f"{savings_rate(gross, bonus, monthly_expense)}%")
small_help(f"Gross income over the period: {total_income(gross, bonus, income_years):,.0f}; "
           f"expenses: {total_expense(monthly_expense, income_years):,.0f}.")

series = yearly_income_series(gross, bonus, monthly_expense, income_years)
st.plotly_chart(income_chart(series, initial_assets=starting_assets), use_container_width=True)

# ------------- Export -------------
section_header(4, "Export", "Download the numbers behind the charts.")
e1, e2, e3 = st.columns(3)
name, data = export_yearly_series(result)
e1.download_button("⬇️ Investment by year (CSV)", data, file_name=name, mime="text/csv")
name, data = export_income_series(series)
e2.download_button("⬇️ Income by year (CSV)", data, file_name=name, mime="text/csv")
name, data = export_params(params)
e3.download_button("⬇️ Parameters (JSON)", data, file_name=name, mime="application/json")

st.markdown("---")
st.caption("Simplified estimates with flat deduction rates and a constant return. A planning aid, not financial advice.")
