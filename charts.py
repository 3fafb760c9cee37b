import plotly.graph_objects as go

import cashflow
import historical
import scenarios
import simulation

_MARGIN = dict(l=30, r=20, t=60, b=30)


def investment_chart(result: simulation.SimulationResult) -> go.Figure:
    """Stacked principal and earnings per year."""
    df = simulation.to_frame(result)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=df["year"], y=df["principal"], name="Principal"))
    fig.add_trace(go.Bar(x=df["year"], y=df["earnings"], name="Earnings"))
    fig.update_layout(
        barmode="stack", title="Balance by year",
        xaxis_title="Years from now", yaxis_title="Yen",
        hovermode="x unified", margin=_MARGIN
    )
    return fig


def scenario_chart(risk: scenarios.RiskScenario) -> go.Figure:
    df = scenarios.to_frame(risk)
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["year"], y=df["optimistic"], mode="lines", name="Optimistic", line=dict(dash="dot")))
    fig.add_trace(go.Scatter(x=df["year"], y=df["base"], mode="lines", name="Base"))
    fig.add_trace(go.Scatter(x=df["year"], y=df["pessimistic"], mode="lines", name="Pessimistic", line=dict(dash="dot")))
    fig.update_layout(
        title="Return scenarios", xaxis_title="Years from now", yaxis_title="Yen",
        hovermode="x unified", margin=_MARGIN
    )
    return fig


def income_chart(series: list, initial_assets: float = 0.0) -> go.Figure:
    """Flat income and expense lines, cumulative savings, and the asset balance
    from year 0 (starting assets) onward."""
    df = cashflow.to_frame(series)
    annual_savings = series[0].savings if series else 0
    assets = cashflow.asset_series(initial_assets, annual_savings, len(series))
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=list(range(len(assets))), y=assets, mode="lines", name="Assets", line=dict(width=3)))
    fig.add_trace(go.Scatter(x=df["year"], y=df["net_income"], mode="lines", name="Take-home (annual)"))
    fig.add_trace(go.Scatter(x=df["year"], y=df["expense"], mode="lines", name="Expenses (annual)"))
    fig.add_trace(go.Bar(x=df["year"], y=df["savings"], name="Savings (cumulative)", opacity=0.5))
    fig.update_layout(
        title="Income, expenses and savings", xaxis_title="Years from now",
        yaxis_title="10,000 yen", hovermode="x unified", margin=_MARGIN
    )
    return fig


def historical_chart() -> go.Figure:
    df = historical.index_frame()
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["year"], y=df["value"], mode="lines+markers", name="World equities"))
    for ev in historical.EVENTS:
        fig.add_vline(x=ev["year"], line_dash="dash", line_color="red",
                      annotation_text=ev["label"])
    fig.update_layout(
        title=(f"World equities 2004-2024 (avg. {historical.AVERAGE_RETURN}% a year, "
               f"compound {historical.cagr():.1f}%)"),
        xaxis_title="Year", yaxis_title="Index (2004 = 100)", margin=_MARGIN
    )
    return fig
