"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.ring_chart import (
    build_plotly_figure,
    build_ring_model,
    format_amount,
    render_ring_svg,
)
from src.application.use_cases.get_budget_status import GetBudgetStatusUseCase
from src.application.use_cases.get_subscription_chart import (
    GetSubscriptionChartUseCase,
)
from src.application.use_cases.get_subscription_stats import (
    GetSubscriptionStatsUseCase,
)
from src.domain.constants import REPORTING_PERIODS
from src.domain.models.charts import ChartData
from src.domain.models.stats import (
    BudgetStatus,
    CategoryTotal,
    SubscriptionStats,
    UpcomingPayment,
)
from src.infrastructure.container import (
    build_settings,
    build_subscriptions_repository,
)
from src.infrastructure.logging.logger import get_usage_logger

PERIOD_LABELS = {
    "monthly": "Monthly",
    "quarterly": "Quarterly",
    "yearly": "Yearly",
}

LEVEL_MESSAGES = {
    "ok": "Spending is within budget.",
    "warning": "Spending is above 80% of the budget.",
    "over": "Spending exceeds the budget.",
}


def _fetch_chart_data(period: str) -> ChartData:
    """Fetch chart sectors for the reporting period."""
    repository = build_subscriptions_repository()
    use_case = GetSubscriptionChartUseCase(subscriptions_repository=repository)
    return use_case.execute(period)


@st.cache_data(show_spinner=False)
def _load_chart_data(period: str) -> ChartData:
    """Cached wrapper around _fetch_chart_data for Streamlit sessions."""
    return _fetch_chart_data(period)


def _fetch_stats(today: date, upcoming_days: int) -> SubscriptionStats:
    """Fetch spend statistics."""
    repository = build_subscriptions_repository()
    use_case = GetSubscriptionStatsUseCase(
        subscriptions_repository=repository,
        upcoming_days=upcoming_days,
    )
    return use_case.execute(today=today)


@st.cache_data(show_spinner=False)
def _load_stats(today: date, upcoming_days: int) -> SubscriptionStats:
    """Cached wrapper around _fetch_stats."""
    return _fetch_stats(today, upcoming_days)


def _fetch_budget_status(budget: Decimal) -> BudgetStatus:
    """Fetch the budget status for the active subscriptions."""
    repository = build_subscriptions_repository()
    use_case = GetBudgetStatusUseCase(subscriptions_repository=repository)
    return use_case.execute(budget)


@st.cache_data(show_spinner=False)
def _load_budget_status(budget: Decimal) -> BudgetStatus:
    """Cached wrapper around _fetch_budget_status."""
    return _fetch_budget_status(budget)


def _prepare_category_data(
    categories: Sequence[CategoryTotal],
    currency_code: str,
) -> list[dict[str, str | float | int]]:
    """Prepare Altair-ready rows for the category bar chart."""
    return [
        {
            "category": item.category.title(),
            "amount": float(item.amount),
            "amount_label": format_amount(item.amount, currency_code),
            "count": item.count,
        }
        for item in categories
    ]


def _render_category_chart(
    categories: Sequence[CategoryTotal],
    currency_code: str,
) -> None:
    """Render monthly spend by category as a horizontal bar chart."""
    st.subheader("Monthly spend by category")
    if not categories:
        st.info("No category spend to display.")
        return
    data = _prepare_category_data(categories, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
    ).encode(
        x=alt.X("amount:Q", title=None),
        y=alt.Y("category:N", sort="-x", title=None),
        color=alt.Color("category:N", legend=None),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("count:Q"),
        ],
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_ring_chart(
    chart: ChartData,
    period: str,
    currency_code: str,
    interactive: bool,
) -> None:
    """Render the spend ring for the selected period."""
    st.subheader(f"{PERIOD_LABELS[period]} spend")
    if not chart.sectors:
        st.info("No subscriptions with a positive amount.")
        return
    model = build_ring_model(chart, currency_code=currency_code)
    if interactive:
        st.plotly_chart(build_plotly_figure(model), width="stretch")
    else:
        st.markdown(render_ring_svg(model), unsafe_allow_html=True)
    st.caption(
        f"Total: {format_amount(chart.total_for_period, currency_code)}"
    )


def _render_budget(status: BudgetStatus, currency_code: str) -> None:
    """Render budget usage as a progress bar and message."""
    st.subheader("Budget")
    st.progress(float(status.progress_percent) / 100)
    message = (
        f"{LEVEL_MESSAGES[status.level]} "
        f"Remaining: {format_amount(status.remaining, currency_code)}"
    )
    if status.level == "over":
        st.error(message)
    elif status.level == "warning":
        st.warning(message)
    else:
        st.success(message)


def _upcoming_rows(
    payments: Sequence[UpcomingPayment],
    currency_code: str,
) -> list[dict[str, str | int]]:
    """Build table rows for upcoming renewals."""
    return [
        {
            "Name": payment.subscription.name,
            "Amount": format_amount(
                payment.subscription.amount,
                currency_code,
            ),
            "Cycle": payment.subscription.billing_cycle,
            "Date": payment.payment_date.isoformat(),
            "Days": payment.days_until_payment,
        }
        for payment in payments
    ]


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Subscription Dashboard", layout="wide")
    st.title("Subscription Dashboard")

    settings = build_settings()
    period = st.sidebar.selectbox(
        "Period",
        list(REPORTING_PERIODS),
        index=REPORTING_PERIODS.index(settings.reporting_period),
        format_func=lambda value: PERIOD_LABELS[value],
    )
    interactive = st.sidebar.checkbox("Interactive chart", value=False)
    get_usage_logger().info(f"Dashboard viewed with period={period}")

    today = date.today()
    currency_code = settings.currency
    stats = _load_stats(today, settings.upcoming_days)
    chart = _load_chart_data(period)

    total_col, yearly_col, count_col, average_col = st.columns(4)
    total_col.metric(
        "Monthly total",
        format_amount(stats.monthly_total, currency_code),
    )
    yearly_col.metric(
        "Yearly total",
        format_amount(stats.yearly_total, currency_code),
    )
    count_col.metric(
        "Active subscriptions",
        f"{stats.active_subscriptions} / {stats.total_subscriptions}",
    )
    average_col.metric(
        "Average per subscription",
        format_amount(stats.average_amount, currency_code),
    )
    if stats.excluded_subscriptions:
        st.caption(
            f"{stats.excluded_subscriptions} active subscription(s) with an "
            "unsupported billing cycle are not counted in the totals."
        )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_ring_chart(chart, period, currency_code, interactive)
    with chart_right:
        _render_category_chart(stats.category_breakdown, currency_code)
        if settings.monthly_budget is not None:
            _render_budget(
                _load_budget_status(settings.monthly_budget),
                currency_code,
            )

    st.subheader(f"Renewals in the next {settings.upcoming_days} days")
    if not stats.upcoming_payments:
        st.caption("No upcoming renewals.")
        return
    st.dataframe(
        _upcoming_rows(stats.upcoming_payments, currency_code),
        width="stretch",
        hide_index=True,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
