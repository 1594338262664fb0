"""
Streamlit Frontend for fintrack

The presentation layer: it renders what FinanceTracker returns and
forwards user actions to it.

DESIGN PRINCIPLES:
1. Every form goes through InputValidator before reaching the tracker
2. Clear messages when there is not enough data yet
3. No computation here beyond layout
"""

import html
import time
from datetime import date

import streamlit as st

from fintrack.analytics import format_currency, format_percent
from fintrack.audit import configure_logging
from fintrack.config import get_settings
from fintrack.models.analytics import SimulationParams
from fintrack.models.habit import HABIT_LABELS
from fintrack.models.transaction import TransactionType
from fintrack.orchestrator import FinanceTracker, create_app_components
from fintrack.validation import InputValidator


# Page configuration
st.set_page_config(
    page_title="fintrack",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .stButton>button {
        width: 100%;
        margin-top: 10px;
    }
    .goal-feedback {
        padding: 16px;
        border-radius: 10px;
        background-color: #111827;
        margin: 10px 0;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_components() -> FinanceTracker:
    """Get or create the tracker (cached for the session)."""
    configure_logging(get_settings().app.effective_log_level)
    return create_app_components()


def main():
    """Main application entry point."""
    tracker = get_components()
    validator = InputValidator()

    st.sidebar.title("💰 fintrack")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["📊 Dashboard", "🤖 Insights", "🎯 Goals", "📈 Simulator"],
        index=0,
    )

    st.sidebar.markdown("---")
    render_habits(tracker)

    if page == "📊 Dashboard":
        render_dashboard_page(tracker, validator)
    elif page == "🤖 Insights":
        render_insights_page(tracker)
    elif page == "🎯 Goals":
        render_goals_page(tracker, validator)
    elif page == "📈 Simulator":
        render_simulator_page(tracker)


def render_habits(tracker: FinanceTracker):
    """Habit pills in the sidebar; clicking marks the habit done today."""
    st.sidebar.subheader("Habits")
    for habit_id, state in tracker.habits().items():
        done = tracker.habit_done_today(habit_id)
        label = f"{'✅' if done else '⬜'} {HABIT_LABELS[habit_id]} · {state.streak}🔥"
        if st.sidebar.button(label, key=f"habit-{habit_id.value}", disabled=done):
            tracker.mark_habit(habit_id)
            st.rerun()


def render_dashboard_page(tracker: FinanceTracker, validator: InputValidator):
    """KPIs, the add form, the transaction table and export."""
    st.title("📊 Dashboard")
    currency = tracker.currency
    summary = tracker.summary()

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Income", format_currency(summary.income, currency))
    col2.metric("Expenses", format_currency(summary.expense, currency))
    col3.metric("Balance", format_currency(summary.balance, currency))
    col4.metric("Savings rate", format_percent(summary.savings_rate))

    st.markdown("---")
    st.subheader("Add transaction")
    with st.form("transaction-form", clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            tx_type = st.selectbox("Type", [t.value for t in TransactionType])
            category = st.text_input("Category", value="Food")
            amount = st.text_input("Amount")
        with col2:
            tx_date = st.date_input("Date", value=date.today())
            description = st.text_input("Description (optional)")
        submitted = st.form_submit_button("Add", type="primary")

    if submitted:
        result = validator.validate_transaction(
            tx_type,
            category,
            amount,
            tx_date.isoformat() if tx_date else None,
            description,
        )
        for issue in result.issues:
            if issue.severity == "warning":
                st.warning(issue.message)
        if result.is_valid:
            tracker.add_transaction(result.value)
            st.rerun()
        else:
            st.error(result.message)

    st.markdown("---")
    st.subheader("Transactions")
    transactions = tracker.transactions()
    if not transactions:
        st.info("No transactions yet. Add your first one!")
    else:
        newest_first = sorted(transactions, key=lambda t: t.date or "", reverse=True)
        for tx in newest_first:
            col1, col2, col3, col4, col5, col6 = st.columns([2, 1, 2, 3, 2, 1])
            col1.write(tx.date or "-")
            col2.write("Income" if tx.type == TransactionType.INCOME else "Expense")
            col3.write(tx.category)
            col4.write(tx.description or "-")
            col5.write(format_currency(tx.amount, currency))
            if col6.button("Delete", key=f"delete-{tx.id}"):
                tracker.delete_transaction(tx.id)
                st.rerun()

    report = tracker.export_report()
    if report is not None:
        st.download_button(
            "⬇️ Export CSV",
            data=report.content,
            file_name=report.filename,
            mime=report.mime_type,
        )

    totals = tracker.category_totals()
    if totals:
        st.subheader("Spending by category")
        st.bar_chart({name: float(total) for name, total in totals.items()})


def render_insights_page(tracker: FinanceTracker):
    """Rule-based insights, refreshed on demand."""
    st.title("🤖 Insights")

    if st.button("🔄 Refresh insights", type="primary"):
        st.session_state.insights = tracker.refresh_insights()

    for line in st.session_state.get("insights", []):
        st.markdown(line)


def render_goals_page(tracker: FinanceTracker, validator: InputValidator):
    """Savings goal feasibility check."""
    st.title("🎯 Goals")

    name = st.text_input("Goal name", placeholder="Emergency fund")
    amount = st.text_input("Target amount")
    months = st.number_input("Months", min_value=1, value=12, step=1)

    if st.button("Evaluate goal", type="primary"):
        result = validator.validate_goal(name, amount, months)
        if not result.is_valid:
            st.markdown(
                f'<div class="goal-feedback" style="color:#f97373;">{result.message}</div>',
                unsafe_allow_html=True,
            )
            return

        evaluation = tracker.evaluate_goal(result.value)
        st.markdown(
            f'<div class="goal-feedback" style="color:{evaluation.color};">'
            f"{html.escape(evaluation.message.replace('**', ''))}</div>",
            unsafe_allow_html=True,
        )


def render_simulator_page(tracker: FinanceTracker):
    """Net-worth projection with growth sliders and an animated chart."""
    st.title("📈 Net-worth simulator")
    settings = get_settings()
    sim = settings.simulator

    months = st.slider("Months", 1, sim.max_months, sim.default_months)
    income_growth = st.slider(
        "Monthly income growth (%)",
        -sim.max_growth_percent, sim.max_growth_percent, sim.default_income_growth, 0.5,
    )
    expense_growth = st.slider(
        "Monthly expense growth (%)",
        -sim.max_growth_percent, sim.max_growth_percent, sim.default_expense_growth, 0.5,
    )

    points = tracker.simulate(SimulationParams(
        months=months,
        income_growth_percent=str(income_growth),
        expense_growth_percent=str(expense_growth),
    ))

    if not points:
        st.info("Not enough data to simulate yet.")
        return

    st.metric(
        f"Projected net worth after {months} months",
        format_currency(points[-1].value, tracker.currency),
    )

    # Play the precomputed frames; values never change, only how much is drawn
    placeholder = st.empty()
    delay = settings.display.chart_frame_delay_ms / 1000
    height = settings.display.chart_height
    for frame in tracker.chart_frames(points):
        placeholder.line_chart(
            {"x": [x for x, _ in frame.points], "y": [height - y for _, y in frame.points]},
            x="x",
            y="y",
        )
        if delay:
            time.sleep(delay)


if __name__ == "__main__":
    main()
