# Insights tab: stats, mood trend, distributions, recurring tags.
import streamlit as st
import pandas as pd

import analytics
import auth
import sentiment


def _render_empty():
    st.markdown("### Your Journey Starts Here")
    st.markdown(
        "Start tracking your mood and journaling to see meaningful insights about your mental health journey."
    )
    st.caption(
        "Your insights will appear here as you track your mood and write journal entries. "
        "Even a few days of data can reveal helpful patterns!"
    )
    if st.button("Refresh Data", key="insights_refresh_empty"):
        st.rerun()


def _bar(data, name_label):
    df = pd.DataFrame(data).set_index("name")
    st.bar_chart(df, y="value", x_label=name_label, y_label="Count", color="#6366F1")


def render():
    store = auth.current_store()
    try:
        moods = store.get_mood_entries()
        journals = store.get_journal_entries()
    except Exception as e:
        st.error(f"Failed to load insights: {e}")
        return

    if not moods and not journals:
        _render_empty()
        return

    head_col, refresh_col = st.columns([5, 1])
    with head_col:
        st.markdown("### Your Mental Health Insights")
        st.caption("Understanding your patterns helps you grow.")
    with refresh_col:
        if st.button("↻", key="insights_refresh", help="Refresh insights"):
            st.rerun()

    col1, col2, col3 = st.columns(3)
    col1.metric("Average Mood", f"{analytics.average_mood(moods):.1f}")
    col2.metric("Total Check-ins", analytics.total_checkins(moods, journals))
    col3.metric("This Week", analytics.checkins_this_week(moods))

    trend = analytics.mood_trend(moods)
    if len(trend) > 1:
        st.markdown("#### 📈 Mood Trend (Last 2 Weeks)")
        df = pd.DataFrame(trend).set_index("date")
        st.line_chart(df, y="mood", y_label="Mood (1-5)", color="#6366F1")

    distribution = analytics.mood_distribution(moods)
    if distribution:
        st.markdown("#### 💜 Mood Distribution")
        _bar(distribution, "Mood")

    breakdown = analytics.sentiment_breakdown(journals)
    if breakdown:
        st.markdown("#### 📖 Journal Sentiment Analysis")
        _bar(breakdown, "Sentiment")

    tags = sentiment.aggregate_tags(journals)[:5]
    if tags:
        st.markdown("#### Recurring themes")
        st.caption("Topics that appear often in your journal. Top 5 below.")
        st.bar_chart(pd.DataFrame(tags).set_index("tag"), y="count", x_label="Theme", y_label="Count")

    st.markdown("#### 💡 Personal Insights")
    for line in analytics.insight_lines(moods, journals):
        st.markdown(f"- {line}")
