# Mood tab: daily check-in and recent check-ins.
import streamlit as st
from datetime import date

import auth
import content
import db
import state


def _dispatch(event, value=None):
    st.session_state.mood_form = state.reduce_mood_form(st.session_state.mood_form, event, value)


def _render_today(entry, name):
    option = content.MOOD_BY_VALUE.get(entry["mood"], content.MOOD_BY_VALUE[content.DEFAULT_MOOD])
    st.markdown(f"<div class='mood-today'>{entry.get('mood_emoji') or option['emoji']}</div>", unsafe_allow_html=True)
    st.markdown(f"#### You're feeling {option['label'].lower()}, {name}")
    st.caption("Thanks for checking in today!")
    if entry.get("note"):
        st.markdown(f"> {entry['note']}")


def _render_form(store, today):
    form = st.session_state.mood_form
    cols = st.columns(len(content.MOOD_OPTIONS))
    for i, option in enumerate(content.MOOD_OPTIONS):
        with cols[i]:
            selected = form.selected == option["value"]
            if st.button(f"{option['emoji']}\n\n{option['label']}", key=f"mood_{option['value']}",
                         type="primary" if selected else "secondary"):
                _dispatch("select", option["value"])
                st.rerun()

    note = st.text_area(
        "Want to add a note? (optional)",
        value=form.note,
        placeholder="What's on your mind today?",
        max_chars=content.NOTE_MAX_CHARS,
        height=90,
        key="mood_note",
    )
    if st.button("Save Mood Check-in", type="primary", disabled=form.submitting):
        _dispatch("edit_note", note)
        _dispatch("submit")
        try:
            store.save_mood_entry(today, st.session_state.mood_form.selected, note=st.session_state.mood_form.note)
            _dispatch("saved")
        except Exception as e:
            _dispatch("failed", f"Failed to save mood entry: {e}")
        st.rerun()


def _render_recent(entries):
    recent = entries[:7]
    if not recent:
        st.markdown("#### No mood entries yet")
        st.caption("Track your first mood above to start your mental health journey.")
        return
    st.markdown(f"#### 📅 Recent Check-ins ({len(recent)})")
    for e in recent:
        option = content.MOOD_BY_VALUE.get(e["mood"], {})
        day = date.fromisoformat(e["date"]).strftime("%A, %b %d")
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"{e.get('mood_emoji', '')} **{day}**")
            if e.get("note"):
                st.caption(f"\"{e['note']}\"")
        with col2:
            st.caption(option.get("label", ""))


def render():
    if "mood_form" not in st.session_state:
        st.session_state.mood_form = state.MoodForm()
    store = auth.current_store()
    name = db.display_name(st.session_state.get("profile"), "there")
    today = db.today_str()

    head_col, refresh_col = st.columns([5, 1])
    with head_col:
        st.markdown(f"### How are you feeling today, {name}?")
        st.caption("Your feelings matter. Take a moment to check in with yourself.")
    with refresh_col:
        if st.button("↻", key="mood_refresh", help="Refresh mood entries"):
            st.rerun()

    try:
        entries = store.get_mood_entries()
    except Exception as e:
        st.error(f"Failed to load mood entries: {e}")
        entries = []

    form = st.session_state.mood_form
    if form.error:
        st.error(form.error)

    today_entry = next((e for e in entries if e.get("date") == today), None)
    if today_entry:
        _render_today(today_entry, name)
    else:
        _render_form(store, today)

    st.markdown("---")
    _render_recent(entries)
