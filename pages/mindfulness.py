# Mindfulness tab: 4-4-6 breathing, affirmations, sleep stories.
import time

import streamlit as st

import content
import state

PHASE_COLORS = {"inhale": "#3B82F6", "hold": "#8B5CF6", "exhale": "#10B981"}


def _dispatch(event, value=None):
    st.session_state.mindfulness = state.reduce_mindfulness(st.session_state.mindfulness, event, value)


def _back_button():
    if st.button("← Back", key="mind_back"):
        _dispatch("back")
        st.rerun()


def _render_breathing(breathing):
    _back_button()
    st.markdown("### 4-4-6 Breathing Exercise")
    color = PHASE_COLORS[breathing.phase]
    st.markdown(
        f"<div class='breath-circle' style='background:{color}'>{breathing.count + 1}</div>",
        unsafe_allow_html=True,
    )
    st.markdown(f"**{breathing.instruction}**")
    st.caption(f"{breathing.phase.capitalize()} Phase · {breathing.cycles} full breaths")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("⏸ Pause" if breathing.active else "▶ Start", key="breath_toggle"):
            _dispatch("toggle")
            st.rerun()
    with col2:
        if st.button("↺ Reset", key="breath_reset"):
            _dispatch("reset")
            st.rerun()
    if breathing.active:
        # one tick per second; a button press interrupts the sleep and reruns first
        time.sleep(1)
        _dispatch("tick")
        st.rerun()


def _render_affirmations(index):
    _back_button()
    st.markdown("### Daily Affirmations")
    st.markdown(f"<p class='affirmation'>{content.AFFIRMATIONS[index]}</p>", unsafe_allow_html=True)
    if st.button("Next Affirmation", key="next_affirmation"):
        _dispatch("next_affirmation")
        st.rerun()
    st.caption(f"{index + 1} of {len(content.AFFIRMATIONS)}")


def _render_sleep():
    _back_button()
    st.markdown("### Sleep Stories")
    for story in content.SLEEP_STORIES:
        with st.container(border=True):
            st.markdown(f"**{story['title']}**")
            st.caption(story["description"])
            st.write(story["content"])


def _render_menu():
    st.markdown("### Mindfulness Zone")
    st.caption("Take a moment to center yourself and find peace.")
    menu = [
        ("breathing", "🌬️ Breathing Exercise", "Calm your mind with guided 4-4-6 breathing"),
        ("affirmations", "💖 Daily Affirmations", "Positive reminders to boost your self-worth"),
        ("sleep", "🌙 Sleep Stories", "Peaceful stories to help you drift off to sleep"),
    ]
    for key, title, blurb in menu:
        with st.container(border=True):
            if st.button(title, key=f"open_{key}"):
                _dispatch("open", key)
                st.rerun()
            st.caption(blurb)
    st.markdown("#### ✨ Quick Mindfulness Tips")
    for tip in content.MINDFULNESS_TIPS:
        st.markdown(f"- {tip}")


def render():
    if "mindfulness" not in st.session_state:
        st.session_state.mindfulness = state.Mindfulness()
    current = st.session_state.mindfulness
    if current.exercise == "breathing":
        _render_breathing(current.breathing)
    elif current.exercise == "affirmations":
        _render_affirmations(current.affirmation)
    elif current.exercise == "sleep":
        _render_sleep()
    else:
        _render_menu()
