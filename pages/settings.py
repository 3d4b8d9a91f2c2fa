# Settings tab: nickname, preferences, AI status, export.
import json
import streamlit as st
from datetime import datetime

import auth
import db
import llm

EXPORT_MOOD_FIELDS = ("date", "mood", "mood_emoji", "note")
EXPORT_JOURNAL_FIELDS = ("date", "title", "content", "mood", "ai_prompt", "sentiment", "tags")
NOTICE_KEY = "settings_notice"
PROFILE_SAVED = "Profile saved."


# Messages set before st.rerun() are shown once on the next run.
def take_notice(session) -> str:
    return session.pop(NOTICE_KEY, "")


def _export_entries(moods, journals):
    out = {
        "exportedAt": datetime.now().isoformat(timespec="seconds"),
        "moodEntries": [{k: e.get(k) for k in EXPORT_MOOD_FIELDS} for e in moods],
        "journalEntries": [{k: e.get(k) for k in EXPORT_JOURNAL_FIELDS} for e in journals],
    }
    return json.dumps(out, indent=2, ensure_ascii=False)


def render():
    st.markdown("### Settings")
    st.caption("Profile and data options.")
    notice = take_notice(st.session_state)
    if notice:
        st.success(notice)
    store = auth.current_store()
    profile = st.session_state.get("profile")
    prefs = db.preferences_of(profile)

    st.markdown("### Profile")
    with st.form("profile_form"):
        nickname = st.text_input("What should we call you?", value=(profile or {}).get("nickname") or "")
        reminders = st.toggle("Daily check-in reminders", value=prefs["reminders"])
        crisis_mode = st.toggle("Crisis mode (show crisis lines on the journal)", value=prefs["crisisMode"])
        dark_mode = st.toggle("Dark mode", value=prefs["darkMode"])
        if st.form_submit_button("Save profile"):
            try:
                updated = store.update_profile({
                    "nickname": nickname.strip() or None,
                    "preferences": {"darkMode": dark_mode, "reminders": reminders, "crisisMode": crisis_mode},
                })
                st.session_state.profile = updated or store.get_profile()
            except Exception as e:
                st.error(str(e))
            else:
                st.session_state[NOTICE_KEY] = PROFILE_SAVED
                st.rerun()

    st.markdown("### AI")
    if llm.is_online():
        st.caption(
            "Journal prompts and sentiment tags are generated by Google Gemini. "
            "The text of an entry is sent to Gemini when you save it."
        )
    else:
        st.caption("No Gemini API key is configured. Prompts come from a built-in list and entries are tagged neutral.")

    st.markdown("### Export your data")
    st.caption("Download your mood check-ins and journal entries as JSON.")
    try:
        moods = store.get_mood_entries()
        journals = store.get_journal_entries()
    except Exception as e:
        st.error(str(e))
        return
    st.download_button(
        "Export as JSON",
        data=_export_entries(moods, journals),
        file_name=f"clearmind-export-{datetime.now().strftime('%Y-%m-%d')}.json",
        mime="application/json",
        key="download_export",
        disabled=not (moods or journals),
    )
