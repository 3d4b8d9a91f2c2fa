# Journal tab: reflection prompt, entry editor, recent entries.
import asyncio
import streamlit as st
from datetime import date

import auth
import content
import db
import llm
import sentiment
import state

RECENT_SHOWN = 5
PROMPT_CONTEXT_ENTRIES = 3


def _dispatch(event, value=None):
    st.session_state.journal_form = state.reduce_journal_form(st.session_state.journal_form, event, value)


# Oldest first, so the newest entries are the ones the prompt context keeps.
def _recent_texts(entries):
    return [e["content"] for e in reversed(entries[:PROMPT_CONTEXT_ENTRIES])]


def _new_prompt(mood, entries):
    _dispatch("request_prompt")
    _dispatch("prompt_ready", asyncio.run(llm.generate_prompt(mood, _recent_texts(entries))))


def _on_start_edit(entry):
    _dispatch("start_edit", entry)
    st.session_state.journal_title = entry.get("title") or ""
    st.session_state.journal_body = entry.get("content") or ""


def _on_cancel_edit():
    _dispatch("cancel_edit")
    st.session_state.journal_title = ""
    st.session_state.journal_body = ""


def _on_delete(store, entry_id):
    try:
        store.delete_journal_entry(entry_id)
        if st.session_state.journal_form.editing_id == entry_id:
            _on_cancel_edit()
    except Exception as e:
        _dispatch("failed", f"Failed to delete entry: {e}")


def _on_save(store, mood):
    _dispatch("edit_title", st.session_state.get("journal_title", ""))
    _dispatch("edit_body", st.session_state.get("journal_body", ""))
    form = st.session_state.journal_form
    if not form.can_save:
        _dispatch("failed", "Give your entry a title and some content.")
        return
    _dispatch("submit")
    body = form.body.strip()
    try:
        label = asyncio.run(llm.classify_sentiment(body))
        tags = sentiment.extract_tags(body)
        if form.editing_id:
            store.update_journal_entry(form.editing_id, {
                "title": form.title.strip(),
                "content": body,
                "sentiment": label,
                "tags": tags,
            })
        else:
            store.save_journal_entry(db.today_str(), form.title, body, mood,
                                     ai_prompt=form.prompt or None, sentiment_label=label, tags=tags)
        _dispatch("saved")
        st.session_state.journal_title = ""
        st.session_state.journal_body = ""
    except Exception as e:
        _dispatch("failed", f"Failed to save entry: {e}")


def _render_crisis_banner():
    lines = " · ".join(f"**{r['name']}**: {r['contact']}" for r in content.CRISIS_RESOURCES)
    st.warning(f"If you're having thoughts of self-harm or suicide, please reach out now. {lines}")


def _render_entry(store, entry):
    with st.container(border=True):
        day = date.fromisoformat(entry["date"]).strftime("%b %d")
        badge = content.SENTIMENT_BADGES.get(entry.get("sentiment"), "")
        st.markdown(f"**{entry['title']}**  \n{day}  {badge}")
        st.write(entry["content"])
        if entry.get("ai_prompt"):
            st.caption(f"Prompt: {entry['ai_prompt']}")
        if entry.get("tags"):
            st.caption(" ".join(f"#{t}" for t in entry["tags"]))
        col1, col2, _ = st.columns([1, 1, 4])
        with col1:
            st.button("Edit", key=f"edit_{entry['id']}", on_click=_on_start_edit, args=(entry,))
        with col2:
            st.button("Delete", key=f"del_{entry['id']}", on_click=_on_delete, args=(store, entry["id"]))


def render():
    if "journal_form" not in st.session_state:
        st.session_state.journal_form = state.JournalForm()
    store = auth.current_store()
    name = db.display_name(st.session_state.get("profile"), "friend")
    today = db.today_str()

    st.markdown(f"### Your Safe Space, {name}")
    st.caption("Express your thoughts freely. This is your private journal.")

    if db.preferences_of(st.session_state.get("profile"))["crisisMode"]:
        _render_crisis_banner()

    try:
        entries = store.get_journal_entries()
        moods = store.get_mood_entries()
    except Exception as e:
        st.error(f"Failed to load your journal: {e}")
        return

    today_mood = next((m for m in moods if m.get("date") == today), None)
    mood = today_mood["mood"] if today_mood else content.DEFAULT_MOOD

    if state.needs_prompt(st.session_state.journal_form, today_mood is not None):
        with st.spinner("Finding a prompt for you…"):
            _new_prompt(mood, entries)

    form = st.session_state.journal_form
    if form.prompt:
        st.markdown(f"**✨ Today's Reflection Prompt for {name}**")
        st.info(form.prompt)

    if form.editing_id:
        st.caption("Editing an earlier entry. Saving re-checks its sentiment.")
    st.text_input("Title", placeholder="Give your entry a title...", max_chars=content.TITLE_MAX_CHARS,
                  key="journal_title", label_visibility="collapsed")
    st.text_area(
        "Journal content",
        placeholder="Start writing your thoughts here... Remember, this is a judgment-free space just for you.",
        max_chars=content.CONTENT_MAX_CHARS,
        height=200,
        key="journal_body",
        label_visibility="collapsed",
    )

    col1, col2, col3 = st.columns([2, 2, 2])
    with col1:
        st.button("Update Entry" if form.editing_id else "Save Entry", type="primary",
                  disabled=form.saving, on_click=_on_save, args=(store, mood))
    with col2:
        if st.button("✨ New Prompt", disabled=form.generating):
            with st.spinner("Finding a prompt for you…"):
                _new_prompt(mood, entries)
            st.rerun()
    with col3:
        if form.editing_id:
            st.button("Cancel edit", on_click=_on_cancel_edit)

    if st.session_state.journal_form.error:
        st.error(st.session_state.journal_form.error)

    st.markdown("---")
    recent = entries[:RECENT_SHOWN]
    if not recent:
        st.markdown("#### No journal entries yet")
        st.caption("Start writing your first entry above to begin your journaling journey.")
        return
    st.markdown(f"#### 📅 Recent Entries ({len(recent)})")
    for entry in recent:
        _render_entry(store, entry)
