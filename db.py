# Supabase row store: profiles, mood entries, journal entries (per user).
import logging
from datetime import date, datetime, timezone

from supabase import Client, create_client

import content
import sentiment
from config import settings

logger = logging.getLogger("ClearMind.DB")

PROFILES = "profiles"
MOOD_ENTRIES = "mood_entries"
JOURNAL_ENTRIES = "journal_entries"
MOOD_NATURAL_KEY = "user_id,date"
DEFAULT_PREFERENCES = {"darkMode": False, "reminders": True, "crisisMode": False}
JOURNAL_UPDATABLE = ("date", "title", "content", "mood", "ai_prompt", "sentiment", "tags")
PROFILE_UPDATABLE = ("nickname", "preferences")


def create_client_from_settings() -> Client:
    url, key = settings.require_supabase()
    return create_client(url, key)


def today_str() -> str:
    return date.today().isoformat()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _first(rows):
    return rows[0] if rows else None


class UserStore:
    """Row access scoped to one signed-in user.

    Every query filters on the user id, so row-level security on the
    Supabase side and the filter here agree on what the user can touch.
    """

    def __init__(self, client, user_id: str | None):
        self.client = client
        self.user_id = user_id

    def _require_user(self) -> str:
        if not self.user_id:
            raise ValueError("You must be signed in to do that.")
        return self.user_id

    def _run(self, query, action: str) -> list:
        try:
            result = query.execute()
        except Exception as e:
            logger.error(f"Error trying to {action}: {e}")
            raise
        return result.data or []

    # --- Mood entries ---

    def get_mood_entries(self) -> list:
        uid = self._require_user()
        query = self.client.table(MOOD_ENTRIES).select("*").eq("user_id", uid).order("date", desc=True)
        return self._run(query, "fetch mood entries")

    def get_mood_for_date(self, day: str) -> dict | None:
        return next((e for e in self.get_mood_entries() if e.get("date") == day), None)

    # One check-in per user per day: a second save the same day replaces the first.
    def save_mood_entry(self, day: str, mood: int, note: str | None = None, mood_emoji: str | None = None,
                        ai_prompt: str | None = None, ai_response: str | None = None) -> dict:
        uid = self._require_user()
        if mood not in content.MOOD_BY_VALUE:
            raise ValueError(f"Mood must be between 1 and 5, got {mood!r}.")
        row = {
            "user_id": uid,
            "date": day,
            "mood": mood,
            "mood_emoji": mood_emoji or content.MOOD_BY_VALUE[mood]["emoji"],
            "note": (note or "").strip()[:content.NOTE_MAX_CHARS] or None,
            "ai_prompt": ai_prompt,
            "ai_response": ai_response,
        }
        query = self.client.table(MOOD_ENTRIES).upsert(row, on_conflict=MOOD_NATURAL_KEY)
        saved = _first(self._run(query, "save mood entry"))
        logger.info(f"Saved mood check-in for {day}")
        return saved or row

    # --- Journal entries ---

    def get_journal_entries(self) -> list:
        uid = self._require_user()
        query = self.client.table(JOURNAL_ENTRIES).select("*").eq("user_id", uid).order("date", desc=True)
        return self._run(query, "fetch journal entries")

    def save_journal_entry(self, day: str, title: str, body: str, mood: int, ai_prompt: str | None = None,
                           sentiment_label: str | None = None, tags: list | None = None) -> dict:
        uid = self._require_user()
        title, body = (title or "").strip(), (body or "").strip()
        if not title or not body:
            raise ValueError("Give your entry a title and some content.")
        if sentiment_label is not None and sentiment_label not in sentiment.SENTIMENT_LABELS:
            raise ValueError(f"Unknown sentiment {sentiment_label!r}.")
        row = {
            "user_id": uid,
            "date": day,
            "title": title[:content.TITLE_MAX_CHARS],
            "content": body[:content.CONTENT_MAX_CHARS],
            "mood": mood,
            "ai_prompt": ai_prompt or None,
            "sentiment": sentiment_label,
            "tags": list(tags or []),
        }
        saved = _first(self._run(self.client.table(JOURNAL_ENTRIES).insert(row), "save journal entry"))
        logger.info(f"Saved journal entry for {day}")
        return saved or row

    def update_journal_entry(self, entry_id: str, updates: dict) -> dict | None:
        uid = self._require_user()
        changes = {k: v for k, v in updates.items() if k in JOURNAL_UPDATABLE}
        if not changes:
            raise ValueError("Nothing to update.")
        changes["updated_at"] = _now_iso()
        query = self.client.table(JOURNAL_ENTRIES).update(changes).eq("id", entry_id).eq("user_id", uid)
        return _first(self._run(query, f"update journal entry {entry_id}"))

    def delete_journal_entry(self, entry_id: str) -> None:
        uid = self._require_user()
        query = self.client.table(JOURNAL_ENTRIES).delete().eq("id", entry_id).eq("user_id", uid)
        self._run(query, f"delete journal entry {entry_id}")
        logger.info(f"Deleted journal entry {entry_id}")

    # --- Profile ---

    def get_profile(self) -> dict | None:
        uid = self._require_user()
        query = self.client.table(PROFILES).select("*").eq("id", uid).limit(1)
        return _first(self._run(query, "fetch profile"))

    def ensure_profile(self, nickname: str | None = None) -> dict:
        existing = self.get_profile()
        if existing:
            return existing
        row = {"id": self._require_user(), "nickname": nickname or None, "preferences": dict(DEFAULT_PREFERENCES)}
        created = _first(self._run(self.client.table(PROFILES).insert(row), "create profile"))
        logger.info("Created missing profile")
        return created or row

    def update_profile(self, updates: dict) -> dict | None:
        uid = self._require_user()
        changes = {k: v for k, v in updates.items() if k in PROFILE_UPDATABLE}
        if not changes:
            raise ValueError("Nothing to update.")
        if "preferences" in changes:
            changes["preferences"] = {**DEFAULT_PREFERENCES, **(changes["preferences"] or {})}
        changes["updated_at"] = _now_iso()
        query = self.client.table(PROFILES).update(changes).eq("id", uid)
        return _first(self._run(query, "update profile"))


def preferences_of(profile: dict | None) -> dict:
    return {**DEFAULT_PREFERENCES, **((profile or {}).get("preferences") or {})}


def display_name(profile: dict | None, default: str) -> str:
    return ((profile or {}).get("nickname") or "").strip() or default
