# Insights: mood trend, distributions, summary stats (pure functions over rows).
from datetime import date, timedelta

import content
import sentiment

TREND_ENTRIES = 14
WEEK_DAYS = 7


def _parse_day(value) -> date:
    return value if isinstance(value, date) else date.fromisoformat(str(value)[:10])


def mood_trend(mood_entries: list, limit: int = TREND_ENTRIES) -> list:
    ordered = sorted(mood_entries, key=lambda e: _parse_day(e["date"]))[-limit:]
    return [{"date": _parse_day(e["date"]), "mood": e["mood"]} for e in ordered]


# Highest mood first; levels with no entries are dropped.
def mood_distribution(mood_entries: list) -> list:
    out = []
    for option in reversed(content.MOOD_OPTIONS):
        n = sum(1 for e in mood_entries if e.get("mood") == option["value"])
        if n:
            out.append({"name": option["label"], "value": n, "color": option["color"]})
    return out


def average_mood(mood_entries: list) -> float:
    if not mood_entries:
        return 0.0
    return round(sum(e["mood"] for e in mood_entries) / len(mood_entries), 1)


def total_checkins(mood_entries: list, journal_entries: list) -> int:
    return len(mood_entries) + len(journal_entries)


def checkins_this_week(mood_entries: list, today: date | None = None) -> int:
    # today plus the six days before it
    since = (today or date.today()) - timedelta(days=WEEK_DAYS - 1)
    return sum(1 for e in mood_entries if _parse_day(e["date"]) >= since)


def sentiment_breakdown(journal_entries: list) -> list:
    counts = sentiment.count_labels(journal_entries)
    return [
        {"name": label.capitalize(), "value": counts[label], "color": content.SENTIMENT_COLORS[label]}
        for label in sentiment.SENTIMENT_LABELS
        if counts[label]
    ]


# Ties go to the lower mood level.
def most_common_mood(mood_entries: list) -> str | None:
    best = None
    for item in mood_distribution(mood_entries):
        if best is None or item["value"] >= best["value"]:
            best = item
    return best["name"].lower() if best else None


def insight_lines(mood_entries: list, journal_entries: list) -> list:
    lines = [f"You've completed {total_checkins(mood_entries, journal_entries)} total check-ins on your mental health journey."]
    if mood_entries:
        lines.append(f"Your most common mood level is {most_common_mood(mood_entries) or 'not yet determined'}.")
    if journal_entries:
        lines.append(f"You've written {len(journal_entries)} journal entries, showing commitment to self-reflection.")
    lines.append("Remember: healing isn't linear. Every step counts! 🌱")
    return lines
