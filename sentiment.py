# Sentiment labels and keyword tags for journal entries.
import re

POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"
SENTIMENT_LABELS = (POSITIVE, NEUTRAL, NEGATIVE)
DEFAULT_SENTIMENT = NEUTRAL

STOPWORDS = frozenset([
    'i', 'me', 'my', 'myself', 'we', 'our', 'ours', 'ourselves', 'you', 'your', 'yours',
    'yourself', 'yourselves', 'he', 'him', 'his', 'himself', 'she', 'her', 'hers', 'herself',
    'it', 'its', 'itself', 'they', 'them', 'their', 'theirs', 'themselves', 'what', 'which',
    'who', 'whom', 'this', 'that', 'these', 'those', 'am', 'is', 'are', 'was', 'were', 'be',
    'been', 'being', 'have', 'has', 'had', 'having', 'do', 'does', 'did', 'doing', 'a', 'an',
    'the', 'and', 'but', 'if', 'or', 'because', 'as', 'until', 'while', 'of', 'at', 'by',
    'for', 'with', 'about', 'against', 'between', 'into', 'through', 'during', 'before',
    'after', 'above', 'below', 'to', 'from', 'up', 'down', 'in', 'out', 'on', 'off', 'over',
    'under', 'again', 'further', 'then', 'once', 'here', 'there', 'when', 'where', 'why',
    'how', 'all', 'each', 'few', 'more', 'most', 'other', 'some', 'such', 'no', 'nor', 'not',
    'only', 'own', 'same', 'so', 'than', 'too', 'very', 's', 't', 'can', 'will', 'just',
    'don', 'should', 'now', 'd', 'll', 'm', 'o', 're', 've', 'y', 'im', 'ive', 'dont', 'cant',
    'didnt', 'doesnt', 'isnt', 'wasnt', 'wont', 'wouldnt', 'couldnt', 'shouldnt',
    'day', 'days', 'today', 'tomorrow', 'tonight', 'yesterday', 'week',
    'way', 'one', 'back', 'still', 'maybe', 'really', 'feel', 'feels', 'felt', 'feeling',
    'time', 'times', 'got', 'get', 'go', 'went', 'going', 'like', 'kind', 'lot', 'bit',
    'thing', 'things', 'something', 'nothing', 'anything', 'everything', 'someone',
    'actually', 'probably', 'already', 'even', 'always', 'never', 'sometimes', 'also',
    'much', 'many', 'little', 'would', 'could', 'though', 'pretty', 'kinda', 'gonna',
])

MAX_TAGS_PER_ENTRY = 8
MIN_WORD_LENGTH = 3


# Exact-match label check: "Positive!" is not a label.
def parse_label(raw) -> str | None:
    if not isinstance(raw, str):
        return None
    candidate = raw.strip().lower()
    return candidate if candidate in SENTIMENT_LABELS else None


def _normalize(word: str) -> str:
    return word.lower().replace("'", "").strip()


def extract_tags(text: str) -> list:
    if not (text or "").strip():
        return []
    words = re.findall(r"[a-zA-Z][a-zA-Z']*", text)
    counts = {}
    order = []
    for w in words:
        n = _normalize(w)
        if len(n) < MIN_WORD_LENGTH or n in STOPWORDS:
            continue
        if n not in counts:
            order.append(n)
        counts[n] = counts.get(n, 0) + 1
    # stable sort: first appearance breaks ties
    ranked = sorted(order, key=lambda t: -counts[t])
    return ranked[:MAX_TAGS_PER_ENTRY]


def aggregate_tags(entries: list) -> list:
    counts = {}
    for e in entries:
        for t in (e.get("tags") or []):
            key = t.lower()
            counts[key] = counts.get(key, 0) + 1
    return sorted(
        [{"tag": k, "count": v} for k, v in counts.items()],
        key=lambda x: (-x["count"], x["tag"]),
    )


def count_labels(entries: list) -> dict:
    counts = {label: 0 for label in SENTIMENT_LABELS}
    for e in entries:
        label = e.get("sentiment")
        if label in counts:
            counts[label] += 1
    return counts
