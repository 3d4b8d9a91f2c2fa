# Screen state: immutable snapshots and pure (state, event) -> state reducers.
# Pages keep one snapshot per screen in st.session_state and only dispatch events.
from dataclasses import dataclass, field, replace

import content

SIGN_IN, SIGN_UP = "sign_in", "sign_up"
SIGNED_UP_NOTICE = "Account created successfully! You can now sign in."
EXERCISES = ("breathing", "affirmations", "sleep")


def _unknown(screen: str, event: str):
    return ValueError(f"Unknown {screen} event: {event!r}")


@dataclass(frozen=True)
class MoodForm:
    selected: int = content.DEFAULT_MOOD
    note: str = ""
    submitting: bool = False
    error: str = ""


def reduce_mood_form(state: MoodForm, event: str, value=None) -> MoodForm:
    if event == "select":
        if value not in content.MOOD_BY_VALUE:
            return state
        return replace(state, selected=value)
    if event == "edit_note":
        return replace(state, note=(value or "")[:content.NOTE_MAX_CHARS])
    if event == "submit":
        return replace(state, submitting=True, error="")
    if event == "saved":
        return MoodForm(selected=state.selected)
    if event == "failed":
        return replace(state, submitting=False, error=str(value or "Something went wrong."))
    raise _unknown("mood form", event)


@dataclass(frozen=True)
class JournalForm:
    title: str = ""
    body: str = ""
    prompt: str = ""
    generating: bool = False
    saving: bool = False
    editing_id: str | None = None
    error: str = ""

    @property
    def can_save(self) -> bool:
        return bool(self.title.strip() and self.body.strip()) and not self.saving


def reduce_journal_form(state: JournalForm, event: str, value=None) -> JournalForm:
    if event == "edit_title":
        return replace(state, title=(value or "")[:content.TITLE_MAX_CHARS])
    if event == "edit_body":
        return replace(state, body=(value or "")[:content.CONTENT_MAX_CHARS])
    if event == "request_prompt":
        return replace(state, generating=True)
    if event == "prompt_ready":
        return replace(state, generating=False, prompt=value or "")
    if event == "start_edit":
        return replace(state, editing_id=value["id"], title=value.get("title") or "",
                       body=value.get("content") or "", error="")
    if event == "cancel_edit":
        return replace(state, editing_id=None, title="", body="", error="")
    if event == "submit":
        return replace(state, saving=True, error="")
    if event == "saved":
        # a fresh prompt is generated for the next entry
        return JournalForm()
    if event == "failed":
        return replace(state, saving=False, error=str(value or "Something went wrong."))
    raise _unknown("journal form", event)


# Auto-prompt once today's mood is known and nothing is showing or in flight.
def needs_prompt(state: JournalForm, has_mood_today: bool) -> bool:
    return has_mood_today and not state.prompt and not state.generating and state.editing_id is None


@dataclass(frozen=True)
class Breathing:
    phase: str = "inhale"
    count: int = 0
    active: bool = False
    cycles: int = 0

    @property
    def instruction(self) -> str:
        return content.BREATHING_INSTRUCTIONS[self.phase]


def reduce_breathing(state: Breathing, event: str) -> Breathing:
    if event == "toggle":
        return replace(state, active=not state.active)
    if event == "reset":
        return Breathing()
    if event == "tick":
        if not state.active:
            return state
        if state.count < content.BREATHING_SECONDS[state.phase] - 1:
            return replace(state, count=state.count + 1)
        phases = content.BREATHING_PHASES
        nxt = phases[(phases.index(state.phase) + 1) % len(phases)]
        cycles = state.cycles + 1 if nxt == phases[0] else state.cycles
        return replace(state, phase=nxt, count=0, cycles=cycles)
    raise _unknown("breathing", event)


@dataclass(frozen=True)
class Mindfulness:
    exercise: str | None = None
    affirmation: int = 0
    breathing: Breathing = field(default_factory=Breathing)


def reduce_mindfulness(state: Mindfulness, event: str, value=None) -> Mindfulness:
    if event == "open":
        if value not in EXERCISES:
            raise ValueError(f"Unknown exercise: {value!r}")
        return replace(state, exercise=value)
    if event == "back":
        return replace(state, exercise=None, breathing=Breathing())
    if event == "next_affirmation":
        return replace(state, affirmation=(state.affirmation + 1) % len(content.AFFIRMATIONS))
    if event in ("toggle", "reset", "tick"):
        return replace(state, breathing=reduce_breathing(state.breathing, event))
    raise _unknown("mindfulness", event)


@dataclass(frozen=True)
class AuthForm:
    mode: str = SIGN_IN
    error: str = ""
    notice: str = ""


def reduce_auth_form(state: AuthForm, event: str, value=None) -> AuthForm:
    if event == "switch":
        return AuthForm(mode=value if value in (SIGN_IN, SIGN_UP) else SIGN_IN)
    if event == "failed":
        return replace(state, error=str(value), notice="")
    if event == "already_registered":
        return AuthForm(mode=SIGN_IN, error=str(value))
    if event == "signed_up":
        return AuthForm(mode=SIGN_IN, notice=SIGNED_UP_NOTICE)
    if event == "signed_in":
        return AuthForm()
    raise _unknown("auth form", event)
