import unittest

import content
import state


class MoodFormTests(unittest.TestCase):
    def test_select_and_save_keeps_choice_and_clears_note(self):
        s = state.reduce_mood_form(state.MoodForm(), "select", 5)
        s = state.reduce_mood_form(s, "edit_note", "walked the dog")
        s = state.reduce_mood_form(s, "submit")
        self.assertTrue(s.submitting)
        s = state.reduce_mood_form(s, "saved")
        self.assertEqual(s, state.MoodForm(selected=5))

    def test_invalid_selection_is_ignored(self):
        s = state.MoodForm(selected=2)
        self.assertIs(state.reduce_mood_form(s, "select", 9), s)

    def test_note_is_capped(self):
        s = state.reduce_mood_form(state.MoodForm(), "edit_note", "x" * 500)
        self.assertEqual(len(s.note), content.NOTE_MAX_CHARS)

    def test_failure_keeps_input(self):
        s = state.MoodForm(note="hi", submitting=True)
        s = state.reduce_mood_form(s, "failed", "Failed to save mood entry: offline")
        self.assertFalse(s.submitting)
        self.assertEqual(s.note, "hi")
        self.assertIn("offline", s.error)

    def test_unknown_event(self):
        with self.assertRaises(ValueError):
            state.reduce_mood_form(state.MoodForm(), "explode")


class JournalFormTests(unittest.TestCase):
    def test_prompt_cycle(self):
        s = state.JournalForm()
        self.assertTrue(state.needs_prompt(s, has_mood_today=True))
        self.assertFalse(state.needs_prompt(s, has_mood_today=False))
        s = state.reduce_journal_form(s, "request_prompt")
        self.assertFalse(state.needs_prompt(s, True))
        s = state.reduce_journal_form(s, "prompt_ready", "What did you learn?")
        self.assertEqual(s.prompt, "What did you learn?")
        self.assertFalse(s.generating)
        self.assertFalse(state.needs_prompt(s, True))

    def test_can_save_needs_title_and_body(self):
        s = state.reduce_journal_form(state.JournalForm(), "edit_title", "Title")
        self.assertFalse(s.can_save)
        s = state.reduce_journal_form(s, "edit_body", "Body")
        self.assertTrue(s.can_save)
        s = state.reduce_journal_form(s, "submit")
        self.assertFalse(s.can_save)

    def test_saved_resets_form_and_prompt(self):
        s = state.JournalForm(title="t", body="b", prompt="p", saving=True)
        self.assertEqual(state.reduce_journal_form(s, "saved"), state.JournalForm())

    def test_edit_and_cancel(self):
        entry = {"id": "e1", "title": "Old", "content": "Old text"}
        s = state.reduce_journal_form(state.JournalForm(prompt="p"), "start_edit", entry)
        self.assertEqual((s.editing_id, s.title, s.body), ("e1", "Old", "Old text"))
        self.assertFalse(state.needs_prompt(state.JournalForm(editing_id="e1"), True))
        s = state.reduce_journal_form(s, "cancel_edit")
        self.assertIsNone(s.editing_id)
        self.assertEqual(s.prompt, "p")

    def test_limits(self):
        s = state.reduce_journal_form(state.JournalForm(), "edit_title", "t" * 150)
        s = state.reduce_journal_form(s, "edit_body", "b" * 2500)
        self.assertEqual(len(s.title), content.TITLE_MAX_CHARS)
        self.assertEqual(len(s.body), content.CONTENT_MAX_CHARS)


class BreathingTests(unittest.TestCase):
    def _ticks(self, s, n):
        for _ in range(n):
            s = state.reduce_breathing(s, "tick")
        return s

    def test_ticks_do_nothing_while_paused(self):
        s = state.Breathing()
        self.assertIs(state.reduce_breathing(s, "tick"), s)

    def test_four_four_six_cycle(self):
        s = state.reduce_breathing(state.Breathing(), "toggle")
        s = self._ticks(s, 3)
        self.assertEqual((s.phase, s.count), ("inhale", 3))
        s = self._ticks(s, 1)
        self.assertEqual((s.phase, s.count), ("hold", 0))
        s = self._ticks(s, 4)
        self.assertEqual((s.phase, s.count), ("exhale", 0))
        self.assertEqual(s.instruction, "Breathe out gently...")
        s = self._ticks(s, 5)
        self.assertEqual(s.phase, "exhale")
        s = self._ticks(s, 1)
        self.assertEqual((s.phase, s.count, s.cycles), ("inhale", 0, 1))

    def test_reset(self):
        s = self._ticks(state.Breathing(active=True), 6)
        self.assertEqual(state.reduce_breathing(s, "reset"), state.Breathing())


class MindfulnessTests(unittest.TestCase):
    def test_menu_navigation(self):
        s = state.reduce_mindfulness(state.Mindfulness(), "open", "breathing")
        s = state.reduce_mindfulness(s, "toggle")
        s = state.reduce_mindfulness(s, "tick")
        self.assertEqual(s.breathing.count, 1)
        s = state.reduce_mindfulness(s, "back")
        self.assertIsNone(s.exercise)
        self.assertEqual(s.breathing, state.Breathing())
        with self.assertRaises(ValueError):
            state.reduce_mindfulness(s, "open", "yoga")

    def test_affirmations_wrap(self):
        s = state.Mindfulness(affirmation=len(content.AFFIRMATIONS) - 1)
        self.assertEqual(state.reduce_mindfulness(s, "next_affirmation").affirmation, 0)


class AuthFormTests(unittest.TestCase):
    def test_sign_up_success_returns_to_sign_in(self):
        s = state.reduce_auth_form(state.AuthForm(), "switch", state.SIGN_UP)
        s = state.reduce_auth_form(s, "signed_up")
        self.assertEqual(s.mode, state.SIGN_IN)
        self.assertEqual(s.notice, state.SIGNED_UP_NOTICE)

    def test_switch_clears_messages(self):
        s = state.reduce_auth_form(state.AuthForm(error="bad"), "switch", state.SIGN_UP)
        self.assertEqual(s, state.AuthForm(mode=state.SIGN_UP))

    def test_already_registered_moves_to_sign_in(self):
        s = state.reduce_auth_form(state.AuthForm(mode=state.SIGN_UP), "already_registered", "exists")
        self.assertEqual((s.mode, s.error), (state.SIGN_IN, "exists"))


if __name__ == "__main__":
    unittest.main()
