import asyncio
import json
import random
import time
import unittest

import httpx

import llm

TEST_URL = "https://gemini.test/v1beta/models/gemini-pro:generateContent"


def gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class Recorder:
    def __init__(self, respond):
        self.respond = respond
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.respond(request)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


def online(handler, **kwargs):
    return llm.TextGenerator(
        llm.Online("test-key"),
        url=TEST_URL,
        transport=httpx.MockTransport(handler),
        rng=random.Random(7),
        **kwargs,
    )


class OfflineModeTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.handler = Recorder(lambda request: httpx.Response(200, json=gemini_reply("unused")))
        self.gen = llm.TextGenerator(llm.Offline(), url=TEST_URL, transport=httpx.MockTransport(self.handler))

    async def test_prompt_is_always_a_fallback_for_every_mood(self):
        for mood in range(1, 6):
            for _ in range(5):
                prompt = await self.gen.generate_prompt(mood, ["earlier entry"])
                self.assertIn(prompt, llm.FALLBACK_PROMPTS)
        self.assertEqual(self.handler.requests, [])

    async def test_sentiment_is_neutral_without_network(self):
        for text in ["I had the best day ever!", "Everything is awful.", ""]:
            self.assertEqual(await self.gen.classify_sentiment(text), "neutral")
        self.assertEqual(self.handler.requests, [])

    async def test_result_is_marked_degraded(self):
        result = await self.gen.prompt_result(3)
        self.assertTrue(result.degraded)
        self.assertEqual(result.reason, "offline")


class PromptGenerationTests(unittest.IsolatedAsyncioTestCase):
    async def test_success_is_trimmed(self):
        gen = online(lambda request: httpx.Response(200, json=gemini_reply("  What made you smile today?  ")))
        self.assertEqual(await gen.generate_prompt(4, []), "What made you smile today?")

    async def test_only_last_two_entries_are_sent_as_context(self):
        handler = Recorder(lambda request: httpx.Response(200, json=gemini_reply("Prompt")))
        gen = online(handler)
        await gen.generate_prompt(3, ["a", "b", "c", "d", "e"])
        instruction = handler.last_body["contents"][0]["parts"][0]["text"]
        self.assertIn("Previous context: d. e\n", instruction)
        self.assertNotIn("c. d", instruction)

    async def test_first_entry_marker_when_no_context(self):
        handler = Recorder(lambda request: httpx.Response(200, json=gemini_reply("Prompt")))
        await online(handler).generate_prompt(2)
        instruction = handler.last_body["contents"][0]["parts"][0]["text"]
        self.assertIn("Previous context: This is their first entry.", instruction)
        self.assertIn("someone feeling low/challenging today", instruction)

    async def test_request_shape(self):
        handler = Recorder(lambda request: httpx.Response(200, json=gemini_reply("Prompt")))
        await online(handler).generate_prompt(5)
        request = handler.requests[-1]
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.url.params["key"], "test-key")
        self.assertEqual(handler.last_body["generationConfig"], {"temperature": 0.7, "maxOutputTokens": 100})

    async def test_empty_text_falls_back(self):
        gen = online(lambda request: httpx.Response(200, json=gemini_reply("")))
        result = await gen.prompt_result(3)
        self.assertIn(result.text, llm.FALLBACK_PROMPTS)
        self.assertEqual(result.reason, "empty")

    async def test_whitespace_text_falls_back(self):
        gen = online(lambda request: httpx.Response(200, json=gemini_reply(" \n ")))
        self.assertIn(await gen.generate_prompt(3), llm.FALLBACK_PROMPTS)

    async def test_error_status_falls_back(self):
        gen = online(lambda request: httpx.Response(503, json={"error": "unavailable"}))
        result = await gen.prompt_result(3)
        self.assertIn(result.text, llm.FALLBACK_PROMPTS)
        self.assertEqual(result.reason, "status")

    async def test_connection_error_falls_back(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = await online(refuse).prompt_result(3)
        self.assertIn(result.text, llm.FALLBACK_PROMPTS)
        self.assertEqual(result.reason, "transport")

    async def test_malformed_body_falls_back(self):
        for payload in [{"candidates": []}, {"unexpected": True}, {"candidates": [{"content": {"parts": [{"text": 4}]}}]}]:
            gen = online(lambda request, p=payload: httpx.Response(200, json=p))
            result = await gen.prompt_result(3)
            self.assertIn(result.text, llm.FALLBACK_PROMPTS)
            self.assertEqual(result.reason, "malformed")

    async def test_non_json_body_falls_back(self):
        gen = online(lambda request: httpx.Response(200, text="<html>oops</html>"))
        self.assertIn(await gen.generate_prompt(3), llm.FALLBACK_PROMPTS)

    async def test_slow_endpoint_times_out_to_fallback(self):
        async def slow(request):
            await asyncio.sleep(5)
            return httpx.Response(200, json=gemini_reply("too late"))

        gen = online(slow, prompt_timeout=0.05)
        started = time.monotonic()
        result = await gen.prompt_result(3)
        self.assertLess(time.monotonic() - started, 2)
        self.assertIn(result.text, llm.FALLBACK_PROMPTS)
        self.assertEqual(result.reason, "timeout")


class SentimentTests(unittest.IsolatedAsyncioTestCase):
    async def test_valid_label_is_normalised(self):
        gen = online(lambda request: httpx.Response(200, json=gemini_reply(" Negative\n")))
        self.assertEqual(await gen.classify_sentiment("rough day"), "negative")

    async def test_label_with_punctuation_is_rejected(self):
        gen = online(lambda request: httpx.Response(200, json=gemini_reply("Positive!")))
        result = await gen.sentiment_result("great day")
        self.assertEqual(result.text, "neutral")
        self.assertEqual(result.reason, "invalid_label")

    async def test_request_embeds_text_with_low_temperature(self):
        handler = Recorder(lambda request: httpx.Response(200, json=gemini_reply("positive")))
        self.assertEqual(await online(handler).classify_sentiment("I aced my exam"), "positive")
        self.assertIn('Text: "I aced my exam"', handler.last_body["contents"][0]["parts"][0]["text"])
        self.assertEqual(handler.last_body["generationConfig"], {"temperature": 0.1, "maxOutputTokens": 10})

    async def test_error_status_is_neutral(self):
        gen = online(lambda request: httpx.Response(429))
        self.assertEqual(await gen.classify_sentiment("hello"), "neutral")

    async def test_slow_endpoint_times_out_to_neutral(self):
        async def slow(request):
            await asyncio.sleep(5)
            return httpx.Response(200, json=gemini_reply("positive"))

        result = await online(slow, sentiment_timeout=0.05).sentiment_result("hello")
        self.assertEqual(result.text, "neutral")
        self.assertEqual(result.reason, "timeout")


class ConfigurationTests(unittest.TestCase):
    def test_default_timeouts(self):
        gen = llm.TextGenerator(llm.Offline(), url=TEST_URL)
        self.assertEqual(gen.prompt_timeout, 10.0)
        self.assertEqual(gen.sentiment_timeout, 8.0)

    def test_resolve_mode(self):
        self.assertEqual(llm.resolve_mode(""), llm.Offline())
        self.assertEqual(llm.resolve_mode("   "), llm.Offline())
        self.assertEqual(llm.resolve_mode(" abc "), llm.Online("abc"))

    def test_api_key_is_not_in_repr(self):
        self.assertNotIn("secret", repr(llm.Online("secret")))

    def test_mood_levels_clamp(self):
        self.assertEqual(llm.clamp_mood(0), 1)
        self.assertEqual(llm.clamp_mood(9), 5)
        self.assertEqual(llm.clamp_mood("4"), 4)
        self.assertEqual(llm.clamp_mood(None), 3)
        self.assertEqual(llm.mood_phrase(-2), "very low/difficult")
        self.assertEqual(llm.mood_phrase(5), "excellent/amazing")


if __name__ == "__main__":
    unittest.main()
