# Static copy: mood scale, mindfulness material, help directory.

MOOD_OPTIONS = [
    {"value": 1, "emoji": "😢", "label": "Very Low", "color": "#F87171"},
    {"value": 2, "emoji": "😔", "label": "Low", "color": "#FB923C"},
    {"value": 3, "emoji": "😐", "label": "Okay", "color": "#FBBF24"},
    {"value": 4, "emoji": "😊", "label": "Good", "color": "#34D399"},
    {"value": 5, "emoji": "😄", "label": "Amazing", "color": "#10B981"},
]
MOOD_BY_VALUE = {m["value"]: m for m in MOOD_OPTIONS}
DEFAULT_MOOD = 3

NOTE_MAX_CHARS = 200
TITLE_MAX_CHARS = 100
CONTENT_MAX_CHARS = 2000

SENTIMENT_COLORS = {"positive": "#10B981", "neutral": "#6B7280", "negative": "#EF4444"}
SENTIMENT_BADGES = {"positive": "🟢 positive", "neutral": "⚪ neutral", "negative": "🔴 negative"}

BREATHING_PHASES = ("inhale", "hold", "exhale")
BREATHING_SECONDS = {"inhale": 4, "hold": 4, "exhale": 6}
BREATHING_INSTRUCTIONS = {
    "inhale": "Breathe in slowly...",
    "hold": "Hold your breath...",
    "exhale": "Breathe out gently...",
}

AFFIRMATIONS = [
    "I am worthy of love and respect",
    "My feelings are valid and important",
    "I have the strength to overcome challenges",
    "I am growing and learning every day",
    "I deserve happiness and peace",
    "I am enough exactly as I am",
    "I choose to be kind to myself",
    "My mental health matters",
    "I am resilient and capable",
    "I trust in my ability to heal",
]

SLEEP_STORIES = [
    {
        "title": "Peaceful Forest Walk",
        "description": "Imagine walking through a calm, sunlit forest where every step brings deeper relaxation.",
        "content": "Close your eyes and picture yourself at the edge of a beautiful forest. The sun filters through the leaves, creating dancing patterns of light and shadow on the forest floor...",
    },
    {
        "title": "Ocean Waves",
        "description": "Let the gentle rhythm of ocean waves wash away your worries and guide you to sleep.",
        "content": "You're lying on warm, soft sand as gentle waves lap at the shore. Each wave that rolls in carries away tension from your body...",
    },
    {
        "title": "Mountain Meadow",
        "description": "Find peace in a serene mountain meadow filled with wildflowers and gentle breezes.",
        "content": "You find yourself in a beautiful meadow high in the mountains. Colorful wildflowers sway gently in the warm breeze...",
    },
]

MINDFULNESS_TIPS = [
    "Take three deep breaths whenever you feel overwhelmed",
    "Practice the 5-4-3-2-1 grounding technique: 5 things you see, 4 you touch, 3 you hear, 2 you smell, 1 you taste",
    "Set aside 5 minutes each day for mindful breathing",
    "Be patient with yourself - mindfulness is a practice, not perfection",
]

CRISIS_RESOURCES = [
    {"name": "National Suicide Prevention Lifeline", "contact": "988", "description": "24/7 free and confidential support", "icon": "📞"},
    {"name": "Crisis Text Line", "contact": "Text HOME to 741741", "description": "Free, 24/7 crisis support via text", "icon": "💬"},
    {"name": "Teen Line", "contact": "800-852-8336", "description": "Teens helping teens, 6PM-10PM PST", "icon": "👥"},
]

SUPPORT_RESOURCES = [
    {"name": "National Alliance on Mental Illness (NAMI)", "url": "https://nami.org", "description": "Mental health education, advocacy, and support"},
    {"name": "Mental Health America", "url": "https://mhanational.org", "description": "Mental health screening tools and resources"},
    {"name": "Crisis Text Line", "url": "https://crisistextline.org", "description": "Free crisis counseling via text message"},
    {"name": "JED Campus", "url": "https://jedcampus.org", "description": "Mental health resources for students"},
]

SELF_CARE_ACTIVITIES = [
    "Take a warm bath or shower",
    "Go for a walk in nature",
    "Listen to your favorite music",
    "Call a trusted friend or family member",
    "Practice deep breathing exercises",
    "Write in a journal",
    "Watch funny videos or movies",
    "Do some gentle stretching or yoga",
    "Make your favorite healthy snack",
    "Create art, draw, or doodle",
    "Read a book or listen to a podcast",
    "Organize your space",
]

REMINDERS = [
    "Your mental health is just as important as your physical health",
    "It's okay to not be okay - seeking help is a sign of strength",
    "Healing takes time, and that's completely normal",
    "You deserve support, care, and happiness",
    "Small steps forward are still progress",
]

PRIVACY_NOTICE = (
    "🔒 Privacy Notice: Your entries are stored in your own account and are only visible to you. "
    "This app is a supportive tool and not a substitute for professional mental health care."
)
