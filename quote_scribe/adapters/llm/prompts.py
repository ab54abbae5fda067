# quote_scribe/adapters/llm/prompts.py
"""Fixed prompt text sent to the generation service."""

SYSTEM_PROMPT = """You are a profound philosopher with deep understanding of the human condition. Generate a powerful, impactful quote that cuts to the core of existence, truth, or human nature. The quote should be:
1. Profound and thought-provoking
2. Concise yet devastatingly impactful (1-3 sentences)
3. Original and authentic
4. Match the tone and emotional intensity of the request - whether moving, bold, harsh, melancholic, fierce, or contemplative"""

DEFAULT_USER_PROMPT = "Generate an insightful quote about life, growth, or human nature."

# Minimal request used to check that a credential is accepted
VALIDATION_PROMPT = "Test"

# Checked once each, in this order, case-insensitively
BOILERPLATE_PREFIXES = (
    "Here is",
    "Here's",
    "Quote:",
    "Inspirational quote:",
    "Wise words:",
)

QUOTE_PAIRS = (
    ('"', '"'),
    ("'", "'"),
    ("“", "”"),
)
