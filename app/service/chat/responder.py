import random

GREETING = "greeting"
QUESTION = "question"
HELP = "help"
DEFAULT = "default"

RESPONSES = {
    GREETING: [
        "Hello! 👋 I'm your external chat assistant. Your message is stored in our external database!",
        "Hi there! 🌟 I can see your message in our external system. How can I help?",
        "Welcome! 🎉 This message came from our external API and is stored securely.",
    ],
    QUESTION: [
        "That's a great question! I'm processing this through our external system.",
        "Interesting question! Let me check our external database for the best answer.",
        "I understand your query. Our external system is analyzing this for you.",
    ],
    HELP: [
        "I can help you with: External data storage, Real-time messaging, Salesforce integration!",
        "I'm here to demonstrate two-way data transfer between Salesforce and external systems.",
        "This chat shows how messages flow between Salesforce and external databases in real-time!",
    ],
    DEFAULT: [
        "Thanks for your message! This is stored externally and synced with Salesforce.",
        "I received your message in our external system. Everything is working perfectly!",
        "Your message is now in our external database and visible in Salesforce. 🚀",
    ],
}

GREETING_TOKENS = ("hello", "hi", "hey")


def classify(text: str) -> str:
    # plain substring checks: "this" counts as a greeting
    message = text.lower().strip()
    if any(token in message for token in GREETING_TOKENS):
        return GREETING
    if "?" in message:
        return QUESTION
    if "help" in message:
        return HELP
    return DEFAULT


class ResponseGenerator:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self, text: str) -> str:
        return self._rng.choice(RESPONSES[classify(text)])


_default_generator = ResponseGenerator()


def generate_response(text: str) -> str:
    return _default_generator.generate(text)
