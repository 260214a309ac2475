from app.db.models.conversation import Conversation, ConversationStatus  # noqa: F401
from app.db.models.message import Message, SenderType  # noqa: F401
