import threading
from datetime import datetime

from app.db.models import Conversation, ConversationStatus, Message
from app.service.scheduler import epoch_millis

CONVERSATION_ID_PREFIX = "sf_conv"


class ChatStore:
    """
    In-memory conversation and message maps.

    Both maps are guarded by one lock so that every insert and append is
    atomic with respect to the other. Messages are append-only; nothing is
    ever removed.
    """

    def __init__(self) -> None:
        self._conversations: dict[str, Conversation] = {}
        self._messages: dict[str, list[Message]] = {}
        self._lock = threading.RLock()

    def create_conversation(
        self,
        owner_id: str,
        created_at: datetime,
        display_name: str | None = None,
        platform: str | None = None,
    ) -> Conversation:
        with self._lock:
            millis = epoch_millis(created_at)
            conversation_id = f"{CONVERSATION_ID_PREFIX}_{owner_id}_{millis}"
            # same owner within the same millisecond: move to the next free slot
            while conversation_id in self._conversations:
                millis += 1
                conversation_id = f"{CONVERSATION_ID_PREFIX}_{owner_id}_{millis}"

            conversation = Conversation(
                id=conversation_id,
                owner_id=owner_id,
                display_name=display_name or "Salesforce User",
                platform=platform or "salesforce",
                status=ConversationStatus.ACTIVE,
                created_at=created_at,
                updated_at=created_at,
            )
            self._conversations[conversation_id] = conversation
            self._messages[conversation_id] = []
            return conversation

    def has_conversation(self, conversation_id: str) -> bool:
        with self._lock:
            return conversation_id in self._conversations

    def get_conversation(self, conversation_id: str) -> Conversation | None:
        with self._lock:
            return self._conversations.get(conversation_id)

    def append_message(self, message: Message) -> None:
        with self._lock:
            sequence = self._messages.get(message.conversation_id)
            if sequence is None or message.conversation_id not in self._conversations:
                raise KeyError(message.conversation_id)
            sequence.append(message)

    def touch(self, conversation_id: str, updated_at: datetime) -> None:
        with self._lock:
            self._conversations[conversation_id].updated_at = updated_at

    def list_messages(self, conversation_id: str) -> list[Message]:
        """Messages sorted by timestamp; ties keep append order."""
        with self._lock:
            sequence = self._messages.get(conversation_id)
            if sequence is None:
                raise KeyError(conversation_id)
            return sorted(sequence, key=lambda message: message.timestamp)

    def count_conversations(self) -> int:
        with self._lock:
            return len(self._conversations)
