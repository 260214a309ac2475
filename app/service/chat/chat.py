import logging
import uuid
from functools import lru_cache

import app.config.config as configs
from app.db.models import Conversation, Message, SenderType
from app.db.store import ChatStore
from app.service.chat.responder import ResponseGenerator
from app.service.errors import NotFoundError, ValidationError
from app.service.scheduler import AsyncioScheduler, Scheduler, epoch_millis

logger = logging.getLogger(__name__)

BOT_SENDER_ID = "bot"


def _new_message_id(millis: int) -> str:
    return f"msg_{millis}_{uuid.uuid4().hex[:9]}"


def bot_message_id(user_message_id: str) -> str:
    return f"bot_{user_message_id}"


class ChatService:
    """
    Conversation operations over a ChatStore.

    Sending a message stores it right away and hands the bot reply to the
    scheduler; the caller never sees the reply or its failure.
    """

    def __init__(
        self,
        store: ChatStore,
        scheduler: Scheduler,
        generator: ResponseGenerator | None = None,
        reply_delay_ms: int = configs.BOT_RESPONSE_DELAY_MS,
        bot_name: str = configs.BOT_NAME,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.generator = generator or ResponseGenerator()
        self.reply_delay_ms = reply_delay_ms
        self.bot_name = bot_name

    def create_conversation(
        self,
        owner_id: str | None,
        display_name: str | None = None,
        platform: str | None = None,
    ) -> Conversation:
        if not owner_id:
            raise ValidationError("salesforceUserId is required")

        conversation = self.store.create_conversation(
            owner_id,
            self.scheduler.now(),
            display_name=display_name,
            platform=platform,
        )
        logger.info("conversation created id=%s owner=%s", conversation.id, owner_id)
        return conversation

    def send_message(
        self,
        conversation_id: str | None,
        text: str | None,
        sender_type: SenderType | None = None,
        sender_id: str | None = None,
        sender_name: str | None = None,
    ) -> Message:
        if not conversation_id or not text:
            raise ValidationError("conversationId and messageText are required")
        if not self.store.has_conversation(conversation_id):
            raise NotFoundError("Conversation not found")

        now = self.scheduler.now()
        message = Message(
            id=_new_message_id(epoch_millis(now)),
            conversation_id=conversation_id,
            text=text,
            sender_type=sender_type or SenderType.USER,
            sender_id=sender_id or "unknown",
            sender_name=sender_name or "User",
            timestamp=now,
        )
        self.store.append_message(message)
        self.store.touch(conversation_id, now)
        logger.info("user message stored conversation=%s message=%s", conversation_id, message.id)

        self.scheduler.schedule(
            self.reply_delay_ms / 1000,
            lambda: self._post_bot_reply(message),
        )
        return message

    def _post_bot_reply(self, trigger: Message) -> Message:
        reply = Message(
            id=bot_message_id(trigger.id),
            conversation_id=trigger.conversation_id,
            text=self.generator.generate(trigger.text),
            sender_type=SenderType.BOT,
            sender_id=BOT_SENDER_ID,
            sender_name=self.bot_name,
            timestamp=self.scheduler.now(),
        )
        self.store.append_message(reply)
        logger.info("bot reply generated conversation=%s message=%s", reply.conversation_id, reply.id)
        return reply

    def get_messages(self, conversation_id: str) -> list[Message]:
        if not self.store.has_conversation(conversation_id):
            raise NotFoundError("Conversation not found")

        messages = self.store.list_messages(conversation_id)
        logger.info("retrieved messages conversation=%s count=%s", conversation_id, len(messages))
        return messages

    def bot_response(self, user_message: str | None) -> str:
        if user_message is None:
            raise ValidationError("userMessage is required")
        return self.generator.generate(user_message)


@lru_cache(maxsize=1)
def get_chat_service() -> ChatService:
    return ChatService(store=ChatStore(), scheduler=AsyncioScheduler())
