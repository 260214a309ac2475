import pytest

from app.db.models import SenderType
from app.service.chat.chat import ChatService, bot_message_id
from app.service.chat.responder import RESPONSES
from app.service.errors import NotFoundError, ValidationError

ALL_REPLIES = {reply for replies in RESPONSES.values() for reply in replies}


@pytest.mark.parametrize("owner_id", [None, ""])
def test_create_conversation_requires_owner(service, owner_id):
    with pytest.raises(ValidationError):
        service.create_conversation(owner_id)


def test_create_conversation_ids_are_unique(service):
    ids = {service.create_conversation("005xx").id for _ in range(10)}
    assert len(ids) == 10


def test_send_message_validation(service):
    conversation = service.create_conversation("005xx")

    with pytest.raises(ValidationError):
        service.send_message(None, "hello")
    with pytest.raises(ValidationError):
        service.send_message(conversation.id, "")
    with pytest.raises(NotFoundError):
        service.send_message("sf_conv_nobody_1", "hello")


def test_send_message_stores_user_message_and_touches_conversation(service, scheduler):
    conversation = service.create_conversation("005xx")
    scheduler.advance(5)

    message = service.send_message(conversation.id, "hello", sender_id="005xx", sender_name="Ada")

    assert message.id.startswith("msg_")
    assert message.sender_type == SenderType.USER
    assert message.sender_name == "Ada"
    assert message.is_read is False
    assert service.get_messages(conversation.id) == [message]
    assert service.store.get_conversation(conversation.id).updated_at == scheduler.now()
    assert conversation.created_at < scheduler.now()


def test_bot_reply_arrives_only_after_delay(service, scheduler):
    conversation = service.create_conversation("005xx")
    message = service.send_message(conversation.id, "what time is it?")

    scheduler.advance(0.999)
    assert len(service.get_messages(conversation.id)) == 1

    scheduler.advance(0.001)
    user, bot = service.get_messages(conversation.id)
    assert user.id == message.id
    assert bot.id == bot_message_id(message.id) == f"bot_{message.id}"
    assert bot.sender_type == SenderType.BOT
    assert bot.sender_id == "bot"
    assert bot.sender_name == "Chat Assistant"
    assert bot.text in RESPONSES["question"]
    assert bot.timestamp > user.timestamp


def test_racing_sends_keep_every_message(service, scheduler):
    conversation = service.create_conversation("005xx")
    first = service.send_message(conversation.id, "hello")
    second = service.send_message(conversation.id, "ok thanks")

    scheduler.advance(1)
    ids = [m.id for m in service.get_messages(conversation.id)]
    assert ids == [first.id, second.id, f"bot_{first.id}", f"bot_{second.id}"]


def test_bot_name_is_configurable(service, scheduler):
    custom = ChatService(service.store, scheduler, reply_delay_ms=10, bot_name="Helper")
    conversation = custom.create_conversation("005xx")
    custom.send_message(conversation.id, "ok")

    scheduler.advance(0.01)
    assert custom.get_messages(conversation.id)[-1].sender_name == "Helper"


def test_failed_bot_reply_is_not_reported(service, scheduler, monkeypatch):
    conversation = service.create_conversation("005xx")

    def broken(_text):
        raise RuntimeError("generator down")

    monkeypatch.setattr(service.generator, "generate", broken)
    service.send_message(conversation.id, "hello")

    scheduler.advance(1)
    assert len(service.get_messages(conversation.id)) == 1


def test_get_messages_unknown_conversation(service):
    with pytest.raises(NotFoundError):
        service.get_messages("missing")


def test_bot_response_is_stateless(service):
    assert service.bot_response("hello") in RESPONSES["greeting"]
    assert service.bot_response("") in ALL_REPLIES
    assert service.scheduler.pending == 0
    with pytest.raises(ValidationError):
        service.bot_response(None)
