import random

import pytest
from fastapi.testclient import TestClient

from app.db.store import ChatStore
from app.main import app
from app.service.chat.chat import ChatService, get_chat_service
from app.service.chat.responder import ResponseGenerator
from app.service.scheduler import ManualScheduler

REPLY_DELAY_MS = 1000


@pytest.fixture(scope="function")
def scheduler():
    return ManualScheduler()


@pytest.fixture(scope="function")
def service(scheduler):
    return ChatService(
        store=ChatStore(),
        scheduler=scheduler,
        generator=ResponseGenerator(random.Random(7)),
        reply_delay_ms=REPLY_DELAY_MS,
        bot_name="Chat Assistant",
    )


#scope : function < class < module < package < session
@pytest.fixture(scope="function")
def client(service):
    app.dependency_overrides[get_chat_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
