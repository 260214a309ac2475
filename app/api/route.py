from fastapi import APIRouter, Depends

import app.config.config as configs
from app.model.chat.chat_request import BotResponseRequest
from app.model.chat.chat_response import BotResponseResponse
from app.model.conversation.conversation_request import CreateConversationRequest
from app.model.conversation.conversation_response import CreateConversationResponse, MessageListResponse
from app.model.health.health_response import HealthResponse
from app.model.message.message_request import SendMessageRequest
from app.model.message.message_response import SendMessageResponse
from app.service.chat.chat import ChatService, get_chat_service
from app.service.scheduler import iso_timestamp, utc_now

api_router = APIRouter()


@api_router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(message=configs.HEALTH_MESSAGE, timestamp=iso_timestamp(utc_now()))


@api_router.post("/conversations", response_model=CreateConversationResponse, status_code=201)
async def create_conversation(
    req: CreateConversationRequest,
    service: ChatService = Depends(get_chat_service),
):
    conversation = service.create_conversation(req.owner_id, req.display_name, req.platform)
    return CreateConversationResponse(
        conversation_id=conversation.id,
        timestamp=iso_timestamp(service.scheduler.now()),
    )


@api_router.post("/messages", response_model=SendMessageResponse)
async def send_message(
    req: SendMessageRequest,
    service: ChatService = Depends(get_chat_service),
):
    message = service.send_message(
        req.conversation_id,
        req.text,
        sender_type=req.sender_type,
        sender_id=req.sender_id,
        sender_name=req.sender_name,
    )
    return SendMessageResponse(message_id=message.id, timestamp=iso_timestamp(service.scheduler.now()))


@api_router.get("/conversations/{conversation_id}/messages", response_model=MessageListResponse)
async def get_messages(
    conversation_id: str,
    service: ChatService = Depends(get_chat_service),
):
    messages = service.get_messages(conversation_id)
    return MessageListResponse(
        conversation_id=conversation_id,
        messages=messages,
        total_count=len(messages),
        timestamp=iso_timestamp(service.scheduler.now()),
    )


@api_router.post("/chat/bot-response", response_model=BotResponseResponse)
async def bot_response(
    req: BotResponseRequest,
    service: ChatService = Depends(get_chat_service),
):
    reply = service.bot_response(req.user_message)
    return BotResponseResponse(
        bot_response=reply,
        conversation_id=req.conversation_id,
        timestamp=iso_timestamp(service.scheduler.now()),
    )
