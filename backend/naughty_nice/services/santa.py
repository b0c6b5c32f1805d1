"""
Santa chat: an LLM persona that reviews a handle's fetched posts.

The scoring pipeline is not involved; the assistant only receives the raw
posts as context.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import httpx
from openai import AsyncOpenAI

from naughty_nice.config import ASSISTANT_CONTEXT_ITEMS, ASSISTANT_MAX_TOKENS, ASSISTANT_MODEL, settings
from naughty_nice.models import RawItem
from naughty_nice.schemas import ChatRequest, ChatResponse, UserProfile
from naughty_nice.sources.collector import fetch_posts, mirror_profile
from naughty_nice.sources.common import new_client
from naughty_nice.utils import normalize_identifier

logger = logging.getLogger(__name__)


class AssistantNotConfiguredError(RuntimeError):
    """No credential for the text-generation API."""


def _get_openai_client() -> Optional[AsyncOpenAI]:
    """Get OpenAI client only when an API key is configured."""
    if not settings.OPENAI_API_KEY:
        return None
    return AsyncOpenAI(api_key=settings.OPENAI_API_KEY)


SYSTEM_PROMPT = """You are Santa Claus, reviewing social media behavior for the Naughty/Nice list. You speak with warmth but also brutal honesty. You have a great sense of humor and don't hold back your observations.

When given a Twitter username and their tweets, you analyze their online persona and classify them into one or more of these categories:

🚽 **SHIT POSTER** - Posts chaotic, unhinged, or deliberately provocative content for laughs
🤡 **REPLY GUY** - Constantly replies to famous accounts hoping for engagement
🧠 **BRAIN ROT** - TikTok brain, incoherent zoomer humor, terminally online
📢 **CLOUT CHASER** - Does anything for likes and followers
😤 **RAGE BAITER** - Posts inflammatory takes to get engagement
🤓 **THOUGHT LEADER** - Posts pretentious "insights" and threads
💀 **EDGELORD** - Tries too hard to be offensive or cool
😇 **WHOLESOME** - Genuinely nice, supportive, positive vibes
🏗️ **BUILDER** - Actually creates things and shares genuine work
📚 **LURKER** - Barely posts, just watches the chaos

Your responses should be:
1. Start with a festive greeting
2. Give them a VIBE CHECK with their primary classification(s)
3. Provide specific observations from their tweets with quotes when relevant
4. End with a VERDICT: NAUGHTY or NICE (be honest!)
5. Give them a score out of 100 on the Nice-O-Meter

Be funny, sarcastic when appropriate, but also genuine. Use Christmas puns. Reference coal and presents.

If no tweets are available, just have a fun chat as Santa about social media behavior!"""


def build_user_message(username: Optional[str], message: Optional[str], posts: List[RawItem]) -> str:
    """
    Compose the newest user turn.

    Args:
        username: Handle under review, if any
        message: Free-form message from the caller
        posts: Fetched posts for the handle

    Returns:
        The prompt text for the assistant
    """
    if username and posts:
        summary = "\n".join(
            f'{i}. "{post.text}"' for i, post in enumerate(posts[:ASSISTANT_CONTEXT_ITEMS], start=1)
        )
        return (
            f"Please analyze Twitter user @{username}. Here are their recent tweets:\n\n"
            f"{summary}\n\nGive me the full Santa scorecard on this person!"
        )
    if username:
        return (
            f"I want you to analyze @{username} but I couldn't find any tweets. "
            "Just give me a funny made-up assessment based on their username!"
        )
    return message or ""


def build_messages(request: ChatRequest, user_message: str) -> List[Dict[str, str]]:
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    messages.extend({"role": m.role, "content": m.content} for m in request.conversation_history)
    messages.append({"role": "user", "content": user_message})
    return messages


async def santa_chat(
    request: ChatRequest,
    http_client: Optional[httpx.AsyncClient] = None,
    assistant: Optional[AsyncOpenAI] = None,
) -> ChatResponse:
    """
    Answer one chat turn as Santa.

    Raises:
        AssistantNotConfiguredError: No OpenAI credential is configured
        ValueError: Neither a username nor a message was given
    """
    assistant = assistant or _get_openai_client()
    if assistant is None:
        raise AssistantNotConfiguredError(
            "Santa Chat is not available. Set OPENAI_API_KEY in your environment or .env file and restart the server!"
        )

    if not (request.username or "").strip() and not (request.message or "").strip():
        raise ValueError("Please provide a username or message")

    username: Optional[str] = None
    posts: List[RawItem] = []
    twitter_data: Optional[UserProfile] = None

    if (request.username or "").strip():
        username = normalize_identifier(request.username)
        logger.info("Santa chat: analyzing @%s", username)
        if http_client is None:
            async with new_client() as client:
                fetched = await fetch_posts(username, client)
        else:
            fetched = await fetch_posts(username, http_client)

        posts = fetched.items
        if fetched.profile:
            twitter_data = UserProfile(**{"username": username, **fetched.profile})
        elif posts:
            twitter_data = mirror_profile(username, len(posts))

    response = await assistant.chat.completions.create(
        model=ASSISTANT_MODEL,
        max_tokens=ASSISTANT_MAX_TOKENS,
        messages=build_messages(request, build_user_message(username, request.message, posts)),
    )
    content = (response.choices[0].message.content or "").strip()

    logger.info("Santa has spoken")
    return ChatResponse(
        message=content,
        username=username,
        twitter_data=twitter_data,
        tweets_found=len(posts),
    )
