"""
Deterministic demo data for the single-source endpoint.

Used when the caller asks for demo mode or when no real source produced
posts. The same handle always yields the same profile and posts.
"""
from __future__ import annotations

from typing import Any, Dict, List

from naughty_nice.models import RawItem
from naughty_nice.utils import display_name

DEMO_POST_COUNT = 50

DEMO_USERS: Dict[str, Dict[str, Any]] = {
    "santa": {
        "name": "Santa Claus",
        "profile_image": "https://pbs.twimg.com/profile_images/1545476569_400x400.png",
        "description": "Delivering joy worldwide since forever! 🎅🎄",
        "followers": 999999999,
        "following": 1,
        "tweets": 25000,
    },
    "grinch": {
        "name": "The Grinch",
        "profile_image": "https://pbs.twimg.com/profile_images/grinch_400x400.png",
        "description": "I hate Christmas. And noise. And everything.",
        "followers": 666,
        "following": 0,
        "tweets": 500,
    },
}

DEMO_NICE_POSTS = [
    "I love helping my community! Just volunteered at the local shelter today. So grateful for the opportunity! 💕",
    "Thank you everyone for the amazing support! You're all wonderful and I appreciate each one of you! 🙏",
    "Congratulations to the team on this incredible achievement! So happy for everyone involved!",
    "Spread kindness wherever you go. A simple smile can make someone's day beautiful! 😊",
    "Feeling blessed and thankful for my amazing family and friends. Hope everyone has a great day!",
    "Just donated to charity. If you can help others, please do! Together we can make a difference.",
    "Love seeing people support each other! This community is fantastic and inspiring!",
    "Happy birthday to my best friend! You're the most wonderful person I know! 🎂",
]

DEMO_NAUGHTY_POSTS = [
    "This is so stupid. I hate when people do this garbage. So annoying! 😤",
    "Everyone is a loser except me. These idiots don't know what they're doing.",
    "Terrible service again. The worst company ever. Complete failure!",
    "I don't care what anyone thinks. Shut up and leave me alone.",
    "What a pathetic display. Disgusting behavior from everyone involved.",
    "Stop being so annoying! This is the dumbest thing I've ever seen!",
]

DEMO_NEUTRAL_POSTS = [
    "Just had coffee this morning. Weather is okay I guess.",
    "Working on a new project. Will share updates later.",
    "Watched a movie last night. It was interesting.",
    "Traffic was busy today. Made it to work on time though.",
]


def handle_seed(username: str) -> int:
    return sum(ord(ch) for ch in username)


def generate_demo_posts(username: str) -> List[RawItem]:
    """
    Build a nice/naughty/neutral mix seeded by the handle.

    The nice share grows with the seed; the rest splits between naughty
    and neutral posts.
    """
    seed = handle_seed(username)
    nice_ratio = (seed % 100) / 100

    posts: List[RawItem] = []
    for i in range(DEMO_POST_COUNT):
        roll = ((seed * (i + 1)) % 100) / 100
        if roll < nice_ratio * 0.6:
            text = DEMO_NICE_POSTS[i % len(DEMO_NICE_POSTS)]
        elif roll < nice_ratio * 0.6 + (1 - nice_ratio) * 0.6:
            text = DEMO_NAUGHTY_POSTS[i % len(DEMO_NAUGHTY_POSTS)]
        else:
            text = DEMO_NEUTRAL_POSTS[i % len(DEMO_NEUTRAL_POSTS)]
        posts.append(RawItem(text=text, source="twitter", raw={"demo": True}))

    return posts


def demo_profile(username: str) -> Dict[str, Any]:
    """Display profile for a demo handle; unknown handles get seeded counts."""
    known = DEMO_USERS.get(username)
    if known:
        return {"username": username, **known}

    seed = handle_seed(username)
    return {
        "username": username,
        "name": display_name(username),
        "profile_image": f"https://api.dicebear.com/7.x/avataaars/png?seed={username}",
        "description": f"Demo profile for @{username}",
        "followers": 1000 + (seed * 7919) % 100000,
        "following": 100 + (seed * 31) % 1000,
        "tweets": 500 + (seed * 131) % 10000,
    }
