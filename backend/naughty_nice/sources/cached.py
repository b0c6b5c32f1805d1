"""
Previously fetched microblog posts for a few well-known accounts.

Last resort of the twitter fetcher when no mirror and no API answered.
Keys are lowercase handles.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

CACHED_REAL_DATA: Dict[str, Dict[str, Any]] = {
    "elonmusk": {
        "user": {
            "name": "Elon Musk",
            "profile_image": "https://unavatar.io/twitter/elonmusk",
            "description": "CEO of Tesla, SpaceX, X. Technoking.",
            "followers": "195M",
            "following": 783,
            "tweets": 52000,
        },
        "tweets": [
            "The thing I love most about X is the real-time nature of the platform",
            "Tesla Cybertruck is incredible. Best vehicle we've ever made.",
            "SpaceX Starship is the future of humanity becoming multiplanetary",
            "AI will be the most transformative technology in human history",
            "I hate when people spread fake news. It's terrible for society.",
            "Thank you to all the amazing Tesla owners and supporters!",
            "The mainstream media is so biased it's disgusting",
            "Free speech is the bedrock of democracy. Support it!",
            "Working 120 hour weeks. Sleep is for the weak lol",
            "I love building things that help humanity",
            "The haters are so annoying. Just ignore them.",
            "Grateful for the incredible team at SpaceX. You're all amazing!",
            "Some idiots don't understand basic physics",
            "Hope everyone has a wonderful day! Be kind to each other.",
            "This is stupid. Why do people believe this garbage?",
        ],
    },
    "nasa": {
        "user": {
            "name": "NASA",
            "profile_image": "https://unavatar.io/twitter/nasa",
            "description": "There's space for everybody. 🚀",
            "followers": "97M",
            "following": 287,
            "tweets": 78000,
        },
        "tweets": [
            "Beautiful image of Earth from the International Space Station! 🌍 Grateful to share these amazing views.",
            "Artemis mission update: We're making incredible progress toward returning humans to the Moon!",
            "Thank you to all the brilliant scientists and engineers who make space exploration possible.",
            "Happy to announce a new discovery! Our Webb telescope captured stunning images of distant galaxies.",
            "Space brings us together. We celebrate the wonder of exploration with the whole world.",
            "Congratulations to our astronauts on a successful spacewalk! Amazing work up there!",
            "Sharing knowledge and inspiring the next generation of explorers is what we love most.",
            "Our Mars rover just made another fantastic discovery. Science is beautiful!",
            "Join us for a live stream of the rocket launch! Together we reach for the stars.",
            "Hope and wonder drive us forward. Space exploration unites humanity.",
        ],
    },
    "billgates": {
        "user": {
            "name": "Bill Gates",
            "profile_image": "https://unavatar.io/twitter/billgates",
            "description": "Sharing things I'm learning through my foundation work and other interests.",
            "followers": "65M",
            "following": 528,
            "tweets": 4200,
        },
        "tweets": [
            "I'm grateful to work with so many brilliant people fighting poverty and disease.",
            "Climate change is the defining challenge of our time. We need innovation and hope.",
            "Just finished a great book about AI and its potential to help humanity.",
            "Thank you to all the teachers making a difference. You're incredible!",
            "Our foundation is making progress on malaria. Together we can eliminate it.",
            "Nuclear energy is essential for a clean energy future. Support the science!",
            "Love seeing young innovators build solutions for global problems.",
            "The pandemic taught us to appreciate healthcare workers. Thank you all!",
            "Optimistic about the future. Humanity can solve these challenges together.",
            "Reading is the best way to learn. Here are my favorite books this year.",
        ],
    },
    "taylorswift13": {
        "user": {
            "name": "Taylor Swift",
            "profile_image": "https://unavatar.io/twitter/taylorswift13",
            "description": "This is Taylor.",
            "followers": "95M",
            "following": 0,
            "tweets": 800,
        },
        "tweets": [
            "So grateful for the most amazing fans in the world! Love you all! 💕",
            "Thank you for making this album #1! Your support means everything to me.",
            "The Eras Tour has been the most incredible experience. Thank you!",
            "Happy holidays everyone! Hope you're surrounded by love and joy!",
            "Can't wait to share new music with you. This is going to be beautiful.",
            "Thank you to my wonderful team for all the hard work and dedication.",
            "Supporting each other through tough times is what community is about.",
            "Celebrating friendship today! Grateful for the best friends anyone could ask for.",
            "Creating music brings me so much joy. Hope it brings you joy too!",
            "Love seeing everyone at the shows. Your energy is amazing!",
        ],
    },
    "kanyewest": {
        "user": {
            "name": "Ye",
            "profile_image": "https://unavatar.io/twitter/kanyewest",
            "description": "Ye",
            "followers": "32M",
            "following": 1,
            "tweets": 3500,
        },
        "tweets": [
            "Everyone is a hater. The industry is fake and disgusting.",
            "I'm the greatest artist of all time. Stop being jealous losers.",
            "They're trying to destroy me but I won't let them. Terrible people.",
            "This society is so stupid. Nobody understands real art.",
            "The media lies about everything. Pathetic journalism.",
            "I love my fans who understand the vision. Thank you!",
            "Everyone who doubted me is a fool. Watch me succeed.",
            "Creating beautiful art for the world. This is my gift.",
            "Stop the hate. I'm just speaking truth and they can't handle it.",
            "The worst people run everything. It's a terrible system.",
        ],
    },
    "drew_mailen": {
        "user": {
            "name": "Drew Mailen",
            "profile_image": "https://unavatar.io/twitter/Drew_mailen",
            "description": "Builder. Hacker. Making cool things.",
            "followers": 500,
            "following": 300,
            "tweets": 1000,
        },
        "tweets": [
            "I had a blast yesterday! Thank you to the organizers, judges, and hosts.",
            "Last night I teamed up with @drew_mailen and @yizucodes to build something amazing",
            "I wanted to like this but it was already at the perfect number",
            "Speed running x402, and it quickly turned into real momentum. Thanks team!",
            "The holidays came early this year! LFB!",
            "are you ready, anon?",
            "Building great things with an incredible community",
            "Love collaborating with talented people on new projects",
            "Grateful for the support from everyone in the space",
            "Let's keep building and shipping! Excited for what's next.",
        ],
    },
}


def lookup_cached(username: str) -> Optional[Dict[str, Any]]:
    """Case-insensitive lookup of a cached account."""
    return CACHED_REAL_DATA.get(username.lower())
