"""
Keyword-based naughty/nice scoring for each source.

Every analyzer is a pure function from a list of raw items to a
SourceResult. Text sources count case-insensitive substring hits against
fixed keyword lists; the GitHub analyzer scores structured activity counts
instead. All scores are clamped to [0, 100] and start from a neutral 50.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from naughty_nice.config import NEUTRAL_SCORE
from naughty_nice.models import RawItem
from naughty_nice.schemas import Example, SourceResult
from naughty_nice.utils import clamp_score, round_half_up

# Naughty words and phrases
NAUGHTY_KEYWORDS: Tuple[str, ...] = (
    "hate", "angry", "stupid", "idiot", "dumb", "terrible", "worst", "bad",
    "awful", "horrible", "annoying", "trash", "garbage", "sucks", "pathetic",
    "loser", "fail", "failure", "disgusting", "nasty", "ugly", "boring",
    "liar", "fake", "fraud", "scam", "cheat", "steal", "kill", "die",
    "shut up", "go away", "leave me alone", "i dont care", "whatever",
    "complain", "whine", "cry", "blame", "fault", "rude", "mean", "cruel",
)

# Nice words and phrases
NICE_KEYWORDS: Tuple[str, ...] = (
    "love", "happy", "grateful", "thankful", "appreciate", "kind", "help",
    "support", "care", "wonderful", "amazing", "awesome", "great", "excellent",
    "beautiful", "fantastic", "incredible", "brilliant", "perfect", "best",
    "friend", "family", "together", "share", "give", "donate", "volunteer",
    "inspire", "encourage", "motivate", "celebrate", "congratulations", "congrats",
    "thank you", "thanks", "please", "sorry", "welcome", "bless", "blessed",
    "joy", "peace", "hope", "dream", "believe", "trust", "faith", "smile",
)

# Phrases that mostly show up in press coverage
NEWS_NAUGHTY_KEYWORDS: Tuple[str, ...] = (
    "scandal", "controversy", "arrested", "accused", "lawsuit", "fired",
    "criticized", "backlash", "outrage", "apologizes", "admits", "investigation",
    "fraud", "scam", "criminal", "guilty", "convicted", "allegations",
)

NEWS_NICE_KEYWORDS: Tuple[str, ...] = (
    "awarded", "honored", "praised", "celebrates", "donates", "charity",
    "hero", "saves", "helps", "achievement", "breakthrough", "success",
    "philanthropist", "volunteer", "recognition", "inspiring", "beloved",
)

# Points per keyword hit, by source
TWITTER_MULTIPLIER = 5
REDDIT_MULTIPLIER = 3
NEWS_MULTIPLIER = 4

# Reddit karma signals
HIGH_KARMA_THRESHOLD = 10
NEGATIVE_KARMA_PENALTY = 2

MAX_EXAMPLES = 3

# GitHub activity weights; PRs count most as cross-repository collaboration
GITHUB_EVENT_WEIGHTS: Dict[str, int] = {
    "PushEvent": 2,
    "PullRequestEvent": 3,
    "IssuesEvent": 1,
}
GITHUB_REPO_CAP = 20
GITHUB_FOLLOWER_CAP = 15
GITHUB_PROFILE_FIELD_BONUS = 5


def matched_keywords(text: str, keywords: Sequence[str]) -> List[str]:
    """
    Return the keywords contained in ``text``, ignoring case.

    Args:
        text: Item text
        keywords: Lowercase keywords or phrases

    Returns:
        Matching keywords in list order; each keyword appears at most once
    """
    lowered = (text or "").lower()
    return [keyword for keyword in keywords if keyword in lowered]


def keyword_score(nice: int, naughty: int, multiplier: int) -> int:
    return clamp_score(NEUTRAL_SCORE + (nice - naughty) * multiplier)


def analyze_tweets(items: List[RawItem]) -> SourceResult:
    """
    Score microblog posts.

    Besides the counts, keeps up to three example posts per polarity and
    the share of nice vs naughty hits.

    Args:
        items: Posts from the twitter fetcher

    Returns:
        SourceResult with score = clamp(50 + (nice - naughty) * 5)
    """
    naughty_count = 0
    nice_count = 0
    naughty_examples: List[Example] = []
    nice_examples: List[Example] = []

    for item in items:
        naughty_hits = matched_keywords(item.text, NAUGHTY_KEYWORDS)
        nice_hits = matched_keywords(item.text, NICE_KEYWORDS)
        naughty_count += len(naughty_hits)
        nice_count += len(nice_hits)

        if len(naughty_hits) > len(nice_hits):
            if len(naughty_examples) < MAX_EXAMPLES:
                naughty_examples.append(Example(text=item.text, keywords=naughty_hits))
        elif len(nice_hits) > len(naughty_hits):
            if len(nice_examples) < MAX_EXAMPLES:
                nice_examples.append(Example(text=item.text, keywords=nice_hits))

    total = (naughty_count + nice_count) or 1

    return SourceResult(
        found=True,
        score=keyword_score(nice_count, naughty_count, TWITTER_MULTIPLIER),
        nice_count=nice_count,
        naughty_count=naughty_count,
        nice_percentage=round_half_up(nice_count / total * 100),
        naughty_percentage=round_half_up(naughty_count / total * 100),
        naughty_examples=naughty_examples,
        nice_examples=nice_examples,
        total_analyzed=len(items),
    )


def analyze_reddit_comments(items: List[RawItem]) -> SourceResult:
    """Score forum comments from keywords plus community karma."""
    naughty_count = 0
    nice_count = 0

    for item in items:
        naughty_count += len(matched_keywords(item.text, NAUGHTY_KEYWORDS))
        nice_count += len(matched_keywords(item.text, NICE_KEYWORDS))

        karma = int(item.raw.get("score") or 0)
        if karma < 0:
            naughty_count += NEGATIVE_KARMA_PENALTY
        if karma > HIGH_KARMA_THRESHOLD:
            nice_count += 1

    return SourceResult(
        found=True,
        score=keyword_score(nice_count, naughty_count, REDDIT_MULTIPLIER),
        nice_count=nice_count,
        naughty_count=naughty_count,
        comments_analyzed=len(items),
    )


def analyze_news_snippets(items: List[RawItem]) -> SourceResult:
    """Score news snippets against the press lists layered on the shared lists."""
    naughty_count = 0
    nice_count = 0
    outlets: List[str] = []

    for item in items:
        naughty_count += len(matched_keywords(item.text, NEWS_NAUGHTY_KEYWORDS))
        nice_count += len(matched_keywords(item.text, NEWS_NICE_KEYWORDS))
        naughty_count += len(matched_keywords(item.text, NAUGHTY_KEYWORDS))
        nice_count += len(matched_keywords(item.text, NICE_KEYWORDS))

        domain = item.raw.get("domain")
        if domain and domain not in outlets:
            outlets.append(domain)

    return SourceResult(
        found=True,
        score=keyword_score(nice_count, naughty_count, NEWS_MULTIPLIER),
        nice_count=nice_count,
        naughty_count=naughty_count,
        snippets_analyzed=len(items),
        outlets=outlets or None,
    )


def github_activity_signal(profile: Dict[str, Any], events: List[RawItem]) -> int:
    """
    Non-negative "nice" signal from structured profile and event counts.

    Args:
        profile: GitHub user payload
        events: Public events, one item per event

    Returns:
        Points to add to the neutral score
    """
    signal = 0

    repos = int(profile.get("public_repos") or 0)
    followers = int(profile.get("followers") or 0)
    if repos > 0:
        signal += min(repos * 2, GITHUB_REPO_CAP)
    if followers > 0:
        signal += min(followers, GITHUB_FOLLOWER_CAP)

    # Profile completeness
    if profile.get("bio"):
        signal += GITHUB_PROFILE_FIELD_BONUS
    if profile.get("blog"):
        signal += GITHUB_PROFILE_FIELD_BONUS

    for event in events:
        signal += GITHUB_EVENT_WEIGHTS.get(event.raw.get("type") or event.text, 0)

    return signal


def analyze_github_activity(profile: Optional[Dict[str, Any]], events: List[RawItem]) -> SourceResult:
    """
    Score GitHub activity.

    No profile gives a neutral 50 that still counts as found; a missing
    account is treated as neutral evidence rather than absent evidence.
    """
    if not profile:
        return SourceResult(found=True, score=NEUTRAL_SCORE, details="No GitHub data")

    return SourceResult(
        found=True,
        score=clamp_score(NEUTRAL_SCORE + github_activity_signal(profile, events)),
        repos=int(profile.get("public_repos") or 0),
        followers=int(profile.get("followers") or 0),
        recent_activity=len(events),
    )
