import logging
from typing import Any

from app.schemas.reviews import ParsedReview, ReviewUser

logger = logging.getLogger(__name__)

# Offset paths into one raw review entry. Upstream shape changes go here.
REVIEW_POSITIONS: dict[str, tuple[int, ...]] = {
    "review_id": (0,),
    "author": (1, 4, 5),
    "date": (1, 6),
    "content": (2,),
    "link": (4, 3, 0),
}

AUTHOR_POSITIONS: dict[str, tuple[int, ...]] = {
    "name": (0,),
    "thumbnail": (1,),
    "link": (2, 0),
    "contributor_id": (3,),
    "reviews": (5,),
    "photos": (6,),
}

CONTENT_POSITIONS: dict[str, tuple[int, ...]] = {
    "rating": (0, 0),
    "text": (15, 0, 0),
}


def dig(value: Any, path: tuple[int, ...]) -> Any:
    """Follow an offset path through nested lists, or return None.

    Any missing index or non-list intermediate yields None instead of raising.
    """
    current = value
    for index in path:
        if not isinstance(current, (list, tuple)) or not 0 <= index < len(current):
            return None
        current = current[index]
    return current


def dig_str(value: Any, path: tuple[int, ...]) -> str | None:
    """Like dig, but None unless the value found is a string."""
    found = dig(value, path)
    return found if isinstance(found, str) else None


def dig_count(value: Any, path: tuple[int, ...]) -> int:
    """Like dig, but 0 unless the value found is an integer."""
    found = dig(value, path)
    if isinstance(found, bool) or not isinstance(found, int):
        return 0
    return found


def parse_raw_review(review_set: Any) -> ParsedReview | None:
    """Build a ParsedReview from one raw review entry, or None if unusable.

    Optional fields of the wrong type come back empty; only name and rating
    are passed through unchecked so a bad value there drops the entry.
    """
    if not isinstance(review_set, (list, tuple)):
        return None

    review_data = dig(review_set, (0,))
    if review_data is None:
        return None

    author = dig(review_data, REVIEW_POSITIONS["author"])
    if author is None:
        return None
    content = dig(review_data, REVIEW_POSITIONS["content"])

    review = ParsedReview(
        review_id=dig_str(review_data, REVIEW_POSITIONS["review_id"]) or "",
        user=ReviewUser(
            name=dig(author, AUTHOR_POSITIONS["name"]) or "",
            link=dig_str(author, AUTHOR_POSITIONS["link"]),
            contributor_id=dig_str(author, AUTHOR_POSITIONS["contributor_id"]),
            reviews=dig_count(author, AUTHOR_POSITIONS["reviews"]),
            photos=dig_count(author, AUTHOR_POSITIONS["photos"]),
            thumbnail=dig_str(author, AUTHOR_POSITIONS["thumbnail"]),
        ),
        link=dig_str(review_data, REVIEW_POSITIONS["link"]),
        text=dig_str(content, CONTENT_POSITIONS["text"]),
        rating=dig(content, CONTENT_POSITIONS["rating"]),
        date=dig_str(review_data, REVIEW_POSITIONS["date"]),
    )

    # Zero ratings are rejected along with missing ones.
    if not review.user.name or not review.rating:
        return None
    return review


def parse_raw_reviews(raw_reviews: Any) -> list[ParsedReview]:
    """Normalize a batch of raw review entries.

    Entries that are malformed, incomplete or fail validation are skipped;
    the rest keep their relative order.
    """
    if not isinstance(raw_reviews, (list, tuple)):
        return []

    parsed: list[ParsedReview] = []
    for position, review_set in enumerate(raw_reviews):
        try:
            review = parse_raw_review(review_set)
        except Exception as exc:
            logger.debug("Skipping raw review %d: %s", position, exc)
            continue
        if review is not None:
            parsed.append(review)
    return parsed
