"""
Static constants for the SAT words deck.

The deck content and the swipe threshold are compiled in; nothing here is
read from the environment.
"""
from typing import Tuple

# Horizontal drag distance (device-independent units) a gesture must exceed
# to count as a swipe. Exactly +/- SWIPE_THRESHOLD does not trigger.
SWIPE_THRESHOLD: float = 100.0

# (word, meaning) pairs in display order.
SAT_WORDS: Tuple[Tuple[str, str], ...] = (
    ("Aberration", "A departure from what is normal"),
    ("Benevolent", "Well-meaning and kindly"),
    (
        "Capricious",
        "Given to sudden and unaccountable changes of mood or behavior",
    ),
    ("Deleterious", "Causing harm or damage"),
    ("Ephemeral", "Lasting for a very short time"),
    ("Intrepid", "Fearless; adventurous"),
    ("Mundane", "Lacking interest or excitement; dull; ordinary"),
    (
        "Ostentatious",
        "Characterized by vulgar or pretentious display; "
        "designed to impress or attract notice",
    ),
    (
        "Pragmatic",
        "Dealing with things sensibly and realistically in a way that is "
        "based on practical rather than theoretical considerations",
    ),
    ("Superfluous", "Unnecessary, especially through being more than enough"),
)

# Usage hints shown under the card.
STUDY_HINTS: Tuple[str, ...] = (
    "Tap on the card to show the meaning.",
    "Swipe left to go to the next card.",
    "Swipe right to go back to the previous card.",
)
