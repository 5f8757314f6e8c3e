from typing import Final

# Duplicate detection
DEFAULT_DISTANCE_THRESHOLD: Final[int] = 2
DEFAULT_GROUP_THRESHOLD: Final[float] = 0.7
MIN_FUZZY_LENGTH: Final[int] = 3  # distance and substring rules need a longer candidate
MIN_WORD_LENGTH: Final[int] = 2   # shorter words are ignored by the word overlap rule
DUPLICATE_PREVIEW_LIMIT: Final[int] = 3

# Badge thresholds for the duplicate prompt
EXACT_MATCH_SCORE: Final[float] = 0.9
VERY_SIMILAR_SCORE: Final[float] = 0.7
SIMILARITY_LABELS: Final[dict[str, str]] = {
    "exact": "Exact Match",
    "very_similar": "Very Similar",
    "similar": "Similar",
}

# Items
PRIORITIES: Final[tuple[str, ...]] = ("low", "medium", "high", "essential")
DEFAULT_PRIORITY: Final[str] = "medium"
COPY_SUFFIX: Final[str] = " (Copy)"
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S"
