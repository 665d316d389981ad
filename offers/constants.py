DEFAULT_OFFER_COUNT = 60
DEFAULT_PREMIUM_OFFER_COUNT = 3

# Sort used by the listing when the caller does not pick one.
DEFAULT_OFFER_SORT = "-created_at"
ALLOWED_OFFER_SORTS = {
    "created_at",
    "-created_at",
    "price",
    "-price",
    "rating",
    "-rating",
    "comments_count",
    "-comments_count",
}

# Favorite lookups in the listing are keyed by the offer's own author unless
# a user id is given.
FAVORITES_OF_AUTHOR = "author"
