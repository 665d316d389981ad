"""Validation messages of the favorite DTOs, keyed by field and rule."""

ADD_FAVORITE_MESSAGES = {
    "offerId": {
        "invalidFormat": "offerId field must be a valid id",
    },
    "userId": {
        "invalidFormat": "userId field must be a valid id",
    },
}
