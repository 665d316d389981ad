DEFAULT_COMMENT_COUNT = 50
