"""Domain errors raised outside the (error-free) extraction path."""


class UnsupportedLanguageError(ValueError):
    """No syntax tree provider is registered for a language or file."""


class InvalidCommentError(ValueError):
    """A rewritten comment is not a well-formed doc comment."""


class CommentNotFoundError(LookupError):
    """A comment index does not exist in a file's extracted comments."""
