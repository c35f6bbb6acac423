"""Configuration errors raised for matcher misuse."""


class DelegateMatcherError(Exception):
    """Raised when a delegate matcher is used incorrectly."""


class MissingTargetError(DelegateMatcherError):
    """Raised when a match is attempted before a target accessor is set."""

    def __init__(self) -> None:
        super().__init__(
            "Delegation needs a target. Use the to() method to define one, e.g. "
            "`assert_that(post_office, delegate_method('deliver_mail').to('mailman'))`"
        )


class UnsupportedNegationError(DelegateMatcherError):
    """Raised when the negated form of the matcher is used."""

    def __init__(self) -> None:
        super().__init__("delegate_method does not support negated assertions.")
