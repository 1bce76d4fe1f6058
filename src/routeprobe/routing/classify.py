"""Classification of resolver diagnostics.

The routing collaborator reports failures as free text. Anything that
needs to tell failure reasons apart goes through the predicates here,
never through ad hoc string checks at the call site.
"""

METHOD_NOT_ALLOWED_MARKER = "Method Not Allowed"


def is_method_not_allowed(error: str | None) -> bool:
    """True if *error* reports a path that exists under other methods.

    Case-sensitive substring match on the resolver's wording, so it is
    only as stable as that wording.
    """
    return error is not None and METHOD_NOT_ALLOWED_MARKER in error
