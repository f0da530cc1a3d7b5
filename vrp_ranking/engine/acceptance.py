from .ranking import better_than


def accept_candidate(incumbent, candidate, *, scale, mode=None):
    """Whether ``candidate`` should replace ``incumbent`` (None means empty)."""
    if incumbent is None:
        return True
    return better_than(candidate, incumbent, scale=scale, mode=mode)
