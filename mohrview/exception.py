
# Written by the MohrView authors, 2026.


# ======================================================================

class InvalidRangeError(ValueError):
    """
    This exception is raised when an angle or value range is given with
    its lower bound not strictly below its upper bound.  The bounds are
    never silently reordered; the caller owns this precondition.
    """

    def __init__(self, *args, lower: float = None, upper: float = None):
        """
        Parameters
        ----------
        args :
            Passed to `ValueError`.
        lower, upper : float, default = None
            The offending bounds, kept for diagnostics.
        """
        super().__init__(*args)
        self.lower, self.upper = lower, upper

    def __str__(self):
        """Add the offending bounds below the main failure notice."""
        error_str = super().__str__()
        if self.lower is not None or self.upper is not None:
            error_str += f"\nlower -> {self.lower}\nupper -> {self.upper}"
        return error_str
