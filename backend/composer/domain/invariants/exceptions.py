class InvariantViolation(Exception):
    """A persisted page document breaks a structural rule."""
