class LeadError(Exception):
    """Raised when a lead submission is invalid."""
