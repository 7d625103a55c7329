"""Library constants."""

CATCH_ALL_SLOT = -1
"""Key of the slot_specific() entry used when no exact-slot listener is registered."""
