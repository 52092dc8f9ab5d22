"""Pure helpers - no I/O, easily testable."""
