"""PocketLedger - personal finance tracking backend."""
