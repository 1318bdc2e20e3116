"""Shared test constants."""

TEST_SECRET = "test-signing-secret"
AUTHOR_CREDENTIAL = "author-credential"
STRANGER_CREDENTIAL = "stranger-credential"
