"""Host identity facts for Python running inside a web browser."""
