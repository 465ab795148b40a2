"""DevConnector API: accounts, posts, likes and comments for a developer network."""

__version__ = "1.0.0"
