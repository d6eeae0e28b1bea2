"""Wire codecs for account IDs."""
