"""Person emoji: attribute keys, qualification and family records."""
