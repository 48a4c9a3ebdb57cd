"""Hunt: image post sharing backend."""
