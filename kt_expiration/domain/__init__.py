"""Domain layer - Key expiration model and services, free of I/O."""
