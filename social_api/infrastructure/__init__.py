"""Infrastructure layer - database engine, repositories and wiring."""
