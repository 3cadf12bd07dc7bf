"""Rate model, Poisson sampling and score generation."""
