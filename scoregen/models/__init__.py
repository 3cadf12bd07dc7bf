"""Value types for teams, venues and scores."""
