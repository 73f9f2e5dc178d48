"""Game leaderboard backend: accounts, sessions and score boards."""
