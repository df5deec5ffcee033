"""Business logic for users, exercises and exercise logs."""
