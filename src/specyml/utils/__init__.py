"""Small helpers shared across specyml modules."""
