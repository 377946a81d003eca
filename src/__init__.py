"""txguard - transactional test isolation for database-backed code."""
