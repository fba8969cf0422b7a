"""Resource providers - the generic engine and the API families built on it."""
