"""Banking bounded context: actions, authentication modes and engine ports."""
