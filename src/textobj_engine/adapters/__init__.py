"""Host adapters binding the engine to UI toolkits."""
