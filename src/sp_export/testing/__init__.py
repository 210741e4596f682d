"""Testing – fakes for the backend boundary."""
