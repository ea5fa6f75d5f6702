"""Generator state, primitive and structural generators, sampling driver."""
