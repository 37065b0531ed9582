"""Style catalog decoding, aggregation and naming."""
