"""Static rule tables for the six DB-SI sections."""
