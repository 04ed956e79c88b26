"""Output sinks for operator and machine consumption."""
