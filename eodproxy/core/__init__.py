"""Core proxy logic: configuration, data sources and aggregation services."""
