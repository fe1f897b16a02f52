"""Command-line interface for the SDK Workload Resolver."""
