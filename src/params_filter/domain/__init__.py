"""Domain layer: filter rules, results and input shapes."""
