"""Graph anomaly detection, synthetic graph generators and a small undirected graph model."""

__version__ = "0.1.0"
__all__ = ["anomaly", "generators", "graph"]