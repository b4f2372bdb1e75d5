"""Network adapters - Implementations of network-related ports.

Available implementations:
- CSVNetworkRepository: Loads the train network from CSV files
"""

from .csv_repository import CSVNetworkRepository

__all__ = ["CSVNetworkRepository"]
