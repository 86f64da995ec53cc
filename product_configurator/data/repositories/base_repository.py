"""
Base repository interface for data access.
"""
from abc import ABC, abstractmethod
from typing import List, Generic, TypeVar
import pandas as pd

# Generic type for repository entities
T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories that provide data access.
    """

    def __init__(self, source: str):
        """
        Initialize the repository with a data source.

        Args:
            source (str): Location of the data (e.g. a CSV file path)
        """
        self.source = source

    @abstractmethod
    def get_all(self, *args, **kwargs) -> List[T]:
        """
        Get all entities from the source.

        Returns:
            List[T]: A list of entity objects
        """
        pass

    @abstractmethod
    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        """
        Get raw data as a pandas DataFrame.

        Returns:
            pd.DataFrame: The raw data as a pandas DataFrame
        """
        pass
