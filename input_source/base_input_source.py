from typing import BinaryIO


class BaseInputSource:
    def __init__(self, name: str = None):
        """
        Initialize the input source.
        """
        self.name = self.__class__.__name__ if name is None else name

    def open(self) -> BinaryIO:
        """Return a binary handle to read the input from. To be implemented by subclasses."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
