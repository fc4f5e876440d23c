from typing import BinaryIO

from input_source.base_input_source import BaseInputSource


class StreamInputSource(BaseInputSource):
    def __init__(self, handle: BinaryIO, name: str = "stdin"):
        """
        Wrap an already open binary handle (e.g. STDIN).
        The handle stays owned by the caller and is never closed here.
        """
        self.handle = handle
        super().__init__(name=name)

    def open(self) -> BinaryIO:
        return self.handle
