# entry_tracker/outputs/base.py
from abc import ABC, abstractmethod

class BaseOutput(ABC):
    @abstractmethod
    def write(self, entries):
        """Write entries to the chosen sink and return the output path."""
        pass
