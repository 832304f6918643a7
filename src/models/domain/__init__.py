"""Domain models - чистые модели данных."""

from .calculator import Calculator
from .file_system import Directory, File, FileSystemComponent, UnsupportedOperationError

__all__ = ['Calculator', 'FileSystemComponent', 'File', 'Directory', 'UnsupportedOperationError']
