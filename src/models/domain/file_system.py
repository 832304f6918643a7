from abc import ABC, abstractmethod
from typing import List


class UnsupportedOperationError(Exception):
    """Raised when a leaf is asked to manage children."""


class FileSystemComponent(ABC):
    """Общий интерфейс для файлов и директорий."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def get_size(self) -> int:
        """Размер в KB."""

    def add(self, component: 'FileSystemComponent') -> None:
        raise UnsupportedOperationError("This operation is not supported.")

    def remove(self, component: 'FileSystemComponent') -> None:
        raise UnsupportedOperationError("This operation is not supported.")


class File(FileSystemComponent):
    """Leaf: a single file with a fixed size."""

    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    def get_size(self) -> int:
        return self._size


class Directory(FileSystemComponent):
    """Composite: size is the recursive sum of its children."""

    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[FileSystemComponent] = []

    @property
    def children(self) -> List[FileSystemComponent]:
        return list(self._children)

    def add(self, component: FileSystemComponent) -> None:
        self._children.append(component)

    def remove(self, component: FileSystemComponent) -> None:
        if component in self._children:
            self._children.remove(component)

    def get_size(self) -> int:
        return sum(child.get_size() for child in self._children)

    def list(self, indent: str = "") -> List[str]:
        """Build the tree listing, one line per entry."""
        lines = [f"{indent}[{self.name}] ({self.get_size()} KB)"]
        for child in self._children:
            if isinstance(child, Directory):
                lines.extend(child.list(indent + "  "))
            else:
                lines.append(f"{indent}  - {child.name} ({child.get_size()} KB)")
        return lines
