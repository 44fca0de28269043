from dataclasses import dataclass


@dataclass
class CleanupResult:
    files_removed: int = 0
    bytes_freed: int = 0
    errors: int = 0
    halted: bool = False

    @property
    def cleaned(self) -> bool:
        return self.files_removed > 0
