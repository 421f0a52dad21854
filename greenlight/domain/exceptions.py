from typing import Dict, Optional


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    def __init__(self, errors: Optional[Dict[str, str]] = None):
        self.errors = dict(errors or {})
        super().__init__("; ".join(f"{key}: {message}" for key, message in self.errors.items()))


class NotFoundError(DomainError):
    pass


class EditConflictError(DomainError):
    pass


class DeadlineExceededError(DomainError):
    pass


class RepositoryError(DomainError):
    pass
