"""Exception hierarchy raised by services and translated by the routes."""


class MentorMeError(Exception):
    """Base class for all application errors."""


class InvalidArgumentError(MentorMeError, ValueError):
    """Malformed or inconsistent identifiers or entity bodies."""


class EntityNotFoundError(MentorMeError):
    """A referenced entity does not exist."""

    def __init__(self, entity_name: str, entity_id: object) -> None:
        super().__init__(f"{entity_name} with id={entity_id} does not exist")
        self.entity_name = entity_name
        self.entity_id = entity_id


class OperationFailedError(MentorMeError):
    """Persistence or other downstream failure."""


class ConfigurationError(MentorMeError):
    """A required collaborator or setting is missing."""
